"""
Lights Out core Python package.

Pure board logic shared by the Flask app, the terminal front-end and tests.
Modules:
- grid.py: Grid, Coord, coordinate string helpers
- config.py: GridConfig, InvalidConfig, environment defaults
- deal.py: generate
- moves.py: neighbors, flip, has_won
"""
