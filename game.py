from __future__ import annotations

# Facade module that re-exports Lights Out core functionality.
# The Flask app and tests import from here; single-responsibility modules
# live under lightsout_core/*.

from lightsout_core.grid import Grid, Coord, format_coord, parse_coord
from lightsout_core.config import (
    GridConfig,
    InvalidConfig,
    DEFAULT_CELEBRATION_MS,
    DEFAULT_MAX_DIM,
    celebration_ms,
    default_config,
    max_dim,
)
from lightsout_core.deal import generate
from lightsout_core.moves import (
    IN_PLAY,
    WON,
    neighbors,
    flip_targets,
    flip,
    has_won,
    game_status,
)


def main() -> None:
    # CLI driver delegated to lightsout_core.cli
    from lightsout_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
