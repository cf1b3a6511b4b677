from __future__ import annotations

from typing import List

from .grid import Coord, Grid

WON = "won"
IN_PLAY = "in_play"


def neighbors(grid: Grid, coord: Coord) -> List[Coord]:
    """Gets the in-bounds orthogonal neighbors of a coordinate (up, down, left, right)."""
    r, c = coord
    candidates = [(r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)]
    return [(nr, nc) for (nr, nc) in candidates if grid.in_bounds(nr, nc)]


def flip_targets(grid: Grid, coord: Coord) -> List[Coord]:
    """The cells a click on coord toggles: the cell itself plus its neighbors."""
    return [coord] + neighbors(grid, coord)


def flip(grid: Grid, row: int, col: int) -> Grid:
    """
    Returns a new grid with (row, col) and its orthogonal neighbors toggled.
    Neighbors that fall off the edge are skipped. The input grid is left untouched.
    """
    if not grid.in_bounds(row, col):
        raise IndexError(f"({row}, {col}) is outside a {grid.nrows}x{grid.ncols} grid")
    targets = set(flip_targets(grid, (row, col)))
    rows = tuple(
        tuple((not cell) if (r, c) in targets else cell for c, cell in enumerate(line))
        for r, line in enumerate(grid.rows)
    )
    return Grid(rows=rows)


def has_won(grid: Grid) -> bool:
    """True when every light is off."""
    return all(not cell for row in grid.rows for cell in row)


def game_status(grid: Grid) -> str:
    return WON if has_won(grid) else IN_PLAY
