from __future__ import annotations

import argparse
from typing import List, Optional

from .config import DEFAULT_CHANCE, DEFAULT_NCOLS, DEFAULT_NROWS, GridConfig, InvalidConfig
from .deal import generate
from .grid import Coord, Grid, parse_coord
from .moves import flip, has_won


def _parse_move(text: str) -> Coord:
    """Accepts 'r c', 'r,c' or the UI's 'r-c' form."""
    if '-' in text:
        return parse_coord(text)
    sep = ',' if ',' in text else ' '
    r_s, c_s = [t for t in text.split(sep) if t != '']
    return int(r_s), int(c_s)


def _show(grid: Grid) -> None:
    header = '   ' + ' '.join(str(c % 10) for c in range(grid.ncols))
    print(header)
    for r, line in enumerate(grid.pretty().splitlines()):
        print(f'{r:>2} {line}')


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description='Lights Out in the terminal')
    parser.add_argument('--rows', type=int, default=DEFAULT_NROWS, help='Number of rows')
    parser.add_argument('--cols', type=int, default=DEFAULT_NCOLS, help='Number of columns')
    parser.add_argument('--chance', type=float, default=DEFAULT_CHANCE, help='Chance a light starts on (0..1)')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for the first deal')
    args = parser.parse_args(argv)

    config = GridConfig(nrows=args.rows, ncols=args.cols, chance_light_starts_on=args.chance)
    try:
        grid = generate(config, seed=args.seed)
    except InvalidConfig as e:
        parser.error(str(e))

    print("Turn all the lights off. Enter a cell as 'r c', 'n' for a new game, 'q' to quit.")
    while True:
        _show(grid)
        if has_won(grid):
            print('You Won!')
        try:
            text = input('> ').strip().lower()
        except EOFError:
            return
        if text in ('q', 'quit'):
            return
        if text in ('n', 'new'):
            grid = generate(config)
            continue
        try:
            r, c = _parse_move(text)
        except ValueError:
            print('Could not parse. Try again.')
            continue
        if not grid.in_bounds(r, c):
            print('That cell is not on the board.')
            continue
        grid = flip(grid, r, c)
