from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Sequence, Tuple

Coord = Tuple[int, int]
Row = Tuple[bool, ...]


def format_coord(coord: Coord) -> str:
    """Renders a coordinate as the "row-col" key used by the browser UI."""
    r, c = coord
    return f"{int(r)}-{int(c)}"


def parse_coord(key: str) -> Coord:
    """Parses a "row-col" key back into a coordinate."""
    parts = str(key).strip().split("-")
    if len(parts) != 2 or not all(p.isdigit() for p in parts):
        raise ValueError(f"bad coordinate: {key!r}")
    return int(parts[0]), int(parts[1])


@dataclass(frozen=True)
class Grid:
    """The 2D playfield. Each cell is True when lit, False when unlit."""
    rows: Tuple[Row, ...]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Any]]) -> 'Grid':
        """Builds a grid from nested sequences, checking it is non-empty and rectangular."""
        if not isinstance(rows, (list, tuple)) or not rows:
            raise ValueError("grid must be a non-empty list of rows")
        out: List[Row] = []
        width = None
        for row in rows:
            if not isinstance(row, (list, tuple)) or not row:
                raise ValueError("grid rows must be non-empty lists")
            if width is None:
                width = len(row)
            elif len(row) != width:
                raise ValueError("grid rows must all have the same length")
            cells: List[bool] = []
            for cell in row:
                if isinstance(cell, bool):
                    cells.append(cell)
                elif isinstance(cell, int) and cell in (0, 1):
                    cells.append(bool(cell))
                else:
                    raise ValueError(f"grid cell must be a boolean, got {cell!r}")
            out.append(tuple(cells))
        return cls(rows=tuple(out))

    @classmethod
    def blank(cls, nrows: int, ncols: int) -> 'Grid':
        return cls(rows=tuple(tuple(False for _ in range(ncols)) for _ in range(nrows)))

    @property
    def nrows(self) -> int:
        return len(self.rows)

    @property
    def ncols(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    def at(self, r: int, c: int) -> bool:
        return self.rows[r][c]

    def in_bounds(self, r: int, c: int) -> bool:
        return 0 <= r < self.nrows and 0 <= c < self.ncols

    def coords(self) -> Iterable[Coord]:
        """Iterates over all coordinates, row-major."""
        for r in range(self.nrows):
            for c in range(self.ncols):
                yield (r, c)

    def lit_count(self) -> int:
        return sum(1 for row in self.rows for cell in row if cell)

    def to_lists(self) -> List[List[bool]]:
        return [list(row) for row in self.rows]

    def pretty(self) -> str:
        """Text rendering: 'O' for a lit cell, '.' for an unlit one."""
        return "\n".join(" ".join("O" if cell else "." for cell in row) for row in self.rows)
