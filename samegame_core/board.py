from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from .errors import InvalidDimensions, OutOfBounds

Cell = Optional[int]  # None for an empty cell, otherwise a color id
Coord = Tuple[int, int]  # (x, y): x is the column, y the row from the top

EMPTY: Cell = None

_GLYPHS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"


@dataclass(frozen=True)
class Grid:
    """An immutable width x height board of cells."""
    width: int
    height: int
    cells: Tuple[Cell, ...]  # row-major, length == width * height

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise InvalidDimensions(
                f"grid dimensions must be positive, got {self.width}x{self.height}",
                width=self.width, height=self.height,
            )
        if len(self.cells) != self.width * self.height:
            raise InvalidDimensions(
                f"expected {self.width * self.height} cells for a {self.width}x{self.height} grid, "
                f"got {len(self.cells)}",
                width=self.width, height=self.height,
            )

    def index(self, x: int, y: int) -> int:
        """Calculates the 1D index for a given column and row."""
        return y * self.width + x

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def at(self, x: int, y: int) -> Cell:
        """Gets the cell at column x, row y."""
        if not self.in_bounds(x, y):
            raise OutOfBounds(x, y, self.width, self.height)
        return self.cells[self.index(x, y)]

    def coords(self) -> Iterable[Coord]:
        """Iterates over all coordinates on the board, row by row."""
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)

    def rows(self) -> Iterator[Tuple[Cell, ...]]:
        for y in range(self.height):
            start = y * self.width
            yield self.cells[start:start + self.width]

    def column(self, x: int) -> Tuple[Cell, ...]:
        """Cells of column x from top to bottom."""
        if not 0 <= x < self.width:
            raise OutOfBounds(x, 0, self.width, self.height)
        return self.cells[x::self.width]

    def to_rows(self) -> List[List[Cell]]:
        return [list(r) for r in self.rows()]

    def filled_count(self) -> int:
        return sum(1 for cell in self.cells if cell is not EMPTY)

    def pretty(self, highlight: Optional[Iterable[Coord]] = None) -> str:
        """Generates a human-readable string representation of the board."""
        marked = set(highlight or ())
        lines: List[str] = []
        for y, row in enumerate(self.rows()):
            out: List[str] = []
            for x, cell in enumerate(row):
                if cell is EMPTY:
                    out.append(".")
                elif (x, y) in marked:
                    out.append("*")
                elif 0 <= cell < len(_GLYPHS):
                    out.append(_GLYPHS[cell])
                else:
                    raise ValueError(f"no glyph for color id {cell!r}")
            lines.append(" ".join(out))
        return "\n".join(lines)


def create_grid(width: int, height: int, rows: Optional[Sequence[Sequence[Cell]]] = None) -> Grid:
    """Builds a grid from `height` rows of `width` cells, or an empty grid when rows is omitted."""
    if rows is None:
        return Grid(width=width, height=height, cells=(EMPTY,) * (max(width, 0) * max(height, 0)))
    if len(rows) != height:
        raise InvalidDimensions(f"expected {height} rows, got {len(rows)}", width=width, height=height)
    flat: List[Cell] = []
    for y, row in enumerate(rows):
        if len(row) != width:
            raise InvalidDimensions(
                f"row {y} has {len(row)} cells, expected {width}", width=width, height=height,
            )
        flat.extend(row)
    return Grid(width=width, height=height, cells=tuple(flat))
