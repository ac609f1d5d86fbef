from __future__ import annotations

from typing import Tuple

from .board import Cell, Coord, EMPTY, Grid

RGB = Tuple[int, int, int]

# Indexed by color id.
COLORS: Tuple[RGB, ...] = ((255, 0, 0), (0, 255, 0), (0, 0, 255))
BLANK_COLOR: RGB = (0, 0, 0)
CELL_SIZE = 20


def color_for(cell: Cell) -> RGB:
    """Maps a cell to the color a renderer should paint it with."""
    if cell is EMPTY:
        return BLANK_COLOR
    if not 0 <= cell < len(COLORS):
        raise ValueError(f"no renderer color for id {cell!r}; palette has {len(COLORS)} colors")
    return COLORS[cell]


def screen_to_point(px: int, py: int, cell_size: int = CELL_SIZE) -> Coord:
    """Converts a pixel position to the grid cell under it."""
    return (int(px // cell_size), int(py // cell_size))


def point_to_screen_rect(x: int, y: int, cell_size: int = CELL_SIZE) -> Tuple[int, int, int, int]:
    """Pixel rectangle (left, top, width, height) covered by cell (x, y)."""
    return (x * cell_size, y * cell_size, cell_size, cell_size)


def preferred_size(grid: Grid, cell_size: int = CELL_SIZE) -> Tuple[int, int]:
    return (grid.width * cell_size, grid.height * cell_size)
