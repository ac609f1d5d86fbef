from __future__ import annotations

import logging
from typing import Iterable, List, FrozenSet, Sequence, Set

from .board import Cell, Coord, EMPTY, Grid
from .errors import OutOfBounds

log = logging.getLogger(__name__)

# A group must have at least this many cells to be popped.
MIN_GROUP_SIZE = 2

_OFFSETS = ((0, 1), (1, 0), (-1, 0), (0, -1))


def neighbors_in_bounds(x: int, y: int, width: int, height: int) -> Set[Coord]:
    """Gets the orthogonal neighbors of (x, y) that lie inside a width x height grid."""
    result: Set[Coord] = set()
    for dx, dy in _OFFSETS:
        nx, ny = x + dx, y + dy
        if 0 <= nx < width and 0 <= ny < height:
            result.add((nx, ny))
    return result


def find_component(grid: Grid, seed: Coord) -> Set[Coord]:
    """
    Finds every cell 4-connected to `seed` that holds the same value.
    Uses an explicit worklist so large boards never hit the recursion limit.
    """
    sx, sy = seed
    kind = grid.at(sx, sy)
    found: Set[Coord] = set()
    explored: Set[Coord] = set()
    left: List[Coord] = [(sx, sy)]
    while left:
        pt = left.pop()
        if pt in explored:
            continue
        explored.add(pt)
        x, y = pt
        if grid.cells[grid.index(x, y)] != kind:
            continue
        found.add(pt)
        left.extend(neighbors_in_bounds(x, y, grid.width, grid.height))
    return found


def remove_component(grid: Grid, component: Iterable[Coord]) -> Grid:
    """Empties the cells of `component` if it is big enough to pop, otherwise returns `grid` as is."""
    points = set(component)
    if len(points) < MIN_GROUP_SIZE:
        return grid
    cells = list(grid.cells)
    for x, y in points:
        if not grid.in_bounds(x, y):
            raise OutOfBounds(x, y, grid.width, grid.height)
        cells[grid.index(x, y)] = EMPTY
    return Grid(width=grid.width, height=grid.height, cells=tuple(cells))


def _from_columns(grid: Grid, columns: Sequence[Sequence[Cell]]) -> Grid:
    # Columns are top to bottom; rebuild the row-major tuple.
    cells = tuple(columns[x][y] for y in range(grid.height) for x in range(grid.width))
    if cells == grid.cells:
        return grid
    return Grid(width=grid.width, height=grid.height, cells=cells)


def settle_down(grid: Grid) -> Grid:
    """Drops the filled cells of every column to the bottom, keeping their order."""
    columns: List[List[Cell]] = []
    for x in range(grid.width):
        filled = [c for c in grid.column(x) if c is not EMPTY]
        columns.append([EMPTY] * (grid.height - len(filled)) + filled)
    return _from_columns(grid, columns)


def settle_left(grid: Grid) -> Grid:
    """Removes fully empty columns and slides the remaining ones to the left."""
    kept = [grid.column(x) for x in range(grid.width)]
    kept = [col for col in kept if any(c is not EMPTY for c in col)]
    blank = (EMPTY,) * grid.height
    columns = kept + [blank] * (grid.width - len(kept))
    return _from_columns(grid, columns)


def settle(grid: Grid) -> Grid:
    """Applies gravity: vertical settle first, then horizontal settle."""
    return settle_left(settle_down(grid))


def is_settled(grid: Grid) -> bool:
    """True if no cell floats above a gap and no empty column sits left of a filled one."""
    seen_empty_column = False
    for x in range(grid.width):
        col = grid.column(x)
        seen_filled = False
        for cell in col:
            if cell is not EMPTY:
                seen_filled = True
            elif seen_filled:
                return False
        if not seen_filled:
            seen_empty_column = True
        elif seen_empty_column:
            return False
    return True


def play_move(grid: Grid, x: int, y: int) -> Grid:
    """Pops the group at (x, y) if it is legal and settles the board. Empty cells are a no-op."""
    kind = grid.at(x, y)
    log.debug("move at (%d, %d) on %r", x, y, kind)
    if kind is EMPTY:
        return grid
    component = find_component(grid, (x, y))
    removed = remove_component(grid, component)
    if removed is grid:
        log.debug("group at (%d, %d) has a single cell; nothing removed", x, y)
        return grid
    log.debug("removed %d cells of color %r", len(component), kind)
    return settle(removed)


def has_legal_move(grid: Grid) -> bool:
    """Checks whether some filled cell has a same-colored orthogonal neighbor."""
    for x, y in grid.coords():
        cell = grid.cells[grid.index(x, y)]
        if cell is EMPTY:
            continue
        if x + 1 < grid.width and grid.cells[grid.index(x + 1, y)] == cell:
            return True
        if y + 1 < grid.height and grid.cells[grid.index(x, y + 1)] == cell:
            return True
    return False


def legal_groups(grid: Grid) -> List[FrozenSet[Coord]]:
    """Lists every poppable group once, in row-major order of its first cell."""
    seen: Set[Coord] = set()
    groups: List[FrozenSet[Coord]] = []
    for pt in grid.coords():
        if pt in seen or grid.at(*pt) is EMPTY:
            continue
        component = find_component(grid, pt)
        seen.update(component)
        if len(component) >= MIN_GROUP_SIZE:
            groups.append(frozenset(component))
    return groups
