from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Optional

from .board import Grid
from .deal import DEFAULT_HEIGHT, DEFAULT_PALETTE_SIZE, DEFAULT_WIDTH, random_fill
from .moves import play_move
from .palette import CELL_SIZE, screen_to_point
from .rules import is_lost, is_won

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveOutcome:
    """Result of one click: the new board and what happened to it."""
    grid: Grid
    changed: bool
    removed: int  # number of cells cleared by the move
    won: bool
    lost: bool


class GameSession:
    """Holds the current grid and replaces it atomically after each move."""

    def __init__(self, grid: Grid) -> None:
        self._grid = grid
        self._lock = threading.Lock()

    @classmethod
    def new(
        cls,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        palette_size: int = DEFAULT_PALETTE_SIZE,
        seed: Optional[int] = None,
    ) -> 'GameSession':
        return cls(random_fill(width, height, palette_size, seed=seed))

    @property
    def grid(self) -> Grid:
        return self._grid

    def click(self, x: int, y: int) -> MoveOutcome:
        # Read, play and store under one lock so readers only ever see whole moves.
        with self._lock:
            before = self._grid
            after = play_move(before, x, y)
            self._grid = after
        removed = before.filled_count() - after.filled_count()
        outcome = MoveOutcome(
            grid=after,
            changed=after is not before,
            removed=removed,
            won=is_won(after),
            lost=is_lost(after),
        )
        if outcome.won:
            log.info("board cleared")
        return outcome

    def click_pixel(self, px: int, py: int, cell_size: int = CELL_SIZE) -> MoveOutcome:
        x, y = screen_to_point(px, py, cell_size)
        return self.click(x, y)
