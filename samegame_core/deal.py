from __future__ import annotations

import random
from typing import Optional

from .board import Grid
from .errors import InvalidDimensions

DEFAULT_WIDTH = 20
DEFAULT_HEIGHT = 10
DEFAULT_PALETTE_SIZE = 3


def random_fill(
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    palette_size: int = DEFAULT_PALETTE_SIZE,
    seed: Optional[int] = None,
) -> Grid:
    """Deals a board where every cell gets a uniformly random color in [0, palette_size)."""
    if palette_size <= 0:
        raise InvalidDimensions(f"palette size must be positive, got {palette_size}", width=width, height=height)
    rng = random.Random(seed)
    cells = tuple(rng.randrange(palette_size) for _ in range(max(width, 0) * max(height, 0)))
    return Grid(width=width, height=height, cells=cells)
