from __future__ import annotations

from typing import Optional


class SameGameError(Exception):
    """Base class for errors raised by the rules engine."""


class InvalidDimensions(SameGameError, ValueError):
    """Raised when a grid is built from cells that do not fill width x height."""

    def __init__(self, message: str, *, width: Optional[int] = None, height: Optional[int] = None) -> None:
        super().__init__(message)
        self.width = width
        self.height = height


class OutOfBounds(SameGameError, IndexError):
    """Raised when a coordinate lies outside [0, width) x [0, height)."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(f"({x}, {y}) is outside a {width}x{height} grid")
        self.x = x
        self.y = y
        self.width = width
        self.height = height
