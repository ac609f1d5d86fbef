from __future__ import annotations

# Facade module that re-exports the SameGame core.
# Used by the Flask app and the tests; the rules live under samegame_core/*.

# Prefer relative imports when loaded as part of a package, then the top-level package.
try:
    from .samegame_core.errors import SameGameError, InvalidDimensions, OutOfBounds  # type: ignore
    from .samegame_core.board import Cell, Coord, EMPTY, Grid, create_grid  # type: ignore
    from .samegame_core.deal import (  # type: ignore
        DEFAULT_WIDTH,
        DEFAULT_HEIGHT,
        DEFAULT_PALETTE_SIZE,
        random_fill,
    )
    from .samegame_core.moves import (  # type: ignore
        MIN_GROUP_SIZE,
        neighbors_in_bounds,
        find_component,
        remove_component,
        settle_down,
        settle_left,
        settle,
        is_settled,
        play_move,
        has_legal_move,
        legal_groups,
    )
    from .samegame_core.rules import is_won, is_lost  # type: ignore
    from .samegame_core.palette import (  # type: ignore
        COLORS,
        BLANK_COLOR,
        CELL_SIZE,
        color_for,
        screen_to_point,
        point_to_screen_rect,
        preferred_size,
    )
    from .samegame_core.session import GameSession, MoveOutcome  # type: ignore
except ImportError:
    from samegame_core.errors import SameGameError, InvalidDimensions, OutOfBounds  # type: ignore
    from samegame_core.board import Cell, Coord, EMPTY, Grid, create_grid  # type: ignore
    from samegame_core.deal import (  # type: ignore
        DEFAULT_WIDTH,
        DEFAULT_HEIGHT,
        DEFAULT_PALETTE_SIZE,
        random_fill,
    )
    from samegame_core.moves import (  # type: ignore
        MIN_GROUP_SIZE,
        neighbors_in_bounds,
        find_component,
        remove_component,
        settle_down,
        settle_left,
        settle,
        is_settled,
        play_move,
        has_legal_move,
        legal_groups,
    )
    from samegame_core.rules import is_won, is_lost  # type: ignore
    from samegame_core.palette import (  # type: ignore
        COLORS,
        BLANK_COLOR,
        CELL_SIZE,
        color_for,
        screen_to_point,
        point_to_screen_rect,
        preferred_size,
    )
    from samegame_core.session import GameSession, MoveOutcome  # type: ignore


def width(grid: Grid) -> int:
    return grid.width


def height(grid: Grid) -> int:
    return grid.height


def at(grid: Grid, x: int, y: int) -> Cell:
    return grid.at(x, y)


def main() -> None:
    # CLI driver delegated to samegame_core.cli
    try:
        from .samegame_core.cli import main as _main  # type: ignore
    except ImportError:
        from samegame_core.cli import main as _main  # type: ignore
    _main()


if __name__ == '__main__':
    main()
