"""
SameGame core Python package.

This package contains the board data structure and the pure rules helpers
used by the CLI, the Flask app and the tests.
Modules:
- errors.py: InvalidDimensions, OutOfBounds
- board.py: Grid, Cell, Coord, create_grid
- deal.py: random_fill
- moves.py: flood fill, removal, settling, play_move
- rules.py: is_won, is_lost
- palette.py: renderer colors and pixel/grid conversion
- session.py: GameSession (current grid holder)
"""
