from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from .board import Coord
from .deal import DEFAULT_HEIGHT, DEFAULT_PALETTE_SIZE, DEFAULT_WIDTH
from .errors import OutOfBounds
from .moves import has_legal_move, legal_groups
from .palette import COLORS
from .session import GameSession


def parse_point(text: str) -> Optional[Coord]:
    """Parses 'x,y' or 'x y' into a coordinate, or None if it cannot."""
    parts = text.replace(',', ' ').split()
    if len(parts) != 2:
        return None
    try:
        return (int(parts[0]), int(parts[1]))
    except ValueError:
        return None


def positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f'invalid integer: {text!r}')
    if value <= 0:
        raise argparse.ArgumentTypeError(f'must be positive, got {value}')
    return value


def palette_size(text: str) -> int:
    value = positive_int(text)
    if value > len(COLORS):
        raise argparse.ArgumentTypeError(f'at most {len(COLORS)} colors are supported, got {value}')
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='SameGame in the terminal')
    parser.add_argument('--width', type=positive_int, default=DEFAULT_WIDTH, help='Board width in cells')
    parser.add_argument('--height', type=positive_int, default=DEFAULT_HEIGHT, help='Board height in cells')
    parser.add_argument('--colors', type=palette_size, default=DEFAULT_PALETTE_SIZE, help='Number of colors')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for the deal')
    parser.add_argument('--play', action='store_true', help='Play interactively')
    parser.add_argument('--verbose', action='store_true', help='Log move traces')
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S',
    )

    session = GameSession.new(args.width, args.height, args.colors, seed=args.seed)
    print('Initial board:')
    print(session.grid.pretty())

    if not args.play:
        print(f'\nPoppable groups: {len(legal_groups(session.grid))}')
        return

    def prompt_point() -> Optional[Coord]:
        while True:
            try:
                text = input('Enter a cell as x,y or x y (q to quit): ').strip()
            except EOFError:
                return None
            if text.lower() in ('q', 'quit'):
                return None
            point = parse_point(text)
            if point is None:
                print('Could not parse. Try again.')
                continue
            return point

    while True:
        if not has_legal_move(session.grid):
            print('No more groups to pop.')
            break
        point = prompt_point()
        if point is None:
            print('Bye.')
            break
        try:
            outcome = session.click(*point)
        except OutOfBounds as e:
            print(f'{e}. Try again.')
            continue
        if not outcome.changed:
            print('Nothing to pop there.')
            continue
        print(f'Removed {outcome.removed} cells.')
        print(outcome.grid.pretty())
        if outcome.won:
            print('You win!')
            break
        if outcome.lost:
            print('You lose!')
            break
