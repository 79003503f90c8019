"""Core domain layer - pure Rezzo rules with zero external dependencies.

Quick start::

    from rezzo.core import Board, MoveGenerator, Side

    board = Board.initial(13)
    gen = MoveGenerator(board)
    print(gen.single_destinations((1, 6)))
"""

from rezzo.core.board import Board
from rezzo.core.enums import AlignmentKind, GameResult, Side
from rezzo.core.move import Alignment, Move, SingleMove, TrainMove
from rezzo.core.move_generator import MoveGenerator
from rezzo.core.notation import (
    board_from_diagram,
    board_to_diagram,
    cell_name,
    parse_cell,
)
from rezzo.core.rules import Rules
from rezzo.core.superko import SuperkoGuard
from rezzo.core.types import (
    DEFAULT_BOARD_SIZE,
    MAX_BOARD_SIZE,
    MIN_BOARD_SIZE,
    Axis,
    Cell,
)
from rezzo.core.zobrist import ZobristKeys, keys_for

__all__ = [
    # Enums
    "AlignmentKind",
    "GameResult",
    "Side",
    # Types / constants
    "Axis",
    "Cell",
    "DEFAULT_BOARD_SIZE",
    "MAX_BOARD_SIZE",
    "MIN_BOARD_SIZE",
    # Domain objects
    "Alignment",
    "Board",
    "Move",
    "MoveGenerator",
    "Rules",
    "SingleMove",
    "SuperkoGuard",
    "TrainMove",
    "ZobristKeys",
    "keys_for",
    # Notation
    "board_from_diagram",
    "board_to_diagram",
    "cell_name",
    "parse_cell",
]
