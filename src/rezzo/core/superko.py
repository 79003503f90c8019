"""Superko guard: append-only history of position signatures."""

from __future__ import annotations

from rezzo.core.board import Board
from rezzo.core.enums import Side


class SuperkoGuard:
    """Remembers every committed ``(board, next mover)`` signature of a game.

    Signatures are only ever added. A move whose resulting signature is
    already known would repeat an earlier game state and must be rejected.
    """

    __slots__ = ("_seen",)

    def __init__(self) -> None:
        self._seen: set[int] = set()

    @staticmethod
    def signature(board: Board, side_to_move: Side) -> int:
        """Signature of *board* with *side_to_move* next."""
        return board.keys.signature(board.occupancy_key, side_to_move)

    def is_repetition(self, board: Board, side_to_move: Side) -> bool:
        return self.signature(board, side_to_move) in self._seen

    def record(self, board: Board, side_to_move: Side) -> int:
        """Add the signature of *board* / *side_to_move* and return it."""
        key = self.signature(board, side_to_move)
        self._seen.add(key)
        return key

    def __contains__(self, key: object) -> bool:
        return key in self._seen

    def __len__(self) -> int:
        return len(self._seen)
