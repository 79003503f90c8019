"""Abstract interfaces and result types for the game layer.

Hosts (session registries, network adapters, UIs) depend on
:class:`IGameController` and the value types here, never on the concrete
controller.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import IntEnum, StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rezzo.core.types import Cell
    from rezzo.game.state import GameSnapshot


# ── Turn phase FSM states ────────────────────────────────────────────────────


class TurnPhase(IntEnum):
    """Intra-turn state: how many single moves the side to move has made."""

    FIRST = 0  # nothing played yet this turn
    SECOND = 1  # one single move played, a second one is owed


# ── Results ──────────────────────────────────────────────────────────────────


class RejectReason(StrEnum):
    """Why an intent was refused. The game state is untouched in every case."""

    INVALID_MOVE = "InvalidMove"
    PHASE_VIOLATION = "PhaseViolation"
    DOUBLE_GOAL_VIOLATION = "DoubleGoalViolation"
    REPETITION_VIOLATION = "RepetitionViolation"
    GAME_OVER = "GameOver"

    @property
    def message(self) -> str:
        """Player-facing explanation."""
        return _REJECT_MESSAGES[self]


_REJECT_MESSAGES: dict[RejectReason, str] = {
    RejectReason.INVALID_MOVE: "Invalid move",
    RejectReason.PHASE_VIOLATION: "Move not allowed in this phase of the turn",
    RejectReason.DOUBLE_GOAL_VIOLATION: "Cannot move two pieces to the last row in one turn",
    RejectReason.REPETITION_VIOLATION: "Move would repeat an earlier position (super ko)",
    RejectReason.GAME_OVER: "The game is over",
}


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Outcome of :meth:`IGameController.process_intent`."""

    success: bool
    reason: RejectReason | None = None
    highlights: tuple[Cell, ...] = field(default_factory=tuple)
    turn_ended: bool = False

    @classmethod
    def ok(cls, highlights: tuple[Cell, ...], *, turn_ended: bool) -> MoveResult:
        return cls(True, None, highlights, turn_ended)

    @classmethod
    def rejected(cls, reason: RejectReason) -> MoveResult:
        return cls(False, reason)

    def __bool__(self) -> bool:
        return self.success


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGameController(ABC):
    """Interface for the move executor of one game."""

    @abstractmethod
    def new_game(self, size: int | None = None) -> None:
        """Set up a new game on a fresh board."""

    @abstractmethod
    def process_intent(self, from_cell: Cell, to_cell: Cell) -> MoveResult:
        """Try to move from *from_cell* to *to_cell* for the side to move."""

    @abstractmethod
    def snapshot(self) -> GameSnapshot:
        """Immutable view of the current game for broadcasting."""
