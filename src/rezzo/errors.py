"""Rezzo error hierarchy.

Rule violations during play are not exceptions: ``process_intent`` returns a
:class:`~rezzo.game.interfaces.MoveResult` carrying a
:class:`~rezzo.game.interfaces.RejectReason`. The exceptions below cover
misuse of the host-facing layers (configuration, game registry, seating).

Usage::

    from rezzo.errors import NotYourTurnError

    try:
        session.submit(identity, from_cell, to_cell)
    except NotYourTurnError as e:
        logger.warning("Rejected submission: %s", e)
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "ConfigurationError",
    "GameFinishedError",
    "GameNotFoundError",
    "NotYourTurnError",
    "RezzoError",
    "SeatError",
    "SpectatorMoveError",
]


class RezzoError(Exception):
    """Base exception for all Rezzo errors.

    Attributes:
        code: Machine-readable error code for categorization
        message: Human-readable error description
        context: Additional context for debugging
    """

    code: str = "REZZO_ERROR"

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if code:
            self.code = code
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"[{self.code}] {self.message} ({ctx})"
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context,
        }


class ConfigurationError(RezzoError):
    """Settings could not be parsed or are out of range."""

    code: str = "CONFIGURATION_ERROR"


class GameNotFoundError(RezzoError):
    """No live game is registered under the requested id."""

    code: str = "GAME_NOT_FOUND"


class GameFinishedError(RezzoError):
    """A move was submitted to a game that has already ended."""

    code: str = "GAME_FINISHED"


class SeatError(RezzoError):
    """The submitting identity may not move right now."""

    code: str = "SEAT_ERROR"


class SpectatorMoveError(SeatError):
    """Spectators (and unknown identities) cannot play."""

    code: str = "SPECTATOR_MOVE"


class NotYourTurnError(SeatError):
    """A seated player tried to move while the other side is to move."""

    code: str = "NOT_YOUR_TURN"
