"""Transport-free session layer: seats, turn enforcement and a game registry.

A network adapter maps its connections to identities (any hashable string)
and calls into :class:`GameStore` / :class:`GameSession`. Nothing here knows
about sockets or rooms; fan-out happens through the controller's
:class:`~rezzo.game.controller.GameEvents`.
"""

from __future__ import annotations

import logging
import secrets
import string
from collections.abc import Iterator
from enum import IntEnum

from rezzo.config import GameSettings
from rezzo.core.enums import Side
from rezzo.core.types import Cell
from rezzo.errors import (
    GameFinishedError,
    GameNotFoundError,
    NotYourTurnError,
    SpectatorMoveError,
)
from rezzo.game.controller import GameController
from rezzo.game.interfaces import MoveResult
from rezzo.game.state import GameSnapshot

logger = logging.getLogger(__name__)

_ID_ALPHABET = string.ascii_uppercase + string.digits


class Seat(IntEnum):
    """Role of an identity in a session. Values match :class:`Side`."""

    SPECTATOR = 0
    RED = 1
    BLUE = 2

    @property
    def side(self) -> Side | None:
        return None if self is Seat.SPECTATOR else Side(int(self))


class GameSession:
    """One live game plus the identities watching or playing it.

    The creator sits as RED, the next new identity as BLUE, everybody after
    that spectates. Rejoining identities keep their seat.
    """

    __slots__ = ("game_id", "controller", "_seats")

    def __init__(self, game_id: str, controller: GameController) -> None:
        self.game_id = game_id
        self.controller = controller
        self._seats: dict[str, Seat] = {}

    # ── Seating ──────────────────────────────────────────────────────────

    def join(self, identity: str) -> Seat:
        """Seat *identity* (idempotent) and return its seat."""
        seat = self._seats.get(identity)
        if seat is not None:
            logger.info("Game %s: %s rejoined as %s", self.game_id, identity, seat.name)
            return seat

        taken = set(self._seats.values())
        if Seat.RED not in taken:
            seat = Seat.RED
        elif Seat.BLUE not in taken:
            seat = Seat.BLUE
        else:
            seat = Seat.SPECTATOR
        self._seats[identity] = seat
        logger.info("Game %s: %s joined as %s", self.game_id, identity, seat.name)
        return seat

    def seat_of(self, identity: str) -> Seat | None:
        return self._seats.get(identity)

    @property
    def is_full(self) -> bool:
        """Both sides are taken."""
        taken = set(self._seats.values())
        return Seat.RED in taken and Seat.BLUE in taken

    @property
    def identities(self) -> list[str]:
        return list(self._seats)

    # ── Play ─────────────────────────────────────────────────────────────

    def submit(self, identity: str, from_cell: Cell, to_cell: Cell) -> MoveResult:
        """Forward an intent from *identity* to the controller.

        Raises:
            SpectatorMoveError: *identity* has no side in this game.
            GameFinishedError: the game already has a winner.
            NotYourTurnError: the other side is to move.
        """
        seat = self._seats.get(identity)
        side = seat.side if seat is not None else None
        if side is None:
            logger.warning("Game %s: move from non-player %s ignored", self.game_id, identity)
            raise SpectatorMoveError(
                "Spectators cannot play",
                context={"game_id": self.game_id, "identity": identity},
            )

        state = self.controller.state
        if state.is_game_over:
            raise GameFinishedError("The game is over", context={"game_id": self.game_id})
        if state.side_to_move is not side:
            logger.warning(
                "Game %s: %s tried to move on %s's turn", self.game_id, side, state.side_to_move
            )
            raise NotYourTurnError(
                "Not your turn",
                context={"game_id": self.game_id, "side": str(side)},
            )
        return self.controller.process_intent(from_cell, to_cell)

    def snapshot(self) -> GameSnapshot:
        """Full current state, e.g. for an identity that reconnects."""
        return self.controller.snapshot()


class GameStore:
    """Registry of live sessions keyed by game id.

    Lives as long as the hosting process; nothing is persisted.
    """

    __slots__ = ("_settings", "_sessions")

    def __init__(self, settings: GameSettings | None = None) -> None:
        self._settings = settings or GameSettings()
        self._sessions: dict[str, GameSession] = {}

    def create(self, creator: str, size: int | None = None) -> GameSession:
        """Start a new game with *creator* seated as RED."""
        game_id = self._new_id()
        controller = GameController.create(size, self._settings)
        session = GameSession(game_id, controller)
        self._sessions[game_id] = session
        session.join(creator)
        logger.info("Game %s created (%dx%d)", game_id, controller.state.size, controller.state.size)
        return session

    def get(self, game_id: str) -> GameSession:
        try:
            return self._sessions[game_id]
        except KeyError:
            raise GameNotFoundError("Game not found", context={"game_id": game_id}) from None

    def remove(self, game_id: str) -> GameSession:
        """Forget *game_id* and return its session."""
        session = self.get(game_id)
        del self._sessions[game_id]
        logger.info("Game %s removed", game_id)
        return session

    def _new_id(self) -> str:
        length = self._settings.game_id_length
        while True:
            game_id = "".join(secrets.choice(_ID_ALPHABET) for _ in range(length))
            if game_id not in self._sessions:
                return game_id

    def __contains__(self, game_id: object) -> bool:
        return game_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)

    def __iter__(self) -> Iterator[GameSession]:
        return iter(list(self._sessions.values()))
