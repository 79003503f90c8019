"""Qt bridge that re-emits session events as signals for UI consumers."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from rezzo.core.enums import GameResult
from rezzo.core.move import Move
from rezzo.core.types import Cell
from rezzo.errors import RezzoError
from rezzo.game.interfaces import MoveResult, RejectReason
from rezzo.game.session import GameSession
from rezzo.game.state import GameState


class SessionRelay(QObject):
    """Thread-affine relay between one :class:`GameSession` and Qt widgets.

    ``board_updated`` carries ``GameSnapshot.to_dict()`` after every
    committed move (and on :meth:`resend`), ``move_rejected`` carries an error
    code and a player-facing message, ``game_over`` the ``GameResult`` value.
    """

    board_updated = pyqtSignal(object)
    move_rejected = pyqtSignal(str, str)
    game_over = pyqtSignal(int)

    def __init__(self, session: GameSession, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._session = session
        events = session.controller.events
        events.on_move.append(self._on_move)
        events.on_rejected.append(self._on_rejected)
        events.on_game_over.append(self._on_game_over)

    @property
    def session(self) -> GameSession:
        return self._session

    @pyqtSlot(str, object, object)
    def submit(self, identity: str, from_cell: Cell, to_cell: Cell) -> None:
        """Submit an intent; refusals are reported through ``move_rejected``."""
        try:
            self._session.submit(identity, from_cell, to_cell)
        except RezzoError as exc:
            self.move_rejected.emit(exc.code, exc.message)

    @pyqtSlot()
    def resend(self) -> None:
        """Emit the full current state again, e.g. after a view reconnects."""
        self.board_updated.emit(self._session.snapshot().to_dict())

    def detach(self) -> None:
        """Stop listening to the session."""
        events = self._session.controller.events
        for callbacks, cb in (
            (events.on_move, self._on_move),
            (events.on_rejected, self._on_rejected),
            (events.on_game_over, self._on_game_over),
        ):
            if cb in callbacks:
                callbacks.remove(cb)

    # -- Controller callbacks -------------------------------------------------

    def _on_move(self, _move: Move, _result: MoveResult, state: GameState) -> None:
        self.board_updated.emit(state.snapshot().to_dict())

    def _on_rejected(self, _from: Cell, _to: Cell, reason: RejectReason) -> None:
        self.move_rejected.emit(reason.value, reason.message)

    def _on_game_over(self, result: GameResult) -> None:
        self.game_over.emit(int(result))
