"""GameController - the move executor of a Rezzo game.

Coordinates: GameState, MoveGenerator, Rules, SuperkoGuard.
Emits events via simple callbacks so sessions / UIs / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from rezzo.config import GameSettings
from rezzo.core.board import Board
from rezzo.core.enums import GameResult, Side
from rezzo.core.move import Move, SingleMove
from rezzo.core.move_generator import MoveGenerator
from rezzo.core.notation import cell_name
from rezzo.core.rules import Rules
from rezzo.core.types import Cell
from rezzo.core.zobrist import keys_for
from rezzo.game.interfaces import IGameController, MoveResult, RejectReason, TurnPhase
from rezzo.game.state import GameSnapshot, GameState, TurnTransition

logger = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, MoveResult, GameState], None]
RejectedCallback = Callable[[Cell, Cell, RejectReason], None]
TurnCallback = Callable[[Side], None]  # side now to move
GameOverCallback = Callable[[GameResult], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_rejected: list[RejectedCallback] = field(default_factory=list)
    on_turn_changed: list[TurnCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


def _is_cell(value: object) -> bool:
    return (
        isinstance(value, tuple)
        and len(value) == 2
        and all(isinstance(v, int) and not isinstance(v, bool) for v in value)
    )


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Validates and applies intents for one game, then notifies listeners.

    Every intent is resolved on a clone of the board. The clone only replaces
    the live board once the move passed the turn rules and the superko guard,
    so a rejected intent leaves board, history and turn state untouched.

    Thread-safety: not thread-safe. The host must serialise calls per game.
    """

    __slots__ = ("_settings", "_state", "events")

    def __init__(self, settings: GameSettings | None = None) -> None:
        self._settings = settings or GameSettings()
        self._state = GameState()
        self.events = GameEvents()
        self.new_game()

    @classmethod
    def create(cls, size: int | None = None, settings: GameSettings | None = None) -> GameController:
        """New controller with a fresh game of *size* (settings default otherwise)."""
        ctrl = cls(settings)
        if size is not None and size != ctrl.state.size:
            ctrl.new_game(size)
        return ctrl

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def settings(self) -> GameSettings:
        return self._settings

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(
        self,
        size: int | None = None,
        *,
        board: Board | None = None,
        side_to_move: Side = Side.RED,
    ) -> None:
        if board is not None:
            size = board.size
        elif size is None:
            size = self._settings.board_size
        keys = keys_for(size, self._settings.zobrist_seed)
        self._state = GameState()
        self._state.setup(size, keys, board=board, side_to_move=side_to_move)
        logger.debug(
            "New %dx%d game, %s to move, signature %#018x",
            self._state.size,
            self._state.size,
            side_to_move,
            self._state.signature,
        )

    def process_intent(self, from_cell: Cell, to_cell: Cell) -> MoveResult:
        state = self._state
        if state.is_game_over:
            return self._reject(from_cell, to_cell, RejectReason.GAME_OVER)

        board = state.board
        if not (
            _is_cell(from_cell)
            and _is_cell(to_cell)
            and board.in_bounds(from_cell)
            and board.in_bounds(to_cell)
        ):
            return self._reject(from_cell, to_cell, RejectReason.INVALID_MOVE)
        if board[from_cell] is not state.side_to_move:
            return self._reject(from_cell, to_cell, RejectReason.INVALID_MOVE)

        gen = MoveGenerator(board)
        if to_cell in gen.single_destinations(from_cell):
            if state.phase == TurnPhase.SECOND and from_cell == state.first_moved:
                return self._reject(from_cell, to_cell, RejectReason.PHASE_VIOLATION)
            return self._execute(SingleMove(from_cell, to_cell))

        train = next((m for m in state.train_moves_from(from_cell) if m.dest == to_cell), None)
        if train is None:
            return self._reject(from_cell, to_cell, RejectReason.INVALID_MOVE)
        if state.phase != TurnPhase.FIRST:
            return self._reject(from_cell, to_cell, RejectReason.PHASE_VIOLATION)
        return self._execute(train)

    def snapshot(self) -> GameSnapshot:
        return self._state.snapshot()

    # ── Queries for hosts ────────────────────────────────────────────────

    def legal_moves(self, from_cell: Cell) -> list[Move]:
        """Moves the side to move may start from *from_cell* right now.

        Moves that the superko guard or the double-goal rule would refuse
        are still listed; they are only known to fail once tried.
        """
        state = self._state
        board = state.board
        if state.is_game_over or not board.in_bounds(from_cell):
            return []
        if board[from_cell] is not state.side_to_move:
            return []
        if state.phase == TurnPhase.SECOND and from_cell == state.first_moved:
            return []

        moves: list[Move] = list(MoveGenerator(board).single_moves(from_cell))
        if state.trains_allowed:
            moves.extend(state.train_moves_from(from_cell))
        return moves

    # ── Internal helpers ─────────────────────────────────────────────────

    def _execute(self, move: Move) -> MoveResult:
        state = self._state
        origin = move.origin
        dest = move.to_cell if isinstance(move, SingleMove) else move.dest

        working = state.board.copy()
        Rules.apply_move(working, move)

        decision = state.transition_for(move, working)
        if isinstance(decision, RejectReason):
            return self._reject(origin, dest, decision)

        if state.history.is_repetition(working, decision.next_side):
            return self._reject(origin, dest, RejectReason.REPETITION_VIOLATION)

        mover = state.side_to_move
        state.commit(move, working, decision)
        result = MoveResult.ok(move.highlights, turn_ended=decision.ends_turn)
        self._log_commit(move, mover, decision)

        self._emit_move(move, result)
        if decision.ends_turn:
            self._emit_turn_changed(state.side_to_move)
        if state.is_game_over:
            logger.info("Game over after ply %d: %s", state.ply_count, state.result.name)
            self._emit_game_over(state.result)
        return result

    def _reject(self, from_cell: Cell, to_cell: Cell, reason: RejectReason) -> MoveResult:
        logger.debug("Rejected %r -> %r: %s", from_cell, to_cell, reason)
        for cb in self.events.on_rejected:
            cb(from_cell, to_cell, reason)
        return MoveResult.rejected(reason)

    def _log_commit(self, move: Move, mover: Side, decision: TurnTransition) -> None:
        if not logger.isEnabledFor(logging.DEBUG):
            return
        kind = "single" if isinstance(move, SingleMove) else "train"
        a, b = move.highlights
        logger.debug(
            "%s %s %s-%s (ply %d, %s)",
            mover,
            kind,
            cell_name(a),
            cell_name(b),
            self._state.ply_count,
            "turn ends" if decision.ends_turn else "second move owed",
        )

    def _emit_move(self, move: Move, result: MoveResult) -> None:
        for cb in self.events.on_move:
            cb(move, result, self._state)

    def _emit_turn_changed(self, side: Side) -> None:
        for cb in self.events.on_turn_changed:
            cb(side)

    def _emit_game_over(self, result: GameResult) -> None:
        for cb in self.events.on_game_over:
            cb(result)
