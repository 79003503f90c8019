"""Game state machine - board, turn phases, superko history and result."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from rezzo.core.board import Board
from rezzo.core.enums import GameResult, Side
from rezzo.core.move import Move, SingleMove, TrainMove
from rezzo.core.move_generator import MoveGenerator
from rezzo.core.rules import Rules
from rezzo.core.superko import SuperkoGuard
from rezzo.core.types import DEFAULT_BOARD_SIZE, Cell
from rezzo.core.zobrist import ZobristKeys
from rezzo.game.interfaces import RejectReason, TurnPhase


@dataclass(frozen=True, slots=True)
class TurnTransition:
    """What committing a move does to the turn."""

    ends_turn: bool
    next_side: Side


@dataclass(frozen=True, slots=True)
class GameSnapshot:
    """Read-only picture of a game, shaped for broadcasting to clients."""

    size: int
    board: tuple[tuple[int, ...], ...]
    turn: Side
    phase: TurnPhase
    highlights: tuple[Cell, ...]
    game_over: bool
    winner: Side | None
    ply_count: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "size": self.size,
            "board": [list(row) for row in self.board],
            "turn": int(self.turn),
            "turnPhase": int(self.phase),
            "highlights": [{"r": r, "c": c} for r, c in self.highlights],
            "gameOver": self.game_over,
            "winner": int(self.winner) if self.winner is not None else None,
            "ply": self.ply_count,
        }


@dataclass
class GameState:
    """Manages one game: board, turn phase, superko history and result.

    This is a pure data/logic class - no threading, no I/O. All writes go
    through :meth:`commit`, which the controller only calls for moves that
    passed every rule and the superko guard.
    """

    board: Board = field(init=False)
    side_to_move: Side = field(default=Side.RED, init=False)
    phase: TurnPhase = field(default=TurnPhase.FIRST, init=False)
    first_moved: Cell | None = field(default=None, init=False)
    opening_turn: bool = field(default=True, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    history: SuperkoGuard = field(default_factory=SuperkoGuard, init=False)
    last_highlights: tuple[Cell, ...] = field(default=(), init=False)
    ply_count: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.setup()

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(
        self,
        size: int = DEFAULT_BOARD_SIZE,
        keys: ZobristKeys | None = None,
        *,
        board: Board | None = None,
        side_to_move: Side = Side.RED,
    ) -> None:
        """Initialise (or reset) the game.

        Without *board* the game starts from the standard position with RED
        to play its opening turn. A supplied *board* is taken over as is (its
        size and keys win over *size* / *keys*) and is treated as a game
        already past the opening.
        """
        self.board = board if board is not None else Board.initial(size, keys)
        self.side_to_move = side_to_move
        self.phase = TurnPhase.FIRST
        self.first_moved = None
        self.opening_turn = board is None and side_to_move is Side.RED
        self.result = GameResult.IN_PROGRESS
        self.history = SuperkoGuard()
        self.history.record(self.board, self.side_to_move)
        self.last_highlights = ()
        self.ply_count = 0

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def size(self) -> int:
        return self.board.size

    @property
    def is_game_over(self) -> bool:
        return self.result != GameResult.IN_PROGRESS

    @property
    def winner(self) -> Side | None:
        return self.result.winner

    @property
    def signature(self) -> int:
        """Signature of the current board with the current side to move."""
        return SuperkoGuard.signature(self.board, self.side_to_move)

    @property
    def trains_allowed(self) -> bool:
        """Trains take a whole turn and are closed to the opening move."""
        return self.phase == TurnPhase.FIRST and not self.opening_turn

    def train_moves_from(self, cell: Cell) -> list[TrainMove]:
        """Train moves starting at *cell* for the side to move, ignoring phase."""
        if self.opening_turn or self.board[cell] is not self.side_to_move:
            return []
        return MoveGenerator(self.board).train_moves(cell)

    # ── Turn state machine ───────────────────────────────────────────────

    def transition_for(self, move: Move, board_after: Board) -> TurnTransition | RejectReason:
        """Decide what *move* does to the turn, given the board it produces."""
        side = self.side_to_move
        ends = TurnTransition(True, side.opposite)

        if isinstance(move, TrainMove):
            if self.phase != TurnPhase.FIRST:
                return RejectReason.PHASE_VIOLATION
            return ends

        if self.phase == TurnPhase.FIRST:
            if self.opening_turn:
                return ends
            if Rules.can_make_second_move(board_after, side, move.to_cell):
                return TurnTransition(False, side)
            return ends

        assert self.first_moved is not None
        if move.from_cell == self.first_moved:
            return RejectReason.PHASE_VIOLATION
        goal_row = side.goal_row(self.size)
        if self.first_moved[0] == goal_row and move.to_cell[0] == goal_row:
            return RejectReason.DOUBLE_GOAL_VIOLATION
        return ends

    def commit(self, move: Move, board_after: Board, transition: TurnTransition) -> None:
        """Make *board_after* current and advance the turn.

        Caller is responsible for legality and the superko check.
        """
        self.board = board_after
        self.history.record(board_after, transition.next_side)
        self.ply_count += 1
        self.last_highlights = move.highlights

        if transition.ends_turn:
            self._end_turn()
        else:
            assert isinstance(move, SingleMove)
            self.phase = TurnPhase.SECOND
            self.first_moved = move.to_cell

    def _end_turn(self) -> None:
        just_moved = self.side_to_move
        self.phase = TurnPhase.FIRST
        self.first_moved = None
        self.side_to_move = just_moved.opposite
        self.opening_turn = False

        winner = Rules.winner_after_turn(self.board, just_moved)
        if winner is not None:
            self.result = GameResult.won_by(winner)

    # ── Export ───────────────────────────────────────────────────────────

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            size=self.size,
            board=tuple(tuple(row) for row in self.board.to_rows()),
            turn=self.side_to_move,
            phase=self.phase,
            highlights=self.last_highlights,
            game_over=self.is_game_over,
            winner=self.winner,
            ply_count=self.ply_count,
        )
