"""High-level rules: move application, second-move availability, goal wins."""

from __future__ import annotations

from rezzo.core.board import Board
from rezzo.core.enums import AlignmentKind, Side
from rezzo.core.move import Move, SingleMove, TrainMove
from rezzo.core.move_generator import MoveGenerator
from rezzo.core.types import Cell


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    # -- Applying moves -----------------------------------------------------

    @staticmethod
    def apply_move(board: Board, move: Move) -> None:
        """Mutate *board* in place. The move must come from a generator."""
        if isinstance(move, SingleMove):
            board[move.to_cell] = board[move.from_cell]
            board[move.from_cell] = None
            return
        Rules._apply_train(board, move)

    @staticmethod
    def _apply_train(board: Board, move: TrainMove) -> None:
        side = board[move.tail]
        assert side is not None
        enemy = side.opposite
        dr, dc = move.axis

        if move.capture and board[move.dest] is enemy:
            alignment = move.alignment
            if alignment is None:
                alignment = MoveGenerator(board).analyze_alignment(move.dest, move.axis, enemy)
            board[move.dest] = None
            if alignment.kind is AlignmentKind.SAME_ORIENTATION:
                # The whole enemy line ahead of the target goes with it.
                cell = (move.dest[0] + dr, move.dest[1] + dc)
                while board.in_bounds(cell) and board[cell] is enemy:
                    board[cell] = None
                    cell = (cell[0] + dr, cell[1] + dc)

        sr, sc = move.shift
        cells = move.cells
        for cell in cells:
            board[cell] = None
        for r, c in cells:
            board[r + sr, c + sc] = side

    # -- Turn helpers -------------------------------------------------------

    @staticmethod
    def can_make_second_move(board: Board, side: Side, moved_to: Cell) -> bool:
        """Whether *side* has a follow-up single move with another piece.

        When the piece on *moved_to* reached the goal row, follow-ups that
        would land on the goal row as well are not counted.
        """
        goal_row = side.goal_row(board.size)
        forbid_row = goal_row if moved_to[0] == goal_row else None
        return MoveGenerator(board).has_single_move(
            side, exclude=moved_to, forbid_row=forbid_row
        )

    # -- Win detection ------------------------------------------------------

    @staticmethod
    def goal_cells(board: Board, side: Side) -> list[Cell]:
        """Cells of *side*'s goal row that *side* occupies."""
        return board.row_cells(side.goal_row(board.size), side)

    @staticmethod
    def has_reached_goal(board: Board, side: Side) -> bool:
        return bool(Rules.goal_cells(board, side))

    @staticmethod
    def goal_is_threatened(board: Board, side: Side) -> bool:
        """Whether the opponent of *side* has a train capturing one of its goal cells."""
        targets = set(Rules.goal_cells(board, side))
        if not targets:
            return False
        gen = MoveGenerator(board)
        return any(
            move.capture and move.dest in targets
            for move in gen.side_train_moves(side.opposite)
        )

    @staticmethod
    def winner_after_turn(board: Board, just_moved: Side) -> Side | None:
        """Winner, if any, once *just_moved* has finished its turn.

        The side now to move wins outright if it already holds its goal row.
        Otherwise the side that just moved wins with a piece on its goal row,
        unless that piece can be captured by a train right away.
        """
        to_move = just_moved.opposite
        if Rules.has_reached_goal(board, to_move):
            return to_move
        if Rules.has_reached_goal(board, just_moved) and not Rules.goal_is_threatened(
            board, just_moved
        ):
            return just_moved
        return None
