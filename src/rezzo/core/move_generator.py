"""Single-step and train move generation plus enemy alignment analysis."""

from __future__ import annotations

from collections.abc import Iterator
from functools import lru_cache

from rezzo.core.board import Board
from rezzo.core.enums import AlignmentKind, Side
from rezzo.core.move import Alignment, SingleMove, TrainMove
from rezzo.core.types import Axis, Cell

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

STEP_OFFSETS: tuple[tuple[int, int], ...] = KING_OFFSETS + KNIGHT_OFFSETS

# Trains scan every king direction; alignment checks the four line orientations.
TRAIN_AXES: tuple[Axis, ...] = KING_OFFSETS
LINE_ORIENTATIONS: tuple[Axis, ...] = ((1, 0), (0, 1), (1, 1), (1, -1))


# -- Precomputed lookup tables ---------------------------------------------


@lru_cache(maxsize=None)
def _step_targets(size: int) -> tuple[tuple[Cell, ...], ...]:
    """In-bounds king/knight targets for every cell, indexed row-major."""
    targets: list[tuple[Cell, ...]] = []
    for row in range(size):
        for col in range(size):
            cells: list[Cell] = []
            for dr, dc in STEP_OFFSETS:
                r, c = row + dr, col + dc
                if 0 <= r < size and 0 <= c < size:
                    cells.append((r, c))
            targets.append(tuple(cells))
    return tuple(targets)


class MoveGenerator:
    """Enumerates destinations on a :class:`Board`.

    The generator only reads the board. Turn rules (whose move it is, the
    opening turn, phases) are enforced by the game layer.
    """

    __slots__ = ("_board", "_size", "_targets")

    def __init__(self, board: Board) -> None:
        self._board = board
        self._size = board.size
        self._targets = _step_targets(board.size)

    # -- Single steps -------------------------------------------------------

    def single_destinations(self, cell: Cell) -> list[Cell]:
        """Empty cells one king step or knight leap away from *cell*."""
        board = self._board
        return [t for t in self._targets[cell[0] * self._size + cell[1]] if board[t] is None]

    def single_moves(self, cell: Cell) -> list[SingleMove]:
        return [SingleMove(cell, to) for to in self.single_destinations(cell)]

    def has_single_move(
        self,
        side: Side,
        *,
        exclude: Cell | None = None,
        forbid_row: int | None = None,
    ) -> bool:
        """Whether any piece of *side* other than *exclude* can step somewhere.

        Destinations on *forbid_row* do not count.
        """
        for cell in self._board.pieces(side):
            if cell == exclude:
                continue
            for dest in self.single_destinations(cell):
                if dest[0] != forbid_row:
                    return True
        return False

    # -- Alignment ----------------------------------------------------------

    def _run_length(self, cell: Cell, axis: Axis, side: Side) -> int:
        """Contiguous *side* cells through *cell* along *axis*, both ways."""
        board = self._board
        dr, dc = axis
        count = 1
        for sign in (1, -1):
            r, c = cell[0] + dr * sign, cell[1] + dc * sign
            while board.in_bounds((r, c)) and board[r, c] is side:
                count += 1
                r += dr * sign
                c += dc * sign
        return count

    def analyze_alignment(self, cell: Cell, axis: Axis, enemy: Side) -> Alignment:
        """Classify the *enemy* piece on *cell* met by a train moving along *axis*."""
        same_axis = self._run_length(cell, axis, enemy)
        if same_axis > 1:
            return Alignment(AlignmentKind.SAME_ORIENTATION, same_axis)

        dr, dc = axis
        for orientation in LINE_ORIENTATIONS:
            if orientation in ((dr, dc), (-dr, -dc)):
                continue
            if self._run_length(cell, orientation, enemy) > 1:
                return Alignment(AlignmentKind.DIFF_ORIENTATION)
        return Alignment(AlignmentKind.ISOLATED)

    # -- Trains -------------------------------------------------------------

    def train_moves(self, tail: Cell) -> list[TrainMove]:
        """Slides and captures for every train starting at *tail*.

        Destinations are grouped per axis in :data:`TRAIN_AXES` order, nearest
        first.
        """
        board = self._board
        side = board[tail]
        if side is None:
            return []
        enemy = side.opposite
        moves: list[TrainMove] = []

        for axis in TRAIN_AXES:
            dr, dc = axis
            head = tail
            length = 1
            nxt = (tail[0] + dr, tail[1] + dc)
            while board.in_bounds(nxt) and board[nxt] is side:
                head = nxt
                length += 1
                nxt = (nxt[0] + dr, nxt[1] + dc)
            if length < 2:
                continue

            dest = (head[0] + dr, head[1] + dc)
            for _ in range(length):
                if not board.in_bounds(dest):
                    break
                occupant = board[dest]
                if occupant is None:
                    moves.append(TrainMove(tail, head, dest, axis, length))
                    dest = (dest[0] + dr, dest[1] + dc)
                    continue
                if occupant is enemy:
                    alignment = self.analyze_alignment(dest, axis, enemy)
                    if alignment.is_capturable_by(length):
                        moves.append(
                            TrainMove(tail, head, dest, axis, length, True, alignment)
                        )
                break

        return moves

    def side_train_moves(self, side: Side) -> Iterator[TrainMove]:
        """Train moves for every piece of *side*."""
        for cell in self._board.pieces(side):
            yield from self.train_moves(cell)
