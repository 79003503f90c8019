"""Core enumerations for the Rezzo domain."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class Side(IntEnum):
    """Piece owner. RED always opens the game."""

    RED = 1
    BLUE = 2

    @property
    def opposite(self) -> Side:
        return Side.BLUE if self is Side.RED else Side.RED

    def home_rows(self, size: int) -> tuple[int, int]:
        """The two starting rows of this side on a *size* board."""
        if self is Side.RED:
            return (0, 1)
        return (size - 2, size - 1)

    def goal_row(self, size: int) -> int:
        """Row farthest from this side's starting rows."""
        return size - 1 if self is Side.RED else 0

    def __str__(self) -> str:
        return self.name.lower()


class AlignmentKind(StrEnum):
    """How an enemy piece sits relative to an attacking train's axis."""

    ISOLATED = "isolated"
    SAME_ORIENTATION = "same_orientation"
    DIFF_ORIENTATION = "diff_orientation"


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    RED_WINS = 1
    BLUE_WINS = 2

    @classmethod
    def won_by(cls, side: Side) -> GameResult:
        return cls.RED_WINS if side is Side.RED else cls.BLUE_WINS

    @property
    def winner(self) -> Side | None:
        if self == GameResult.RED_WINS:
            return Side.RED
        if self == GameResult.BLUE_WINS:
            return Side.BLUE
        return None
