"""Tests for Rules: move application, second-move availability, goal wins."""

from rezzo.core.enums import Side
from rezzo.core.move import SingleMove
from rezzo.core.move_generator import MoveGenerator
from rezzo.core.rules import Rules

# Cells one step or leap away from (3, 0) on a 7x7 board.
_AROUND_3_0 = [(2, 0), (2, 1), (3, 1), (4, 0), (4, 1), (1, 1), (2, 2), (4, 2), (5, 1)]


class TestApplySingle:
    def test_piece_moves(self, make_board) -> None:
        board = make_board(7, red=[(1, 3)])
        Rules.apply_move(board, SingleMove((1, 3), (3, 4)))
        assert board[1, 3] is None
        assert board[3, 4] is Side.RED

    def test_key_follows_move(self, make_board) -> None:
        board = make_board(7, red=[(1, 3)])
        Rules.apply_move(board, SingleMove((1, 3), (2, 3)))
        assert board.occupancy_key == board.compute_occupancy_key()


class TestApplyTrain:
    def test_slide_keeps_shape(self, make_board) -> None:
        board = make_board(7, red=[(0, 0), (1, 1)])
        move = MoveGenerator(board).train_moves((0, 0))[1]  # to (3, 3)
        Rules.apply_move(board, move)
        assert board.pieces(Side.RED) == [(2, 2), (3, 3)]

    def test_slide_by_one_overlaps_itself(self, make_board) -> None:
        board = make_board(7, red=[(0, 3), (1, 3), (2, 3)])
        move = MoveGenerator(board).train_moves((0, 3))[0]  # to (3, 3)
        Rules.apply_move(board, move)
        assert board.pieces(Side.RED) == [(1, 3), (2, 3), (3, 3)]

    def test_longer_train_removes_whole_aligned_enemy(self, make_board) -> None:
        board = make_board(
            9,
            red=[(0, 4), (1, 4), (2, 4), (3, 4)],
            blue=[(5, 4), (6, 4), (7, 4), (8, 0)],
        )
        capture = MoveGenerator(board).train_moves((0, 4))[1]
        assert capture.dest == (5, 4)
        Rules.apply_move(board, capture)
        assert board.pieces(Side.RED) == [(2, 4), (3, 4), (4, 4), (5, 4)]
        assert board.pieces(Side.BLUE) == [(8, 0)]

    def test_isolated_capture_removes_one(self, make_board) -> None:
        board = make_board(7, red=[(0, 3), (1, 3)], blue=[(3, 3)])
        capture = MoveGenerator(board).train_moves((0, 3))[1]
        Rules.apply_move(board, capture)
        assert board.pieces(Side.RED) == [(2, 3), (3, 3)]
        assert board.count(Side.BLUE) == 0

    def test_diff_orientation_capture_removes_only_target(self, make_board) -> None:
        board = make_board(9, red=[(0, 4), (1, 4)], blue=[(2, 4), (2, 5), (2, 6)])
        capture = MoveGenerator(board).train_moves((0, 4))[0]
        Rules.apply_move(board, capture)
        assert board.pieces(Side.RED) == [(1, 4), (2, 4)]
        assert board.pieces(Side.BLUE) == [(2, 5), (2, 6)]


class TestCanMakeSecondMove:
    def test_other_piece_free(self, make_board) -> None:
        board = make_board(7, red=[(0, 6), (3, 0)])
        assert Rules.can_make_second_move(board, Side.RED, (0, 6))

    def test_other_piece_boxed_in(self, make_board) -> None:
        board = make_board(7, red=[(1, 6), (3, 0)], blue=_AROUND_3_0)
        assert not Rules.can_make_second_move(board, Side.RED, (1, 6))

    def test_moved_piece_does_not_count(self, make_board) -> None:
        board = make_board(7, red=[(3, 3)])
        assert not Rules.can_make_second_move(board, Side.RED, (3, 3))

    def test_goal_row_follow_up_ignored_after_goal_landing(self, make_board) -> None:
        # (6, 6)'s only free target is (6, 5), on RED's goal row.
        board = make_board(7, red=[(6, 0), (6, 6)], blue=[(5, 5), (5, 6), (4, 5), (5, 4)])
        assert not Rules.can_make_second_move(board, Side.RED, (6, 0))

    def test_goal_row_follow_up_counts_otherwise(self, make_board) -> None:
        board = make_board(7, red=[(4, 0), (6, 6)], blue=[(5, 5), (5, 6), (4, 5), (5, 4)])
        assert Rules.can_make_second_move(board, Side.RED, (4, 0))


class TestWinner:
    def test_nobody_on_goal(self, make_board) -> None:
        board = make_board(7, red=[(3, 3)], blue=[(4, 4)])
        assert Rules.winner_after_turn(board, Side.RED) is None

    def test_side_to_move_already_home(self, make_board) -> None:
        board = make_board(7, red=[(3, 3)], blue=[(0, 4)])
        assert Rules.has_reached_goal(board, Side.BLUE)
        assert Rules.winner_after_turn(board, Side.RED) is Side.BLUE

    def test_side_to_move_checked_first(self, make_board) -> None:
        board = make_board(7, red=[(6, 3)], blue=[(0, 4)])
        assert Rules.winner_after_turn(board, Side.RED) is Side.BLUE

    def test_unthreatened_goal_piece_wins(self, make_board) -> None:
        board = make_board(7, red=[(6, 2)], blue=[(3, 3)])
        assert Rules.winner_after_turn(board, Side.RED) is Side.RED

    def test_threatened_goal_piece_does_not_win_yet(self, make_board) -> None:
        board = make_board(7, red=[(6, 2)], blue=[(6, 0), (6, 1)])
        assert Rules.goal_is_threatened(board, Side.RED)
        assert Rules.winner_after_turn(board, Side.RED) is None

    def test_single_steps_are_no_threat(self, make_board) -> None:
        # A lone blue piece next to the goal piece cannot capture it.
        board = make_board(7, red=[(6, 2)], blue=[(5, 2)])
        assert not Rules.goal_is_threatened(board, Side.RED)
        assert Rules.winner_after_turn(board, Side.RED) is Side.RED

    def test_blue_goal_is_row_zero(self, make_board) -> None:
        board = make_board(7, red=[(4, 4)], blue=[(0, 3)])
        assert Rules.goal_cells(board, Side.BLUE) == [(0, 3)]
        assert Rules.winner_after_turn(board, Side.BLUE) is Side.BLUE
