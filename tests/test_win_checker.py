"""
Tests for tictactoe.win_checker
"""

import pytest

from tictactoe import Player, WinChecker, WinResult, WINNING_LINES, board_from_marks


FULL_DRAW_BOARD = "XOXOXOOXO"


class TestWinningLines:
    """The line table itself."""

    def test_eight_lines_in_scan_order(self):
        assert WINNING_LINES == (
            (0, 1, 2), (3, 4, 5), (6, 7, 8),
            (0, 3, 6), (1, 4, 7), (2, 5, 8),
            (0, 4, 8), (2, 4, 6),
        )

    def test_table_is_immutable(self):
        with pytest.raises(TypeError):
            WINNING_LINES[0] = (0, 0, 0)


class TestEvaluateWin:
    """Win detection tests."""

    @pytest.mark.parametrize("player", [Player.X, Player.O])
    @pytest.mark.parametrize("line", WINNING_LINES)
    def test_every_line(self, checker: WinChecker, line, player):
        board = [None] * 9
        for index in line:
            board[index] = player

        assert checker.evaluate_win(board) == WinResult(player=player, line=line)

    def test_empty_board(self, checker: WinChecker):
        assert checker.evaluate_win([None] * 9) is None

    def test_mixed_line_is_not_a_win(self, checker: WinChecker):
        assert checker.evaluate_win(board_from_marks("XXO......")) is None

    def test_full_board_without_line(self, checker: WinChecker):
        assert checker.evaluate_win(board_from_marks(FULL_DRAW_BOARD)) is None

    def test_first_line_in_scan_order_wins(self, checker: WinChecker):
        """Several completed lines: the earliest in scan order is reported."""
        assert checker.evaluate_win(board_from_marks("XXXX..X..")).line == (0, 1, 2)
        assert checker.evaluate_win(board_from_marks("..X..XXXX")).line == (6, 7, 8)
        assert checker.evaluate_win(board_from_marks("O.O.O.O.O")).line == (0, 4, 8)

    def test_repeated_calls_agree(self, checker: WinChecker):
        board = board_from_marks("OXX.O.X.O")
        first = checker.evaluate_win(board)
        assert first == WinResult(Player.O, (0, 4, 8))
        assert checker.evaluate_win(board) == first
        assert board == board_from_marks("OXX.O.X.O")


class TestEvaluateDraw:
    """Draw detection tests."""

    def test_full_board_without_line_is_draw(self, checker: WinChecker):
        board = board_from_marks(FULL_DRAW_BOARD)
        assert checker.evaluate_draw(board) is True
        assert checker.evaluate_draw(board) is True

    def test_full_board_with_line_is_not_draw(self, checker: WinChecker):
        board = board_from_marks("XXXOOXOXO")
        assert checker.evaluate_win(board) is not None
        assert checker.evaluate_draw(board) is False

    def test_unfinished_board_is_not_draw(self, checker: WinChecker):
        assert checker.evaluate_draw(board_from_marks("XOXOXOOX.")) is False
        assert checker.evaluate_draw([None] * 9) is False


class TestAvailableCells:
    """Empty cell listing."""

    def test_empty_board(self, checker: WinChecker):
        assert checker.get_available_cells([None] * 9) == list(range(9))

    def test_ascending_order(self, checker: WinChecker):
        assert checker.get_available_cells(board_from_marks(".X.O.X.O.")) == [0, 2, 4, 6, 8]

    def test_full_board(self, checker: WinChecker):
        assert checker.get_available_cells(board_from_marks(FULL_DRAW_BOARD)) == []

    def test_restartable(self, checker: WinChecker):
        board = board_from_marks("X...O....")
        assert checker.get_available_cells(board) == checker.get_available_cells(board)
