"""
Win checker for tic-tac-toe.
Checks if a player has won or if the game is a draw.
"""

from typing import TYPE_CHECKING, List, NamedTuple, Optional, Sequence, Tuple

if TYPE_CHECKING:
    from .game_state import Player


# All possible winning lines, in scan order.
# The first completed line in this order is the one reported.
WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


class WinResult(NamedTuple):
    """A completed line and who completed it."""
    player: "Player"
    line: Tuple[int, int, int]


class WinChecker:
    """
    Checks for win conditions in tic-tac-toe.

    Win condition: 3 identical marks in a row
    (horizontally, vertically, or diagonally).

    Every method is a pure function of the board passed in.
    """

    WINNING_LINES = WINNING_LINES

    def evaluate_win(self, board: Sequence[Optional["Player"]]) -> Optional[WinResult]:
        """
        Check if there's a winner.

        Args:
            board: The 9-cell board.

        Returns:
            WinResult for the first completed line in scan order,
            or None if no line is complete.
        """
        for line in self.WINNING_LINES:
            winner = self._check_line(board, line)
            if winner is not None:
                return WinResult(player=winner, line=line)

        return None

    def _check_line(
        self,
        board: Sequence[Optional["Player"]],
        line: Tuple[int, int, int]
    ) -> Optional["Player"]:
        """
        Check if a single line has a winner.

        Returns:
            The Player holding all 3 cells, None otherwise.
        """
        a, b, c = (board[index] for index in line)

        if a is None:
            return None  # Empty cell, no winner on this line

        if a == b == c:
            return a

        return None

    def evaluate_draw(self, board: Sequence[Optional["Player"]]) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when all cells are filled AND there is no winner.
        """
        if self.evaluate_win(board) is not None:
            return False

        return all(cell is not None for cell in board)

    def get_available_cells(self, board: Sequence[Optional["Player"]]) -> List[int]:
        """
        Get all empty cells on the board.

        Returns:
            Cell indices in ascending order.
        """
        return [index for index, cell in enumerate(board) if cell is None]
