"""
Computer opponent for tic-tac-toe.
Chooses a move with a fixed chain of heuristics.
"""

import logging
import random
from enum import Enum
from typing import TYPE_CHECKING, Optional, Sequence, Tuple

from .config import GameConfig
from .errors import PolicyPreconditionError
from .win_checker import WINNING_LINES, WinChecker

if TYPE_CHECKING:
    from .game_state import GameState, Player


logger = logging.getLogger(__name__)


CENTER = 4
CORNERS = (0, 2, 6, 8)
SIDES = (1, 3, 5, 7)

# (human corner, corner to take). Checked in this order, first match wins.
OPPOSITE_CORNERS = ((0, 8), (2, 6), (6, 2), (8, 0))


class Rule(Enum):
    """The heuristic that produced a move, in priority order."""
    WIN = "win"
    BLOCK = "block"
    CENTER = "center"
    OPPOSITE_CORNER = "opposite_corner"
    CORNER = "corner"
    SIDE = "side"
    RANDOM = "random"


_SUGGESTIONS = {
    Rule.WIN: "Win the game",
    Rule.BLOCK: "Block the opponent",
    Rule.CENTER: "Take the center",
    Rule.OPPOSITE_CORNER: "Take the opposite corner",
    Rule.CORNER: "Take a corner",
    Rule.SIDE: "Take a side",
    Rule.RANDOM: "Take any free cell",
}


class OpponentPolicy:
    """
    A computer player using a fixed priority chain:

    1. Win now
    2. Block the human's line
    3. Center
    4. Opposite corner of a human corner
    5. Any empty corner
    6. Any empty side
    7. Random empty cell

    This is not a search - it can be beaten (see the characterization
    tests). No state is kept between calls apart from the random source.
    """

    def __init__(
        self,
        computer_mark: Optional["Player"] = None,
        human_mark: Optional["Player"] = None,
        rng: Optional[random.Random] = None
    ):
        """
        Initialize the policy.

        Args:
            computer_mark: Mark the computer plays (default: GameConfig.COMPUTER_MARK)
            human_mark: Mark the human plays (default: GameConfig.HUMAN_MARK)
            rng: Random source for the last-resort rule. Pass a seeded
                random.Random for reproducible games.
        """
        self.computer_mark = computer_mark or GameConfig.COMPUTER_MARK
        self.human_mark = human_mark or GameConfig.HUMAN_MARK
        self.rng = rng or random.Random()
        self.win_checker = WinChecker()

    def choose_move(
        self,
        board: Sequence[Optional["Player"]],
        computer_mark: "Player",
        human_mark: "Player"
    ) -> int:
        """
        Pick a cell for the computer.

        Args:
            board: The 9-cell board.
            computer_mark: The computer's mark.
            human_mark: The human's mark.

        Returns:
            Index of an empty cell.

        Raises:
            PolicyPreconditionError: If the board has no empty cell.
        """
        index, _ = self.choose_move_with_rule(board, computer_mark, human_mark)
        return index

    def choose_move_with_rule(
        self,
        board: Sequence[Optional["Player"]],
        computer_mark: "Player",
        human_mark: "Player"
    ) -> Tuple[int, Rule]:
        """Same as choose_move, but also reports which rule fired."""
        available = self.win_checker.get_available_cells(board)
        if not available:
            raise PolicyPreconditionError("No empty cell left to play")

        index, rule = self._apply_rules(board, computer_mark, human_mark)
        if index is None:
            index, rule = self.rng.choice(available), Rule.RANDOM

        logger.debug("Opponent %s picks cell %d (%s)", computer_mark.value, index, rule.value)
        return index, rule

    def _apply_rules(
        self,
        board: Sequence[Optional["Player"]],
        computer_mark: "Player",
        human_mark: "Player"
    ) -> Tuple[Optional[int], Optional[Rule]]:
        # 1. Win
        index = self._find_completing_cell(board, computer_mark)
        if index is not None:
            return index, Rule.WIN

        # 2. Block
        index = self._find_completing_cell(board, human_mark)
        if index is not None:
            return index, Rule.BLOCK

        # 3. Center
        if board[CENTER] is None:
            return CENTER, Rule.CENTER

        # 4. Opposite corner
        for human_corner, opposite in OPPOSITE_CORNERS:
            if board[human_corner] == human_mark and board[opposite] is None:
                return opposite, Rule.OPPOSITE_CORNER

        # 5. Any corner
        for corner in CORNERS:
            if board[corner] is None:
                return corner, Rule.CORNER

        # 6. Any side
        for side in SIDES:
            if board[side] is None:
                return side, Rule.SIDE

        return None, None

    def _find_completing_cell(
        self,
        board: Sequence[Optional["Player"]],
        mark: "Player"
    ) -> Optional[int]:
        """
        Find the empty cell of the first line holding two of `mark`.

        Returns:
            Cell index, or None if no line is one move from completion.
        """
        for line in WINNING_LINES:
            cells = [board[index] for index in line]
            if cells.count(mark) == 2 and cells.count(None) == 1:
                return line[cells.index(None)]
        return None

    def get_move(self, game_state: "GameState") -> int:
        """
        Get the computer's move for a live game.

        Args:
            game_state: Current game state. Must be in progress with the
                computer to move.

        Returns:
            Cell index to play.
        """
        if game_state.is_game_over:
            raise PolicyPreconditionError("Game is already over")

        if game_state.current_player != self.computer_mark:
            raise PolicyPreconditionError(
                f"It's {game_state.current_player.value}'s turn, not the computer's"
            )

        return self.choose_move(game_state.board, self.computer_mark, self.human_mark)

    def get_move_suggestion(
        self,
        board: Sequence[Optional["Player"]],
        computer_mark: "Player",
        human_mark: "Player",
        first_cell: int = 0
    ) -> str:
        """
        Get a human-readable move suggestion.

        Args:
            board: Nine cells, None for empty.
            computer_mark: Mark the suggestion is for.
            human_mark: The other mark.
            first_cell: Number of the top-left cell in the message
                (1 for the console's 1-9 numbering).

        Returns:
            A string describing the suggested move.
        """
        if not self.win_checker.get_available_cells(board):
            return "No moves available!"

        index, rule = self.choose_move_with_rule(board, computer_mark, human_mark)
        return f"{_SUGGESTIONS[rule]} (cell {index + first_cell})"
