"""
Move validator for tic-tac-toe.
Validates that moves follow the rules.
"""

from typing import TYPE_CHECKING, List, Optional
from dataclasses import dataclass

if TYPE_CHECKING:
    from .game_state import GameState, Player


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates tic-tac-toe moves.

    Rules:
    1. Game must not be over
    2. Index must be a cell on the board (0-8)
    3. Only the current player may move
    4. Can only place on empty cells
    """

    def validate_move(
        self,
        game_state: "GameState",
        index: int,
        player: "Player"
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            index: Cell to place the mark in (0-8).
            player: Player making the move.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if game is over
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        # bool is an int subclass, but True is not a cell
        if not isinstance(index, int) or isinstance(index, bool):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index!r}. Must be an integer 0-8."
            )

        # Check if index is in range
        if not 0 <= index < len(game_state.board):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index}. Must be 0-8."
            )

        # Check whose turn it is
        if player != game_state.current_player:
            return ValidationResult(
                is_valid=False,
                error_message=f"It's not {getattr(player, 'value', player)}'s turn!"
            )

        # Check if cell is empty
        occupant = game_state.board[index]
        if occupant is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {occupant.value}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state: "GameState") -> List[int]:
        """
        Get all valid moves for the current player.

        Args:
            game_state: Current game state.

        Returns:
            List of empty cell indices, or [] once the game is over.
        """
        if game_state.is_game_over:
            return []

        return game_state.get_available_cells()
