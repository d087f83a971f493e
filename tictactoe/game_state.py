"""
Game state management for tic-tac-toe.
Tracks the board, current player, game mode and result.
"""

import logging
from enum import Enum
from typing import Iterable, List, Optional, Tuple
from dataclasses import dataclass, field

from .errors import InvalidMove
from .move_validator import MoveValidator
from .win_checker import WinChecker


logger = logging.getLogger(__name__)


class Player(Enum):
    """The two marks in the game. X always moves first."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X


class GameMode(Enum):
    """Who drives each seat."""
    HUMAN_VS_HUMAN = "human-human"
    HUMAN_VS_COMPUTER = "human-computer"


class Status(Enum):
    """Game result. Only IN_PROGRESS accepts moves."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


BOARD_CELLS = 9

# A cell is None (empty) or the Player holding it
Cell = Optional[Player]
Board = List[Cell]

_EMPTY_MARKS = ("", ".", " ", "-")


def empty_board() -> Board:
    """A fresh board with all nine cells empty."""
    return [None] * BOARD_CELLS


def board_from_marks(marks: Iterable[str]) -> Board:
    """
    Build a board from mark strings.

    Args:
        marks: Nine strings, each "X", "O" or empty ("", ".", " ", "-").
            A single 9-character string such as "XX..O...." also works.

    Returns:
        The board as a list of Optional[Player].
    """
    board = []
    for mark in marks:
        mark = mark.strip().upper()
        board.append(None if mark in _EMPTY_MARKS else Player(mark))

    if len(board) != BOARD_CELLS:
        raise ValueError(f"Board needs {BOARD_CELLS} cells, got {len(board)}")
    return board


def board_to_marks(board: Board) -> List[str]:
    """Inverse of board_from_marks: empty cells become ""."""
    return [cell.value if cell is not None else "" for cell in board]


@dataclass
class Move:
    """
    An accepted move.
    """
    player: Player          # Who made the move
    index: int              # Cell index (0-8)
    move_number: int        # 1-based position in the game


@dataclass
class MoveOutcome:
    """
    What changed after an accepted move.
    The rendering layer uses this to update cells, banner and turn label.
    """
    move: Move
    status: Status
    winner: Optional[Player] = None
    winning_line: Optional[Tuple[int, int, int]] = None
    next_player: Optional[Player] = None     # None once the game is over


@dataclass
class GameState:
    """
    The complete state of one tic-tac-toe game.

    Tracks:
    - The 9-cell board (row-major, index 0-8)
    - Current player
    - Game mode
    - Status, winner and winning line
    - Move history for the current game

    The only mutations are reset() and apply_move().
    """

    board: Board = field(default_factory=empty_board)
    current_player: Player = Player.X
    mode: GameMode = GameMode.HUMAN_VS_HUMAN
    status: Status = Status.IN_PROGRESS

    winner: Optional[Player] = None
    winning_line: Optional[Tuple[int, int, int]] = None

    moves: List[Move] = field(default_factory=list)

    @property
    def is_game_over(self) -> bool:
        return self.status != Status.IN_PROGRESS

    def reset(self, mode: Optional[GameMode] = None):
        """
        Start a new game.

        Args:
            mode: Game mode for the new game. Keeps the current mode if omitted.
        """
        if mode is not None:
            self.mode = mode

        self.board = empty_board()
        self.current_player = Player.X
        self.status = Status.IN_PROGRESS
        self.winner = None
        self.winning_line = None
        self.moves = []

        logger.debug("Game reset (mode=%s)", self.mode.value)

    def apply_move(self, index: int, player: Player) -> MoveOutcome:
        """
        Place a mark on the board.

        Args:
            index: Cell index (0-8).
            player: The player making the move. Must be the current player.

        Returns:
            MoveOutcome describing the new status.

        Raises:
            InvalidMove: If the move breaks a rule. Nothing is changed.
        """
        result = MoveValidator().validate_move(self, index, player)
        if not result.is_valid:
            logger.debug("Rejected move %s at %r: %s", player, index, result.error_message)
            raise InvalidMove(result.error_message)

        self.board[index] = player
        move = Move(player=player, index=index, move_number=len(self.moves) + 1)
        self.moves.append(move)

        checker = WinChecker()
        win = checker.evaluate_win(self.board)

        # Win is checked before draw: a full board with a line is a win
        if win is not None:
            self.status = Status.WON
            self.winner = win.player
            self.winning_line = win.line
            logger.info("Player %s wins on line %s", win.player.value, win.line)
        elif checker.evaluate_draw(self.board):
            self.status = Status.DRAW
            logger.info("Game drawn after %d moves", len(self.moves))
        else:
            self.current_player = self.current_player.opposite()

        return MoveOutcome(
            move=move,
            status=self.status,
            winner=self.winner,
            winning_line=self.winning_line,
            next_player=None if self.is_game_over else self.current_player,
        )

    def get_available_cells(self) -> List[int]:
        """Indices of empty cells, ascending."""
        return WinChecker().get_available_cells(self.board)

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(
            board=list(self.board),
            current_player=self.current_player,
            mode=self.mode,
            status=self.status,
            winner=self.winner,
            winning_line=self.winning_line,
            moves=list(self.moves),
        )

    def render(self) -> str:
        """
        Text picture of the board. Empty cells show their 1-9 number,
        which is what the console front-end asks the player to type.
        """
        rows = []
        for row in range(3):
            cells = []
            for col in range(3):
                index = row * 3 + col
                cell = self.board[index]
                cells.append(cell.value if cell is not None else str(index + 1))
            rows.append(" " + " | ".join(cells))
        return "\n---+---+---\n".join(rows)
