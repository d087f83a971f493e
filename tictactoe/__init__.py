"""
Tic-Tac-Toe
===========
Game engine and computer opponent for two-player tic-tac-toe.
Supports human vs human and human vs computer games.

X always moves first. Against the computer the human plays X.
"""

from .errors import TicTacToeError, InvalidMove, PolicyPreconditionError
from .game_state import (
    GameState, GameMode, Player, Status, Move, MoveOutcome,
    board_from_marks, board_to_marks, empty_board,
)
from .win_checker import WinChecker, WinResult, WINNING_LINES
from .move_validator import MoveValidator, ValidationResult
from .config import GameConfig, configure_logging
from .opponent import OpponentPolicy, Rule
from .scheduler import ScheduledTask, QueueScheduler, TkScheduler
from .controller import GameController, status_message

__version__ = "1.0.0"
