"""
Game configuration for tic-tac-toe.
All the settings for players, pacing, logging and the Tk window.
"""

import logging
from typing import Optional

from .game_state import GameMode, Player


class GameConfig:
    """
    Configuration class for game settings.
    Command line flags in main.py override some of these.
    """

    # ==================== PLAYERS ====================
    # In human-vs-computer mode the human always plays X and moves first
    HUMAN_MARK = Player.X
    COMPUTER_MARK = Player.O

    DEFAULT_MODE = GameMode.HUMAN_VS_HUMAN

    # ==================== PACING ====================
    # Delay before the computer answers a human move (milliseconds)
    COMPUTER_DELAY_MS = 700

    # ==================== LOGGING ====================
    LOG_LEVEL = logging.WARNING
    LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

    # ==================== UI SETTINGS ====================
    WINDOW_TITLE = "Tic-Tac-Toe"
    BG_COLOR = '#1a1a2e'
    CELL_BG = '#16213e'
    X_COLOR = '#f87171'
    O_COLOR = '#10b981'
    WIN_HIGHLIGHT = '#ffd700'
    TITLE_COLOR = '#00d4ff'
    FONT_FAMILY = 'Segoe UI'


def configure_logging(level: Optional[int] = None):
    """
    Set up root logging for the front-ends.

    Args:
        level: Log level. Uses GameConfig.LOG_LEVEL if not provided.
    """
    logging.basicConfig(
        level=GameConfig.LOG_LEVEL if level is None else level,
        format=GameConfig.LOG_FORMAT,
    )
