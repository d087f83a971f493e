"""
Game controller for tic-tac-toe.

Ties together the game state, the computer opponent and a scheduler.
Front-ends feed it clicks and mode changes and redraw from its listener
callbacks; it never touches display state itself.

Game flow (human vs computer, computer holding O):
1. Human (X) clicks a cell
2. Controller applies the move and notifies listeners
3. If the game goes on, the computer's move is scheduled after a short delay
4. The scheduled task applies the opponent's move and notifies listeners
5. Repeat until someone wins or it's a draw

When the computer holds X, start_game schedules its opening move first.
"""

import logging
from typing import Callable, List, Optional

from .config import GameConfig
from .errors import InvalidMove
from .game_state import GameMode, GameState, MoveOutcome, Player, Status
from .opponent import OpponentPolicy
from .scheduler import QueueScheduler, ScheduledTask, Scheduler


logger = logging.getLogger(__name__)

Listener = Callable[[GameState], None]


def status_message(game_state: GameState) -> str:
    """Banner text for the current state."""
    if game_state.status == Status.WON:
        return f"Player {game_state.winner.value} Wins!"
    if game_state.status == Status.DRAW:
        return "It's a Draw!"
    return f"Player {game_state.current_player.value}'s Turn"


class GameController:
    """
    Main controller for a tic-tac-toe session.

    One GameState lives for the whole session and is reset between games.
    Every reset bumps a generation counter; a scheduled computer move
    remembers the generation it was made for and does nothing if the game
    has been reset since.
    """

    def __init__(
        self,
        scheduler: Optional[Scheduler] = None,
        opponent: Optional[OpponentPolicy] = None,
        computer_delay_ms: Optional[int] = None
    ):
        """
        Initialize the controller.

        Args:
            scheduler: Where computer moves are deferred to. Defaults to a
                QueueScheduler that the caller drains.
            opponent: Computer player. A fresh OpponentPolicy if not provided.
            computer_delay_ms: Delay before the computer moves.
        """
        self.scheduler = scheduler or QueueScheduler()
        self.opponent = opponent or OpponentPolicy()
        self.computer_delay_ms = (
            GameConfig.COMPUTER_DELAY_MS if computer_delay_ms is None else computer_delay_ms
        )

        self.game_state = GameState(mode=GameConfig.DEFAULT_MODE)
        self.pending_move: Optional[ScheduledTask] = None
        self.generation = 0

        self._listeners: List[Listener] = []

    @property
    def computer_mark(self) -> Player:
        return self.opponent.computer_mark

    @property
    def is_computer_turn(self) -> bool:
        return (
            self.game_state.mode == GameMode.HUMAN_VS_COMPUTER
            and not self.game_state.is_game_over
            and self.game_state.current_player == self.computer_mark
        )

    def add_listener(self, callback: Listener):
        """Call `callback(game_state)` after every move and reset."""
        self._listeners.append(callback)

    def remove_listener(self, callback: Listener):
        self._listeners.remove(callback)

    def _notify(self):
        for callback in list(self._listeners):
            callback(self.game_state)

    # ==================== MODE SELECTION ====================

    def start_game(self, mode: GameMode):
        """Start a new game in the given mode. The computer may move first."""
        self._cancel_pending_move()
        self.generation += 1
        self.game_state.reset(mode)
        logger.info("New game started: %s", mode.value)
        self._notify()

        # The computer opens when it plays X
        if self.is_computer_turn:
            self._schedule_computer_move()

    def return_to_mode_selection(self):
        """
        Abandon the current game.
        The board is cleared and the mode falls back to the default.
        """
        self.start_game(GameConfig.DEFAULT_MODE)

    # ==================== MOVES ====================

    def handle_cell_click(self, index: int) -> Optional[MoveOutcome]:
        """
        Process a human click on a cell.

        Invalid clicks (occupied cell, game over, computer's turn) are
        ignored.

        Args:
            index: Cell index (0-8).

        Returns:
            The MoveOutcome, or None if the click was ignored.
        """
        if self.is_computer_turn:
            logger.debug("Ignoring click on %s: computer's turn", index)
            return None

        try:
            outcome = self.game_state.apply_move(index, self.game_state.current_player)
        except InvalidMove as e:
            logger.debug("Ignoring click on %s: %s", index, e)
            return None

        self._notify()

        if self.is_computer_turn:
            self._schedule_computer_move()

        return outcome

    def _schedule_computer_move(self):
        generation = self.generation
        self._cancel_pending_move()
        self.pending_move = self.scheduler.call_later(
            self.computer_delay_ms,
            lambda: self._play_computer_move(generation),
        )
        logger.debug("Computer move scheduled in %d ms", self.computer_delay_ms)

    def _cancel_pending_move(self):
        if self.pending_move is not None:
            self.pending_move.cancel()
            self.pending_move = None

    def _play_computer_move(self, generation: int) -> Optional[MoveOutcome]:
        """
        Scheduled callback: let the opponent move.

        Returns:
            The MoveOutcome, or None if the task is stale.
        """
        if generation != self.generation or not self.is_computer_turn:
            logger.debug("Dropping stale computer move (generation %d)", generation)
            return None

        self.pending_move = None
        index = self.opponent.get_move(self.game_state)
        outcome = self.game_state.apply_move(index, self.computer_mark)
        self._notify()
        return outcome
