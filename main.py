"""
Main entry point for tic-tac-toe.

Launches the Tkinter UI by default. With --no-ui the game runs in the
console: cells are numbered 1-9 left to right, top to bottom.

Run this script to play tic-tac-toe!
"""

import argparse
import logging
import random
import sys
import time
from typing import Callable, List, Optional

from tictactoe import (
    GameConfig, GameController, GameMode, MoveValidator, OpponentPolicy,
    QueueScheduler, Status, configure_logging, status_message,
)


class ConsoleGame:
    """
    Console front-end.

    Reads commands from `input_fn` and prints with `output_fn`, so the
    whole loop can be driven from a script.

    Commands:
    - 1-9: place a mark
    - h: hint for the player to move
    - r: start a new game in the same mode
    - q: quit
    """

    def __init__(
        self,
        mode: GameMode,
        delay_ms: int = 0,
        opponent: Optional[OpponentPolicy] = None,
        input_fn: Optional[Callable[[str], str]] = None,
        output_fn: Optional[Callable[[str], None]] = None
    ):
        self.mode = mode
        self.delay_ms = delay_ms
        self.input_fn = input_fn or input
        self.output_fn = output_fn or print

        self.scheduler = QueueScheduler()
        self.controller = GameController(
            scheduler=self.scheduler,
            opponent=opponent,
            computer_delay_ms=delay_ms,
        )

    def start(self) -> Optional[Status]:
        """
        Play one game, until it ends, the user quits or input runs out.

        Returns:
            Final status of the game, or None if it was not finished.
        """
        result = None
        self.controller.start_game(self.mode)
        self._show_board()
        self._run_computer_move()

        while True:
            try:
                command = self.input_fn("Your move (1-9, h=hint, r=reset, q=quit): ").strip().lower()
            except EOFError:
                break

            if command == 'q':
                self.output_fn("\nGame quit by user.")
                break

            if command == 'r':
                self.output_fn("\nResetting game...")
                self.controller.start_game(self.mode)
                self._show_board()
                self._run_computer_move()
                continue

            if command == 'h':
                self._show_hint()
                continue

            if not command.isdigit() or not 1 <= int(command) <= 9:
                self.output_fn(f"Please enter a number from 1 to 9 (got {command!r}).")
                continue

            index = int(command) - 1
            if self.controller.handle_cell_click(index) is None:
                free = MoveValidator().get_valid_moves(self.controller.game_state)
                self.output_fn(f"Cell {command} is not available. Try again.")
                self.output_fn("Free cells: " + ", ".join(str(i + 1) for i in free))
                continue

            self._show_board()
            self._run_computer_move()

            if self.controller.game_state.is_game_over:
                result = self.controller.game_state.status
                self._show_game_result()
                break

        self.controller.return_to_mode_selection()
        return result

    def _run_computer_move(self):
        """Run the deferred computer move, if one was scheduled."""
        if self.scheduler.pending_count == 0:
            return

        self.output_fn("\n>>> Computer is thinking...")
        if self.delay_ms:
            time.sleep(self.delay_ms / 1000)
        self.scheduler.run_pending()

        last_move = self.controller.game_state.moves[-1]
        self.output_fn(f">>> Computer plays cell {last_move.index + 1}")
        self._show_board()

    def _show_hint(self):
        """Print what the computer's heuristic would play for the player to move."""
        state = self.controller.game_state
        if state.is_game_over:
            self.output_fn("The game is over.")
            return

        player = state.current_player
        hint = self.controller.opponent.get_move_suggestion(
            state.board, player, player.opposite(), first_cell=1
        )
        self.output_fn(f"Hint for {player.value}: {hint}")

    def _show_board(self):
        self.output_fn("")
        self.output_fn(self.controller.game_state.render())
        self.output_fn("")
        if not self.controller.game_state.is_game_over:
            self.output_fn(status_message(self.controller.game_state))

    def _show_game_result(self):
        """Show the final game result."""
        self.output_fn("\n" + "="*60)
        self.output_fn("   GAME OVER!")
        self.output_fn("="*60)
        self.output_fn(f"\n{status_message(self.controller.game_state)}")
        self.output_fn("\n" + "="*60)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Tic-Tac-Toe")
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in GameMode],
        default=None,
        help="Game mode (default: human-human, or pick it in the UI)"
    )
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--delay-ms",
        type=int,
        default=None,
        help=f"Delay before the computer moves (default: {GameConfig.COMPUTER_DELAY_MS})"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the computer's random fallback"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log game events"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    configure_logging(logging.DEBUG if args.verbose else None)

    mode = GameMode(args.mode) if args.mode else None
    opponent = OpponentPolicy(rng=random.Random(args.seed))

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        print("\n" + "="*60)
        print("   Tic-Tac-Toe UI")
        print("="*60 + "\n")
        ui = TicTacToeUI(mode=mode, delay_ms=args.delay_ms, opponent=opponent)
        ui.run()
        return 0

    # Console mode (--no-ui)
    mode = mode or GameConfig.DEFAULT_MODE
    delay_ms = GameConfig.COMPUTER_DELAY_MS if args.delay_ms is None else args.delay_ms

    print("\n" + "="*60)
    print("   Tic-Tac-Toe")
    print(f"   Mode: {mode.value}")
    print("="*60)

    game = ConsoleGame(mode, delay_ms=delay_ms, opponent=opponent)

    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")

    return 0


if __name__ == "__main__":
    sys.exit(main())
