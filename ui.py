"""
Tic-Tac-Toe UI
A graphical interface for the tic-tac-toe game using Tkinter.

Shows:
- Mode selection screen (Human vs Human / Human vs Computer)
- Game board with the winning line highlighted
- Game status and whose turn it is
"""

import tkinter as tk
from tkinter import ttk
from typing import List, Optional

from tictactoe import (
    GameConfig, GameController, GameMode, GameState, OpponentPolicy,
    Player, TkScheduler, status_message,
)


class TicTacToeUI:
    """
    Main UI class for tic-tac-toe.

    The UI only reads the GameState it is handed by the controller's
    listener callback; all game rules live in the controller.
    """

    def __init__(
        self,
        mode: Optional[GameMode] = None,
        delay_ms: Optional[int] = None,
        opponent: Optional[OpponentPolicy] = None
    ):
        """Initialize the UI."""
        self._create_ui()

        self.controller = GameController(
            scheduler=TkScheduler(self.root),
            opponent=opponent,
            computer_delay_ms=delay_ms,
        )
        self.controller.add_listener(self._render)

        self.mode_var.set((mode or GameConfig.DEFAULT_MODE).value)
        self._show_mode_selection(reset_mode=mode is None)

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title(GameConfig.WINDOW_TITLE)
        self.root.configure(bg=GameConfig.BG_COLOR)
        self.root.minsize(360, 460)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=GameConfig.BG_COLOR)
        style.configure('TLabel', background=GameConfig.BG_COLOR, foreground='white',
                        font=(GameConfig.FONT_FAMILY, 11))
        style.configure('Title.TLabel', font=(GameConfig.FONT_FAMILY, 16, 'bold'),
                        foreground=GameConfig.TITLE_COLOR)
        style.configure('Status.TLabel', font=(GameConfig.FONT_FAMILY, 12),
                        foreground=GameConfig.WIN_HIGHLIGHT)
        style.configure('TRadiobutton', background=GameConfig.BG_COLOR, foreground='white',
                        font=(GameConfig.FONT_FAMILY, 11))

        self.mode_var = tk.StringVar(value=GameConfig.DEFAULT_MODE.value)

        self.mode_frame = self._create_mode_screen()
        self.game_frame = self._create_game_screen()

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _create_mode_screen(self) -> ttk.Frame:
        frame = ttk.Frame(self.root)

        ttk.Label(frame, text="Choose Game Mode", style='Title.TLabel').pack(pady=(20, 15))

        for text, mode in (
            ("Human vs Human", GameMode.HUMAN_VS_HUMAN),
            ("Human vs Computer", GameMode.HUMAN_VS_COMPUTER),
        ):
            ttk.Radiobutton(
                frame, text=text, value=mode.value, variable=self.mode_var
            ).pack(anchor=tk.W, padx=60, pady=4)

        tk.Button(
            frame,
            text="▶ Start Game",
            font=(GameConfig.FONT_FAMILY, 11, 'bold'),
            bg='#10b981',
            fg='white',
            width=16,
            command=self._start_game
        ).pack(pady=20)

        return frame

    def _create_game_screen(self) -> ttk.Frame:
        frame = ttk.Frame(self.root)

        ttk.Label(frame, text="Tic-Tac-Toe", style='Title.TLabel').pack(pady=(10, 5))

        self.status_label = ttk.Label(frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)

        board_frame = ttk.Frame(frame)
        board_frame.pack(pady=10)

        self.board_cells: List[tk.Button] = []
        for index in range(9):
            cell = tk.Button(
                board_frame,
                text="",
                font=(GameConfig.FONT_FAMILY, 24, 'bold'),
                width=3,
                height=1,
                bg=GameConfig.CELL_BG,
                fg='white',
                activebackground=GameConfig.CELL_BG,
                relief='ridge',
                borderwidth=2,
                command=lambda i=index: self.controller.handle_cell_click(i)
            )
            cell.grid(row=index // 3, column=index % 3, padx=2, pady=2)
            self.board_cells.append(cell)

        control_frame = ttk.Frame(frame)
        control_frame.pack(pady=10)

        # Reset and Back both return to mode selection
        tk.Button(
            control_frame,
            text="🔄 Reset",
            font=(GameConfig.FONT_FAMILY, 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=10,
            command=self._show_mode_selection
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="← Back",
            font=(GameConfig.FONT_FAMILY, 11, 'bold'),
            bg='#2d3748',
            fg='white',
            width=10,
            command=self._show_mode_selection
        ).pack(side=tk.LEFT, padx=5)

        return frame

    # ==================== SCREENS ====================

    def _show_mode_selection(self, reset_mode: bool = True):
        """Show the mode screen. The pending game (and computer move) is dropped."""
        self.game_frame.pack_forget()
        self.mode_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        self.controller.return_to_mode_selection()
        if reset_mode:
            self.mode_var.set(GameConfig.DEFAULT_MODE.value)

    def _start_game(self):
        """Read the chosen mode and switch to the board."""
        mode = GameMode(self.mode_var.get())

        self.mode_frame.pack_forget()
        self.game_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        print(f"Starting game: {mode.value}")
        self.controller.start_game(mode)

    # ==================== RENDERING ====================

    def _render(self, game_state: GameState):
        """Redraw the board and status from the game state."""
        winning = set(game_state.winning_line or ())

        for index, cell in enumerate(self.board_cells):
            mark = game_state.board[index]
            if mark is None:
                cell.configure(text="", fg='white', bg=GameConfig.CELL_BG)
                continue

            color = GameConfig.X_COLOR if mark == Player.X else GameConfig.O_COLOR
            cell.configure(
                text=mark.value,
                fg=color,
                bg=GameConfig.WIN_HIGHLIGHT if index in winning else GameConfig.CELL_BG
            )

        self.status_label.configure(text=status_message(game_state))

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.controller.return_to_mode_selection()
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    print("\n" + "="*60)
    print("   Tic-Tac-Toe UI")
    print("="*60 + "\n")

    ui = TicTacToeUI()
    ui.run()


if __name__ == "__main__":
    main()
