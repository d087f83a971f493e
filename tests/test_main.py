"""
Tests for the console front-end in main.py
"""

import random
from typing import List

import pytest

import main
from main import ConsoleGame
from tictactoe import GameMode, OpponentPolicy, Player, Status


def scripted(commands: List[str]):
    """input() replacement that replays commands, then raises EOFError."""
    queue = list(commands)

    def read(prompt: str = "") -> str:
        if not queue:
            raise EOFError
        return queue.pop(0)

    return read


def console(mode: GameMode, commands: List[str], output: List[str]) -> ConsoleGame:
    return ConsoleGame(
        mode,
        delay_ms=0,
        opponent=OpponentPolicy(rng=random.Random(0)),
        input_fn=scripted(commands),
        output_fn=output.append,
    )


class TestConsoleGame:

    def test_human_vs_human_win(self):
        output = []
        game = console(GameMode.HUMAN_VS_HUMAN, ["1", "4", "2", "5", "3"], output)

        assert game.start() == Status.WON
        assert "Player X Wins!" in "\n".join(output)

    def test_bad_input_is_reported(self):
        output = []
        game = console(GameMode.HUMAN_VS_HUMAN, ["abc", "10", "1", "1", "q"], output)

        assert game.start() is None
        text = "\n".join(output)
        assert "Please enter a number from 1 to 9 (got 'abc')." in text
        assert "Please enter a number from 1 to 9 (got '10')." in text
        assert "Cell 1 is not available. Try again." in text
        assert "Game quit by user." in text

    def test_computer_answers(self):
        output = []
        game = console(GameMode.HUMAN_VS_COMPUTER, ["2", "3", "4"], output)

        assert game.start() == Status.WON
        text = "\n".join(output)
        assert ">>> Computer plays cell 5" in text
        assert "Player O Wins!" in text

    def test_reset_command(self):
        output = []
        game = console(GameMode.HUMAN_VS_COMPUTER, ["1", "r"], output)

        assert game.start() is None
        assert "Resetting game..." in "\n".join(output)

    def test_computer_opens_with_x(self):
        output = []
        game = ConsoleGame(
            GameMode.HUMAN_VS_COMPUTER,
            delay_ms=0,
            opponent=OpponentPolicy(
                computer_mark=Player.X, human_mark=Player.O, rng=random.Random(0)
            ),
            input_fn=scripted(["1", "q"]),
            output_fn=output.append,
        )

        assert game.start() is None
        text = "\n".join(output)
        assert text.index(">>> Computer plays cell 5") < text.index(">>> Computer plays cell 9")
        assert "Player O's Turn" in text

    def test_hint_command(self):
        output = []
        game = console(GameMode.HUMAN_VS_HUMAN, ["h", "1", "2", "4", "h", "q"], output)

        game.start()
        text = "\n".join(output)
        assert "Hint for X: Take the center (cell 5)" in text
        # X holds 1 and 4 (column 1-4-7), O holds 2
        assert "Hint for O: Block the opponent (cell 7)" in text

    def test_no_hint_once_game_is_over(self):
        output = []
        game = console(GameMode.HUMAN_VS_HUMAN, [], output)
        game.controller.start_game(GameMode.HUMAN_VS_HUMAN)
        for index in [0, 3, 1, 4, 2]:
            game.controller.handle_cell_click(index)

        game._show_hint()
        assert output[-1] == "The game is over."

    def test_taken_cell_lists_free_cells(self):
        output = []
        game = console(GameMode.HUMAN_VS_HUMAN, ["1", "5", "5", "q"], output)

        game.start()
        assert "Free cells: 2, 3, 4, 6, 7, 8, 9" in output

    def test_end_of_input(self):
        game = console(GameMode.HUMAN_VS_HUMAN, [], [])
        assert game.start() is None

    def test_state_reset_after_quit(self):
        game = console(GameMode.HUMAN_VS_COMPUTER, ["5", "q"], [])
        game.start()
        assert game.controller.game_state.board == [None] * 9
        assert game.scheduler.pending_count == 0


class TestMain:

    def test_parser_defaults(self):
        args = main.build_parser().parse_args([])
        assert args.mode is None
        assert args.no_ui is False
        assert args.delay_ms is None

    def test_parser_rejects_unknown_mode(self):
        with pytest.raises(SystemExit):
            main.build_parser().parse_args(["--mode", "robot"])

    def test_console_run(self, monkeypatch, capsys):
        commands = scripted(["5", "1", "q"])
        monkeypatch.setattr("builtins.input", commands)

        code = main.main(["--no-ui", "--mode", "human-computer", "--delay-ms", "0", "--seed", "3"])

        out = capsys.readouterr().out
        assert code == 0
        assert "Mode: human-computer" in out
        assert ">>> Computer plays cell 1" in out
        assert "Goodbye!" in out
