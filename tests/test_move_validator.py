"""
Tests for tictactoe.move_validator
"""

from tictactoe import GameState, MoveValidator, Player

from conftest import play


class TestValidateMove:

    def test_valid_move(self, game: GameState):
        result = MoveValidator().validate_move(game, 4, Player.X)
        assert result.is_valid
        assert result.error_message is None

    def test_game_over_reported_first(self, game: GameState):
        play(game, [0, 3, 1, 4, 2])
        result = MoveValidator().validate_move(game, 42, Player.X)
        assert not result.is_valid
        assert result.error_message == "Game is already over!"

    def test_out_of_range(self, game: GameState):
        result = MoveValidator().validate_move(game, 9, Player.X)
        assert not result.is_valid
        assert "0-8" in result.error_message

    def test_wrong_turn(self, game: GameState):
        result = MoveValidator().validate_move(game, 0, Player.O)
        assert result.error_message == "It's not O's turn!"

    def test_occupied(self, game: GameState):
        game.apply_move(4, Player.X)
        result = MoveValidator().validate_move(game, 4, Player.O)
        assert result.error_message == "Cell 4 is already occupied by X"


class TestValidMoves:

    def test_all_cells_at_start(self, game: GameState):
        assert MoveValidator().get_valid_moves(game) == list(range(9))

    def test_none_after_game_over(self, game: GameState):
        play(game, [0, 3, 1, 4, 2])
        assert MoveValidator().get_valid_moves(game) == []
