"""
Exceptions raised by the tic-tac-toe engine.
"""


class TicTacToeError(Exception):
    """Base class for all engine errors."""


class InvalidMove(TicTacToeError):
    """
    A move was rejected.

    Raised for an out-of-range index, an occupied cell, the wrong player,
    or a game that is already over. The game state is left untouched, so
    callers can simply ignore the move.
    """


class PolicyPreconditionError(TicTacToeError):
    """
    The opponent was asked to move when it should not have been.

    This is a caller bug (no empty cell, game over, or not the computer's
    turn), not something to recover from at runtime.
    """
