"""
Shared test fixtures for tictactoe tests.
"""

import random
from typing import Iterable, List

import pytest

from tictactoe import (
    GameController, GameMode, GameState, OpponentPolicy, QueueScheduler,
    WinChecker,
)


def play(game: GameState, indices: Iterable[int]) -> GameState:
    """Apply moves for whoever is to move, in order."""
    for index in indices:
        game.apply_move(index, game.current_player)
    return game


def reachable_states() -> List[GameState]:
    """
    Every position reachable by legal play from an empty board, once each,
    finished games included.
    """
    seen = set()
    states = []

    def visit(state: GameState):
        key = tuple(state.board)
        if key in seen:
            return
        seen.add(key)
        states.append(state)
        if state.is_game_over:
            return
        for index in state.get_available_cells():
            child = state.copy()
            child.apply_move(index, child.current_player)
            visit(child)

    visit(GameState())
    return states


@pytest.fixture
def game() -> GameState:
    """Fresh human-vs-human game."""
    return GameState()


@pytest.fixture
def checker() -> WinChecker:
    return WinChecker()


@pytest.fixture
def policy() -> OpponentPolicy:
    """Opponent with a seeded random source."""
    return OpponentPolicy(rng=random.Random(1234))


@pytest.fixture
def scheduler() -> QueueScheduler:
    return QueueScheduler()


@pytest.fixture
def controller(scheduler: QueueScheduler, policy: OpponentPolicy) -> GameController:
    """Controller on a manual scheduler, no game started."""
    return GameController(scheduler=scheduler, opponent=policy)


@pytest.fixture
def vs_computer(controller: GameController) -> GameController:
    """Controller with a human-vs-computer game started."""
    controller.start_game(GameMode.HUMAN_VS_COMPUTER)
    return controller
