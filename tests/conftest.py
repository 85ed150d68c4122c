"""
Pytest fixtures for coup_resolver tests.
"""

import pytest

from coup_resolver.game import CoupGame
from coup_resolver.mediator import ActionMediator
from coup_resolver.reporter import RecordingObserver


@pytest.fixture
def observer() -> RecordingObserver:
    """Observer that keeps every resolution event."""
    return RecordingObserver()


@pytest.fixture
def game(observer: RecordingObserver) -> CoupGame:
    """A started two-player game: 2 coins and 2 influence each, 46 coins in the bank."""
    game = CoupGame(observers=[observer])
    game.add_player("Elder")
    game.add_player("Highlander")
    game.start_game()
    return game


@pytest.fixture
def elder(game: CoupGame):
    return game.get_player("Elder")


@pytest.fixture
def high(game: CoupGame):
    return game.get_player("Highlander")


@pytest.fixture
def mediator(observer: RecordingObserver) -> ActionMediator:
    """Empty mediator reporting to the shared observer."""
    return ActionMediator(observers=[observer])
