import pytest

from connectfour.debug import debug, DebugLevel
from connectfour.game.board import Board
from connectfour.game.player import Player


@pytest.fixture(autouse=True)
def quiet_debug():
    debug.configure(level=DebugLevel.NONE, log_file="", components=[])
    yield
    debug.configure(level=DebugLevel.WARNING, log_file="", components=[])


@pytest.fixture
def board():
    return Board()


@pytest.fixture
def players():
    return Player("Ann"), Player("Bo")
