import numpy as np
import pytest

from connectfour.game.player import Player
from connectfour.game.rules import GameEngine
from connectfour.utils import GameState, Marker, MoveError
from tests.helpers import DRAW_ORDER_6X7


@pytest.fixture
def engine(board, players):
    return GameEngine(board, players)


def play(engine, columns):
    for column in columns:
        result = engine.submit_move(column)
        assert result.ok, f"column {column} rejected with {result.error}"


def test_first_player_opens_with_first_marker(engine, players):
    assert engine.state == GameState.AWAITING_MOVE
    assert engine.current_player is players[0]
    assert engine.current_marker == Marker.ONE


def test_turn_alternates_after_each_move(engine, players):
    engine.submit_move(3)
    assert engine.current_player is players[1]
    assert engine.current_marker == Marker.TWO

    engine.submit_move(3)
    assert engine.current_player is players[0]
    assert engine.board.cell(4, 3) == Marker.TWO


def test_vertical_four_wins_for_mover(engine, players):
    ann, _ = players
    play(engine, [0, 1, 0, 1, 0, 1, 0])

    assert engine.state == GameState.WON
    assert engine.winner is ann
    assert engine.is_over()


def test_winner_is_second_player(engine, players):
    _, bo = players
    play(engine, [0, 1, 0, 1, 0, 1, 2, 1])

    assert engine.state == GameState.WON
    assert engine.winner is bo


def test_full_column_keeps_turn_and_board(engine, players):
    play(engine, [4] * 6)
    before = engine.get_state()

    result = engine.submit_move(4)

    assert result.error == MoveError.COLUMN_FULL
    assert engine.current_player is players[0]
    assert engine.state == GameState.AWAITING_MOVE
    assert np.array_equal(engine.get_state(), before)


def test_invalid_column_keeps_turn(engine, players):
    engine.submit_move(0)
    result = engine.submit_move(7)

    assert result.error == MoveError.INVALID_COLUMN
    assert engine.current_player is players[1]
    assert engine.moves_made == [0]


def test_filled_board_without_four_is_a_draw(engine):
    play(engine, DRAW_ORDER_6X7[:-1])
    assert engine.state == GameState.AWAITING_MOVE

    engine.submit_move(DRAW_ORDER_6X7[-1])

    assert engine.state == GameState.DRAWN
    assert engine.winner is None
    assert engine.board.is_full()


def test_no_moves_after_terminal_state(engine, players):
    play(engine, [0, 1, 0, 1, 0, 1, 0])
    before = engine.get_state()

    result = engine.submit_move(3)

    assert result.error == MoveError.GAME_OVER
    assert engine.winner is players[0]
    assert np.array_equal(engine.get_state(), before)


@pytest.mark.parametrize("moves", [[], [2, 3], [0, 1, 0, 1, 0, 1, 0]])
def test_abort_from_any_state(engine, moves):
    play(engine, moves)

    engine.abort()

    assert engine.state == GameState.ABORTED
    assert engine.winner is None
    assert engine.submit_move(5).error == MoveError.GAME_OVER


def test_second_player_can_open(board, players):
    engine = GameEngine(board, players, opener=1)

    assert engine.current_player is players[1]
    assert engine.current_marker == Marker.TWO
    engine.submit_move(0)
    assert engine.board.cell(5, 0) == Marker.TWO
    assert engine.current_player is players[0]


def test_players_with_same_name_are_told_apart(board):
    twins = (Player("Sam"), Player("Sam"))
    engine = GameEngine(board, twins)
    play(engine, [6, 5, 6, 5, 6, 5, 4, 5])

    assert engine.winner is twins[1]


@pytest.mark.parametrize("opener", [-1, 2])
def test_opener_must_be_a_player_index(board, players, opener):
    with pytest.raises(ValueError):
        GameEngine(board, players, opener=opener)
