import pytest

from connectfour.game.session import Session
from connectfour.utils import GameState, Marker, MoveError, SetupError
from tests.helpers import DRAW_ORDER_6X7

ANN_WINS = [0, 1, 0, 1, 0, 1, 0]  # Opener connects four in the first column
SECOND_WINS = [0, 1, 0, 1, 0, 1, 2, 1]  # The other player fills the second column


def start(players, games=1, dimensions=(6, 7)):
    result = Session.start(games, players[0], players[1], dimensions)
    assert result.ok, result.message
    return result.session


def play_game(session, columns):
    for column in columns:
        assert session.submit_move(column).ok
    return session.finish_game()


@pytest.mark.parametrize("dimensions, message", [
    ((4, 7), "Board rows should be from 5 to 9"),
    ((10, 7), "Board rows should be from 5 to 9"),
    ((6, 4), "Board columns should be from 5 to 9"),
    ((6, 10), "Board columns should be from 5 to 9"),
])
def test_start_rejects_dimensions(players, dimensions, message):
    result = Session.start(1, players[0], players[1], dimensions)

    assert not result.ok
    assert result.session is None
    assert result.error == SetupError.INVALID_DIMENSION
    assert result.message == message


@pytest.mark.parametrize("games", [0, -3])
def test_start_rejects_game_count(players, games):
    result = Session.start(games, players[0], players[1], (6, 7))

    assert result.error == SetupError.INVALID_GAME_COUNT
    assert result.session is None


def test_start_sets_up_first_game(players):
    session = start(players, games=3, dimensions=(9, 5))

    assert session.board.shape == (9, 5)
    assert session.game_index == 1
    assert session.games_remaining == 3
    assert session.opener is players[0]
    assert session.current_player is players[0]
    assert session.state == GameState.AWAITING_MOVE


def test_single_game_win(players):
    ann, bo = players
    session = start(players)

    outcome = play_game(session, ANN_WINS)

    assert outcome == GameState.WON
    assert (ann.score, bo.score) == (2, 0)
    assert session.state == GameState.FINISHED
    assert session.games_remaining == 0
    assert session.score_line() == "Ann: 2 Bo: 0"


def test_single_game_draw(players):
    ann, bo = players
    session = start(players)

    outcome = play_game(session, DRAW_ORDER_6X7)

    assert outcome == GameState.DRAWN
    assert (ann.score, bo.score) == (1, 1)
    assert session.is_over()


def test_finish_game_ignores_game_in_progress(players):
    session = start(players, games=2)
    session.submit_move(3)

    assert session.finish_game() == GameState.AWAITING_MOVE
    assert session.games_remaining == 2
    assert session.board.discs == 1
    assert players[0].score == 0


def test_opener_alternates_across_games(players):
    ann, bo = players
    session = start(players, games=4)
    openers = []

    for _ in range(4):
        openers.append(session.opener)
        assert session.current_player is session.opener
        play_game(session, ANN_WINS)

    assert openers == [ann, bo, ann, bo]
    assert session.state == GameState.FINISHED


def test_next_game_starts_on_reset_board(players):
    session = start(players, games=2)
    play_game(session, ANN_WINS)

    assert session.game_index == 2
    assert session.board.discs == 0
    assert session.state == GameState.AWAITING_MOVE
    assert session.engine.state == GameState.AWAITING_MOVE
    # The second player keeps their own disc when opening
    session.submit_move(0)
    assert session.board.cell(5, 0) == Marker.TWO


def test_score_equals_two_per_win_plus_draws(players):
    ann, bo = players
    session = start(players, games=3)

    assert play_game(session, ANN_WINS) == GameState.WON        # Ann opens and wins
    assert play_game(session, DRAW_ORDER_6X7) == GameState.DRAWN  # Bo opens
    assert play_game(session, SECOND_WINS) == GameState.WON     # Ann opens, Bo wins

    assert session.wins == {0: 1, 1: 1}
    assert session.draws == 1
    assert ann.score == 2 * session.wins[0] + session.draws == 3
    assert bo.score == 2 * session.wins[1] + session.draws == 3
    assert session.state == GameState.FINISHED


def test_scores_never_decrease(players):
    ann, bo = players
    session = start(players, games=3)
    history = [(0, 0)]

    for columns in (DRAW_ORDER_6X7, ANN_WINS, DRAW_ORDER_6X7):
        play_game(session, columns)
        history.append((ann.score, bo.score))

    assert all(a1 >= a0 and b1 >= b0 for (a0, b0), (a1, b1) in zip(history, history[1:]))


def test_abort_ends_session_without_scoring(players):
    session = start(players, games=2)
    session.submit_move(0)

    session.abort()

    assert session.state == GameState.ABORTED
    assert session.engine.state == GameState.ABORTED
    assert session.submit_move(1).error == MoveError.GAME_OVER
    assert session.finish_game() == GameState.ABORTED
    assert (players[0].score, players[1].score) == (0, 0)
    assert session.games_remaining == 2


def test_moves_rejected_after_session_finished(players):
    session = start(players)
    play_game(session, ANN_WINS)

    assert session.submit_move(3).error == MoveError.GAME_OVER
    assert session.finish_game() == GameState.WON
    assert players[0].score == 2
