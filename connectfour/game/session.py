"""
session.py - Multi-game Connect Four sessions

A Session plays one or more games between the same two players on the same
board, keeps the running score, and alternates which player opens each game.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from connectfour.debug import debug
from connectfour.game.board import Board
from connectfour.game.player import Player
from connectfour.game.rules import GameEngine
from connectfour.utils import (DEFAULT_ROWS, DEFAULT_COLS, MIN_DIMENSION, MAX_DIMENSION,
                               POINTS_FOR_DRAW, POINTS_FOR_WIN, GameState, MoveResult,
                               SetupError, dimension_in_range)


@dataclass(frozen=True)
class SessionStart:
    """Result of trying to start a session: the session, or why it failed."""
    session: Optional["Session"] = None
    error: Optional[SetupError] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None


class Session:
    """
    A run of games between two fixed players with a persistent score.

    Use ``Session.start`` to create one; it validates the settings and
    reports problems instead of raising.
    """

    def __init__(self, number_of_games: int, first_player: Player, second_player: Player,
                 dimensions: Tuple[int, int] = (DEFAULT_ROWS, DEFAULT_COLS)):
        rows, cols = dimensions
        self.players = (first_player, second_player)
        self.board = Board(rows, cols)
        self.total_games = number_of_games
        self.games_remaining = number_of_games
        self.game_index = 1
        self.wins = {0: 0, 1: 0}
        self.draws = 0
        self._state = GameState.AWAITING_MOVE
        self.engine = GameEngine(self.board, self.players, opener=0)

    @classmethod
    def start(cls, number_of_games: int, first_player: Player, second_player: Player,
              dimensions: Tuple[int, int] = (DEFAULT_ROWS, DEFAULT_COLS)) -> SessionStart:
        """
        Validate the settings and start the first game.

        Args:
            number_of_games: How many games to play, at least 1
            first_player: Player opening the first game (marker 'o')
            second_player: The other player (marker '*')
            dimensions: (rows, cols), each from 5 to 9

        Returns:
            SessionStart with the new session, or the setup error
        """
        rows, cols = dimensions
        if not dimension_in_range(rows):
            return SessionStart(error=SetupError.INVALID_DIMENSION,
                                message=f"Board rows should be from {MIN_DIMENSION} to {MAX_DIMENSION}")
        if not dimension_in_range(cols):
            return SessionStart(error=SetupError.INVALID_DIMENSION,
                                message=f"Board columns should be from {MIN_DIMENSION} to {MAX_DIMENSION}")
        if number_of_games < 1:
            return SessionStart(error=SetupError.INVALID_GAME_COUNT,
                                message="Number of games should be at least 1")

        debug.info(f"Session {first_player.name} VS {second_player.name}, "
                   f"{rows} x {cols}, {number_of_games} game(s)", "session")
        return SessionStart(session=cls(number_of_games, first_player, second_player, (rows, cols)))

    @property
    def state(self) -> GameState:
        """``AWAITING_MOVE`` while games remain, then ``FINISHED`` or ``ABORTED``."""
        return self._state

    def is_over(self) -> bool:
        return self._state.is_terminal()

    @property
    def first_player(self) -> Player:
        return self.players[0]

    @property
    def second_player(self) -> Player:
        return self.players[1]

    @property
    def current_player(self) -> Player:
        return self.engine.current_player

    @property
    def opener(self) -> Player:
        """The player who moved first in the current game."""
        return self.players[self.engine.opener]

    def submit_move(self, column: int) -> MoveResult:
        """Play a move (0-indexed column) in the current game."""
        return self.engine.submit_move(column)

    def finish_game(self) -> GameState:
        """
        Score the current game and set up the next one.

        Has no effect while the current game is still being played.

        Returns:
            The terminal state of the game that was scored
        """
        outcome = self.engine.state
        if outcome not in (GameState.WON, GameState.DRAWN) or self.is_over():
            return outcome

        if outcome == GameState.WON:
            winner = self.engine.winner
            winner.award(POINTS_FOR_WIN)
            self.wins[0 if winner is self.players[0] else 1] += 1
        else:
            for player in self.players:
                player.award(POINTS_FOR_DRAW)
            self.draws += 1

        self.games_remaining -= 1
        debug.info(f"Game #{self.game_index} ended {outcome.name}; {self.score_line()}", "session")

        if self.games_remaining > 0:
            self._next_game()
        else:
            self._state = GameState.FINISHED
            debug.info("Session finished", "session")

        return outcome

    def _next_game(self) -> None:
        # The opener flips every game, whoever made the last move
        next_opener = 1 - self.engine.opener
        self.board.reset()
        self.game_index += 1
        self.engine = GameEngine(self.board, self.players, opener=next_opener)

    def abort(self) -> None:
        """End the session immediately, from any state."""
        self.engine.abort()
        self._state = GameState.ABORTED
        debug.info(f"Session aborted during game #{self.game_index}", "session")

    def score_line(self) -> str:
        a, b = self.first_player, self.second_player
        return f"{a.name}: {a.score} {b.name}: {b.score}"
