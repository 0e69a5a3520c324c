"""
rules.py - Game state machine for a single Connect Four game

This module provides the GameEngine, which owns the turn order of one game,
validates and applies moves through the Board, and reports the terminal
outcome once a player connects four or the board fills up.
"""

from typing import Optional, Sequence, Tuple

import numpy as np

from connectfour.debug import debug
from connectfour.game.board import Board
from connectfour.game.player import Player
from connectfour.game.win_detector import check_win
from connectfour.utils import GameState, Marker, MoveError, MoveResult

# Disc of the first and second player of the session
PLAYER_MARKERS: Tuple[Marker, Marker] = (Marker.ONE, Marker.TWO)


class GameEngine:
    """
    Runs one game between two players on a board.

    The engine starts in ``AWAITING_MOVE`` and ends in ``WON``, ``DRAWN`` or
    ``ABORTED``. Terminal states accept no further moves; a new engine on a
    reset board is needed to play again.
    """

    def __init__(self, board: Board, players: Sequence[Player], opener: int = 0):
        """
        Initialize a game.

        Args:
            board: An empty board the game is played on
            players: The first and second player of the session
            opener: Index into ``players`` of whoever moves first
        """
        if len(players) != 2:
            raise ValueError("A game needs exactly two players")
        if opener not in (0, 1):
            raise ValueError(f"Opener must be 0 or 1, got {opener}")

        self.board = board
        self.players = tuple(players)
        self.opener = opener
        self._current = opener
        self._state = GameState.AWAITING_MOVE
        self._winner: Optional[Player] = None
        self.moves_made = []
        debug.debug(f"New game, {self.current_player.name} opens", "engine")

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def winner(self) -> Optional[Player]:
        """The winning player once the game is ``WON``, otherwise None."""
        return self._winner

    @property
    def current_player(self) -> Player:
        return self.players[self._current]

    @property
    def current_marker(self) -> Marker:
        return PLAYER_MARKERS[self._current]

    def is_over(self) -> bool:
        return self._state.is_terminal()

    def get_state(self) -> np.ndarray:
        """Snapshot of the board for presentation."""
        return self.board.get_state()

    def submit_move(self, column: int) -> MoveResult:
        """
        Drop the current player's disc into a column.

        A rejected move leaves the board and the turn untouched, so the same
        player has to try again.

        Args:
            column: Column to play (0-indexed)

        Returns:
            MoveResult with the landing row, or the reason for rejection
        """
        if self.is_over():
            debug.debug(f"Move in column {column} after game ended ({self._state.name})", "engine")
            return MoveResult(error=MoveError.GAME_OVER)

        player = self.current_player
        marker = self.current_marker
        result = self.board.drop_disc(column, marker)
        if not result.ok:
            debug.info(f"{player.name} tried column {column}: {result.error.name}", "engine")
            return result

        self.moves_made.append(column)

        debug.start_timer("win_check")
        won = check_win(self.board, marker)
        debug.end_timer("win_check", "engine")

        if won:
            self._state = GameState.WON
            self._winner = player
            debug.info(f"{player.name} wins after {len(self.moves_made)} moves", "engine")
        elif self.board.is_full():
            self._state = GameState.DRAWN
            debug.info("Game ends in a draw", "engine")
        else:
            self._current = 1 - self._current
            debug.trace(f"Turn passes to {self.current_player.name}", "engine")

        return result

    def abort(self) -> None:
        """End the game immediately, from any state."""
        debug.info(f"Game aborted in state {self._state.name}", "engine")
        self._state = GameState.ABORTED
        self._winner = None
