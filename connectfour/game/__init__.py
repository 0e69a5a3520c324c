"""
connectfour.game - Core game mechanics for Connect Four

This package contains the board representation, win detection, the game
state machine and multi-game session management.
"""

from connectfour.game.board import Board
from connectfour.game.player import Player
from connectfour.game.rules import GameEngine
from connectfour.game.session import Session, SessionStart
from connectfour.game.win_detector import check_win, winning_line

__all__ = ['Board', 'Player', 'GameEngine', 'Session', 'SessionStart', 'check_win', 'winning_line']
