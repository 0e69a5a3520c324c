"""
connectfour - Two-player Connect Four engine with a text interface

This package provides the board representation, win detection, the game
state machine, multi-game sessions with a running score, and a terminal
interface for playing them.
"""

# Version number
__version__ = '0.1.0'
