"""
utils.py - Constants, enumerations and helpers for the Connect Four engine

This module provides the board limits, scoring constants, the marker and
outcome enumerations, and the ASCII renderer shared by the game and the
text interface.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, Optional, Tuple

import numpy as np

# Board constants
DEFAULT_ROWS = 6
DEFAULT_COLS = 7
MIN_DIMENSION = 5
MAX_DIMENSION = 9
CONNECT_N = 4  # Number of pieces in a row to win

# Scoring
POINTS_FOR_WIN = 2
POINTS_FOR_DRAW = 1

# Typed instead of a column number to end the whole session
ABORT_KEYWORD = "end"


class Marker(Enum):
    """Enumeration representing cell contents and the disc of each player."""
    EMPTY = 0
    ONE = 1    # First player
    TWO = 2    # Second player

    def __str__(self):
        return MARKER_SYMBOLS[self]


MARKER_SYMBOLS: Dict[Marker, str] = {
    Marker.EMPTY: " ",
    Marker.ONE: "o",
    Marker.TWO: "*",
}


class GameState(Enum):
    """States of a single game, and of a session as a whole."""
    AWAITING_MOVE = auto()
    WON = auto()
    DRAWN = auto()
    ABORTED = auto()
    FINISHED = auto()  # Session only: every requested game has been played

    def is_terminal(self) -> bool:
        """Check if no further moves can be made in this state."""
        return self != GameState.AWAITING_MOVE


class MoveError(Enum):
    """Reasons a move is rejected. The same player must retry."""
    INVALID_COLUMN = auto()
    COLUMN_FULL = auto()
    GAME_OVER = auto()


class SetupError(Enum):
    """Reasons a session cannot be started with the given settings."""
    INVALID_DIMENSION = auto()
    INVALID_GAME_COUNT = auto()


class Direction(Enum):
    """Enumeration representing the four line directions on the board."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_DOWN = auto()  # From top-left to bottom-right
    DIAGONAL_UP = auto()  # From bottom-left to top-right


# Direction vectors (row, col) for each direction
DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN: (1, 1),
    Direction.DIAGONAL_UP: (-1, 1),
}


@dataclass(frozen=True)
class MoveResult:
    """
    Outcome of dropping a disc.

    Exactly one of ``row`` and ``error`` is set: the row the disc landed in,
    or the reason the move was rejected.
    """
    row: Optional[int] = None
    error: Optional[MoveError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def dimension_in_range(value: int) -> bool:
    """Check if a row or column count is an allowed board size."""
    return MIN_DIMENSION <= value <= MAX_DIMENSION


def is_valid_position(row: int, col: int, shape: Tuple[int, int]) -> bool:
    """
    Check if a position is within the board boundaries.

    Args:
        row: Row index
        col: Column index
        shape: (rows, cols) of the board

    Returns:
        True if position is valid, False otherwise
    """
    rows, cols = shape
    return 0 <= row < rows and 0 <= col < cols


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render the board as box-drawn text.

    The first line holds the 1-indexed column numbers, every row is wrapped
    in vertical separators, and a footer closes the bottom of the board.

    Args:
        grid: The board grid of Marker values

    Returns:
        Text representation of the board
    """
    rows, cols = grid.shape
    lines = ["", "".join(f" {j}" for j in range(1, cols + 1))]

    for row in range(rows):
        cells = [MARKER_SYMBOLS[Marker(int(value))] for value in grid[row]]
        lines.append("║" + "║".join(cells) + "║")

    lines.append("╚" + "═╩" * (cols - 1) + "═╝")
    return "\n".join(lines)
