"""
board.py - Board representation for the Connect Four engine

This module implements the Board class: the rows x cols grid of cells, the
gravity drop that is the only way a disc enters the grid, and the fullness
queries the game engine needs after every move.
"""

from typing import List

import numpy as np

from connectfour.debug import debug
from connectfour.utils import (DEFAULT_ROWS, DEFAULT_COLS, MIN_DIMENSION, MAX_DIMENSION,
                               Marker, MoveError, MoveResult, dimension_in_range,
                               render_board_ascii)


class Board:
    """
    Represents a Connect Four game board.

    Row 0 is the top of the board and row ``rows - 1`` the bottom, so a disc
    dropped into an empty column lands at the highest row index.
    """

    def __init__(self, rows: int = DEFAULT_ROWS, cols: int = DEFAULT_COLS):
        """
        Initialize an empty board.

        Args:
            rows: Number of rows, between 5 and 9
            cols: Number of columns, between 5 and 9

        Raises:
            ValueError: If either dimension is outside the allowed range
        """
        if not dimension_in_range(rows) or not dimension_in_range(cols):
            raise ValueError(
                f"Board dimensions must be from {MIN_DIMENSION} to {MAX_DIMENSION}, "
                f"got {rows} x {cols}"
            )
        debug.debug(f"Initializing new {rows} x {cols} Board", "board")
        self.rows = rows
        self.cols = cols
        self.reset()

    def reset(self) -> None:
        """Reset the board to an empty state."""
        debug.debug("Resetting board", "board")
        self.grid = np.full((self.rows, self.cols), Marker.EMPTY.value, dtype=int)
        self.discs = 0

    def copy(self) -> 'Board':
        """
        Create a deep copy of the current board.

        Returns:
            A new Board instance with the same cells
        """
        debug.trace("Creating board copy", "board")
        new_board = Board(self.rows, self.cols)
        new_board.grid = self.grid.copy()
        new_board.discs = self.discs
        return new_board

    @property
    def shape(self):
        return self.rows, self.cols

    def cell(self, row: int, col: int) -> Marker:
        """Get the marker occupying a cell."""
        return Marker(int(self.grid[row, col]))

    def in_range(self, column: int) -> bool:
        return 0 <= column < self.cols

    def is_column_full(self, column: int) -> bool:
        """
        Check if a column can take no more discs.

        Args:
            column: Column index (0-indexed)

        Returns:
            True if the topmost cell of the column is occupied, False for
            columns outside the board
        """
        if not self.in_range(column):
            return False
        return bool(self.grid[0, column] != Marker.EMPTY.value)

    def is_full(self) -> bool:
        """Check if no column accepts a move."""
        return bool(np.all(self.grid[0] != Marker.EMPTY.value))

    def valid_moves(self) -> List[int]:
        """
        Get a list of columns where a disc can be dropped.

        Returns:
            List of valid column indices
        """
        return [col for col in range(self.cols) if not self.is_column_full(col)]

    def drop_disc(self, column: int, marker: Marker) -> MoveResult:
        """
        Drop a disc into a column.

        The disc lands in the lowest empty cell of the column.

        Args:
            column: The column to drop into (0-indexed)
            marker: Marker of the player making the move

        Returns:
            MoveResult holding the row used, or the reason the drop was rejected
        """
        if not self.in_range(column):
            debug.debug(f"Rejected drop: column {column} out of bounds", "board")
            return MoveResult(error=MoveError.INVALID_COLUMN)

        if self.is_column_full(column):
            debug.debug(f"Rejected drop: column {column} is full", "board")
            return MoveResult(error=MoveError.COLUMN_FULL)

        empty_rows = np.flatnonzero(self.grid[:, column] == Marker.EMPTY.value)
        row = int(empty_rows[-1])
        self.grid[row, column] = marker.value
        self.discs += 1
        debug.trace(f"Placed {marker.name} at ({row}, {column})", "board")
        return MoveResult(row=row)

    def get_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            Copy of the grid of Marker values
        """
        return self.grid.copy()

    def render(self) -> str:
        return render_board_ascii(self.grid)

    def __str__(self) -> str:
        return self.render()


if __name__ == "__main__":
    board = Board()
    for col in [3, 3, 4, 2, 3]:
        result = board.drop_disc(col, Marker.ONE)
        print(f"Drop into column {col}: {result}")
    print(board)
