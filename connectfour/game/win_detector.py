"""
win_detector.py - Four-in-a-row detection for the Connect Four engine

Every line of the board is walked once per direction, keeping the length of
the current run of the target marker. A run reaching CONNECT_N anywhere on
the board is a win; only in-bounds cells are ever visited.
"""

from typing import Iterator, List, Tuple

import numpy as np

from connectfour.debug import debug
from connectfour.game.board import Board
from connectfour.utils import CONNECT_N, DIRECTION_VECTORS, Marker, is_valid_position

Coord = Tuple[int, int]  # (row, col)


def _line_starts(shape: Tuple[int, int], dr: int, dc: int) -> Iterator[Coord]:
    """Yield the first cell of every line running in direction (dr, dc)."""
    rows, cols = shape
    for row in range(rows):
        for col in range(cols):
            # A line starts where stepping backwards leaves the board
            if not is_valid_position(row - dr, col - dc, shape):
                yield row, col


def _winning_runs(mask: np.ndarray) -> Iterator[List[Coord]]:
    """
    Yield runs of at least CONNECT_N True cells along any line.

    Args:
        mask: Boolean grid, True where the target marker sits

    Yields:
        The cells of each winning run, in line order
    """
    shape = mask.shape
    for dr, dc in DIRECTION_VECTORS.values():
        for row, col in _line_starts(shape, dr, dc):
            run: List[Coord] = []
            r, c = row, col
            while is_valid_position(r, c, shape):
                if mask[r, c]:
                    run.append((r, c))
                else:
                    if len(run) >= CONNECT_N:
                        yield run
                    run = []
                r += dr
                c += dc
            if len(run) >= CONNECT_N:
                yield run


def winning_line(board: Board, marker: Marker) -> List[Coord]:
    """
    Find a line of four or more connected discs of one marker.

    Args:
        board: The board to inspect
        marker: The marker to look for

    Returns:
        The cells of the first winning run found, or an empty list
    """
    if marker == Marker.EMPTY:
        return []
    mask = board.grid == marker.value
    if int(mask.sum()) < CONNECT_N:
        return []
    return next(_winning_runs(mask), [])


def check_win(board: Board, marker: Marker) -> bool:
    """
    Check if a marker has four in a row anywhere on the board.

    Horizontal, vertical and both diagonal lines are considered. Several
    winning lines at once still count as a single win.

    Args:
        board: The board to inspect
        marker: The marker of the player who just moved

    Returns:
        True if the marker has a winning line, False otherwise
    """
    line = winning_line(board, marker)
    if line:
        debug.debug(f"{marker.name} connected {len(line)} at {line}", "win")
        return True
    return False


if __name__ == "__main__":
    board = Board()
    for i in range(4):
        for _ in range(i):
            board.drop_disc(i, Marker.TWO)
        board.drop_disc(i, Marker.ONE)
    print(board)
    print("ONE wins:", check_win(board, Marker.ONE), winning_line(board, Marker.ONE))
    print("TWO wins:", check_win(board, Marker.TWO))
