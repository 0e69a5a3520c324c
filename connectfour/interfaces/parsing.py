"""
parsing.py - Parsing of raw text input for the Connect Four text interface

Each parser returns the parsed value together with an error message; exactly
one of them is None. Callers print the message and prompt again.
"""

import re
from dataclasses import dataclass
from typing import Optional, Tuple

from connectfour.utils import (ABORT_KEYWORD, DEFAULT_ROWS, DEFAULT_COLS, MIN_DIMENSION,
                               MAX_DIMENSION, MoveError, dimension_in_range)

DIMENSION_PATTERN = re.compile(r"([0-9]+)x([0-9]+)")
NUMBER_PATTERN = re.compile(r"-?[0-9]+")
WHITESPACE = re.compile(r"\s+")

INVALID_INPUT = "Invalid input"


@dataclass(frozen=True)
class ParsedMove:
    """A column chosen by a player (0-indexed), or the request to stop playing."""
    column: Optional[int] = None
    abort: bool = False
    error: Optional[MoveError] = None
    message: Optional[str] = None


def _to_int(text: str) -> Optional[int]:
    # ASCII digits with an optional minus sign, nothing else
    if NUMBER_PATTERN.fullmatch(text) is None:
        return None
    return int(text)


def parse_dimensions(text: str) -> Tuple[Optional[Tuple[int, int]], Optional[str]]:
    """
    Parse a board size given as ``<rows>x<cols>``.

    Case and whitespace are ignored, so ``" 7 X 8 "`` reads as 7 x 8. An
    empty answer selects the default 6 x 7 board.

    Args:
        text: Raw line typed by the user

    Returns:
        ((rows, cols), None) on success, (None, message) otherwise
    """
    compact = WHITESPACE.sub("", text.lower())
    if not compact:
        return (DEFAULT_ROWS, DEFAULT_COLS), None

    match = DIMENSION_PATTERN.fullmatch(compact)
    if match is None:
        return None, INVALID_INPUT

    rows, cols = int(match.group(1)), int(match.group(2))
    if not dimension_in_range(rows):
        return None, f"Board rows should be from {MIN_DIMENSION} to {MAX_DIMENSION}"
    if not dimension_in_range(cols):
        return None, f"Board columns should be from {MIN_DIMENSION} to {MAX_DIMENSION}"
    return (rows, cols), None


def parse_game_count(text: str) -> Tuple[Optional[int], Optional[str]]:
    """Parse the number of games; empty means a single game."""
    text = text.strip()
    if not text:
        return 1, None
    count = _to_int(text)
    if count is None or count <= 0:
        return None, INVALID_INPUT
    return count, None


def parse_move(text: str, cols: int) -> ParsedMove:
    """
    Parse a move typed by a player.

    Players number columns from 1; the parsed column is 0-indexed. The abort
    keyword ends the session.

    Args:
        text: Raw line typed by the player
        cols: Number of columns on the board

    Returns:
        ParsedMove with the column, the abort flag, or an error
    """
    if text == ABORT_KEYWORD:
        return ParsedMove(abort=True)

    number = _to_int(text)
    if number is None:
        return ParsedMove(error=MoveError.INVALID_COLUMN, message="Incorrect column number")

    if not 1 <= number <= cols:
        return ParsedMove(error=MoveError.INVALID_COLUMN,
                          message=f"The column number is out of range (1 - {cols})")
    return ParsedMove(column=number - 1)
