"""
utils.py - Shared constants, enumerations and helpers for Connect Four

This module holds the game constants, the player/difficulty/status
enumerations, the axis vectors used by win detection and the heuristic,
and a few small helpers for parsing board sizes and rendering grids.
"""

from enum import Enum, auto
from typing import Dict, List, Tuple

import numpy as np

# Game constants
DEFAULT_ROWS = 6
DEFAULT_COLS = 7
CONNECT_N = 4  # Number of pieces in a row to win
MIN_DIMENSION = CONNECT_N  # Smallest board on which a line of four fits

# Board sizes offered by the front end
BOARD_SIZES = ["6x7", "7x8", "8x9"]

# Turn timer and computer pacing (seconds)
DEFAULT_TIME_LIMIT = 30
COMPUTER_DELAY = 0.5


class InvalidDimensions(ValueError):
    """Raised when a board is requested with fewer than MIN_DIMENSION rows or columns."""


class Player(Enum):
    """Enumeration representing players and cell states."""
    EMPTY = 0
    RED = 1      # Moves first
    YELLOW = 2   # Computer side when playing against the computer

    def other(self) -> 'Player':
        """Get the other player."""
        if self == Player.RED:
            return Player.YELLOW
        elif self == Player.YELLOW:
            return Player.RED
        return Player.EMPTY

    @property
    def label(self) -> str:
        """Lower-case name used for score keys and messages."""
        return self.name.lower()

    def __str__(self):
        if self == Player.EMPTY:
            return "."
        elif self == Player.RED:
            return "R"
        else:
            return "Y"


class GameStatus(Enum):
    """Enumeration representing where a game stands."""
    IN_PROGRESS = auto()
    WON = auto()
    DRAW = auto()

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self != GameStatus.IN_PROGRESS


class Difficulty(Enum):
    """Computer opponent strength."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


# Search depth per difficulty; EASY plays a random legal column
SEARCH_DEPTHS: Dict[Difficulty, int] = {
    Difficulty.EASY: 0,
    Difficulty.MEDIUM: 4,
    Difficulty.HARD: 6,
}


# Axis vectors (row, col): horizontal, vertical, and the two diagonals
AXES: List[Tuple[int, int]] = [(0, 1), (1, 0), (1, 1), (1, -1)]


def validate_dimensions(rows: int, cols: int) -> None:
    """
    Check that a board of the given size can hold a line of four.

    Raises:
        InvalidDimensions: if rows or cols is below MIN_DIMENSION
    """
    if rows < MIN_DIMENSION or cols < MIN_DIMENSION:
        raise InvalidDimensions(
            f"Board must be at least {MIN_DIMENSION}x{MIN_DIMENSION}, got {rows}x{cols}")


def parse_board_size(size: str) -> Tuple[int, int]:
    """
    Parse a size string such as "6x7" into (rows, cols).

    Raises:
        InvalidDimensions: if the string is malformed or too small
    """
    try:
        rows, cols = (int(part) for part in size.lower().split('x'))
    except ValueError:
        raise InvalidDimensions(f"Board size must look like ROWSxCOLS, got '{size}'")
    validate_dimensions(rows, cols)
    return rows, cols


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render a board grid as ASCII art.

    Args:
        grid: 2D array of Player values

    Returns:
        ASCII representation of the board with 1-based column numbers
    """
    rows, cols = grid.shape
    symbols = {player.value: str(player) for player in Player}
    width = cols * 2 - 1

    result = ["|" + "-" * width + "|"]
    for row in range(rows):
        result.append("|" + " ".join(symbols[int(v)] for v in grid[row]) + "|")
    result.append("|" + "-" * width + "|")
    # Column numbers wrap after 9 to keep alignment
    result.append("|" + " ".join(str((c + 1) % 10) for c in range(cols)) + "|")

    return "\n".join(result)
