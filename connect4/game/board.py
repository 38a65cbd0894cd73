"""
board.py - Board representation for Connect Four

This module implements the Board class: a rows x cols grid of cell states
with the gravity-aware queries and the raw place/remove operations used by
both the game session and the search engine.
"""

from typing import List, Optional

import numpy as np

from connect4.debug import debug
from connect4.utils import (DEFAULT_ROWS, DEFAULT_COLS, Player,
                            render_board_ascii, validate_dimensions)


class Board:
    """
    Represents a Connect Four game board.

    Row 0 is the top of the board and row ``rows - 1`` is the floor. The board
    only stores cells; turn order, history and results belong to the session.
    """

    def __init__(self, rows: int = DEFAULT_ROWS, cols: int = DEFAULT_COLS):
        """
        Create an empty board.

        Raises:
            InvalidDimensions: if rows or cols is below 4
        """
        validate_dimensions(rows, cols)
        debug.debug(f"Creating {rows}x{cols} board", "board")
        self.rows = rows
        self.cols = cols
        self.grid = np.zeros((rows, cols), dtype=np.int8)

    @property
    def center_column(self) -> int:
        return self.cols // 2

    def copy(self) -> 'Board':
        """Create an independent copy of this board."""
        new_board = Board(self.rows, self.cols)
        new_board.grid = self.grid.copy()
        return new_board

    def in_bounds(self, row: int, column: int) -> bool:
        return 0 <= row < self.rows and 0 <= column < self.cols

    def cell(self, row: int, column: int) -> Player:
        return Player(int(self.grid[row, column]))

    def lowest_empty_row(self, column: int) -> Optional[int]:
        """
        Find the row a piece dropped into ``column`` would land on.

        Scans from the floor upward and stops at the first empty cell.

        Returns:
            The row index, or None if the column is full or out of range
        """
        if not 0 <= column < self.cols:
            return None
        for row in range(self.rows - 1, -1, -1):
            if self.grid[row, column] == Player.EMPTY.value:
                return row
        return None

    def has_room(self, column: int) -> bool:
        return self.lowest_empty_row(column) is not None

    def valid_columns(self) -> List[int]:
        """Columns that can still take a piece, in ascending order."""
        return [col for col in range(self.cols) if self.grid[0, col] == Player.EMPTY.value]

    def place(self, row: int, column: int, player: Player) -> None:
        """
        Set a cell. The row must come from lowest_empty_row(column);
        gravity is not re-checked here.
        """
        self.grid[row, column] = player.value

    def remove(self, row: int, column: int) -> None:
        """Clear a cell (undo and search backtracking)."""
        self.grid[row, column] = Player.EMPTY.value

    def is_full(self) -> bool:
        return bool(np.all(self.grid != Player.EMPTY.value))

    def is_empty(self) -> bool:
        return not self.grid.any()

    def render(self) -> str:
        return render_board_ascii(self.grid)

    def __str__(self) -> str:
        return self.render()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.grid.shape == other.grid.shape and bool(np.array_equal(self.grid, other.grid))

    __hash__ = None
