"""
rules.py - Win and draw detection for Connect Four

check_win inspects the four axes through the most recently placed piece.
find_any_win is the whole-board scan the search engine uses to spot
terminal positions.
"""

from typing import List, Optional, Tuple

from connect4.debug import debug
from connect4.game.board import Board
from connect4.utils import AXES, CONNECT_N, Player

Cell = Tuple[int, int]


def check_win(board: Board, row: int, column: int) -> Optional[List[Cell]]:
    """
    Check whether the piece at (row, column) completes a line of four.

    The piece's own owner is the player being checked. Along each axis the
    run is extended up to CONNECT_N - 1 steps in both directions.

    Args:
        board: The board to inspect
        row: Row of the piece just placed
        column: Column of the piece just placed

    Returns:
        The cells of the winning run (origin first, possibly more than four),
        or None if no axis reaches four
    """
    grid = board.grid
    player_value = grid[row, column]
    if player_value == Player.EMPTY.value:
        return None

    for dr, dc in AXES:
        cells = [(row, column)]
        for sign in (1, -1):
            for step in range(1, CONNECT_N):
                r = row + sign * dr * step
                c = column + sign * dc * step
                if not board.in_bounds(r, c) or grid[r, c] != player_value:
                    break
                cells.append((r, c))

        if len(cells) >= CONNECT_N:
            debug.trace(f"Winning run {cells} along axis ({dr}, {dc})", "rules")
            return cells

    return None


def find_any_win(board: Board) -> Optional[List[Cell]]:
    """
    Scan every occupied cell for a completed line.

    Returns:
        The first winning run found, or None
    """
    for row in range(board.rows):
        for column in range(board.cols):
            if board.grid[row, column] != Player.EMPTY.value:
                cells = check_win(board, row, column)
                if cells:
                    return cells
    return None


def check_draw(board: Board, won: bool = False) -> bool:
    """
    A draw is a full board on which the move just played did not win.

    Args:
        board: The board after the move
        won: Whether that move produced a win
    """
    return not won and board.is_full()
