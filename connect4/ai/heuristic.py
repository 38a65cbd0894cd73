"""
heuristic.py - Positional evaluation for the minimax search

The score is signed from the computer's point of view and combines:
1. A center-column bias (+3 / -3 per piece)
2. A windowed pattern score: for every occupied cell and every axis, the
   seven cells at offsets -3..+3 are counted and the owner of the cell is
   rewarded for lines it can still complete

Overlapping windows are counted once per occupied cell, so the same line
contributes several times. The search is tuned around this.
"""

from typing import List

from connect4.game.board import Board
from connect4.utils import AXES, CONNECT_N, Player

CENTER_WEIGHT = 3

# Reward for (pieces of the owner, minimum empties) in an unblocked window
WINDOW_SCORES = [
    (3, 1, 1000),
    (2, 2, 100),
    (1, 3, 10),
]
WIN_SCORE = 10000

REACH = CONNECT_N - 1


def _window_score(grid: List[List[int]], rows: int, cols: int,
                  row: int, col: int, owner: int) -> int:
    """Sum the window rewards on all four axes through one occupied cell."""
    score = 0
    for dr, dc in AXES:
        count = empty = blocked = 0
        for i in range(-REACH, REACH + 1):
            r = row + dr * i
            c = col + dc * i
            if 0 <= r < rows and 0 <= c < cols:
                value = grid[r][c]
                if value == owner:
                    count += 1
                elif value == Player.EMPTY.value:
                    empty += 1
                else:
                    blocked += 1

        if count >= CONNECT_N:
            score += WIN_SCORE
        elif blocked == 0:
            for needed, min_empty, reward in WINDOW_SCORES:
                if count == needed and empty >= min_empty:
                    score += reward
                    break
    return score


def evaluate_board(board: Board, ai_player: Player) -> int:
    """
    Score a position for ``ai_player``.

    Args:
        board: Position to evaluate
        ai_player: The side the computer plays; positive scores favor it

    Returns:
        Signed integer score
    """
    grid = board.grid.tolist()
    rows, cols = board.rows, board.cols
    ai_value = ai_player.value
    score = 0

    center = board.center_column
    for row in range(rows):
        value = grid[row][center]
        if value == ai_value:
            score += CENTER_WEIGHT
        elif value != Player.EMPTY.value:
            score -= CENTER_WEIGHT

    for row in range(rows):
        for col in range(cols):
            owner = grid[row][col]
            if owner == Player.EMPTY.value:
                continue
            cell_score = _window_score(grid, rows, cols, row, col, owner)
            score += cell_score if owner == ai_value else -cell_score

    return score
