"""
minimax.py - Minimax search with alpha-beta pruning for Connect Four

The search explores columns left to right, placing and removing pieces
on the board it is given. Place/remove pairs are strictly nested, so no
other code may touch that board while a search is running; callers that
hold a live game board should pass a copy.
"""

import math
import random
from typing import NamedTuple, Optional

from connect4.ai.heuristic import evaluate_board
from connect4.debug import debug
from connect4.game.board import Board
from connect4.game.rules import find_any_win
from connect4.utils import SEARCH_DEPTHS, Difficulty, Player


class SearchResult(NamedTuple):
    score: float
    column: Optional[int]


class MinimaxPlayer:
    """
    A Connect Four player that searches to a fixed depth.

    Ties between equally scored columns go to the leftmost one, so the
    choice is deterministic for a given position and depth.
    """

    def __init__(self, depth: int = 4, ai_player: Player = Player.YELLOW):
        """
        Initialize the minimax player.

        Args:
            depth: Search depth in plies
            ai_player: The side being maximized
        """
        self.depth = depth
        self.ai_player = ai_player
        self.nodes_evaluated = 0

    def get_move(self, board: Board) -> Optional[int]:
        """
        Pick the best column for ``ai_player`` on ``board``.

        Returns:
            The chosen column, or None if the position is terminal
        """
        self.nodes_evaluated = 0
        debug.start_timer("minimax")
        result = self.search(board, self.depth, True, -math.inf, math.inf)
        elapsed = debug.end_timer("minimax", "ai")
        debug.info(f"Minimax depth {self.depth} chose column {result.column} "
                   f"(score {result.score}, {self.nodes_evaluated} nodes)", "ai")
        if elapsed is not None:
            debug.trace(f"{self.nodes_evaluated / max(elapsed, 1e-9):.0f} nodes/s", "ai")
        return result.column

    def search(self, board: Board, depth: int, maximizing: bool,
               alpha: float, beta: float) -> SearchResult:
        """
        Minimax with alpha-beta pruning.

        Args:
            board: Position to search; mutated and restored during the call
            depth: Remaining plies
            maximizing: True when ``ai_player`` is to move
            alpha: Best score the maximizer can guarantee so far
            beta: Best score the minimizer can guarantee so far

        Returns:
            SearchResult with the backed-up score and the best column
            (None at terminal nodes)
        """
        self.nodes_evaluated += 1

        valid_columns = board.valid_columns()
        if depth == 0 or not valid_columns or find_any_win(board):
            return SearchResult(evaluate_board(board, self.ai_player), None)

        mover = self.ai_player if maximizing else self.ai_player.other()
        best_score = -math.inf if maximizing else math.inf
        best_column = None

        for column in valid_columns:
            row = board.lowest_empty_row(column)
            board.place(row, column, mover)
            try:
                score = self.search(board, depth - 1, not maximizing, alpha, beta).score
            finally:
                board.remove(row, column)

            if maximizing:
                if score > best_score:
                    best_score, best_column = score, column
                alpha = max(alpha, best_score)
            else:
                if score < best_score:
                    best_score, best_column = score, column
                beta = min(beta, best_score)

            if beta <= alpha:
                break

        return SearchResult(best_score, best_column)


def choose_move(board: Board, difficulty: Difficulty, ai_player: Player,
                rng: Optional[random.Random] = None) -> Optional[int]:
    """
    Choose a column for the computer at the given difficulty.

    EASY picks uniformly among columns with room; MEDIUM and HARD search
    a copy of the board to depth 4 and 6.

    Returns:
        Column index, or None if no column has room
    """
    valid_columns = board.valid_columns()
    if not valid_columns:
        return None

    depth = SEARCH_DEPTHS[difficulty]
    if depth == 0:
        column = (rng or random).choice(valid_columns)
        debug.debug(f"Random move: column {column}", "ai")
        return column

    player = MinimaxPlayer(depth=depth, ai_player=ai_player)
    return player.get_move(board.copy())
