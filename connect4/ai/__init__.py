"""
connect4.ai - Computer opponent for Connect Four

heuristic.py scores positions; minimax.py searches them and maps the
EASY/MEDIUM/HARD difficulties onto search depths.
"""

from connect4.ai.heuristic import evaluate_board
from connect4.ai.minimax import MinimaxPlayer, SearchResult, choose_move

__all__ = ['evaluate_board', 'MinimaxPlayer', 'SearchResult', 'choose_move']
