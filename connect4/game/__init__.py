"""
connect4.game - Core game mechanics for Connect Four

This package contains the board, win/draw detection, the turn clock and
the game session controller. The session lives in connect4.game.session
and is imported from there, since it depends on connect4.ai.
"""

from connect4.game.board import Board
from connect4.game.rules import check_win, check_draw, find_any_win

__all__ = ['Board', 'check_win', 'check_draw', 'find_any_win']
