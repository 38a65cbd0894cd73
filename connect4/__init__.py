"""
connect4 - Connect Four engine with a minimax computer opponent

This package provides a configurable-size Connect Four board, win and draw
detection, a minimax/alpha-beta computer player, a game session controller
with undo and turn timeouts, persisted scores and a terminal front end.
"""

# Version number
__version__ = '0.1.0'
