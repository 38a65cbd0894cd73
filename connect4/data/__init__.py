"""
connect4.data - Persistent data for Connect Four

Holds the score counters kept between games and sessions.
"""

from connect4.data.scores import ScoreStore

__all__ = ['ScoreStore']
