"""
connect4.interfaces - User interfaces for Connect Four

This package contains the terminal interface that drives a game session.
"""

# Don't import anything here to avoid circular imports
__all__ = []
