"""
clock.py - Per-turn countdown for Connect Four

The clock only keeps the deadline. Whoever drives the game polls it and
calls on_turn_timeout on the session once it has expired.
"""

import time
from typing import Callable, Optional

from connect4.utils import DEFAULT_TIME_LIMIT


class TurnClock:
    """Tracks the deadline of the current turn."""

    def __init__(self, time_limit: float = DEFAULT_TIME_LIMIT,
                 clock: Callable[[], float] = time.monotonic):
        if time_limit <= 0:
            raise ValueError(f"Time limit must be positive, got {time_limit}")
        self.time_limit = time_limit
        self._clock = clock
        self._deadline: Optional[float] = None

    @property
    def running(self) -> bool:
        return self._deadline is not None

    def start(self) -> None:
        """Start (or restart) the countdown for a new turn."""
        self._deadline = self._clock() + self.time_limit

    def stop(self) -> None:
        self._deadline = None

    def remaining(self) -> float:
        """Seconds left this turn; the full limit while stopped."""
        if self._deadline is None:
            return float(self.time_limit)
        return max(0.0, self._deadline - self._clock())

    def expired(self) -> bool:
        return self._deadline is not None and self._clock() >= self._deadline
