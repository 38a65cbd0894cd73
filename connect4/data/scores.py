"""
scores.py - Persistent score counters for Connect Four

Scores are a small JSON object ({"red": 3, "yellow": 1}) kept in the data
directory. Reads and writes go through a file lock and writes replace the
file atomically, so two front ends sharing the file never corrupt it.
"""

import json
import os
import shutil
from typing import Any, Dict, Optional

import filelock

from connect4.debug import debug
from connect4.utils import Player

# Define paths to data files
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
DATA_DIR = os.environ.get('CONNECT4_DATA_DIR', os.path.join(BASE_DIR, 'data'))
SCORES_FILE = os.path.join(DATA_DIR, 'scores.json')

PLAYERS = (Player.RED, Player.YELLOW)


def _lock_for(file_path: str, lock: Optional[filelock.FileLock]) -> filelock.FileLock:
    return lock if lock is not None else filelock.FileLock(f"{file_path}.lock")


def safe_read_json(file_path: str, lock: Optional[filelock.FileLock] = None) -> Optional[Any]:
    """
    Read a JSON file under its lock.

    Args:
        file_path: Path to JSON file
        lock: Lock to use instead of a fresh one on ``file_path.lock``

    Returns:
        Parsed JSON data, or None if the file is missing or unreadable
    """
    if not os.path.exists(file_path):
        return None

    with _lock_for(file_path, lock):
        try:
            with open(file_path, 'r') as f:
                return json.load(f)
        except json.JSONDecodeError:
            debug.error(f"Error decoding JSON from {file_path}", "scores")
        except OSError as e:
            debug.error(f"Error reading {file_path}: {e}", "scores")
    return None


def safe_write_json(file_path: str, data: Any, lock: Optional[filelock.FileLock] = None) -> bool:
    """
    Write JSON through a temporary file and move it into place.

    Returns:
        True if successful, False otherwise
    """
    directory = os.path.dirname(file_path)
    try:
        if directory:
            os.makedirs(directory, exist_ok=True)
        with _lock_for(file_path, lock):
            temp_file = f"{file_path}.tmp"
            with open(temp_file, 'w') as f:
                json.dump(data, f, indent=2)
            shutil.move(temp_file, file_path)
        return True
    except OSError as e:
        debug.error(f"Error writing to {file_path}: {e}", "scores")
        return False


class ScoreStore:
    """
    Win counters per player, persisted between runs.

    One lock guards the file, and record_win holds it across the read and
    the write, so front ends sharing the file never lose an increment.
    """

    def __init__(self, path: str = SCORES_FILE):
        self.path = path
        # FileLock is reentrant, so the helpers can re-acquire it while held
        self.lock = filelock.FileLock(f"{path}.lock")

    def _ensure_directory(self) -> None:
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)

    def load(self) -> Dict[str, int]:
        """Current counters; missing or corrupt files count as all zeros."""
        scores = {player.label: 0 for player in PLAYERS}
        data = safe_read_json(self.path, self.lock)
        if isinstance(data, dict):
            for key in scores:
                value = data.get(key, 0)
                if isinstance(value, int) and value >= 0:
                    scores[key] = value
                else:
                    debug.warning(f"Ignoring bad score {value!r} for {key}", "scores")
        elif data is not None:
            debug.warning(f"Unexpected score data in {self.path}", "scores")
        return scores

    def get(self, player: Player) -> int:
        return self.load()[player.label]

    def record_win(self, player: Player) -> Dict[str, int]:
        """
        Add one win for ``player`` and save.

        Returns:
            The updated counters (also returned if saving failed)
        """
        if player not in PLAYERS:
            raise ValueError(f"Cannot record a win for {player}")
        self._ensure_directory()
        with self.lock:
            scores = self.load()
            scores[player.label] += 1
            saved = safe_write_json(self.path, scores, self.lock)
        if saved:
            debug.info(f"Recorded win for {player.name}: {scores}", "scores")
        return scores

    def reset(self) -> bool:
        """Set every counter back to zero."""
        debug.info("Resetting scores", "scores")
        return safe_write_json(self.path, {player.label: 0 for player in PLAYERS}, self.lock)
