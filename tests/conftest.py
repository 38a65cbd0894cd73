"""Shared fixtures for the Connect Four tests."""

import pytest

from connect4.game.board import Board
from connect4.utils import Player

SYMBOLS = {'.': Player.EMPTY, 'R': Player.RED, 'Y': Player.YELLOW}


def board_from_rows(rows):
    """Build a board from strings, top row first, using '.', 'R' and 'Y'."""
    board = Board(len(rows), len(rows[0]))
    for r, line in enumerate(rows):
        for c, symbol in enumerate(line):
            board.grid[r, c] = SYMBOLS[symbol].value
    return board


def draw_pattern(row, col):
    """A cell colouring that fills any board without four in a row."""
    return Player.RED if (col // 2 + row) % 2 == 0 else Player.YELLOW


@pytest.fixture
def make_board():
    return board_from_rows


@pytest.fixture
def full_board_without_win():
    board = Board(6, 7)
    for r in range(6):
        for c in range(7):
            board.place(r, c, draw_pattern(r, c))
    return board


@pytest.fixture
def scores_file(tmp_path):
    return str(tmp_path / "scores.json")


@pytest.fixture
def pattern():
    return draw_pattern
