"""Tests for the Board class."""

import random

import numpy as np
import pytest

from connect4.game.board import Board
from connect4.utils import InvalidDimensions, Player, parse_board_size


class TestBoardInitialization:

    def test_default_size(self):
        board = Board()
        assert (board.rows, board.cols) == (6, 7)
        assert board.is_empty()
        assert board.center_column == 3

    def test_custom_size(self):
        board = Board(8, 9)
        assert board.grid.shape == (8, 9)
        assert board.center_column == 4

    def test_smallest_board(self):
        assert Board(4, 4).valid_columns() == [0, 1, 2, 3]

    @pytest.mark.parametrize("rows, cols", [(3, 7), (6, 3), (0, 0), (-1, 5)])
    def test_invalid_dimensions(self, rows, cols):
        with pytest.raises(InvalidDimensions):
            Board(rows, cols)

    def test_invalid_dimensions_is_value_error(self):
        with pytest.raises(ValueError):
            Board(2, 2)


class TestGravity:

    def test_lowest_empty_row_on_empty_column(self):
        board = Board()
        assert board.lowest_empty_row(0) == 5

    def test_lowest_empty_row_stacks_upward(self):
        board = Board()
        for expected in range(5, -1, -1):
            row = board.lowest_empty_row(2)
            assert row == expected
            board.place(row, 2, Player.RED)
        assert board.lowest_empty_row(2) is None
        assert not board.has_room(2)

    def test_out_of_range_column_is_full(self):
        board = Board()
        assert board.lowest_empty_row(-1) is None
        assert board.lowest_empty_row(7) is None

    def test_lowest_empty_row_matches_column_height(self):
        rng = random.Random(7)
        board = Board()
        heights = [0] * board.cols
        for _ in range(30):
            column = rng.choice(board.valid_columns())
            board.place(board.lowest_empty_row(column), column, Player.YELLOW)
            heights[column] += 1
        for column, height in enumerate(heights):
            expected = None if height == board.rows else board.rows - 1 - height
            assert board.lowest_empty_row(column) == expected

    def test_valid_columns_skip_full_columns(self):
        board = Board(4, 5)
        for row in range(4):
            board.place(row, 1, Player.RED)
        assert board.valid_columns() == [0, 2, 3, 4]


class TestPlaceRemove:

    def test_place_then_remove_restores_board(self, make_board):
        board = make_board([
            ".......",
            ".......",
            ".......",
            "...Y...",
            "..RR...",
            ".YRYR..",
        ])
        before = board.grid.copy()
        row = board.lowest_empty_row(3)
        board.place(row, 3, Player.RED)
        assert board.cell(row, 3) == Player.RED
        board.remove(row, 3)
        assert np.array_equal(board.grid, before)
        assert board.grid.dtype == before.dtype

    def test_is_full(self, full_board_without_win):
        assert full_board_without_win.is_full()
        full_board_without_win.remove(0, 0)
        assert not full_board_without_win.is_full()

    def test_copy_is_independent(self):
        board = Board()
        board.place(5, 0, Player.RED)
        clone = board.copy()
        assert clone == board
        clone.place(4, 0, Player.YELLOW)
        assert clone != board
        assert board.cell(4, 0) == Player.EMPTY

    def test_render(self, make_board):
        board = make_board([
            "....",
            "....",
            "....",
            "RY..",
        ])
        text = board.render()
        assert "|R Y . .|" in text
        assert text.splitlines()[-1] == "|1 2 3 4|"


class TestParseBoardSize:

    def test_parse(self):
        assert parse_board_size("6x7") == (6, 7)
        assert parse_board_size("8X9") == (8, 9)

    @pytest.mark.parametrize("text", ["", "6", "6x", "axb", "3x7", "6x7x8"])
    def test_bad_sizes(self, text):
        with pytest.raises(InvalidDimensions):
            parse_board_size(text)
