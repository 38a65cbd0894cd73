"""Tests for the positional heuristic."""

import random

import pytest

from connect4.ai.heuristic import evaluate_board
from connect4.game.board import Board
from connect4.utils import Player


def random_board(seed, moves, rows=6, cols=7):
    rng = random.Random(seed)
    board = Board(rows, cols)
    player = Player.RED
    for _ in range(moves):
        column = rng.choice(board.valid_columns())
        board.place(board.lowest_empty_row(column), column, player)
        player = player.other()
    return board


class TestEvaluateBoard:

    def test_empty_board_scores_zero(self):
        assert evaluate_board(Board(), Player.YELLOW) == 0

    def test_single_center_piece(self):
        board = Board()
        board.place(5, 3, Player.RED)
        # center bias 3, plus 10 on each of the four axes
        assert evaluate_board(board, Player.RED) == 43
        assert evaluate_board(board, Player.YELLOW) == -43

    def test_windows_are_clipped_at_the_edge(self):
        board = Board()
        board.place(5, 0, Player.RED)
        # one diagonal window holds a single cell, so only three axes score
        assert evaluate_board(board, Player.RED) == 30

    def test_blocked_window_scores_nothing_on_that_axis(self):
        board = Board()
        board.place(5, 0, Player.RED)
        board.place(5, 1, Player.YELLOW)
        # RED at (5,0): horizontal blocked, vertical 10, rising diagonal 10
        # YELLOW at (5,1): horizontal blocked, vertical 10, rising diagonal 10
        # falling diagonal from (5,1) holds only (4,0) and (5,1)
        assert evaluate_board(board, Player.RED) == 0

    def test_three_with_room_scores_high(self):
        board = Board()
        for col in range(3):
            board.place(5, col, Player.YELLOW)
        assert evaluate_board(board, Player.YELLOW) > 3000

    def test_completed_line(self):
        board = Board()
        for col in range(4):
            board.place(5, col, Player.RED)
        assert evaluate_board(board, Player.YELLOW) <= -4 * 10000

    def test_returns_int(self):
        assert isinstance(evaluate_board(random_board(3, 12), Player.RED), int)

    @pytest.mark.parametrize("seed", range(8))
    def test_antisymmetric_in_computer_side(self, seed):
        board = random_board(seed, moves=5 + seed * 3)
        assert evaluate_board(board, Player.RED) == -evaluate_board(board, Player.YELLOW)

    def test_antisymmetric_on_larger_board(self):
        board = random_board(11, moves=25, rows=8, cols=9)
        assert evaluate_board(board, Player.RED) == -evaluate_board(board, Player.YELLOW)

    def test_does_not_modify_board(self):
        board = random_board(5, 10)
        before = board.copy()
        evaluate_board(board, Player.YELLOW)
        assert board == before
