"""Tests for the persisted score counters."""

import json
import multiprocessing

import pytest

import connect4.data
from connect4.data.scores import ScoreStore
from connect4.utils import Player


def record_red_wins(path, count):
    store = ScoreStore(path)
    for _ in range(count):
        store.record_win(Player.RED)


class TestScoreStore:

    def test_missing_file_reads_as_zero(self, scores_file):
        assert ScoreStore(scores_file).load() == {"red": 0, "yellow": 0}

    def test_record_win_persists(self, scores_file):
        store = ScoreStore(scores_file)
        store.record_win(Player.RED)
        store.record_win(Player.RED)
        assert store.record_win(Player.YELLOW) == {"red": 2, "yellow": 1}

        with open(scores_file) as f:
            assert json.load(f) == {"red": 2, "yellow": 1}
        assert ScoreStore(scores_file).get(Player.RED) == 2

    def test_creates_missing_directory(self, tmp_path):
        path = tmp_path / "nested" / "scores.json"
        ScoreStore(str(path)).record_win(Player.YELLOW)
        assert path.exists()

    def test_corrupt_file_reads_as_zero(self, scores_file):
        with open(scores_file, "w") as f:
            f.write("{not json")
        store = ScoreStore(scores_file)
        assert store.load() == {"red": 0, "yellow": 0}
        assert store.record_win(Player.RED) == {"red": 1, "yellow": 0}

    def test_bad_values_are_ignored(self, scores_file):
        with open(scores_file, "w") as f:
            json.dump({"red": "lots", "yellow": 4, "green": 9}, f)
        assert ScoreStore(scores_file).load() == {"red": 0, "yellow": 4}

    def test_reset(self, scores_file):
        store = ScoreStore(scores_file)
        store.record_win(Player.RED)
        assert store.reset()
        assert store.load() == {"red": 0, "yellow": 0}

    def test_empty_is_not_a_player(self, scores_file):
        with pytest.raises(ValueError):
            ScoreStore(scores_file).record_win(Player.EMPTY)

    def test_package_exports_store(self):
        assert connect4.data.ScoreStore is ScoreStore


class TestConcurrentWriters:

    @pytest.mark.skipif("fork" not in multiprocessing.get_all_start_methods(),
                        reason="needs the fork start method")
    def test_no_increment_is_lost(self, scores_file):
        context = multiprocessing.get_context("fork")
        workers = [context.Process(target=record_red_wins, args=(scores_file, 100))
                   for _ in range(4)]
        for worker in workers:
            worker.start()
        for worker in workers:
            worker.join(timeout=60)
            assert worker.exitcode == 0

        assert ScoreStore(scores_file).load() == {"red": 400, "yellow": 0}
