"""Tests for headless self-play."""

from __future__ import annotations

import pytest

from hexloop.config import Settings
from hexloop.engine.autoplay import AutoplayResult, GameRecord, play_game, run_autoplay
from hexloop.engine.strategy import GreedyStrategy, RandomStrategy


@pytest.fixture
def small_settings() -> Settings:
    return Settings(rows=2, cols=6, clear_delay_ticks=1)


def test_play_game_runs_to_completion(small_settings) -> None:
    record = play_game(RandomStrategy(seed=1), seed=7, settings=small_settings)
    assert record.placements >= 12
    assert record.score >= 0
    assert record.finished or record.placements == 1_000


def test_placement_limit_stops_game(small_settings) -> None:
    record = play_game(RandomStrategy(seed=1), seed=7, settings=small_settings, max_placements=3)
    assert record.placements == 3
    assert not record.finished


def test_same_seeds_same_game(small_settings) -> None:
    a = play_game(GreedyStrategy(seed=2), seed=11, settings=small_settings)
    b = play_game(GreedyStrategy(seed=2), seed=11, settings=small_settings)
    assert (a.score, a.placements, a.loops_closed) == (b.score, b.placements, b.loops_closed)


def test_run_autoplay_collects_games(small_settings) -> None:
    progress: list[tuple[int, int]] = []
    result = run_autoplay(
        RandomStrategy(seed=0),
        num_games=4,
        base_seed=100,
        settings=small_settings,
        progress_callback=lambda done, total: progress.append((done, total)),
    )
    assert result.num_games == 4
    assert [g.seed for g in result.games] == [100, 101, 102, 103]
    assert progress[-1] == (4, 4)
    assert result.strategy == "RandomStrategy"


def test_loop_stats_consistent(small_settings) -> None:
    result = run_autoplay(GreedyStrategy(seed=4), num_games=5, settings=small_settings)
    for game in result.games:
        if game.loops_closed:
            assert game.longest_loop >= 3
            assert game.score >= 6
        else:
            assert game.longest_loop == 0


class TestAutoplayResult:
    def _result(self) -> AutoplayResult:
        return AutoplayResult(strategy="greedy", games=[
            GameRecord(seed=0, score=10, placements=20, loops_closed=1, longest_loop=4, finished=True),
            GameRecord(seed=1, score=30, placements=25, loops_closed=2, longest_loop=6, finished=True),
        ])

    def test_averages(self) -> None:
        result = self._result()
        assert result.avg_score() == 20
        assert result.best_score() == 30
        assert result.score_stddev() == pytest.approx(14.1421, rel=1e-3)

    def test_empty_result(self) -> None:
        result = AutoplayResult(strategy="random")
        assert result.avg_score() == 0
        assert result.score_stddev() == 0.0
        assert result.best_score() == 0

    def test_summary(self) -> None:
        summary = self._result().summary()
        assert "greedy (2 games)" in summary
        assert "best=30" in summary
        assert "longest=6" in summary
