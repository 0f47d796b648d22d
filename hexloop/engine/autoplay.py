"""Headless self-play — run whole games with a placement strategy and report results."""

from __future__ import annotations

import math
import random
import time
from dataclasses import dataclass, field
from typing import Callable

from hexloop.config import Settings
from hexloop.config import settings as default_settings
from hexloop.engine.strategy import PlacementStrategy
from hexloop.game.controller import BoardController


@dataclass
class GameRecord:
    """Outcome of a single self-play game."""

    seed: int
    score: int
    placements: int
    loops_closed: int = 0
    longest_loop: int = 0
    board_clears: int = 0
    finished: bool = False  # False when max_placements cut the game short
    duration_ms: float = 0.0


@dataclass
class AutoplayResult:
    """Aggregated results from an autoplay run."""

    strategy: str
    games: list[GameRecord] = field(default_factory=list)

    @property
    def num_games(self) -> int:
        return len(self.games)

    def avg_score(self) -> float:
        return sum(g.score for g in self.games) / max(self.num_games, 1)

    def score_stddev(self) -> float:
        if self.num_games < 2:
            return 0.0
        avg = self.avg_score()
        variance = sum((g.score - avg) ** 2 for g in self.games) / (self.num_games - 1)
        return math.sqrt(variance)

    def best_score(self) -> int:
        return max((g.score for g in self.games), default=0)

    def summary(self) -> str:
        lines = [f"Autoplay Results: {self.strategy} ({self.num_games} games)"]
        lines.append("=" * 60)
        lines.append(
            f"  score: avg={self.avg_score():.1f} +/- {self.score_stddev():.1f}  "
            f"best={self.best_score()}"
        )
        if self.games:
            placements = sum(g.placements for g in self.games) / self.num_games
            loops = sum(g.loops_closed for g in self.games) / self.num_games
            clears = sum(g.board_clears for g in self.games)
            unfinished = sum(1 for g in self.games if not g.finished)
            lines.append(
                f"  placements/game={placements:.1f}  loops/game={loops:.2f}  "
                f"longest={max(g.longest_loop for g in self.games)}  board clears={clears}"
            )
            if unfinished:
                lines.append(f"  {unfinished} game(s) stopped at the placement limit")
            avg_ms = sum(g.duration_ms for g in self.games) / self.num_games
            total_s = sum(g.duration_ms for g in self.games) / 1000
            lines.append(f"  Avg game: {avg_ms:.0f}ms  |  Total: {total_s:.1f}s")
        return "\n".join(lines)


def play_game(
    strategy: PlacementStrategy,
    seed: int,
    settings: Settings | None = None,
    max_placements: int = 1_000,
) -> GameRecord:
    """Play one game to game over (or *max_placements*), ticking through every clear."""
    controller = BoardController(settings=settings or default_settings, rng=random.Random(seed))
    record = GameRecord(seed=seed, score=0, placements=0)
    start = time.monotonic()

    while not controller.is_game_over() and record.placements < max_placements:
        if controller.is_resolving():
            tick = controller.tick()
            if tick.board_clear_bonus_awarded:
                record.board_clears += 1
            continue

        result = controller.place(strategy.choose_coordinate(controller))
        if not result.accepted:
            raise RuntimeError(
                f"Strategy chose unplayable coordinate {result.coordinate}: "
                f"{result.rejection}"
            )
        record.placements += 1
        record.loops_closed += len(result.closed_loops)
        for loop in result.closed_loops:
            record.longest_loop = max(record.longest_loop, loop.length)

    # Let a pending clear finish so its bonus is counted
    while controller.is_resolving():
        if controller.tick().board_clear_bonus_awarded:
            record.board_clears += 1

    record.score = controller.score
    record.finished = controller.is_game_over()
    record.duration_ms = (time.monotonic() - start) * 1000
    return record


def run_autoplay(
    strategy: PlacementStrategy,
    num_games: int = 10,
    base_seed: int = 0,
    settings: Settings | None = None,
    max_placements: int = 1_000,
    strategy_name: str | None = None,
    progress_callback: Callable[[int, int], None] | None = None,
) -> AutoplayResult:
    """Play *num_games* games. Game *i* draws patterns with seed ``base_seed + i``."""
    result = AutoplayResult(strategy=strategy_name or type(strategy).__name__)
    for i in range(num_games):
        result.games.append(
            play_game(strategy, base_seed + i, settings=settings, max_placements=max_placements)
        )
        if progress_callback:
            progress_callback(i + 1, num_games)
    return result
