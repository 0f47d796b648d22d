"""Placement strategies — pick where the pending pattern goes."""

from __future__ import annotations

import random as _random
from typing import Protocol

from hexloop.game.controller import BoardController
from hexloop.game.loops import dedupe_loops
from hexloop.game.scoring import batch_points
from hexloop.game.types import Coordinate


class PlacementStrategy(Protocol):
    """A strategy picks an empty coordinate for the pending pattern."""

    def choose_coordinate(self, controller: BoardController) -> Coordinate:
        ...


class RandomStrategy:
    """Picks a uniformly random empty tile."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = _random.Random(seed)

    def choose_coordinate(self, controller: BoardController) -> Coordinate:
        return self._rng.choice(controller.grid.empty_coordinates())


class GreedyStrategy:
    """Picks the empty tile where the pending pattern scores the most points right now.

    Ties (including the common all-zero case) are broken randomly.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._rng = _random.Random(seed)

    def choose_coordinate(self, controller: BoardController) -> Coordinate:
        best_points = -1
        best: list[Coordinate] = []
        for coordinate in controller.grid.empty_coordinates():
            points = self.score_placement(controller, coordinate)
            if points > best_points:
                best_points = points
                best = [coordinate]
            elif points == best_points:
                best.append(coordinate)
        return self._rng.choice(best)

    @staticmethod
    def score_placement(controller: BoardController, coordinate: Coordinate) -> int:
        walks = controller.preview(coordinate)
        loops = dedupe_loops([w.to_loop() for w in walks if w.closed])
        return batch_points(
            loops,
            controller.settings.lowest_point_value,
            controller.settings.point_increment,
        )


STRATEGIES: dict[str, type[RandomStrategy] | type[GreedyStrategy]] = {
    "random": RandomStrategy,
    "greedy": GreedyStrategy,
}
