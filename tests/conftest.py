from __future__ import annotations

import pytest

from hexloop.config import Settings
from hexloop.game.controller import BoardController
from hexloop.game.patterns import TILE_PATTERNS
from hexloop.game.types import Coordinate


class ScriptedRandom:
    """Feeds chosen pattern indices to a PatternCatalog (avoids real randomness in tests)."""

    def __init__(self, indices: list[int], fallback: int = 0) -> None:
        self._indices = list(indices)
        self._fallback = fallback
        self.calls = 0

    def randrange(self, stop: int) -> int:
        self.calls += 1
        if self._indices:
            return self._indices.pop(0)
        return self._fallback


def occupy(controller: BoardController, coordinate: Coordinate, pattern_index: int) -> None:
    """Put a catalog pattern on a tile directly, skipping loop detection."""
    controller.grid.tile(coordinate).assign(TILE_PATTERNS[pattern_index])


# Three mutually adjacent tiles; placing (0, 0) last closes a 3-tile loop.
TRIANGLE = {(2, 0): 2, (1, 0): 12}
TRIANGLE_CLOSER = ((0, 0), 6)

# Two rhombi sharing (4, 1); placing it closes two 4-tile loops at once.
DOUBLE_RHOMBUS = {(6, 1): 1, (7, 1): 0, (5, 1): 5, (2, 1): 3, (1, 1): 0, (3, 1): 9}
DOUBLE_RHOMBUS_CLOSER = ((4, 1), 12)

# Two triangles sharing (4, 1); one 6-link loop passes twice through (4, 1).
FIGURE_EIGHT = {(6, 1): 2, (5, 1): 12, (2, 1): 6, (3, 1): 12}
FIGURE_EIGHT_CLOSER = ((4, 1), 14)

# Three lobes around (4, 2); one 9-link loop uses every connection of (4, 2).
TREFOIL = {
    (5, 1): 12, (6, 2): 12, (5, 2): 12, (3, 2): 12, (2, 2): 12, (3, 1): 12,
}
TREFOIL_CLOSER = ((4, 2), 0)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        rows=5,
        cols=18,
        clear_delay_ticks=3,
        clear_board_bonus=5_000,
        lowest_point_value=1,
        point_increment=1,
        walk_cap_multiplier=4,
        random_seed=None,
    )


@pytest.fixture
def make_controller(test_settings):
    """Build a controller whose pending patterns follow *indices*."""

    def _make(indices: list[int], settings: Settings | None = None) -> BoardController:
        return BoardController(
            settings=settings or test_settings,
            rng=ScriptedRandom(indices),
        )

    return _make


@pytest.fixture
def setup_board(make_controller):
    """Occupy a layout directly and leave the closer as the pending pattern."""

    def _setup(layout: dict[Coordinate, int], closer_index: int) -> BoardController:
        controller = make_controller([closer_index])
        for coordinate, index in layout.items():
            occupy(controller, coordinate, index)
        return controller

    return _setup
