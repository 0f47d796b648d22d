"""BoardController — owns the board and runs placement, detection, scoring and clearing.

The presentation layer drives it with one ``place`` per click and one ``tick``
per frame, and reads state back through the query methods.
"""

from __future__ import annotations

import logging

from hexloop.config import Settings
from hexloop.config import settings as default_settings
from hexloop.game.board import HexGrid
from hexloop.game.loops import find_closed_loops, trace_placement
from hexloop.game.models import (
    BoardPhase,
    ChainWalk,
    Loop,
    PlacementRejection,
    PlacementResult,
    TickResult,
)
from hexloop.game.patterns import PatternCatalog, PatternSource
from hexloop.game.scoring import batch_points, board_clear_bonus
from hexloop.game.types import Connection, Coordinate, Pattern

logger = logging.getLogger(__name__)


class BoardController:
    """Single-player hexloop game."""

    def __init__(
        self,
        settings: Settings | None = None,
        rng: PatternSource | None = None,
    ) -> None:
        self.settings = settings or default_settings
        self.grid = HexGrid.create(self.settings.rows, self.settings.cols)
        self.catalog = PatternCatalog(rng=rng, seed=self.settings.random_seed)
        self.phase = BoardPhase.IDLE
        self.score = 0
        self.high_score = 0
        self._pending_loops: list[Loop] = []
        self._ticks_left = 0

    # ── Mutations ──

    def place(self, coordinate: Coordinate) -> PlacementResult:
        """Put the pending pattern on an empty tile and score any loops it closes."""
        coordinate = tuple(coordinate)
        tile = self.grid.get(coordinate)
        if tile is None:
            return self._reject(coordinate, PlacementRejection.OFF_BOARD)
        if self.phase == BoardPhase.RESOLVING:
            return self._reject(coordinate, PlacementRejection.RESOLVING)
        if not tile.is_empty():
            return self._reject(coordinate, PlacementRejection.OCCUPIED)

        pattern = self.catalog.advance()
        tile.assign(pattern)
        logger.debug(f"Placed {pattern} at {coordinate}")

        loops = find_closed_loops(self.grid, tile, max_steps=self._max_steps())
        points = batch_points(
            loops, self.settings.lowest_point_value, self.settings.point_increment,
        )
        self.score += points

        if loops:
            self.phase = BoardPhase.RESOLVING
            self._pending_loops = loops
            self._ticks_left = self.settings.clear_delay_ticks
            logger.info(
                f"Closed {len(loops)} loop(s) at {coordinate} "
                f"(lengths {[loop.length for loop in loops]}) for {points} points"
            )
        else:
            self._check_game_over()

        return PlacementResult(
            accepted=True,
            coordinate=coordinate,
            pattern=list(pattern),
            closed_loops=loops,
            points_awarded=points,
        )

    def tick(self) -> TickResult:
        """Advance the clear countdown; clears the closed loops when it reaches zero."""
        if self.phase != BoardPhase.RESOLVING:
            return TickResult()

        self._ticks_left -= 1
        if self._ticks_left > 0:
            return TickResult()

        was_empty = self.grid.is_empty()
        cleared = self._pending_loops
        for loop in cleared:
            for link in loop.links:
                self.grid.tile(link.coordinate).clear()
        self._pending_loops = []
        self.phase = BoardPhase.IDLE

        bonus = board_clear_bonus(
            was_empty, self.grid.is_empty(), self.settings.clear_board_bonus,
        )
        self.score += bonus
        if bonus:
            logger.info(f"Board cleared, bonus {bonus}")

        return TickResult(
            cleared_loops=cleared,
            board_clear_bonus_awarded=bonus > 0,
            points_awarded=bonus,
        )

    def reset(self) -> None:
        """Empty the board and start a new game. The high score is kept."""
        self.high_score = max(self.high_score, self.score)
        self.grid.clear()
        self.catalog.reset()
        self.score = 0
        self.phase = BoardPhase.IDLE
        self._pending_loops = []
        self._ticks_left = 0

    # ── Queries ──

    def is_empty(self, coordinate: Coordinate) -> bool:
        return self.grid.tile(coordinate).is_empty()

    def connections_at(self, coordinate: Coordinate) -> list[Connection]:
        return list(self.grid.tile(coordinate).connections)

    def pending_pattern(self) -> Pattern:
        return self.catalog.pending

    def all_coordinates(self) -> list[Coordinate]:
        return self.grid.coordinates()

    def is_resolving(self) -> bool:
        return self.phase == BoardPhase.RESOLVING

    def is_game_over(self) -> bool:
        return self.phase == BoardPhase.GAME_OVER

    @property
    def ticks_remaining(self) -> int:
        return self._ticks_left if self.phase == BoardPhase.RESOLVING else 0

    def pending_loops(self) -> list[Loop]:
        """Loops closed by the last placement that are waiting to be cleared."""
        return list(self._pending_loops)

    def loop_coordinates(self) -> set[Coordinate]:
        coords: set[Coordinate] = set()
        for loop in self._pending_loops:
            coords |= loop.coordinates()
        return coords

    def preview(self, coordinate: Coordinate) -> list[ChainWalk]:
        """Chains the pending pattern would form on *coordinate*.

        Empty list when the tile is off the board, occupied, or a clear is pending.
        """
        tile = self.grid.get(tuple(coordinate))
        if tile is None or not tile.is_empty() or self.phase == BoardPhase.RESOLVING:
            return []
        return trace_placement(
            self.grid, tile, self.catalog.pending, max_steps=self._max_steps(),
        )

    # ── Private ──

    def _reject(self, coordinate: Coordinate, reason: PlacementRejection) -> PlacementResult:
        logger.debug(f"Rejected placement at {coordinate}: {reason.value}")
        return PlacementResult(accepted=False, coordinate=coordinate, rejection=reason)

    def _check_game_over(self) -> None:
        if self.grid.is_full():
            self.phase = BoardPhase.GAME_OVER
            self.high_score = max(self.high_score, self.score)
            logger.info(f"Game over with score {self.score}")

    def _max_steps(self) -> int:
        return self.settings.walk_cap_multiplier * len(self.grid)
