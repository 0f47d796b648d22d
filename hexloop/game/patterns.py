"""Tile patterns — every way to pair the six sides into three connections.

There are 5 * 3 * 1 = 15 perfect matchings of six sides. They are listed
explicitly, ordered by the partner of side 0, then the partner of the lowest
remaining side. The pending pattern is drawn uniformly from this list.
"""

from __future__ import annotations

import random
from typing import Protocol

from hexloop.engine.errors import InvalidPatternError
from hexloop.game.types import NUM_SIDES, Connection, Pattern, normalize_connection

TILE_PATTERNS: tuple[Pattern, ...] = (
    ((0, 1), (2, 3), (4, 5)),
    ((0, 1), (2, 4), (3, 5)),
    ((0, 1), (2, 5), (3, 4)),
    ((0, 2), (1, 3), (4, 5)),
    ((0, 2), (1, 4), (3, 5)),
    ((0, 2), (1, 5), (3, 4)),
    ((0, 3), (1, 2), (4, 5)),
    ((0, 3), (1, 4), (2, 5)),
    ((0, 3), (1, 5), (2, 4)),
    ((0, 4), (1, 2), (3, 5)),
    ((0, 4), (1, 3), (2, 5)),
    ((0, 4), (1, 5), (2, 3)),
    ((0, 5), (1, 2), (3, 4)),
    ((0, 5), (1, 3), (2, 4)),
    ((0, 5), (1, 4), (2, 3)),
)

NUM_PATTERNS = len(TILE_PATTERNS)  # 15


def validate_pattern(connections: list[Connection] | tuple[Connection, ...]) -> None:
    """Raise InvalidPatternError unless *connections* pair every side exactly once."""
    if len(connections) != 3:
        raise InvalidPatternError(
            f"A pattern has 3 connections, got {len(connections)}", connections,
        )
    seen: list[int] = []
    for connection in connections:
        if len(connection) != 2 or connection[0] == connection[1]:
            raise InvalidPatternError(f"Bad connection {connection!r}", connections)
        seen.extend(connection)
    if sorted(seen) != list(range(NUM_SIDES)):
        raise InvalidPatternError(
            f"Connections {connections!r} do not cover sides 0-5 exactly once",
            connections,
        )


def pattern_index(connections: list[Connection] | tuple[Connection, ...]) -> int:
    """Return the catalog index of a set of connections, in any order."""
    validate_pattern(connections)
    key = tuple(sorted(normalize_connection(c) for c in connections))
    return TILE_PATTERNS.index(key)


class PatternSource(Protocol):
    """Anything with ``randrange`` — ``random.Random`` or a scripted fake."""

    def randrange(self, stop: int) -> int:
        ...


class PatternCatalog:
    """Holds the pending pattern and draws the next one on demand."""

    def __init__(self, rng: PatternSource | None = None, seed: int | None = None) -> None:
        self._rng: PatternSource = rng if rng is not None else random.Random(seed)
        self._pending_index = self._draw()

    @property
    def pending(self) -> Pattern:
        return TILE_PATTERNS[self._pending_index]

    def advance(self) -> Pattern:
        """Consume the pending pattern and draw a new one. Returns the consumed pattern."""
        consumed = self.pending
        self._pending_index = self._draw()
        return consumed

    def reset(self) -> None:
        self._pending_index = self._draw()

    def _draw(self) -> int:
        index = self._rng.randrange(NUM_PATTERNS)
        if not 0 <= index < NUM_PATTERNS:
            raise InvalidPatternError(f"Pattern index out of range: {index}")
        return index
