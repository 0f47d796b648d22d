"""Loop detection — follow pipe connections from tile to tile.

A walk starts on one connection of a tile and repeatedly steps across the
exit side into the neighbor, continuing along whichever of the neighbor's
connections uses the entry side. It stops when it

- steps off the board (open, touches edge),
- steps onto an empty tile (open, touches empty),
- re-enters the start tile on a side of the start connection (closed).

The closing step is not recorded, so a loop's links are exactly the tile
traversals that make it up and its first link is the start tile.

Walks never see more than three traversals per tile, so a cap of a small
multiple of the tile count only trips on corrupted state.
"""

from __future__ import annotations

import logging

from hexloop.config import settings
from hexloop.game.board import HexGrid, Tile, connected_side
from hexloop.game.models import ChainEnd, ChainWalk, Loop, LoopLink
from hexloop.game.types import Connection, Coordinate, Pattern, opposite_side

logger = logging.getLogger(__name__)

# Patterns standing in for tile contents without mutating the board
Overrides = dict[Coordinate, Pattern]


def walk_chain(
    grid: HexGrid,
    start: Tile,
    connection: Connection,
    *,
    overrides: Overrides | None = None,
    max_steps: int | None = None,
) -> ChainWalk:
    """Walk from *start* along *connection*, leaving through ``connection[1]``."""
    entry, exit_side = connection
    links = [LoopLink(coordinate=start.coordinate, connection=(entry, exit_side))]
    if max_steps is None:
        max_steps = settings.walk_cap_multiplier * len(grid)

    current = start
    for _ in range(max_steps):
        entry_side = opposite_side(exit_side)
        nxt = grid.neighbor(current, exit_side)
        if nxt is None:
            return ChainWalk(links=links, end=ChainEnd.TOUCHES_EDGE)

        connections = _connections_of(nxt, overrides)
        if not connections:
            return ChainWalk(links=links, end=ChainEnd.TOUCHES_EMPTY)

        side = connected_side(connections, entry_side, nxt.coordinate)
        if nxt.same_position(start) and side in connection:
            return ChainWalk(links=links, end=ChainEnd.CLOSED)

        links.append(LoopLink(coordinate=nxt.coordinate, connection=(entry_side, side)))
        current, exit_side = nxt, side

    logger.warning(
        f"Walk from {start.coordinate} along {connection} exceeded {max_steps} steps"
    )
    return ChainWalk(links=links, end=ChainEnd.STEP_LIMIT)


def find_chains(
    grid: HexGrid,
    tile: Tile,
    *,
    overrides: Overrides | None = None,
    max_steps: int | None = None,
) -> list[ChainWalk]:
    """Walk every connection of *tile* once. Returns one ChainWalk per connection."""
    return [
        walk_chain(grid, tile, connection, overrides=overrides, max_steps=max_steps)
        for connection in _connections_of(tile, overrides)
    ]


def find_closed_loops(
    grid: HexGrid,
    tile: Tile,
    *,
    max_steps: int | None = None,
) -> list[Loop]:
    """Return the distinct loops closed through the connections of *tile*."""
    walks = find_chains(grid, tile, max_steps=max_steps)
    return dedupe_loops([walk.to_loop() for walk in walks if walk.closed])


def dedupe_loops(loops: list[Loop]) -> list[Loop]:
    """Drop loops that share a traversal with an earlier loop.

    A loop passing twice through the start tile is found once from each of
    the two connections it uses there.
    """
    accepted: list[Loop] = []
    for loop in loops:
        if any(loop.shares_link_with(other) for other in accepted):
            logger.debug(f"Discarding duplicate loop of length {loop.length}")
            continue
        accepted.append(loop)
    return accepted


def trace_placement(
    grid: HexGrid,
    tile: Tile,
    pattern: Pattern,
    *,
    max_steps: int | None = None,
) -> list[ChainWalk]:
    """Trace the chains *pattern* would form on *tile*, leaving the board untouched.

    Each connection is walked forward; open chains are walked backward too so
    the caller sees both ends.
    """
    overrides: Overrides = {tile.coordinate: pattern}
    walks: list[ChainWalk] = []
    for a, b in pattern:
        forward = walk_chain(grid, tile, (a, b), overrides=overrides, max_steps=max_steps)
        walks.append(forward)
        if not forward.closed:
            walks.append(
                walk_chain(grid, tile, (b, a), overrides=overrides, max_steps=max_steps)
            )
    return walks


def _connections_of(
    tile: Tile, overrides: Overrides | None,
) -> tuple[Connection, ...]:
    if overrides and tile.coordinate in overrides:
        return overrides[tile.coordinate]
    return tile.connections
