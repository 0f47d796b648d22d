"""Board state for hexloop.

The board is a flat collection of tiles keyed by (column, row). Tiles never
reference each other; adjacency is always recomputed from coordinates.
"""

from __future__ import annotations

from typing import Iterator

from hexloop.engine.errors import MissingSideError, UnknownCoordinateError
from hexloop.game.patterns import validate_pattern
from hexloop.game.types import Connection, Coordinate, check_side, neighbor_coordinate


class Tile:
    """A board cell: a fixed coordinate plus zero or three connections."""

    __slots__ = ("_coordinate", "_connections")

    def __init__(self, col: int, row: int) -> None:
        self._coordinate: Coordinate = (col, row)
        self._connections: list[Connection] = []

    def __repr__(self) -> str:
        return f"Tile(col={self.col}, row={self.row}, connections={self.connections!r})"

    @property
    def coordinate(self) -> Coordinate:
        return self._coordinate

    @property
    def connections(self) -> tuple[Connection, ...]:
        return tuple(self._connections)

    @property
    def col(self) -> int:
        return self._coordinate[0]

    @property
    def row(self) -> int:
        return self._coordinate[1]

    def is_empty(self) -> bool:
        return not self._connections

    def same_position(self, other: Tile) -> bool:
        return self._coordinate == other.coordinate

    def assign(self, connections: list[Connection] | tuple[Connection, ...]) -> None:
        validate_pattern(connections)
        self._connections = [tuple(c) for c in connections]

    def clear(self) -> None:
        self._connections = []

    def connected_side(self, side: int) -> int:
        """Return the other end of the connection that uses *side*."""
        return connected_side(self._connections, side, self._coordinate)


def connected_side(
    connections: list[Connection] | tuple[Connection, ...],
    side: int,
    coordinate: Coordinate | None = None,
) -> int:
    check_side(side)
    if not connections:
        raise MissingSideError(
            f"Looked up side {side} on empty tile {coordinate}", coordinate, side,
        )
    for a, b in connections:
        if a == side:
            return b
        if b == side:
            return a
    raise MissingSideError(
        f"Side {side} not found in connections {connections!r} of tile {coordinate}",
        coordinate,
        side,
    )


class HexGrid:
    """All tiles of the board, indexed by coordinate."""

    def __init__(self, coordinates: list[Coordinate]) -> None:
        self._tiles: dict[Coordinate, Tile] = {}
        for col, row in coordinates:
            self._tiles[(col, row)] = Tile(col, row)

    @classmethod
    def create(cls, rows: int, cols: int) -> HexGrid:
        """Build a rows x cols board, row by row."""
        return cls([(col, row) for row in range(rows) for col in range(cols)])

    def __len__(self) -> int:
        return len(self._tiles)

    def __iter__(self) -> Iterator[Tile]:
        return iter(self._tiles.values())

    def __contains__(self, coordinate: object) -> bool:
        return coordinate in self._tiles

    def coordinates(self) -> list[Coordinate]:
        return list(self._tiles)

    def get(self, coordinate: Coordinate) -> Tile | None:
        return self._tiles.get(tuple(coordinate))

    def tile(self, coordinate: Coordinate) -> Tile:
        tile = self.get(coordinate)
        if tile is None:
            raise UnknownCoordinateError(tuple(coordinate))
        return tile

    def neighbor(self, tile: Tile, side: int) -> Tile | None:
        """Return the tile across *side*, or None at the edge of the board."""
        return self._tiles.get(neighbor_coordinate(tile.coordinate, side))

    def occupied(self) -> list[Tile]:
        return [t for t in self._tiles.values() if not t.is_empty()]

    def empty_coordinates(self) -> list[Coordinate]:
        return [c for c, t in self._tiles.items() if t.is_empty()]

    def is_empty(self) -> bool:
        return all(t.is_empty() for t in self._tiles.values())

    def is_full(self) -> bool:
        return all(not t.is_empty() for t in self._tiles.values())

    def clear(self) -> None:
        for tile in self._tiles.values():
            tile.clear()
