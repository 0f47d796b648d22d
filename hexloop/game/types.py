"""Domain types for hexloop.

Tiles are pointy-top hexagons packed in staggered columns: odd columns sit
half a row lower than even columns. Sides are numbered clockwise starting at
the upper-right edge, so side 1 faces right and side 4 faces left.
"""

from __future__ import annotations

from enum import Enum

from hexloop.engine.errors import InvalidPatternError, InvalidSideError

# (column, row)
Coordinate = tuple[int, int]

# Pair of sides routed through a single tile
Connection = tuple[int, int]

# Three connections covering all six sides
Pattern = tuple[Connection, Connection, Connection]

NUM_SIDES = 6


class Curvature(str, Enum):
    STRAIGHT = "straight"        # opposite sides
    LARGE_CURVE = "large_curve"  # one side skipped
    SMALL_CURVE = "small_curve"  # adjacent sides


# (dcol, drow) to step across each side, by column parity
EVEN_COLUMN_OFFSETS: list[tuple[int, int]] = [
    (1, -1), (2, 0), (1, 0), (-1, 0), (-2, 0), (-1, -1),
]
ODD_COLUMN_OFFSETS: list[tuple[int, int]] = [
    (1, 0), (2, 0), (1, 1), (-1, 1), (-2, 0), (-1, 0),
]


def check_side(side: int) -> int:
    if not isinstance(side, int) or isinstance(side, bool) or not 0 <= side < NUM_SIDES:
        raise InvalidSideError(side)
    return side


def opposite_side(side: int) -> int:
    """Side of the neighbor through which a walk across *side* enters."""
    return (check_side(side) + 3) % NUM_SIDES


def neighbor_coordinate(coordinate: Coordinate, side: int) -> Coordinate:
    """Return the coordinate reached by stepping across *side*.

    The result may be off the board; callers resolve it against their tiles.
    """
    col, row = coordinate
    offsets = ODD_COLUMN_OFFSETS if col % 2 else EVEN_COLUMN_OFFSETS
    dcol, drow = offsets[check_side(side)]
    return col + dcol, row + drow


def normalize_connection(connection: Connection) -> Connection:
    a, b = connection
    return (a, b) if a <= b else (b, a)


def connection_curvature(connection: Connection) -> Curvature:
    a, b = connection
    distance = abs(check_side(a) - check_side(b))
    if distance == 3:
        return Curvature.STRAIGHT
    if distance in (2, 4):
        return Curvature.LARGE_CURVE
    if distance in (1, 5):
        return Curvature.SMALL_CURVE
    raise InvalidPatternError(f"Connection {connection!r} joins a side to itself", connection)
