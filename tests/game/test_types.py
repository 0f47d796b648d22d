"""Tests for hexloop side numbering and neighbor offsets."""

from __future__ import annotations

import pytest

from hexloop.engine.errors import InvalidPatternError, InvalidSideError
from hexloop.game.types import (
    Curvature,
    connection_curvature,
    neighbor_coordinate,
    normalize_connection,
    opposite_side,
)


class TestOppositeSide:
    def test_pairs(self) -> None:
        assert [opposite_side(s) for s in range(6)] == [3, 4, 5, 0, 1, 2]

    def test_out_of_range(self) -> None:
        with pytest.raises(InvalidSideError):
            opposite_side(6)
        with pytest.raises(InvalidSideError):
            opposite_side(-1)


class TestNeighborCoordinate:
    @pytest.mark.parametrize("side, expected", [
        (0, (5, 1)), (1, (6, 2)), (2, (5, 2)), (3, (3, 2)), (4, (2, 2)), (5, (3, 1)),
    ])
    def test_even_column(self, side: int, expected: tuple[int, int]) -> None:
        assert neighbor_coordinate((4, 2), side) == expected

    @pytest.mark.parametrize("side, expected", [
        (0, (4, 2)), (1, (5, 2)), (2, (4, 3)), (3, (2, 3)), (4, (1, 2)), (5, (2, 2)),
    ])
    def test_odd_column(self, side: int, expected: tuple[int, int]) -> None:
        assert neighbor_coordinate((3, 2), side) == expected

    def test_bad_side_fails_fast(self) -> None:
        with pytest.raises(InvalidSideError):
            neighbor_coordinate((0, 0), 7)

    def test_bad_side_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            neighbor_coordinate((0, 0), -2)


class TestConnections:
    def test_normalize(self) -> None:
        assert normalize_connection((4, 1)) == (1, 4)
        assert normalize_connection((1, 4)) == (1, 4)

    def test_curvature(self) -> None:
        assert connection_curvature((0, 3)) == Curvature.STRAIGHT
        assert connection_curvature((5, 2)) == Curvature.STRAIGHT
        assert connection_curvature((0, 2)) == Curvature.LARGE_CURVE
        assert connection_curvature((0, 4)) == Curvature.LARGE_CURVE
        assert connection_curvature((2, 3)) == Curvature.SMALL_CURVE
        assert connection_curvature((0, 5)) == Curvature.SMALL_CURVE

    def test_curvature_rejects_self_connection(self) -> None:
        with pytest.raises(InvalidPatternError):
            connection_curvature((2, 2))
