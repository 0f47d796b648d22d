from __future__ import annotations


class HexLoopError(Exception):
    """Base class for hexloop errors."""
    pass


class InvariantViolation(HexLoopError):
    """Board state is corrupted; the game cannot safely continue."""
    pass


class InvalidSideError(InvariantViolation, ValueError):
    """Side index outside [0, 6)."""

    def __init__(self, side: int):
        self.side = side
        super().__init__(f"Invalid side: {side}")


class InvalidPatternError(InvariantViolation, ValueError):
    """Connections do not pair all six sides exactly once."""

    def __init__(self, message: str, connections: object = None):
        self.message = message
        self.connections = connections
        super().__init__(message)


class MissingSideError(InvariantViolation):
    """A side could not be found among an occupied tile's connections."""

    def __init__(self, message: str, coordinate: tuple[int, int] | None = None, side: int | None = None):
        self.message = message
        self.coordinate = coordinate
        self.side = side
        super().__init__(message)


class UnknownCoordinateError(HexLoopError, KeyError):
    """Coordinate is not on the board."""

    def __init__(self, coordinate: tuple[int, int]):
        self.coordinate = coordinate
        super().__init__(f"Unknown coordinate: {coordinate}")

    def __str__(self) -> str:
        return f"Unknown coordinate: {self.coordinate}"
