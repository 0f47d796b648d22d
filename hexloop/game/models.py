"""Value models passed between the core and the presentation layer."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from hexloop.game.types import Connection, Coordinate, normalize_connection


class ChainEnd(str, Enum):
    CLOSED = "closed"
    TOUCHES_EDGE = "touches_edge"
    TOUCHES_EMPTY = "touches_empty"
    STEP_LIMIT = "step_limit"  # walk cap hit; treated as open


class BoardPhase(str, Enum):
    IDLE = "idle"
    RESOLVING = "resolving"
    GAME_OVER = "game_over"


class PlacementRejection(str, Enum):
    OCCUPIED = "occupied"
    RESOLVING = "resolving"
    OFF_BOARD = "off_board"


class LoopLink(BaseModel):
    """One traversal of a tile: entered at ``connection[0]``, left at ``connection[1]``."""

    coordinate: Coordinate
    connection: Connection

    def key(self) -> tuple[Coordinate, Connection]:
        """Direction-independent identity used for deduplication."""
        return self.coordinate, normalize_connection(self.connection)


class Loop(BaseModel):
    links: list[LoopLink] = Field(default_factory=list)

    @property
    def length(self) -> int:
        return len(self.links)

    def coordinates(self) -> set[Coordinate]:
        return {link.coordinate for link in self.links}

    def shares_link_with(self, other: Loop) -> bool:
        keys = {link.key() for link in self.links}
        return any(link.key() in keys for link in other.links)


class ChainWalk(BaseModel):
    """Result of following one connection through neighboring tiles."""

    links: list[LoopLink] = Field(default_factory=list)
    end: ChainEnd

    @property
    def closed(self) -> bool:
        return self.end == ChainEnd.CLOSED

    def to_loop(self) -> Loop:
        return Loop(links=list(self.links))


class PlacementResult(BaseModel):
    accepted: bool
    coordinate: Coordinate
    pattern: list[Connection] | None = None
    closed_loops: list[Loop] = Field(default_factory=list)
    points_awarded: int = 0
    rejection: PlacementRejection | None = None


class TickResult(BaseModel):
    cleared_loops: list[Loop] = Field(default_factory=list)
    board_clear_bonus_awarded: bool = False
    points_awarded: int = 0
