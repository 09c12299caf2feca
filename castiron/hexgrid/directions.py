"""Edge (side) and corner (vertex) directions of a hex cell.

Both enumerations are tied to angles measured counter-clockwise from East and
to a dense index ``0..5``. The conversions go through the explicit tables at
the bottom of this module rather than through enum values, so the tables are
the only place the layout of a cell is written down.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Dict, Tuple, TypeVar

from numpy.random import Generator, default_rng

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .coords import Translation

NUM_HEX_DIRECTIONS = 6
TAU = 2.0 * math.pi
SECTOR = TAU / NUM_HEX_DIRECTIONS

D = TypeVar("D", bound="HexDirection")


class HexDirection(Enum):
    """Behaviour shared by :class:`Side` and :class:`Vertex`."""

    @classmethod
    def count(cls) -> int:
        return NUM_HEX_DIRECTIONS

    @classmethod
    def _table(cls) -> _DirectionTable:
        return _TABLES[cls]

    @classmethod
    def default(cls: type[D]) -> D:
        """Return the direction with index 0."""

        return cls._table().members[0]

    @classmethod
    def from_index(cls: type[D], index: int) -> D:
        if not 0 <= index < NUM_HEX_DIRECTIONS:
            raise ValueError(f"invalid index for {cls.__name__}: {index}")
        return cls._table().members[index]

    @classmethod
    def from_angle(cls: type[D], theta: float) -> D:
        """Return the direction whose 60 degree sector encloses ``theta``.

        ``theta`` is in radians and is reduced modulo ``2*pi`` first, so any
        finite angle is accepted. Sectors are half-open: a boundary angle
        belongs to the sector that starts there.
        """

        if not math.isfinite(theta):
            raise ValueError(f"cannot convert angle {theta!r} to {cls.__name__}")
        reduced = theta % TAU
        for upper, member in cls._table().boundaries:
            if reduced < upper:
                return member
        # Tiny negative angles reduce to exactly TAU in floating point.
        return cls.from_angle(0.0)

    @property
    def angle(self) -> float:
        """Angle of the direction in radians, within ``[0, 2*pi)``."""

        return self._table().angles[self]

    @property
    def index(self) -> int:
        return self._table().members.index(self)

    def rotated(self: D, steps: int = 1) -> D:
        """Return the direction ``steps`` sixths of a turn counter-clockwise."""

        return type(self).from_angle(self.angle + steps * SECTOR)


class Side(HexDirection):
    """Directions pointing across an edge, towards an adjacent cell."""

    NORTHEAST = "northeast"
    NORTH = "north"
    NORTHWEST = "northwest"
    SOUTHWEST = "southwest"
    SOUTH = "south"
    SOUTHEAST = "southeast"

    @staticmethod
    def from_translation(translation: Translation) -> Side:
        """Return the side a unit translation moves towards."""

        return translation.to_side()

    @property
    def translation(self) -> Translation:
        from .coords import Translation

        return Translation.from_side(self)

    def adjacent_vertices(self) -> Tuple[Vertex, Vertex]:
        """Vertices at either end of this side, in counter-clockwise order."""

        return _SIDE_VERTICES[self]


class Vertex(HexDirection):
    """Directions pointing at a corner shared by three cells."""

    EAST = "east"
    NORTHEAST = "northeast"
    NORTHWEST = "northwest"
    WEST = "west"
    SOUTHWEST = "southwest"
    SOUTHEAST = "southeast"

    def adjacent_sides(self) -> Tuple[Side, Side]:
        """Sides meeting at this vertex, in counter-clockwise order."""

        return _VERTEX_SIDES[self]


def sample_direction(kind: type[D], rng: Generator | None = None) -> D:
    """Return a uniformly random member of ``kind``."""

    rng = rng or default_rng()
    return kind.from_angle(float(rng.random()) * TAU)


@dataclass(frozen=True)
class _DirectionTable:
    members: Tuple[HexDirection, ...]
    angles: Dict[HexDirection, float]
    # (exclusive upper bound, member) in ascending order of the bound
    boundaries: Tuple[Tuple[float, HexDirection], ...]


_TABLES: Dict[type, _DirectionTable] = {
    Side: _DirectionTable(
        members=(
            Side.NORTHEAST,
            Side.NORTH,
            Side.NORTHWEST,
            Side.SOUTHWEST,
            Side.SOUTH,
            Side.SOUTHEAST,
        ),
        angles={
            Side.NORTHEAST: math.pi / 6.0,
            Side.NORTH: math.pi / 2.0,
            Side.NORTHWEST: 5.0 * math.pi / 6.0,
            Side.SOUTHWEST: 7.0 * math.pi / 6.0,
            Side.SOUTH: 3.0 * math.pi / 2.0,
            Side.SOUTHEAST: 11.0 * math.pi / 6.0,
        },
        boundaries=(
            (math.pi / 3.0, Side.NORTHEAST),
            (2.0 * math.pi / 3.0, Side.NORTH),
            (math.pi, Side.NORTHWEST),
            (4.0 * math.pi / 3.0, Side.SOUTHWEST),
            (5.0 * math.pi / 3.0, Side.SOUTH),
            (TAU, Side.SOUTHEAST),
        ),
    ),
    Vertex: _DirectionTable(
        members=(
            Vertex.EAST,
            Vertex.NORTHEAST,
            Vertex.NORTHWEST,
            Vertex.WEST,
            Vertex.SOUTHWEST,
            Vertex.SOUTHEAST,
        ),
        angles={
            Vertex.EAST: 0.0,
            Vertex.NORTHEAST: math.pi / 3.0,
            Vertex.NORTHWEST: 2.0 * math.pi / 3.0,
            Vertex.WEST: math.pi,
            Vertex.SOUTHWEST: 4.0 * math.pi / 3.0,
            Vertex.SOUTHEAST: 5.0 * math.pi / 3.0,
        },
        boundaries=(
            (math.pi / 6.0, Vertex.EAST),
            (math.pi / 2.0, Vertex.NORTHEAST),
            (5.0 * math.pi / 6.0, Vertex.NORTHWEST),
            (7.0 * math.pi / 6.0, Vertex.WEST),
            (3.0 * math.pi / 2.0, Vertex.SOUTHWEST),
            (11.0 * math.pi / 6.0, Vertex.SOUTHEAST),
            (TAU, Vertex.EAST),
        ),
    ),
}

_SIDE_VERTICES: Dict[Side, Tuple[Vertex, Vertex]] = {
    Side.NORTHEAST: (Vertex.EAST, Vertex.NORTHEAST),
    Side.NORTH: (Vertex.NORTHEAST, Vertex.NORTHWEST),
    Side.NORTHWEST: (Vertex.NORTHWEST, Vertex.WEST),
    Side.SOUTHWEST: (Vertex.WEST, Vertex.SOUTHWEST),
    Side.SOUTH: (Vertex.SOUTHWEST, Vertex.SOUTHEAST),
    Side.SOUTHEAST: (Vertex.SOUTHEAST, Vertex.EAST),
}

_VERTEX_SIDES: Dict[Vertex, Tuple[Side, Side]] = {
    Vertex.EAST: (Side.SOUTHEAST, Side.NORTHEAST),
    Vertex.NORTHEAST: (Side.NORTHEAST, Side.NORTH),
    Vertex.NORTHWEST: (Side.NORTH, Side.NORTHWEST),
    Vertex.WEST: (Side.NORTHWEST, Side.SOUTHWEST),
    Vertex.SOUTHWEST: (Side.SOUTHWEST, Side.SOUTH),
    Vertex.SOUTHEAST: (Side.SOUTH, Side.SOUTHEAST),
}


__all__ = [
    "HexDirection",
    "NUM_HEX_DIRECTIONS",
    "SECTOR",
    "Side",
    "TAU",
    "Vertex",
    "sample_direction",
]
