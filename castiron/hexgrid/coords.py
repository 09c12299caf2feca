"""Cube coordinates for the hexagonal world grid.

``(0, 0, 0)`` is the centre cell. The three components always add up to zero;
moving to an edge-adjacent cell changes two of them by one::

              _______
             /       \\
     _______/ 0, 1,-1 \\_______
    /       \\         /       \\
   /-1, 1, 0 \\_______/ 1, 0,-1 \\
   \\         /       \\         /
    \\_______/ 0, 0, 0 \\_______/
    /       \\         /       \\
   /-1, 0, 1 \\_______/ 1,-1, 0 \\
   \\         /       \\         /
    \\_______/ 0,-1, 1 \\_______/
            \\         /
             \\_______/

The grid is a hexagon of radius ``grid_radius`` around the centre: a cell is
on the grid when none of its components exceeds the radius in absolute value.
"""

from __future__ import annotations

import numbers
import re
from dataclasses import dataclass
from typing import Dict, Iterator, Protocol

from numpy.random import Generator, default_rng

from .directions import Side


class Bounds(Protocol):
    """Anything that knows the radius of the playable grid."""

    @property
    def grid_radius(self) -> int: ...


class CoordinateError(ValueError):
    """Raised when cube coordinates are malformed or off the grid."""


class SumNotZeroError(CoordinateError):
    """Raised when the three components do not add up to zero."""

    def __init__(self, x: int, y: int, z: int) -> None:
        super().__init__(f"components ({x}, {y}, {z}) do not add up to 0")
        self.x = x
        self.y = y
        self.z = z


class OutOfBoundsError(CoordinateError):
    """Raised when a position falls outside the grid radius."""

    def __init__(self, x: int, y: int, z: int, grid_radius: int) -> None:
        super().__init__(f"position ({x},{y},{z}) is outside grid radius {grid_radius}")
        self.x = x
        self.y = y
        self.z = z
        self.grid_radius = grid_radius


class InvalidParamError(CoordinateError):
    """Raised when a placement constraint cannot be satisfied on the grid."""

    def __init__(self, name: str, detail: str) -> None:
        super().__init__(f"invalid parameter {name}: {detail}")
        self.name = name


def _check_components(x: int, y: int, z: int) -> None:
    for component in (x, y, z):
        if isinstance(component, bool) or not isinstance(component, numbers.Integral):
            raise TypeError(f"cube components must be integers, got {component!r}")
    if x + y + z != 0:
        raise SumNotZeroError(x, y, z)


@dataclass(frozen=True, slots=True)
class Translation:
    """Displacement between two cells. Not tied to any grid size."""

    x: int
    y: int
    z: int

    def __post_init__(self) -> None:
        _check_components(self.x, self.y, self.z)

    @staticmethod
    def from_side(side: Side) -> Translation:
        """Return the unit step across ``side``."""

        return _SIDE_TRANSLATIONS[side]

    def to_side(self) -> Side:
        try:
            return _TRANSLATION_SIDES[self]
        except KeyError:
            raise ValueError(f"{self!r} is not a single step across a side") from None

    def magnitude(self) -> int:
        """Fewest cell-to-cell hops needed to cover the translation."""

        return max(abs(self.x), abs(self.y), abs(self.z))

    def __neg__(self) -> Translation:
        return Translation(-self.x, -self.y, -self.z)

    def __add__(self, other: Translation) -> Translation:
        if not isinstance(other, Translation):
            return NotImplemented
        return Translation(self.x + other.x, self.y + other.y, self.z + other.z)


_POSITION_PATTERN = re.compile(r"^\(\s*(-?\d+)\s*,\s*(-?\d+)\s*,\s*(-?\d+)\s*\)$")


@dataclass(frozen=True, slots=True)
class Position:
    """A cell on the grid.

    Constructing a ``Position`` directly only enforces the zero-sum rule; use
    :meth:`new` to also check it against a grid radius. Positions are
    immutable, and :meth:`translate` returns a new instance.
    """

    x: int = 0
    y: int = 0
    z: int = 0

    def __post_init__(self) -> None:
        _check_components(self.x, self.y, self.z)

    @classmethod
    def new(cls, x: int, y: int, z: int, bounds: Bounds) -> Position:
        """Build a position, validating the zero-sum rule and then the bounds."""

        position = cls(x, y, z)
        position._check_bounds(bounds)
        return position

    @classmethod
    def default(cls) -> Position:
        return cls(0, 0, 0)

    @classmethod
    def parse(cls, text: str, bounds: Bounds | None = None) -> Position:
        """Parse the ``(x,y,z)`` form produced by ``str(position)``."""

        match = _POSITION_PATTERN.match(text.strip())
        if match is None:
            raise ValueError(f"cannot parse position from {text!r}")
        x, y, z = (int(group) for group in match.groups())
        if bounds is None:
            return cls(x, y, z)
        return cls.new(x, y, z, bounds)

    @classmethod
    def random(cls, bounds: Bounds, rng: Generator | None = None) -> Position:
        """Return a random position on the grid."""

        return cls._sample(bounds, bounds.grid_radius, rng)

    @classmethod
    def random_constrained(
        cls, bounds: Bounds, dist_from_edge: int, rng: Generator | None = None
    ) -> Position:
        """Return a random position at least ``dist_from_edge`` cells inside the edge."""

        if dist_from_edge < 0:
            raise InvalidParamError("dist_from_edge", "must be non-negative")
        if dist_from_edge >= bounds.grid_radius:
            raise InvalidParamError(
                "dist_from_edge",
                f"{dist_from_edge} leaves no room on a grid of radius {bounds.grid_radius}",
            )
        return cls._sample(bounds, bounds.grid_radius - dist_from_edge, rng)

    @classmethod
    def _sample(cls, bounds: Bounds, max_dist: int, rng: Generator | None) -> Position:
        rng = rng or default_rng()
        x = int(rng.integers(-max_dist, max_dist))
        # The range of y depends on the sign of x, otherwise z could leave the
        # hexagon through the corners of its bounding parallelogram.
        if x < 0:
            y = int(rng.integers(0, -x))
        elif x == 0:
            y = int(rng.integers(-max_dist, max_dist))
        else:
            y = int(rng.integers(-x, 0))
        return cls.new(x, y, -x - y, bounds)

    def _check_bounds(self, bounds: Bounds) -> None:
        radius = bounds.grid_radius
        if abs(self.x) > radius or abs(self.y) > radius or abs(self.z) > radius:
            raise OutOfBoundsError(self.x, self.y, self.z, radius)

    def in_bounds(self, bounds: Bounds) -> bool:
        return max(abs(self.x), abs(self.y), abs(self.z)) <= bounds.grid_radius

    def delta_from(self, other: Position) -> Translation:
        """Translation that moves ``other`` onto this position."""

        return Translation(self.x - other.x, self.y - other.y, self.z - other.z)

    def delta_to(self, other: Position) -> Translation:
        """Translation that moves this position onto ``other``."""

        return Translation(other.x - self.x, other.y - self.y, other.z - self.z)

    def translate(self, translation: Translation, bounds: Bounds) -> Position:
        """Return this position moved by ``translation``.

        Raises :class:`OutOfBoundsError` if the destination is off the grid;
        ``self`` is left untouched either way.
        """

        return Position.new(
            self.x + translation.x,
            self.y + translation.y,
            self.z + translation.z,
            bounds,
        )

    def can_translate(self, translation: Translation, bounds: Bounds) -> bool:
        try:
            self.translate(translation, bounds)
        except CoordinateError:
            return False
        return True

    def step(self, side: Side, bounds: Bounds) -> Position:
        return self.translate(Translation.from_side(side), bounds)

    def is_neighbor(self, other: Position) -> bool:
        return self.delta_from(other).magnitude() == 1

    def distance_to(self, other: Position) -> int:
        return self.delta_to(other).magnitude()

    def neighbors(self, bounds: Bounds) -> Iterator[Position]:
        """Yield the edge-adjacent positions that are on the grid."""

        for side in Side:
            try:
                yield self.step(side, bounds)
            except OutOfBoundsError:
                continue

    def __str__(self) -> str:
        return f"({self.x},{self.y},{self.z})"


_SIDE_TRANSLATIONS: Dict[Side, Translation] = {
    Side.NORTHEAST: Translation(1, 0, -1),
    Side.NORTH: Translation(0, 1, -1),
    Side.NORTHWEST: Translation(-1, 1, 0),
    Side.SOUTHWEST: Translation(-1, 0, 1),
    Side.SOUTH: Translation(0, -1, 1),
    Side.SOUTHEAST: Translation(1, -1, 0),
}

_TRANSLATION_SIDES: Dict[Translation, Side] = {
    translation: side for side, translation in _SIDE_TRANSLATIONS.items()
}


__all__ = [
    "Bounds",
    "CoordinateError",
    "InvalidParamError",
    "OutOfBoundsError",
    "Position",
    "SumNotZeroError",
    "Translation",
]
