"""Elementally-aligned resources such as campfires or ponds.

A resource boosts abilities of its element for actors within ``radius`` cells
of its origin. Each use draws it down one level of :class:`ResourceState`.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from enum import IntEnum

from numpy.random import Generator

from ..hexgrid import Position
from .config import Context
from .element import Element, sample_element
from .rng import RESOURCE_STREAM

logger = logging.getLogger(__name__)


class ResourceState(IntEnum):
    """Fill level of a resource; the value is the potency it grants."""

    DEPLETED = 0
    LOW = 1
    PARTIAL = 2
    HIGH = 3
    FULL = 4
    OVERFLOW = 5


@dataclass
class Resource:
    """State tracked for a resource placed on the grid."""

    element: Element = Element.UNSET
    state: ResourceState = ResourceState.DEPLETED
    origin: Position = field(default_factory=Position.default)
    radius: int = 0
    uid: uuid.UUID = field(default_factory=uuid.uuid4)

    def __post_init__(self) -> None:
        self.state = ResourceState(self.state)
        if self.radius < 0:
            raise ValueError("radius cannot be negative")

    @classmethod
    def random(cls, ctx: Context, rng: Generator | None = None) -> Resource:
        """Create a random resource whose area stays entirely on the grid.

        Without ``rng`` the draws come from the context's resource stream.
        """

        rng = rng or ctx.randomness().generator(RESOURCE_STREAM)
        element = sample_element(rng)
        state = ResourceState(int(rng.integers(ResourceState.LOW, ResourceState.OVERFLOW + 1)))
        radius = int(rng.integers(0, ctx.max_resource_radius))
        origin = Position.random_constrained(ctx, radius, rng)
        return cls(element=element, state=state, origin=origin, radius=radius)

    @property
    def depleted(self) -> bool:
        return self.state is ResourceState.DEPLETED

    def consume(self) -> int | None:
        """Draw the resource down one level.

        Returns the potency of the level before the draw, or ``None`` when the
        resource was already depleted.
        """

        if self.depleted:
            return None
        potency = int(self.state)
        self.state = ResourceState(potency - 1)
        logger.debug("Resource %s consumed: %s -> %s", self.uid, potency, self.state.name)
        return potency

    def replenish(self, magnitude: int) -> None:
        """Raise the fill level by ``magnitude``, saturating at ``OVERFLOW``."""

        if magnitude < 0:
            raise ValueError("magnitude must be non-negative")
        self.state = ResourceState(min(int(self.state) + magnitude, ResourceState.OVERFLOW))
        logger.debug("Resource %s replenished to %s", self.uid, self.state.name)

    def intensify(self, magnitude: int) -> None:
        if magnitude < 0:
            raise ValueError("magnitude must be non-negative")
        self.radius += magnitude

    def weaken(self, magnitude: int) -> None:
        if magnitude < 0:
            raise ValueError("magnitude must be non-negative")
        if magnitude > self.radius:
            raise ValueError("cannot weaken a resource below radius 0")
        self.radius -= magnitude

    def covers(self, position: Position) -> bool:
        """Return ``True`` if ``position`` lies within the resource's radius."""

        return self.origin.distance_to(position) <= self.radius


__all__ = ["Resource", "ResourceState"]
