"""Obstacles: snaking chains of cells that block movement across the grid.

A single obstacle may occupy several contiguous cells. Random obstacles are
grown by a self-avoiding random walk from a random origin.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Tuple

from numpy.random import Generator

from ..hexgrid import CoordinateError, Position, Provider, Side, Translation
from .config import Context
from .element import Element, sample_element
from .rng import OBSTACLE_STREAM

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Obstacle:
    """An immutable chain of adjacent cells tagged with one element.

    ``positions`` keeps generation order: the first cell is the origin and
    every cell borders the one before it. No cell appears twice.
    """

    positions: Tuple[Position, ...]
    element: Element = Element.UNSET
    uid: uuid.UUID = field(default_factory=uuid.uuid4)

    def __post_init__(self) -> None:
        positions = tuple(self.positions)
        object.__setattr__(self, "positions", positions)
        if not positions:
            raise ValueError("an obstacle needs at least one cell")
        if len(set(positions)) != len(positions):
            raise ValueError("obstacle cells must not repeat")
        for previous, current in zip(positions, positions[1:]):
            if not previous.is_neighbor(current):
                raise ValueError(f"obstacle cells {previous} and {current} are not adjacent")

    @classmethod
    def new(cls, positions: Iterable[Position], element: Element) -> Obstacle:
        return cls(positions=tuple(positions), element=element)

    @classmethod
    def random(
        cls,
        ctx: Context,
        rng: Generator | None = None,
        *,
        origin: Position | None = None,
    ) -> Obstacle:
        """Grow a random obstacle within the limits of ``ctx``.

        Starting from ``origin`` (a random cell when omitted), the walk takes
        up to ``ctx.max_obstacle_len`` steps. Before each step it may stop
        early with probability ``ctx.obstacle_termination_odds``; it also
        stops when every neighbouring cell is off the grid or already part of
        the chain. The result always holds at least the origin.

        Without ``rng`` the walk draws from the context's obstacle stream.
        """

        rng = rng or ctx.randomness().generator(OBSTACLE_STREAM)
        if origin is None:
            origin = Position.random(ctx, rng)
        else:
            origin = Position.new(origin.x, origin.y, origin.z, ctx)
        logger.debug("Origin of random obstacle: %s", origin)

        chain = [origin]
        cursor = origin
        for added in range(ctx.max_obstacle_len):
            if float(rng.random()) < ctx.obstacle_termination_odds:
                logger.debug("Obstacle terminated after adding %d cells", added)
                break

            # A fresh provider per step keeps the walk from turning in a fixed pattern.
            provider = Provider.random(Side, rng)
            logger.debug("Re-rolled direction provider: %r", provider)

            step = _next_free_cell(cursor, chain, provider, ctx)
            if step is None:
                logger.debug("Obstacle boxed in at %s after adding %d cells", cursor, added)
                break
            cursor = step
            chain.append(cursor)
            logger.debug("%s pushed onto end of obstacle chain", cursor)

        element = sample_element(rng)
        logger.debug("Finished obstacle of %d cells with element %s", len(chain), element.value)
        return cls(positions=tuple(chain), element=element)

    @property
    def origin(self) -> Position:
        return self.positions[0]

    def __len__(self) -> int:
        return len(self.positions)

    def __iter__(self) -> Iterator[Position]:
        return iter(self.positions)

    def __contains__(self, position: object) -> bool:
        return position in self.positions


def _next_free_cell(
    cursor: Position,
    chain: list[Position],
    provider: Provider[Side],
    ctx: Context,
) -> Position | None:
    for side in provider:
        try:
            candidate = cursor.translate(Translation.from_side(side), ctx)
        except CoordinateError:
            continue
        if candidate in chain:
            continue
        return candidate
    return None


__all__ = ["Obstacle"]
