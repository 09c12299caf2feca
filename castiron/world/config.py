"""Validated engine configuration shared by placement and generation code."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, model_validator

from .rng import EngineRandomness

DEFAULT_GRID_RADIUS = 10
DEFAULT_MAX_OBSTACLE_LEN = 5
DEFAULT_OBSTACLE_TERMINATION_ODDS = 0.05


class Context(BaseModel):
    """Read-only settings every geometry and generation call is given.

    ``grid_radius`` bounds the hexagonal world; the remaining fields budget
    the procedural features placed on it. ``max_resource_radius`` defaults to
    a quarter of the grid radius.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    grid_radius: int = Field(default=DEFAULT_GRID_RADIUS, ge=1)
    max_obstacle_len: int = Field(default=DEFAULT_MAX_OBSTACLE_LEN, ge=0)
    max_resource_radius: int = Field(ge=1)
    obstacle_termination_odds: float = Field(
        default=DEFAULT_OBSTACLE_TERMINATION_ODDS, ge=0.0, le=1.0
    )
    seed: int | None = Field(default=None, ge=0)

    _randomness: EngineRandomness | None = PrivateAttr(default=None)

    @model_validator(mode="before")
    @classmethod
    def _default_resource_radius(cls, data: Any) -> Any:
        if not isinstance(data, dict) or data.get("max_resource_radius") is not None:
            return data
        grid_radius = data.get("grid_radius", DEFAULT_GRID_RADIUS)
        if isinstance(grid_radius, bool) or not isinstance(grid_radius, int):
            # Leave the field missing; field validation reports the bad radius.
            return data
        return {**data, "max_resource_radius": max(1, grid_radius // 4)}

    @model_validator(mode="after")
    def _resource_radius_fits_grid(self) -> Context:
        if self.max_resource_radius > self.grid_radius:
            raise ValueError("max_resource_radius cannot exceed grid_radius")
        return self

    def randomness(self) -> EngineRandomness:
        """Return the random streams belonging to this context.

        The same :class:`~castiron.world.rng.EngineRandomness` is returned on
        every call, so successive generation calls continue each stream
        rather than replaying it.
        """

        if self._randomness is None:
            self._randomness = EngineRandomness(seed=self.seed)
        return self._randomness


__all__ = [
    "Context",
    "DEFAULT_GRID_RADIUS",
    "DEFAULT_MAX_OBSTACLE_LEN",
    "DEFAULT_OBSTACLE_TERMINATION_ODDS",
]
