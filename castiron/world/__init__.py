"""Engine configuration and the procedural features placed on the grid."""

from .config import (
    Context,
    DEFAULT_GRID_RADIUS,
    DEFAULT_MAX_OBSTACLE_LEN,
    DEFAULT_OBSTACLE_TERMINATION_ODDS,
)
from .element import Element, ROLLABLE_ELEMENTS, sample_element
from .obstacle import Obstacle
from .resource import Resource, ResourceState
from .rng import DEFAULT_STREAM, EngineRandomness, OBSTACLE_STREAM, RESOURCE_STREAM

__all__ = [
    "Context",
    "DEFAULT_GRID_RADIUS",
    "DEFAULT_MAX_OBSTACLE_LEN",
    "DEFAULT_OBSTACLE_TERMINATION_ODDS",
    "DEFAULT_STREAM",
    "Element",
    "EngineRandomness",
    "OBSTACLE_STREAM",
    "Obstacle",
    "RESOURCE_STREAM",
    "ROLLABLE_ELEMENTS",
    "Resource",
    "ResourceState",
    "sample_element",
]
