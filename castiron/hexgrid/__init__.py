from .directions import HexDirection, Side, Vertex, sample_direction
from .provider import Provider
from .coords import (
    Bounds,
    CoordinateError,
    InvalidParamError,
    OutOfBoundsError,
    Position,
    SumNotZeroError,
    Translation,
)

__all__ = [
    "HexDirection",
    "Side",
    "Vertex",
    "sample_direction",
    "Provider",
    "Bounds",
    "CoordinateError",
    "InvalidParamError",
    "OutOfBoundsError",
    "Position",
    "SumNotZeroError",
    "Translation",
]
