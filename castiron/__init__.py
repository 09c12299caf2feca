"""Hex-grid geometry core and procedural world features for the CastIron engine."""

__version__ = "0.3.0"

__all__ = ["__version__"]
