"""Rotating iterators over the six sides or vertices of a hex cell."""

from __future__ import annotations

from typing import Iterator

from numpy.random import Generator

from .directions import SECTOR, D, sample_direction


class Provider(Iterator[D]):
    """Walks all six directions once, rotating counter-clockwise.

    Iteration starts with the direction *after* ``start`` and ends back on
    ``start``. A provider is single use; build a new one to walk again.
    """

    def __init__(self, start: D) -> None:
        self._current = start
        self._step_index = 0

    @classmethod
    def random(cls, kind: type[D], rng: Generator | None = None) -> Provider[D]:
        """Start from a uniformly random direction of ``kind``."""

        return cls(sample_direction(kind, rng))

    @property
    def current(self) -> D:
        return self._current

    @property
    def step_index(self) -> int:
        return self._step_index

    @property
    def exhausted(self) -> bool:
        return self._step_index > self.count()

    def count(self) -> int:
        return type(self._current).count()

    def __iter__(self) -> Provider[D]:
        return self

    def __next__(self) -> D:
        if not self.exhausted:
            self._step_index += 1
        if self.exhausted:
            raise StopIteration
        self._current = type(self._current).from_angle(self._current.angle + SECTOR)
        return self._current

    def __repr__(self) -> str:
        return f"Provider(current={self._current!r}, step_index={self._step_index})"


__all__ = ["Provider"]
