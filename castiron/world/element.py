"""Elemental alignments carried by obstacles, resources and abilities."""

from __future__ import annotations

from enum import Enum

from numpy.random import Generator, default_rng


class Element(str, Enum):
    """Enumerates the elements. ``UNSET`` is a placeholder, never rolled."""

    UNSET = "unset"
    FIRE = "fire"
    ICE = "ice"
    WIND = "wind"
    WATER = "water"
    ELECTRIC = "electric"
    EARTH = "earth"
    LIGHT = "light"
    DARK = "dark"

    @staticmethod
    def from_value(value: Element | str) -> Element:
        """Return the matching element, accepting any capitalisation."""

        if isinstance(value, Element):
            return value
        return Element(str(value).strip().lower())

    @property
    def label(self) -> str:
        return self.value.capitalize()


ROLLABLE_ELEMENTS: tuple[Element, ...] = tuple(
    element for element in Element if element is not Element.UNSET
)


def sample_element(rng: Generator | None = None) -> Element:
    """Return an element other than ``UNSET``, uniformly at random."""

    rng = rng or default_rng()
    return ROLLABLE_ELEMENTS[int(rng.integers(0, len(ROLLABLE_ELEMENTS)))]


__all__ = ["Element", "ROLLABLE_ELEMENTS", "sample_element"]
