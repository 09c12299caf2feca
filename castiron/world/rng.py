"""Named random streams derived from a single engine seed.

Each feature generator draws from its own stream, so adding resources to a
map never shifts the obstacle layout produced by the same seed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import hashlib

from numpy.random import Generator, PCG64, SeedSequence

DEFAULT_STREAM = "default"
OBSTACLE_STREAM = "obstacles"
RESOURCE_STREAM = "resources"


def _stream_key(name: str) -> int:
    """Map a stream name to a stable 32-bit spawn key."""

    digest = hashlib.blake2b(name.encode("utf-8"), digest_size=4).digest()
    return int.from_bytes(digest, "big")


@dataclass
class EngineRandomness:
    """Hands out one PCG64 ``Generator`` per stream name.

    Stream ``name`` is seeded from ``SeedSequence(seed, spawn_key=(key,))``
    where ``key`` hashes the name, so the same seed and name always replay
    the same draws. Without a seed, OS entropy is drawn once and kept in
    ``seed`` so a run can be reproduced afterwards.
    """

    seed: int | None = None
    _generators: dict[str, Generator] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.seed is not None and self.seed < 0:
            raise ValueError("seed must be non-negative")
        self.seed = int(SeedSequence(self.seed).entropy)

    def generator(self, stream: str = DEFAULT_STREAM) -> Generator:
        """Return the generator for ``stream``, creating it on first use."""

        generator = self._generators.get(stream)
        if generator is None:
            sequence = SeedSequence(self.seed, spawn_key=(_stream_key(stream),))
            generator = Generator(PCG64(sequence))
            self._generators[stream] = generator
        return generator

    def reset(self, stream: str | None = None) -> None:
        """Rewind ``stream`` (or every stream) to its first draw."""

        if stream is None:
            self._generators.clear()
        else:
            self._generators.pop(stream, None)

    def streams(self) -> list[str]:
        return sorted(self._generators)


__all__ = [
    "DEFAULT_STREAM",
    "EngineRandomness",
    "OBSTACLE_STREAM",
    "RESOURCE_STREAM",
]
