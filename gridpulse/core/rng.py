"""Injected sources of uniform randomness.

Generators never touch global random state: every call takes a
``RandomSource`` and draws from it in a fixed order, so a seeded source
reproduces the same output. Use one source per generation call; a single
stream shared across threads makes per-city output depend on call order.
"""

from __future__ import annotations
from typing import Optional, Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class RandomSource(Protocol):
    def next(self) -> float:
        """Return a float uniformly drawn from [0, 1)."""
        ...


class GeneratorSource:
    """RandomSource backed by a numpy Generator."""

    def __init__(self, generator: np.random.Generator):
        self._gen = generator

    def next(self) -> float:
        return float(self._gen.random())


class SeededRandomSource(GeneratorSource):
    """Deterministic source for tests and reproducible fixtures."""

    def __init__(self, seed: int = 0):
        self.seed = seed
        super().__init__(np.random.default_rng(seed))


class SystemRandomSource(GeneratorSource):
    """Source seeded from OS entropy."""

    def __init__(self):
        super().__init__(np.random.default_rng())


def default_source(seed: Optional[int] = None) -> RandomSource:
    """Fresh source per call: seeded when `seed` is given, else system entropy."""
    if seed is None:
        return SystemRandomSource()
    return SeededRandomSource(seed)


def spawn(seed: Optional[int], n: int) -> list[RandomSource]:
    """
    Return `n` independent sources. With a seed, children derive from a
    numpy SeedSequence so each stream is reproducible on its own.
    """
    if seed is None:
        return [SystemRandomSource() for _ in range(n)]
    children = np.random.SeedSequence(seed).spawn(n)
    return [GeneratorSource(np.random.default_rng(c)) for c in children]


def uniform(rng: RandomSource, low: float, high: float) -> float:
    """Draw from U(low, high)."""
    return low + (high - low) * rng.next()


def randint(rng: RandomSource, high: int) -> int:
    """Draw an integer from [0, high)."""
    return int(rng.next() * high)
