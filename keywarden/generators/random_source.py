"""
Randomness Providers
=====================

Every random draw made by the generators and by the simulated breach table
goes through a :class:`RandomSource`, so callers choose between the
operating system CSPRNG (the default) and a seeded, reproducible stream.

Shuffling is a Fisher-Yates pass built on ``randbelow`` and produces every
permutation with equal probability for any provider.

References:
    - Knuth, D. E. (1997). The Art of Computer Programming, Vol. 2,
      Section 3.4.2, Algorithm P.
    - Python ``secrets`` module. https://docs.python.org/3/library/secrets.html
"""

from __future__ import annotations

import random
import secrets
from abc import ABC, abstractmethod
from typing import MutableSequence, Optional, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(ABC):
    """Abstract randomness provider."""

    @abstractmethod
    def randbelow(self, upper: int) -> int:
        """Uniform integer in ``[0, upper)``; *upper* must be positive."""

    @abstractmethod
    def random(self) -> float:
        """Uniform float in ``[0.0, 1.0)``."""

    def choice(self, seq: Sequence[T]) -> T:
        if not seq:
            raise IndexError("Cannot choose from an empty sequence")
        return seq[self.randbelow(len(seq))]

    def randrange(self, start: int, stop: int) -> int:
        """Uniform integer in ``[start, stop)``."""
        return start + self.randbelow(stop - start)

    def shuffle(self, items: MutableSequence[T]) -> None:
        """Shuffle *items* in place (Fisher-Yates)."""
        for i in range(len(items) - 1, 0, -1):
            j = self.randbelow(i + 1)
            items[i], items[j] = items[j], items[i]


class SecureRandomSource(RandomSource):
    """Draws from the operating system CSPRNG via :mod:`secrets`."""

    def __init__(self) -> None:
        self._system = secrets.SystemRandom()

    def randbelow(self, upper: int) -> int:
        return secrets.randbelow(upper)

    def random(self) -> float:
        return self._system.random()


class SeededRandomSource(RandomSource):
    """Reproducible Mersenne Twister stream; not for real secrets."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = random.Random(seed)

    def randbelow(self, upper: int) -> int:
        if upper <= 0:
            raise ValueError("upper must be positive")
        return self._rng.randrange(upper)

    def random(self) -> float:
        return self._rng.random()


def default_random_source(secure: bool = True, seed: Optional[int] = None) -> RandomSource:
    """Secure source unless a seed is given or *secure* is false."""
    if seed is not None or not secure:
        return SeededRandomSource(seed)
    return SecureRandomSource()
