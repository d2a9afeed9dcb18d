"""Random sources used by the renderer and suggester."""

import random
import secrets
from abc import ABC, abstractmethod


class RandomSource(ABC):
    """Source of uniform random integers.

    Every random draw in the engine goes through ``randbelow`` so tests can
    substitute a seeded or scripted source.
    """

    @abstractmethod
    def randbelow(self, n: int) -> int:
        """Return a uniform random integer in ``[0, n)``.

        Args:
            n: Exclusive upper bound (must be positive)

        Returns:
            Random integer
        """
        pass

    def choice(self, alphabet: str) -> str:
        """Pick one character uniformly from ``alphabet``."""
        return alphabet[self.randbelow(len(alphabet))]

    def draw(self, alphabet: str, count: int) -> str:
        """Draw ``count`` independent characters from ``alphabet``."""
        return "".join(self.choice(alphabet) for _ in range(count))


class SystemRandomSource(RandomSource):
    """OS entropy via the ``secrets`` module."""

    def randbelow(self, n: int) -> int:
        """Return a uniform random integer in ``[0, n)``."""
        if n <= 0:
            raise ValueError(f"Upper bound must be positive, got {n}")
        return secrets.randbelow(n)


class SeededRandomSource(RandomSource):
    """Reproducible source backed by ``random.Random``."""

    def __init__(self, seed: int | str | None = None):
        """Initialize source.

        Args:
            seed: Seed for the underlying generator
        """
        self.seed = seed
        self._random = random.Random(seed)

    def randbelow(self, n: int) -> int:
        """Return a uniform random integer in ``[0, n)``."""
        if n <= 0:
            raise ValueError(f"Upper bound must be positive, got {n}")
        return self._random.randrange(n)
