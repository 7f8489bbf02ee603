from __future__ import annotations

from abc import ABC, abstractmethod


class RandomPort(ABC):
    """Port for uniform integer draws.

    Why (SAM): Secret generation needs a swappable randomness source so tests
    can substitute a fixed sequence. Infrastructure provides the production
    implementation (ThreadLocalRandom).
    """

    @abstractmethod
    def randint(self, low: int, high: int) -> int:
        """Return a uniformly drawn integer N with low <= N <= high."""
        ...
