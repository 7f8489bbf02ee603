"""Thread-local random adapter providing uniform integer draws.

This is the production implementation of RandomPort.
For tests, inject a fixed-sequence fake instead.
"""

from __future__ import annotations

import itertools
import random
import threading

from ...application.ports.random_port import RandomPort


class ThreadLocalRandom(RandomPort):
    """Random adapter holding one generator per thread.

    Threads never share generator state, so concurrent draws are independent.
    With a seed, the n-th thread to draw gets a generator seeded from
    ``"{seed}:{n}"``: reproducible runs, distinct streams per thread.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._seed = seed
        self._local = threading.local()
        self._counter = itertools.count()
        self._lock = threading.Lock()

    def _generator(self) -> random.Random:
        rng = getattr(self._local, "rng", None)
        if rng is None:
            if self._seed is None:
                rng = random.Random()
            else:
                with self._lock:
                    n = next(self._counter)
                rng = random.Random(f"{self._seed}:{n}")
            self._local.rng = rng
        return rng

    def randint(self, low: int, high: int) -> int:
        """Return N with low <= N <= high, both ends inclusive."""
        return self._generator().randint(low, high)
