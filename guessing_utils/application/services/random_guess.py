"""Random secret generation.

Why: The draw interval is the same closed interval the Guess invariant
checks, so the result goes straight to the constructor, skipping parsing.
"""

from __future__ import annotations

from guessing_utils.application.ports.random_port import RandomPort
from guessing_utils.domain.value_objects import GUESS_MAX, GUESS_MIN, Guess


def draw_guess(rng: RandomPort) -> Guess:
    """Return a Guess drawn uniformly from [0, 100], endpoints included."""
    return Guess(rng.randint(GUESS_MIN, GUESS_MAX))
