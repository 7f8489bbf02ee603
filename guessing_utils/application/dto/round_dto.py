from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from guessing_utils.domain.value_objects import Guess


class Hint(str, Enum):
    """Where a guess lies relative to the secret."""

    TOO_LOW = "too_low"
    TOO_HIGH = "too_high"
    CORRECT = "correct"


@dataclass(frozen=True)
class RoundOutcome:
    """
    Result of one accepted guess.

    - guess: the validated guess that was submitted
    - hint: position of the guess relative to the secret
    - attempts_used: accepted guesses so far, this one included
    - attempts_left: remaining attempts after this guess
    """

    guess: Guess
    hint: Hint
    attempts_used: int
    attempts_left: int

    @property
    def solved(self) -> bool:
        return self.hint is Hint.CORRECT
