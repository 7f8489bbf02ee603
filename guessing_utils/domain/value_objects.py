from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum

from guessing_utils.domain.errors import GuessParseError, GuessRangeError
from guessing_utils.domain.types import Result

GUESS_MIN = 0
GUESS_MAX = 100

# Bounds of the signed 32-bit representation; larger literals count as overflow.
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_INT_LITERAL = re.compile(r"[+-]?[0-9]+")


class Ordering(IntEnum):
    LESS = -1
    EQUAL = 0
    GREATER = 1

    def reverse(self) -> Ordering:
        return Ordering(-self.value)


@dataclass(slots=True, frozen=True, order=True)
class Guess:
    """A guessed number that always lies in the closed interval [0, 100].

    Prefer the checked factories ``Guess.new`` and ``Guess.parse``, which
    report invalid input through ``Result``. Calling ``Guess(value)`` directly
    validates too, but raises ``GuessRangeError`` instead.

    Instances are immutable, hashable and totally ordered by their value, so
    they compare with ``<``/``==`` as well as through ``compare``.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"Guess value must be int, got {type(self.value).__name__}")
        if not (GUESS_MIN <= self.value <= GUESS_MAX):
            raise GuessRangeError(self.value)

    @classmethod
    def new(cls, value: int) -> Result[Guess, GuessRangeError]:
        """Create a guess from an integer, failing if it is outside 0-100."""
        if not (GUESS_MIN <= value <= GUESS_MAX):
            return Result.failure(GuessRangeError(value))
        return Result.success(cls(value))

    @classmethod
    def parse(cls, text: str) -> Result[Guess, GuessParseError | GuessRangeError]:
        """Create a guess from untrusted text such as a line of user input.

        Surrounding whitespace and line terminators are ignored. The rest must
        be a base-10 integer literal with an optional sign; anything else, or a
        literal that overflows a 32-bit integer, is a ``GuessParseError``.
        A well-formed integer outside 0-100 is a ``GuessRangeError``.
        """
        stripped = text.strip()
        if not stripped:
            return Result.failure(GuessParseError(text, "empty input"))
        if not _INT_LITERAL.fullmatch(stripped):
            return Result.failure(GuessParseError(text))

        parsed = int(stripped)
        if not (_INT_MIN <= parsed <= _INT_MAX):
            return Result.failure(GuessParseError(text, "too large to be a valid integer"))

        return cls.new(parsed)

    def compare(self, other: Guess) -> Ordering:
        if not isinstance(other, Guess):
            raise TypeError(f"cannot compare Guess with {type(other).__name__}")
        return Ordering((self.value > other.value) - (self.value < other.value))

    def __str__(self) -> str:
        return str(self.value)


def parse_guess(text: str) -> Result[Guess, GuessParseError | GuessRangeError]:
    return Guess.parse(text)
