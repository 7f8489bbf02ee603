"""Domain errors (typed).

Why: Unified error family for the application layer. Parse and range
failures travel inside Result, they are not raised by the parsing path.
"""

from dataclasses import dataclass


class DomainError(Exception):
    """Base class for domain-specific errors."""


class ValidationError(DomainError):
    """Invalid input/domain state."""


@dataclass(eq=False)
class GuessParseError(ValidationError):
    """Input text is not a valid integer."""

    text: str
    reason: str = "not a valid integer"

    def __str__(self) -> str:
        return f"{self.text!r} is {self.reason}"


@dataclass(eq=False)
class GuessRangeError(ValidationError):
    """Integer lies outside the accepted guessing range."""

    value: int

    def __str__(self) -> str:
        return f"The guess value {self.value} was out of 0-100 range"


class RoundOverError(DomainError):
    """Guess submitted after the round was already decided."""
