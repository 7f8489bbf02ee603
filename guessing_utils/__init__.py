"""Guessing utilities: a validated 0-100 guess, comparison and random secrets."""

from guessing_utils.config.composition import gen_random
from guessing_utils.domain.errors import GuessParseError, GuessRangeError
from guessing_utils.domain.value_objects import GUESS_MAX, GUESS_MIN, Guess, Ordering, parse_guess

__all__ = [
    "GUESS_MAX",
    "GUESS_MIN",
    "Guess",
    "GuessParseError",
    "GuessRangeError",
    "Ordering",
    "gen_random",
    "parse_guess",
]
