"""Interactive console game on top of the PlayRound use case.

The interface layer is thin: read a line, hand it to the use case, print
what comes back. All rules live in application/domain.
"""

import argparse
import sys
from dataclasses import replace

from loguru import logger

from guessing_utils.application.dto.round_dto import Hint
from guessing_utils.config.composition import build_container, configure_logging
from guessing_utils.config.settings import AppSettings
from guessing_utils.domain.errors import GuessParseError, GuessRangeError, ValidationError
from guessing_utils.domain.value_objects import GUESS_MAX, GUESS_MIN

PROMPT = f"Enter your guess ({GUESS_MIN}-{GUESS_MAX}): "


def positive_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid positive int value: {raw!r}") from None
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be > 0, got {value}")
    return value


def _attempts(n: int) -> str:
    return f"{n} attempt" if n == 1 else f"{n} attempts"


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser("guessing-game")
    ap.add_argument("--attempts", type=positive_int, default=None, help="Attempts per round")
    ap.add_argument("--seed", type=int, default=None, help="Seed for a reproducible secret")
    args = ap.parse_args(argv)

    try:
        settings = AppSettings()
        if args.seed is not None:
            settings = replace(settings, random_seed=args.seed)
        configure_logging(settings)

        container = build_container(settings)
        game = container.build_round(max_attempts=args.attempts)
    except (ValueError, ValidationError) as err:
        print(f"[ERROR] {type(err).__name__}: {err}")
        return 1

    print("Welcome to the Number Guessing Game!")
    print(
        f"You have {_attempts(game.attempts_left)} to guess the number "
        f"between {GUESS_MIN} and {GUESS_MAX}."
    )

    while not game.finished:
        try:
            line = input(PROMPT)
        except EOFError:
            print()
            logger.info("Input closed before the round was decided")
            return 1

        result = game.submit(line)
        if not result.ok or result.value is None:
            if isinstance(result.error, GuessRangeError):
                print(f"Please enter a number between {GUESS_MIN} and {GUESS_MAX}.")
            elif isinstance(result.error, GuessParseError):
                print("Please enter a whole number.")
            else:
                print(f"[ERROR] {type(result.error).__name__}: {result.error}")
            continue

        outcome = result.value
        if outcome.hint is Hint.TOO_LOW:
            print("Too low!")
        elif outcome.hint is Hint.TOO_HIGH:
            print("Too high!")
        else:
            print(f"Correct! You guessed the number in {_attempts(outcome.attempts_used)}.")

    if game.solved:
        return 0
    print(f"Out of attempts. The number was {game.secret}.")
    return 1


if __name__ == "__main__":
    sys.exit(main())
