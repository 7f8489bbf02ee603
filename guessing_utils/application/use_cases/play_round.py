# guessing_utils/application/use_cases/play_round.py
from __future__ import annotations

from loguru import logger

from guessing_utils.application.dto.round_dto import Hint, RoundOutcome
from guessing_utils.application.ports.telemetry_port import TelemetryPort
from guessing_utils.domain.errors import (
    DomainError,
    GuessParseError,
    GuessRangeError,
    RoundOverError,
    ValidationError,
)
from guessing_utils.domain.types import Result
from guessing_utils.domain.value_objects import Guess, Ordering

_HINTS = {
    Ordering.LESS: Hint.TOO_LOW,
    Ordering.EQUAL: Hint.CORRECT,
    Ordering.GREATER: Hint.TOO_HIGH,
}


class PlayRound:
    """
    Application Use-Case for one round of the guessing game.
    No I/O, compares submitted text against the secret; reports via Result[T, E].

    Rejected input (not a number, out of range) does not consume an attempt.
    Once the secret is found or the attempts run out, every further
    submission fails with RoundOverError.
    """

    def __init__(
        self,
        secret: Guess,
        max_attempts: int,
        telemetry: TelemetryPort | None = None,
    ) -> None:
        if max_attempts <= 0:
            raise ValidationError("max_attempts must be > 0")
        self._secret = secret
        self._max_attempts = max_attempts
        self._telemetry = telemetry
        self._attempts_used = 0
        self._solved = False

    @property
    def secret(self) -> Guess:
        return self._secret

    @property
    def attempts_used(self) -> int:
        return self._attempts_used

    @property
    def attempts_left(self) -> int:
        return self._max_attempts - self._attempts_used

    @property
    def solved(self) -> bool:
        return self._solved

    @property
    def finished(self) -> bool:
        return self._solved or self.attempts_left == 0

    def submit(self, text: str) -> Result[RoundOutcome, DomainError]:
        if self.finished:
            return Result.failure(RoundOverError("round is already over"))

        parsed = Guess.parse(text)
        if not parsed.ok or parsed.value is None:
            self._record_rejection(parsed.error)
            return Result.failure(parsed.error)  # type: ignore[arg-type]

        guess = parsed.value
        self._attempts_used += 1
        hint = _HINTS[guess.compare(self._secret)]
        self._solved = hint is Hint.CORRECT
        self._incr("guess.submissions.total", {"status": "accepted"})
        logger.debug(
            "Guess {} -> {} ({} of {} attempts)",
            guess.value,
            hint.value,
            self._attempts_used,
            self._max_attempts,
        )

        if self.finished:
            result = "solved" if self._solved else "exhausted"
            self._incr("guess.rounds.total", {"result": result})
            logger.info("Round {} after {} attempts", result, self._attempts_used)

        return Result.success(
            RoundOutcome(
                guess=guess,
                hint=hint,
                attempts_used=self._attempts_used,
                attempts_left=self.attempts_left,
            )
        )

    def _record_rejection(self, err: BaseException | None) -> None:
        if isinstance(err, GuessRangeError):
            status = "range_error"
        elif isinstance(err, GuessParseError):
            status = "parse_error"
        else:
            status = "error"
        self._incr("guess.submissions.total", {"status": status})
        logger.debug("Rejected guess input: {}", err)

    def _incr(self, name: str, tags: dict[str, str]) -> None:
        if self._telemetry is not None:
            self._telemetry.incr(name, tags)
