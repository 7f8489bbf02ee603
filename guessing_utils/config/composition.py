"""Composition root: wires adapters into use cases from AppSettings.

Why: Single place for wiring; domain and application stay free of
     infrastructure imports.
"""

import sys
from functools import lru_cache

from loguru import logger

from guessing_utils.application.ports import RandomPort, TelemetryPort
from guessing_utils.application.services.random_guess import draw_guess
from guessing_utils.application.use_cases.play_round import PlayRound
from guessing_utils.config.settings import AppSettings
from guessing_utils.domain.value_objects import Guess
from guessing_utils.infrastructure.randomness.thread_local_random import ThreadLocalRandom
from guessing_utils.infrastructure.telemetry.null_telemetry import NullTelemetry
from guessing_utils.infrastructure.telemetry.otel_adapter import OpenTelemetryAdapter, OtelConfig


@lru_cache(maxsize=1)
def default_random() -> RandomPort:
    """Process-wide unseeded source used when callers inject none."""
    return ThreadLocalRandom()


def gen_random(rng: RandomPort | None = None) -> Guess:
    """Draw a random Guess, using the process-wide source unless one is injected."""
    return draw_guess(rng if rng is not None else default_random())


def configure_logging(settings: AppSettings) -> None:
    logger.remove()
    logger.add(sys.stderr, level=settings.log_level)


class Container:
    """Dependency injection container for the game.

    Responsibilities:
    1. Read settings from environment (via AppSettings)
    2. Choose adapters based on settings (seeded random, telemetry on/off)
    3. Inject dependencies into use cases
    """

    def __init__(self, settings: AppSettings | None = None) -> None:
        self.settings = settings or AppSettings()
        self._random: RandomPort | None = None
        self._telemetry: TelemetryPort | None = None

    def get_random(self) -> RandomPort:
        """Get or create the random source based on settings."""
        if self._random is None:
            if self.settings.random_seed is None:
                self._random = default_random()
            else:
                logger.debug("Using seeded random source (seed={})", self.settings.random_seed)
                self._random = ThreadLocalRandom(seed=self.settings.random_seed)
        return self._random

    def get_telemetry(self) -> TelemetryPort:
        """Get or create the telemetry adapter based on settings."""
        if self._telemetry is None:
            if self.settings.telemetry_enabled:
                self._telemetry = OpenTelemetryAdapter(
                    OtelConfig(
                        otlp_endpoint=self.settings.otlp_endpoint or None,
                        environment=self.settings.telemetry_environment,
                    )
                )
            else:
                self._telemetry = NullTelemetry()
        return self._telemetry

    def build_round(self, max_attempts: int | None = None) -> PlayRound:
        """Draw a fresh secret and start a round."""
        attempts = max_attempts if max_attempts is not None else self.settings.max_attempts
        return PlayRound(
            secret=draw_guess(self.get_random()),
            max_attempts=attempts,
            telemetry=self.get_telemetry(),
        )


def build_container(settings: AppSettings | None = None) -> Container:
    return Container(settings)
