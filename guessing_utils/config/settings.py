"""Application settings with environment-driven configuration.

Why: Single place that reads the environment; everything else receives
     settings via dependency injection.
"""

import os
from dataclasses import dataclass, field


def _optional_int(name: str) -> int | None:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _positive_int(name: str, default: str) -> int:
    raw = os.getenv(name, default).strip()
    try:
        value = int(raw)
    except ValueError:
        value = 0
    if value <= 0:
        raise ValueError(f"{name} must be a positive integer, got {raw!r}")
    return value


@dataclass(frozen=True)
class AppSettings:
    """Application settings loaded from environment variables.

    This is the ONLY place where environment variables are read.
    The guessing range itself is fixed at 0-100 and is not configurable.
    """

    # ===== Game Configuration =====
    max_attempts: int = field(default_factory=lambda: _positive_int("GUESS_MAX_ATTEMPTS", "10"))

    random_seed: int | None = field(default_factory=lambda: _optional_int("GUESS_RANDOM_SEED"))
    # Unset = fresh OS entropy per thread; set = reproducible secrets

    # ===== Logging Configuration =====
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "WARNING").upper())

    # ===== Telemetry Configuration =====
    telemetry_enabled: bool = field(
        default_factory=lambda: os.getenv("TELEMETRY_ENABLED", "false").lower() == "true"
    )
    otlp_endpoint: str = field(default_factory=lambda: os.getenv("OTLP_ENDPOINT", ""))
    # Empty string = no OTLP export

    telemetry_environment: str = field(
        default_factory=lambda: os.getenv("TELEMETRY_ENVIRONMENT", "production")
    )
