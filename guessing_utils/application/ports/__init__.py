"""Application ports package."""

from guessing_utils.application.ports.random_port import RandomPort
from guessing_utils.application.ports.telemetry_port import TelemetryPort

__all__ = [
    "RandomPort",
    "TelemetryPort",
]
