from typing import Any


class NullTelemetry:
    """Telemetry sink that discards everything (telemetry disabled)."""

    def incr(self, name: str, tags: dict[str, Any] | None = None) -> None:
        return None
