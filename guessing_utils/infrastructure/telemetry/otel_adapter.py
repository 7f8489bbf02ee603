"""OpenTelemetry adapter for game metrics.

Why: Rounds played and submissions rejected are the numbers worth watching.
"""

from dataclasses import dataclass
from importlib import import_module
from typing import Any

from guessing_utils.application.ports import TelemetryPort


@dataclass
class OtelConfig:
    """Configuration for OpenTelemetry."""

    service_name: str = "guessing-utils"
    otlp_endpoint: str | None = None  # e.g., "http://localhost:4317"
    environment: str = "production"
    enable_console: bool = False


class OpenTelemetryAdapter(TelemetryPort):
    """OpenTelemetry adapter exposing counters through ``incr()``.

    Note: Gracefully handles missing opentelemetry-sdk dependency.
          Metrics become no-ops if library not installed.
    """

    def __init__(self, cfg: OtelConfig) -> None:
        self._cfg = cfg
        self._meter: Any | None = None
        self._counters: dict[str, Any] = {}
        self._init_otel()

    def _init_otel(self) -> None:
        try:
            otel_sdk = import_module("opentelemetry.sdk.metrics")
            otel_export = import_module("opentelemetry.sdk.metrics.export")
            otel_metrics = import_module("opentelemetry.metrics")
            otel_resources = import_module("opentelemetry.sdk.resources")

            resource = otel_resources.Resource.create(
                {
                    "service.name": self._cfg.service_name,
                    "deployment.environment": self._cfg.environment,
                }
            )

            readers = []
            if self._cfg.otlp_endpoint:
                otel_otlp = import_module("opentelemetry.exporter.otlp.proto.grpc.metric_exporter")
                exporter = otel_otlp.OTLPMetricExporter(endpoint=self._cfg.otlp_endpoint)
                readers.append(otel_export.PeriodicExportingMetricReader(exporter))
            if self._cfg.enable_console:
                readers.append(
                    otel_export.PeriodicExportingMetricReader(otel_export.ConsoleMetricExporter())
                )

            provider = otel_sdk.MeterProvider(resource=resource, metric_readers=readers)
            otel_metrics.set_meter_provider(provider)
            self._meter = otel_metrics.get_meter(__name__)
        except Exception:
            # Metrics become no-ops without opentelemetry-sdk installed
            self._meter = None

    def incr(self, name: str, tags: dict[str, Any] | None = None) -> None:
        """Increment a counter metric.

        Examples:
            - incr("guess.submissions.total", {"status": "parse_error"})
            - incr("guess.rounds.total", {"result": "solved"})
        """
        if self._meter is None:
            return

        try:
            if name not in self._counters:
                self._counters[name] = self._meter.create_counter(
                    name=name,
                    description=f"Counter for {name}",
                )
            self._counters[name].add(1, attributes=tags or {})
        except Exception:
            # Never crash game logic on metric errors
            pass
