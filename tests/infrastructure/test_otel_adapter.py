"""Tests for the OpenTelemetry adapter with a fake meter."""

from guessing_utils.infrastructure.telemetry.null_telemetry import NullTelemetry
from guessing_utils.infrastructure.telemetry.otel_adapter import OpenTelemetryAdapter, OtelConfig


class FakeCounter:
    def __init__(self) -> None:
        self.adds: list[tuple[int, dict]] = []

    def add(self, amount, attributes=None):  # type: ignore[no-untyped-def]
        self.adds.append((amount, attributes))


class FakeMeter:
    def __init__(self) -> None:
        self.counters: dict[str, FakeCounter] = {}

    def create_counter(self, name, description=""):  # type: ignore[no-untyped-def]
        self.counters[name] = FakeCounter()
        return self.counters[name]


class ExplodingMeter:
    def create_counter(self, name, description=""):  # type: ignore[no-untyped-def]
        raise RuntimeError("exporter down")


def test_incr_creates_counter_once_and_adds():
    adapter = OpenTelemetryAdapter(OtelConfig())
    meter = FakeMeter()
    adapter._meter = meter

    adapter.incr("guess.rounds.total", {"result": "solved"})
    adapter.incr("guess.rounds.total", {"result": "exhausted"})

    assert list(meter.counters) == ["guess.rounds.total"]
    assert meter.counters["guess.rounds.total"].adds == [
        (1, {"result": "solved"}),
        (1, {"result": "exhausted"}),
    ]


def test_incr_is_noop_without_meter():
    adapter = OpenTelemetryAdapter(OtelConfig())
    adapter._meter = None
    adapter.incr("guess.rounds.total", {"result": "solved"})


def test_incr_never_raises_on_meter_errors():
    adapter = OpenTelemetryAdapter(OtelConfig())
    adapter._meter = ExplodingMeter()
    adapter.incr("guess.submissions.total", None)


def test_null_telemetry_accepts_everything():
    NullTelemetry().incr("guess.submissions.total", {"status": "accepted"})
