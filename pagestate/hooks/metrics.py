"""Metrics hooks for pagination."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class MetricsCollector(Protocol):
    """Receives pagination measurements.

    Implementations can use Prometheus, StatsD, custom logging, etc.
    """

    def observe_fetch(self, row_count: int, duration: float) -> None:
        ...

    def observe_error(self, kind: str) -> None:
        ...

    def observe_active_tokens(self, count: int) -> None:
        ...


class NoopMetrics:
    """Metrics collector that records nothing."""

    def observe_fetch(self, row_count: int, duration: float) -> None:
        pass

    def observe_error(self, kind: str) -> None:
        pass

    def observe_active_tokens(self, count: int) -> None:
        pass
