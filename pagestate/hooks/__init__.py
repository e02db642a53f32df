"""Optional logging and metrics hooks for the paginator."""

from .events import EventLogger, noop_logger, stdlib_event_logger
from .metrics import MetricsCollector, NoopMetrics

__all__ = [
    "EventLogger",
    "noop_logger",
    "stdlib_event_logger",
    "MetricsCollector",
    "NoopMetrics"
]
