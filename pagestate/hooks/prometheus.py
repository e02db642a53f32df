"""Prometheus metrics for pagination monitoring.

This module provides a MetricsCollector backed by prometheus_client:
- Page fetch counter and duration histogram
- Rows fetched counter
- Error counter by kind (invalid_token, no_previous_page, query_failed)
- Active history tokens gauge

Usage:
    from pagestate.hooks.prometheus import PrometheusCollector

    collector = PrometheusCollector()
    paginator = Paginator(session, query, PaginatorOptions(metrics=collector))
"""

from __future__ import annotations

from typing import Optional

from prometheus_client import REGISTRY, CollectorRegistry, Counter, Gauge, Histogram

from ..config import get_settings


class PrometheusCollector:
    """MetricsCollector that records to a Prometheus registry."""

    def __init__(
        self,
        registry: Optional[CollectorRegistry] = None,
        namespace: Optional[str] = None,
    ):
        """
        Create and register the pagination metrics.

        Args:
            registry: Registry to register on (defaults to the global registry)
            namespace: Metric name prefix (defaults to the configured namespace)
        """
        registry = registry if registry is not None else REGISTRY
        namespace = namespace or get_settings().metrics_namespace

        self.page_fetch_total = Counter(
            "page_fetch_total",
            "Total number of pages fetched",
            namespace=namespace,
            registry=registry,
        )
        self.page_duration_seconds = Histogram(
            "page_duration_seconds",
            "Time taken per page fetch",
            namespace=namespace,
            registry=registry,
        )
        self.rows_fetched_total = Counter(
            "rows_fetched_total",
            "Total number of rows returned across pages",
            namespace=namespace,
            registry=registry,
        )
        self.errors_total = Counter(
            "errors_total",
            "Total number of pagination errors",
            labelnames=["kind"],
            namespace=namespace,
            registry=registry,
        )
        self.active_tokens = Gauge(
            "active_tokens",
            "Number of currently cached pagination tokens",
            namespace=namespace,
            registry=registry,
        )

    def observe_fetch(self, row_count: int, duration: float) -> None:
        self.page_fetch_total.inc()
        self.page_duration_seconds.observe(duration)
        self.rows_fetched_total.inc(row_count)

    def observe_error(self, kind: str) -> None:
        self.errors_total.labels(kind=kind).inc()

    def observe_active_tokens(self, count: int) -> None:
        self.active_tokens.set(count)
