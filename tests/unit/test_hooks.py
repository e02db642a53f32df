"""Tests for the logging and metrics hooks."""

import logging

import pytest
from prometheus_client import CollectorRegistry

from pagestate.hooks.events import noop_logger, stdlib_event_logger
from pagestate.hooks.metrics import MetricsCollector, NoopMetrics
from pagestate.hooks.prometheus import PrometheusCollector


class TestEventLoggers:
    """Test event logging hooks."""

    def test_noop_logger(self):
        """Test the default hook accepts events."""
        assert noop_logger("page_fetched", {"rows_fetched": 1}) is None

    def test_stdlib_event_logger(self, caplog):
        """Test events are forwarded with structured fields."""
        hook = stdlib_event_logger(logging.getLogger("tests.events"))

        with caplog.at_level(logging.INFO, logger="tests.events"):
            hook("page_fetched", {"rows_fetched": 3})

        record = caplog.records[-1]
        assert record.event == "page_fetched"
        assert record.fields == {"rows_fetched": 3}
        assert "page_fetched" in record.getMessage()

    def test_stdlib_event_logger_level(self, caplog):
        """Test the configured level is used."""
        hook = stdlib_event_logger(logging.getLogger("tests.events"), level=logging.WARNING)

        with caplog.at_level(logging.INFO, logger="tests.events"):
            hook("query_failed", {"error": "boom"})

        assert caplog.records[-1].levelno == logging.WARNING


class TestMetricsCollectors:
    """Test metrics collectors."""

    def test_noop_metrics_is_a_collector(self):
        """Test the default collector satisfies the protocol."""
        metrics = NoopMetrics()

        assert isinstance(metrics, MetricsCollector)
        metrics.observe_fetch(1, 0.1)
        metrics.observe_error("invalid_token")
        metrics.observe_active_tokens(2)

    @pytest.fixture
    def registry(self) -> CollectorRegistry:
        return CollectorRegistry()

    def test_prometheus_collector_records(self, registry):
        """Test Prometheus metrics are recorded on the registry."""
        collector = PrometheusCollector(registry=registry)

        collector.observe_fetch(10, 0.25)
        collector.observe_fetch(5, 0.5)
        collector.observe_error("query_failed")
        collector.observe_active_tokens(4)

        assert isinstance(collector, MetricsCollector)
        assert registry.get_sample_value("pagestate_page_fetch_total") == 2
        assert registry.get_sample_value("pagestate_rows_fetched_total") == 15
        assert registry.get_sample_value("pagestate_page_duration_seconds_sum") == pytest.approx(0.75)
        assert registry.get_sample_value("pagestate_errors_total", {"kind": "query_failed"}) == 1
        assert registry.get_sample_value("pagestate_active_tokens") == 4

    def test_prometheus_collector_namespace(self, registry):
        """Test the namespace prefixes every metric."""
        collector = PrometheusCollector(registry=registry, namespace="users")

        collector.observe_error("invalid_token")

        assert registry.get_sample_value("users_errors_total", {"kind": "invalid_token"}) == 1
