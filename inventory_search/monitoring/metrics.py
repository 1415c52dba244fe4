"""
Metrics Collection for Inventory Search

This module records search metrics with prometheus-client. Each manager owns
its own CollectorRegistry, so several managers (for example one per test) can
coexist without duplicate-registration errors.

Metrics:
    searches_performed_total{query_type}: searches by query kind
        (empty, text, intent)
    search_latency_seconds: end-to-end search latency
    search_results_returned: number of results per search

Example Usage:
    from inventory_search.monitoring.metrics import MetricsManager

    metrics = MetricsManager()
    metrics.increment_counter("searches_performed", labels={"query_type": "text"})
    metrics.observe_value("search_latency", 0.004)

    # Expose the registry for scraping
    metrics.start_server(9100)
"""

import logging
from typing import Dict, Optional

from prometheus_client import CollectorRegistry, Counter, Histogram, start_http_server

logger = logging.getLogger(__name__)

RESULT_COUNT_BUCKETS = (0, 1, 5, 10, 25, 50, 100, 250, 1000)


class MetricsManager:
    """Metrics manager."""

    def __init__(self, enabled: bool = True):
        """Initialize metrics manager.

        Args:
            enabled: Record metrics when True, otherwise every call is a no-op
        """
        self.enabled = enabled
        self.registry = CollectorRegistry()
        self.initialized = False
        self.counters: Dict[str, Counter] = {}
        self.histograms: Dict[str, Histogram] = {}

    def initialize(self) -> None:
        """Create metric collectors."""
        if self.initialized:
            return

        self.counters["searches_performed"] = Counter(
            "searches_performed_total",
            "Total number of searches performed",
            ["query_type"],
            registry=self.registry,
        )
        self.histograms["search_latency"] = Histogram(
            "search_latency_seconds",
            "Search latency in seconds",
            registry=self.registry,
        )
        self.histograms["search_results"] = Histogram(
            "search_results_returned",
            "Number of results returned per search",
            buckets=RESULT_COUNT_BUCKETS,
            registry=self.registry,
        )
        self.initialized = True

    def start_server(self, port: int) -> None:
        """Expose the registry over HTTP.

        Args:
            port: Port to listen on
        """
        self.initialize()
        start_http_server(port, registry=self.registry)
        logger.info(f"Started Prometheus metrics server on port {port}")

    def increment_counter(
        self, name: str, value: int = 1, labels: Optional[Dict[str, str]] = None
    ) -> None:
        """Increment counter.

        Args:
            name: Counter name
            value: Value to increment by
            labels: Counter labels
        """
        if not self.enabled:
            return
        self.initialize()

        counter = self.counters.get(name)
        if counter is None:
            logger.error(f"Counter {name} not found")
            return

        try:
            if labels:
                counter.labels(**labels).inc(value)
            else:
                counter.inc(value)
        except ValueError as e:
            logger.error(f"Failed to increment counter {name}: {e}")

    def observe_value(self, name: str, value: float) -> None:
        """Observe histogram value.

        Args:
            name: Histogram name
            value: Value to observe
        """
        if not self.enabled:
            return
        self.initialize()

        histogram = self.histograms.get(name)
        if histogram is None:
            logger.error(f"Histogram {name} not found")
            return

        histogram.observe(value)

    def get_value(self, name: str, labels: Optional[Dict[str, str]] = None) -> Optional[float]:
        """Read a sample value from the registry.

        Args:
            name: Sample name, e.g. ``searches_performed_total``
            labels: Sample labels

        Returns:
            Sample value, or None when it has not been recorded
        """
        return self.registry.get_sample_value(name, labels or {})


__all__ = ["MetricsManager"]
