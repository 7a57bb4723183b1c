"""
Shared metrics configuration for the CFTools client.

The collector owns a private ``CollectorRegistry`` unless one is passed in,
so several clients can live in one process without duplicate registration.
Expose it with ``prometheus_client.generate_latest(collector.registry)`` or
pass the application's registry.
"""

from typing import Dict, Any, Optional

from prometheus_client import Counter, Histogram, CollectorRegistry


class MetricsCollector:
    """Centralized metrics collector for the client."""

    def __init__(self, namespace: str = "cftools", registry: Optional[CollectorRegistry] = None):
        self.namespace = namespace
        self.registry = registry if registry is not None else CollectorRegistry()
        self._metrics: Dict[str, Any] = {}
        self._setup_metrics()

    def _setup_metrics(self):
        """Set up cache and HTTP metrics."""
        self._metrics["cache_hits_total"] = Counter(
            f"{self.namespace}_cache_hits_total",
            "Total cache hits",
            ["operation"],
            registry=self.registry
        )

        self._metrics["cache_misses_total"] = Counter(
            f"{self.namespace}_cache_misses_total",
            "Total cache misses",
            ["operation"],
            registry=self.registry
        )

        self._metrics["http_requests_total"] = Counter(
            f"{self.namespace}_http_requests_total",
            "Total HTTP requests sent to the data API",
            ["method", "endpoint", "status_code"],
            registry=self.registry
        )

        self._metrics["http_request_duration_seconds"] = Histogram(
            f"{self.namespace}_http_request_duration_seconds",
            "HTTP request duration in seconds",
            ["method", "endpoint"],
            registry=self.registry
        )

    def record_cache_access(self, operation: str, hit: bool):
        """Record a cache hit or miss for an operation."""
        metric_name = "cache_hits_total" if hit else "cache_misses_total"
        self.increment_counter(metric_name, operation=operation)

    def record_http_request(self, method: str, endpoint: str, status_code: int, duration: float):
        """Record HTTP request metrics."""
        self.increment_counter(
            "http_requests_total", method=method, endpoint=endpoint, status_code=str(status_code)
        )
        self.observe_histogram("http_request_duration_seconds", duration, method=method, endpoint=endpoint)

    def increment_counter(self, metric_name: str, **labels):
        """Increment a counter metric."""
        if metric_name in self._metrics:
            self._metrics[metric_name].labels(**labels).inc()

    def observe_histogram(self, metric_name: str, value: float, **labels):
        """Observe a histogram metric."""
        if metric_name in self._metrics:
            self._metrics[metric_name].labels(**labels).observe(value)

