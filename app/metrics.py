"""
Prometheus instrumentation for repository operations.

A RepositoryMetrics client is constructed once (in app.main) and handed to
every repository. It owns the table -> TableMetrics map, so a test can build
its own client on a private CollectorRegistry.
"""

from contextlib import contextmanager
from dataclasses import dataclass
import threading
import time

from prometheus_client import REGISTRY, CollectorRegistry, Counter, Gauge, Histogram

# 1ms, 5ms, 10ms, 100ms, 500ms, 1s, 5s, 10s
QUERY_DURATION_BUCKETS = (0.001, 0.005, 0.01, 0.1, 0.5, 1.0, 5.0, 10.0)

STATUS_SUCCESS = "success"
STATUS_FAILURE = "failure"


@dataclass(frozen=True)
class TableMetrics:
    """Collectors for a single table."""

    query_duration: Histogram
    query_total: Counter
    in_flight_queries: Gauge


class RepositoryMetrics:
    """Per-table query metrics, registered lazily and cached for the client's lifetime."""

    def __init__(self, registry: CollectorRegistry = None):
        self.registry = registry if registry is not None else REGISTRY
        self._tables = {}
        self._lock = threading.Lock()

    def for_table(self, table: str) -> TableMetrics:
        """Return the table's collectors, registering them on first use."""
        with self._lock:
            metrics = self._tables.get(table)
            if metrics is None:
                metrics = self._register(table)
                self._tables[table] = metrics
            return metrics

    def _register(self, table: str) -> TableMetrics:
        return TableMetrics(
            query_duration=Histogram(
                f"database_{table}_query_duration_seconds",
                f"Duration of queries on the {table} table in seconds",
                ["operation", "status"],
                buckets=QUERY_DURATION_BUCKETS,
                registry=self.registry,
            ),
            query_total=Counter(
                f"database_{table}_query_total",
                f"Total number of queries executed on the {table} table",
                ["operation", "status"],
                registry=self.registry,
            ),
            in_flight_queries=Gauge(
                f"database_{table}_in_flight_queries",
                f"Number of in-flight queries on the {table} table",
                ["operation"],
                registry=self.registry,
            ),
        )

    @contextmanager
    def track(self, table: str, operation: str):
        """Measure one operation. Exceptions propagate unchanged."""
        metrics = self.for_table(table)
        in_flight = metrics.in_flight_queries.labels(operation=operation)
        in_flight.inc()
        start = time.perf_counter()
        outcome = STATUS_FAILURE
        try:
            yield
            outcome = STATUS_SUCCESS
        finally:
            in_flight.dec()
            metrics.query_duration.labels(operation=operation, status=outcome).observe(
                time.perf_counter() - start
            )
            metrics.query_total.labels(operation=operation, status=outcome).inc()
