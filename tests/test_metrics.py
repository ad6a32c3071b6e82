"""Tests for repository metrics instrumentation."""

import pytest
from fastapi.routing import APIRoute
from prometheus_client import CollectorRegistry
from starlette.requests import Request

from app.metrics import QUERY_DURATION_BUCKETS, RepositoryMetrics
from app.middleware.monitoring import UNMATCHED_ROUTE, route_template


def sample(registry, name, labels):
    return registry.get_sample_value(name, labels)


class TestRepositoryMetrics:
    """Per-table collectors and operation tracking."""

    def test_registration_is_idempotent(self, metrics):
        first = metrics.for_table("cities")
        second = metrics.for_table("cities")
        assert first is second

    def test_tables_get_separate_collectors(self, metrics):
        assert metrics.for_table("cities") is not metrics.for_table("doctors")

    def test_clients_on_separate_registries_do_not_collide(self, registry):
        RepositoryMetrics(registry=registry).for_table("cities")
        RepositoryMetrics(registry=CollectorRegistry()).for_table("cities")

    def test_success_is_counted(self, metrics, registry):
        with metrics.track("cities", "Find"):
            pass

        labels = {"operation": "Find", "status": "success"}
        assert sample(registry, "database_cities_query_total", labels) == 1.0
        assert sample(registry, "database_cities_query_duration_seconds_count", labels) == 1.0
        assert sample(registry, "database_cities_in_flight_queries", {"operation": "Find"}) == 0.0

    def test_failure_is_counted_and_reraised(self, metrics, registry):
        error = ValueError("boom")
        with pytest.raises(ValueError) as exc_info:
            with metrics.track("cities", "Create"):
                raise error

        assert exc_info.value is error
        labels = {"operation": "Create", "status": "failure"}
        assert sample(registry, "database_cities_query_total", labels) == 1.0
        assert sample(registry, "database_cities_query_total", {"operation": "Create", "status": "success"}) is None
        assert sample(registry, "database_cities_in_flight_queries", {"operation": "Create"}) == 0.0

    def test_in_flight_during_operation(self, metrics, registry):
        with metrics.track("cities", "FindMany"):
            assert sample(registry, "database_cities_in_flight_queries", {"operation": "FindMany"}) == 1.0

    def test_duration_buckets(self, metrics, registry):
        with metrics.track("plans", "Find"):
            pass

        for bound in QUERY_DURATION_BUCKETS:
            labels = {"operation": "Find", "status": "success", "le": str(bound)}
            assert sample(registry, "database_plans_query_duration_seconds_bucket", labels) is not None


class TestRouteTemplate:
    """Endpoint labels for HTTP metrics."""

    def test_route_from_scope(self):
        route = APIRoute("/api/cities/{id}", lambda id: None)
        request = Request({"type": "http", "route": route})
        assert route_template(request) == "/api/cities/{id}"

    def test_route_without_path(self):
        request = Request({"type": "http", "route": object()})
        assert route_template(request) == UNMATCHED_ROUTE
