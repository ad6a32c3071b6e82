"""Prometheus instrumentation for HTTP requests."""

from prometheus_client import REGISTRY, CollectorRegistry, Counter, Histogram
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.routing import Match
import time

# 100B to 10MB
SIZE_BUCKETS = (100, 1000, 10000, 100000, 1000000, 10000000)

UNMATCHED_ROUTE = "unmatched"


class HTTPMetrics:
    """Server-level request collectors, registered once per registry."""

    def __init__(self, registry: CollectorRegistry = None):
        registry = registry if registry is not None else REGISTRY
        self.requests_total = Counter(
            "server_http_requests_total",
            "Total HTTP requests processed by the server",
            ["method", "endpoint", "status"],
            registry=registry,
        )
        self.request_duration = Histogram(
            "server_http_request_duration_seconds",
            "Duration of HTTP requests in seconds",
            ["method", "endpoint", "status"],
            registry=registry,
        )
        self.request_size = Histogram(
            "server_http_request_size_bytes",
            "Size of HTTP requests in bytes",
            ["method", "endpoint"],
            buckets=SIZE_BUCKETS,
            registry=registry,
        )
        self.response_size = Histogram(
            "server_http_response_size_bytes",
            "Size of HTTP responses in bytes",
            ["method", "endpoint", "status"],
            buckets=SIZE_BUCKETS,
            registry=registry,
        )
        self.failed_requests = Counter(
            "server_http_failed_requests_total",
            "Total HTTP requests that failed",
            ["method", "endpoint", "status"],
            registry=registry,
        )

    def observe(self, method: str, endpoint: str, status_code: int, duration: float,
                request_size: int, response_size: int):
        status = str(status_code)
        self.requests_total.labels(method, endpoint, status).inc()
        self.request_duration.labels(method, endpoint, status).observe(duration)
        self.request_size.labels(method, endpoint).observe(request_size)
        self.response_size.labels(method, endpoint, status).observe(response_size)
        if status_code >= 400:
            self.failed_requests.labels(method, endpoint, status).inc()


def route_template(request: Request) -> str:
    """Path pattern of the route that served the request ("/api/cities/{id}"), so labels stay bounded.

    Routing records the matched route in the scope; call after the request is handled.
    """
    route = request.scope.get("route")
    if route is not None:
        return getattr(route, "path", UNMATCHED_ROUTE)

    for route in request.app.routes:
        # Included routers and mounts are not guaranteed to carry a path
        path = getattr(route, "path", None)
        if path is None:
            continue
        match, _ = route.matches(request.scope)
        if match == Match.FULL:
            return path
    return UNMATCHED_ROUTE


def request_size(request: Request) -> int:
    size = len(str(request.url)) + len(request.method)
    for name, value in request.headers.items():
        size += len(name) + len(value)
    content_length = request.headers.get("content-length")
    if content_length and content_length.isdigit():
        size += int(content_length)
    return size


class MonitoringMiddleware(BaseHTTPMiddleware):
    """Record count, duration, sizes and failures of every request."""

    def __init__(self, app, http_metrics: HTTPMetrics):
        super().__init__(app)
        self.http_metrics = http_metrics

    async def dispatch(self, request: Request, call_next) -> Response:
        start_time = time.perf_counter()
        status_code = 500
        response_size = 0

        try:
            response = await call_next(request)
            status_code = response.status_code
            response_size = int(response.headers.get("content-length", 0))
            return response
        finally:
            self.http_metrics.observe(
                request.method,
                route_template(request),
                status_code,
                time.perf_counter() - start_time,
                request_size(request),
                response_size,
            )
