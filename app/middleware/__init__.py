"""HTTP middleware package."""

from .monitoring import HTTPMetrics, MonitoringMiddleware
from .request_logging import RequestLoggingMiddleware
from .security import SecurityHeadersMiddleware

__all__ = [
    "HTTPMetrics",
    "MonitoringMiddleware",
    "RequestLoggingMiddleware",
    "SecurityHeadersMiddleware",
]
