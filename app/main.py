"""
Main FastAPI Application Entry Point
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response
from contextlib import asynccontextmanager
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
import logging

from app.config import settings
from app.database import health_check, init_db
from app.exceptions import exception_handlers
from app.metrics import RepositoryMetrics
from app.middleware import HTTPMetrics, MonitoringMiddleware, RequestLoggingMiddleware, SecurityHeadersMiddleware
from app.routers import audit_logs, auth, cities, directory, facilities

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info(f"Starting {settings.APP_NAME} ({settings.ENVIRONMENT})")

    # Creates missing tables only; existing ones are left untouched
    try:
        init_db()
    except Exception as e:
        logger.error(f"Failed to create database tables: {e}")
        raise

    yield

    logger.info(f"Shutting down {settings.APP_NAME}")


app = FastAPI(
    title=settings.APP_NAME,
    description="REST API for healthcare facilities, doctors, insurance and appointments",
    version=settings.APP_VERSION,
    lifespan=lifespan,
    exception_handlers=exception_handlers,
)

# Process-wide metrics clients; repositories receive repository_metrics via app.state
app.state.repository_metrics = RepositoryMetrics()
app.state.http_metrics = HTTPMetrics()

# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PATCH", "DELETE"],
    allow_headers=["*"],
)

# Last added runs first: monitoring wraps logging wraps security headers
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(MonitoringMiddleware, http_metrics=app.state.http_metrics)

app.include_router(auth.router, prefix="/api/auth", tags=["Authentication"])
app.include_router(cities.router, prefix="/api/cities", tags=["Cities"])
app.include_router(facilities.router, prefix="/api/facilities", tags=["Facilities"])
for prefix, tag, resource_router in directory.RESOURCE_ROUTERS:
    app.include_router(resource_router, prefix=f"/api{prefix}", tags=[tag])
app.include_router(audit_logs.router, prefix="/api/audit-logs", tags=["Audit Log"])


@app.get("/ping")
async def ping():
    """Liveness probe."""
    return {"message": "pong"}


@app.get("/health")
async def health():
    """Health check for load balancers, including database connectivity."""
    database_ok = health_check()
    return {
        "status": "healthy" if database_ok else "degraded",
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
        "database": "connected" if database_ok else "unavailable",
    }


@app.get("/metrics")
async def metrics(request: Request):
    """Prometheus text exposition of the metrics registry."""
    registry = request.app.state.repository_metrics.registry
    return Response(generate_latest(registry), media_type=CONTENT_TYPE_LATEST)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.SERVER_PORT, reload=settings.DEBUG)
