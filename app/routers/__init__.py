"""API routers for the Healthcare Facility Directory."""

from app.routers import audit_logs, auth, cities, directory, facilities

__all__ = ["audit_logs", "auth", "cities", "directory", "facilities"]
