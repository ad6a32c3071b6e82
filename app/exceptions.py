"""
Error taxonomy and the FastAPI handlers translating it to HTTP responses.

Repositories and services raise these; the handlers registered in
app.main are the only place they become status codes.
"""

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import logging

logger = logging.getLogger(__name__)


class DirectoryError(Exception):
    """Base class for application errors."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(DirectoryError):
    """No row matches the requested identifier."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, table: str, entity_id):
        super().__init__(f"No row in {table} with id {entity_id}")
        self.table = table
        self.entity_id = entity_id


class EntityNotFoundError(NotFoundError):
    """NotFoundError carrying the domain name of the entity ("City not found")."""

    def __init__(self, entity_name: str, table: str, entity_id):
        super().__init__(table, entity_id)
        self.message = f"{entity_name} not found"
        self.args = (self.message,)


class InvalidQueryError(DirectoryError):
    """Filter or update mapping that cannot form a valid statement."""

    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(DirectoryError):
    """Entity already exists (duplicate registration)."""

    status_code = status.HTTP_409_CONFLICT


class StorageError(DirectoryError):
    """Statement execution failed in the storage engine."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class AuthFailedError(DirectoryError):
    """Invalid credentials or token. Message stays generic."""

    status_code = status.HTTP_401_UNAUTHORIZED


class TokenExpiredError(AuthFailedError):
    """Token was valid once but its expiry has passed."""


async def directory_error_handler(request: Request, exc: DirectoryError) -> JSONResponse:
    """Render a DirectoryError as {"detail": message}."""
    if isinstance(exc, StorageError):
        logger.error(f"Storage error on {request.method} {request.url.path}: {exc.__cause__ or exc}")
        detail = "Internal server error"
    else:
        detail = exc.message
    return JSONResponse(status_code=exc.status_code, content={"detail": detail})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render request validation failures as 400 with one entry per field."""
    errors = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part != "body"]
        errors.append({
            "field": ".".join(location),
            "message": error.get("msg", "Invalid value"),
        })
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid request data", "errors": errors}
    )


exception_handlers = {
    DirectoryError: directory_error_handler,
    RequestValidationError: validation_error_handler,
}
