"""FastAPI dependencies shared across routers."""

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.database import get_db
from app.exceptions import AuthFailedError
from app.metrics import RepositoryMetrics
from app.models.user import User
from app.services.auth_service import AuthService

bearer_scheme = HTTPBearer(auto_error=False)


def get_repository_metrics(request: Request) -> RepositoryMetrics:
    """The metrics client created at startup (see app.main)."""
    return request.app.state.repository_metrics


def get_auth_service(
    db: Session = Depends(get_db),
    metrics: RepositoryMetrics = Depends(get_repository_metrics),
) -> AuthService:
    return AuthService(db, metrics)


def get_bearer_token(credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme)) -> str:
    if credentials is None:
        raise AuthFailedError("Authentication required")
    return credentials.credentials


def get_current_user(
    token: str = Depends(get_bearer_token),
    auth_service: AuthService = Depends(get_auth_service),
) -> User:
    return auth_service.get_current_user(token)
