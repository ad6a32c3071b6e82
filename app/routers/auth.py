"""Authentication API endpoints."""

from fastapi import APIRouter, Depends, status
import logging

from app.dependencies import get_auth_service, get_bearer_token, get_current_user
from app.models.user import User
from app.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    UserInfo,
    VerificationTokenRequest,
    VerificationTokenResponse,
)
from app.schemas.common import MessageResponse
from app.services.auth_service import AuthService

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/register", response_model=UserInfo, status_code=status.HTTP_201_CREATED)
async def register(request: RegisterRequest, auth_service: AuthService = Depends(get_auth_service)):
    """Create an account identified by email and/or phone number."""
    return auth_service.register(
        request.password,
        email=request.email,
        phone_number=request.phone_number,
        name=request.name,
    )


@router.post("/login", response_model=LoginResponse)
async def login(request: LoginRequest, auth_service: AuthService = Depends(get_auth_service)):
    """Authenticate user and return JWT token."""
    user, token, expires_in = auth_service.login(
        request.password,
        email=request.email,
        phone_number=request.phone_number,
    )
    return LoginResponse(
        access_token=token,
        token_type="bearer",
        expires_in=expires_in,
        user=UserInfo.model_validate(user),
    )


@router.get("/me", response_model=UserInfo)
async def get_me(user: User = Depends(get_current_user)):
    """Get the user behind the bearer token."""
    return user


@router.delete("/logout", response_model=MessageResponse)
async def logout(
    token: str = Depends(get_bearer_token),
    auth_service: AuthService = Depends(get_auth_service)
):
    """End the session behind the bearer token."""
    auth_service.logout(token)
    return MessageResponse(message="Logged out")


@router.post(
    "/verification-tokens",
    response_model=VerificationTokenResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_verification_token(
    request: VerificationTokenRequest,
    auth_service: AuthService = Depends(get_auth_service)
):
    return auth_service.create_verification_token(
        request.identifier,
        token=request.token,
        expires_in_minutes=request.expires_in_minutes,
    )


@router.delete("/verification-tokens/{identifier}/{token}", response_model=VerificationTokenResponse)
async def use_verification_token(
    identifier: str,
    token: str,
    auth_service: AuthService = Depends(get_auth_service)
):
    """Consume a verification token. It cannot be used again."""
    return auth_service.use_verification_token(identifier, token)
