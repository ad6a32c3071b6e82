"""Authentication schemas."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, model_validator


class RegisterRequest(BaseModel):
    """Registration: a password and at least one of email / phone number."""
    name: Optional[str] = Field(None, max_length=255)
    email: Optional[EmailStr] = None
    phone_number: Optional[str] = Field(None, min_length=5, max_length=30)
    password: str = Field(..., min_length=1, max_length=128)  # length policy enforced by AuthService

    @model_validator(mode="after")
    def require_identifier(self):
        if not self.email and not self.phone_number:
            raise ValueError("Email or phone number is required")
        return self


class LoginRequest(BaseModel):
    """Login with email or phone number."""
    email: Optional[EmailStr] = None
    phone_number: Optional[str] = None
    password: str = Field(..., min_length=1)

    @model_validator(mode="after")
    def require_identifier(self):
        if not self.email and not self.phone_number:
            raise ValueError("Email or phone number is required")
        return self


class UserInfo(BaseModel):
    """User information returned to clients; never includes the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    email_verified: Optional[datetime] = None
    image: Optional[str] = None
    created_at: datetime


class LoginResponse(BaseModel):
    """Login response schema."""
    access_token: str
    token_type: str = "bearer"
    expires_in: int
    user: UserInfo


class VerificationTokenRequest(BaseModel):
    identifier: str = Field(..., min_length=1, max_length=255)
    token: Optional[str] = Field(None, min_length=6, max_length=255)
    expires_in_minutes: Optional[int] = Field(None, gt=0, le=60 * 24 * 7)


class VerificationTokenResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    identifier: str
    token: str
    expires: datetime
