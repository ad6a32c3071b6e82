"""User, session and verification token models for authentication."""

from sqlalchemy import Column, DateTime, ForeignKey, Index, String
from app.database import Base
from app.models.base import ID_TYPE, TimestampMixin


class User(TimestampMixin, Base):
    """Registered user. Signs in with email or phone number."""

    __tablename__ = "users"

    name = Column(String(255), nullable=True)
    email = Column(String(255), unique=True, nullable=True)
    phone_number = Column(String(30), unique=True, nullable=True)
    password = Column(String(255), nullable=False)  # bcrypt hash, never plaintext
    email_verified = Column(DateTime, nullable=True)
    image = Column(String(500), nullable=True)

    __table_args__ = (
        Index("idx_users_email", "email"),
        Index("idx_users_phone", "phone_number"),
    )


class UserSession(TimestampMixin, Base):
    """Login session backing an issued bearer token."""

    __tablename__ = "sessions"

    user_id = Column(ID_TYPE, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    expires = Column(DateTime, nullable=False)
    session_token = Column(String(255), unique=True, nullable=False)


class VerificationToken(TimestampMixin, Base):
    """Single-use, time-boxed token keyed by identifier (email/phone) and token string."""

    __tablename__ = "verification_tokens"

    identifier = Column(String(255), nullable=False)
    token = Column(String(255), nullable=False)
    expires = Column(DateTime, nullable=False)

    __table_args__ = (
        Index("idx_verification_identifier_token", "identifier", "token", unique=True),
    )
