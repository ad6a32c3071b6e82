"""Authentication service: registration, login, bearer tokens and verification tokens."""

from datetime import timedelta
from typing import Optional, Tuple
from sqlalchemy.orm import Session
from passlib.context import CryptContext
import jwt
import logging
import secrets

from app.config import settings
from app.exceptions import AuthFailedError, ConflictError, InvalidQueryError, TokenExpiredError
from app.metrics import RepositoryMetrics
from app.models.user import User, UserSession, VerificationToken
from app.repositories.auth import SessionRepository, UserRepository, VerificationTokenRepository
from app.utils.timezone import utcnow

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

INVALID_CREDENTIALS = "Invalid credentials"


class AuthService:
    """Service for authentication and session management."""

    def __init__(self, db: Session, metrics: RepositoryMetrics):
        self.db = db
        self.users = UserRepository(db, metrics)
        self.sessions = SessionRepository(db, metrics)
        self.verification_tokens = VerificationTokenRepository(db, metrics)

    @staticmethod
    def hash_password(password: str) -> str:
        """Hash a password using bcrypt."""
        return pwd_context.hash(password)

    @staticmethod
    def verify_password(password: str, hashed_password: str) -> bool:
        if not hashed_password:
            return False
        return pwd_context.verify(password, hashed_password)

    def register(
        self,
        password: str,
        email: str = None,
        phone_number: str = None,
        name: str = None,
    ) -> User:
        """Create a user; email or phone number must be new."""
        if not email and not phone_number:
            raise InvalidQueryError("Email or phone number is required")
        if len(password) < settings.PASSWORD_MIN_LENGTH:
            raise InvalidQueryError(
                f"Password must be at least {settings.PASSWORD_MIN_LENGTH} characters"
            )

        if self.users.get_by_email_or_phone(email=email, phone_number=phone_number):
            logger.warning(f"Registration attempt for existing user: {email or phone_number}")
            raise ConflictError("User already exists")

        user = User(
            name=name,
            email=email,
            phone_number=phone_number,
            password=self.hash_password(password),
        )
        created = self.users.create(user)
        logger.info(f"User registered: {created.id}")
        return created

    def authenticate(self, password: str, email: str = None, phone_number: str = None) -> User:
        """Check credentials. Unknown user and wrong password fail identically."""
        user = self.users.get_by_email_or_phone(email=email, phone_number=phone_number)

        if not user:
            # Unknown users pay the same bcrypt cost as a wrong password
            pwd_context.dummy_verify()
            logger.warning(f"Login attempt for non-existent user: {email or phone_number}")
            raise AuthFailedError(INVALID_CREDENTIALS)

        if not self.verify_password(password, user.password):
            logger.warning(f"Failed login attempt for user: {user.id}")
            raise AuthFailedError(INVALID_CREDENTIALS)

        return user

    def login(self, password: str, email: str = None, phone_number: str = None) -> Tuple[User, str, int]:
        """Authenticate and open a session. Returns (user, token, expires_in seconds)."""
        user = self.authenticate(password, email=email, phone_number=phone_number)
        token, expires_in = self.generate_token(user)
        logger.info(f"User logged in: {user.id}")
        return user, token, expires_in

    def generate_token(self, user: User) -> Tuple[str, int]:
        """Persist a session and sign a JWT pointing at it."""
        expires_in = settings.JWT_EXPIRE_HOURS * 3600
        expire = utcnow() + timedelta(seconds=expires_in)

        session = self.sessions.create(UserSession(
            user_id=user.id,
            expires=expire,
            session_token=secrets.token_urlsafe(32),
        ))

        payload = {
            "sub": str(user.id),
            "sid": session.session_token,
            "email": user.email,
            "exp": expire,
        }

        token = jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)
        return token, expires_in

    def verify_token(self, token: str) -> dict:
        """Verify and decode JWT token."""
        try:
            return jwt.decode(
                token,
                settings.JWT_SECRET_KEY,
                algorithms=[settings.JWT_ALGORITHM]
            )
        except jwt.ExpiredSignatureError:
            raise TokenExpiredError("Token has expired")
        except jwt.InvalidTokenError:
            raise AuthFailedError("Invalid token")

    def get_current_user(self, token: str) -> User:
        """Resolve a bearer token to its user through a live session."""
        payload = self.verify_token(token)

        found = self.sessions.get_session_and_user(payload.get("sid", ""))
        if found is None:
            logger.warning(f"Token presented for unknown session (sub={payload.get('sub')})")
            raise AuthFailedError("Invalid token")

        session, user = found
        if str(user.id) != payload.get("sub"):
            logger.warning(f"Token subject does not own session {session.id}")
            raise AuthFailedError("Invalid token")
        if session.expires <= utcnow():
            raise TokenExpiredError("Token has expired")
        return user

    def logout(self, token: str) -> None:
        """Delete the session behind the token."""
        payload = self.verify_token(token)
        session = self.sessions.delete_by_token(payload.get("sid", ""))
        if session is None:
            raise AuthFailedError("Invalid token")
        logger.info(f"User logged out: {session.user_id}")

    def create_verification_token(
        self,
        identifier: str,
        token: Optional[str] = None,
        expires_in_minutes: Optional[int] = None,
    ) -> VerificationToken:
        """Issue a single-use token for an email or phone number."""
        minutes = expires_in_minutes or settings.VERIFICATION_TOKEN_EXPIRE_MINUTES
        return self.verification_tokens.create(VerificationToken(
            identifier=identifier,
            token=token or secrets.token_urlsafe(32),
            expires=utcnow() + timedelta(minutes=minutes),
        ))

    def use_verification_token(self, identifier: str, token: str) -> VerificationToken:
        """Consume a token. Unknown and expired tokens fail with different errors."""
        consumed = self.verification_tokens.consume(identifier, token)
        if consumed is None:
            logger.warning(f"Unknown verification token for {identifier}")
            raise AuthFailedError("Invalid token")
        if consumed.expires <= utcnow():
            logger.warning(f"Expired verification token for {identifier}")
            raise TokenExpiredError("Token has expired")

        user = self.users.get_by_email_or_phone(email=identifier)
        if user is not None and user.email_verified is None:
            self.users.update(user.id, {"email_verified": utcnow()})
            logger.info(f"Email verified for user: {user.id}")
        return consumed
