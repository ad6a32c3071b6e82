"""Tests for authentication service."""

from datetime import timedelta

import jwt
import pytest

from app.config import settings
from app.exceptions import AuthFailedError, ConflictError, InvalidQueryError, TokenExpiredError
from app.models import VerificationToken
from app.services.auth_service import AuthService, pwd_context
from app.utils.timezone import utcnow


@pytest.fixture
def auth_service(db, metrics):
    return AuthService(db, metrics)


@pytest.fixture
def registered_user(auth_service, sample_user):
    return auth_service.register(
        sample_user["password"],
        email=sample_user["email"],
        name=sample_user["name"],
    )


class TestRegistration:
    """Registration rules."""

    def test_password_is_hashed(self, auth_service, registered_user, sample_user):
        assert registered_user.password != sample_user["password"]
        assert auth_service.verify_password(sample_user["password"], registered_user.password)

    def test_duplicate_email_rejected(self, auth_service, registered_user, sample_user):
        with pytest.raises(ConflictError):
            auth_service.register("anotherpassword", email=sample_user["email"])

    def test_duplicate_phone_rejected(self, auth_service):
        auth_service.register("longenough1", phone_number="5551234")
        with pytest.raises(ConflictError):
            auth_service.register("longenough2", phone_number="5551234")

    def test_identifier_required(self, auth_service):
        with pytest.raises(InvalidQueryError):
            auth_service.register("longenough1")

    def test_short_password_rejected(self, auth_service):
        with pytest.raises(InvalidQueryError):
            auth_service.register("short", email="c@d.com")


class TestLogin:
    """Login and token issuance."""

    def test_login_returns_signed_token(self, auth_service, registered_user, sample_user):
        user, token, expires_in = auth_service.login(sample_user["password"], email=sample_user["email"])

        assert user.id == registered_user.id
        assert len(token.split(".")) == 3
        assert expires_in == settings.JWT_EXPIRE_HOURS * 3600

        payload = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
        assert payload["sub"] == str(registered_user.id)
        assert "sid" in payload

    def test_login_by_phone(self, auth_service):
        registered = auth_service.register("longenough1", phone_number="5551234")
        user, _, _ = auth_service.login("longenough1", phone_number="5551234")
        assert user.id == registered.id

    def test_unknown_user_and_wrong_password_are_indistinguishable(self, auth_service, registered_user, sample_user):
        with pytest.raises(AuthFailedError) as unknown:
            auth_service.login(sample_user["password"], email="nobody@b.com")
        with pytest.raises(AuthFailedError) as wrong:
            auth_service.login("wrongpassword", email=sample_user["email"])

        assert type(unknown.value) is type(wrong.value)
        assert unknown.value.message == wrong.value.message == "Invalid credentials"

    def test_unknown_user_still_runs_a_hash_check(self, auth_service, monkeypatch):
        calls = []
        monkeypatch.setattr(pwd_context, "dummy_verify", lambda: calls.append(1))

        with pytest.raises(AuthFailedError):
            auth_service.login("longenough1", email="nobody@b.com")
        assert calls == [1]


class TestSessions:
    """Bearer token resolution and logout."""

    def test_current_user(self, auth_service, registered_user, sample_user):
        _, token, _ = auth_service.login(sample_user["password"], email=sample_user["email"])
        assert auth_service.get_current_user(token).id == registered_user.id

    def test_garbage_token(self, auth_service):
        with pytest.raises(AuthFailedError):
            auth_service.get_current_user("not.a.token")

    def test_expired_jwt(self, auth_service, registered_user):
        token = jwt.encode(
            {"sub": str(registered_user.id), "sid": "x", "exp": utcnow() - timedelta(minutes=1)},
            settings.JWT_SECRET_KEY,
            algorithm=settings.JWT_ALGORITHM,
        )
        with pytest.raises(TokenExpiredError):
            auth_service.get_current_user(token)

    def test_expired_session(self, auth_service, registered_user, sample_user):
        _, token, _ = auth_service.login(sample_user["password"], email=sample_user["email"])
        auth_service.sessions.update_many(
            {"user_id": registered_user.id},
            {"expires": utcnow() - timedelta(minutes=1)},
        )
        with pytest.raises(TokenExpiredError):
            auth_service.get_current_user(token)

    def test_logout_ends_session(self, auth_service, registered_user, sample_user):
        _, token, _ = auth_service.login(sample_user["password"], email=sample_user["email"])
        auth_service.logout(token)

        with pytest.raises(AuthFailedError):
            auth_service.get_current_user(token)
        with pytest.raises(AuthFailedError):
            auth_service.logout(token)


class TestVerificationTokens:
    """Single-use, time-boxed verification tokens."""

    def test_token_is_single_use(self, auth_service):
        created = auth_service.create_verification_token("a@b.com")
        assert created.token

        consumed = auth_service.use_verification_token("a@b.com", created.token)
        assert consumed.token == created.token

        with pytest.raises(AuthFailedError) as exc_info:
            auth_service.use_verification_token("a@b.com", created.token)
        assert not isinstance(exc_info.value, TokenExpiredError)

    def test_unknown_and_expired_fail_differently(self, auth_service):
        auth_service.verification_tokens.create(VerificationToken(
            identifier="a@b.com",
            token="expired-token",
            expires=utcnow() - timedelta(minutes=1),
        ))

        with pytest.raises(TokenExpiredError):
            auth_service.use_verification_token("a@b.com", "expired-token")

        with pytest.raises(AuthFailedError) as unknown:
            auth_service.use_verification_token("a@b.com", "never-issued")
        assert not isinstance(unknown.value, TokenExpiredError)

    def test_verifies_user_email(self, auth_service, registered_user, sample_user):
        auth_service.create_verification_token(sample_user["email"], token="654321")
        auth_service.use_verification_token(sample_user["email"], "654321")

        user = auth_service.users.find(registered_user.id)
        assert user.email_verified is not None
