"""Repositories backing registration, login sessions and verification tokens."""

from typing import Optional, Tuple

from sqlalchemy import delete, or_, select

from app.models.user import User, UserSession, VerificationToken
from app.repositories.base import SQLRepository


class UserRepository(SQLRepository[User]):
    model = User
    writable_fields = ("name", "email", "phone_number", "password", "email_verified", "image")

    def get_by_email_or_phone(self, email: str = None, phone_number: str = None) -> Optional[User]:
        """First user matching either identifier, or None."""
        conditions = []
        if email:
            conditions.append(self.table.c.email == email)
        if phone_number:
            conditions.append(self.table.c.phone_number == phone_number)
        if not conditions:
            return None

        stmt = select(self.table).where(or_(*conditions)).order_by(self.table.c.id).limit(1)
        with self._operation("FindByEmailOrPhone"):
            row = self.db.execute(stmt).first()
        return self._to_entity(row) if row is not None else None


class SessionRepository(SQLRepository[UserSession]):
    model = UserSession
    writable_fields = ("user_id", "expires", "session_token")

    def get_session_and_user(self, session_token: str) -> Optional[Tuple[UserSession, User]]:
        """Session with its owning user in one round trip, or None."""
        users = User.__table__
        user_columns = [column.label(f"owner_{column.name}") for column in users.c]
        stmt = (
            select(self.table, *user_columns)
            .join(users, users.c.id == self.table.c.user_id)
            .where(self.table.c.session_token == session_token)
        )
        with self._operation("FindWithUser"):
            row = self.db.execute(stmt).first()
        if row is None:
            return None

        mapping = row._mapping
        session = UserSession(**{column.name: mapping[column] for column in self.table.c})
        user = User(**{column.name: mapping[f"owner_{column.name}"] for column in users.c})
        return session, user

    def delete_by_token(self, session_token: str) -> Optional[UserSession]:
        stmt = (
            delete(self.table)
            .where(self.table.c.session_token == session_token)
            .returning(*self.table.c)
        )
        with self._operation("DeleteByToken", write=True):
            row = self.db.execute(stmt).first()
        return self._to_entity(row) if row is not None else None


class VerificationTokenRepository(SQLRepository[VerificationToken]):
    model = VerificationToken
    writable_fields = ("identifier", "token", "expires")

    def consume(self, identifier: str, token: str) -> Optional[VerificationToken]:
        """Delete the token and return it, so it can only be used once."""
        stmt = (
            delete(self.table)
            .where(self.table.c.identifier == identifier, self.table.c.token == token)
            .returning(*self.table.c)
        )
        with self._operation("Consume", write=True):
            row = self.db.execute(stmt).first()
        return self._to_entity(row) if row is not None else None
