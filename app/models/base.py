"""Shared columns for persisted entities."""

from sqlalchemy import BigInteger, Column, DateTime, Integer
from sqlalchemy.sql import func

# BIGINT everywhere except SQLite, which only auto-increments INTEGER PRIMARY KEY
ID_TYPE = BigInteger().with_variant(Integer(), "sqlite")


class TimestampMixin:
    """Identifier plus created/updated timestamps.

    Repositories stamp both timestamps explicitly; the server defaults only
    cover rows written outside the application.
    """

    id = Column(ID_TYPE, primary_key=True, autoincrement=True)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=False, server_default=func.now())

    def __repr__(self):
        return f"<{type(self).__name__} {self.id}>"
