"""Audit log model for change capture."""

from sqlalchemy import JSON, Column, DateTime, Index, String
from sqlalchemy.sql import func
from app.database import Base
from app.models.base import ID_TYPE


class AuditLog(Base):
    """Before/after snapshot of a row change, written by database triggers."""

    __tablename__ = "audit_log"

    id = Column(ID_TYPE, primary_key=True, autoincrement=True)
    table_name = Column(String(100), nullable=False)
    operation = Column(String(20), nullable=False)  # INSERT, UPDATE, DELETE
    old_data = Column(JSON, nullable=True)
    new_data = Column(JSON, nullable=True)
    changed_at = Column(DateTime, nullable=False, server_default=func.now())

    __table_args__ = (
        Index("idx_audit_table", "table_name"),
        Index("idx_audit_changed_at", "changed_at"),
    )
