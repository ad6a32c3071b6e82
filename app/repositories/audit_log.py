"""Read-only access to the audit log."""

from typing import List

from sqlalchemy import select

from app.models.audit_log import AuditLog
from app.repositories.base import SQLReadRepository


class AuditLogRepository(SQLReadRepository[AuditLog]):
    """Rows are written by database triggers, never by the application."""

    model = AuditLog

    def recent(self, limit: int = 100) -> List[AuditLog]:
        stmt = (
            select(self.table)
            .order_by(self.table.c.changed_at.desc(), self.table.c.id.desc())
            .limit(limit)
        )
        return self._fetch_all(stmt, "FindRecent")
