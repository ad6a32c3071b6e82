"""Read access to the audit trail captured by database triggers."""

from typing import List, Mapping
from sqlalchemy.orm import Session
import logging

from app.exceptions import EntityNotFoundError, NotFoundError
from app.metrics import RepositoryMetrics
from app.models.audit_log import AuditLog
from app.repositories.audit_log import AuditLogRepository
from app.repositories.query import coerce_filter

logger = logging.getLogger(__name__)


class AuditService:
    """Service for browsing audit log entries."""

    def __init__(self, db: Session, metrics: RepositoryMetrics):
        self.db = db
        self.repository = AuditLogRepository(db, metrics)

    def get_by_id(self, id: int) -> AuditLog:
        try:
            return self.repository.find(id)
        except NotFoundError as exc:
            raise EntityNotFoundError("Audit log entry", exc.table, exc.entity_id) from exc

    def list(self, params: Mapping[str, str] = None, limit: int = None) -> List[AuditLog]:
        """
        Entries matching the column filter, oldest first.

        With a limit and no filter, the most recent `limit` entries are
        returned newest first instead.
        """
        filter = coerce_filter(self.repository.table, params or {})
        if limit and not filter:
            return self.repository.recent(limit)

        entries = self.repository.find_many(filter)
        if limit:
            entries = entries[-limit:]
        return entries
