"""Read-only audit log endpoints."""

from typing import List

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_repository_metrics
from app.metrics import RepositoryMetrics
from app.schemas.audit import AuditLogResponse
from app.services.audit_service import AuditService

router = APIRouter()

RESERVED_PARAMS = ("limit",)


def get_audit_service(
    db: Session = Depends(get_db),
    metrics: RepositoryMetrics = Depends(get_repository_metrics),
) -> AuditService:
    return AuditService(db, metrics)


@router.get("", response_model=List[AuditLogResponse])
async def list_audit_logs(
    request: Request,
    limit: int = Query(None, ge=1, le=1000),
    audit_service: AuditService = Depends(get_audit_service)
):
    """Audit entries; other query parameters filter by column, `limit` returns the most recent."""
    params = {key: value for key, value in request.query_params.items() if key not in RESERVED_PARAMS}
    return audit_service.list(params, limit=limit)


@router.get("/{id}", response_model=AuditLogResponse)
async def get_audit_log(id: int, audit_service: AuditService = Depends(get_audit_service)):
    return audit_service.get_by_id(id)
