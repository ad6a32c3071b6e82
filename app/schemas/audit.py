"""Audit log schemas."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class AuditLogResponse(BaseModel):
    """One captured row change."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    table_name: str
    operation: str
    old_data: Optional[Any] = None
    new_data: Optional[Any] = None
    changed_at: datetime
