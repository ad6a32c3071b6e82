"""Shapes shared by every resource."""

from datetime import datetime
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field


class WriteSchema(BaseModel):
    """Base for request bodies: unknown fields are rejected, enums stored by value."""

    model_config = ConfigDict(extra="forbid", use_enum_values=True)


class EntityResponse(BaseModel):
    """Identifier and timestamps carried by every stored entity."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: datetime
    updated_at: datetime


class UpdateManyRequest(BaseModel):
    """Body of PATCH on a collection: equality filter plus partial update."""

    filter: Dict[str, Any] = Field(..., min_length=1)
    updates: Dict[str, Any] = Field(..., min_length=1)


class UpdateManyResponse(BaseModel):
    updated: int


class MessageResponse(BaseModel):
    message: str
