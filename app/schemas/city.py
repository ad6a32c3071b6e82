"""City schemas."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from app.schemas.common import EntityResponse, WriteSchema
from app.utils.timezone import is_valid_timezone


def _check_timezone(value: Optional[str]) -> Optional[str]:
    if value is not None and not is_valid_timezone(value):
        raise ValueError(f"Unknown timezone: {value}")
    return value


class CityCreate(WriteSchema):
    name: str = Field(..., min_length=1, max_length=150)
    population: Optional[int] = Field(None, ge=0)
    image_url: Optional[str] = Field(None, max_length=500)
    timezone: Optional[str] = None  # IANA name

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v):
        return _check_timezone(v)


class CityUpdate(WriteSchema):
    name: Optional[str] = Field(None, min_length=1, max_length=150)
    population: Optional[int] = Field(None, ge=0)
    image_url: Optional[str] = Field(None, max_length=500)
    timezone: Optional[str] = None

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v):
        return _check_timezone(v)


class CityResponse(EntityResponse):
    name: str
    population: Optional[int] = None
    image_url: Optional[str] = None
    timezone: Optional[str] = None


class CityLocalTimeResponse(BaseModel):
    city_id: int
    timezone: str
    local_time: datetime
