"""Doctor schemas."""

from typing import Optional

from pydantic import EmailStr, Field

from app.schemas.common import EntityResponse, WriteSchema


class DoctorCreate(WriteSchema):
    name: str = Field(..., min_length=2, max_length=150)
    specialty: Optional[str] = Field(None, max_length=100)
    primary_facility_id: Optional[int] = None
    contact_number: Optional[str] = Field(None, max_length=30)
    email: Optional[EmailStr] = None


class DoctorUpdate(WriteSchema):
    name: Optional[str] = Field(None, min_length=2, max_length=150)
    specialty: Optional[str] = Field(None, max_length=100)
    primary_facility_id: Optional[int] = None
    contact_number: Optional[str] = Field(None, max_length=30)
    email: Optional[EmailStr] = None


class DoctorResponse(EntityResponse):
    name: str
    specialty: Optional[str] = None
    primary_facility_id: Optional[int] = None
    contact_number: Optional[str] = None
    email: Optional[str] = None
