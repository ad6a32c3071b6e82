"""Review and appointment schemas."""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from app.models.appointment import AppointmentStatus
from app.schemas.common import EntityResponse, WriteSchema
from app.utils.timezone import to_naive_utc


class ReviewCreate(WriteSchema):
    entity_type: str = Field(..., min_length=1, max_length=50)  # "facility", "doctor", ...
    entity_id: int
    user_id: Optional[int] = None
    rating: float = Field(..., ge=0, le=5)
    comment: Optional[str] = None


class ReviewUpdate(WriteSchema):
    rating: Optional[float] = Field(None, ge=0, le=5)
    comment: Optional[str] = None


class ReviewResponse(EntityResponse):
    entity_type: str
    entity_id: int
    user_id: Optional[int] = None
    rating: float
    comment: Optional[str] = None


class FacilityAppointmentCreate(WriteSchema):
    patient_name: str = Field(..., min_length=2, max_length=150)
    patient_contact: Optional[str] = Field(None, max_length=100)
    facility_id: int
    doctor_id: Optional[int] = None
    appointment_time: datetime
    status: AppointmentStatus = AppointmentStatus.SCHEDULED.value
    reason_for_appointment: Optional[str] = None

    @field_validator("appointment_time")
    @classmethod
    def normalize_time(cls, v):
        return to_naive_utc(v)


class FacilityAppointmentUpdate(WriteSchema):
    patient_name: Optional[str] = Field(None, min_length=2, max_length=150)
    patient_contact: Optional[str] = Field(None, max_length=100)
    doctor_id: Optional[int] = None
    appointment_time: Optional[datetime] = None
    status: Optional[AppointmentStatus] = None
    reason_for_appointment: Optional[str] = None

    @field_validator("appointment_time")
    @classmethod
    def normalize_time(cls, v):
        return to_naive_utc(v)


class FacilityAppointmentResponse(EntityResponse):
    patient_name: str
    patient_contact: Optional[str] = None
    facility_id: int
    doctor_id: Optional[int] = None
    appointment_time: datetime
    status: str
    reason_for_appointment: Optional[str] = None
