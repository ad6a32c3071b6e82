"""Facility and facility category schemas."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

from app.models.facility import FacilityType
from app.schemas.common import EntityResponse, WriteSchema
from app.utils.timezone import to_naive_utc


class FacilityCategoryCreate(WriteSchema):
    name: str = Field(..., min_length=1, max_length=150)
    description: Optional[str] = None
    parent_id: Optional[int] = None


class FacilityCategoryUpdate(WriteSchema):
    name: Optional[str] = Field(None, min_length=1, max_length=150)
    description: Optional[str] = None
    parent_id: Optional[int] = None


class FacilityCategoryResponse(EntityResponse):
    name: str
    description: Optional[str] = None
    parent_id: Optional[int] = None


class FacilityCreate(WriteSchema):
    """Facility creation: name, type, description and city are required."""

    name: str = Field(..., min_length=1, max_length=255)
    type: FacilityType
    description: str = Field(..., min_length=1)
    city_id: int
    category_id: Optional[int] = None

    location: Optional[str] = Field(None, max_length=500)
    coordinates: Optional[str] = Field(None, max_length=100)  # "lat,lng"
    phone: Optional[str] = Field(None, max_length=30)
    emergency_phone: Optional[str] = Field(None, max_length=30)
    email: Optional[EmailStr] = None
    website: Optional[str] = Field(None, max_length=500)

    rating: float = Field(0.0, ge=0, le=5)
    bed_capacity: int = Field(0, ge=0)
    is_24_hours: bool = False
    has_emergency: bool = False
    has_parking: bool = False
    has_ambulance: bool = False
    accepts_insurance: bool = False

    image_url: Optional[str] = Field(None, max_length=500)
    amenities: Optional[str] = None
    accreditations: Optional[str] = None
    meta_data: Optional[str] = None


class FacilityUpdate(WriteSchema):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    type: Optional[FacilityType] = None
    description: Optional[str] = None
    city_id: Optional[int] = None
    category_id: Optional[int] = None

    location: Optional[str] = Field(None, max_length=500)
    coordinates: Optional[str] = Field(None, max_length=100)
    phone: Optional[str] = Field(None, max_length=30)
    emergency_phone: Optional[str] = Field(None, max_length=30)
    email: Optional[EmailStr] = None
    website: Optional[str] = Field(None, max_length=500)

    rating: Optional[float] = Field(None, ge=0, le=5)
    bed_capacity: Optional[int] = Field(None, ge=0)
    is_24_hours: Optional[bool] = None
    has_emergency: Optional[bool] = None
    has_parking: Optional[bool] = None
    has_ambulance: Optional[bool] = None
    accepts_insurance: Optional[bool] = None

    image_url: Optional[str] = Field(None, max_length=500)
    amenities: Optional[str] = None
    accreditations: Optional[str] = None
    meta_data: Optional[str] = None


class FacilityResponse(EntityResponse):
    name: str
    type: str
    description: Optional[str] = None
    city_id: Optional[int] = None
    category_id: Optional[int] = None
    location: Optional[str] = None
    coordinates: Optional[str] = None
    phone: Optional[str] = None
    emergency_phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None
    rating: float
    bed_capacity: int
    is_24_hours: bool
    has_emergency: bool
    has_parking: bool
    has_ambulance: bool
    accepts_insurance: bool
    image_url: Optional[str] = None
    amenities: Optional[str] = None
    accreditations: Optional[str] = None
    meta_data: Optional[str] = None


class FacilityStatsResponse(BaseModel):
    """Aggregate counts for one facility."""
    facility_id: int
    doctor_count: int
    department_count: int
    equipment_count: int
    review_count: int
    average_rating: float


class FacilityReviewCreate(WriteSchema):
    """Review posted against a facility; the target comes from the path."""
    rating: float = Field(..., ge=0, le=5)
    comment: Optional[str] = None
    user_id: Optional[int] = None


class DoctorAssignment(WriteSchema):
    doctor_id: int


class AppointmentBooking(WriteSchema):
    """Booking at a facility; status always starts as Scheduled."""
    patient_name: str = Field(..., min_length=2, max_length=150)
    patient_contact: Optional[str] = Field(None, max_length=100)
    doctor_id: Optional[int] = None
    appointment_time: datetime
    reason_for_appointment: Optional[str] = None

    @field_validator("appointment_time")
    @classmethod
    def normalize_time(cls, v):
        return to_naive_utc(v)
