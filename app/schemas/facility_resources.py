"""Schemas for departments, equipment, certifications and operating hours."""

from datetime import date, time
from typing import Optional

from pydantic import Field, model_validator

from app.schemas.common import EntityResponse, WriteSchema


# Departments

class FacilityDepartmentCreate(WriteSchema):
    facility_id: int
    name: str = Field(..., min_length=1, max_length=150)
    description: Optional[str] = None
    floor_number: Optional[str] = Field(None, max_length=20)
    head_doctor_id: Optional[int] = None
    contact_number: Optional[str] = Field(None, max_length=30)


class FacilityDepartmentUpdate(WriteSchema):
    facility_id: Optional[int] = None
    name: Optional[str] = Field(None, min_length=1, max_length=150)
    description: Optional[str] = None
    floor_number: Optional[str] = Field(None, max_length=20)
    head_doctor_id: Optional[int] = None
    contact_number: Optional[str] = Field(None, max_length=30)


class FacilityDepartmentResponse(EntityResponse):
    facility_id: int
    name: str
    description: Optional[str] = None
    floor_number: Optional[str] = None
    head_doctor_id: Optional[int] = None
    contact_number: Optional[str] = None


# Equipment

class FacilityEquipmentCreate(WriteSchema):
    facility_id: int
    department_id: Optional[int] = None
    name: str = Field(..., min_length=1, max_length=150)
    model: Optional[str] = Field(None, max_length=100)
    manufacturer: Optional[str] = Field(None, max_length=150)
    purchase_date: Optional[date] = None
    last_maintenance_date: Optional[date] = None
    next_maintenance_date: Optional[date] = None
    status: Optional[str] = Field(None, max_length=50)


class FacilityEquipmentUpdate(WriteSchema):
    facility_id: Optional[int] = None
    department_id: Optional[int] = None
    name: Optional[str] = Field(None, min_length=1, max_length=150)
    model: Optional[str] = Field(None, max_length=100)
    manufacturer: Optional[str] = Field(None, max_length=150)
    purchase_date: Optional[date] = None
    last_maintenance_date: Optional[date] = None
    next_maintenance_date: Optional[date] = None
    status: Optional[str] = Field(None, max_length=50)


class FacilityEquipmentResponse(EntityResponse):
    facility_id: int
    department_id: Optional[int] = None
    name: str
    model: Optional[str] = None
    manufacturer: Optional[str] = None
    purchase_date: Optional[date] = None
    last_maintenance_date: Optional[date] = None
    next_maintenance_date: Optional[date] = None
    status: Optional[str] = None


# Certifications

class FacilityCertificationCreate(WriteSchema):
    facility_id: int
    name: str = Field(..., min_length=1, max_length=150)
    issuing_authority: Optional[str] = Field(None, max_length=150)
    issue_date: Optional[date] = None
    expiry_date: Optional[date] = None
    status: Optional[str] = Field(None, max_length=50)
    document_url: Optional[str] = Field(None, max_length=500)

    @model_validator(mode="after")
    def check_dates(self):
        if self.issue_date and self.expiry_date and self.expiry_date < self.issue_date:
            raise ValueError("expiry_date must not be before issue_date")
        return self


class FacilityCertificationUpdate(WriteSchema):
    facility_id: Optional[int] = None
    name: Optional[str] = Field(None, min_length=1, max_length=150)
    issuing_authority: Optional[str] = Field(None, max_length=150)
    issue_date: Optional[date] = None
    expiry_date: Optional[date] = None
    status: Optional[str] = Field(None, max_length=50)
    document_url: Optional[str] = Field(None, max_length=500)


class FacilityCertificationResponse(EntityResponse):
    facility_id: int
    name: str
    issuing_authority: Optional[str] = None
    issue_date: Optional[date] = None
    expiry_date: Optional[date] = None
    status: Optional[str] = None
    document_url: Optional[str] = None


# Operating hours

class FacilityOperatingHoursCreate(WriteSchema):
    facility_id: int
    department_id: Optional[int] = None
    day_of_week: int = Field(..., ge=0, le=6)  # 0 = Monday
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    is_closed: bool = False

    @model_validator(mode="after")
    def check_times(self):
        if self.start_time and self.end_time and self.end_time <= self.start_time:
            raise ValueError("end_time must be after start_time")
        return self


class FacilityOperatingHoursUpdate(WriteSchema):
    facility_id: Optional[int] = None
    department_id: Optional[int] = None
    day_of_week: Optional[int] = Field(None, ge=0, le=6)
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    is_closed: Optional[bool] = None


class FacilityOperatingHoursResponse(EntityResponse):
    facility_id: int
    department_id: Optional[int] = None
    day_of_week: int
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    is_closed: bool
