"""Database models for the Healthcare Facility Directory."""

from app.models.city import City
from app.models.facility import Facility, FacilityCategory, FacilityType
from app.models.doctor import Doctor
from app.models.facility_resources import (
    FacilityDepartment,
    FacilityEquipment,
    FacilityCertification,
    FacilityOperatingHours,
)
from app.models.appointment import AppointmentStatus, FacilityAppointment
from app.models.insurance import InsuranceProvider, FacilityInsuranceProvider, Plan, FacilityPlan
from app.models.review import Review
from app.models.user import User, UserSession, VerificationToken
from app.models.audit_log import AuditLog

__all__ = [
    "City",
    "Facility",
    "FacilityCategory",
    "FacilityType",
    "Doctor",
    "FacilityDepartment",
    "FacilityEquipment",
    "FacilityCertification",
    "FacilityOperatingHours",
    "AppointmentStatus",
    "FacilityAppointment",
    "InsuranceProvider",
    "FacilityInsuranceProvider",
    "Plan",
    "FacilityPlan",
    "Review",
    "User",
    "UserSession",
    "VerificationToken",
    "AuditLog",
]
