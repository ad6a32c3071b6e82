"""Data access layer: one generic SQL engine, one thin repository per entity."""

from app.repositories.base import Repository, ReadRepository, SQLReadRepository, SQLRepository
from app.repositories.cities import CityRepository
from app.repositories.doctors import DoctorRepository
from app.repositories.facilities import (
    FacilityAppointmentRepository,
    FacilityCategoryRepository,
    FacilityCertificationRepository,
    FacilityDepartmentRepository,
    FacilityEquipmentRepository,
    FacilityOperatingHoursRepository,
    FacilityRepository,
)
from app.repositories.insurance import (
    FacilityInsuranceProviderRepository,
    FacilityPlanRepository,
    InsuranceProviderRepository,
    PlanRepository,
)
from app.repositories.reviews import ReviewRepository
from app.repositories.auth import SessionRepository, UserRepository, VerificationTokenRepository
from app.repositories.audit_log import AuditLogRepository

__all__ = [
    "Repository",
    "ReadRepository",
    "SQLReadRepository",
    "SQLRepository",
    "CityRepository",
    "DoctorRepository",
    "FacilityAppointmentRepository",
    "FacilityCategoryRepository",
    "FacilityCertificationRepository",
    "FacilityDepartmentRepository",
    "FacilityEquipmentRepository",
    "FacilityOperatingHoursRepository",
    "FacilityRepository",
    "FacilityInsuranceProviderRepository",
    "FacilityPlanRepository",
    "InsuranceProviderRepository",
    "PlanRepository",
    "ReviewRepository",
    "SessionRepository",
    "UserRepository",
    "VerificationTokenRepository",
    "AuditLogRepository",
]
