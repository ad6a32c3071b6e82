"""Business logic services for the Healthcare Facility Directory."""

from app.services.base import CRUDService
from app.services.auth_service import AuthService
from app.services.audit_service import AuditService
from app.services.directory_service import (
    CityService,
    DoctorService,
    FacilityAppointmentService,
    FacilityCategoryService,
    FacilityCertificationService,
    FacilityDepartmentService,
    FacilityEquipmentService,
    FacilityInsuranceProviderService,
    FacilityOperatingHoursService,
    FacilityPlanService,
    InsuranceProviderService,
    PlanService,
    ReviewService,
)
from app.services.facility_service import FacilityService

__all__ = [
    "CRUDService",
    "AuthService",
    "AuditService",
    "CityService",
    "DoctorService",
    "FacilityAppointmentService",
    "FacilityCategoryService",
    "FacilityCertificationService",
    "FacilityDepartmentService",
    "FacilityEquipmentService",
    "FacilityInsuranceProviderService",
    "FacilityOperatingHoursService",
    "FacilityPlanService",
    "InsuranceProviderService",
    "PlanService",
    "ReviewService",
    "FacilityService",
]
