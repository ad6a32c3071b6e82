"""Services for directory entities built directly on CRUDService."""

from app.repositories import (
    CityRepository,
    DoctorRepository,
    FacilityAppointmentRepository,
    FacilityCategoryRepository,
    FacilityCertificationRepository,
    FacilityDepartmentRepository,
    FacilityEquipmentRepository,
    FacilityInsuranceProviderRepository,
    FacilityOperatingHoursRepository,
    FacilityPlanRepository,
    InsuranceProviderRepository,
    PlanRepository,
    ReviewRepository,
)
from app.services.base import CRUDService
from app.utils.timezone import local_time


class CityService(CRUDService):
    entity_name = "City"
    repository_class = CityRepository

    def local_time(self, id: int) -> dict:
        """Current wall-clock time in the city, UTC when it has no timezone."""
        city = self.get_by_id(id)
        zone = city.timezone or "UTC"
        return {"city_id": city.id, "timezone": zone, "local_time": local_time(zone)}


class FacilityCategoryService(CRUDService):
    entity_name = "Facility category"
    repository_class = FacilityCategoryRepository


class DoctorService(CRUDService):
    entity_name = "Doctor"
    repository_class = DoctorRepository


class FacilityDepartmentService(CRUDService):
    entity_name = "Department"
    repository_class = FacilityDepartmentRepository


class FacilityEquipmentService(CRUDService):
    entity_name = "Equipment"
    repository_class = FacilityEquipmentRepository


class FacilityCertificationService(CRUDService):
    entity_name = "Certification"
    repository_class = FacilityCertificationRepository


class FacilityOperatingHoursService(CRUDService):
    entity_name = "Operating hours"
    repository_class = FacilityOperatingHoursRepository


class InsuranceProviderService(CRUDService):
    entity_name = "Insurance provider"
    repository_class = InsuranceProviderRepository


class FacilityInsuranceProviderService(CRUDService):
    entity_name = "Facility insurance provider"
    repository_class = FacilityInsuranceProviderRepository


class PlanService(CRUDService):
    entity_name = "Plan"
    repository_class = PlanRepository


class FacilityPlanService(CRUDService):
    entity_name = "Facility plan"
    repository_class = FacilityPlanRepository


class FacilityAppointmentService(CRUDService):
    entity_name = "Appointment"
    repository_class = FacilityAppointmentRepository


class ReviewService(CRUDService):
    entity_name = "Review"
    repository_class = ReviewRepository
