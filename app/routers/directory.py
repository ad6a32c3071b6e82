"""CRUD endpoints for directory resources without extra routes."""

from app.routers.crud import build_crud_router
from app.schemas import (
    DoctorCreate,
    DoctorResponse,
    DoctorUpdate,
    FacilityAppointmentCreate,
    FacilityAppointmentResponse,
    FacilityAppointmentUpdate,
    FacilityCategoryCreate,
    FacilityCategoryResponse,
    FacilityCategoryUpdate,
    FacilityCertificationCreate,
    FacilityCertificationResponse,
    FacilityCertificationUpdate,
    FacilityDepartmentCreate,
    FacilityDepartmentResponse,
    FacilityDepartmentUpdate,
    FacilityEquipmentCreate,
    FacilityEquipmentResponse,
    FacilityEquipmentUpdate,
    FacilityInsuranceProviderCreate,
    FacilityInsuranceProviderResponse,
    FacilityInsuranceProviderUpdate,
    FacilityOperatingHoursCreate,
    FacilityOperatingHoursResponse,
    FacilityOperatingHoursUpdate,
    FacilityPlanCreate,
    FacilityPlanResponse,
    FacilityPlanUpdate,
    InsuranceProviderCreate,
    InsuranceProviderResponse,
    InsuranceProviderUpdate,
    PlanCreate,
    PlanResponse,
    PlanUpdate,
    ReviewCreate,
    ReviewResponse,
    ReviewUpdate,
)
from app.services.directory_service import (
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

# (url prefix, tag, router)
RESOURCE_ROUTERS = [
    ("/facility-categories", "Facility Categories", build_crud_router(
        FacilityCategoryService, FacilityCategoryCreate, FacilityCategoryUpdate, FacilityCategoryResponse)),
    ("/doctors", "Doctors", build_crud_router(
        DoctorService, DoctorCreate, DoctorUpdate, DoctorResponse)),
    ("/facility-departments", "Departments", build_crud_router(
        FacilityDepartmentService, FacilityDepartmentCreate, FacilityDepartmentUpdate, FacilityDepartmentResponse)),
    ("/facility-equipment", "Equipment", build_crud_router(
        FacilityEquipmentService, FacilityEquipmentCreate, FacilityEquipmentUpdate, FacilityEquipmentResponse)),
    ("/facility-certifications", "Certifications", build_crud_router(
        FacilityCertificationService, FacilityCertificationCreate, FacilityCertificationUpdate,
        FacilityCertificationResponse)),
    ("/facility-operating-hours", "Operating Hours", build_crud_router(
        FacilityOperatingHoursService, FacilityOperatingHoursCreate, FacilityOperatingHoursUpdate,
        FacilityOperatingHoursResponse)),
    ("/insurance-providers", "Insurance", build_crud_router(
        InsuranceProviderService, InsuranceProviderCreate, InsuranceProviderUpdate, InsuranceProviderResponse)),
    ("/facility-insurance-providers", "Insurance", build_crud_router(
        FacilityInsuranceProviderService, FacilityInsuranceProviderCreate, FacilityInsuranceProviderUpdate,
        FacilityInsuranceProviderResponse)),
    ("/plans", "Plans", build_crud_router(
        PlanService, PlanCreate, PlanUpdate, PlanResponse)),
    ("/facility-plans", "Plans", build_crud_router(
        FacilityPlanService, FacilityPlanCreate, FacilityPlanUpdate, FacilityPlanResponse)),
    ("/facility-appointments", "Appointments", build_crud_router(
        FacilityAppointmentService, FacilityAppointmentCreate, FacilityAppointmentUpdate,
        FacilityAppointmentResponse)),
    ("/reviews", "Reviews", build_crud_router(
        ReviewService, ReviewCreate, ReviewUpdate, ReviewResponse)),
]
