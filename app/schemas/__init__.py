"""Pydantic schemas for request/response validation."""

from app.schemas.common import EntityResponse, MessageResponse, UpdateManyRequest, UpdateManyResponse
from app.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    UserInfo,
    VerificationTokenRequest,
    VerificationTokenResponse,
)
from app.schemas.audit import AuditLogResponse
from app.schemas.city import CityCreate, CityLocalTimeResponse, CityResponse, CityUpdate
from app.schemas.doctor import DoctorCreate, DoctorResponse, DoctorUpdate
from app.schemas.facility import (
    AppointmentBooking,
    DoctorAssignment,
    FacilityCategoryCreate,
    FacilityCategoryResponse,
    FacilityCategoryUpdate,
    FacilityCreate,
    FacilityResponse,
    FacilityReviewCreate,
    FacilityStatsResponse,
    FacilityUpdate,
)
from app.schemas.facility_resources import (
    FacilityCertificationCreate,
    FacilityCertificationResponse,
    FacilityCertificationUpdate,
    FacilityDepartmentCreate,
    FacilityDepartmentResponse,
    FacilityDepartmentUpdate,
    FacilityEquipmentCreate,
    FacilityEquipmentResponse,
    FacilityEquipmentUpdate,
    FacilityOperatingHoursCreate,
    FacilityOperatingHoursResponse,
    FacilityOperatingHoursUpdate,
)
from app.schemas.insurance import (
    FacilityInsuranceProviderCreate,
    FacilityInsuranceProviderResponse,
    FacilityInsuranceProviderUpdate,
    FacilityPlanCreate,
    FacilityPlanResponse,
    FacilityPlanUpdate,
    InsuranceProviderCreate,
    InsuranceProviderResponse,
    InsuranceProviderUpdate,
    PlanCreate,
    PlanResponse,
    PlanUpdate,
)
from app.schemas.review import (
    FacilityAppointmentCreate,
    FacilityAppointmentResponse,
    FacilityAppointmentUpdate,
    ReviewCreate,
    ReviewResponse,
    ReviewUpdate,
)
