"""Insurance provider and plan repositories."""

from app.models.insurance import FacilityInsuranceProvider, FacilityPlan, InsuranceProvider, Plan
from app.repositories.base import SQLRepository


class InsuranceProviderRepository(SQLRepository[InsuranceProvider]):
    model = InsuranceProvider
    writable_fields = ("name", "contact_phone", "contact_email", "website")


class FacilityInsuranceProviderRepository(SQLRepository[FacilityInsuranceProvider]):
    model = FacilityInsuranceProvider
    writable_fields = ("facility_id", "insurance_provider_id", "coverage_details")


class PlanRepository(SQLRepository[Plan]):
    model = Plan
    writable_fields = ("name", "monthly_price", "yearly_price", "description", "features")


class FacilityPlanRepository(SQLRepository[FacilityPlan]):
    model = FacilityPlan
    writable_fields = ("facility_id", "plan_id", "start_date", "end_date", "is_active")
