"""Insurance provider and plan schemas."""

from datetime import date
from typing import Any, Dict, List, Optional, Union

from pydantic import EmailStr, Field, model_validator

from app.schemas.common import EntityResponse, WriteSchema


class InsuranceProviderCreate(WriteSchema):
    name: str = Field(..., min_length=1, max_length=150)
    contact_phone: Optional[str] = Field(None, max_length=30)
    contact_email: Optional[EmailStr] = None
    website: Optional[str] = Field(None, max_length=500)


class InsuranceProviderUpdate(WriteSchema):
    name: Optional[str] = Field(None, min_length=1, max_length=150)
    contact_phone: Optional[str] = Field(None, max_length=30)
    contact_email: Optional[EmailStr] = None
    website: Optional[str] = Field(None, max_length=500)


class InsuranceProviderResponse(EntityResponse):
    name: str
    contact_phone: Optional[str] = None
    contact_email: Optional[str] = None
    website: Optional[str] = None


class FacilityInsuranceProviderCreate(WriteSchema):
    facility_id: int
    insurance_provider_id: int
    coverage_details: Optional[Dict[str, Any]] = None


class FacilityInsuranceProviderUpdate(WriteSchema):
    facility_id: Optional[int] = None
    insurance_provider_id: Optional[int] = None
    coverage_details: Optional[Dict[str, Any]] = None


class FacilityInsuranceProviderResponse(EntityResponse):
    facility_id: int
    insurance_provider_id: int
    coverage_details: Optional[Dict[str, Any]] = None


class PlanCreate(WriteSchema):
    name: str = Field(..., min_length=1, max_length=100)
    monthly_price: float = Field(0.0, ge=0)
    yearly_price: float = Field(0.0, ge=0)
    description: Optional[str] = None
    features: Optional[Union[Dict[str, Any], List[Any]]] = None


class PlanUpdate(WriteSchema):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    monthly_price: Optional[float] = Field(None, ge=0)
    yearly_price: Optional[float] = Field(None, ge=0)
    description: Optional[str] = None
    features: Optional[Union[Dict[str, Any], List[Any]]] = None


class PlanResponse(EntityResponse):
    name: str
    monthly_price: float
    yearly_price: float
    description: Optional[str] = None
    features: Optional[Union[Dict[str, Any], List[Any]]] = None


class FacilityPlanCreate(WriteSchema):
    facility_id: int
    plan_id: int
    start_date: date
    end_date: Optional[date] = None
    is_active: bool = True

    @model_validator(mode="after")
    def check_window(self):
        if self.end_date and self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class FacilityPlanUpdate(WriteSchema):
    facility_id: Optional[int] = None
    plan_id: Optional[int] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    is_active: Optional[bool] = None


class FacilityPlanResponse(EntityResponse):
    facility_id: int
    plan_id: int
    start_date: date
    end_date: Optional[date] = None
    is_active: bool
