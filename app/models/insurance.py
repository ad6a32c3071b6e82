"""Insurance providers and plans, and their links to facilities."""

from sqlalchemy import JSON, Boolean, Column, Date, Float, ForeignKey, String, Text, UniqueConstraint
from app.database import Base
from app.models.base import ID_TYPE, TimestampMixin


class InsuranceProvider(TimestampMixin, Base):
    """Insurance company."""

    __tablename__ = "insurance_providers"

    name = Column(String(150), nullable=False, unique=True)
    contact_phone = Column(String(30), nullable=True)
    contact_email = Column(String(255), nullable=True)
    website = Column(String(500), nullable=True)


class FacilityInsuranceProvider(TimestampMixin, Base):
    """Coverage a provider offers at a facility."""

    __tablename__ = "facility_insurance_providers"

    facility_id = Column(ID_TYPE, ForeignKey("facilities.id"), nullable=False, index=True)
    insurance_provider_id = Column(ID_TYPE, ForeignKey("insurance_providers.id"), nullable=False, index=True)
    coverage_details = Column(JSON, nullable=True)  # {"inpatient": true, "copay": 20, ...}

    __table_args__ = (
        UniqueConstraint("facility_id", "insurance_provider_id", name="uq_facility_insurance_provider"),
    )


class Plan(TimestampMixin, Base):
    """Directory subscription plan."""

    __tablename__ = "plans"

    name = Column(String(100), nullable=False, unique=True)
    monthly_price = Column(Float, nullable=False, default=0.0)
    yearly_price = Column(Float, nullable=False, default=0.0)
    description = Column(Text, nullable=True)
    features = Column(JSON, nullable=True)


class FacilityPlan(TimestampMixin, Base):
    """Plan subscription held by a facility over a validity window."""

    __tablename__ = "facility_plans"

    facility_id = Column(ID_TYPE, ForeignKey("facilities.id"), nullable=False, index=True)
    plan_id = Column(ID_TYPE, ForeignKey("plans.id"), nullable=False, index=True)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
