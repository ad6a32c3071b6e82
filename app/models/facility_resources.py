"""Per-facility resources: departments, equipment, certifications, operating hours."""

from sqlalchemy import Boolean, Column, Date, ForeignKey, Integer, String, Text, Time
from app.database import Base
from app.models.base import ID_TYPE, TimestampMixin


class FacilityDepartment(TimestampMixin, Base):
    """Department within a facility."""

    __tablename__ = "facility_departments"

    facility_id = Column(ID_TYPE, ForeignKey("facilities.id"), nullable=False, index=True)
    name = Column(String(150), nullable=False)
    description = Column(Text, nullable=True)
    floor_number = Column(String(20), nullable=True)
    head_doctor_id = Column(ID_TYPE, ForeignKey("doctors.id"), nullable=True)
    contact_number = Column(String(30), nullable=True)


class FacilityEquipment(TimestampMixin, Base):
    """Piece of equipment, optionally assigned to a department."""

    __tablename__ = "facility_equipment"

    facility_id = Column(ID_TYPE, ForeignKey("facilities.id"), nullable=False, index=True)
    department_id = Column(ID_TYPE, ForeignKey("facility_departments.id"), nullable=True)
    name = Column(String(150), nullable=False)
    model = Column(String(100), nullable=True)
    manufacturer = Column(String(150), nullable=True)
    purchase_date = Column(Date, nullable=True)
    last_maintenance_date = Column(Date, nullable=True)
    next_maintenance_date = Column(Date, nullable=True)
    status = Column(String(50), nullable=True)  # operational, maintenance, retired


class FacilityCertification(TimestampMixin, Base):
    """Accreditation or licence held by a facility."""

    __tablename__ = "facility_certifications"

    facility_id = Column(ID_TYPE, ForeignKey("facilities.id"), nullable=False, index=True)
    name = Column(String(150), nullable=False)
    issuing_authority = Column(String(150), nullable=True)
    issue_date = Column(Date, nullable=True)
    expiry_date = Column(Date, nullable=True)
    status = Column(String(50), nullable=True)  # active, expired, revoked
    document_url = Column(String(500), nullable=True)


class FacilityOperatingHours(TimestampMixin, Base):
    """Opening hours for one weekday (0 = Monday), facility-wide or per department."""

    __tablename__ = "facility_operating_hours"

    facility_id = Column(ID_TYPE, ForeignKey("facilities.id"), nullable=False, index=True)
    department_id = Column(ID_TYPE, ForeignKey("facility_departments.id"), nullable=True)
    day_of_week = Column(Integer, nullable=False)
    start_time = Column(Time, nullable=True)
    end_time = Column(Time, nullable=True)
    is_closed = Column(Boolean, nullable=False, default=False)
