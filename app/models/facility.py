"""Facility and facility category models."""

import enum

from sqlalchemy import Boolean, Column, Float, ForeignKey, Index, Integer, String, Text
from app.database import Base
from app.models.base import ID_TYPE, TimestampMixin


class FacilityType(str, enum.Enum):
    """Kinds of healthcare facility."""

    PUBLIC_HOSPITAL = "Public Hospital"
    TEACHING_HOSPITAL = "Teaching Hospital"
    PRIVATE_HOSPITAL = "Private Hospital"
    REHABILITATION_CENTER = "Rehabilitation Center"
    MEDICAL_COMPLEX = "Medical Complex"
    CLINIC = "Clinic"
    PHARMACY = "Pharmacy"
    LABORATORY = "Laboratory"
    IMAGING_CENTER = "Imaging Center"


class FacilityCategory(TimestampMixin, Base):
    """Classification tree for facilities (optional parent)."""

    __tablename__ = "facility_categories"

    name = Column(String(150), nullable=False)
    description = Column(Text, nullable=True)
    parent_id = Column(ID_TYPE, ForeignKey("facility_categories.id"), nullable=True, index=True)

    def __repr__(self):
        return f"<FacilityCategory {self.name}>"


class Facility(TimestampMixin, Base):
    """Hospital, clinic, pharmacy, laboratory or other care facility."""

    __tablename__ = "facilities"

    name = Column(String(255), nullable=False)
    type = Column(String(50), nullable=False)  # FacilityType value
    category_id = Column(ID_TYPE, ForeignKey("facility_categories.id"), nullable=True, index=True)
    city_id = Column(ID_TYPE, ForeignKey("cities.id"), nullable=True, index=True)

    # Location and contact
    location = Column(String(500), nullable=True)
    coordinates = Column(String(100), nullable=True)  # "lat,lng"
    phone = Column(String(30), nullable=True)
    emergency_phone = Column(String(30), nullable=True)
    email = Column(String(255), nullable=True)
    website = Column(String(500), nullable=True)

    # Capabilities
    rating = Column(Float, nullable=False, default=0.0)
    bed_capacity = Column(Integer, nullable=False, default=0)
    is_24_hours = Column(Boolean, nullable=False, default=False)
    has_emergency = Column(Boolean, nullable=False, default=False)
    has_parking = Column(Boolean, nullable=False, default=False)
    has_ambulance = Column(Boolean, nullable=False, default=False)
    accepts_insurance = Column(Boolean, nullable=False, default=False)

    # Free-form details
    description = Column(Text, nullable=True)
    image_url = Column(String(500), nullable=True)
    amenities = Column(Text, nullable=True)
    accreditations = Column(Text, nullable=True)
    meta_data = Column(Text, nullable=True)

    __table_args__ = (
        Index("idx_facilities_name", "name"),
        Index("idx_facilities_type", "type"),
    )

    def __repr__(self):
        return f"<Facility {self.name}>"
