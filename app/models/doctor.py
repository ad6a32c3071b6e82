"""Doctor model for physicians practising at facilities."""

from sqlalchemy import Column, ForeignKey, Index, String
from app.database import Base
from app.models.base import ID_TYPE, TimestampMixin


class Doctor(TimestampMixin, Base):
    """Physician, optionally tied to a primary facility."""

    __tablename__ = "doctors"

    name = Column(String(150), nullable=False)
    specialty = Column(String(100), nullable=True)  # "Cardiology", "Pediatrics", etc.
    primary_facility_id = Column(ID_TYPE, ForeignKey("facilities.id"), nullable=True, index=True)
    contact_number = Column(String(30), nullable=True)
    email = Column(String(255), nullable=True)

    __table_args__ = (
        Index("idx_doctors_name", "name"),
        Index("idx_doctors_specialty", "specialty"),
    )

    def __repr__(self):
        return f"<Doctor {self.name} @ Facility {self.primary_facility_id}>"
