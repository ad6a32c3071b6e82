"""Facility appointment model."""

import enum

from sqlalchemy import Column, DateTime, ForeignKey, Index, String, Text
from app.database import Base
from app.models.base import ID_TYPE, TimestampMixin


class AppointmentStatus(str, enum.Enum):
    """Closed set of appointment states."""

    SCHEDULED = "Scheduled"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"
    NO_SHOW = "No-Show"
    RESCHEDULED = "Rescheduled"


class FacilityAppointment(TimestampMixin, Base):
    """Patient appointment with a doctor at a facility."""

    __tablename__ = "facility_appointments"

    patient_name = Column(String(150), nullable=False)
    patient_contact = Column(String(100), nullable=True)
    facility_id = Column(ID_TYPE, ForeignKey("facilities.id"), nullable=False, index=True)
    doctor_id = Column(ID_TYPE, ForeignKey("doctors.id"), nullable=True, index=True)
    appointment_time = Column(DateTime, nullable=False)
    status = Column(String(20), nullable=False, default=AppointmentStatus.SCHEDULED.value)
    reason_for_appointment = Column(Text, nullable=True)

    __table_args__ = (
        Index("idx_appointments_time", "appointment_time"),
        Index("idx_appointments_status", "status"),
    )
