"""Facility service: CRUD plus the lookups and sub-resources served under /facilities."""

from typing import Any, Dict, List, Mapping
import logging

from sqlalchemy.orm import Session

from app.exceptions import EntityNotFoundError, InvalidQueryError
from app.metrics import RepositoryMetrics
from app.models import AppointmentStatus, Doctor, Facility, FacilityAppointment, Review
from app.repositories import (
    DoctorRepository,
    FacilityAppointmentRepository,
    FacilityDepartmentRepository,
    FacilityEquipmentRepository,
    FacilityRepository,
    ReviewRepository,
)
from app.services.base import CRUDService

logger = logging.getLogger(__name__)

FACILITY_REVIEW_TYPE = "facility"


class FacilityService(CRUDService):
    entity_name = "Facility"
    repository_class = FacilityRepository

    def __init__(self, db: Session, metrics: RepositoryMetrics):
        super().__init__(db, metrics)
        self.doctors = DoctorRepository(db, metrics)
        self.departments = FacilityDepartmentRepository(db, metrics)
        self.equipment = FacilityEquipmentRepository(db, metrics)
        self.appointments = FacilityAppointmentRepository(db, metrics)
        self.reviews = ReviewRepository(db, metrics)

    # Lookups

    def by_city(self, city_id: int) -> List[Facility]:
        return self.repository.find_many({"city_id": city_id})

    def by_type(self, facility_type: str) -> List[Facility]:
        return self.repository.find_many({"type": facility_type})

    def by_min_rating(self, rating: float) -> List[Facility]:
        if rating < 0 or rating > 5:
            raise InvalidQueryError("Rating must be between 0 and 5")
        return self.repository.with_min_rating(rating)

    def by_specialty(self, specialty: str) -> List[Facility]:
        return self.repository.by_doctor_specialty(specialty)

    def by_insurance_provider(self, provider_id: int) -> List[Facility]:
        return self.repository.by_insurance_provider(provider_id)

    def search(self, query: str) -> List[Facility]:
        query = query.strip()
        if not query:
            raise InvalidQueryError("Search query must not be empty")
        return self.repository.search(query)

    def stats(self, facility_id: int) -> Dict[str, Any]:
        """Counts of doctors, departments, equipment and reviews for one facility."""
        facility = self.get_by_id(facility_id)
        average_rating, review_count = self.reviews.rating_summary(FACILITY_REVIEW_TYPE, facility.id)
        return {
            "facility_id": facility.id,
            "doctor_count": self.doctors.count({"primary_facility_id": facility.id}),
            "department_count": self.departments.count({"facility_id": facility.id}),
            "equipment_count": self.equipment.count({"facility_id": facility.id}),
            "review_count": review_count,
            "average_rating": round(average_rating, 2),
        }

    # Reviews

    def get_reviews(self, facility_id: int) -> List[Review]:
        self.get_by_id(facility_id)
        return self.reviews.for_entity(FACILITY_REVIEW_TYPE, facility_id)

    def add_review(self, facility_id: int, data: Mapping[str, Any]) -> Review:
        self.get_by_id(facility_id)
        review = Review(**data, entity_type=FACILITY_REVIEW_TYPE, entity_id=facility_id)
        created = self.reviews.create(review)
        logger.info(f"Review {created.id} added to facility {facility_id}")
        return created

    # Doctors

    def get_doctors(self, facility_id: int) -> List[Doctor]:
        self.get_by_id(facility_id)
        return self.doctors.find_many({"primary_facility_id": facility_id})

    def assign_doctor(self, facility_id: int, doctor_id: int) -> Doctor:
        """Make this facility the doctor's primary facility."""
        self.get_by_id(facility_id)
        with self._not_found_as_domain_error("Doctor"):
            doctor = self.doctors.update(doctor_id, {"primary_facility_id": facility_id})
        logger.info(f"Doctor {doctor_id} assigned to facility {facility_id}")
        return doctor

    def unassign_doctor(self, facility_id: int, doctor_id: int) -> Doctor:
        with self._not_found_as_domain_error("Doctor"):
            doctor = self.doctors.find(doctor_id)
        if doctor.primary_facility_id != facility_id:
            raise EntityNotFoundError("Doctor", self.doctors.table_name, doctor_id)
        doctor = self.doctors.update(doctor_id, {"primary_facility_id": None})
        logger.info(f"Doctor {doctor_id} removed from facility {facility_id}")
        return doctor

    # Appointments

    def get_appointments(self, facility_id: int) -> List[FacilityAppointment]:
        self.get_by_id(facility_id)
        return self.appointments.for_facility(facility_id)

    def book_appointment(self, facility_id: int, data: Mapping[str, Any]) -> FacilityAppointment:
        self.get_by_id(facility_id)
        doctor_id = data.get("doctor_id")
        if doctor_id is not None:
            with self._not_found_as_domain_error("Doctor"):
                doctor = self.doctors.find(doctor_id)
            if doctor.primary_facility_id != facility_id:
                raise InvalidQueryError(f"Doctor {doctor_id} does not practise at facility {facility_id}")

        appointment = FacilityAppointment(
            **data,
            facility_id=facility_id,
            status=AppointmentStatus.SCHEDULED.value,
        )
        created = self.appointments.create(appointment)
        logger.info(f"Appointment {created.id} booked at facility {facility_id}")
        return created

    def cancel_appointment(self, facility_id: int, appointment_id: int) -> FacilityAppointment:
        appointment = self._facility_appointment(facility_id, appointment_id)
        if appointment.status == AppointmentStatus.CANCELLED.value:
            return appointment
        cancelled = self.appointments.update(appointment_id, {"status": AppointmentStatus.CANCELLED.value})
        logger.info(f"Appointment {appointment_id} at facility {facility_id} cancelled")
        return cancelled

    def _facility_appointment(self, facility_id: int, appointment_id: int) -> FacilityAppointment:
        with self._not_found_as_domain_error("Appointment"):
            appointment = self.appointments.find(appointment_id)
        if appointment.facility_id != facility_id:
            raise EntityNotFoundError("Appointment", self.appointments.table_name, appointment_id)
        return appointment
