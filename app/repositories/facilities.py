"""
Facility repositories: facilities, categories and the per-facility resources
(departments, equipment, certifications, operating hours, appointments).
"""

from typing import List

from sqlalchemy import select

from app.models.appointment import FacilityAppointment
from app.models.doctor import Doctor
from app.models.facility import Facility, FacilityCategory
from app.models.facility_resources import (
    FacilityCertification,
    FacilityDepartment,
    FacilityEquipment,
    FacilityOperatingHours,
)
from app.models.insurance import FacilityInsuranceProvider
from app.repositories.base import SQLRepository


class FacilityCategoryRepository(SQLRepository[FacilityCategory]):
    model = FacilityCategory
    writable_fields = ("name", "description", "parent_id")


class FacilityRepository(SQLRepository[Facility]):
    model = Facility
    writable_fields = (
        "name", "type", "category_id", "city_id",
        "location", "coordinates", "phone", "emergency_phone", "email", "website",
        "rating", "bed_capacity",
        "is_24_hours", "has_emergency", "has_parking", "has_ambulance", "accepts_insurance",
        "description", "image_url", "amenities", "accreditations", "meta_data",
    )

    def search(self, name: str) -> List[Facility]:
        """Case-insensitive substring match on the facility name."""
        stmt = (
            select(self.table)
            .where(self.table.c.name.icontains(name, autoescape=True))
            .order_by(self.table.c.name)
        )
        return self._fetch_all(stmt, "Search")

    def with_min_rating(self, rating: float) -> List[Facility]:
        """Facilities rated at least `rating`, best first."""
        stmt = (
            select(self.table)
            .where(self.table.c.rating >= rating)
            .order_by(self.table.c.rating.desc(), self.table.c.id)
        )
        return self._fetch_all(stmt, "FindByMinRating")

    def by_doctor_specialty(self, specialty: str) -> List[Facility]:
        """Facilities that are the primary facility of a doctor with this specialty."""
        doctors = Doctor.__table__
        facility_ids = select(doctors.c.primary_facility_id).where(doctors.c.specialty == specialty)
        stmt = (
            select(self.table)
            .where(self.table.c.id.in_(facility_ids))
            .order_by(self.table.c.id)
        )
        return self._fetch_all(stmt, "FindBySpecialty")

    def by_insurance_provider(self, provider_id: int) -> List[Facility]:
        """Facilities where the provider has registered coverage."""
        links = FacilityInsuranceProvider.__table__
        stmt = (
            select(self.table)
            .join(links, links.c.facility_id == self.table.c.id)
            .where(links.c.insurance_provider_id == provider_id)
            .order_by(self.table.c.id)
        )
        return self._fetch_all(stmt, "FindByInsuranceProvider")


class FacilityDepartmentRepository(SQLRepository[FacilityDepartment]):
    model = FacilityDepartment
    writable_fields = ("facility_id", "name", "description", "floor_number", "head_doctor_id", "contact_number")


class FacilityEquipmentRepository(SQLRepository[FacilityEquipment]):
    model = FacilityEquipment
    writable_fields = (
        "facility_id", "department_id", "name", "model", "manufacturer",
        "purchase_date", "last_maintenance_date", "next_maintenance_date", "status",
    )


class FacilityCertificationRepository(SQLRepository[FacilityCertification]):
    model = FacilityCertification
    writable_fields = (
        "facility_id", "name", "issuing_authority", "issue_date", "expiry_date", "status", "document_url",
    )


class FacilityOperatingHoursRepository(SQLRepository[FacilityOperatingHours]):
    model = FacilityOperatingHours
    writable_fields = ("facility_id", "department_id", "day_of_week", "start_time", "end_time", "is_closed")


class FacilityAppointmentRepository(SQLRepository[FacilityAppointment]):
    model = FacilityAppointment
    writable_fields = (
        "patient_name", "patient_contact", "facility_id", "doctor_id",
        "appointment_time", "status", "reason_for_appointment",
    )

    def for_facility(self, facility_id: int) -> List[FacilityAppointment]:
        """Appointments at a facility in chronological order."""
        stmt = (
            select(self.table)
            .where(self.table.c.facility_id == facility_id)
            .order_by(self.table.c.appointment_time)
        )
        return self._fetch_all(stmt, "FindByFacility")
