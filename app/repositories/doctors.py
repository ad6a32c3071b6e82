"""Doctor repository."""

from app.models.doctor import Doctor
from app.repositories.base import SQLRepository


class DoctorRepository(SQLRepository[Doctor]):
    model = Doctor
    writable_fields = ("name", "specialty", "primary_facility_id", "contact_number", "email")
