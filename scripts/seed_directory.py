"""Seed a development database with a small directory and an admin login."""

import sys
import os

# Add parent directory to path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from prometheus_client import CollectorRegistry

from app.database import SessionLocal, init_db
from app.exceptions import ConflictError
from app.metrics import RepositoryMetrics
from app.models import City, Doctor, Facility, FacilityInsuranceProvider, FacilityType, InsuranceProvider
from app.repositories import (
    CityRepository,
    DoctorRepository,
    FacilityInsuranceProviderRepository,
    FacilityRepository,
    InsuranceProviderRepository,
)
from app.services import AuthService

ADMIN_EMAIL = "admin@directory.local"
ADMIN_PASSWORD = "change-me-please"


def seed_directory():
    """Create sample cities, facilities, doctors and insurance links."""
    init_db()
    db = SessionLocal()
    metrics = RepositoryMetrics(registry=CollectorRegistry())

    try:
        cities = CityRepository(db, metrics)
        if cities.find_many({"name": "Springfield"}):
            print("NOTICE: Directory already seeded")
            return

        springfield, shelbyville = cities.create_many([
            City(name="Springfield", population=100000, timezone="America/Chicago"),
            City(name="Shelbyville", population=60000, timezone="America/Chicago"),
        ])

        general, clinic = FacilityRepository(db, metrics).create_many([
            Facility(
                name="Springfield General Hospital",
                type=FacilityType.PUBLIC_HOSPITAL.value,
                city_id=springfield.id,
                description="Full service public hospital",
                rating=4.1,
                bed_capacity=250,
                is_24_hours=True,
                has_emergency=True,
                has_ambulance=True,
                accepts_insurance=True,
            ),
            Facility(
                name="Shelbyville Family Clinic",
                type=FacilityType.CLINIC.value,
                city_id=shelbyville.id,
                description="Walk-in primary care",
                rating=4.6,
                has_parking=True,
                accepts_insurance=True,
            ),
        ])

        DoctorRepository(db, metrics).create_many([
            Doctor(name="Dr. Julius Hibbert", specialty="General Practice", primary_facility_id=general.id),
            Doctor(name="Dr. Marvin Monroe", specialty="Psychiatry", primary_facility_id=clinic.id),
        ])

        provider = InsuranceProviderRepository(db, metrics).create(InsuranceProvider(name="Aetna"))
        FacilityInsuranceProviderRepository(db, metrics).create_many([
            FacilityInsuranceProvider(facility_id=general.id, insurance_provider_id=provider.id),
            FacilityInsuranceProvider(facility_id=clinic.id, insurance_provider_id=provider.id),
        ])
        print("SUCCESS: Directory seeded")
        print(f"  Cities: {springfield.name}, {shelbyville.name}")
        print(f"  Facilities: {general.name}, {clinic.name}")

        try:
            AuthService(db, metrics).register(ADMIN_PASSWORD, email=ADMIN_EMAIL, name="Directory Admin")
            print(f"SUCCESS: Admin user created: {ADMIN_EMAIL}")
        except ConflictError:
            print(f"NOTICE: User already exists: {ADMIN_EMAIL}")

    finally:
        db.close()


if __name__ == "__main__":
    seed_directory()
