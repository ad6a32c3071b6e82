"""Pytest configuration and fixtures."""

import os

# In-memory SQLite (StaticPool, foreign keys on) before app.database builds its engine
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from prometheus_client import CollectorRegistry

from app.main import app
from app.database import Base, SessionLocal, engine, get_db
from app.metrics import RepositoryMetrics
from app.repositories import CityRepository, FacilityRepository
from app.models import City, Facility, FacilityType


@pytest.fixture(scope="function")
def db():
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def registry():
    """Private Prometheus registry so tests never collide on metric names."""
    return CollectorRegistry()


@pytest.fixture(scope="function")
def metrics(registry):
    return RepositoryMetrics(registry=registry)


@pytest.fixture(scope="function")
def client(db, metrics):
    """Create a test client with overridden database dependency and metrics client."""
    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    original_metrics = app.state.repository_metrics
    app.state.repository_metrics = metrics
    with TestClient(app) as test_client:
        yield test_client
    app.state.repository_metrics = original_metrics
    app.dependency_overrides.clear()


@pytest.fixture
def city(db, metrics):
    """A stored city."""
    return CityRepository(db, metrics).create(
        City(name="Springfield", population=100000, timezone="America/Chicago")
    )


@pytest.fixture
def facility(db, metrics, city):
    """A stored clinic in the sample city."""
    return FacilityRepository(db, metrics).create(Facility(
        name="Springfield General Clinic",
        type=FacilityType.CLINIC.value,
        city_id=city.id,
        description="Walk-in primary care",
        rating=4.2,
    ))


@pytest.fixture
def sample_facility_data():
    """Request body for creating a facility (city_id filled in by the test)."""
    return {
        "name": "Shelbyville Teaching Hospital",
        "type": "Teaching Hospital",
        "description": "Regional teaching hospital",
        "rating": 4.5,
        "bed_capacity": 350,
        "has_emergency": True,
        "is_24_hours": True,
    }


@pytest.fixture
def sample_user():
    """Credentials for a registered user."""
    return {
        "name": "Test User",
        "email": "a@b.com",
        "password": "longenough1",
    }
