"""Tests for API endpoints."""

import pytest
from prometheus_client import REGISTRY

from app.models import AuditLog


class TestServiceEndpoints:
    """Liveness, health and metrics."""

    def test_ping(self, client):
        response = client.get("/ping")
        assert response.status_code == 200
        assert response.json() == {"message": "pong"}

    def test_health_check(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["database"] == "connected"
        assert "version" in data
        assert "environment" in data

    def test_metrics_exposes_repository_metrics(self, client):
        client.get("/api/cities")

        response = client.get("/metrics")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert 'database_cities_query_total{operation="FindMany",status="success"} 1.0' in response.text

    def test_response_headers(self, client):
        response = client.get("/api/cities")
        assert "X-Process-Time" in response.headers
        assert response.headers["X-Content-Type-Options"] == "nosniff"

    def test_http_metrics_label_route_template(self, client, city):
        labels = {"method": "GET", "endpoint": "/api/cities/{id}", "status": "200"}
        before = REGISTRY.get_sample_value("server_http_requests_total", labels) or 0.0

        assert client.get(f"/api/cities/{city.id}").status_code == 200

        assert REGISTRY.get_sample_value("server_http_requests_total", labels) == before + 1


class TestCityEndpoints:
    """Generic CRUD surface, exercised through cities."""

    def test_create_and_get(self, client):
        response = client.post("/api/cities", json={"name": "Springfield", "population": 100000})
        assert response.status_code == 201
        created = response.json()
        assert created["id"]
        assert created["created_at"] == created["updated_at"]

        response = client.get(f"/api/cities/{created['id']}")
        assert response.status_code == 200
        assert response.json()["name"] == "Springfield"
        assert response.json()["population"] == 100000

    def test_get_missing(self, client):
        response = client.get("/api/cities/404")
        assert response.status_code == 404
        assert response.json() == {"detail": "City not found"}

    def test_validation_error_shape(self, client):
        response = client.post("/api/cities", json={"population": -1})
        assert response.status_code == 400
        data = response.json()
        assert data["detail"] == "Invalid request data"
        fields = {error["field"] for error in data["errors"]}
        assert "name" in fields
        assert "population" in fields

    def test_unknown_body_field_rejected(self, client):
        response = client.post("/api/cities", json={"name": "Springfield", "mayor": "Quimby"})
        assert response.status_code == 400

    def test_invalid_timezone_rejected(self, client):
        response = client.post("/api/cities", json={"name": "Springfield", "timezone": "Mars/Olympus"})
        assert response.status_code == 400

    def test_list_with_filter(self, client):
        client.post("/api/cities/batch", json=[
            {"name": "Springfield", "population": 100},
            {"name": "Shelbyville", "population": 200},
        ])

        response = client.get("/api/cities", params={"population": "200"})
        assert response.status_code == 200
        assert [c["name"] for c in response.json()] == ["Shelbyville"]

        assert len(client.get("/api/cities").json()) == 2

    def test_list_with_unknown_filter(self, client):
        response = client.get("/api/cities", params={"mayor": "Quimby"})
        assert response.status_code == 400

    def test_patch(self, client, city):
        response = client.patch(f"/api/cities/{city.id}", json={"population": 100001})
        assert response.status_code == 200
        assert response.json()["population"] == 100001
        assert response.json()["name"] == "Springfield"

    def test_patch_empty_body_rejected(self, client, city):
        response = client.patch(f"/api/cities/{city.id}", json={})
        assert response.status_code == 400

    def test_patch_missing(self, client):
        response = client.patch("/api/cities/404", json={"population": 1})
        assert response.status_code == 404

    def test_patch_null_into_required_field_rejected(self, client, city):
        response = client.patch(f"/api/cities/{city.id}", json={"name": None})
        assert response.status_code == 400

        response = client.patch("/api/cities", json={"filter": {"id": city.id}, "updates": {"name": None}})
        assert response.status_code == 400

        assert client.get(f"/api/cities/{city.id}").json()["name"] == "Springfield"

    def test_bulk_patch(self, client):
        client.post("/api/cities/batch", json=[
            {"name": "A", "population": 1},
            {"name": "B", "population": 1},
        ])

        response = client.patch("/api/cities", json={"filter": {"population": 1}, "updates": {"population": 2}})
        assert response.status_code == 200
        assert response.json() == {"updated": 2}

    def test_bulk_patch_validates_updates(self, client):
        response = client.patch("/api/cities", json={"filter": {"population": 1}, "updates": {"population": -5}})
        assert response.status_code == 400

        response = client.patch("/api/cities", json={"filter": {}, "updates": {"population": 5}})
        assert response.status_code == 400

    def test_delete(self, client, city):
        response = client.delete(f"/api/cities/{city.id}")
        assert response.status_code == 200
        assert response.json()["id"] == city.id
        assert client.get(f"/api/cities/{city.id}").status_code == 404

    def test_bulk_delete(self, client):
        client.post("/api/cities/batch", json=[
            {"name": "A", "population": 1},
            {"name": "B", "population": 1},
            {"name": "C", "population": 2},
        ])

        response = client.delete("/api/cities", params={"population": "1"})
        assert response.status_code == 200
        assert sorted(c["name"] for c in response.json()) == ["A", "B"]
        assert [c["name"] for c in client.get("/api/cities").json()] == ["C"]

    def test_bulk_delete_requires_filter(self, client, city):
        response = client.delete("/api/cities")
        assert response.status_code == 400
        assert len(client.get("/api/cities").json()) == 1

    def test_local_time(self, client, city):
        response = client.get(f"/api/cities/{city.id}/local-time")
        assert response.status_code == 200
        assert response.json()["timezone"] == "America/Chicago"


class TestDoctorEndpoints:
    """Batch creation is all-or-nothing."""

    def test_batch_with_bad_facility_persists_nothing(self, client, facility):
        response = client.post("/api/doctors/batch", json=[
            {"name": "Dr. Hibbert", "primary_facility_id": facility.id},
            {"name": "Dr. Nick", "primary_facility_id": 999999},
            {"name": "Dr. Monroe", "primary_facility_id": facility.id},
        ])
        assert response.status_code == 500
        assert response.json() == {"detail": "Internal server error"}

        assert client.get("/api/doctors").json() == []


class TestFacilityEndpoints:
    """Facility extras."""

    def test_create_facility(self, client, city, sample_facility_data):
        response = client.post("/api/facilities", json={**sample_facility_data, "city_id": city.id})
        assert response.status_code == 201
        data = response.json()
        assert data["type"] == "Teaching Hospital"
        assert data["has_emergency"] is True
        assert data["has_parking"] is False

    def test_unknown_facility_type_rejected(self, client, city, sample_facility_data):
        response = client.post("/api/facilities", json={**sample_facility_data, "type": "Spa", "city_id": city.id})
        assert response.status_code == 400

    def test_lookups(self, client, facility, city):
        assert [f["id"] for f in client.get(f"/api/facilities/city/{city.id}").json()] == [facility.id]
        assert [f["id"] for f in client.get("/api/facilities/type/Clinic").json()] == [facility.id]
        assert [f["id"] for f in client.get("/api/facilities/rating/4").json()] == [facility.id]
        assert client.get("/api/facilities/rating/4.5").json() == []
        assert [f["id"] for f in client.get("/api/facilities/search", params={"q": "GENERAL"}).json()] == [facility.id]

    def test_search_requires_query(self, client):
        assert client.get("/api/facilities/search").status_code == 400

    def test_search_wildcards_are_literal(self, client, facility):
        assert client.get("/api/facilities/search", params={"q": "%"}).json() == []

    def test_specialty_and_insurance(self, client, facility):
        client.post("/api/doctors", json={
            "name": "Dr. Riviera", "specialty": "Cardiology", "primary_facility_id": facility.id,
        })
        provider = client.post("/api/insurance-providers", json={"name": "Aetna"}).json()
        client.post("/api/facility-insurance-providers", json={
            "facility_id": facility.id, "insurance_provider_id": provider["id"],
        })

        assert [f["id"] for f in client.get("/api/facilities/specialty/Cardiology").json()] == [facility.id]
        assert [f["id"] for f in client.get(f"/api/facilities/insurance/{provider['id']}").json()] == [facility.id]

    def test_reviews_and_stats(self, client, facility):
        response = client.post(f"/api/facilities/{facility.id}/reviews", json={"rating": 4, "comment": "Clean"})
        assert response.status_code == 201
        assert response.json()["entity_type"] == "facility"
        client.post(f"/api/facilities/{facility.id}/reviews", json={"rating": 5})

        assert len(client.get(f"/api/facilities/{facility.id}/reviews").json()) == 2

        stats = client.get(f"/api/facilities/stats/{facility.id}").json()
        assert stats["review_count"] == 2
        assert stats["average_rating"] == 4.5

    def test_doctor_assignment(self, client, facility):
        doctor = client.post("/api/doctors", json={"name": "Dr. Hibbert"}).json()

        response = client.post(f"/api/facilities/{facility.id}/doctors", json={"doctor_id": doctor["id"]})
        assert response.status_code == 200
        assert [d["id"] for d in client.get(f"/api/facilities/{facility.id}/doctors").json()] == [doctor["id"]]

        response = client.delete(f"/api/facilities/{facility.id}/doctors/{doctor['id']}")
        assert response.status_code == 200
        assert response.json()["primary_facility_id"] is None

    def test_appointments(self, client, facility):
        response = client.post(f"/api/facilities/{facility.id}/appointments", json={
            "patient_name": "Homer Simpson",
            "appointment_time": "2030-01-15T09:30:00Z",
        })
        assert response.status_code == 201
        booked = response.json()
        assert booked["status"] == "Scheduled"
        assert booked["appointment_time"].startswith("2030-01-15T09:30:00")

        response = client.delete(f"/api/facilities/{facility.id}/appointments/{booked['id']}")
        assert response.status_code == 200
        assert response.json()["status"] == "Cancelled"

        assert len(client.get(f"/api/facilities/{facility.id}/appointments").json()) == 1

    def test_missing_facility(self, client):
        response = client.get("/api/facilities/404/reviews")
        assert response.status_code == 404
        assert response.json() == {"detail": "Facility not found"}


class TestAuthEndpoints:
    """Registration, login and sessions over HTTP."""

    def test_login_missing_credentials(self, client):
        response = client.post("/api/auth/login", json={})
        assert response.status_code == 400

    def test_register_login_me_logout(self, client, sample_user):
        response = client.post("/api/auth/register", json=sample_user)
        assert response.status_code == 201
        assert "password" not in response.json()

        response = client.post("/api/auth/login", json={
            "email": sample_user["email"], "password": sample_user["password"],
        })
        assert response.status_code == 200
        token = response.json()["access_token"]
        assert len(token.split(".")) == 3
        headers = {"Authorization": f"Bearer {token}"}

        response = client.get("/api/auth/me", headers=headers)
        assert response.status_code == 200
        assert response.json()["email"] == sample_user["email"]

        assert client.delete("/api/auth/logout", headers=headers).status_code == 200
        assert client.get("/api/auth/me", headers=headers).status_code == 401

    def test_duplicate_registration(self, client, sample_user):
        client.post("/api/auth/register", json=sample_user)
        response = client.post("/api/auth/register", json=sample_user)
        assert response.status_code == 409

    def test_login_failures_look_the_same(self, client, sample_user):
        client.post("/api/auth/register", json=sample_user)

        unknown = client.post("/api/auth/login", json={"email": "nobody@b.com", "password": "longenough1"})
        wrong = client.post("/api/auth/login", json={"email": sample_user["email"], "password": "wrongpassword"})

        assert unknown.status_code == wrong.status_code == 401
        assert unknown.json() == wrong.json() == {"detail": "Invalid credentials"}

    def test_me_requires_token(self, client):
        assert client.get("/api/auth/me").status_code == 401

    def test_verification_token_flow(self, client):
        response = client.post("/api/auth/verification-tokens", json={"identifier": "a@b.com", "token": "123456"})
        assert response.status_code == 201

        assert client.delete("/api/auth/verification-tokens/a@b.com/123456").status_code == 200
        response = client.delete("/api/auth/verification-tokens/a@b.com/123456")
        assert response.status_code == 401
        assert response.json() == {"detail": "Invalid token"}


class TestAuditLogEndpoints:
    """Read-only audit log access."""

    def test_list_and_get(self, client, db):
        db.add(AuditLog(table_name="cities", operation="INSERT", new_data={"name": "Springfield"}))
        db.add(AuditLog(table_name="doctors", operation="DELETE", old_data={"name": "Dr. Nick"}))
        db.commit()

        response = client.get("/api/audit-logs", params={"table_name": "cities"})
        assert response.status_code == 200
        entries = response.json()
        assert len(entries) == 1
        assert entries[0]["new_data"] == {"name": "Springfield"}

        assert len(client.get("/api/audit-logs", params={"limit": 1}).json()) == 1

        response = client.get(f"/api/audit-logs/{entries[0]['id']}")
        assert response.status_code == 200
        assert response.json()["operation"] == "INSERT"

    def test_missing_entry(self, client):
        response = client.get("/api/audit-logs/404")
        assert response.status_code == 404

    def test_read_only(self, client):
        assert client.post("/api/audit-logs", json={}).status_code == 405
