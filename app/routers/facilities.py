"""Facility API endpoints."""

from typing import List

from fastapi import APIRouter, Depends, Query, status

from app.models.facility import FacilityType
from app.routers.crud import build_crud_router, service_dependency
from app.schemas import (
    AppointmentBooking,
    DoctorAssignment,
    DoctorResponse,
    FacilityAppointmentResponse,
    FacilityCreate,
    FacilityResponse,
    FacilityReviewCreate,
    FacilityStatsResponse,
    FacilityUpdate,
    ReviewResponse,
)
from app.services.facility_service import FacilityService

router = APIRouter()
get_facility_service = service_dependency(FacilityService)


# Lookups (registered before the generic "/{id}" routes)

@router.get("/search", response_model=List[FacilityResponse])
async def search_facilities(
    q: str = Query(..., min_length=1, max_length=255),
    service: FacilityService = Depends(get_facility_service)
):
    """Search facilities by name (case-insensitive)."""
    return service.search(q)


@router.get("/city/{city_id}", response_model=List[FacilityResponse])
async def get_facilities_by_city(city_id: int, service: FacilityService = Depends(get_facility_service)):
    return service.by_city(city_id)


@router.get("/type/{facility_type}", response_model=List[FacilityResponse])
async def get_facilities_by_type(
    facility_type: FacilityType,
    service: FacilityService = Depends(get_facility_service)
):
    return service.by_type(facility_type.value)


@router.get("/rating/{rating}", response_model=List[FacilityResponse])
async def get_facilities_by_rating(rating: float, service: FacilityService = Depends(get_facility_service)):
    """Facilities rated at least `rating`, best first."""
    return service.by_min_rating(rating)


@router.get("/specialty/{specialty}", response_model=List[FacilityResponse])
async def get_facilities_by_specialty(specialty: str, service: FacilityService = Depends(get_facility_service)):
    return service.by_specialty(specialty)


@router.get("/insurance/{provider_id}", response_model=List[FacilityResponse])
async def get_facilities_by_insurance(provider_id: int, service: FacilityService = Depends(get_facility_service)):
    return service.by_insurance_provider(provider_id)


@router.get("/stats/{id}", response_model=FacilityStatsResponse)
async def get_facility_stats(id: int, service: FacilityService = Depends(get_facility_service)):
    return service.stats(id)


# Reviews

@router.get("/{id}/reviews", response_model=List[ReviewResponse])
async def get_facility_reviews(id: int, service: FacilityService = Depends(get_facility_service)):
    return service.get_reviews(id)


@router.post("/{id}/reviews", response_model=ReviewResponse, status_code=status.HTTP_201_CREATED)
async def add_facility_review(
    id: int,
    body: FacilityReviewCreate,
    service: FacilityService = Depends(get_facility_service)
):
    return service.add_review(id, body.model_dump())


# Doctors

@router.get("/{id}/doctors", response_model=List[DoctorResponse])
async def get_facility_doctors(id: int, service: FacilityService = Depends(get_facility_service)):
    return service.get_doctors(id)


@router.post("/{id}/doctors", response_model=DoctorResponse)
async def assign_facility_doctor(
    id: int,
    body: DoctorAssignment,
    service: FacilityService = Depends(get_facility_service)
):
    return service.assign_doctor(id, body.doctor_id)


@router.delete("/{id}/doctors/{doctor_id}", response_model=DoctorResponse)
async def unassign_facility_doctor(
    id: int,
    doctor_id: int,
    service: FacilityService = Depends(get_facility_service)
):
    return service.unassign_doctor(id, doctor_id)


# Appointments

@router.get("/{id}/appointments", response_model=List[FacilityAppointmentResponse])
async def get_facility_appointments(id: int, service: FacilityService = Depends(get_facility_service)):
    return service.get_appointments(id)


@router.post("/{id}/appointments", response_model=FacilityAppointmentResponse, status_code=status.HTTP_201_CREATED)
async def book_facility_appointment(
    id: int,
    body: AppointmentBooking,
    service: FacilityService = Depends(get_facility_service)
):
    return service.book_appointment(id, body.model_dump())


@router.delete("/{id}/appointments/{appointment_id}", response_model=FacilityAppointmentResponse)
async def cancel_facility_appointment(
    id: int,
    appointment_id: int,
    service: FacilityService = Depends(get_facility_service)
):
    """Cancel an appointment; the row is kept with status Cancelled."""
    return service.cancel_appointment(id, appointment_id)


build_crud_router(FacilityService, FacilityCreate, FacilityUpdate, FacilityResponse, router=router)
