"""City API endpoints."""

from fastapi import APIRouter, Depends

from app.routers.crud import build_crud_router, service_dependency
from app.schemas.city import CityCreate, CityLocalTimeResponse, CityResponse, CityUpdate
from app.services.directory_service import CityService

router = APIRouter()
get_city_service = service_dependency(CityService)


@router.get("/{id}/local-time", response_model=CityLocalTimeResponse)
async def get_city_local_time(id: int, service: CityService = Depends(get_city_service)):
    """Current local time in the city's timezone."""
    return service.local_time(id)


build_crud_router(CityService, CityCreate, CityUpdate, CityResponse, router=router)
