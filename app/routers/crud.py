"""
Router factory for the standard CRUD surface of one resource.

Every directory resource exposes the same eight endpoints mapped onto its
service: list (query-string filter), get, create, batch create, update,
bulk update, delete and bulk delete.
"""

from typing import Any, Dict, List, Mapping, Type

from fastapi import APIRouter, Depends, Request, status
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_repository_metrics
from app.metrics import RepositoryMetrics
from app.repositories.query import coerce_filter
from app.schemas.common import UpdateManyRequest, UpdateManyResponse
from app.services.base import CRUDService


def validate_updates(update_schema: Type[BaseModel], updates: Mapping[str, Any]) -> Dict[str, Any]:
    """Run a raw update mapping through the resource's update schema."""
    try:
        validated = update_schema.model_validate(updates)
    except ValidationError as exc:
        raise RequestValidationError(exc.errors())
    return validated.model_dump(exclude_unset=True)


def service_dependency(service_class: Type[CRUDService]):
    def get_service(
        db: Session = Depends(get_db),
        metrics: RepositoryMetrics = Depends(get_repository_metrics),
    ) -> CRUDService:
        return service_class(db, metrics)

    return get_service


def build_crud_router(
    service_class: Type[CRUDService],
    create_schema: Type[BaseModel],
    update_schema: Type[BaseModel],
    response_schema: Type[BaseModel],
    router: APIRouter = None,
) -> APIRouter:
    """Add the CRUD routes to `router` (a new one by default) and return it."""
    if router is None:
        router = APIRouter()
    table = service_class.repository_class.model.__table__
    get_service = service_dependency(service_class)

    @router.get("", response_model=List[response_schema])
    async def list_entities(request: Request, service: CRUDService = Depends(get_service)):
        """List rows; every query parameter is an equality filter on a column."""
        return service.list(coerce_filter(table, dict(request.query_params)))

    @router.get("/{id}", response_model=response_schema)
    async def get_entity(id: int, service: CRUDService = Depends(get_service)):
        return service.get_by_id(id)

    @router.post("", response_model=response_schema, status_code=status.HTTP_201_CREATED)
    async def create_entity(body: create_schema, service: CRUDService = Depends(get_service)):
        return service.create(body.model_dump())

    @router.post("/batch", response_model=List[response_schema], status_code=status.HTTP_201_CREATED)
    async def create_entities(body: List[create_schema], service: CRUDService = Depends(get_service)):
        """Create all rows or none."""
        return service.create_many([item.model_dump() for item in body])

    @router.patch("/{id}", response_model=response_schema)
    async def update_entity(id: int, body: update_schema, service: CRUDService = Depends(get_service)):
        return service.update(id, body.model_dump(exclude_unset=True))

    @router.patch("", response_model=UpdateManyResponse)
    async def update_entities(body: UpdateManyRequest, service: CRUDService = Depends(get_service)):
        """Apply one partial update to every row matching the filter."""
        updates = validate_updates(update_schema, body.updates)
        updated = service.update_many(coerce_filter(table, body.filter), updates)
        return UpdateManyResponse(updated=updated)

    @router.delete("/{id}", response_model=response_schema)
    async def delete_entity(id: int, service: CRUDService = Depends(get_service)):
        return service.delete(id)

    @router.delete("", response_model=List[response_schema])
    async def delete_entities(request: Request, service: CRUDService = Depends(get_service)):
        """Delete every row matching the query-string filter, which must not be empty."""
        return service.delete_many(coerce_filter(table, dict(request.query_params)))

    return router
