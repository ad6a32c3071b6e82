"""Generic CRUD service over one repository."""

from contextlib import contextmanager
from typing import Any, Generic, List, Mapping, Sequence, Type, TypeVar

from sqlalchemy.orm import Session

from app.exceptions import EntityNotFoundError, NotFoundError
from app.metrics import RepositoryMetrics
from app.repositories.base import SQLRepository

T = TypeVar("T")


class CRUDService(Generic[T]):
    """
    Thin business layer over a repository.

    Only an absent row becomes a domain error (EntityNotFoundError naming the
    entity); StorageError and InvalidQueryError propagate unchanged.
    """

    entity_name = "Entity"
    repository_class: Type[SQLRepository] = None

    def __init__(self, db: Session, metrics: RepositoryMetrics):
        self.db = db
        self.metrics = metrics
        self.repository = self.repository_class(db, metrics)

    @contextmanager
    def _not_found_as_domain_error(self, entity_name: str = None):
        try:
            yield
        except EntityNotFoundError:
            raise
        except NotFoundError as exc:
            raise EntityNotFoundError(entity_name or self.entity_name, exc.table, exc.entity_id) from exc

    def _build(self, data: Mapping[str, Any]) -> T:
        return self.repository.model(**data)

    def get_by_id(self, id: int) -> T:
        with self._not_found_as_domain_error():
            return self.repository.find(id)

    def list(self, filter: Mapping[str, Any] = None) -> List[T]:
        return self.repository.find_many(filter)

    def create(self, data: Mapping[str, Any]) -> T:
        return self.repository.create(self._build(data))

    def create_many(self, items: Sequence[Mapping[str, Any]]) -> List[T]:
        return self.repository.create_many([self._build(data) for data in items])

    def update(self, id: int, updates: Mapping[str, Any]) -> T:
        with self._not_found_as_domain_error():
            return self.repository.update(id, updates)

    def update_many(self, filter: Mapping[str, Any], updates: Mapping[str, Any]) -> int:
        return self.repository.update_many(filter, updates)

    def delete(self, id: int) -> T:
        with self._not_found_as_domain_error():
            return self.repository.delete(id)

    def delete_many(self, filter: Mapping[str, Any]) -> List[T]:
        return self.repository.delete_many(filter)

