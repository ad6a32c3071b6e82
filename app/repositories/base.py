"""
Generic repository contract and its SQL implementation.

Each entity repository is a thin subclass of SQLRepository naming its model
and the columns callers may write. Statements are SQLAlchemy Core built
from filter/update mappings (see app.repositories.query); result rows are
scanned back into detached model instances. Every operation runs inside
RepositoryMetrics.track and writes commit before returning.
"""

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Dict, Generic, List, Mapping, Optional, Sequence, Tuple, Type, TypeVar
import logging

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.exceptions import NotFoundError, StorageError
from app.metrics import RepositoryMetrics
from app.repositories.query import build_values, build_where
from app.utils.timezone import utcnow

logger = logging.getLogger(__name__)

T = TypeVar("T")

Filter = Mapping[str, Any]
Updates = Mapping[str, Any]


class ReadRepository(ABC, Generic[T]):
    """Read side of the contract."""

    @abstractmethod
    def find(self, id: int) -> T:
        """Fetch exactly one row by identifier. Raises NotFoundError."""

    @abstractmethod
    def find_many(self, filter: Optional[Filter] = None) -> List[T]:
        """Fetch rows matching an equality conjunction; empty filter returns all rows."""


class Repository(ReadRepository[T]):
    """The eight CRUD operations every entity repository exposes."""

    @abstractmethod
    def create(self, entity: T) -> T:
        """Insert one row and return it as stored."""

    @abstractmethod
    def create_many(self, entities: Sequence[T]) -> List[T]:
        """Insert rows in one transaction; any failure persists nothing."""

    @abstractmethod
    def update(self, id: int, updates: Updates) -> T:
        """Apply a partial update to one row. Raises NotFoundError."""

    @abstractmethod
    def update_many(self, filter: Filter, updates: Updates) -> int:
        """Apply a partial update to all matching rows and return the count."""

    @abstractmethod
    def delete(self, id: int) -> T:
        """Remove one row and return its final state. Raises NotFoundError."""

    @abstractmethod
    def delete_many(self, filter: Filter) -> List[T]:
        """Remove all matching rows and return their final states."""


class SQLReadRepository(ReadRepository[T]):
    """SQL implementation of the read operations for one model."""

    model: Type[T] = None

    def __init__(self, db: Session, metrics: RepositoryMetrics):
        self.db = db
        self.metrics = metrics
        self.table = self.model.__table__

    @property
    def table_name(self) -> str:
        return self.table.name

    def _to_entity(self, row) -> T:
        return self.model(**row._mapping)

    @contextmanager
    def _operation(self, operation: str, write: bool = False):
        """Track an operation, commit writes, roll back and wrap storage failures."""
        with self.metrics.track(self.table_name, operation):
            try:
                yield
                if write:
                    self.db.commit()
            except SQLAlchemyError as exc:
                self.db.rollback()
                logger.error(f"{operation} on {self.table_name} failed: {exc}")
                raise StorageError(f"{operation} on {self.table_name} failed") from exc
            except Exception:
                if write:
                    self.db.rollback()
                raise

    def _fetch_all(self, stmt, operation: str) -> List[T]:
        with self._operation(operation):
            rows = self.db.execute(stmt).all()
        return [self._to_entity(row) for row in rows]

    def find(self, id: int) -> T:
        stmt = select(self.table).where(self.table.c.id == id)
        with self._operation("Find"):
            row = self.db.execute(stmt).first()
            if row is None:
                raise NotFoundError(self.table_name, id)
        return self._to_entity(row)

    def find_many(self, filter: Optional[Filter] = None) -> List[T]:
        stmt = select(self.table)
        where = build_where(self.table, filter or {})
        if where is not None:
            stmt = stmt.where(where)
        return self._fetch_all(stmt.order_by(self.table.c.id), "FindMany")

    def count(self, filter: Optional[Filter] = None) -> int:
        """Number of rows matching the filter."""
        stmt = select(func.count()).select_from(self.table)
        where = build_where(self.table, filter or {})
        if where is not None:
            stmt = stmt.where(where)

        with self._operation("Count"):
            return self.db.execute(stmt).scalar_one()


class SQLRepository(SQLReadRepository[T], Repository[T]):
    """SQL implementation of the full contract."""

    # Columns callers may set on create/update; id and timestamps are never writable
    writable_fields: Tuple[str, ...] = ()

    def _insert_values(self, entity: T) -> Dict[str, Any]:
        values = {}
        for name in self.writable_fields:
            value = getattr(entity, name, None)
            # Omitted columns fall back to NULL or their column default
            if value is not None:
                values[name] = value
        now = utcnow()
        values["created_at"] = now
        values["updated_at"] = now
        return values

    def _insert(self, values: Dict[str, Any]):
        stmt = insert(self.table).values(**values).returning(*self.table.c)
        return self.db.execute(stmt).one()

    def create(self, entity: T) -> T:
        values = self._insert_values(entity)
        with self._operation("Create", write=True):
            row = self._insert(values)
        return self._to_entity(row)

    def create_many(self, entities: Sequence[T]) -> List[T]:
        batch = [self._insert_values(entity) for entity in entities]
        if not batch:
            return []

        with self._operation("CreateMany", write=True):
            rows = [self._insert(values) for values in batch]
        return [self._to_entity(row) for row in rows]

    def update(self, id: int, updates: Updates) -> T:
        values = build_values(self.table, updates, self.writable_fields)
        values["updated_at"] = utcnow()
        stmt = (
            update(self.table)
            .where(self.table.c.id == id)
            .values(**values)
            .returning(*self.table.c)
        )
        with self._operation("Update", write=True):
            row = self.db.execute(stmt).first()
            if row is None:
                raise NotFoundError(self.table_name, id)
        return self._to_entity(row)

    def update_many(self, filter: Filter, updates: Updates) -> int:
        where = build_where(self.table, filter, required=True)
        values = build_values(self.table, updates, self.writable_fields)
        values["updated_at"] = utcnow()
        stmt = update(self.table).where(where).values(**values)

        with self._operation("UpdateMany", write=True):
            result = self.db.execute(stmt)
        return result.rowcount

    def delete(self, id: int) -> T:
        stmt = delete(self.table).where(self.table.c.id == id).returning(*self.table.c)
        with self._operation("Delete", write=True):
            row = self.db.execute(stmt).first()
            if row is None:
                raise NotFoundError(self.table_name, id)
        return self._to_entity(row)

    def delete_many(self, filter: Filter) -> List[T]:
        where = build_where(self.table, filter, required=True)
        stmt = delete(self.table).where(where).returning(*self.table.c)

        with self._operation("DeleteMany", write=True):
            rows = self.db.execute(stmt).all()
        return [self._to_entity(row) for row in rows]
