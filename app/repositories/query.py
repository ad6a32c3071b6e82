"""
Statement building from field -> value mappings.

Field names are resolved against the table's column collection and values
are always bound parameters; nothing from a mapping is spliced into SQL text.
"""

from datetime import date, datetime, time
from typing import Any, Iterable, Mapping

from sqlalchemy import Table, and_
from sqlalchemy.sql.elements import ColumnElement

from app.exceptions import InvalidQueryError


def resolve_columns(table: Table, fields: Iterable[str], allowed: Iterable[str] = None) -> list:
    """Map field names to Column objects, rejecting anything unknown or not allowed."""
    allowed_set = set(allowed) if allowed is not None else None
    columns = []
    for name in fields:
        if name not in table.c:
            raise InvalidQueryError(f"Unknown field '{name}' for {table.name}")
        if allowed_set is not None and name not in allowed_set:
            raise InvalidQueryError(f"Field '{name}' cannot be written on {table.name}")
        columns.append(table.c[name])
    return columns


def build_where(table: Table, filter: Mapping[str, Any], required: bool = False) -> ColumnElement:
    """
    Equality conjunction over the filter's fields.

    Returns None for an empty filter unless required, in which case the
    empty filter is rejected.
    """
    if not filter:
        if required:
            raise InvalidQueryError(f"A non-empty filter is required for {table.name}")
        return None

    columns = resolve_columns(table, filter.keys())
    clauses = []
    for column, value in zip(columns, filter.values()):
        # IS NULL, since "= NULL" never matches
        clauses.append(column.is_(None) if value is None else column == value)
    return and_(*clauses)


def build_values(table: Table, updates: Mapping[str, Any], writable: Iterable[str]) -> dict:
    """Validate a partial update and return it keyed by column name."""
    if not updates:
        raise InvalidQueryError(f"No fields to update on {table.name}")
    columns = resolve_columns(table, updates.keys(), allowed=writable)
    for column in columns:
        if updates[column.name] is None and not column.nullable:
            raise InvalidQueryError(f"Field '{column.name}' cannot be null on {table.name}")
    return dict(updates)


def coerce_filter(table: Table, params: Mapping[str, Any]) -> dict:
    """Convert string values (query parameters, JSON dates) to the Python types of their columns."""
    coerced = {}
    for column in resolve_columns(table, params.keys()):
        raw = params[column.name]
        if not isinstance(raw, str):
            coerced[column.name] = raw
            continue
        try:
            python_type = column.type.python_type
        except NotImplementedError:
            coerced[column.name] = raw
            continue

        if python_type is bool:
            lowered = raw.lower()
            if lowered not in ("true", "false", "1", "0"):
                raise InvalidQueryError(f"Field '{column.name}' expects true or false")
            coerced[column.name] = lowered in ("true", "1")
        elif python_type in (int, float):
            try:
                coerced[column.name] = python_type(raw)
            except ValueError:
                raise InvalidQueryError(f"Field '{column.name}' expects a number")
        elif python_type in (date, datetime, time):
            try:
                coerced[column.name] = python_type.fromisoformat(raw)
            except ValueError:
                raise InvalidQueryError(f"Field '{column.name}' expects an ISO 8601 value")
        else:
            coerced[column.name] = raw
    return coerced
