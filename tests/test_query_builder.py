"""Tests for filter/update statement building."""

from datetime import date, time

import pytest

from app.exceptions import InvalidQueryError
from app.models import City, FacilityEquipment, FacilityOperatingHours
from app.repositories.query import build_values, build_where, coerce_filter, resolve_columns

CITIES = City.__table__


class TestResolveColumns:
    """Field names are checked against the table's columns."""

    def test_known_fields(self):
        columns = resolve_columns(CITIES, ["name", "population"])
        assert [c.name for c in columns] == ["name", "population"]

    def test_unknown_field_rejected(self):
        with pytest.raises(InvalidQueryError, match="Unknown field 'mayor'"):
            resolve_columns(CITIES, ["mayor"])

    def test_field_outside_allowed_set_rejected(self):
        with pytest.raises(InvalidQueryError, match="cannot be written"):
            resolve_columns(CITIES, ["created_at"], allowed=("name",))


class TestBuildWhere:
    """Equality conjunctions with bound parameters."""

    def test_empty_filter_matches_everything(self):
        assert build_where(CITIES, {}) is None

    def test_empty_filter_rejected_when_required(self):
        with pytest.raises(InvalidQueryError):
            build_where(CITIES, {}, required=True)

    def test_values_are_bound_parameters(self):
        clause = build_where(CITIES, {"name": "Springfield'; DROP TABLE cities; --", "population": 5})
        compiled = clause.compile()
        assert "DROP TABLE" not in str(compiled)
        assert "Springfield'; DROP TABLE cities; --" in compiled.params.values()
        assert 5 in compiled.params.values()

    def test_none_becomes_is_null(self):
        clause = build_where(CITIES, {"timezone": None})
        assert "IS NULL" in str(clause.compile())


class TestBuildValues:
    """Partial updates are validated against writable fields."""

    def test_valid_update(self):
        assert build_values(CITIES, {"population": 3}, ("name", "population")) == {"population": 3}

    def test_empty_update_rejected(self):
        with pytest.raises(InvalidQueryError, match="No fields to update"):
            build_values(CITIES, {}, ("name",))

    def test_identifier_not_writable(self):
        with pytest.raises(InvalidQueryError):
            build_values(CITIES, {"id": 7}, ("name",))

    def test_null_rejected_for_required_column(self):
        with pytest.raises(InvalidQueryError, match="'name' cannot be null"):
            build_values(CITIES, {"name": None}, ("name", "timezone"))

    def test_null_allowed_for_nullable_column(self):
        assert build_values(CITIES, {"timezone": None}, ("name", "timezone")) == {"timezone": None}


class TestCoerceFilter:
    """Query-string values are converted to column types."""

    def test_integer_column(self):
        assert coerce_filter(CITIES, {"population": "100000"}) == {"population": 100000}

    def test_string_column_untouched(self):
        assert coerce_filter(CITIES, {"name": "Springfield"}) == {"name": "Springfield"}

    def test_boolean_column(self):
        table = FacilityOperatingHours.__table__
        assert coerce_filter(table, {"is_closed": "true"}) == {"is_closed": True}
        assert coerce_filter(table, {"is_closed": "0"}) == {"is_closed": False}

    def test_bad_boolean_rejected(self):
        with pytest.raises(InvalidQueryError):
            coerce_filter(FacilityOperatingHours.__table__, {"is_closed": "maybe"})

    def test_bad_number_rejected(self):
        with pytest.raises(InvalidQueryError, match="expects a number"):
            coerce_filter(CITIES, {"population": "many"})

    def test_date_and_time_columns(self):
        assert coerce_filter(FacilityEquipment.__table__, {"purchase_date": "2024-03-01"}) == {
            "purchase_date": date(2024, 3, 1)
        }
        assert coerce_filter(FacilityOperatingHours.__table__, {"start_time": "08:30"}) == {
            "start_time": time(8, 30)
        }

    def test_non_string_values_pass_through(self):
        assert coerce_filter(CITIES, {"population": 12}) == {"population": 12}

    def test_unknown_parameter_rejected(self):
        with pytest.raises(InvalidQueryError):
            coerce_filter(CITIES, {"country": "US"})
