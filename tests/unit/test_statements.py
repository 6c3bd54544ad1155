"""Unit Tests for the CRUD statement builders

Builders are pure functions, so these run without a database:
- SQL shape for INSERT/SELECT/UPDATE/DELETE
- set_/where_ parameter prefixes on UPDATE
- Validation of empty input, identifiers and parameter values
"""

import datetime

import pytest

from simple_database.core.statements import (
    build_delete,
    build_insert,
    build_select,
    build_update,
    check_identifier,
)
from simple_database.exceptions import ValidationError


class TestBuildInsert:
    """Test INSERT construction."""

    def test_insert_sql_and_params(self):
        statement = build_insert("users", {"name": "John Doe", "age": 30})

        assert statement.sql == "INSERT INTO users (name, age) VALUES (:name, :age)"
        assert statement.params == {"name": "John Doe", "age": 30}

    def test_insert_preserves_column_order(self):
        statement = build_insert("t", {"b": 1, "a": 2, "c": 3})
        assert statement.sql == "INSERT INTO t (b, a, c) VALUES (:b, :a, :c)"

    def test_insert_empty_data(self):
        with pytest.raises(ValidationError, match="Insert data cannot be empty"):
            build_insert("users", {})

    def test_insert_accepts_all_scalar_kinds(self):
        data = {"s": "x", "i": 1, "f": 1.5, "b": True, "n": None}
        assert build_insert("t", data).params == data


class TestBuildSelect:
    """Test SELECT construction."""

    def test_select_all_without_conditions(self):
        statement = build_select("users")
        assert statement.sql == "SELECT * FROM users"
        assert statement.params == {}

    def test_select_empty_conditions_omit_where(self):
        statement = build_select("users", ["name"], {})
        assert statement.sql == "SELECT name FROM users"

    def test_select_columns_and_conditions(self):
        statement = build_select(
            "users", ["id", "name"], {"name": "Bob", "age": 35}
        )

        assert statement.sql == (
            "SELECT id, name FROM users WHERE name = :name AND age = :age"
        )
        assert statement.params == {"name": "Bob", "age": 35}

    def test_select_single_column_string(self):
        assert build_select("users", "name").sql == "SELECT name FROM users"

    def test_select_qualified_table(self):
        assert build_select("public.users").sql == "SELECT * FROM public.users"


class TestBuildUpdate:
    """Test UPDATE construction."""

    def test_update_prefixes_parameters(self):
        statement = build_update("users", {"name": "Jane Smith"}, {"id": 7})

        assert statement.sql == "UPDATE users SET name = :set_name WHERE id = :where_id"
        assert statement.params == {"set_name": "Jane Smith", "where_id": 7}

    def test_update_same_column_in_data_and_conditions(self):
        statement = build_update(
            "users", {"name": "Jane Smith", "age": 26}, {"name": "Jane Doe"}
        )

        assert statement.sql == (
            "UPDATE users SET name = :set_name, age = :set_age "
            "WHERE name = :where_name"
        )
        assert statement.params == {
            "set_name": "Jane Smith",
            "set_age": 26,
            "where_name": "Jane Doe",
        }

    def test_update_empty_data(self):
        with pytest.raises(ValidationError, match="Update data cannot be empty"):
            build_update("users", {}, {"name": "John"})

    def test_update_empty_conditions(self):
        with pytest.raises(ValidationError, match="Update conditions cannot be empty"):
            build_update("users", {"name": "John"}, {})

    def test_update_both_empty_reports_data_first(self):
        with pytest.raises(ValidationError, match="Update data cannot be empty"):
            build_update("users", {}, {})


class TestBuildDelete:
    """Test DELETE construction."""

    def test_delete_sql(self):
        statement = build_delete("users", {"name": "Alice", "age": 40})

        assert statement.sql == "DELETE FROM users WHERE name = :name AND age = :age"
        assert statement.params == {"name": "Alice", "age": 40}

    def test_delete_empty_conditions(self):
        with pytest.raises(ValidationError, match="Delete conditions cannot be empty"):
            build_delete("users", {})


class TestValidation:
    """Test rejection of unsafe names and unsupported values."""

    @pytest.mark.parametrize(
        "name",
        ["users; DROP TABLE users", "1users", "", "users--", "a.b.c", "na me"],
    )
    def test_invalid_table_names(self, name):
        with pytest.raises(ValidationError, match="Invalid table name"):
            build_select(name)

    def test_invalid_column_in_data(self):
        with pytest.raises(ValidationError, match="Invalid column name"):
            build_insert("users", {"name) VALUES ('x'); --": "y"})

    def test_qualified_column_in_conditions_rejected(self):
        with pytest.raises(ValidationError, match="Invalid column name"):
            build_delete("users", {"users.id": 1})

    def test_invalid_select_column(self):
        with pytest.raises(ValidationError, match="Invalid column name"):
            build_select("users", ["name", "1=1"])

    def test_unsupported_value_type(self):
        with pytest.raises(ValidationError, match="Unsupported value type"):
            build_insert("users", {"created": datetime.date(2024, 1, 1)})

    def test_unsupported_value_in_update_conditions(self):
        with pytest.raises(ValidationError, match="where_ids"):
            build_update("users", {"age": 1}, {"ids": [1, 2]})

    def test_check_identifier_returns_name(self):
        assert check_identifier("schema_1.table_2") == "schema_1.table_2"
