"""Parameterized SQL statement builders for CRUD helpers.

Values are always bound as named parameters. Table and column names cannot be
bound, so they are checked against a plain identifier pattern instead.
"""

import re
from typing import Any, Mapping, Optional, Sequence

from simple_database.exceptions import ValidationError
from simple_database.models.query import Statement, validate_params

# Plain identifier, optionally qualified as schema.name
IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)?$")

SET_PREFIX = "set_"
WHERE_PREFIX = "where_"


def check_identifier(name: Any, kind: str = "identifier") -> str:
    """
    Validate a table or column name.

    Args:
        name: Name to check
        kind: What the name refers to, for the error message

    Returns:
        The name unchanged

    Raises:
        ValidationError: If the name is not a plain SQL identifier
    """
    if not isinstance(name, str) or not IDENTIFIER.match(name):
        raise ValidationError(f"Invalid {kind}: {name!r}")
    return name


def _check_columns(keys: Sequence[Any]) -> list[str]:
    columns = [check_identifier(key, "column name") for key in keys]
    # Qualified names would produce invalid placeholders
    for column in columns:
        if "." in column:
            raise ValidationError(f"Invalid column name: {column!r}")
    return columns


def _where_clause(columns: Sequence[str], prefix: str = "") -> str:
    return " AND ".join(f"{column} = :{prefix}{column}" for column in columns)


def build_insert(table: str, data: Mapping[str, Any]) -> Statement:
    """
    Build ``INSERT INTO table (cols) VALUES (:cols)``.

    Raises:
        ValidationError: If data is empty or contains invalid names/values
    """
    if not data:
        raise ValidationError("Insert data cannot be empty")

    check_identifier(table, "table name")
    columns = _check_columns(list(data))
    params = validate_params(data)

    column_clause = ", ".join(columns)
    placeholders = ", ".join(f":{column}" for column in columns)
    sql = f"INSERT INTO {table} ({column_clause}) VALUES ({placeholders})"

    return Statement(sql=sql, params=params)


def build_select(
    table: str,
    columns: Sequence[str] = ("*",),
    conditions: Optional[Mapping[str, Any]] = None,
) -> Statement:
    """
    Build ``SELECT cols FROM table [WHERE col = :col AND ...]``.

    An empty condition mapping selects every row.
    """
    check_identifier(table, "table name")

    if isinstance(columns, str):
        columns = [columns]
    if not columns:
        columns = ["*"]
    for column in columns:
        if column != "*":
            check_identifier(column, "column name")

    sql = f"SELECT {', '.join(columns)} FROM {table}"

    params = {}
    if conditions:
        where_columns = _check_columns(list(conditions))
        params = validate_params(conditions)
        sql += f" WHERE {_where_clause(where_columns)}"

    return Statement(sql=sql, params=params)


def build_update(
    table: str, data: Mapping[str, Any], conditions: Mapping[str, Any]
) -> Statement:
    """
    Build ``UPDATE table SET col = :set_col WHERE col = :where_col``.

    SET and WHERE parameters carry distinct prefixes so the same column may
    appear on both sides.

    Raises:
        ValidationError: If data or conditions are empty
    """
    if not data:
        raise ValidationError("Update data cannot be empty")
    if not conditions:
        raise ValidationError("Update conditions cannot be empty")

    check_identifier(table, "table name")
    set_columns = _check_columns(list(data))
    where_columns = _check_columns(list(conditions))

    set_clause = ", ".join(
        f"{column} = :{SET_PREFIX}{column}" for column in set_columns
    )
    where_clause = _where_clause(where_columns, WHERE_PREFIX)
    sql = f"UPDATE {table} SET {set_clause} WHERE {where_clause}"

    params = {f"{SET_PREFIX}{key}": value for key, value in data.items()}
    params.update(
        {f"{WHERE_PREFIX}{key}": value for key, value in conditions.items()}
    )

    return Statement(sql=sql, params=validate_params(params))


def build_delete(table: str, conditions: Mapping[str, Any]) -> Statement:
    """
    Build ``DELETE FROM table WHERE col = :col AND ...``.

    Raises:
        ValidationError: If conditions are empty
    """
    if not conditions:
        raise ValidationError("Delete conditions cannot be empty")

    check_identifier(table, "table name")
    where_columns = _check_columns(list(conditions))
    params = validate_params(conditions)

    sql = f"DELETE FROM {table} WHERE {_where_clause(where_columns)}"

    return Statement(sql=sql, params=params)
