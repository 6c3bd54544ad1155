"""JSON serialization of result rows using orjson.

orjson handles datetime, date, time, UUID and dataclasses natively. Driver
types it does not know (Decimal from MySQL/PostgreSQL numerics, bytes from
BLOB/bytea columns) go through ``_default_handler``.
"""

import base64
import datetime
import decimal
from typing import Any, Iterable, Mapping

import orjson


def _default_handler(obj: Any) -> Any:
    """
    Custom default handler for types orjson doesn't handle natively.

    Args:
        obj: Object to serialize

    Returns:
        JSON-serializable representation

    Raises:
        TypeError: If object cannot be serialized
    """
    # Decimal - keep integers exact, otherwise a string preserves precision
    if isinstance(obj, decimal.Decimal):
        if obj == obj.to_integral_value():
            return int(obj)
        return str(obj)

    # timedelta - convert to total seconds (MySQL TIME columns)
    if isinstance(obj, datetime.timedelta):
        return obj.total_seconds()

    # bytes/bytearray/memoryview - try UTF-8 decode, fall back to base64
    if isinstance(obj, (bytes, bytearray, memoryview)):
        data = bytes(obj)
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError:
            return base64.b64encode(data).decode("ascii")

    raise TypeError(f"Type is not JSON serializable: {type(obj).__name__}")


def row_to_json(row: Mapping[str, Any], indent: bool = False) -> str:
    """
    Serialize a single row to a JSON string.

    Args:
        row: Row mapping
        indent: Pretty-print with two-space indentation

    Returns:
        JSON text
    """
    option = orjson.OPT_INDENT_2 if indent else 0
    return orjson.dumps(dict(row), default=_default_handler, option=option).decode()


def rows_to_json(rows: Iterable[Mapping[str, Any]], indent: bool = False) -> str:
    """Serialize a sequence of rows to a JSON array string."""
    option = orjson.OPT_INDENT_2 if indent else 0
    return orjson.dumps(
        [dict(row) for row in rows], default=_default_handler, option=option
    ).decode()
