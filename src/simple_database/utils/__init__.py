"""Utility modules for simple_database."""

from simple_database.utils.serialization import row_to_json, rows_to_json

__all__ = [
    "row_to_json",
    "rows_to_json",
]
