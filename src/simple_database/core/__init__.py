"""Core database operations layer."""

from .connection import ConnectionState, DatabaseConnection
from .database import Database
from .statements import build_delete, build_insert, build_select, build_update

__all__ = [
    "ConnectionState",
    "Database",
    "DatabaseConnection",
    "build_insert",
    "build_select",
    "build_update",
    "build_delete",
]
