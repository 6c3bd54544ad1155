"""
simple_database - a thin SQLAlchemy wrapper for parameterized CRUD

Builds injection-resistant INSERT/SELECT/UPDATE/DELETE statements from plain
mappings, runs raw parameterized queries, and exposes explicit transaction
control over a single lazily-opened connection to SQLite, MySQL or
PostgreSQL.
"""

__version__ = "1.0.0"

from .core import ConnectionState, Database, DatabaseConnection
from .exceptions import (
    DatabaseConnectionError,
    DatabaseError,
    QueryError,
    TransactionError,
    ValidationError,
)
from .models import DatabaseConfig, Statement

__all__ = [
    "Database",
    "DatabaseConfig",
    "DatabaseConnection",
    "ConnectionState",
    "Statement",
    "DatabaseError",
    "DatabaseConnectionError",
    "QueryError",
    "ValidationError",
    "TransactionError",
]
