"""Database adapters for specific database engines."""

from .base import BaseAdapter
from .mysql import MySQLAdapter
from .postgresql import PostgresAdapter
from .sqlite import SQLiteAdapter
from ..models.config import DatabaseConfig

__all__ = [
    "BaseAdapter",
    "SQLiteAdapter",
    "MySQLAdapter",
    "PostgresAdapter",
    "create_adapter",
]


def create_adapter(config: DatabaseConfig) -> BaseAdapter:
    """
    Factory function to create the appropriate database adapter.

    Args:
        config: Database configuration

    Returns:
        Database adapter instance

    Raises:
        ValueError: If database type is not supported
    """
    dialect = config.dialect

    adapters = {
        "sqlite": SQLiteAdapter,
        "mysql": MySQLAdapter,
        "postgresql": PostgresAdapter,
    }

    adapter_class = adapters.get(dialect)

    if adapter_class is None:
        raise ValueError(
            f"Unsupported database dialect: {dialect}. "
            f"Supported dialects: {', '.join(adapters.keys())}"
        )

    return adapter_class()
