"""SQLite adapter for file-based and in-memory databases."""

from typing import Any

from sqlalchemy.engine import URL

from simple_database.adapters.base import BaseAdapter
from simple_database.models.config import DatabaseConfig


class SQLiteAdapter(BaseAdapter):
    """SQLite adapter.

    The database value is a file path, or ``:memory:`` for an in-memory
    database. Host, credentials and charset do not apply.
    """

    dialect = "sqlite"
    default_driver = "pysqlite"

    def build_url(self, config: DatabaseConfig) -> URL:
        database = None if config.is_memory else config.database
        return URL.create(self.drivername(config), database=database)

    def engine_options(self, config: DatabaseConfig) -> dict[str, Any]:
        # Callers serialize access to the single owned connection
        return {"connect_args": {"check_same_thread": False}}
