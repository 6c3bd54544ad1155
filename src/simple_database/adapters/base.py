"""Base adapter abstract class for database-specific behaviour."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from sqlalchemy.engine import URL, CursorResult

from simple_database.models.config import DatabaseConfig


class BaseAdapter(ABC):
    """Base adapter defining the per-engine connection details."""

    #: SQLAlchemy dialect name
    dialect: str = ""

    #: DBAPI driver used when the configuration does not name one
    default_driver: Optional[str] = None

    @abstractmethod
    def build_url(self, config: DatabaseConfig) -> URL:
        """
        Build the connection URL (DSN) for this engine.

        Args:
            config: Database configuration

        Returns:
            SQLAlchemy URL
        """
        ...

    def drivername(self, config: DatabaseConfig) -> str:
        """Compose ``dialect+driver`` for the URL."""
        driver = config.driver or self.default_driver
        if driver:
            return f"{self.dialect}+{driver}"
        return self.dialect

    def engine_options(self, config: DatabaseConfig) -> dict[str, Any]:
        """Extra keyword arguments for ``create_engine``."""
        return {}

    def last_insert_id_query(self) -> Optional[str]:
        """
        SQL returning the id generated by the last insert on this session.

        Returns:
            A query, or None when the cursor's ``lastrowid`` is reliable
        """
        return None

    def last_insert_id(self, result: CursorResult) -> str:
        """Read the last inserted id from an executed INSERT."""
        lastrowid = result.lastrowid
        return str(lastrowid) if lastrowid is not None else "0"
