"""Database configuration model."""

import logging
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator


logger = logging.getLogger(__name__)

SQLITE_MEMORY = ":memory:"

# Map common dialect variations to standard names
DIALECT_VARIATIONS = {
    # SQLite variations
    "sqlite": "sqlite",
    "sqlite3": "sqlite",
    # PostgreSQL variations
    "postgresql": "postgresql",
    "postgres": "postgresql",
    "psql": "postgresql",
    "pg": "postgresql",
    "pgsql": "postgresql",
    # MySQL variations
    "mysql": "mysql",
    "mariadb": "mysql",  # MariaDB is MySQL-compatible
    "maria": "mysql",
}

FILE_BASED_DIALECTS = {"sqlite"}


class DatabaseConfig(BaseModel):
    """Immutable connection settings for a single database."""

    dialect: str = Field(
        ...,
        description="Database kind (sqlite, mysql, postgresql)",
    )
    host: str = Field(
        default="",
        description="Database host; ignored for sqlite",
    )
    database: str = Field(
        default="",
        description="Database name, or file path / ':memory:' for sqlite",
    )
    username: str = Field(
        default="",
        description="Database username; ignored for sqlite",
    )
    password: str = Field(
        default="",
        repr=False,
        description="Database password; ignored for sqlite",
    )
    charset: str = Field(
        default="utf8mb4",
        description="Connection character set; ignored for sqlite",
    )
    port: Optional[int] = Field(
        default=None,
        ge=1,
        le=65535,
        description="Database port; driver default when unset",
    )
    driver: Optional[str] = Field(
        default=None,
        description="DBAPI driver override (e.g. mysqlconnector, psycopg2)",
    )
    echo_sql: bool = Field(
        default=False,
        description="Echo SQL statements through SQLAlchemy's logger",
    )

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "dialect": "mysql",
                    "host": "localhost",
                    "database": "testdb",
                    "username": "root",
                    "password": "",
                    "charset": "utf8mb4",
                },
                {"dialect": "sqlite", "database": ":memory:"},
            ]
        },
    }

    @field_validator("dialect")
    @classmethod
    def validate_dialect(cls, v: str) -> str:
        """Normalize dialect aliases and reject unsupported engines."""
        original = v.strip().lower()
        dialect = DIALECT_VARIATIONS.get(original)

        if not dialect:
            raise ValueError(
                f"Unsupported database dialect: '{v}'. "
                f"Supported: {', '.join(sorted(DIALECT_VARIATIONS))}"
            )

        if original != dialect:
            logger.info(
                f"Normalized database dialect from '{original}' to '{dialect}'"
            )
        return dialect

    @field_validator("driver")
    @classmethod
    def validate_driver(cls, v: Optional[str]) -> Optional[str]:
        """Treat a blank driver as unset."""
        if v is None:
            return None
        v = v.strip()
        return v or None

    @property
    def is_file_based(self) -> bool:
        """Whether the database is a local file or in-memory engine."""
        return self.dialect in FILE_BASED_DIALECTS

    @property
    def is_memory(self) -> bool:
        """Whether this configures a throwaway in-memory sqlite database."""
        return self.is_file_based and self.database in ("", SQLITE_MEMORY)

    @classmethod
    def from_env(
        cls, prefix: str = "DB_", env_file: Optional[str] = None
    ) -> "DatabaseConfig":
        """
        Build a configuration from environment variables.

        A ``.env`` file is loaded first (without overriding variables that
        are already set). Variables read, with their defaults:

        - ``{prefix}TYPE``: ``mysql``
        - ``{prefix}HOST``: ``localhost``
        - ``{prefix}NAME``: ``testdb``
        - ``{prefix}USER``: ``root``
        - ``{prefix}PASS``: empty
        - ``{prefix}CHARSET``: ``utf8mb4``
        - ``{prefix}PORT`` and ``{prefix}DRIVER``: unset

        Args:
            prefix: Environment variable prefix
            env_file: Explicit path to a dotenv file

        Returns:
            Database configuration
        """
        load_dotenv(env_file)

        port = os.getenv(f"{prefix}PORT")
        return cls(
            dialect=os.getenv(f"{prefix}TYPE", "mysql"),
            host=os.getenv(f"{prefix}HOST", "localhost"),
            database=os.getenv(f"{prefix}NAME", "testdb"),
            username=os.getenv(f"{prefix}USER", "root"),
            password=os.getenv(f"{prefix}PASS", ""),
            charset=os.getenv(f"{prefix}CHARSET", "utf8mb4"),
            port=int(port) if port else None,
            driver=os.getenv(f"{prefix}DRIVER"),
        )
