"""PostgreSQL adapter."""

from typing import Optional

from sqlalchemy.engine import URL

from simple_database.adapters.base import BaseAdapter
from simple_database.models.config import DatabaseConfig

# MySQL charset names that PostgreSQL spells differently
CHARSET_TO_ENCODING = {
    "utf8mb4": "utf8",
    "utf8mb3": "utf8",
    "latin1": "latin1",
}


class PostgresAdapter(BaseAdapter):
    """PostgreSQL adapter using psycopg (v3) by default."""

    dialect = "postgresql"
    default_driver = "psycopg"

    def build_url(self, config: DatabaseConfig) -> URL:
        query = {}
        encoding = self.client_encoding(config.charset)
        if encoding:
            query["client_encoding"] = encoding

        return URL.create(
            self.drivername(config),
            username=config.username or None,
            password=config.password or None,
            host=config.host or None,
            port=config.port,
            database=config.database or None,
            query=query,
        )

    @staticmethod
    def client_encoding(charset: str) -> Optional[str]:
        """Translate a charset name to a PostgreSQL client encoding."""
        if not charset:
            return None
        return CHARSET_TO_ENCODING.get(charset.lower(), charset)

    def last_insert_id_query(self) -> Optional[str]:
        # lastval() reports the most recent sequence value of this session
        return "SELECT lastval()"
