"""MySQL / MariaDB adapter."""

from sqlalchemy.engine import URL

from simple_database.adapters.base import BaseAdapter
from simple_database.models.config import DatabaseConfig


class MySQLAdapter(BaseAdapter):
    """MySQL adapter using PyMySQL by default."""

    dialect = "mysql"
    default_driver = "pymysql"

    def build_url(self, config: DatabaseConfig) -> URL:
        query = {"charset": config.charset} if config.charset else {}
        return URL.create(
            self.drivername(config),
            username=config.username or None,
            password=config.password or None,
            host=config.host or None,
            port=config.port,
            database=config.database or None,
            query=query,
        )
