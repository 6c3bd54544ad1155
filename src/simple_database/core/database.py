"""CRUD facade over a single lazily-opened database connection."""

from typing import Any, Mapping, Optional, Sequence

from sqlalchemy.engine import Connection, Result

from simple_database.core.connection import ConnectionState, DatabaseConnection
from simple_database.core.statements import (
    build_delete,
    build_insert,
    build_select,
    build_update,
)
from simple_database.models.config import DatabaseConfig
from simple_database.models.query import Row


class Database:
    """Parameterized CRUD helpers, raw queries and transaction control.

    The connection is opened on first use and reused until ``disconnect()``.
    A single instance is not meant to be shared between threads.
    """

    def __init__(
        self,
        dialect: str,
        host: str = "",
        database: str = "",
        username: str = "",
        password: str = "",
        charset: str = "utf8mb4",
        **options: Any,
    ):
        """
        Initialize the database wrapper. No connection is opened yet.

        Args:
            dialect: Database kind (sqlite, mysql, postgresql)
            host: Database host, empty for sqlite
            database: Database name, or file path / ':memory:' for sqlite
            username: Database username, empty for sqlite
            password: Database password, empty for sqlite
            charset: Connection charset, ignored for sqlite
            **options: Extra DatabaseConfig fields (port, driver, echo_sql)
        """
        config = DatabaseConfig(
            dialect=dialect,
            host=host,
            database=database,
            username=username,
            password=password,
            charset=charset,
            **options,
        )
        self.connection = DatabaseConnection(config)

    @classmethod
    def from_config(cls, config: DatabaseConfig) -> "Database":
        """Create a wrapper from an existing configuration."""
        return cls(**config.model_dump())

    @classmethod
    def from_env(
        cls, prefix: str = "DB_", env_file: Optional[str] = None
    ) -> "Database":
        """Create a wrapper configured from environment variables."""
        return cls.from_config(DatabaseConfig.from_env(prefix, env_file))

    @property
    def config(self) -> DatabaseConfig:
        """Immutable connection configuration."""
        return self.connection.config

    @property
    def state(self) -> ConnectionState:
        """Current connection state."""
        return self.connection.state

    @property
    def is_connected(self) -> bool:
        """Check if a live connection is held."""
        return self.connection.is_connected

    @property
    def in_transaction(self) -> bool:
        """Check if an explicit transaction is open."""
        return self.connection.in_transaction

    # Connection lifecycle

    def connect(self) -> Connection:
        """Open the connection if needed and return it."""
        return self.connection.connect()

    def get_connection(self) -> Connection:
        """Get the active SQLAlchemy connection, opening it if needed."""
        return self.connection.connect()

    def disconnect(self) -> None:
        """Close the connection. The next call reconnects."""
        self.connection.disconnect()

    def __enter__(self) -> "Database":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.disconnect()

    # Statement execution

    def query(self, sql: str, params: Optional[Mapping[str, Any]] = None) -> Result:
        """
        Execute a prepared SQL statement with optional parameters.

        Args:
            sql: SQL text with :name placeholders
            params: Parameters to bind

        Returns:
            The executed result

        Raises:
            QueryError: If the statement fails
        """
        return self.connection.execute(sql, params)

    def fetch(
        self, sql: str, params: Optional[Mapping[str, Any]] = None
    ) -> Optional[Row]:
        """Fetch the first row of a query, or None when it yields no rows."""
        result = self.query(sql, params)
        if not result.returns_rows:
            return None
        row = result.mappings().first()
        return dict(row) if row is not None else None

    def fetch_all(
        self, sql: str, params: Optional[Mapping[str, Any]] = None
    ) -> list[Row]:
        """Fetch all rows of a query in result order; empty when it yields none."""
        result = self.query(sql, params)
        if not result.returns_rows:
            return []
        return [dict(row) for row in result.mappings().all()]

    # CRUD helpers

    def insert(self, table: str, data: Mapping[str, Any]) -> str:
        """
        Insert a record and return the last inserted id.

        Args:
            table: Table name
            data: Column names and values

        Returns:
            The last inserted id, as a string

        Raises:
            ValidationError: If data is empty
            QueryError: If the insert fails
        """
        statement = build_insert(table, data)
        result = self.query(statement.sql, statement.params)

        adapter = self.connection.adapter
        id_query = adapter.last_insert_id_query()
        if id_query is not None:
            return str(self.query(id_query).scalar())
        return adapter.last_insert_id(result)

    def select(
        self,
        table: str,
        columns: Sequence[str] = ("*",),
        conditions: Optional[Mapping[str, Any]] = None,
    ) -> list[Row]:
        """
        Select records from a table.

        Args:
            table: Table name
            columns: Column names to select
            conditions: Equality conditions joined with AND; empty selects all

        Returns:
            The selected records
        """
        statement = build_select(table, columns, conditions)
        return self.fetch_all(statement.sql, statement.params)

    def update(
        self, table: str, data: Mapping[str, Any], conditions: Mapping[str, Any]
    ) -> int:
        """
        Update records matching the conditions.

        Args:
            table: Table name
            data: Column names and new values
            conditions: Equality conditions joined with AND

        Returns:
            Number of affected rows

        Raises:
            ValidationError: If data or conditions are empty
            QueryError: If the update fails
        """
        statement = build_update(table, data, conditions)
        return self.query(statement.sql, statement.params).rowcount

    def delete(self, table: str, conditions: Mapping[str, Any]) -> int:
        """
        Delete records matching the conditions.

        Raises:
            ValidationError: If conditions are empty
            QueryError: If the delete fails
        """
        statement = build_delete(table, conditions)
        return self.query(statement.sql, statement.params).rowcount

    # Transactions

    def begin_transaction(self) -> None:
        """Start a transaction. Nested transactions are not supported."""
        self.connection.begin()

    def commit(self) -> None:
        """Commit the current transaction."""
        self.connection.commit()

    def rollback(self) -> None:
        """Roll back the current transaction."""
        self.connection.rollback()
