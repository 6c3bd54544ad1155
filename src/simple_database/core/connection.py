"""Database connection management with SQLAlchemy."""

import enum
import logging
from typing import Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Connection, Engine, Result, RootTransaction
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import NullPool

from simple_database.adapters import BaseAdapter, create_adapter
from simple_database.exceptions import (
    DatabaseConnectionError,
    QueryError,
    TransactionError,
    driver_error_code,
    driver_error_message,
)
from simple_database.models.config import DatabaseConfig
from simple_database.models.query import Params, validate_params

logger = logging.getLogger(__name__)

QUERY_ERROR_CODE = 500


class ConnectionState(enum.Enum):
    """Lifecycle state of the owned connection."""

    DISCONNECTED = "disconnected"
    CONNECTED = "connected"


class DatabaseConnection:
    """Owns at most one live SQLAlchemy connection, opened on first use."""

    def __init__(
        self, config: DatabaseConfig, adapter: Optional[BaseAdapter] = None
    ):
        """
        Initialize database connection.

        Args:
            config: Database configuration
            adapter: Database-specific adapter; derived from the config if omitted
        """
        self.config = config
        self.adapter = adapter or create_adapter(config)
        self.engine: Optional[Engine] = None
        self._conn: Optional[Connection] = None
        self._transaction: Optional[RootTransaction] = None

    @property
    def state(self) -> ConnectionState:
        """Current connection state."""
        if self._conn is None:
            return ConnectionState.DISCONNECTED
        return ConnectionState.CONNECTED

    @property
    def is_connected(self) -> bool:
        """Check if a live connection is held."""
        return self._conn is not None

    @property
    def in_transaction(self) -> bool:
        """Check if an explicit transaction is open."""
        return self._transaction is not None

    @property
    def dialect(self) -> str:
        """Get database dialect name."""
        return self.config.dialect

    def connect(self) -> Connection:
        """
        Return the live connection, establishing it if needed.

        Returns:
            SQLAlchemy connection

        Raises:
            DatabaseConnectionError: If the connection cannot be opened
        """
        if self._conn is not None:
            return self._conn

        url = self.adapter.build_url(self.config)
        safe_url = url.render_as_string(hide_password=True)

        try:
            self.engine = create_engine(
                url,
                poolclass=NullPool,
                echo=self.config.echo_sql,
                **self.adapter.engine_options(self.config),
            )
            self._conn = self.engine.connect()
        except (SQLAlchemyError, ImportError) as e:
            self._dispose_engine()
            logger.error(f"Failed to connect to {safe_url}: {e}")
            raise DatabaseConnectionError(
                f"Failed to connect to database: {driver_error_message(e)}",
                driver_error_code(e),
            ) from e

        logger.info(f"Connected to {safe_url}")
        return self._conn

    def disconnect(self) -> None:
        """Close the connection and engine; no-op when already disconnected."""
        if self._conn is None and self.engine is None:
            return

        conn, self._conn = self._conn, None
        self._transaction = None
        try:
            if conn is not None:
                conn.close()
        finally:
            self._dispose_engine()
        logger.info(f"Disconnected from {self.dialect} database")

    def _dispose_engine(self) -> None:
        if self.engine is not None:
            self.engine.dispose()
            self.engine = None

    def execute(self, sql: str, params: Optional[Params] = None) -> Result:
        """
        Prepare and execute a parameterized statement.

        Outside an explicit transaction each statement is committed on
        success and rolled back on failure. Row-returning results are
        buffered so they stay readable after that commit.

        Args:
            sql: SQL text with :name placeholders
            params: Bind parameter values

        Returns:
            Executed result

        Raises:
            ValidationError: If a parameter value has an unsupported type
            DatabaseConnectionError: If the connection cannot be opened
            QueryError: If preparation or execution fails
        """
        bound = validate_params(params)
        conn = self.connect()

        logger.debug(f"Executing: {sql}")
        try:
            result = conn.execute(
                text(sql), bound, execution_options={"preserve_rowcount": True}
            )
            if result.returns_rows:
                result = result.freeze()()
            if self._transaction is None:
                conn.commit()
        except SQLAlchemyError as e:
            if self._transaction is None and conn.in_transaction():
                conn.rollback()
            logger.error(f"Query failed: {driver_error_message(e)}")
            raise QueryError(
                f"Query execution failed: {driver_error_message(e)}. SQL: {sql}",
                QUERY_ERROR_CODE,
                sql,
            ) from e

        return result

    def begin(self) -> None:
        """
        Start an explicit transaction.

        Raises:
            TransactionError: If a transaction is already open or the driver fails
        """
        conn = self.connect()
        if self._transaction is not None:
            raise TransactionError(
                "Failed to start transaction: There is already an active transaction"
            )

        try:
            if conn.in_transaction():
                # Work done directly on the connection autobegan; settle it
                conn.commit()
            self._transaction = conn.begin()
        except SQLAlchemyError as e:
            raise TransactionError(
                f"Failed to start transaction: {driver_error_message(e)}",
                driver_error_code(e),
            ) from e
        logger.debug("Transaction started")

    def commit(self) -> None:
        """
        Commit the open transaction.

        Raises:
            TransactionError: If no transaction is open or the driver fails
        """
        self.connect()
        if self._transaction is None:
            raise TransactionError(
                "Failed to commit transaction: There is no active transaction"
            )

        transaction, self._transaction = self._transaction, None
        try:
            transaction.commit()
        except SQLAlchemyError as e:
            raise TransactionError(
                f"Failed to commit transaction: {driver_error_message(e)}",
                driver_error_code(e),
            ) from e
        logger.debug("Transaction committed")

    def rollback(self) -> None:
        """
        Roll back the open transaction.

        Raises:
            TransactionError: If no transaction is open or the driver fails
        """
        self.connect()
        if self._transaction is None:
            raise TransactionError(
                "Failed to roll back transaction: There is no active transaction"
            )

        transaction, self._transaction = self._transaction, None
        try:
            transaction.rollback()
        except SQLAlchemyError as e:
            raise TransactionError(
                f"Failed to roll back transaction: {driver_error_message(e)}",
                driver_error_code(e),
            ) from e
        logger.debug("Transaction rolled back")
