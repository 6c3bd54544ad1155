"""Error taxonomy for database operations."""

from typing import Optional


class DatabaseError(Exception):
    """Base class for all errors raised by simple_database."""

    def __init__(self, message: str, code: int = 0, sql: Optional[str] = None):
        """
        Initialize the error.

        Args:
            message: Human-readable error message
            code: Driver error code, or a generic failure code
            sql: SQL text involved in the failure, if any
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.sql = sql


class DatabaseConnectionError(DatabaseError):
    """Raised when a connection to the database cannot be established."""


class QueryError(DatabaseError):
    """Raised when a statement fails to prepare or execute."""


class ValidationError(DatabaseError):
    """Raised when caller input is rejected before any I/O is attempted."""


class TransactionError(DatabaseError):
    """Raised when beginning, committing or rolling back a transaction fails."""


def driver_error_code(exc: BaseException) -> int:
    """
    Extract a numeric error code from a driver exception.

    DBAPI drivers such as PyMySQL put the server error number in the first
    argument of the original exception; SQLAlchemy wraps that in ``orig``.

    Args:
        exc: Exception raised by SQLAlchemy or the DBAPI driver

    Returns:
        Driver error code, or 0 when none is available
    """
    orig = getattr(exc, "orig", None) or exc
    args = getattr(orig, "args", ())
    if args and isinstance(args[0], int) and not isinstance(args[0], bool):
        return args[0]
    return 0


def driver_error_message(exc: BaseException) -> str:
    """Return the driver's own message, without SQLAlchemy's statement echo."""
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)
