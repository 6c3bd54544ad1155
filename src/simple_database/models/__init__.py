"""Pydantic models for configuration and statements."""

from .config import DatabaseConfig
from .query import Params, Row, Scalar, Statement, validate_params

__all__ = [
    "DatabaseConfig",
    "Statement",
    "Params",
    "Row",
    "Scalar",
    "validate_params",
]
