"""Pytest configuration and shared fixtures for database tests"""

import os
from typing import Generator, Optional

import pytest
from dotenv import load_dotenv

from simple_database import Database, DatabaseConfig

# Load environment variables
load_dotenv()

USERS_TABLE = """
CREATE TABLE users (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    age INTEGER NOT NULL
)
"""


# ==================== SQLite Fixtures ====================


@pytest.fixture
def sqlite_config() -> DatabaseConfig:
    """In-memory SQLite configuration"""
    return DatabaseConfig(dialect="sqlite", database=":memory:")


@pytest.fixture
def db(sqlite_config: DatabaseConfig) -> Generator[Database, None, None]:
    """In-memory SQLite database with a users table"""
    database = Database.from_config(sqlite_config)
    database.query(USERS_TABLE)
    try:
        yield database
    finally:
        database.disconnect()


@pytest.fixture
def file_db(tmp_path) -> Generator[Database, None, None]:
    """File-backed SQLite database with a users table"""
    database = Database("sqlite", database=str(tmp_path / "test.db"))
    database.query(USERS_TABLE)
    try:
        yield database
    finally:
        database.disconnect()


# ==================== Server Database Fixtures ====================


def _env_config(prefix: str, dialect: str) -> Optional[DatabaseConfig]:
    if not os.getenv(f"{prefix}HOST"):
        return None
    config = DatabaseConfig.from_env(prefix=prefix)
    if not os.getenv(f"{prefix}TYPE"):
        config = config.model_copy(update={"dialect": dialect})
    return config


@pytest.fixture(
    params=[
        pytest.param("mysql", marks=pytest.mark.mysql),
        pytest.param("postgresql", marks=pytest.mark.postgresql),
    ]
)
def server_db(request) -> Generator[Database, None, None]:
    """Parametrized MySQL/PostgreSQL database with a fresh users table"""
    prefixes = {"mysql": "MYSQL_TEST_DB_", "postgresql": "PG_TEST_DB_"}
    config = _env_config(prefixes[request.param], request.param)
    if config is None:
        pytest.skip(f"{prefixes[request.param]}HOST not set in environment")

    id_column = {
        "mysql": "id INTEGER PRIMARY KEY AUTO_INCREMENT",
        "postgresql": "id SERIAL PRIMARY KEY",
    }[config.dialect]

    database = Database.from_config(config)
    database.query("DROP TABLE IF EXISTS users")
    database.query(
        f"CREATE TABLE users ({id_column}, "
        "name VARCHAR(255) NOT NULL, age INTEGER NOT NULL)"
    )
    try:
        yield database
    finally:
        database.query("DROP TABLE IF EXISTS users")
        database.disconnect()


# ==================== Pytest Configuration ====================


def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "mysql: MySQL-specific tests")
    config.addinivalue_line("markers", "postgresql: PostgreSQL-specific tests")
    config.addinivalue_line(
        "markers", "integration: Integration tests requiring a database server"
    )
