"""Pytest configuration and shared database fixtures.

All engine-backed tests run against a private in-memory SQLite database so
no external service is needed.
"""

from __future__ import annotations

import os
from typing import Generator

import pytest
from sqlalchemy import Connection, create_engine

# Keep test runs independent of any developer .env / shell configuration.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.pop("GPKG_DEBUG_VERBOSE", None)

from gpkg_sqlkit.config import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_settings_cache() -> Generator[None, None, None]:
    """Ensure each test sees settings built from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sqlite_connection() -> Generator[Connection, None, None]:
    """Yield a connection to a fresh in-memory SQLite database."""
    engine = create_engine("sqlite://")
    with engine.connect() as conn:
        yield conn
    engine.dispose()


@pytest.fixture
def layer_table(sqlite_connection: Connection) -> Connection:
    """Connection with a small populated ``roads`` table."""
    sqlite_connection.exec_driver_sql(
        "CREATE TABLE roads (fid INTEGER PRIMARY KEY, name TEXT, length REAL, data BLOB)"
    )
    sqlite_connection.exec_driver_sql(
        "INSERT INTO roads (fid, name, length, data) VALUES "
        "(1, 'Main St', 12.5, NULL), "
        "(2, 'O''Connell', 3.0, X'6869'), "
        "(3, NULL, NULL, NULL)"
    )
    return sqlite_connection
