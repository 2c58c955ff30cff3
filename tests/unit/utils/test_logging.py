"""Unit tests for the structured logging setup.

Covers logger construction, JSON event structure, redaction of credential
fields and context binding.
"""

import json
import logging

import pytest

from gpkg_sqlkit.utils.logging import (
    REDACTED_VALUE,
    bind_context,
    get_logger,
    sanitize_for_logging,
)


def _last_event(caplog: pytest.LogCaptureFixture) -> dict:
    assert len(caplog.records) >= 1
    return json.loads(caplog.records[-1].message)


@pytest.mark.unit
def test_get_logger_returns_bound_logger() -> None:
    """get_logger returns a structlog logger proxy."""
    logger = get_logger("test_module")

    assert hasattr(logger, "bind")
    assert hasattr(logger, "info")
    assert hasattr(logger, "error")


@pytest.mark.unit
def test_json_output_structure(caplog: pytest.LogCaptureFixture) -> None:
    """Events carry timestamp, level, logger and event fields."""
    caplog.set_level(logging.INFO)

    get_logger("sql_test_logger").info("sql.exec", sql="SELECT 1")
    log_data = _last_event(caplog)

    assert log_data["event"] == "sql.exec"
    assert log_data["level"] == "info"
    assert log_data["logger"] == "sql_test_logger"
    assert log_data["sql"] == "SELECT 1"
    assert "T" in log_data["timestamp"]


@pytest.mark.unit
@pytest.mark.parametrize(
    "key",
    ["password", "PASSWORD", "access_token", "api_key", "client_secret", "DATABASE_URL"],
)
def test_sanitize_for_logging_redacts(key: str) -> None:
    sanitized = sanitize_for_logging({key: "value", "user": "admin"})

    assert sanitized[key] == REDACTED_VALUE
    assert sanitized["user"] == "admin"


@pytest.mark.unit
def test_sanitize_for_logging_handles_nested_dicts() -> None:
    data = {"database": "main", "auth": {"password": "secret123"}}
    sanitized = sanitize_for_logging(data)

    assert sanitized["database"] == "main"
    assert sanitized["auth"]["password"] == REDACTED_VALUE


@pytest.mark.unit
def test_sanitize_for_logging_keeps_statement_fields() -> None:
    event = {
        "event": "sql.exec_failed",
        "sql": "UPDATE users SET password = 'x'",
        "error": "no such table: users",
    }

    assert sanitize_for_logging(event) == event


@pytest.mark.unit
def test_sanitization_in_logged_output(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO)

    get_logger("sql_test_logger").info(
        "configuration.loaded", DATABASE_URL="sqlite:///secret.gpkg", echo=False
    )
    log_data = _last_event(caplog)

    assert log_data["DATABASE_URL"] == REDACTED_VALUE
    assert log_data["echo"] is False


@pytest.mark.unit
def test_context_binding_persists(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO)

    logger = bind_context(database="main", layer="roads")
    logger.info("sql.exec", sql="DELETE FROM roads")
    log_data = _last_event(caplog)

    assert log_data["database"] == "main"
    assert log_data["layer"] == "roads"
    assert log_data["event"] == "sql.exec"
