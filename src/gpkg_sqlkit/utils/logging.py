"""JSON event logging for gpkg-sqlkit.

Every module logs through ``get_logger(__name__)``. Events are named
``sql.<action>`` (``sql.exec_failed``, ``sql.get_table_failed``,
``sql.prepare_failed``, and the DEBUG traces ``sql.exec``,
``sql.get_table`` and ``sql.get`` emitted when ``GPKG_DEBUG_VERBOSE`` is
on) and carry the statement text as ``sql`` plus the engine message as
``error``. Each record is one JSON object on stdout.

``DATABASE_URL`` holds the local path of the GeoPackage file, which is
kept out of shared logs; it and password/token-like fields are replaced
with ``[REDACTED]`` before rendering.

Environment:
- LOG_LEVEL (read through gpkg_sqlkit.config.settings), default INFO
- LOG_TO_FILE=1|true|yes also writes to a daily rotating file
- LOG_FILE_DIR sets the directory of that file, default logs/

Usage:
    >>> from gpkg_sqlkit.utils.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("sql.exec", sql="CREATE TABLE t (a INTEGER)")
"""

import logging
import os
import re
from datetime import datetime
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any, Dict, MutableMapping

import structlog
from pydantic import ValidationError
from structlog.types import EventDict, Processor

from gpkg_sqlkit.config import get_settings

SENSITIVE_PATTERNS = [
    re.compile(r".*password.*", re.IGNORECASE),
    re.compile(r".*token.*", re.IGNORECASE),
    re.compile(r".*api_key.*", re.IGNORECASE),
    re.compile(r".*secret.*", re.IGNORECASE),
    re.compile(r"^DATABASE_URL$", re.IGNORECASE),
]

REDACTED_VALUE = "[REDACTED]"


def sanitize_for_logging(data: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of an event dict with credential fields redacted.

    Nested dicts (bound context such as connection options) are walked too;
    the statement text under ``sql`` is kept as is.

    Example:
        >>> sanitize_for_logging({"password": "secret123", "user": "admin"})
        {'password': '[REDACTED]', 'user': 'admin'}
    """
    sanitized: Dict[str, Any] = {}
    for key, value in data.items():
        if any(pattern.match(key) for pattern in SENSITIVE_PATTERNS):
            sanitized[key] = REDACTED_VALUE
        elif isinstance(value, dict):
            sanitized[key] = sanitize_for_logging(value)
        else:
            sanitized[key] = value
    return sanitized


def sanitization_processor(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> MutableMapping[str, Any]:
    """Redact credential fields of every event before it is rendered."""
    return sanitize_for_logging(dict(event_dict))


def _get_log_level() -> int:
    """Resolve the log level from settings, falling back to LOG_LEVEL."""
    try:
        level_name = get_settings().LOG_LEVEL.upper()
    except ValidationError:
        # Invalid configuration must not prevent logging from starting
        level_name = os.getenv("LOG_LEVEL", "INFO").upper()

    return getattr(logging, level_name, logging.INFO)


def _should_log_to_file() -> bool:
    """Check if file logging is enabled via environment."""
    log_to_file = os.getenv("LOG_TO_FILE", "").lower()
    return log_to_file in ("1", "true", "yes")


def _get_log_file_path() -> Path:
    """Get the log file path with date-based naming."""
    log_dir = Path(os.getenv("LOG_FILE_DIR", "logs"))
    log_dir.mkdir(parents=True, exist_ok=True)

    # Format: gpkg-sqlkit-YYYYMMDD.log
    date_str = datetime.now().strftime("%Y%m%d")
    return log_dir / f"gpkg-sqlkit-{date_str}.log"


def _configure_structlog() -> None:
    """Configure stdlib handlers and the structlog processor chain."""
    level = _get_log_level()
    logging.basicConfig(format="%(message)s", level=level, handlers=[])

    stdout_handler = logging.StreamHandler()
    stdout_handler.setLevel(level)
    logging.root.addHandler(stdout_handler)

    if _should_log_to_file():
        file_handler = TimedRotatingFileHandler(
            filename=str(_get_log_file_path()),
            when="midnight",
            interval=1,
            backupCount=30,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        logging.root.addHandler(file_handler)

    processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        sanitization_processor,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


# Configure structlog on module import
_configure_structlog()


def get_logger(name: str) -> Any:
    """Return the structlog logger for a gpkg_sqlkit module."""
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> Any:
    """Return a logger whose events all carry the given fields.

    Useful to tag every statement of one layer rebuild with the layer name.

    Example:
        >>> logger = bind_context(database="main", layer="roads")
        >>> logger.info("sql.exec", sql="DELETE FROM roads")
    """
    return structlog.get_logger().bind(**kwargs)
