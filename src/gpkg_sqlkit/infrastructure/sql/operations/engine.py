"""
SQL engine wrappers.

Thin adapters from a SQLAlchemy ``Connection`` to the three engine
capabilities the rest of the package relies on:

- ``sql_command``: run statements that return no rows
- ``sql_query``: run statements and capture their rows as a ResultTable
- ``sql_get_integer``: fetch the first column of the first row as an integer

Engine errors never propagate as exceptions from these functions. They are
logged and returned as ``SQLStatus.FAILURE`` together with the driver's own
message. The caller owns the connection and its transaction.

Example:
    >>> engine = create_sql_engine()
    >>> with engine.connect() as conn:
    ...     sql_command(conn, "CREATE TABLE t (a INTEGER)")
    ...     with sql_query(conn, "SELECT a FROM t") as table:
    ...         print(table.column_names)
"""

import math
from typing import Any, Optional, Protocol

from sqlalchemy import Connection, Engine, create_engine
from sqlalchemy.exc import DBAPIError, SQLAlchemyError

from gpkg_sqlkit.config.settings import Settings, get_settings
from gpkg_sqlkit.utils.logging import get_logger

from ..core.result_table import CellValue, ResultTable, parse_integer_prefix
from ..core.status import ScalarResult, SQLStatus, StatementResult
from .statements import split_statements

logger = get_logger(__name__)

INT64_MAX = 2**63 - 1
INT64_MIN = -(2**63)
INCOMPATIBLE_QUERIES = "sqlite3_get_table() called with two or more incompatible queries"


class SQLEngine(Protocol):
    """Capabilities required from the database engine."""

    def execute(self, connection: Connection, sql: str) -> StatementResult: ...
    def query_table(self, connection: Connection, sql: str) -> ResultTable: ...
    def query_scalar_integer(self, connection: Connection, sql: str) -> ScalarResult: ...


def create_sql_engine(settings: Optional[Settings] = None) -> Engine:
    """
    Create a SQLAlchemy engine for the configured database.

    Args:
        settings: Settings to use, defaults to get_settings()
    """
    settings = settings or get_settings()
    return create_engine(
        settings.get_database_connection_string(), echo=settings.sql_echo
    )


def _engine_message(exc: SQLAlchemyError) -> str:
    """Return the driver-supplied message of an engine error."""
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return str(exc.orig)
    return str(exc)


def _trace(event: str, sql: str) -> None:
    if get_settings().debug_verbose:
        logger.debug(event, sql=sql)


def _format_real(value: float) -> str:
    """Render a float with 15 significant digits, always marked as real."""
    if math.isinf(value):
        return "Inf" if value > 0 else "-Inf"
    text = "%.15g" % value
    if "." in text or "n" in text:
        return text
    mantissa, sep, exponent = text.partition("e")
    return f"{mantissa}.0{sep}{exponent}"


def cell_text(value: Any) -> CellValue:
    """
    Convert a driver value to cell text.

    Examples:
        >>> cell_text(3)
        '3'
        >>> cell_text(2.0)
        '2.0'
        >>> cell_text(None) is None
        True
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_real(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)


def column_integer(value: Any) -> int:
    """Convert a driver value to a 64-bit integer the way SQLite does."""
    if value is None:
        return 0
    if isinstance(value, int):
        return int(value)
    if isinstance(value, float):
        if math.isnan(value):
            return 0
        if value >= INT64_MAX:
            return INT64_MAX
        if value <= INT64_MIN:
            return INT64_MIN
        return int(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        value = bytes(value).decode("utf-8", errors="replace")
    return parse_integer_prefix(str(value))


def sql_command(connection: Connection, sql: str) -> StatementResult:
    """
    Run one or more statements and ignore any rows (INSERT/UPDATE/CREATE ...).

    Statements run in order; the first failing statement stops the run.
    Statements that already ran stay in the caller's transaction.

    Args:
        connection: SQLAlchemy connection owned by the caller
        sql: Statement text, possibly several statements separated by ``;``

    Returns:
        StatementResult with the engine message on failure
    """
    _trace("sql.exec", sql)
    for statement in split_statements(sql):
        try:
            connection.exec_driver_sql(statement).close()
        except SQLAlchemyError as exc:
            message = _engine_message(exc)
            logger.error("sql.exec_failed", sql=statement, error=message)
            return StatementResult(status=SQLStatus.FAILURE, message=message)
    return StatementResult()


def sql_query(connection: Connection, sql: str) -> ResultTable:
    """
    Run one or more statements and capture their rows as a ResultTable.

    All values are converted to text; NULL stays None. Rows of every
    statement are appended to one table, and the header comes from the
    first statement that produced a row. When no statement produces a row
    the table has zero columns and zero rows. On failure the table is
    populated with SQLStatus.FAILURE, zero counts and the engine message.

    Args:
        connection: SQLAlchemy connection owned by the caller
        sql: Statement text, possibly several statements separated by ``;``

    Returns:
        Populated ResultTable, owned by the caller
    """
    table = ResultTable()
    _trace("sql.get_table", sql)

    columns: list[str] = []
    cells: list[CellValue] = []
    row_count = 0
    for statement in split_statements(sql):
        try:
            result = connection.exec_driver_sql(statement)
            try:
                if result.returns_rows:
                    keys = list(result.keys())
                    rows = result.fetchall()
                else:
                    keys, rows = [], []
            finally:
                result.close()
        except SQLAlchemyError as exc:
            message = _engine_message(exc)
            logger.error("sql.get_table_failed", sql=statement, error=message)
            table.populate(0, 0, [], status=SQLStatus.FAILURE, error=message)
            return table

        if not rows:
            continue
        if not columns:
            columns = keys
            cells.extend(keys)
        elif len(keys) != len(columns):
            logger.error("sql.get_table_failed", sql=statement, error=INCOMPATIBLE_QUERIES)
            table.populate(0, 0, [], status=SQLStatus.FAILURE, error=INCOMPATIBLE_QUERIES)
            return table
        for row in rows:
            cells.extend(cell_text(value) for value in row)
        row_count += len(rows)

    table.populate(len(columns), row_count, cells)
    return table


def sql_get_integer(connection: Connection, sql: str) -> ScalarResult:
    """
    Return the first column of the first row as an integer.

    Only the first statement of the text is run.

    Args:
        connection: SQLAlchemy connection owned by the caller
        sql: Statement text, expected to produce at least one row

    Returns:
        ScalarResult; FAILURE with value 0 when the statement fails or
        produces no rows
    """
    _trace("sql.get", sql)
    statements = split_statements(sql)
    if not statements:
        logger.debug("sql.get_no_row", sql=sql)
        return ScalarResult(status=SQLStatus.FAILURE)
    statement = statements[0]

    try:
        result = connection.exec_driver_sql(statement)
    except SQLAlchemyError as exc:
        message = _engine_message(exc)
        logger.error("sql.prepare_failed", sql=statement, error=message)
        return ScalarResult(status=SQLStatus.FAILURE, message=message)

    try:
        row = result.fetchone() if result.returns_rows else None
    except SQLAlchemyError as exc:
        message = _engine_message(exc)
        logger.error("sql.step_failed", sql=statement, error=message)
        return ScalarResult(status=SQLStatus.FAILURE, message=message)
    finally:
        result.close()

    if row is None:
        logger.debug("sql.get_no_row", sql=statement)
        return ScalarResult(status=SQLStatus.FAILURE)

    return ScalarResult(value=column_integer(row[0]))


class SQLAlchemySQLEngine:
    """SQLEngine implementation backed by SQLAlchemy connections."""

    execute = staticmethod(sql_command)
    query_table = staticmethod(sql_query)
    query_scalar_integer = staticmethod(sql_get_integer)
