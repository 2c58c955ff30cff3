"""
SQL module for SQLite text handling.

This module provides reusable utilities for tokenizing SQL text, escaping
literals and identifiers, reading tabular query results, and running
statements through SQLAlchemy with status-based error reporting.
"""

from .core.identifier import escape_identifier, qualify_table, quote_identifier
from .core.literal import escape_literal, quote_literal, unescape
from .core.result_table import ResultTable, ResultTableState, parse_integer_prefix
from .core.status import ScalarResult, SQLStatus, StatementResult
from .core.tokenizer import Scanner, ScanState, TokenKind, classify_token, tokenize
from .dialects.sqlite import FieldType, SQLiteAffinity, SQLiteDialect, column_affinity
from .operations.column_list import ColumnDefinition, split_column_definitions
from .operations.statements import split_statements
from .operations.engine import (
    SQLAlchemySQLEngine,
    SQLEngine,
    create_sql_engine,
    sql_command,
    sql_get_integer,
    sql_query,
)

__all__ = [
    "escape_identifier",
    "quote_identifier",
    "qualify_table",
    "escape_literal",
    "quote_literal",
    "unescape",
    "ResultTable",
    "ResultTableState",
    "parse_integer_prefix",
    "SQLStatus",
    "StatementResult",
    "ScalarResult",
    "Scanner",
    "ScanState",
    "TokenKind",
    "tokenize",
    "classify_token",
    "FieldType",
    "SQLiteAffinity",
    "SQLiteDialect",
    "column_affinity",
    "ColumnDefinition",
    "split_column_definitions",
    "split_statements",
    "SQLEngine",
    "SQLAlchemySQLEngine",
    "create_sql_engine",
    "sql_command",
    "sql_query",
    "sql_get_integer",
]
