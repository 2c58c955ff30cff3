"""
Statement list splitting.

The sqlite3 DBAPI driver runs one statement per call, while scripts and
driver SQL often hold several statements separated by semicolons.
``split_statements`` cuts such text at every semicolon that ends a
complete statement, as judged by SQLite itself, so semicolons inside
string literals, comments or trigger bodies do not split.
"""

import sqlite3
from typing import List


def split_statements(sql: str) -> List[str]:
    """
    Split SQL text into individual statements.

    Args:
        sql: One or more statements separated by semicolons

    Returns:
        Statements in source order, stripped; empty statements are skipped

    Examples:
        >>> split_statements("CREATE TABLE a (x); INSERT INTO a VALUES ('1;2')")
        ['CREATE TABLE a (x);', "INSERT INTO a VALUES ('1;2')"]
    """
    statements: List[str] = []
    start = 0
    for i, ch in enumerate(sql):
        if ch != ";":
            continue
        candidate = sql[start : i + 1]
        if sqlite3.complete_statement(candidate):
            _append(statements, candidate)
            start = i + 1
    _append(statements, sql[start:])
    return statements


def _append(statements: List[str], text: str) -> None:
    statement = text.strip()
    if statement.rstrip(";").strip():
        statements.append(statement)
