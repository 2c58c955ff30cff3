"""
SQL identifier handling utilities.

Provides functions for escaping, quoting and qualifying SQL identifiers
(table names, column names) so that arbitrary names, including ones with
embedded quotes, can be spliced into statements safely.
"""

from typing import Optional


def escape_identifier(name: str) -> str:
    """
    Escape an identifier destined for a double-quoted SQL name.

    Every double quote is doubled; all other characters pass through.

    Examples:
        >>> escape_identifier('column"name')
        'column""name'
    """
    return name.replace('"', '""')


def quote_identifier(name: str, dialect: str = "sqlite") -> str:
    """
    Quote a SQL identifier (table or column name).

    Args:
        name: The identifier to quote
        dialect: Database dialect ("sqlite", "mysql")

    Returns:
        Properly quoted identifier

    Examples:
        >>> quote_identifier("geom")
        '"geom"'
        >>> quote_identifier('a"b')
        '"a""b"'
        >>> quote_identifier("table", dialect="mysql")
        '`table`'
    """
    if dialect == "mysql":
        # Escape backticks in MySQL
        escaped = name.replace("`", "``")
        return f"`{escaped}`"
    return f'"{escape_identifier(name)}"'


def qualify_table(
    table: str, schema: Optional[str] = None, dialect: str = "sqlite"
) -> str:
    """
    Create a fully qualified table name with optional schema prefix.

    For SQLite the schema is an attached database name such as ``main``.

    Args:
        table: Table name
        schema: Optional schema (attached database) name
        dialect: Database dialect

    Returns:
        Qualified table name

    Examples:
        >>> qualify_table("gpkg_contents")
        '"gpkg_contents"'
        >>> qualify_table("gpkg_contents", schema="main")
        '"main"."gpkg_contents"'
    """
    quoted_table = quote_identifier(table, dialect)
    if schema:
        return f"{quote_identifier(schema, dialect)}.{quoted_table}"
    return quoted_table
