"""
SQLite-specific SQL dialect implementation.

Provides SQLite identifier and literal quoting, table qualification and the
static mapping from abstract field types to SQLite storage classes.
"""

from enum import Enum
from typing import Dict, Optional

from ..core.identifier import qualify_table, quote_identifier
from ..core.literal import quote_literal


class FieldType(Enum):
    """Abstract field types of a vector layer."""

    INTEGER = "integer"
    INTEGER_LIST = "integer_list"
    REAL = "real"
    REAL_LIST = "real_list"
    STRING = "string"
    STRING_LIST = "string_list"
    BINARY = "binary"
    DATE = "date"
    TIME = "time"
    DATETIME = "datetime"
    INTEGER64 = "integer64"
    INTEGER64_LIST = "integer64_list"


class SQLiteAffinity(Enum):
    """SQLite fundamental datatype codes (0 means no mapping)."""

    UNKNOWN = 0
    INTEGER = 1
    FLOAT = 2
    TEXT = 3
    BLOB = 4


FIELD_AFFINITY: Dict[FieldType, SQLiteAffinity] = {
    FieldType.INTEGER: SQLiteAffinity.INTEGER,
    FieldType.REAL: SQLiteAffinity.FLOAT,
    FieldType.STRING: SQLiteAffinity.TEXT,
    FieldType.BINARY: SQLiteAffinity.BLOB,
    FieldType.DATE: SQLiteAffinity.TEXT,
    FieldType.DATETIME: SQLiteAffinity.TEXT,
}


def column_affinity(field_type: FieldType) -> SQLiteAffinity:
    """Map a field type to its SQLite storage class, UNKNOWN if unmapped."""
    return FIELD_AFFINITY.get(field_type, SQLiteAffinity.UNKNOWN)


class SQLiteDialect:
    """SQLite SQL dialect implementation."""

    name = "sqlite"

    def quote(self, identifier: str) -> str:
        """Quote an identifier using SQLite syntax (double quotes)."""
        return quote_identifier(identifier, dialect=self.name)

    def literal(self, value: str) -> str:
        """Quote a string literal using single quotes."""
        return quote_literal(value)

    def qualify(self, table: str, schema: Optional[str] = None) -> str:
        """Create a table reference, prefixed by an attached database name."""
        return qualify_table(table, schema, dialect=self.name)

    def affinity(self, field_type: FieldType) -> SQLiteAffinity:
        return column_affinity(field_type)
