"""
Column list splitting for CREATE TABLE statements.

Used when a table has to be rebuilt (column rename/drop on SQLite versions
without ALTER TABLE support): the stored CREATE TABLE text is tokenized and
its parenthesised definition list is split at top-level commas.
"""

from dataclasses import dataclass
from typing import List, Optional

from ..core.literal import QUOTE_CHARS, unescape
from ..core.tokenizer import tokenize

TABLE_CONSTRAINT_KEYWORDS = frozenset(
    {"CONSTRAINT", "PRIMARY", "UNIQUE", "CHECK", "FOREIGN"}
)
COLUMN_CONSTRAINT_KEYWORDS = frozenset(
    {
        "CONSTRAINT",
        "PRIMARY",
        "NOT",
        "NULL",
        "UNIQUE",
        "CHECK",
        "DEFAULT",
        "COLLATE",
        "REFERENCES",
        "GENERATED",
        "AS",
    }
)
LINE_WHITESPACE = "\t\n\r\f\v"


def join_tokens(tokens: List[str]) -> str:
    """
    Reassemble tokens into SQL text with conventional spacing.

    Examples:
        >>> join_tokens(["NUMERIC", "(", "10", ",", "2", ")"])
        'NUMERIC(10, 2)'
    """
    parts: List[str] = []
    previous: Optional[str] = None
    for token in tokens:
        if previous is not None and token not in (")", ",", "(") and previous != "(":
            parts.append(" ")
        elif token == "(" and previous == ",":
            parts.append(" ")
        parts.append(token)
        previous = token
    return "".join(parts)


@dataclass
class ColumnDefinition:
    """
    One entry of a CREATE TABLE definition list.

    Attributes:
        tokens: Tokens of the entry as written
    """

    tokens: List[str]

    @property
    def name(self) -> str:
        """Column name with any quoting removed."""
        return unescape(self.tokens[0])

    @property
    def is_table_constraint(self) -> bool:
        return self.tokens[0].upper() in TABLE_CONSTRAINT_KEYWORDS

    @property
    def declared_type(self) -> str:
        """Declared type text, empty when the column has no type."""
        if self.is_table_constraint:
            return ""
        type_tokens: List[str] = []
        for token in self.tokens[1:]:
            if token.upper() in COLUMN_CONSTRAINT_KEYWORDS:
                break
            type_tokens.append(token)
        return join_tokens(type_tokens)

    def to_sql(self) -> str:
        return join_tokens(self.tokens)


def split_column_definitions(sql: str) -> List[ColumnDefinition]:
    """
    Split the definition list of a CREATE TABLE statement.

    Only commas at the top level of the first parenthesised group separate
    entries; nested groups such as ``NUMERIC(10, 2)`` stay intact.
    Line breaks and tabs outside quotes are read as spaces, so stored
    multi-line statements split like their one-line form.

    Args:
        sql: CREATE TABLE statement text

    Returns:
        Definitions in declaration order, empty when there is no list

    Examples:
        >>> defs = split_column_definitions('CREATE TABLE t ("my id" INTEGER, v REAL)')
        >>> [d.name for d in defs]
        ['my id', 'v']
    """
    tokens = tokenize(_blank_whitespace(sql))
    try:
        start = tokens.index("(")
    except ValueError:
        return []

    definitions: List[ColumnDefinition] = []
    current: List[str] = []
    depth = 1
    for token in tokens[start + 1 :]:
        if token == "(":
            depth += 1
        elif token == ")":
            depth -= 1
            if depth == 0:
                break
        elif token == "," and depth == 1:
            if current:
                definitions.append(ColumnDefinition(current))
            current = []
            continue
        current.append(token)

    if current:
        definitions.append(ColumnDefinition(current))
    return definitions


def _blank_whitespace(sql: str) -> str:
    """Replace line breaks and tabs outside quoted regions with spaces."""
    chars = list(sql)
    quote_char: Optional[str] = None
    for i, ch in enumerate(chars):
        if quote_char is not None:
            if ch == quote_char:
                quote_char = None
        elif ch in QUOTE_CHARS:
            quote_char = ch
        elif ch in LINE_WHITESPACE:
            chars[i] = " "
    return "".join(chars)
