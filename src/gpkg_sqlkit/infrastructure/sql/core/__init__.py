"""Core SQL text utilities package."""

from .identifier import escape_identifier, qualify_table, quote_identifier
from .literal import escape_literal, quote_literal, unescape
from .result_table import ResultTable, ResultTableState, parse_integer_prefix
from .status import ScalarResult, SQLStatus, StatementResult
from .tokenizer import Scanner, ScanState, TokenKind, classify_token, tokenize

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
]
