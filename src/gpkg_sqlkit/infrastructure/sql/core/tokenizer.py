"""
SQL token scanner.

Splits SQL source text into words, punctuation and quoted strings in a
single left-to-right pass with one character of lookahead. The scanner is
an explicit state machine so that each transition can be exercised on its
own.

Only the lexical structure needed for simple statement rewriting (column
lists, type declarations) is recognized:

- a space outside quotes separates tokens and is never part of one
- ``(``, ``)`` and ``,`` outside quotes are always single-character tokens
- ``'`` and ``"`` open a quoted region that runs to the next single
  occurrence of the same character; a doubled occurrence stays in the
  token as written (``'it''s'`` is one token)

Unterminated quoted regions are not an error: whatever was accumulated is
emitted as the last token.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from .literal import QUOTE_CHARS

DELIMITER = " "
PUNCTUATION = frozenset("(),")


class ScanState(Enum):
    """Scanner states."""

    WHITESPACE = "whitespace"
    IN_WORD = "in_word"
    IN_QUOTE = "in_quote"


class TokenKind(Enum):
    """Lexical category of an emitted token."""

    WORD = "word"
    PUNCTUATION = "punctuation"
    QUOTED = "quoted"


@dataclass
class Scanner:
    """
    Tokenizer state machine.

    Attributes:
        state: Current scanner state
        quote_char: Character that opened the current quoted region
        accumulator: Text of the token in progress
    """

    state: ScanState = ScanState.WHITESPACE
    quote_char: Optional[str] = None
    accumulator: str = ""

    def feed(self, ch: str, lookahead: Optional[str] = None) -> Tuple[int, List[str]]:
        """
        Apply one transition.

        Args:
            ch: Current source character
            lookahead: Following source character, None at end of input

        Returns:
            Tuple of (number of source characters consumed, tokens emitted)
        """
        if self.state is ScanState.IN_QUOTE:
            return self._feed_quoted(ch, lookahead)

        if ch == DELIMITER:
            emitted = self._flush()
            self.state = ScanState.WHITESPACE
            return 1, emitted

        if ch in PUNCTUATION:
            emitted = self._flush()
            emitted.append(ch)
            self.state = ScanState.WHITESPACE
            return 1, emitted

        if ch in QUOTE_CHARS:
            # A word running into a quote is emitted as its own token.
            emitted = self._flush()
            self.accumulator = ch
            self.quote_char = ch
            self.state = ScanState.IN_QUOTE
            return 1, emitted

        self.accumulator += ch
        self.state = ScanState.IN_WORD
        return 1, []

    def finish(self) -> List[str]:
        """Emit the token in progress, if any, and reset the scanner."""
        emitted = self._flush()
        self.state = ScanState.WHITESPACE
        self.quote_char = None
        return emitted

    def _feed_quoted(self, ch: str, lookahead: Optional[str]) -> Tuple[int, List[str]]:
        self.accumulator += ch
        if ch != self.quote_char:
            return 1, []

        if lookahead == self.quote_char:
            # Escaped quote: keep both characters, stay in the region
            self.accumulator += lookahead
            return 2, []

        emitted = self._flush()
        self.state = ScanState.WHITESPACE
        self.quote_char = None
        return 1, emitted

    def _flush(self) -> List[str]:
        if not self.accumulator:
            return []
        token = self.accumulator
        self.accumulator = ""
        return [token]


def tokenize(sql: str) -> List[str]:
    """
    Split SQL text into tokens.

    Args:
        sql: SQL source text

    Returns:
        Tokens in source order; empty for empty or all-space input

    Examples:
        >>> tokenize("a, b (c)")
        ['a', ',', 'b', '(', 'c', ')']
        >>> tokenize("SELECT 'it''s' FROM t")
        ['SELECT', "'it''s'", 'FROM', 't']
    """
    scanner = Scanner()
    tokens: List[str] = []
    length = len(sql)
    i = 0
    while i < length:
        lookahead = sql[i + 1] if i + 1 < length else None
        consumed, emitted = scanner.feed(sql[i], lookahead)
        tokens.extend(emitted)
        i += consumed
    tokens.extend(scanner.finish())
    return tokens


def classify_token(token: str) -> TokenKind:
    """
    Return the lexical category of a token produced by ``tokenize``.

    Raises:
        ValueError: If token is empty
    """
    if not token:
        raise ValueError("Cannot classify an empty token")
    if token in PUNCTUATION:
        return TokenKind.PUNCTUATION
    if token[0] in QUOTE_CHARS:
        return TokenKind.QUOTED
    return TokenKind.WORD
