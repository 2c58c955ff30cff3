"""
Unit tests for the SQL token scanner.
"""

import pytest

from gpkg_sqlkit.infrastructure.sql.core.tokenizer import (
    Scanner,
    ScanState,
    TokenKind,
    classify_token,
    tokenize,
)


@pytest.mark.unit
class TestTokenize:
    """Tests for tokenize function."""

    def test_punctuation_is_isolated(self):
        """Commas and parentheses become their own tokens."""
        assert tokenize("a, b (c)") == ["a", ",", "b", "(", "c", ")"]

    def test_punctuation_without_spaces(self):
        """Punctuation splits words even without surrounding whitespace."""
        assert tokenize("(a,b,c)") == ["(", "a", ",", "b", ",", "c", ")"]

    def test_doubled_quote_stays_in_token(self):
        """An escaped quote does not close the quoted region."""
        tokens = tokenize("SELECT 'it''s' FROM t")
        assert tokens == ["SELECT", "'it''s'", "FROM", "t"]
        assert len(tokens[1][1:-1]) == 5

    def test_empty_input(self):
        assert tokenize("") == []

    def test_only_spaces(self):
        assert tokenize("     ") == []

    def test_repeated_spaces_collapse(self):
        assert tokenize("  a    b  ") == ["a", "b"]

    def test_no_trailing_whitespace(self):
        """The last token is emitted at end of input."""
        assert tokenize("INTEGER") == ["INTEGER"]

    def test_spaces_and_punctuation_inside_quotes(self):
        """Delimiters are ordinary characters inside a quoted region."""
        assert tokenize("'a, (b) c'") == ["'a, (b) c'"]

    def test_double_quoted_identifier(self):
        tokens = tokenize('CREATE TABLE "my ""table""" (x)')
        assert tokens == ["CREATE", "TABLE", '"my ""table"""', "(", "x", ")"]

    def test_other_quote_char_inside_region(self):
        """A different quote character does not close the region."""
        assert tokenize("'say \"hi\"' x") == ["'say \"hi\"'", "x"]

    def test_empty_quoted_string(self):
        assert tokenize("x = ''") == ["x", "=", "''"]

    def test_unterminated_quote_is_lenient(self):
        """An unterminated quoted region yields a partial final token."""
        assert tokenize("a 'unfinished text") == ["a", "'unfinished text"]

    def test_word_before_quote_is_emitted(self):
        """A word directly followed by a quote is kept as its own token."""
        assert tokenize("N'abc'") == ["N", "'abc'"]

    def test_word_after_closing_quote(self):
        assert tokenize("'a'b") == ["'a'", "b"]

    def test_tabs_are_not_delimiters(self):
        """Only the space character separates tokens."""
        assert tokenize("a\tb c") == ["a\tb", "c"]

    def test_column_definition_list(self):
        tokens = tokenize("CREATE TABLE t (fid INTEGER PRIMARY KEY, v NUMERIC(10,2))")
        assert tokens == [
            "CREATE", "TABLE", "t", "(",
            "fid", "INTEGER", "PRIMARY", "KEY", ",",
            "v", "NUMERIC", "(", "10", ",", "2", ")",
            ")",
        ]


@pytest.mark.unit
class TestScanner:
    """Tests for individual scanner transitions."""

    def test_initial_state(self):
        scanner = Scanner()
        assert scanner.state is ScanState.WHITESPACE
        assert scanner.accumulator == ""
        assert scanner.quote_char is None

    def test_word_character_enters_word(self):
        scanner = Scanner()
        assert scanner.feed("a", "b") == (1, [])
        assert scanner.state is ScanState.IN_WORD
        assert scanner.accumulator == "a"

    def test_space_emits_word(self):
        scanner = Scanner(state=ScanState.IN_WORD, accumulator="abc")
        assert scanner.feed(" ", "d") == (1, ["abc"])
        assert scanner.state is ScanState.WHITESPACE
        assert scanner.accumulator == ""

    def test_space_in_whitespace_emits_nothing(self):
        scanner = Scanner()
        assert scanner.feed(" ", " ") == (1, [])

    def test_punctuation_emits_word_then_itself(self):
        scanner = Scanner(state=ScanState.IN_WORD, accumulator="a")
        assert scanner.feed(",", "b") == (1, ["a", ","])
        assert scanner.state is ScanState.WHITESPACE

    def test_quote_opens_region(self):
        scanner = Scanner()
        assert scanner.feed('"', "x") == (1, [])
        assert scanner.state is ScanState.IN_QUOTE
        assert scanner.quote_char == '"'
        assert scanner.accumulator == '"'

    def test_doubled_quote_consumes_two(self):
        scanner = Scanner(state=ScanState.IN_QUOTE, quote_char="'", accumulator="'it")
        assert scanner.feed("'", "'") == (2, [])
        assert scanner.accumulator == "'it''"
        assert scanner.state is ScanState.IN_QUOTE

    def test_single_quote_closes_region(self):
        scanner = Scanner(state=ScanState.IN_QUOTE, quote_char="'", accumulator="'x")
        assert scanner.feed("'", None) == (1, ["'x'"])
        assert scanner.state is ScanState.WHITESPACE
        assert scanner.quote_char is None

    def test_finish_emits_pending_token(self):
        scanner = Scanner(state=ScanState.IN_QUOTE, quote_char="'", accumulator="'abc")
        assert scanner.finish() == ["'abc"]
        assert scanner.state is ScanState.WHITESPACE

    def test_finish_on_empty_scanner(self):
        assert Scanner().finish() == []


@pytest.mark.unit
class TestClassifyToken:
    """Tests for classify_token function."""

    @pytest.mark.parametrize(
        "token, kind",
        [
            ("(", TokenKind.PUNCTUATION),
            (",", TokenKind.PUNCTUATION),
            ("'abc'", TokenKind.QUOTED),
            ('"col"', TokenKind.QUOTED),
            ("SELECT", TokenKind.WORD),
            ("42", TokenKind.WORD),
        ],
    )
    def test_kinds(self, token, kind):
        assert classify_token(token) is kind

    def test_empty_token_rejected(self):
        with pytest.raises(ValueError):
            classify_token("")
