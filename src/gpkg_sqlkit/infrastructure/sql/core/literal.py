"""
SQL string literal handling utilities.

Provides escaping of values spliced between single quotes and the inverse
operation for previously quoted literals or identifiers.
"""

QUOTE_CHARS = ("'", '"')


def escape_literal(text: str) -> str:
    """
    Escape text destined for a single-quoted SQL literal.

    Every single quote is doubled; all other characters pass through.

    Args:
        text: Raw value

    Returns:
        Escaped value, safe to place between single quotes

    Examples:
        >>> escape_literal("it's")
        "it''s"
        >>> escape_literal("")
        ''
    """
    return text.replace("'", "''")


def quote_literal(text: str) -> str:
    """
    Escape text and wrap it in single quotes.

    Examples:
        >>> quote_literal("O'Brien")
        "'O''Brien'"
    """
    return f"'{escape_literal(text)}'"


def unescape(text: str) -> str:
    """
    Strip quoting from a single- or double-quoted SQL value.

    The opening quote character decides which quote is significant. A
    doubled occurrence of it is one literal instance; the first single
    occurrence closes the value and anything after it is ignored. Text that
    does not start with a quote character is returned unchanged.

    Args:
        text: Quoted value such as ``'it''s'`` or ``"col""name"``

    Returns:
        Bare value

    Examples:
        >>> unescape("'it''s'")
        "it's"
        >>> unescape('"a""b" trailing')
        'a"b'
        >>> unescape("bare")
        'bare'
    """
    if not text or text[0] not in QUOTE_CHARS:
        return text

    quote_char = text[0]
    chars = []
    i = 1
    length = len(text)
    while i < length:
        ch = text[i]
        if ch == quote_char:
            if i + 1 < length and text[i + 1] == quote_char:
                i += 1
            else:
                break
        chars.append(ch)
        i += 1
    return "".join(chars)
