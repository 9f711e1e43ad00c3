"""
Command line tokenizer.

Splits a raw command line into tokens using shell-like quoting rules:

- Whitespace outside quotes separates tokens and is discarded.
- Whitespace inside double quotes is preserved verbatim.
- Quotes never break a token, so foo"bar baz"qux is the single token
  'foobar bazqux'.
- A backslash escapes a following backslash or double quote. Before any
  other character the backslash is kept literally.
- A closed pair of quotes opens a token even when it stays empty, so
  a "" b yields an empty middle token.
"""

BACKSLASH = "\\"
QUOTE = '"'


def tokenize(raw: str) -> list[str]:
    """
    Split a raw command line into tokens.

    Args:
        raw: The command line text

    Returns:
        Ordered list of tokens; only a closed "" produces an empty token
    """
    tokens: list[str] = []
    accumulator: list[str] = []
    in_quotes = False
    quoted_token = False  # a closed quote pair opened the current token
    pending_escape = False

    for cc in raw:
        if pending_escape:
            pending_escape = False
            if cc in (BACKSLASH, QUOTE):
                accumulator.append(cc)
                continue
            # Not an escape target: keep the backslash, then handle cc normally
            accumulator.append(BACKSLASH)

        if cc == BACKSLASH:
            pending_escape = True
        elif cc == QUOTE:
            in_quotes = not in_quotes
            if not in_quotes:
                quoted_token = True
        elif cc.isspace() and not in_quotes:
            if accumulator or quoted_token:
                tokens.append("".join(accumulator))
                accumulator = []
                quoted_token = False
        else:
            accumulator.append(cc)

    # Unterminated quotes are tolerated; a dangling escape is dropped
    if accumulator or quoted_token:
        tokens.append("".join(accumulator))

    return tokens


def quote(token: str) -> str:
    """
    Quote a single token so that tokenize() reads it back unchanged.

    Args:
        token: Token text

    Returns:
        The token with backslashes and quotes escaped, wrapped in quotes
        when it is empty or contains whitespace
    """
    escaped = token.replace(BACKSLASH, BACKSLASH * 2).replace(QUOTE, BACKSLASH + QUOTE)
    if not token or any(cc.isspace() for cc in token):
        return f"{QUOTE}{escaped}{QUOTE}"
    return escaped


def join(tokens: list[str]) -> str:
    """Build a raw command line from already-split tokens (e.g. sys.argv)."""
    return " ".join(quote(token) for token in tokens)
