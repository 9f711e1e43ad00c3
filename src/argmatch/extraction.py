"""
Extraction primitives for pulling options out of a token list.

Every primitive works on the shared, mutable token list in place: tokens it
recognizes are removed, everything else keeps its relative order. Matching is
by exact string equality against a single flag token.
"""

import logging
from typing import Callable

logger = logging.getLogger(__name__)

FLAG_MARKER = "-"


def is_number(token: str) -> bool:
    """Check if a token parses as a (signed) number."""
    try:
        float(token)
    except ValueError:
        return False
    return True


def is_flag(token: str) -> bool:
    """
    Check if a token looks like a flag.

    Negative numbers start with the marker too but are treated as values, so
    "-s -3" passes -3 as the parameter of -s.
    """
    return token.startswith(FLAG_MARKER) and not is_number(token)


def find_flag(
    flag: str, tokens: list[str], action: Callable[[], None] | None = None
) -> bool:
    """
    Remove every occurrence of a flag.

    Args:
        flag: Exact flag token to look for
        tokens: Token list, modified in place
        action: Optional callback, invoked once if the flag was present

    Returns:
        True if at least one occurrence was found
    """
    if flag not in tokens:
        return False

    tokens[:] = [token for token in tokens if token != flag]
    if action is not None:
        action()
    return True


def find_parameter(flag: str, tokens: list[str]) -> tuple[bool, str | None]:
    """
    Extract the value following the first usable occurrence of a flag.

    An occurrence is usable when the next token exists and is not itself a
    flag. Unusable occurrences are left in place and the scan continues.

    Args:
        flag: Exact flag token to look for
        tokens: Token list, modified in place

    Returns:
        Tuple of (True, value) on success, or (False, None)
    """
    for index, token in enumerate(tokens[:-1]):
        if token != flag:
            continue

        value = tokens[index + 1]
        if not is_flag(value):
            del tokens[index : index + 2]
            return True, value

    return False, None


def find_parameter_each(
    flag: str, tokens: list[str], action: Callable[[str], None]
) -> bool:
    """
    Repeatedly extract flag values until none are left.

    Args:
        flag: Exact flag token to look for
        tokens: Token list, modified in place
        action: Callback invoked with each extracted value, in order

    Returns:
        True if at least one value was extracted
    """
    found = False
    while True:
        matched, value = find_parameter(flag, tokens)
        if not matched:
            return found
        found = True
        action(value)


def find_parameters(flag: str, required_count: int, tokens: list[str]) -> list[str] | None:
    """
    Extract a fixed number of values following a flag.

    Every occurrence of the flag is consumed together with the values that
    were read for it, even when the occurrence turns out to be incomplete. A
    flag-looking token that cuts an occurrence short is left in place since
    it belongs to another option.

    Only the outcome of the last occurrence is returned; values of earlier
    occurrences are dropped.

    Args:
        flag: Exact flag token to look for
        required_count: Number of values expected after the flag
        tokens: Token list, modified in place

    Returns:
        List of exactly required_count values, or None if the flag was absent
        or its last occurrence was incomplete

    Raises:
        ValueError: If required_count is negative
    """
    if required_count < 0:
        raise ValueError(f"required_count must be non-negative: {required_count}")

    found: list[str] | None = None
    occurrences = 0
    start = 0

    while flag in tokens[start:]:
        found_at = tokens.index(flag, start)
        occurrences += 1

        values: list[str] = []
        for index in range(found_at + 1, found_at + 1 + required_count):
            if index >= len(tokens) or is_flag(tokens[index]):
                break
            values.append(tokens[index])

        del tokens[found_at : found_at + 1 + len(values)]
        found = values if len(values) == required_count else None

        # The token after the removed span now sits at found_at
        start = found_at

    if occurrences > 1:
        logger.warning(
            "%s given %d times; only the last occurrence is used", flag, occurrences
        )

    return found
