"""Lenient integer parsing for ids and paging parameters."""

import re

_LEADING_INT = re.compile(r"\s*([+-]?\d+)", re.ASCII)


def parse_leading_int(value: str | int | None) -> int | None:
    """Read the integer at the start of a string.

    Leading whitespace and a sign are allowed, and anything after the
    digits is ignored, so "104abc" reads as 104, "2.5" as 2 and "1_04" as 1.
    Only ASCII digits count.

    Args:
        value: A string, an int (returned as is) or None

    Returns:
        The parsed integer, or None if the value does not start with one
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if not isinstance(value, str):
        return None
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else None
