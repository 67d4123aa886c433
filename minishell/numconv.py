"""Conversion between decimal text and integers."""

from __future__ import annotations

import re

_LEADING = re.compile(r"[ \f\n\r\t\v]*([+-]?)([0-9]*)")


def parse_int(text: str) -> int:
    """Parse a decimal integer from the start of text.

    Leading blanks (space, form feed, newline, carriage return, tab and
    vertical tab) are skipped. One optional sign follows, then the ASCII
    digits. Parsing stops at the first other character. Text with no
    digits gives 0.
    """
    if not isinstance(text, str):
        raise TypeError(f"expected a str, got {type(text).__name__}")
    match = _LEADING.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value


def int_to_str(n: int) -> str:
    """Return the decimal text of n, with a leading '-' when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    digits = str(abs(n))
    return f"-{digits}" if n < 0 else digits