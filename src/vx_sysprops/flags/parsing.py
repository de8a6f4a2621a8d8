"""Flags – strict base-10 integer parsing."""
from __future__ import annotations

import itertools
import re
import unicodedata

from vx_sysprops.errors import NumberFormatError

LONG_BITS = 64
INT_BITS = 32

# Any Unicode decimal digit (category Nd); no whitespace, underscores or radix prefixes.
_INTEGER_RE = re.compile(r"[+-]?\d+")


def parse_integer(key: str, value: str, bits: int) -> int:
    """Parse *value* as a signed base-10 integer that fits in *bits* bits.

    Digits may come from any script with decimal digits, e.g. ``"١٢"`` is 12,
    and scripts may be mixed within one value.

    Raises
    ------
    NumberFormatError
        When *value* is not an optionally signed run of decimal digits, or the
        number falls outside ``[-2**(bits-1), 2**(bits-1) - 1]``.
    """
    if _INTEGER_RE.fullmatch(value) is None:
        raise NumberFormatError(key, value, "not a base-10 integer")
    low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    digits = [unicodedata.decimal(char) for char in value.lstrip("+-")]
    significant = list(itertools.dropwhile(lambda digit: digit == 0, digits))
    # Bound the digit count before converting so huge inputs fail as overflow.
    if len(significant) > len(str(high)):
        raise NumberFormatError(key, value, f"out of range for a signed {bits}-bit integer")
    number = 0
    for digit in significant:
        number = number * 10 + digit
    if value.startswith("-"):
        number = -number
    if not low <= number <= high:
        raise NumberFormatError(key, value, f"out of range for a signed {bits}-bit integer")
    return number


__all__ = ["INT_BITS", "LONG_BITS", "parse_integer"]
