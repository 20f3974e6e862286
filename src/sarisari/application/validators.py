"""Parsers for raw console input.

Each parser takes the text exactly as typed and returns the typed value,
or ``None`` when the text is not acceptable. They never raise, so callers
can branch on the result and re-prompt.
"""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
# Optional minus, optional integer part, optional dot, at least one trailing digit.
_AMOUNT_PATTERN = re.compile(r"-?[0-9]*\.?[0-9]+")

YES_TOKENS = frozenset({"y", "Y"})
NO_TOKENS = frozenset({"n", "N"})


def parse_integer(text: str) -> int | None:
    """Parse a base-10 integer that spans the whole string.

    Fails on empty text, stray characters, and values outside the
    32-bit signed range.
    """
    if not _INTEGER_PATTERN.fullmatch(text):
        return None
    value = int(text)
    if value < INT_MIN or value > INT_MAX:
        return None
    return value


def parse_menu_number(text: str, minimum: int, maximum: int) -> int | None:
    """Parse a menu choice within the inclusive range [minimum, maximum]."""
    if any(ch.isspace() for ch in text):
        return None
    value = parse_integer(text)
    if value is None or not minimum <= value <= maximum:
        return None
    return value


def parse_payment_amount(text: str) -> Decimal | None:
    """Parse a tendered amount such as ``12``, ``12.5``, ``-3.0`` or ``.5``.

    Negative amounts are syntactically valid here; sufficiency is checked
    by the payment step.
    """
    if not _AMOUNT_PATTERN.fullmatch(text):
        return None
    try:
        return Decimal(text)
    except InvalidOperation:
        return None


def parse_yes_no(text: str) -> bool | None:
    """Accept exactly ``y``, ``Y``, ``n`` or ``N``."""
    if text in YES_TOKENS:
        return True
    if text in NO_TOKENS:
        return False
    return None
