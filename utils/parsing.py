"""
Parsing helpers for form input strings.

Numeric fields arrive as whatever the user typed. Anything that is not a
finite number parses to None, which every "> 0" check treats as invalid.
"""

from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Iterable, Optional


def is_blank(value: Optional[str]) -> bool:
    """True for None, empty or whitespace-only input."""
    return value is None or not str(value).strip()


def parse_quantity(value: Optional[str]) -> Optional[Decimal]:
    """
    Parse a numeric input string.

    - "150" → Decimal("150")
    - " 2.5 " → Decimal("2.5")
    - "", "abc", "NaN", "Infinity" → None

    Args:
        value: Raw input string

    Returns:
        Decimal value, or None if the input is not a finite number
    """
    if is_blank(value):
        return None

    try:
        parsed = Decimal(str(value).strip())
    except InvalidOperation:
        return None

    if not parsed.is_finite():
        return None

    return parsed


def sum_quantities(values: Iterable[Optional[str]]) -> Decimal:
    """
    Sum numeric input strings.

    Blank or non-numeric entries count as 0; the per-field validators report
    them separately.
    """
    total = Decimal("0")
    for value in values:
        parsed = parse_quantity(value)
        if parsed is not None:
            total += parsed
    return total


def parse_iso_date(value: Optional[str]) -> Optional[date]:
    """
    Parse a YYYY-MM-DD date input.

    Returns:
        date, or None if blank or not a valid calendar date
    """
    if is_blank(value):
        return None

    try:
        return date.fromisoformat(str(value).strip())
    except ValueError:
        return None


def format_quantity(value: Decimal) -> str:
    """Render a Decimal without exponent or trailing zeros (150, 20.5)."""
    return format(value.normalize(), "f")
