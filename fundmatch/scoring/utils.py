"""
Scoring Utilities
fundmatch/scoring/utils.py

Shared helpers for the analyzers: half-up rounding, ZAR formatting,
field presence checks and business-age math.
"""

from datetime import date
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Optional

from pydantic import BaseModel

# en-ZA groups digits with non-breaking spaces
NBSP = "\u00a0"
CURRENCY_SYMBOL = "R"
INFINITY = "\u221e"
# Amounts past the float range display as infinite
MAX_DISPLAY_EXPONENT = 308


def round_half_up(value: Any) -> int:
    """
    Round to the nearest integer with halves rounded up.

    Python's round() uses banker's rounding (round(2.5) == 2); scores must
    round 2.5 to 3.
    """
    return int(Decimal(str(value)).to_integral_value(rounding=ROUND_HALF_UP))


def format_currency(amount: Any) -> str:
    """
    Format a ZAR amount for display (en-ZA, no decimals).

    Infinite amounts, and amounts too large for a float, render as the
    infinity sign; NaN renders as "NaN".

    Examples:
        >>> format_currency(100000)
        'R\\xa0100\\xa0000'
    """
    value = Decimal(str(amount))
    if value.is_nan():
        return f"{CURRENCY_SYMBOL}{NBSP}NaN"
    if value.is_infinite() or value.adjusted() > MAX_DISPLAY_EXPONENT:
        digits = INFINITY
    else:
        value = value.to_integral_value(rounding=ROUND_HALF_UP)
        digits = f"{abs(int(value)):,}".replace(",", NBSP)
    sign = "-" if value < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}{NBSP}{digits}"


def parse_amount(value: Any) -> Optional[Decimal]:
    """
    Parse a requested amount into an exact, finite Decimal.

    Arbitrarily large values stay finite, so they can still be compared
    against an investment range. Returns None when the value is missing,
    not numeric, NaN or infinite. Sign is not checked here.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        number = Decimal(value.strip()) if isinstance(value, str) else Decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return None
    if not number.is_finite():
        return None
    return number


def is_filled(value: Any) -> bool:
    """
    Whether a profile field counts as supplied.

    None, blank strings, empty collections, False and zero are empty. A
    nested record is filled when any of its own fields is filled.
    """
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, BaseModel):
        return any(is_filled(getattr(value, name)) for name in type(value).model_fields)
    if isinstance(value, (list, tuple, set, dict)):
        return len(value) > 0
    return bool(value)


def years_in_operation(founding_year: Optional[int], today: date) -> int:
    """Calendar years since founding; 0 when the founding year is unknown."""
    if not founding_year:
        return 0
    return today.year - founding_year


def annual_revenue(monthly_revenue: Optional[float]) -> float:
    """Annualised revenue from monthly revenue; 0 when not disclosed."""
    if not monthly_revenue:
        return 0.0
    return monthly_revenue * 12
