"""Invoice pricing rules

Pure functions shared by request validation and invoice creation:
lenient amount parsing, line amount auto-computation, invoice totals,
invoice numbering and conversion to payment-provider minor units.
"""

import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Iterable, Optional

INVOICE_NUMBER_PREFIX = "INV-"
INVOICE_NUMBER_WIDTH = 5

CENT = Decimal("0.01")
MINOR_UNITS_PER_MAJOR = Decimal(100)

# Leading numeric prefix, e.g. "12.5" in "12.5 hours"
_NUMBER_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_number(value: Any) -> Optional[Decimal]:
    """
    Parse the leading number of a form value

    Accepts numbers and strings. Trailing garbage after a valid numeric
    prefix is ignored ("12abc" -> 12).

    Args:
        value: Raw form value (str, int, float, Decimal or None)

    Returns:
        Parsed Decimal, or None when no number can be read
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, Decimal):
        return value if value.is_finite() else None

    if isinstance(value, (int, float)):
        value = str(value)

    match = _NUMBER_PREFIX.match(str(value))
    if not match:
        return None

    try:
        number = Decimal(match.group(1))
    except InvalidOperation:
        return None

    return number if number.is_finite() else None


def parse_amount(value: Any) -> Decimal:
    """Parse a monetary amount, treating unreadable values as zero"""
    number = parse_number(value)
    return number if number is not None else Decimal("0")


def _quantize(value: Decimal, exponent: Decimal) -> Decimal:
    try:
        return value.quantize(exponent, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise ValueError(f"Value {value} is too large") from None


def format_amount(value: Decimal) -> str:
    """
    Format a monetary amount with 2 decimal places, rounding half-up

    Raises:
        ValueError: If the value has too many digits to be rounded to cents
    """
    return f"{_quantize(value, CENT):.2f}"


def format_quantity(value: Optional[Decimal]) -> Optional[str]:
    """Format a stored duration or rate without trailing zeros ("2.000000" -> "2")"""
    if value is None:
        return None
    return f"{value.normalize():f}"


def compute_line_amount(duration: Any, rate: Any) -> Optional[str]:
    """
    Compute a line item amount from duration and rate

    Args:
        duration: Raw duration value (e.g., hours)
        rate: Raw rate value (price per duration unit)

    Returns:
        duration * rate rounded half-up to 2 places as a string (e.g. "100.00"),
        or None when either value is missing, unreadable or zero

    Raises:
        ValueError: If the product is too large to be rounded to cents
    """
    duration_value = parse_number(duration)
    rate_value = parse_number(rate)

    if not duration_value or not rate_value:
        return None

    return format_amount(duration_value * rate_value)


def compute_total(amounts: Iterable[Any]) -> Decimal:
    """Sum line item amounts, each parsed with parse_amount"""
    return sum((parse_amount(amount) for amount in amounts), Decimal("0"))


def format_invoice_number(existing_count: int) -> str:
    """
    Format the next invoice number

    Format: INV-NNNNN (e.g., INV-00001 for an empty store)
    """
    return f"{INVOICE_NUMBER_PREFIX}{existing_count + 1:0{INVOICE_NUMBER_WIDTH}d}"


def to_minor_units(amount: Any) -> int:
    """
    Convert a major-unit amount to minor units (cents), rounding half-up

    Raises:
        ValueError: If the amount is too large to be expressed in minor units
    """
    value = parse_amount(amount) * MINOR_UNITS_PER_MAJOR
    return int(_quantize(value, Decimal("1")))
