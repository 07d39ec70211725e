"""Amount parsing utilities."""

import re
from decimal import Decimal, InvalidOperation

_CURRENCY = re.compile(r"[$€£₺]|\bTL\b", re.IGNORECASE)


def parse_amount(amount_str: str) -> Decimal:
    """Parse a money string into a two-place Decimal.

    Handles "150", "150.5", "$1,250.00", "₺90" and "90 TL".

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount rounded to cents

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    cleaned = _CURRENCY.sub("", amount_str).replace(",", "").strip()

    try:
        return Decimal(cleaned).quantize(Decimal("0.01"))
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str}'")
