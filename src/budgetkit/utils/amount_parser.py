"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re

_CURRENCY_SYMBOLS = re.compile(r"[$€£¥]|\b(?:USD|EUR|GBP|SEK|kr)\b", re.IGNORECASE)


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Amounts are unsigned: the income/expense direction is carried by the
    transaction type, so a sign or parentheses notation is rejected.

    Handles various formats:
    - "123.45"
    - "$123.45"
    - "1,234.56"
    - "250 EUR"

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed or is signed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    amount_str = amount_str.strip()

    if amount_str.startswith(("-", "+", "(")):
        raise ValueError(
            f"Amount '{amount_str}' must be unsigned; use the transaction type for direction"
        )

    # Remove currency symbols and thousands separators
    cleaned = _CURRENCY_SYMBOLS.sub("", amount_str).replace(",", "").strip()

    try:
        amount = Decimal(cleaned)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str}'")

    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}'")
    return amount
