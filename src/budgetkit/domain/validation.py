"""Input checks shared by the domain services."""

from decimal import Decimal, InvalidOperation
from typing import Optional

from budgetkit.domain.errors import ValidationError

# Amounts are stored as Numeric(10, 2)
MAX_AMOUNT = Decimal("99999999.99")
CENT = Decimal("0.01")


def validate_amount(amount: Decimal, field: str, allow_zero: bool = True) -> Decimal:
    """Check a money amount and return it as a Decimal with two places.

    Args:
        amount: Amount to check
        field: Field name used in error messages
        allow_zero: If False, the amount must be strictly positive

    Raises:
        ValidationError: If the amount is negative (or zero when not allowed),
            has more than two decimal places, or is out of range
    """
    try:
        value = Decimal(amount)
    except (InvalidOperation, TypeError, ValueError):
        raise ValidationError(f"{field} must be a decimal number")

    if not value.is_finite():
        raise ValidationError(f"{field} must be a finite number")
    if value < 0 or (value == 0 and not allow_zero):
        qualifier = "zero or greater" if allow_zero else "greater than zero"
        raise ValidationError(f"{field} must be {qualifier}")
    if value > MAX_AMOUNT:
        raise ValidationError(f"{field} must not exceed {MAX_AMOUNT}")
    # Trailing zeros past the cents ("12.500") are fine
    cents = value.quantize(CENT)
    if cents != value:
        raise ValidationError(f"{field} must have at most two decimal places")
    return cents


def validate_name(name: Optional[str], field: str = "Name", max_length: int = 100) -> str:
    """Strip a name and check it is non-empty and not too long."""
    stripped = (name or "").strip()
    if not stripped:
        raise ValidationError(f"{field} must not be empty")
    if len(stripped) > max_length:
        raise ValidationError(f"{field} must be at most {max_length} characters")
    return stripped
