"""Tests for amount parser."""

import pytest
from decimal import Decimal

from budgetkit.utils.amount_parser import parse_amount


@pytest.mark.parametrize("text, expected", [
    ("123.45", Decimal("123.45")),
    ("$123.45", Decimal("123.45")),
    ("1,234.56", Decimal("1234.56")),
    ("250 EUR", Decimal("250")),
    ("€ 9.99", Decimal("9.99")),
    ("  42 ", Decimal("42")),
])
def test_parse_amount(text, expected):
    assert parse_amount(text) == expected


@pytest.mark.parametrize("text", ["-50.00", "+50", "(50.00)"])
def test_signed_amounts_are_rejected(text):
    with pytest.raises(ValueError, match="must be unsigned"):
        parse_amount(text)


@pytest.mark.parametrize("text", ["", "   ", "abc", "1.2.3", "Infinity", "NaN"])
def test_invalid_amounts(text):
    with pytest.raises(ValueError):
        parse_amount(text)
