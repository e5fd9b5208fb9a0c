"""Utility functions for budgetkit."""

from budgetkit.utils.date_parser import parse_date, parse_instant
from budgetkit.utils.amount_parser import parse_amount
from budgetkit.utils.logger import get_logger

__all__ = ["parse_date", "parse_instant", "parse_amount", "get_logger"]
