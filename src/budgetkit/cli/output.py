"""Output helpers shared by CLI commands.

JSON output carries every amount as a decimal string so values cross the
boundary without floating-point rounding.
"""

import json
from datetime import datetime, tzinfo
from decimal import Decimal
from typing import Any

import click

from budgetkit.domain.entities import (
    AlertStatus,
    CategoryExpense,
    MonthlyBalance,
    SpendingAlert,
)


def format_money(amount: Decimal) -> str:
    """Format an amount for table output."""
    return f"${amount:,.2f}"


def format_instant(instant: datetime, zone: tzinfo) -> str:
    """Format an instant as local wall-clock time in the reporting timezone."""
    return instant.astimezone(zone).strftime("%Y-%m-%d %H:%M")


def echo_json(payload: Any) -> None:
    """Print a JSON document."""
    click.echo(json.dumps(payload, indent=2))


def monthly_balance_to_dict(balance: MonthlyBalance) -> dict[str, str]:
    return {
        "income": str(balance.income),
        "expenses": str(balance.expenses),
        "balance": str(balance.balance),
    }


def category_expense_to_dict(item: CategoryExpense) -> dict[str, Any]:
    return {
        "category_id": item.category_id,
        "category_name": item.category_name,
        "total": str(item.total),
        "percentage": item.percentage,
    }


def spending_alert_to_dict(alert: SpendingAlert) -> dict[str, Any]:
    return {
        "id": alert.id,
        "name": alert.name,
        "category_id": alert.category_id,
        "limit_amount": str(alert.limit_amount),
        "period": alert.period.value,
        "is_active": alert.is_active,
    }


def alert_status_to_dict(status: AlertStatus) -> dict[str, Any]:
    return {
        "alert": spending_alert_to_dict(status.alert),
        "current_spending": str(status.current_spending),
        "percentage_used": str(status.percentage_used),
    }
