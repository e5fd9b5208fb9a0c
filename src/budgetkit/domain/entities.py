"""Domain model entities for budgetkit.

These are pure data classes representing business concepts, independent of
database schema. Derived report values (balances, breakdowns, alert statuses)
live here too; they are never persisted.
"""

from dataclasses import dataclass
from datetime import datetime, date
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum
from typing import Optional


def percentage_of(
    part: Decimal, whole: Decimal, quantum: Decimal = Decimal("1")
) -> Decimal:
    """Return ``100 * part / whole`` rounded half-up to ``quantum``.

    A non-positive ``whole`` yields zero. The result is not clamped to 100.
    """
    if whole <= 0:
        return Decimal("0").quantize(quantum)
    return (Decimal(100) * part / whole).quantize(quantum, rounding=ROUND_HALF_UP)


class ScopeKind(str, Enum):
    """Ownership boundary under which data is partitioned."""

    USER = "user"
    FAMILY = "family"


class TransactionType(str, Enum):
    """Direction of a transaction."""

    INCOME = "income"
    EXPENSE = "expense"


class AlertPeriod(str, Enum):
    """Recurrence window a spending alert limit applies to."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class GroupDimension(str, Enum):
    """Dimension used when grouping aggregated amounts."""

    TYPE = "type"
    CATEGORY = "category"


@dataclass(frozen=True)
class Scope:
    """Scope (single user or family group) domain entity."""

    id: int
    name: str
    kind: ScopeKind
    created_at: datetime


@dataclass(frozen=True)
class Category:
    """Category domain entity.

    The category type is informational only; transactions filed under a
    category may carry a different type.
    """

    id: int
    scope_id: int
    name: str
    category_type: TransactionType
    created_at: datetime


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity.

    ``date`` is a timezone-aware instant.
    """

    id: int
    scope_id: int
    category_id: int
    description: str
    amount: Decimal
    transaction_type: TransactionType
    date: datetime
    created_at: datetime


@dataclass(frozen=True)
class SpendingAlert:
    """Spending alert domain entity."""

    id: int
    scope_id: int
    category_id: Optional[int]
    name: str
    limit_amount: Decimal
    period: AlertPeriod
    is_active: bool
    created_at: datetime


@dataclass(frozen=True)
class SavingsGoal:
    """Savings goal domain entity."""

    id: int
    scope_id: int
    name: str
    target_amount: Decimal
    current_amount: Decimal
    target_date: Optional[date]
    is_active: bool
    created_at: datetime

    @property
    def progress(self) -> Decimal:
        """Percentage of the target already saved (not clamped)."""
        return percentage_of(self.current_amount, self.target_amount, Decimal("0.01"))


@dataclass(frozen=True)
class Window:
    """Concrete reporting interval, inclusive at both ends."""

    start: datetime
    end: datetime

    def contains(self, instant: datetime) -> bool:
        return self.start <= instant <= self.end


@dataclass(frozen=True)
class MonthlyBalance:
    """Income, expenses and balance for one calendar month."""

    income: Decimal
    expenses: Decimal
    balance: Decimal


@dataclass(frozen=True)
class CategoryExpense:
    """One row of a monthly expense breakdown by category."""

    category_id: int
    category_name: str
    total: Decimal
    percentage: int


@dataclass(frozen=True)
class AlertStatus:
    """Spend-to-date for an active alert within its open period."""

    alert: SpendingAlert
    current_spending: Decimal
    percentage_used: Decimal

    @property
    def is_over_limit(self) -> bool:
        return self.current_spending > self.alert.limit_amount
