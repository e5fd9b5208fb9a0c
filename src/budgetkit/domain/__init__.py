"""Domain layer for budgetkit application.

Services import the database interface, which itself imports the entities
below, so only entities and errors are re-exported here.
"""

from budgetkit.domain.entities import (
    AlertPeriod,
    AlertStatus,
    Category,
    CategoryExpense,
    GroupDimension,
    MonthlyBalance,
    SavingsGoal,
    Scope,
    ScopeKind,
    SpendingAlert,
    Transaction,
    TransactionType,
    Window,
)
from budgetkit.domain.errors import (
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)

__all__ = [
    "AlertPeriod",
    "AlertStatus",
    "Category",
    "CategoryExpense",
    "GroupDimension",
    "MonthlyBalance",
    "SavingsGoal",
    "Scope",
    "ScopeKind",
    "SpendingAlert",
    "Transaction",
    "TransactionType",
    "Window",
    "ConflictError",
    "DomainError",
    "NotFoundError",
    "ValidationError",
]
