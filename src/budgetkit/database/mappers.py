"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic: enum columns are stored as their
string values and instants as naive UTC datetimes.
"""

from datetime import datetime, UTC
from decimal import Decimal

from budgetkit.domain import entities as domain
from budgetkit.database.models import (
    Scope as ORMScope,
    Category as ORMCategory,
    Transaction as ORMTransaction,
    SpendingAlert as ORMSpendingAlert,
    SavingsGoal as ORMSavingsGoal,
)


def to_storage_instant(instant: datetime) -> datetime:
    """Convert an instant to the naive UTC form stored in the database.

    Naive input is assumed to already be UTC.
    """
    if instant.tzinfo is None:
        return instant
    return instant.astimezone(UTC).replace(tzinfo=None)


def from_storage_instant(stored: datetime) -> datetime:
    """Convert a stored naive UTC datetime to an aware UTC instant."""
    if stored.tzinfo is not None:
        return stored.astimezone(UTC)
    return stored.replace(tzinfo=UTC)


def _to_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def scope_to_domain(orm_scope: ORMScope) -> domain.Scope:
    """Convert SQLAlchemy Scope model to domain Scope entity."""
    return domain.Scope(
        id=orm_scope.id,
        name=orm_scope.name,
        kind=domain.ScopeKind(orm_scope.kind),
        created_at=orm_scope.created_at,
    )


def category_to_domain(orm_category: ORMCategory) -> domain.Category:
    """Convert SQLAlchemy Category model to domain Category entity."""
    return domain.Category(
        id=orm_category.id,
        scope_id=orm_category.scope_id,
        name=orm_category.name,
        category_type=domain.TransactionType(orm_category.category_type),
        created_at=orm_category.created_at,
    )


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        scope_id=orm_transaction.scope_id,
        category_id=orm_transaction.category_id,
        description=orm_transaction.description,
        amount=_to_decimal(orm_transaction.amount),
        transaction_type=domain.TransactionType(orm_transaction.transaction_type),
        date=from_storage_instant(orm_transaction.date),
        created_at=orm_transaction.created_at,
    )


def spending_alert_to_domain(orm_alert: ORMSpendingAlert) -> domain.SpendingAlert:
    """Convert SQLAlchemy SpendingAlert model to domain SpendingAlert entity."""
    return domain.SpendingAlert(
        id=orm_alert.id,
        scope_id=orm_alert.scope_id,
        category_id=orm_alert.category_id,
        name=orm_alert.name,
        limit_amount=_to_decimal(orm_alert.limit_amount),
        period=domain.AlertPeriod(orm_alert.period),
        is_active=orm_alert.is_active,
        created_at=orm_alert.created_at,
    )


def savings_goal_to_domain(orm_goal: ORMSavingsGoal) -> domain.SavingsGoal:
    """Convert SQLAlchemy SavingsGoal model to domain SavingsGoal entity."""
    return domain.SavingsGoal(
        id=orm_goal.id,
        scope_id=orm_goal.scope_id,
        name=orm_goal.name,
        target_amount=_to_decimal(orm_goal.target_amount),
        current_amount=_to_decimal(orm_goal.current_amount),
        target_date=orm_goal.target_date,
        is_active=orm_goal.is_active,
        created_at=orm_goal.created_at,
    )
