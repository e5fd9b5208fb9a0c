"""Aggregation of transaction amounts over a reporting window."""

from collections import defaultdict
from decimal import Decimal
from typing import Optional, Sequence, Union

from budgetkit.database.base import Database
from budgetkit.domain.entities import (
    GroupDimension,
    Transaction,
    TransactionType,
    Window,
)

GroupKey = Union[TransactionType, int]

ZERO = Decimal("0")


class AggregationService:
    """Service for summing transaction amounts in a scope and window.

    Every call is a single read against the ledger. Sums use Decimal
    arithmetic, so repeated runs over the same data give identical results.
    """

    def __init__(self, db: Database):
        """Initialize aggregation service.

        Args:
            db: Database instance
        """
        self.db = db

    def get_window_transactions(
        self,
        scope_id: int,
        window: Window,
        transaction_type: Optional[TransactionType] = None,
        category_id: Optional[int] = None,
    ) -> list[Transaction]:
        """Get transactions of a scope that fall inside ``window``."""
        return self.db.list_transactions(
            scope_id=scope_id,
            start=window.start,
            end=window.end,
            transaction_type=transaction_type,
            category_id=category_id,
        )

    def total(
        self,
        scope_id: int,
        window: Window,
        transaction_type: Optional[TransactionType] = None,
        category_id: Optional[int] = None,
    ) -> Decimal:
        """Sum transaction amounts in a window.

        Args:
            scope_id: Scope to aggregate
            window: Inclusive time window
            transaction_type: Optional income/expense filter
            category_id: Optional category filter

        Returns:
            Sum of matching amounts, or zero when nothing matches
        """
        transactions = self.get_window_transactions(
            scope_id, window, transaction_type=transaction_type, category_id=category_id
        )
        return sum_amounts(transactions)

    def total_grouped_by(
        self,
        scope_id: int,
        window: Window,
        dimension: GroupDimension,
        transaction_type: Optional[TransactionType] = None,
    ) -> dict[GroupKey, Decimal]:
        """Sum transaction amounts in a window grouped by ``dimension``.

        Groups without matching transactions are absent from the result.
        """
        transactions = self.get_window_transactions(
            scope_id, window, transaction_type=transaction_type
        )
        return group_amounts(transactions, dimension)


def sum_amounts(transactions: Sequence[Transaction]) -> Decimal:
    """Sum amounts of the given transactions."""
    return sum((txn.amount for txn in transactions), ZERO)


def group_key(txn: Transaction, dimension: GroupDimension) -> GroupKey:
    """Return the grouping key of a transaction for ``dimension``."""
    if dimension == GroupDimension.TYPE:
        return txn.transaction_type
    if dimension == GroupDimension.CATEGORY:
        return txn.category_id
    raise AssertionError(f"Unhandled group dimension: {dimension!r}")


def group_amounts(
    transactions: Sequence[Transaction], dimension: GroupDimension
) -> dict[GroupKey, Decimal]:
    """Sum amounts per group key, preserving first-seen key order."""
    totals: dict[GroupKey, Decimal] = defaultdict(lambda: ZERO)
    for txn in transactions:
        totals[group_key(txn, dimension)] += txn.amount
    return dict(totals)
