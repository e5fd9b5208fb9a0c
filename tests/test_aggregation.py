"""Tests for window aggregation."""

import pytest
from datetime import datetime, timedelta, UTC
from decimal import Decimal

from budgetkit.domain.aggregation import (
    AggregationService,
    group_amounts,
    group_key,
    sum_amounts,
)
from budgetkit.domain.entities import (
    GroupDimension,
    Transaction,
    TransactionType,
)
from budgetkit.domain.periods import month_window


@pytest.fixture
def aggregation(temp_db):
    return AggregationService(temp_db)


@pytest.fixture
def march():
    return month_window(2024, 3, UTC)


def _txn(txn_id, amount, category_id=1, transaction_type=TransactionType.EXPENSE):
    return Transaction(
        id=txn_id,
        scope_id=1,
        category_id=category_id,
        description="txn",
        amount=Decimal(amount),
        transaction_type=transaction_type,
        date=datetime(2024, 3, 1, tzinfo=UTC),
        created_at=datetime(2024, 3, 1, tzinfo=UTC),
    )


class TestPureHelpers:
    def test_sum_of_nothing_is_zero(self):
        assert sum_amounts([]) == Decimal("0")

    def test_sum_keeps_cents_exact(self):
        transactions = [_txn(i, "0.10") for i in range(3)]
        assert sum_amounts(transactions) == Decimal("0.30")

    def test_group_by_category(self):
        transactions = [_txn(1, "10", 1), _txn(2, "5", 2), _txn(3, "2.50", 1)]
        assert group_amounts(transactions, GroupDimension.CATEGORY) == {
            1: Decimal("12.50"),
            2: Decimal("5"),
        }

    def test_group_by_type(self):
        transactions = [
            _txn(1, "100", transaction_type=TransactionType.INCOME),
            _txn(2, "40"),
        ]
        assert group_amounts(transactions, GroupDimension.TYPE) == {
            TransactionType.INCOME: Decimal("100"),
            TransactionType.EXPENSE: Decimal("40"),
        }

    def test_unknown_dimension_is_rejected(self):
        with pytest.raises(AssertionError):
            group_key(_txn(1, "1"), "month")


class TestTotal:
    def test_empty_window_is_zero(self, aggregation, sample_scope, march):
        assert aggregation.total(sample_scope.id, march) == Decimal("0")

    def test_total_filters_by_type(self, aggregation, add_transaction, sample_scope, march):
        add_transaction("60.00")
        add_transaction("1000.00", category="Salary", transaction_type=TransactionType.INCOME)

        assert aggregation.total(
            sample_scope.id, march, transaction_type=TransactionType.EXPENSE
        ) == Decimal("60.00")
        assert aggregation.total(sample_scope.id, march) == Decimal("1060.00")

    def test_total_filters_by_category(
        self, aggregation, add_transaction, sample_scope, sample_categories, march
    ):
        add_transaction("60.00", category="Groceries")
        add_transaction("40.00", category="Restaurants")

        assert aggregation.total(
            sample_scope.id, march, category_id=sample_categories["Restaurants"]
        ) == Decimal("40.00")

    def test_window_bounds_are_inclusive(self, aggregation, add_transaction, sample_scope, march):
        add_transaction("1.00", when=march.start)
        add_transaction("2.00", when=march.end)
        add_transaction("4.00", when=march.start - timedelta(microseconds=1))
        add_transaction("8.00", when=march.end + timedelta(microseconds=1))

        assert aggregation.total(sample_scope.id, march) == Decimal("3.00")

    def test_other_scopes_are_not_counted(
        self, aggregation, add_transaction, sample_scope, scope_service,
        category_service, transaction_service, march,
    ):
        add_transaction("10.00")
        other_scope = scope_service.create_scope("Family", kind="family")
        other_category = category_service.create_category(other_scope, "Groceries")
        transaction_service.create_transaction(
            scope_id=other_scope,
            category_id=other_category,
            description="Other household",
            amount=Decimal("99.00"),
            transaction_type=TransactionType.EXPENSE,
            date=datetime(2024, 3, 10, tzinfo=UTC),
        )

        assert aggregation.total(sample_scope.id, march) == Decimal("10.00")
        assert aggregation.total(other_scope, march) == Decimal("99.00")

    def test_repeated_calls_give_identical_results(
        self, aggregation, add_transaction, sample_scope, march
    ):
        add_transaction("33.33")
        add_transaction("66.67")

        first = aggregation.total_grouped_by(sample_scope.id, march, GroupDimension.CATEGORY)
        second = aggregation.total_grouped_by(sample_scope.id, march, GroupDimension.CATEGORY)
        assert first == second


class TestTotalGroupedBy:
    def test_empty_groups_are_absent(self, aggregation, add_transaction, sample_scope, march):
        add_transaction("25.00", category="Groceries")

        totals = aggregation.total_grouped_by(
            sample_scope.id, march, GroupDimension.TYPE
        )
        assert totals == {TransactionType.EXPENSE: Decimal("25.00")}

    def test_grouped_by_category_restricted_to_expenses(
        self, aggregation, add_transaction, sample_scope, sample_categories, march
    ):
        add_transaction("25.00", category="Groceries")
        add_transaction("15.00", category="Groceries")
        add_transaction("3000.00", category="Salary", transaction_type=TransactionType.INCOME)

        totals = aggregation.total_grouped_by(
            sample_scope.id,
            march,
            GroupDimension.CATEGORY,
            transaction_type=TransactionType.EXPENSE,
        )
        assert totals == {sample_categories["Groceries"]: Decimal("40.00")}
