"""Monthly analytics: balance and expense breakdown by category."""

from datetime import tzinfo
from typing import Optional

from budgetkit.config import resolve_timezone
from budgetkit.database.base import Database
from budgetkit.domain.aggregation import AggregationService, ZERO
from budgetkit.domain.entities import (
    CategoryExpense,
    GroupDimension,
    MonthlyBalance,
    TransactionType,
    percentage_of,
)
from budgetkit.domain.periods import month_window
from budgetkit.utils.logger import get_logger

logger = get_logger(__name__)

UNKNOWN_CATEGORY_NAME = "Unknown"


class ReportService:
    """Service for monthly reports.

    Year and month are expected to be validated by the caller (month in
    1..12); they are interpreted on the reporting timezone's calendar.
    """

    def __init__(self, db: Database, timezone: Optional[tzinfo] = None):
        """Initialize report service.

        Args:
            db: Database instance
            timezone: Reporting timezone (defaults to the configured one)
        """
        self.db = db
        self.timezone = timezone if timezone is not None else resolve_timezone()
        self.aggregation = AggregationService(db)

    def get_monthly_balance(self, scope_id: int, year: int, month: int) -> MonthlyBalance:
        """Get income, expenses and balance for a calendar month.

        Returns:
            MonthlyBalance where balance = income - expenses (may be negative)
        """
        window = month_window(year, month, self.timezone)
        totals = self.aggregation.total_grouped_by(scope_id, window, GroupDimension.TYPE)

        income = totals.get(TransactionType.INCOME, ZERO)
        expenses = totals.get(TransactionType.EXPENSE, ZERO)
        logger.debug(
            "Monthly balance for scope %d %04d-%02d: income=%s expenses=%s",
            scope_id, year, month, income, expenses,
        )
        return MonthlyBalance(income=income, expenses=expenses, balance=income - expenses)

    def get_category_expenses(
        self, scope_id: int, year: int, month: int
    ) -> list[CategoryExpense]:
        """Get expense totals per category for a calendar month.

        Each entry carries its share of the month's expenses as an integer
        percentage rounded half-up, so the shares may not add up to exactly
        100 when there are several categories.

        Returns:
            Entries ordered by total descending, ties by category ID ascending;
            empty when the month has no expenses
        """
        window = month_window(year, month, self.timezone)
        totals = self.aggregation.total_grouped_by(
            scope_id,
            window,
            GroupDimension.CATEGORY,
            transaction_type=TransactionType.EXPENSE,
        )
        if not totals:
            return []

        names = {cat.id: cat.name for cat in self.db.list_categories(scope_id)}
        total_expenses = sum(totals.values(), ZERO)

        results = [
            CategoryExpense(
                category_id=category_id,
                category_name=names.get(category_id, UNKNOWN_CATEGORY_NAME),
                total=total,
                percentage=int(percentage_of(total, total_expenses)),
            )
            for category_id, total in totals.items()
        ]
        results.sort(key=lambda item: (-item.total, item.category_id))
        return results
