"""Spending alert domain service and evaluator."""

from datetime import datetime, tzinfo
from decimal import Decimal
from typing import Optional

from budgetkit.config import resolve_timezone
from budgetkit.database.base import Database
from budgetkit.domain.aggregation import AggregationService
from budgetkit.domain.category import get_scoped_category, require_scoped_category
from budgetkit.domain.entities import (
    AlertPeriod,
    AlertStatus,
    SpendingAlert,
    TransactionType,
    percentage_of,
)
from budgetkit.domain.errors import NotFoundError, ValidationError, alert_not_found
from budgetkit.domain.periods import compute_window
from budgetkit.domain.scope import require_scope
from budgetkit.domain.validation import validate_amount, validate_name
from budgetkit.utils.logger import get_logger

logger = get_logger(__name__)

PERCENTAGE_QUANTUM = Decimal("0.01")


def parse_alert_period(value) -> AlertPeriod:
    """Convert a string or enum to AlertPeriod or raise ValidationError."""
    try:
        return AlertPeriod(value)
    except ValueError:
        raise ValidationError(
            f"Period must be one of {', '.join(p.value for p in AlertPeriod)}, got '{value}'"
        )


class SpendingAlertService:
    """Service for managing spending alerts and checking them against spend."""

    def __init__(self, db: Database, timezone: Optional[tzinfo] = None):
        """Initialize spending alert service.

        Args:
            db: Database instance
            timezone: Reporting timezone (defaults to the configured one)
        """
        self.db = db
        self.timezone = timezone if timezone is not None else resolve_timezone()
        self.aggregation = AggregationService(db)

    def create_alert(
        self,
        scope_id: int,
        name: str,
        limit_amount: Decimal,
        period: AlertPeriod = AlertPeriod.MONTHLY,
        category_id: Optional[int] = None,
        is_active: bool = True,
    ) -> int:
        """Create a spending alert.

        Args:
            scope_id: Owning scope
            name: Display name
            limit_amount: Spending limit, greater than zero
            period: Daily, weekly or monthly
            category_id: Optional category to watch; None watches all expenses
            is_active: Whether the alert is checked

        Returns:
            Alert ID

        Raises:
            NotFoundError: If scope or category doesn't exist
            ValidationError: If any field is invalid
        """
        require_scope(self.db, scope_id)
        name = validate_name(name, "Alert name")
        limit_amount = validate_amount(limit_amount, "Limit", allow_zero=False)
        period = parse_alert_period(period)
        if category_id is not None:
            require_scoped_category(self.db, scope_id, category_id)

        alert_id = self.db.create_spending_alert(
            scope_id=scope_id,
            name=name,
            limit_amount=limit_amount,
            period=period,
            category_id=category_id,
            is_active=is_active,
        )
        logger.info("Created %s spending alert '%s' (ID: %d)", period.value, name, alert_id)
        return alert_id

    def get_alert(self, scope_id: int, alert_id: int) -> Optional[SpendingAlert]:
        """Get alert by ID, or None if it doesn't exist in the scope."""
        alert = self.db.get_spending_alert(alert_id)
        if alert is None or alert.scope_id != scope_id:
            return None
        return alert

    def require_alert(self, scope_id: int, alert_id: int) -> SpendingAlert:
        """Get alert by ID or raise NotFoundError."""
        alert = self.get_alert(scope_id, alert_id)
        if alert is None:
            raise NotFoundError(alert_not_found(alert_id))
        return alert

    def list_alerts(self, scope_id: int, active_only: bool = False) -> list[SpendingAlert]:
        """List alerts of a scope, newest first."""
        return self.db.list_spending_alerts(scope_id, active_only=active_only)

    def update_alert(
        self,
        scope_id: int,
        alert_id: int,
        name: Optional[str] = None,
        limit_amount: Optional[Decimal] = None,
        period: Optional[AlertPeriod] = None,
        category_id: Optional[int] = None,
        is_active: Optional[bool] = None,
        clear_category: bool = False,
    ) -> None:
        """Update the provided fields of an alert.

        Args:
            clear_category: If True, the alert watches all expense categories
        """
        self.require_alert(scope_id, alert_id)

        if clear_category and category_id is not None:
            raise ValidationError("Cannot set and clear the category at the same time")
        if name is not None:
            name = validate_name(name, "Alert name")
        if limit_amount is not None:
            limit_amount = validate_amount(limit_amount, "Limit", allow_zero=False)
        if period is not None:
            period = parse_alert_period(period)
        if category_id is not None:
            require_scoped_category(self.db, scope_id, category_id)

        self.db.update_spending_alert(
            alert_id,
            name=name,
            limit_amount=limit_amount,
            period=period,
            category_id=category_id,
            is_active=is_active,
            update_category=clear_category,
        )
        logger.info("Updated spending alert %d in scope %d", alert_id, scope_id)

    def delete_alert(self, scope_id: int, alert_id: int) -> None:
        """Delete an alert.

        Raises:
            NotFoundError: If the alert doesn't exist in the scope
        """
        self.require_alert(scope_id, alert_id)
        self.db.delete_spending_alert(alert_id)
        logger.info("Deleted spending alert %d from scope %d", alert_id, scope_id)

    def check_alerts(self, scope_id: int, now: Optional[datetime] = None) -> list[AlertStatus]:
        """Evaluate every active alert of a scope.

        Inactive alerts are left out of the result entirely.

        Args:
            scope_id: Scope to check
            now: Reference instant; defaults to the current time. Converted
                to the reporting timezone before period boundaries are taken.

        Returns:
            One AlertStatus per active alert, in alert listing order
        """
        now = self.reference_instant(now)
        alerts = self.db.list_spending_alerts(scope_id, active_only=True)
        return [self.evaluate_alert(alert, now) for alert in alerts]

    def evaluate_alert(self, alert: SpendingAlert, now: datetime) -> AlertStatus:
        """Compute spend-to-date for one alert within its open period."""
        window = compute_window(alert.period, now)
        category_id = self.resolve_alert_category(alert)

        current_spending = self.aggregation.total(
            alert.scope_id,
            window,
            transaction_type=TransactionType.EXPENSE,
            category_id=category_id,
        )
        percentage_used = percentage_of(
            current_spending, alert.limit_amount, PERCENTAGE_QUANTUM
        )
        logger.debug(
            "Alert %d (%s) window %s..%s spent %s of %s (%s%%)",
            alert.id, alert.period.value, window.start.isoformat(), window.end.isoformat(),
            current_spending, alert.limit_amount, percentage_used,
        )
        return AlertStatus(
            alert=alert,
            current_spending=current_spending,
            percentage_used=percentage_used,
        )

    def resolve_alert_category(self, alert: SpendingAlert) -> Optional[int]:
        """Return the category filter for an alert.

        An alert whose category no longer exists in its scope is evaluated
        against all expense categories.
        """
        if alert.category_id is None:
            return None
        if get_scoped_category(self.db, alert.scope_id, alert.category_id) is None:
            logger.warning(
                "Spending alert %d refers to missing category %d; checking all categories",
                alert.id, alert.category_id,
            )
            return None
        return alert.category_id

    def reference_instant(self, now: Optional[datetime] = None) -> datetime:
        """Return ``now`` (or the current time) in the reporting timezone.

        Raises:
            ValidationError: If ``now`` is a naive datetime
        """
        if now is None:
            return datetime.now(self.timezone)
        if now.tzinfo is None:
            raise ValidationError("Reference instant must be timezone-aware")
        return now.astimezone(self.timezone)
