"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import date, datetime
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from budgetkit.domain.entities import (
    Scope,
    Category,
    Transaction,
    SpendingAlert,
    SavingsGoal,
    TransactionType,
    AlertPeriod,
    ScopeKind,
)


class Database(ABC):
    """Abstract database interface for budgetkit.

    Every read is a single query against the store. Instants passed in must be
    timezone-aware; instants returned are aware UTC datetimes.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Scope operations
    @abstractmethod
    def create_scope(self, name: str, kind: ScopeKind = ScopeKind.USER) -> int:
        """Create a scope. Returns scope ID."""
        pass

    @abstractmethod
    def get_scope(self, scope_id: int) -> Optional[Scope]:
        """Get scope by ID."""
        pass

    @abstractmethod
    def list_scopes(self) -> list[Scope]:
        """List all scopes ordered by name."""
        pass

    # Category operations
    @abstractmethod
    def create_category(
        self,
        scope_id: int,
        name: str,
        category_type: TransactionType = TransactionType.EXPENSE,
    ) -> int:
        """Create a category. Returns category ID."""
        pass

    @abstractmethod
    def get_category(self, category_id: int) -> Optional[Category]:
        """Get category by ID."""
        pass

    @abstractmethod
    def list_categories(
        self, scope_id: int, category_type: Optional[TransactionType] = None
    ) -> list[Category]:
        """List categories of a scope, optionally filtered by type."""
        pass

    @abstractmethod
    def update_category(
        self,
        category_id: int,
        name: Optional[str] = None,
        category_type: Optional[TransactionType] = None,
    ) -> None:
        """Update category fields."""
        pass

    @abstractmethod
    def delete_category(self, category_id: int) -> None:
        """Delete a category, its transactions, and detach alerts using it."""
        pass

    @abstractmethod
    def get_category_transaction_count(self, category_id: int) -> int:
        """Get count of transactions filed under a category."""
        pass

    # Transaction operations
    @abstractmethod
    def create_transaction(
        self,
        scope_id: int,
        category_id: int,
        description: str,
        amount: Decimal,
        transaction_type: TransactionType,
        date: datetime,
    ) -> int:
        """Create a transaction. Returns transaction ID."""
        pass

    @abstractmethod
    def get_transaction(self, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID."""
        pass

    @abstractmethod
    def update_transaction(
        self,
        transaction_id: int,
        category_id: Optional[int] = None,
        description: Optional[str] = None,
        amount: Optional[Decimal] = None,
        transaction_type: Optional[TransactionType] = None,
        date: Optional[datetime] = None,
    ) -> None:
        """Update transaction fields that are not None."""
        pass

    @abstractmethod
    def delete_transaction(self, transaction_id: int) -> None:
        """Delete a transaction."""
        pass

    @abstractmethod
    def list_transactions(
        self,
        scope_id: int,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        transaction_type: Optional[TransactionType] = None,
        category_id: Optional[int] = None,
    ) -> list[Transaction]:
        """List transactions of a scope with optional filters.

        Args:
            scope_id: Scope the transactions belong to
            start: Optional inclusive lower bound on the transaction instant
            end: Optional inclusive upper bound on the transaction instant
            transaction_type: Optional income/expense filter
            category_id: Optional category ID filter

        Returns:
            Transactions ordered newest first
        """
        pass

    # Spending alert operations
    @abstractmethod
    def create_spending_alert(
        self,
        scope_id: int,
        name: str,
        limit_amount: Decimal,
        period: AlertPeriod = AlertPeriod.MONTHLY,
        category_id: Optional[int] = None,
        is_active: bool = True,
    ) -> int:
        """Create a spending alert. Returns alert ID."""
        pass

    @abstractmethod
    def get_spending_alert(self, alert_id: int) -> Optional[SpendingAlert]:
        """Get spending alert by ID."""
        pass

    @abstractmethod
    def list_spending_alerts(
        self, scope_id: int, active_only: bool = False
    ) -> list[SpendingAlert]:
        """List spending alerts of a scope, newest first."""
        pass

    @abstractmethod
    def update_spending_alert(
        self,
        alert_id: int,
        name: Optional[str] = None,
        limit_amount: Optional[Decimal] = None,
        period: Optional[AlertPeriod] = None,
        category_id: Optional[int] = None,
        is_active: Optional[bool] = None,
        update_category: bool = False,
    ) -> None:
        """Update spending alert fields.

        Args:
            update_category: If True, update category_id even if it's None (to clear it)
        """
        pass

    @abstractmethod
    def delete_spending_alert(self, alert_id: int) -> None:
        """Delete a spending alert."""
        pass

    # Savings goal operations
    @abstractmethod
    def create_savings_goal(
        self,
        scope_id: int,
        name: str,
        target_amount: Decimal,
        current_amount: Decimal = Decimal("0"),
        target_date: Optional[date] = None,
        is_active: bool = True,
    ) -> int:
        """Create a savings goal. Returns goal ID."""
        pass

    @abstractmethod
    def get_savings_goal(self, goal_id: int) -> Optional[SavingsGoal]:
        """Get savings goal by ID."""
        pass

    @abstractmethod
    def list_savings_goals(self, scope_id: int) -> list[SavingsGoal]:
        """List savings goals of a scope, newest first."""
        pass

    @abstractmethod
    def update_savings_goal(
        self,
        goal_id: int,
        name: Optional[str] = None,
        target_amount: Optional[Decimal] = None,
        current_amount: Optional[Decimal] = None,
        target_date: Optional[date] = None,
        is_active: Optional[bool] = None,
        update_target_date: bool = False,
    ) -> None:
        """Update savings goal fields.

        Args:
            update_target_date: If True, update target_date even if it's None (to clear it)
        """
        pass

    @abstractmethod
    def delete_savings_goal(self, goal_id: int) -> None:
        """Delete a savings goal."""
        pass
