"""Transaction domain service."""

from typing import Optional
from datetime import datetime
from decimal import Decimal

from budgetkit.database.base import Database
from budgetkit.domain.category import parse_transaction_type, require_scoped_category
from budgetkit.domain.entities import Transaction, TransactionType
from budgetkit.domain.errors import NotFoundError, ValidationError, transaction_not_found
from budgetkit.domain.scope import require_scope
from budgetkit.domain.validation import validate_amount, validate_name
from budgetkit.utils.logger import get_logger

logger = get_logger(__name__)


def _require_aware(instant: datetime, field: str = "Date") -> datetime:
    if instant.tzinfo is None:
        raise ValidationError(f"{field} must be timezone-aware")
    return instant


class TransactionService:
    """Service for managing transactions."""

    def __init__(self, db: Database):
        """Initialize transaction service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_transaction(
        self,
        scope_id: int,
        category_id: int,
        description: str,
        amount: Decimal,
        transaction_type: TransactionType,
        date: datetime,
    ) -> int:
        """Create a transaction.

        Args:
            scope_id: Owning scope
            category_id: Category of the same scope
            description: Free-text description
            amount: Non-negative amount with at most two decimals
            transaction_type: "income" or "expense"
            date: Timezone-aware instant of the transaction

        Returns:
            Transaction ID

        Raises:
            NotFoundError: If scope or category doesn't exist
            ValidationError: If any field is invalid
        """
        require_scope(self.db, scope_id)
        require_scoped_category(self.db, scope_id, category_id)
        description = validate_name(description, "Description", max_length=255)
        amount = validate_amount(amount, "Amount")
        transaction_type = parse_transaction_type(transaction_type)
        _require_aware(date)

        transaction_id = self.db.create_transaction(
            scope_id=scope_id,
            category_id=category_id,
            description=description,
            amount=amount,
            transaction_type=transaction_type,
            date=date,
        )
        logger.info(
            "Created %s transaction %d of %s in scope %d",
            transaction_type.value, transaction_id, amount, scope_id,
        )
        return transaction_id

    def get_transaction(self, scope_id: int, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID.

        Args:
            scope_id: Scope the transaction must belong to
            transaction_id: Transaction ID

        Returns:
            Transaction entity or None if not found in the scope
        """
        txn = self.db.get_transaction(transaction_id)
        if txn is None or txn.scope_id != scope_id:
            return None
        return txn

    def require_transaction(self, scope_id: int, transaction_id: int) -> Transaction:
        """Get transaction by ID or raise NotFoundError."""
        txn = self.get_transaction(scope_id, transaction_id)
        if txn is None:
            raise NotFoundError(transaction_not_found(transaction_id))
        return txn

    def list_transactions(
        self,
        scope_id: int,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        category_id: Optional[int] = None,
        transaction_type: Optional[TransactionType] = None,
    ) -> list[Transaction]:
        """List transactions of a scope, newest first.

        Args:
            scope_id: Scope to list
            start: Optional inclusive start instant
            end: Optional inclusive end instant
            category_id: Optional category filter
            transaction_type: Optional income/expense filter
        """
        if start is not None:
            _require_aware(start, "Start")
        if end is not None:
            _require_aware(end, "End")
        if transaction_type is not None:
            transaction_type = parse_transaction_type(transaction_type)
        return self.db.list_transactions(
            scope_id=scope_id,
            start=start,
            end=end,
            transaction_type=transaction_type,
            category_id=category_id,
        )

    def update_transaction(
        self,
        scope_id: int,
        transaction_id: int,
        category_id: Optional[int] = None,
        description: Optional[str] = None,
        amount: Optional[Decimal] = None,
        transaction_type: Optional[TransactionType] = None,
        date: Optional[datetime] = None,
    ) -> None:
        """Update the provided fields of a transaction.

        Raises:
            NotFoundError: If transaction or category doesn't exist in the scope
            ValidationError: If any provided field is invalid
        """
        self.require_transaction(scope_id, transaction_id)

        if category_id is not None:
            require_scoped_category(self.db, scope_id, category_id)
        if description is not None:
            description = validate_name(description, "Description", max_length=255)
        if amount is not None:
            amount = validate_amount(amount, "Amount")
        if transaction_type is not None:
            transaction_type = parse_transaction_type(transaction_type)
        if date is not None:
            _require_aware(date)

        self.db.update_transaction(
            transaction_id,
            category_id=category_id,
            description=description,
            amount=amount,
            transaction_type=transaction_type,
            date=date,
        )
        logger.info("Updated transaction %d in scope %d", transaction_id, scope_id)

    def delete_transaction(self, scope_id: int, transaction_id: int) -> None:
        """Delete a transaction.

        Raises:
            NotFoundError: If the transaction doesn't exist in the scope
        """
        self.require_transaction(scope_id, transaction_id)
        self.db.delete_transaction(transaction_id)
        logger.info("Deleted transaction %d from scope %d", transaction_id, scope_id)
