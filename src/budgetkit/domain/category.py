"""Category domain service."""

from typing import Optional

from budgetkit.database.base import Database
from budgetkit.domain.entities import Category, TransactionType
from budgetkit.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    category_name_not_found,
    category_not_found,
    duplicate_name,
)
from budgetkit.domain.scope import require_scope
from budgetkit.domain.validation import validate_name
from budgetkit.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_CATEGORIES = [
    ("Salary", TransactionType.INCOME),
    ("Freelance", TransactionType.INCOME),
    ("Investments", TransactionType.INCOME),
    ("Other Income", TransactionType.INCOME),
    ("Groceries", TransactionType.EXPENSE),
    ("Restaurants", TransactionType.EXPENSE),
    ("Transportation", TransactionType.EXPENSE),
    ("Housing", TransactionType.EXPENSE),
    ("Bills & Utilities", TransactionType.EXPENSE),
    ("Health", TransactionType.EXPENSE),
    ("Entertainment", TransactionType.EXPENSE),
    ("Shopping", TransactionType.EXPENSE),
    ("Education", TransactionType.EXPENSE),
    ("Other", TransactionType.EXPENSE),
]


def parse_transaction_type(value, field: str = "Type") -> TransactionType:
    """Convert a string or enum to TransactionType or raise ValidationError."""
    try:
        return TransactionType(value)
    except ValueError:
        raise ValidationError(f"{field} must be 'income' or 'expense', got '{value}'")


def get_scoped_category(db: Database, scope_id: int, category_id: int) -> Optional[Category]:
    """Get a category only if it belongs to ``scope_id``."""
    category = db.get_category(category_id)
    if category is None or category.scope_id != scope_id:
        return None
    return category


def require_scoped_category(db: Database, scope_id: int, category_id: int) -> Category:
    """Get a category of ``scope_id`` or raise NotFoundError."""
    category = get_scoped_category(db, scope_id, category_id)
    if category is None:
        raise NotFoundError(category_not_found(category_id))
    return category


class CategoryService:
    """Service for managing categories."""

    def __init__(self, db: Database):
        """Initialize category service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_category(
        self,
        scope_id: int,
        name: str,
        category_type: TransactionType = TransactionType.EXPENSE,
    ) -> int:
        """Create a category.

        Args:
            scope_id: Owning scope
            name: Category name, unique within the scope
            category_type: "income" or "expense"

        Returns:
            Category ID

        Raises:
            NotFoundError: If the scope doesn't exist
            ValidationError: If name or type is invalid
            ConflictError: If the scope already has a category with that name
        """
        require_scope(self.db, scope_id)
        name = validate_name(name, "Category name")
        category_type = parse_transaction_type(category_type, "Category type")

        if self.get_category_by_name(scope_id, name) is not None:
            raise ConflictError(duplicate_name("Category", name))

        category_id = self.db.create_category(
            scope_id=scope_id, name=name, category_type=category_type
        )
        logger.info("Created category '%s' (ID: %d) in scope %d", name, category_id, scope_id)
        return category_id

    def get_category(self, scope_id: int, category_id: int) -> Optional[Category]:
        """Get category by ID, or None if it doesn't exist in the scope."""
        return get_scoped_category(self.db, scope_id, category_id)

    def get_category_by_name(self, scope_id: int, name: str) -> Optional[Category]:
        """Get category by name (case-insensitive) within a scope."""
        wanted = name.strip().casefold()
        for category in self.db.list_categories(scope_id):
            if category.name.casefold() == wanted:
                return category
        return None

    def resolve_category(self, scope_id: int, category: str | int) -> Category:
        """Resolve a category name or ID within a scope.

        Raises:
            NotFoundError: If no category matches
        """
        if isinstance(category, int):
            return require_scoped_category(self.db, scope_id, category)

        try:
            category_id = int(category)
        except (ValueError, TypeError):
            category_id = None

        if category_id is not None:
            found = get_scoped_category(self.db, scope_id, category_id)
            if found is not None:
                return found

        found = self.get_category_by_name(scope_id, str(category))
        if found is None:
            raise NotFoundError(category_name_not_found(str(category)))
        return found

    def list_categories(
        self, scope_id: int, category_type: Optional[TransactionType] = None
    ) -> list[Category]:
        """List categories of a scope, optionally filtered by type."""
        if category_type is not None:
            category_type = parse_transaction_type(category_type, "Category type")
        return self.db.list_categories(scope_id, category_type=category_type)

    def update_category(
        self,
        scope_id: int,
        category_id: int,
        name: Optional[str] = None,
        category_type: Optional[TransactionType] = None,
    ) -> None:
        """Rename a category and/or change its type.

        Raises:
            NotFoundError: If the category doesn't exist in the scope
            ConflictError: If the new name is taken by another category
        """
        require_scoped_category(self.db, scope_id, category_id)

        if name is not None:
            name = validate_name(name, "Category name")
            existing = self.get_category_by_name(scope_id, name)
            if existing is not None and existing.id != category_id:
                raise ConflictError(duplicate_name("Category", name))
        if category_type is not None:
            category_type = parse_transaction_type(category_type, "Category type")

        self.db.update_category(category_id, name=name, category_type=category_type)

    def delete_category(self, scope_id: int, category_id: int) -> int:
        """Delete a category together with its transactions.

        Spending alerts that watched the category become all-category alerts.

        Returns:
            Number of transactions deleted with the category
        """
        require_scoped_category(self.db, scope_id, category_id)
        transaction_count = self.db.get_category_transaction_count(category_id)
        self.db.delete_category(category_id)
        logger.info(
            "Deleted category %d and %d transaction(s) from scope %d",
            category_id, transaction_count, scope_id,
        )
        return transaction_count

    def init_default_categories(self, scope_id: int) -> int:
        """Create the default categories that the scope doesn't have yet.

        Returns:
            Number of categories created
        """
        require_scope(self.db, scope_id)
        created = 0
        for name, category_type in DEFAULT_CATEGORIES:
            if self.get_category_by_name(scope_id, name) is None:
                self.db.create_category(scope_id=scope_id, name=name, category_type=category_type)
                created += 1
        logger.info("Created %d default categories in scope %d", created, scope_id)
        return created
