"""Scope domain service."""

from typing import Optional

from budgetkit.database.base import Database
from budgetkit.domain.entities import Scope, ScopeKind
from budgetkit.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    duplicate_name,
    scope_not_found,
)
from budgetkit.domain.validation import validate_name
from budgetkit.utils.logger import get_logger

logger = get_logger(__name__)


def require_scope(db: Database, scope_id: int) -> Scope:
    """Get a scope or raise NotFoundError."""
    scope = db.get_scope(scope_id)
    if scope is None:
        raise NotFoundError(scope_not_found(scope_id))
    return scope


class ScopeService:
    """Service for managing scopes (users and family groups)."""

    def __init__(self, db: Database):
        """Initialize scope service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_scope(self, name: str, kind: ScopeKind = ScopeKind.USER) -> int:
        """Create a scope.

        Args:
            name: Unique scope name
            kind: "user" or "family"

        Returns:
            Scope ID

        Raises:
            ValidationError: If name is empty or kind is unknown
            ConflictError: If a scope with the same name exists
        """
        name = validate_name(name, "Scope name")
        try:
            kind = ScopeKind(kind)
        except ValueError:
            raise ValidationError(f"Unknown scope kind '{kind}'")

        for scope in self.db.list_scopes():
            if scope.name == name:
                raise ConflictError(duplicate_name("Scope", name))

        scope_id = self.db.create_scope(name=name, kind=kind)
        logger.info("Created %s scope '%s' (ID: %d)", kind.value, name, scope_id)
        return scope_id

    def get_scope(self, scope_id: int) -> Optional[Scope]:
        """Get scope by ID."""
        return self.db.get_scope(scope_id)

    def require_scope(self, scope_id: int) -> Scope:
        """Get scope by ID or raise NotFoundError."""
        return require_scope(self.db, scope_id)

    def list_scopes(self) -> list[Scope]:
        """List all scopes."""
        return self.db.list_scopes()
