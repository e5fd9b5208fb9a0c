"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist in the given scope."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


def scope_not_found(scope_id: int) -> str:
    """Return message for missing scope."""
    return f"Scope {scope_id} not found"


def category_not_found(category_id: int) -> str:
    """Return message for missing category by ID."""
    return f"Category {category_id} not found"


def category_name_not_found(name: str) -> str:
    """Return message for missing category by name."""
    return f"Category '{name}' not found"


def transaction_not_found(transaction_id: int) -> str:
    """Return message for missing transaction."""
    return f"Transaction {transaction_id} not found"


def alert_not_found(alert_id: int) -> str:
    """Return message for missing spending alert."""
    return f"Spending alert {alert_id} not found"


def goal_not_found(goal_id: int) -> str:
    """Return message for missing savings goal."""
    return f"Savings goal {goal_id} not found"


def duplicate_name(kind: str, name: str) -> str:
    """Return message for a name that is already taken."""
    return f"{kind} with name '{name}' already exists"
