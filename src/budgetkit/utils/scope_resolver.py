"""Utility for resolving scope names to IDs."""

from budgetkit.domain.errors import NotFoundError, scope_not_found
from budgetkit.domain.scope import ScopeService


def resolve_scope(scope_service: ScopeService, scope: str | int) -> int:
    """Resolve scope name or ID to scope ID.

    A numeric string is tried as an ID first, then as a name.

    Args:
        scope_service: ScopeService instance
        scope: Scope name (str) or ID (int or string representation of int)

    Returns:
        Scope ID

    Raises:
        NotFoundError: If scope is not found
    """
    if isinstance(scope, int):
        if scope_service.get_scope(scope) is None:
            raise NotFoundError(scope_not_found(scope))
        return scope

    try:
        scope_id = int(scope)
    except (ValueError, TypeError):
        scope_id = None

    if scope_id is not None and scope_service.get_scope(scope_id) is not None:
        return scope_id

    for candidate in scope_service.list_scopes():
        if candidate.name == scope:
            return candidate.id

    raise NotFoundError(f"Scope '{scope}' not found")
