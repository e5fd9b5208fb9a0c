"""CLI helpers for scope and category resolution."""

from __future__ import annotations

import click

from budgetkit.cli.error_handling import handle_domain_error
from budgetkit.domain.category import CategoryService
from budgetkit.domain.entities import Category
from budgetkit.domain.scope import ScopeService
from budgetkit.utils.scope_resolver import resolve_scope

SCOPE_ENV = "BUDGETKIT_SCOPE"

scope_option = click.option(
    "--scope",
    required=True,
    envvar=SCOPE_ENV,
    help=f"Scope name or ID (or set {SCOPE_ENV})",
)


def resolve_scope_or_exit(ctx: click.Context, scope: str | int) -> int:
    """Resolve scope name or ID, or exit with a CLI error.

    This keeps error messaging and exit behavior consistent across commands.
    """
    try:
        return resolve_scope(ScopeService(ctx.obj["db"]), scope)
    except ValueError as exc:
        handle_domain_error(ctx, exc)


def resolve_category_or_exit(ctx: click.Context, scope_id: int, category: str) -> Category:
    """Resolve category name or ID within a scope, or exit with a CLI error."""
    try:
        return CategoryService(ctx.obj["db"]).resolve_category(scope_id, category)
    except ValueError as exc:
        handle_domain_error(ctx, exc)
