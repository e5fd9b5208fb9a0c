"""Category management commands."""

import click

from budgetkit.cli.error_handling import handle_domain_error
from budgetkit.cli.scope_resolution import (
    resolve_category_or_exit,
    resolve_scope_or_exit,
    scope_option,
)
from budgetkit.domain.category import CategoryService
from budgetkit.domain.entities import TransactionType

TYPE_CHOICE = click.Choice([t.value for t in TransactionType], case_sensitive=False)


@click.group()
def category_group():
    """Manage categories."""
    pass


@category_group.command("init")
@scope_option
@click.pass_context
def init_categories(ctx, scope: str):
    """Create the default income and expense categories.

    Categories that already exist (by name) are left untouched.
    """
    scope_id = resolve_scope_or_exit(ctx, scope)
    service = CategoryService(ctx.obj["db"])

    created = service.init_default_categories(scope_id)
    if created == 0:
        click.echo("Default categories already exist.")
    else:
        click.echo(f"Successfully created {created} categories.")


@category_group.command("list")
@scope_option
@click.option("--type", "category_type", type=TYPE_CHOICE, help="Only list this type")
@click.pass_context
def list_categories(ctx, scope: str, category_type: str | None):
    """List categories of a scope."""
    scope_id = resolve_scope_or_exit(ctx, scope)
    service = CategoryService(ctx.obj["db"])

    categories = service.list_categories(
        scope_id, category_type=category_type.lower() if category_type else None
    )
    if not categories:
        click.echo("No categories found. Run 'category init' to create default categories.")
        return

    click.echo("\nCategories:")
    click.echo("-" * 60)
    for cat in categories:
        click.echo(f"ID: {cat.id:3d} | {cat.name:30s} | {cat.category_type.value}")


@category_group.command("create")
@click.argument("name")
@scope_option
@click.option("--type", "category_type", type=TYPE_CHOICE, default="expense", help="Category type (default: expense)")
@click.pass_context
def create_category(ctx, name: str, scope: str, category_type: str):
    """Create a new category."""
    scope_id = resolve_scope_or_exit(ctx, scope)
    service = CategoryService(ctx.obj["db"])

    try:
        category_id = service.create_category(
            scope_id=scope_id, name=name, category_type=category_type.lower()
        )
        click.echo(f"Created category '{name}' (ID: {category_id})")
    except ValueError as e:
        handle_domain_error(ctx, e)


@category_group.command("rename")
@click.argument("category", metavar="CATEGORY")
@click.argument("new_name")
@scope_option
@click.option("--type", "category_type", type=TYPE_CHOICE, help="Also change the category type")
@click.pass_context
def rename_category(ctx, category: str, new_name: str, scope: str, category_type: str | None):
    """Rename a category.

    CATEGORY can be a category name or ID.
    """
    scope_id = resolve_scope_or_exit(ctx, scope)
    category_obj = resolve_category_or_exit(ctx, scope_id, category)
    service = CategoryService(ctx.obj["db"])

    try:
        service.update_category(
            scope_id,
            category_obj.id,
            name=new_name,
            category_type=category_type.lower() if category_type else None,
        )
        click.echo(f"Renamed category '{category_obj.name}' to '{new_name.strip()}'")
    except ValueError as e:
        handle_domain_error(ctx, e)


@category_group.command("delete")
@click.argument("category", metavar="CATEGORY")
@scope_option
@click.pass_context
def delete_category(ctx, category: str, scope: str):
    """Delete a category and all of its transactions.

    Spending alerts watching the category start watching all categories.
    """
    db = ctx.obj["db"]
    scope_id = resolve_scope_or_exit(ctx, scope)
    category_obj = resolve_category_or_exit(ctx, scope_id, category)
    service = CategoryService(db)

    transaction_count = db.get_category_transaction_count(category_obj.id)
    prompt = f"Are you sure you want to delete category '{category_obj.name}' (ID: {category_obj.id})"
    if transaction_count > 0:
        prompt += f" and its {transaction_count} transaction{'s' if transaction_count != 1 else ''}"
    if not click.confirm(prompt + "?"):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_category(scope_id, category_obj.id)
        click.echo(f"Deleted category '{category_obj.name}'")
    except ValueError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register category commands with main CLI."""
    cli.add_command(category_group, name="category")
