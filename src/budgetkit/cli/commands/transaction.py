"""Transaction management commands."""

import click

from budgetkit.cli.error_handling import handle_domain_error
from budgetkit.cli.output import format_instant, format_money
from budgetkit.cli.scope_resolution import (
    resolve_category_or_exit,
    resolve_scope_or_exit,
    scope_option,
)
from budgetkit.domain.category import CategoryService
from budgetkit.domain.entities import TransactionType
from budgetkit.domain.periods import end_of_day, start_of_day
from budgetkit.domain.transaction import TransactionService
from budgetkit.utils.amount_parser import parse_amount
from budgetkit.utils.date_parser import parse_date, parse_instant

TYPE_CHOICE = click.Choice([t.value for t in TransactionType], case_sensitive=False)


@click.group()
def transaction_group():
    """Manage transactions."""
    pass


@transaction_group.command("list")
@scope_option
@click.option("--start-date", help="Start date (YYYY-MM-DD or relative like 'last month', 'this year')")
@click.option("--end-date", help="End date (YYYY-MM-DD or relative like 'today', 'this month')")
@click.option("--category", help="Category name or ID")
@click.option("--type", "transaction_type", type=TYPE_CHOICE, help="Only show income or expenses")
@click.pass_context
def list_transactions(
    ctx,
    scope: str,
    start_date: str | None,
    end_date: str | None,
    category: str | None,
    transaction_type: str | None,
):
    """View transactions with optional filters.

    Both dates are inclusive whole days in the reporting timezone.
    """
    zone = ctx.obj["timezone"]
    scope_id = resolve_scope_or_exit(ctx, scope)
    service = TransactionService(ctx.obj["db"])
    category_service = CategoryService(ctx.obj["db"])

    start = None
    if start_date:
        try:
            start = start_of_day(parse_date(start_date), zone)
        except ValueError as e:
            click.echo(f"Error: Invalid start date: {e}", err=True)
            ctx.exit(1)

    end = None
    if end_date:
        try:
            end = end_of_day(parse_date(end_date), zone)
        except ValueError as e:
            click.echo(f"Error: Invalid end date: {e}", err=True)
            ctx.exit(1)

    category_id = None
    if category:
        category_id = resolve_category_or_exit(ctx, scope_id, category).id

    try:
        transactions = service.list_transactions(
            scope_id,
            start=start,
            end=end,
            category_id=category_id,
            transaction_type=transaction_type.lower() if transaction_type else None,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    if not transactions:
        click.echo("No transactions found.")
        return

    category_names = {cat.id: cat.name for cat in category_service.list_categories(scope_id)}

    click.echo(f"\n{'ID':>5}  {'Date':16}  {'Type':7}  {'Amount':>14}  {'Category':20}  Description")
    click.echo("-" * 90)
    for txn in transactions:
        click.echo(
            f"{txn.id:5d}  {format_instant(txn.date, zone):16}  {txn.transaction_type.value:7}  "
            f"{format_money(txn.amount):>14}  "
            f"{category_names.get(txn.category_id, 'Unknown')[:20]:20}  {txn.description}"
        )
    click.echo(f"\n{len(transactions)} transaction(s)")


@transaction_group.command("update")
@click.argument("transaction_id", type=int)
@scope_option
@click.option("--category", help="Category name or ID")
@click.option("--amount", help="Unsigned amount (e.g., 123.45)")
@click.option("--type", "transaction_type", type=TYPE_CHOICE, help="Income or expense")
@click.option("--date", help="Date or date-time of the transaction")
@click.option("--description", help="Transaction description")
@click.pass_context
def update_transaction(
    ctx,
    transaction_id: int,
    scope: str,
    category: str | None,
    amount: str | None,
    transaction_type: str | None,
    date: str | None,
    description: str | None,
) -> None:
    """Update a transaction.

    Updates only the fields that are provided.

    Examples:
        budgetkit transaction update 12 --scope Alex --amount 75.00
        budgetkit transaction update 12 --scope Alex --category Restaurants
    """
    scope_id = resolve_scope_or_exit(ctx, scope)
    service = TransactionService(ctx.obj["db"])

    category_id = None
    if category is not None:
        category_id = resolve_category_or_exit(ctx, scope_id, category).id

    txn_amount = None
    if amount is not None:
        try:
            txn_amount = parse_amount(amount)
        except ValueError as e:
            click.echo(f"Error: Invalid amount format: {e}", err=True)
            ctx.exit(1)

    txn_date = None
    if date is not None:
        try:
            txn_date = parse_instant(date, ctx.obj["timezone"])
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    try:
        service.update_transaction(
            scope_id,
            transaction_id,
            category_id=category_id,
            description=description,
            amount=txn_amount,
            transaction_type=transaction_type.lower() if transaction_type else None,
            date=txn_date,
        )
        click.echo(f"Updated transaction {transaction_id}")
    except ValueError as e:
        handle_domain_error(ctx, e)


@transaction_group.command("delete")
@click.argument("transaction_id", type=int)
@scope_option
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation prompt")
@click.pass_context
def delete_transaction(ctx, transaction_id: int, scope: str, yes: bool):
    """Delete a transaction."""
    scope_id = resolve_scope_or_exit(ctx, scope)
    service = TransactionService(ctx.obj["db"])

    try:
        txn = service.require_transaction(scope_id, transaction_id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    if not yes and not click.confirm(
        f"Delete transaction {txn.id} ({format_money(txn.amount)}, {txn.description})?"
    ):
        click.echo("Deletion cancelled.")
        return

    service.delete_transaction(scope_id, transaction_id)
    click.echo(f"Deleted transaction {transaction_id}")


def register_commands(cli):
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
