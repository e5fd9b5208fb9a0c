"""Add transaction command."""

import click

from budgetkit.cli.error_handling import handle_domain_error
from budgetkit.cli.output import format_instant, format_money
from budgetkit.cli.scope_resolution import (
    resolve_category_or_exit,
    resolve_scope_or_exit,
    scope_option,
)
from budgetkit.domain.entities import TransactionType
from budgetkit.domain.transaction import TransactionService
from budgetkit.utils.amount_parser import parse_amount
from budgetkit.utils.date_parser import parse_instant


@click.command("add")
@scope_option
@click.option("--category", required=True, help="Category name or ID")
@click.option("--amount", required=True, help="Unsigned amount (e.g., 123.45 or $1,200)")
@click.option(
    "--type",
    "transaction_type",
    required=True,
    type=click.Choice([t.value for t in TransactionType], case_sensitive=False),
    help="Whether the money came in or went out",
)
@click.option(
    "--date",
    default="now",
    show_default=True,
    help="Date or date-time (YYYY-MM-DD, 'YYYY-MM-DD HH:MM', 'yesterday', ...)",
)
@click.option("--description", default="", help="Transaction description")
@click.pass_context
def add_transaction(
    ctx,
    scope: str,
    category: str,
    amount: str,
    transaction_type: str,
    date: str,
    description: str,
):
    """Record an income or expense transaction.

    Dates without a time are recorded at 00:00 in the reporting timezone.

    Examples:
        budgetkit add --scope Alex --category Groceries --amount 42.50 --type expense
        budgetkit add --scope Alex --category Salary --amount 3000 --type income --date 2024-03-25
    """
    zone = ctx.obj["timezone"]
    scope_id = resolve_scope_or_exit(ctx, scope)
    category_obj = resolve_category_or_exit(ctx, scope_id, category)

    try:
        txn_date = parse_instant(date, zone)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        txn_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    service = TransactionService(ctx.obj["db"])
    try:
        transaction_id = service.create_transaction(
            scope_id=scope_id,
            category_id=category_obj.id,
            description=description or category_obj.name,
            amount=txn_amount,
            transaction_type=transaction_type.lower(),
            date=txn_date,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created transaction {transaction_id}")
    click.echo(f"  Date: {format_instant(txn_date, zone)}")
    click.echo(f"  Amount: {format_money(txn_amount)} ({transaction_type.lower()})")
    click.echo(f"  Category: {category_obj.name}")
    if description:
        click.echo(f"  Description: {description}")


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_transaction)
