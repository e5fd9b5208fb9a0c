"""Monthly report commands."""

from datetime import datetime

import click

from budgetkit.cli.output import (
    category_expense_to_dict,
    echo_json,
    format_money,
    monthly_balance_to_dict,
)
from budgetkit.cli.scope_resolution import resolve_scope_or_exit, scope_option
from budgetkit.domain.reports import ReportService

year_option = click.option(
    "--year", type=click.IntRange(min=1900, max=9999), help="Year (default: current year)"
)
month_option = click.option(
    "--month", type=click.IntRange(1, 12), help="Month 1-12 (default: current month)"
)
json_option = click.option("--json", "as_json", is_flag=True, help="Print JSON instead of text")


def _resolve_month(ctx, year: int | None, month: int | None) -> tuple[int, int]:
    """Fill in missing year/month from today in the reporting timezone."""
    today = datetime.now(ctx.obj["timezone"]).date()
    return (year if year is not None else today.year, month if month is not None else today.month)


@click.group()
def report_group():
    """Monthly reports."""
    pass


@report_group.command("balance")
@scope_option
@year_option
@month_option
@json_option
@click.pass_context
def balance(ctx, scope: str, year: int | None, month: int | None, as_json: bool):
    """Show income, expenses and balance for a month.

    Examples:
        budgetkit report balance --scope Alex
        budgetkit report balance --scope Household --year 2024 --month 3 --json
    """
    scope_id = resolve_scope_or_exit(ctx, scope)
    year, month = _resolve_month(ctx, year, month)
    service = ReportService(ctx.obj["db"], timezone=ctx.obj["timezone"])

    result = service.get_monthly_balance(scope_id, year, month)
    if as_json:
        echo_json(monthly_balance_to_dict(result))
        return

    click.echo(f"\nBalance for {year:04d}-{month:02d}")
    click.echo("-" * 40)
    click.echo(f"{'Income':<12}{format_money(result.income):>20}")
    click.echo(f"{'Expenses':<12}{format_money(result.expenses):>20}")
    click.echo("-" * 40)
    balance_text = format_money(abs(result.balance))
    if result.balance < 0:
        balance_text = "-" + balance_text
    click.echo(f"{'Balance':<12}{balance_text:>20}")


@report_group.command("categories")
@scope_option
@year_option
@month_option
@json_option
@click.pass_context
def categories(ctx, scope: str, year: int | None, month: int | None, as_json: bool):
    """Show expenses per category for a month, largest first."""
    scope_id = resolve_scope_or_exit(ctx, scope)
    year, month = _resolve_month(ctx, year, month)
    service = ReportService(ctx.obj["db"], timezone=ctx.obj["timezone"])

    results = service.get_category_expenses(scope_id, year, month)
    if as_json:
        echo_json([category_expense_to_dict(item) for item in results])
        return

    if not results:
        click.echo(f"No expenses in {year:04d}-{month:02d}.")
        return

    click.echo(f"\nExpenses by category for {year:04d}-{month:02d}")
    click.echo("-" * 56)
    for item in results:
        click.echo(f"{item.category_name:30s}{format_money(item.total):>16}{item.percentage:>8d}%")


def register_commands(cli):
    """Register report commands with main CLI."""
    cli.add_command(report_group, name="report")
