"""Spending alert commands."""

import click

from budgetkit.cli.error_handling import handle_domain_error
from budgetkit.cli.output import (
    alert_status_to_dict,
    echo_json,
    format_money,
    spending_alert_to_dict,
)
from budgetkit.cli.scope_resolution import (
    resolve_category_or_exit,
    resolve_scope_or_exit,
    scope_option,
)
from budgetkit.domain.alerts import SpendingAlertService
from budgetkit.domain.category import CategoryService
from budgetkit.domain.entities import AlertPeriod
from budgetkit.utils.amount_parser import parse_amount
from budgetkit.utils.date_parser import parse_instant

PERIOD_CHOICE = click.Choice([p.value for p in AlertPeriod], case_sensitive=False)


def _parse_limit_or_exit(ctx, limit: str):
    try:
        return parse_amount(limit)
    except ValueError as e:
        click.echo(f"Error: Invalid limit: {e}", err=True)
        ctx.exit(1)


@click.group()
def alert_group():
    """Manage spending alerts."""
    pass


@alert_group.command("create")
@click.argument("name")
@scope_option
@click.option("--limit", required=True, help="Spending limit for the period")
@click.option("--period", type=PERIOD_CHOICE, default=AlertPeriod.MONTHLY.value, show_default=True)
@click.option("--category", help="Only count expenses of this category (name or ID)")
@click.pass_context
def create_alert(ctx, name: str, scope: str, limit: str, period: str, category: str | None):
    """Create a spending alert.

    Without --category the alert counts all expenses of the scope.

    Examples:
        budgetkit alert create "Food budget" --scope Alex --limit 400 --category Groceries
        budgetkit alert create "Daily cap" --scope Alex --limit 50 --period daily
    """
    scope_id = resolve_scope_or_exit(ctx, scope)
    limit_amount = _parse_limit_or_exit(ctx, limit)

    category_id = None
    if category:
        category_id = resolve_category_or_exit(ctx, scope_id, category).id

    service = SpendingAlertService(ctx.obj["db"], timezone=ctx.obj["timezone"])
    try:
        alert_id = service.create_alert(
            scope_id=scope_id,
            name=name,
            limit_amount=limit_amount,
            period=period.lower(),
            category_id=category_id,
        )
        click.echo(f"Created {period.lower()} alert '{name}' (ID: {alert_id})")
    except ValueError as e:
        handle_domain_error(ctx, e)


@alert_group.command("list")
@scope_option
@click.option("--active-only", is_flag=True, help="Hide inactive alerts")
@click.option("--json", "as_json", is_flag=True, help="Print JSON instead of a table")
@click.pass_context
def list_alerts(ctx, scope: str, active_only: bool, as_json: bool):
    """List spending alerts."""
    scope_id = resolve_scope_or_exit(ctx, scope)
    service = SpendingAlertService(ctx.obj["db"], timezone=ctx.obj["timezone"])

    alerts = service.list_alerts(scope_id, active_only=active_only)
    if as_json:
        echo_json([spending_alert_to_dict(alert) for alert in alerts])
        return

    if not alerts:
        click.echo("No spending alerts found.")
        return

    names = {cat.id: cat.name for cat in CategoryService(ctx.obj["db"]).list_categories(scope_id)}
    click.echo("\nSpending alerts:")
    click.echo("-" * 80)
    for alert in alerts:
        watched = names.get(alert.category_id, "All categories") if alert.category_id else "All categories"
        state = "" if alert.is_active else " (inactive)"
        click.echo(
            f"ID: {alert.id:3d} | {alert.name:24s} | {alert.period.value:7s} | "
            f"{format_money(alert.limit_amount):>12} | {watched}{state}"
        )


@alert_group.command("update")
@click.argument("alert_id", type=int)
@scope_option
@click.option("--name", help="New alert name")
@click.option("--limit", help="New spending limit")
@click.option("--period", type=PERIOD_CHOICE, help="New period")
@click.option("--category", help="Watch this category (name or ID)")
@click.option("--all-categories", is_flag=True, help="Watch all expense categories")
@click.option("--active/--inactive", "is_active", default=None, help="Enable or disable the alert")
@click.pass_context
def update_alert(
    ctx,
    alert_id: int,
    scope: str,
    name: str | None,
    limit: str | None,
    period: str | None,
    category: str | None,
    all_categories: bool,
    is_active: bool | None,
):
    """Update a spending alert.

    Updates only the fields that are provided.
    """
    scope_id = resolve_scope_or_exit(ctx, scope)
    limit_amount = _parse_limit_or_exit(ctx, limit) if limit is not None else None

    category_id = None
    if category is not None:
        category_id = resolve_category_or_exit(ctx, scope_id, category).id

    service = SpendingAlertService(ctx.obj["db"], timezone=ctx.obj["timezone"])
    try:
        service.update_alert(
            scope_id,
            alert_id,
            name=name,
            limit_amount=limit_amount,
            period=period.lower() if period else None,
            category_id=category_id,
            is_active=is_active,
            clear_category=all_categories,
        )
        click.echo(f"Updated alert {alert_id}")
    except ValueError as e:
        handle_domain_error(ctx, e)


@alert_group.command("delete")
@click.argument("alert_id", type=int)
@scope_option
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation prompt")
@click.pass_context
def delete_alert(ctx, alert_id: int, scope: str, yes: bool):
    """Delete a spending alert."""
    scope_id = resolve_scope_or_exit(ctx, scope)
    service = SpendingAlertService(ctx.obj["db"], timezone=ctx.obj["timezone"])

    try:
        alert = service.require_alert(scope_id, alert_id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    if not yes and not click.confirm(f"Delete alert '{alert.name}' (ID: {alert.id})?"):
        click.echo("Deletion cancelled.")
        return

    service.delete_alert(scope_id, alert_id)
    click.echo(f"Deleted alert '{alert.name}'")


@alert_group.command("check")
@scope_option
@click.option("--as-of", help="Check as of this date or date-time instead of now")
@click.option("--json", "as_json", is_flag=True, help="Print JSON instead of a table")
@click.pass_context
def check_alerts(ctx, scope: str, as_of: str | None, as_json: bool):
    """Show spending so far in each active alert's current period.

    Exits with status 0 even when alerts are over their limit.
    """
    zone = ctx.obj["timezone"]
    scope_id = resolve_scope_or_exit(ctx, scope)

    now = None
    if as_of:
        try:
            now = parse_instant(as_of, zone)
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    service = SpendingAlertService(ctx.obj["db"], timezone=zone)
    try:
        statuses = service.check_alerts(scope_id, now=now)
    except ValueError as e:
        handle_domain_error(ctx, e)

    if as_json:
        echo_json([alert_status_to_dict(status) for status in statuses])
        return

    if not statuses:
        click.echo("No active spending alerts.")
        return

    click.echo("\nSpending alerts:")
    click.echo("-" * 80)
    for status in statuses:
        marker = "  OVER LIMIT" if status.is_over_limit else ""
        click.echo(
            f"{status.alert.name:24s} | {status.alert.period.value:7s} | "
            f"{format_money(status.current_spending):>12} of "
            f"{format_money(status.alert.limit_amount):>12} | "
            f"{status.percentage_used}%{marker}"
        )


def register_commands(cli):
    """Register alert commands with main CLI."""
    cli.add_command(alert_group, name="alert")
