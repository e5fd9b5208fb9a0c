"""Savings goal commands."""

from decimal import Decimal

import click

from budgetkit.cli.error_handling import handle_domain_error
from budgetkit.cli.output import format_money
from budgetkit.cli.scope_resolution import resolve_scope_or_exit, scope_option
from budgetkit.domain.goals import SavingsGoalService
from budgetkit.utils.amount_parser import parse_amount
from budgetkit.utils.date_parser import parse_date


def _parse_amount_or_exit(ctx, value: str, label: str) -> Decimal:
    try:
        return parse_amount(value)
    except ValueError as e:
        click.echo(f"Error: Invalid {label}: {e}", err=True)
        ctx.exit(1)


def _parse_date_or_exit(ctx, value: str):
    try:
        return parse_date(value)
    except ValueError as e:
        click.echo(f"Error: Invalid target date: {e}", err=True)
        ctx.exit(1)


@click.group()
def goal_group():
    """Manage savings goals."""
    pass


@goal_group.command("create")
@click.argument("name")
@scope_option
@click.option("--target", required=True, help="Amount to save")
@click.option("--current", default="0", help="Amount already saved (default: 0)")
@click.option("--target-date", help="Date to reach the goal by")
@click.pass_context
def create_goal(ctx, name: str, scope: str, target: str, current: str, target_date: str | None):
    """Create a savings goal.

    Examples:
        budgetkit goal create "Vacation" --scope Alex --target 2000 --target-date 2025-06-01
    """
    scope_id = resolve_scope_or_exit(ctx, scope)
    target_amount = _parse_amount_or_exit(ctx, target, "target amount")
    current_amount = _parse_amount_or_exit(ctx, current, "current amount")
    parsed_date = _parse_date_or_exit(ctx, target_date) if target_date else None

    service = SavingsGoalService(ctx.obj["db"])
    try:
        goal_id = service.create_goal(
            scope_id=scope_id,
            name=name,
            target_amount=target_amount,
            current_amount=current_amount,
            target_date=parsed_date,
        )
        click.echo(f"Created savings goal '{name}' (ID: {goal_id})")
    except ValueError as e:
        handle_domain_error(ctx, e)


@goal_group.command("list")
@scope_option
@click.option("--active-only", is_flag=True, help="Hide inactive goals")
@click.pass_context
def list_goals(ctx, scope: str, active_only: bool):
    """List savings goals with their progress."""
    scope_id = resolve_scope_or_exit(ctx, scope)
    service = SavingsGoalService(ctx.obj["db"])

    goals = service.list_goals(scope_id, active_only=active_only)
    if not goals:
        click.echo("No savings goals found.")
        return

    click.echo("\nSavings goals:")
    click.echo("-" * 80)
    for goal in goals:
        due = f" | by {goal.target_date.isoformat()}" if goal.target_date else ""
        state = "" if goal.is_active else " (inactive)"
        click.echo(
            f"ID: {goal.id:3d} | {goal.name:24s} | "
            f"{format_money(goal.current_amount)} of {format_money(goal.target_amount)} "
            f"({goal.progress}%){due}{state}"
        )


@goal_group.command("contribute")
@click.argument("goal_id", type=int)
@click.argument("amount")
@scope_option
@click.pass_context
def contribute(ctx, goal_id: int, amount: str, scope: str):
    """Add AMOUNT to a savings goal."""
    scope_id = resolve_scope_or_exit(ctx, scope)
    contribution = _parse_amount_or_exit(ctx, amount, "amount")

    service = SavingsGoalService(ctx.obj["db"])
    try:
        goal = service.contribute(scope_id, goal_id, contribution)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(
        f"Saved {format_money(contribution)} towards '{goal.name}': "
        f"{format_money(goal.current_amount)} of {format_money(goal.target_amount)} "
        f"({goal.progress}%)"
    )


@goal_group.command("update")
@click.argument("goal_id", type=int)
@scope_option
@click.option("--name", help="New goal name")
@click.option("--target", help="New target amount")
@click.option("--current", help="Replace the saved amount")
@click.option("--target-date", help="New target date")
@click.option("--no-target-date", is_flag=True, help="Remove the target date")
@click.option("--active/--inactive", "is_active", default=None, help="Enable or disable the goal")
@click.pass_context
def update_goal(
    ctx,
    goal_id: int,
    scope: str,
    name: str | None,
    target: str | None,
    current: str | None,
    target_date: str | None,
    no_target_date: bool,
    is_active: bool | None,
):
    """Update a savings goal.

    Updates only the fields that are provided.
    """
    scope_id = resolve_scope_or_exit(ctx, scope)
    target_amount = _parse_amount_or_exit(ctx, target, "target amount") if target is not None else None
    current_amount = _parse_amount_or_exit(ctx, current, "current amount") if current is not None else None
    parsed_date = _parse_date_or_exit(ctx, target_date) if target_date else None

    service = SavingsGoalService(ctx.obj["db"])
    try:
        service.update_goal(
            scope_id,
            goal_id,
            name=name,
            target_amount=target_amount,
            current_amount=current_amount,
            target_date=parsed_date,
            is_active=is_active,
            clear_target_date=no_target_date,
        )
        click.echo(f"Updated savings goal {goal_id}")
    except ValueError as e:
        handle_domain_error(ctx, e)


@goal_group.command("delete")
@click.argument("goal_id", type=int)
@scope_option
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation prompt")
@click.pass_context
def delete_goal(ctx, goal_id: int, scope: str, yes: bool):
    """Delete a savings goal."""
    scope_id = resolve_scope_or_exit(ctx, scope)
    service = SavingsGoalService(ctx.obj["db"])

    try:
        goal = service.require_goal(scope_id, goal_id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    if not yes and not click.confirm(f"Delete savings goal '{goal.name}' (ID: {goal.id})?"):
        click.echo("Deletion cancelled.")
        return

    service.delete_goal(scope_id, goal_id)
    click.echo(f"Deleted savings goal '{goal.name}'")


def register_commands(cli):
    """Register goal commands with main CLI."""
    cli.add_command(goal_group, name="goal")
