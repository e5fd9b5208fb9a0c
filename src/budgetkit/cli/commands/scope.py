"""Scope management commands."""

import click

from budgetkit.cli.error_handling import handle_domain_error
from budgetkit.domain.entities import ScopeKind
from budgetkit.domain.scope import ScopeService


@click.group()
def scope_group():
    """Manage scopes (a single user or a family group)."""
    pass


@scope_group.command("create")
@click.argument("name", metavar="SCOPE_NAME")
@click.option(
    "--kind",
    type=click.Choice([kind.value for kind in ScopeKind], case_sensitive=False),
    default=ScopeKind.USER.value,
    show_default=True,
    help="Whether the scope belongs to one user or a family group",
)
@click.pass_context
def create_scope(ctx, name: str, kind: str):
    """Create a new scope.

    Examples:
        budgetkit scope create "Alex"
        budgetkit scope create "Household" --kind family
    """
    service = ScopeService(ctx.obj["db"])

    try:
        scope_id = service.create_scope(name=name, kind=ScopeKind(kind.lower()))
        click.echo(f"Created {kind.lower()} scope '{name}' (ID: {scope_id})")
    except ValueError as e:
        handle_domain_error(ctx, e)


@scope_group.command("list")
@click.pass_context
def list_scopes(ctx):
    """List all scopes."""
    service = ScopeService(ctx.obj["db"])

    scopes = service.list_scopes()
    if not scopes:
        click.echo("No scopes found. Run 'scope create' to add one.")
        return

    click.echo("\nScopes:")
    click.echo("-" * 60)
    for item in scopes:
        click.echo(f"ID: {item.id:3d} | {item.name:30s} | {item.kind.value}")


def register_commands(cli):
    """Register scope commands with main CLI."""
    cli.add_command(scope_group, name="scope")
