"""Main CLI entry point."""

import click

from budgetkit.config import DB_PATH_ENV, TIMEZONE_ENV, resolve_log_level, resolve_timezone
from budgetkit.database.factories import create_sqlite_database
from budgetkit.utils.logger import configure_logging

# Import and register all commands at module level
from budgetkit.cli.commands import (
    scope,
    category,
    add,
    transaction,
    alert,
    goal,
    report,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help=f"Path to database file (overrides {DB_PATH_ENV} environment variable)",
    envvar=DB_PATH_ENV,
)
@click.option(
    "--timezone",
    "timezone_name",
    help=f"Reporting timezone, e.g. 'Europe/Stockholm' (overrides {TIMEZONE_ENV}; "
    "defaults to the local timezone)",
    envvar=TIMEZONE_ENV,
)
@click.option("--verbose", "-v", count=True, help="Increase log output (-v info, -vv debug)")
@click.pass_context
def cli(ctx, db_path: str | None, timezone_name: str | None, verbose: int):
    """budgetkit - Personal and family budget tracking.

    Record income and expenses, watch spending alerts, track savings goals
    and see monthly reports, per user or per family group.
    """
    ctx.ensure_object(dict)
    configure_logging(resolve_log_level(verbose))

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        try:
            ctx.obj["timezone"] = resolve_timezone(timezone_name)
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="--timezone")

        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
scope.register_commands(cli)
category.register_commands(cli)
add.register_commands(cli)
transaction.register_commands(cli)
alert.register_commands(cli)
goal.register_commands(cli)
report.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
