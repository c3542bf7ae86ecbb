"""Main CLI entry point."""

import logging

import click
from superjofi.database.factories import create_database, create_sqlite_database
from superjofi.utils.logger import configure_logging

# Import and register all commands at module level
from superjofi.cli.commands import (
    chart,
    init_chart,
    entry,
    ledger,
    report,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to SQLite database file (overrides SUPERJOFI_DB_PATH environment variable)",
    envvar="SUPERJOFI_DB_PATH",
)
@click.option(
    "--db-url",
    help="SQLAlchemy database URL (overrides SUPERJOFI_DB_URL; takes precedence over --db-path)",
    envvar="SUPERJOFI_DB_URL",
)
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr")
@click.pass_context
def cli(ctx, db_path: str | None, db_url: str | None, verbose: bool):
    """SuperJofi - Small business bookkeeping.

    Record income, expenses and purchases against a chart of accounts and
    review monthly ledgers and yearly reports.
    """
    ctx.ensure_object(dict)
    configure_logging(logging.DEBUG if verbose else None)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        if db_url:
            db = create_database(database_url=db_url)
        else:
            db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
chart.register_commands(cli)
init_chart.register_commands(cli)
entry.register_commands(cli)
ledger.register_commands(cli)
report.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
