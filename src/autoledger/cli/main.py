"""Main CLI entry point."""

import click

from autoledger.config import load_settings
from autoledger.database.factories import create_database
from autoledger.logging_config import configure_logging

# Import and register all commands at module level
from autoledger.cli.commands import (
    account,
    classification,
    company,
    period,
    report,
    rule,
    transaction,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to SQLite database file (overrides AUTOLEDGER_DB_PATH environment variable)",
    envvar="AUTOLEDGER_DB_PATH",
)
@click.option(
    "--database-url",
    help="SQLAlchemy database URL; takes precedence over --db-path",
    envvar="AUTOLEDGER_DATABASE_URL",
)
@click.option(
    "--control-account",
    help="Bank/control account code used for postings (default: 1100)",
    envvar="AUTOLEDGER_CONTROL_ACCOUNT",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Minimum log level (default: WARNING)",
    envvar="AUTOLEDGER_LOG_LEVEL",
)
@click.option("--log-json", is_flag=True, help="Emit logs as JSON lines", envvar="AUTOLEDGER_LOG_JSON")
@click.pass_context
def cli(
    ctx,
    db_path: str | None,
    database_url: str | None,
    control_account: str | None,
    log_level: str | None,
    log_json: bool,
):
    """Autoledger - rule-based bank transaction classification and posting.

    Classifies bank statement lines against a priority-ordered rule catalog
    and posts them as balanced double-entry journal entries.
    """
    ctx.ensure_object(dict)
    settings = load_settings()

    configure_logging(
        level=log_level or settings.log_level,
        json=log_json or settings.log_json,
    )
    ctx.obj["control_account"] = control_account or settings.control_account

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_database(database_url=database_url, database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
company.register_commands(cli)
period.register_commands(cli)
account.register_commands(cli)
rule.register_commands(cli)
transaction.register_commands(cli)
classification.register_commands(cli)
report.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
