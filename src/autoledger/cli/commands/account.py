"""Chart of accounts commands."""

import click

from autoledger.cli.company_resolution import resolve_company_or_exit
from autoledger.cli.error_handling import handle_domain_error
from autoledger.domain.account import AccountService


@click.group()
def account_group():
    """Manage the chart of accounts."""
    pass


@account_group.command("create")
@click.argument("company")
@click.argument("code")
@click.argument("name")
@click.option("--category", help="Account category (e.g., 'Operating Expenses')")
@click.option("--description", help="Free-text description")
@click.pass_context
def create_account(ctx, company: str, code: str, name: str, category: str, description: str):
    """Create account CODE named NAME for COMPANY."""
    company_obj = resolve_company_or_exit(ctx, company)
    try:
        account_id = AccountService(ctx.obj["db"]).create_account(
            company_obj.id, code, name, category=category, description=description
        )
        click.echo(f"Created account [{code}] {name} (ID: {account_id})")
    except ValueError as e:
        handle_domain_error(ctx, e)


@account_group.command("list")
@click.argument("company")
@click.pass_context
def list_accounts(ctx, company: str):
    """List accounts of COMPANY."""
    company_obj = resolve_company_or_exit(ctx, company)
    accounts = AccountService(ctx.obj["db"]).list_accounts(company_obj.id)
    if not accounts:
        click.echo("No accounts found. Run 'account install-standard' to create the standard chart.")
        return

    click.echo(f"{'ID':<6} {'Code':<10} {'Name':<40} {'Category':<25} Active")
    click.echo("-" * 90)
    for account in accounts:
        active = "yes" if account.is_active else "no"
        click.echo(f"{account.id:<6} {account.code:<10} {account.name:<40} {(account.category or ''):<25} {active}")


@account_group.command("install-standard")
@click.argument("company")
@click.pass_context
def install_standard(ctx, company: str):
    """Install the standard chart of accounts for COMPANY."""
    company_obj = resolve_company_or_exit(ctx, company)
    try:
        created = AccountService(ctx.obj["db"]).install_standard_chart(company_obj.id)
        click.echo(f"Created {created} accounts for '{company_obj.name}'")
    except ValueError as e:
        handle_domain_error(ctx, e)


def _set_active(ctx, company: str, code: str, is_active: bool) -> None:
    company_obj = resolve_company_or_exit(ctx, company)
    try:
        AccountService(ctx.obj["db"]).set_active(company_obj.id, code, is_active)
        state = "activated" if is_active else "deactivated"
        click.echo(f"Account {code} {state}")
    except ValueError as e:
        handle_domain_error(ctx, e)


@account_group.command("activate")
@click.argument("company")
@click.argument("code")
@click.pass_context
def activate_account(ctx, company: str, code: str):
    """Activate account CODE of COMPANY."""
    _set_active(ctx, company, code, True)


@account_group.command("deactivate")
@click.argument("company")
@click.argument("code")
@click.pass_context
def deactivate_account(ctx, company: str, code: str):
    """Deactivate account CODE of COMPANY; rules targeting it stop resolving."""
    _set_active(ctx, company, code, False)


def register_commands(cli):
    """Register account commands with main CLI."""
    cli.add_command(account_group, name="account")
