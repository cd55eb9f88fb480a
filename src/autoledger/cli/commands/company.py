"""Company management commands."""

import click

from autoledger.cli.error_handling import handle_domain_error
from autoledger.domain.account import AccountService
from autoledger.domain.company import CompanyService
from autoledger.domain.rule import RuleService


@click.group()
def company_group():
    """Manage companies."""
    pass


@company_group.command("create")
@click.argument("name")
@click.option("--standard", is_flag=True, help="Also install the standard chart of accounts and rules")
@click.pass_context
def create_company(ctx, name: str, standard: bool):
    """Create a new company."""
    db = ctx.obj["db"]
    try:
        company_id = CompanyService(db).create_company(name)
        click.echo(f"Created company '{name}' (ID: {company_id})")
        if standard:
            accounts = AccountService(db).install_standard_chart(company_id)
            rules = RuleService(db).install_standard_rules(company_id)
            click.echo(f"Installed {accounts} accounts and {rules} rules")
    except ValueError as e:
        handle_domain_error(ctx, e)


@company_group.command("list")
@click.pass_context
def list_companies(ctx):
    """List all companies."""
    companies = CompanyService(ctx.obj["db"]).list_companies()
    if not companies:
        click.echo("No companies found.")
        return

    click.echo(f"{'ID':<6} {'Name'}")
    click.echo("-" * 40)
    for company in companies:
        click.echo(f"{company.id:<6} {company.name}")


def register_commands(cli):
    """Register company commands with main CLI."""
    cli.add_command(company_group, name="company")
