"""Fiscal period commands."""

import click

from autoledger.cli.company_resolution import resolve_company_or_exit
from autoledger.cli.error_handling import handle_domain_error
from autoledger.domain.company import CompanyService
from autoledger.utils.date_parser import month_bounds, parse_date


@click.group()
def period_group():
    """Manage fiscal periods."""
    pass


@period_group.command("create")
@click.argument("company")
@click.argument("name")
@click.option("--start", "start_str", help="Start date (e.g., 2024-03-01)")
@click.option("--end", "end_str", help="End date (e.g., 2025-02-28)")
@click.option("--month", "month_str", help="Whole calendar month as YYYY-MM instead of --start/--end")
@click.pass_context
def create_period(ctx, company: str, name: str, start_str: str, end_str: str, month_str: str):
    """Create a fiscal period for COMPANY.

    Examples:
        autoledger period create Acme FY2025 --start 2024-03-01 --end 2025-02-28
        autoledger period create Acme "March 2024" --month 2024-03
    """
    company_obj = resolve_company_or_exit(ctx, company)
    try:
        if month_str:
            start_date, end_date = month_bounds(month_str)
        elif start_str and end_str:
            start_date, end_date = parse_date(start_str), parse_date(end_str)
        else:
            raise ValueError("Provide --month or both --start and --end")
        period_id = CompanyService(ctx.obj["db"]).create_fiscal_period(company_obj.id, name, start_date, end_date)
        click.echo(f"Created fiscal period '{name}' {start_date} to {end_date} (ID: {period_id})")
    except ValueError as e:
        handle_domain_error(ctx, e)


@period_group.command("list")
@click.argument("company")
@click.pass_context
def list_periods(ctx, company: str):
    """List fiscal periods of COMPANY."""
    company_obj = resolve_company_or_exit(ctx, company)
    periods = CompanyService(ctx.obj["db"]).list_fiscal_periods(company_obj.id)
    if not periods:
        click.echo("No fiscal periods found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Start':<12} {'End':<12}")
    click.echo("-" * 52)
    for period in periods:
        click.echo(f"{period.id:<6} {period.name:<20} {str(period.start_date):<12} {str(period.end_date):<12}")


def register_commands(cli):
    """Register fiscal period commands with main CLI."""
    cli.add_command(period_group, name="period")
