"""Report commands."""

import click

from autoledger.cli.company_resolution import resolve_company_or_exit
from autoledger.cli.error_handling import handle_domain_error
from autoledger.domain.report import ReportService, format_coverage_report, format_unclassified


@click.command("report")
@click.argument("company")
@click.option("--unclassified", is_flag=True, help="List unclassified transactions per period instead")
@click.pass_context
def report(ctx, company: str, unclassified: bool):
    """Show classification coverage for COMPANY."""
    company_obj = resolve_company_or_exit(ctx, company)
    service = ReportService(ctx.obj["db"])
    try:
        if unclassified:
            click.echo(format_unclassified(service.unclassified_by_period(company_obj.id)))
        else:
            click.echo(format_coverage_report(service.coverage_report(company_obj.id)))
    except ValueError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register report commands with main CLI."""
    cli.add_command(report)
