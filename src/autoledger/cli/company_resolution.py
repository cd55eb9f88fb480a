"""CLI helper for resolving the company argument."""

import click

from autoledger.domain.company import CompanyService
from autoledger.domain.entities import Company
from autoledger.cli.error_handling import handle_domain_error


def resolve_company_or_exit(ctx: click.Context, company: str) -> Company:
    """Resolve a company name or ID, or exit with a CLI error."""
    try:
        return CompanyService(ctx.obj["db"]).resolve_company(company)
    except ValueError as e:
        handle_domain_error(ctx, e)
