"""Batch classification, posting and override commands."""

import click

from autoledger.cli.company_resolution import resolve_company_or_exit
from autoledger.cli.error_handling import handle_domain_error
from autoledger.config import SYSTEM_ACTOR
from autoledger.domain import errors
from autoledger.domain.entities import BatchResult
from autoledger.domain.override import ManualOverrideService
from autoledger.domain.resync import ResyncService

actor_option = click.option("--actor", default=SYSTEM_ACTOR, help="Name recorded on changes (default: SYSTEM)")


def _echo_failures(result: BatchResult) -> None:
    for message in result.errors:
        click.echo(f"✗ {message}")


def _echo_stale(result: BatchResult) -> None:
    if result.stale_postings:
        click.echo(
            f"Warning: {result.stale_postings} posted transactions changed account; "
            "use override to move their journal lines"
        )


def _service(ctx) -> ResyncService:
    return ResyncService(ctx.obj["db"], control_account_code=ctx.obj["control_account"])


@click.command("classify")
@click.argument("company")
@actor_option
@click.pass_context
def classify(ctx, company: str, actor: str):
    """Classify all unclassified transactions of COMPANY."""
    company_obj = resolve_company_or_exit(ctx, company)
    try:
        result = _service(ctx).classify_all_unclassified(company_obj.id, actor=actor)
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    _echo_failures(result)
    click.echo(
        f"Classified {result.succeeded} of {result.processed} transactions "
        f"({result.unmatched} unmatched, {result.failed} failed)"
    )
    if result.failed:
        ctx.exit(1)


@click.command("reclassify")
@click.argument("company")
@actor_option
@click.pass_context
def reclassify(ctx, company: str, actor: str):
    """Re-run classification over every transaction of COMPANY."""
    company_obj = resolve_company_or_exit(ctx, company)
    try:
        result = _service(ctx).reclassify_all(company_obj.id, actor=actor)
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    _echo_failures(result)
    click.echo(
        f"Reclassified {result.succeeded} of {result.processed} transactions "
        f"({result.unmatched} unmatched, {result.failed} failed)"
    )
    _echo_stale(result)
    if result.failed:
        ctx.exit(1)


@click.command("post")
@click.argument("company")
@actor_option
@click.pass_context
def post(ctx, company: str, actor: str):
    """Generate journal entries for classified transactions of COMPANY."""
    company_obj = resolve_company_or_exit(ctx, company)
    try:
        result = _service(ctx).generate_journal_entries_for_classified(company_obj.id, actor=actor)
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    _echo_failures(result)
    click.echo(f"Generated {result.succeeded} journal entries ({result.failed} failed)")
    if result.failed:
        ctx.exit(1)


@click.command("regenerate")
@click.argument("company")
@actor_option
@click.pass_context
def regenerate(ctx, company: str, actor: str):
    """Reclassify all transactions of COMPANY, then post the unposted ones."""
    company_obj = resolve_company_or_exit(ctx, company)
    try:
        result = _service(ctx).regenerate_all(company_obj.id, actor=actor)
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    _echo_failures(result.reclassified)
    _echo_failures(result.posted)
    _echo_stale(result.reclassified)
    click.echo(
        f"Reclassified {result.reclassified.succeeded} of {result.reclassified.processed} transactions, "
        f"generated {result.posted.succeeded} journal entries"
    )
    if result.reclassified.failed or result.posted.failed:
        ctx.exit(1)


@click.command("override")
@click.argument("transaction_id", type=int)
@click.option("--debit", "debit_code", required=True, help="Account code for the debit line")
@click.option("--credit", "credit_code", required=True, help="Account code for the credit line")
@click.option("--actor", default=None, help="Operator name recorded on the entry (default: FIN)")
@click.pass_context
def override(ctx, transaction_id: int, debit_code: str, credit_code: str, actor: str):
    """Post TRANSACTION_ID to operator-chosen accounts, bypassing the rules.

    Example:
        autoledger override 42 --debit 8100 --credit 1100 --actor jane
    """
    db = ctx.obj["db"]
    try:
        transaction = db.get_transaction(transaction_id)
        if transaction is None:
            raise errors.NotFoundError(errors.transaction_not_found(transaction_id))

        account_ids = []
        for code in (debit_code, credit_code):
            account = db.get_account_by_code(transaction.company_id, code)
            if account is None:
                raise errors.NotFoundError(errors.account_code_not_found(transaction.company_id, code))
            account_ids.append(account.id)

        entry = ManualOverrideService(db).override(transaction_id, account_ids[0], account_ids[1], actor=actor)
        click.echo(f"Transaction {transaction_id} posted to {debit_code} / {credit_code} (entry {entry.reference})")
    except ValueError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register batch commands with main CLI."""
    cli.add_command(classify)
    cli.add_command(reclassify)
    cli.add_command(post)
    cli.add_command(regenerate)
    cli.add_command(override)
