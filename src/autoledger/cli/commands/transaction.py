"""Bank transaction commands."""

import click

from autoledger.cli.company_resolution import resolve_company_or_exit
from autoledger.cli.error_handling import handle_domain_error
from autoledger.config import SYSTEM_ACTOR
from autoledger.domain.transaction import TransactionService
from autoledger.utils.amount_parser import parse_amount, split_signed_amount
from autoledger.utils.date_parser import parse_date


@click.group()
def transaction_group():
    """Record and inspect bank transactions."""
    pass


@transaction_group.command("add")
@click.argument("company")
@click.option("--date", "date_str", required=True, help="Transaction date (e.g., 2024-03-15)")
@click.option("--details", required=True, help="Statement description")
@click.option("--amount", "amount_str", help="Signed amount: negative for money out, positive for money in")
@click.option("--debit", "debit_str", help="Money paid out")
@click.option("--credit", "credit_str", help="Money received")
@click.option("--period", "period_id", type=int, help="Fiscal period ID (default: period containing the date)")
@click.option("--reference", help="Bank reference")
@click.pass_context
def add_transaction(
    ctx,
    company: str,
    date_str: str,
    details: str,
    amount_str: str,
    debit_str: str,
    credit_str: str,
    period_id: int,
    reference: str,
):
    """Record a bank statement line for COMPANY.

    Examples:
        autoledger transaction add Acme --date 2024-03-15 --details "FEE IMMEDIATE PAYMENT" --amount -35.00
        autoledger transaction add Acme --date 2024-03-16 --details "COROBRIK PAYMENT" --credit 15000
    """
    company_obj = resolve_company_or_exit(ctx, company)
    try:
        if amount_str is not None:
            if debit_str is not None or credit_str is not None:
                raise ValueError("Use either --amount or --debit/--credit, not both")
            debit_amount, credit_amount = split_signed_amount(parse_amount(amount_str))
        else:
            debit_amount = parse_amount(debit_str) if debit_str else parse_amount("0")
            credit_amount = parse_amount(credit_str) if credit_str else parse_amount("0")

        txn_id = TransactionService(ctx.obj["db"]).record_transaction(
            company_obj.id,
            parse_date(date_str),
            details,
            debit_amount=debit_amount,
            credit_amount=credit_amount,
            fiscal_period_id=period_id,
            reference=reference,
        )
        click.echo(f"Recorded transaction {txn_id}")
    except ValueError as e:
        handle_domain_error(ctx, e)


@transaction_group.command("list")
@click.argument("company")
@click.option("--period", "period_id", type=int, help="Only this fiscal period")
@click.option("--unclassified", is_flag=True, help="Only transactions without an account code")
@click.pass_context
def list_transactions(ctx, company: str, period_id: int, unclassified: bool):
    """List transactions of COMPANY."""
    company_obj = resolve_company_or_exit(ctx, company)
    transactions = TransactionService(ctx.obj["db"]).list_transactions(
        company_obj.id, fiscal_period_id=period_id, unclassified=unclassified
    )
    if not transactions:
        click.echo("No transactions found.")
        return

    click.echo(f"{'ID':<6} {'Date':<12} {'Debit':>12} {'Credit':>12} {'Account':<10} Details")
    click.echo("-" * 100)
    for txn in transactions:
        click.echo(
            f"{txn.id:<6} {str(txn.date):<12} {txn.debit_amount:>12,.2f} {txn.credit_amount:>12,.2f} "
            f"{(txn.account_code or '-'):<10} {txn.details}"
        )


@transaction_group.command("classify")
@click.argument("transaction_id", type=int)
@click.argument("account_code")
@click.option("--actor", default=SYSTEM_ACTOR, help="Name recorded in the audit fields")
@click.pass_context
def classify_transaction(ctx, transaction_id: int, account_code: str, actor: str):
    """Assign ACCOUNT_CODE to one transaction by hand."""
    try:
        TransactionService(ctx.obj["db"]).classify_transaction(transaction_id, account_code, actor=actor)
        click.echo(f"Transaction {transaction_id} classified as {account_code}")
    except ValueError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
