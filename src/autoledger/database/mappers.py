"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so the classification and posting
code only ever sees frozen domain entities.
"""

from decimal import Decimal

from autoledger.domain import entities as domain
from autoledger.database.models import (
    Company as ORMCompany,
    FiscalPeriod as ORMFiscalPeriod,
    Account as ORMAccount,
    ClassificationRule as ORMClassificationRule,
    BankTransaction as ORMBankTransaction,
    JournalEntry as ORMJournalEntry,
    JournalEntryLine as ORMJournalEntryLine,
)


def _amount(value) -> Decimal:
    """Normalize a stored amount to a two-place Decimal."""
    if value is None:
        return domain.ZERO
    return Decimal(value).quantize(domain.ZERO)


def company_to_domain(orm_company: ORMCompany) -> domain.Company:
    """Convert SQLAlchemy Company model to domain Company entity."""
    return domain.Company(
        id=orm_company.id,
        name=orm_company.name,
        created_at=orm_company.created_at,
    )


def fiscal_period_to_domain(orm_period: ORMFiscalPeriod) -> domain.FiscalPeriod:
    """Convert SQLAlchemy FiscalPeriod model to domain FiscalPeriod entity."""
    return domain.FiscalPeriod(
        id=orm_period.id,
        company_id=orm_period.company_id,
        name=orm_period.name,
        start_date=orm_period.start_date,
        end_date=orm_period.end_date,
    )


def account_to_domain(orm_account: ORMAccount) -> domain.Account:
    """Convert SQLAlchemy Account model to domain Account entity."""
    return domain.Account(
        id=orm_account.id,
        company_id=orm_account.company_id,
        code=orm_account.code,
        name=orm_account.name,
        category=orm_account.category,
        is_active=orm_account.is_active,
    )


def rule_to_domain(orm_rule: ORMClassificationRule) -> domain.ClassificationRule:
    """Convert SQLAlchemy ClassificationRule model to domain entity."""
    return domain.ClassificationRule(
        id=orm_rule.id,
        company_id=orm_rule.company_id,
        name=orm_rule.name,
        match_type=domain.MatchType(orm_rule.match_type),
        match_value=orm_rule.match_value,
        account_code=orm_rule.account_code,
        priority=orm_rule.priority,
        is_active=orm_rule.is_active,
        description=orm_rule.description,
    )


def transaction_to_domain(orm_transaction: ORMBankTransaction) -> domain.BankTransaction:
    """Convert SQLAlchemy BankTransaction model to domain entity."""
    return domain.BankTransaction(
        id=orm_transaction.id,
        company_id=orm_transaction.company_id,
        fiscal_period_id=orm_transaction.fiscal_period_id,
        date=orm_transaction.date,
        details=orm_transaction.details,
        debit_amount=_amount(orm_transaction.debit_amount),
        credit_amount=_amount(orm_transaction.credit_amount),
        account_code=orm_transaction.account_code,
        reference=orm_transaction.reference,
        updated_by=orm_transaction.updated_by,
        updated_at=orm_transaction.updated_at,
    )


def journal_line_to_domain(orm_line: ORMJournalEntryLine) -> domain.JournalEntryLine:
    """Convert SQLAlchemy JournalEntryLine model to domain entity."""
    return domain.JournalEntryLine(
        id=orm_line.id,
        journal_entry_id=orm_line.journal_entry_id,
        account_id=orm_line.account_id,
        debit_amount=_amount(orm_line.debit_amount),
        credit_amount=_amount(orm_line.credit_amount),
        description=orm_line.description,
        source_transaction_id=orm_line.source_transaction_id,
        line_number=orm_line.line_number,
    )


def journal_entry_to_domain(orm_entry: ORMJournalEntry) -> domain.JournalEntry:
    """Convert SQLAlchemy JournalEntry model (with lines) to domain entity."""
    return domain.JournalEntry(
        id=orm_entry.id,
        company_id=orm_entry.company_id,
        fiscal_period_id=orm_entry.fiscal_period_id,
        reference=orm_entry.reference,
        entry_date=orm_entry.entry_date,
        description=orm_entry.description,
        created_by=orm_entry.created_by,
        created_at=orm_entry.created_at,
        lines=tuple(journal_line_to_domain(line) for line in orm_entry.lines),
    )
