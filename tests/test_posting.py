"""Tests for the posting engine."""

from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy.exc import OperationalError

from autoledger.database.sqlalchemy_db import SQLAlchemyDatabase
from autoledger.domain.classification import AccountResolver
from autoledger.domain.errors import ConflictError, PersistenceError, ValidationError
from autoledger.domain.posting import PostingEngine


@pytest.fixture
def engine(temp_db):
    """Create a PostingEngine over the temporary database."""
    return PostingEngine(temp_db)


def _accounts(db, company_id, target_code, control_code="1000"):
    resolver = AccountResolver(db)
    return resolver.resolve(company_id, target_code), resolver.resolve(company_id, control_code)


def test_money_out_debits_target_and_credits_control(temp_db, engine, sample_company, sample_accounts, add_transaction):
    """A paid-out fee debits the fee account and credits the bank."""
    txn_id = add_transaction(sample_company.id, "FEE IMMEDIATE PAYMENT", debit="35.00")
    target, control = _accounts(temp_db, sample_company.id, "9600")

    entry = engine.post(temp_db.get_transaction(txn_id), target, control, created_by="SYSTEM")

    assert len(entry.lines) == 2
    debit_line, credit_line = entry.lines
    assert debit_line.account_id == sample_accounts["9600"]
    assert debit_line.debit_amount == Decimal("35.00")
    assert debit_line.credit_amount == Decimal("0.00")
    assert credit_line.account_id == sample_accounts["1000"]
    assert credit_line.credit_amount == Decimal("35.00")
    assert credit_line.debit_amount == Decimal("0.00")
    assert entry.is_balanced


def test_money_in_debits_control_and_credits_target(temp_db, engine, sample_company, sample_accounts, add_transaction):
    """A received payment debits the bank and credits the income account."""
    txn_id = add_transaction(sample_company.id, "COROBRIK PAYMENT", credit="15000.00")
    target, control = _accounts(temp_db, sample_company.id, "6100-001")

    entry = engine.post(temp_db.get_transaction(txn_id), target, control, created_by="SYSTEM")

    debit_line, credit_line = entry.lines
    assert debit_line.account_id == sample_accounts["1000"]
    assert debit_line.debit_amount == Decimal("15000.00")
    assert credit_line.account_id == sample_accounts["6100-001"]
    assert credit_line.credit_amount == Decimal("15000.00")
    assert entry.total_debit == entry.total_credit == Decimal("15000.00")


def test_entry_header_and_line_details(temp_db, engine, sample_company, sample_period, sample_accounts, add_transaction):
    """The header mirrors the transaction and lines carry traceability."""
    txn_id = add_transaction(sample_company.id, "FEE IMMEDIATE PAYMENT", debit="35.00")
    transaction = temp_db.get_transaction(txn_id)
    target, control = _accounts(temp_db, sample_company.id, "9600")

    entry = engine.post(transaction, target, control, created_by="clerk")

    assert entry.reference == f"TXN-{txn_id}"
    assert entry.entry_date == transaction.date
    assert entry.fiscal_period_id == sample_period.id
    assert entry.description == "FEE IMMEDIATE PAYMENT"
    assert entry.created_by == "clerk"
    assert [line.source_transaction_id for line in entry.lines] == [txn_id, txn_id]
    assert [line.line_number for line in entry.lines] == [1, 2]
    assert entry.lines[0].description == "[9600] Bank Charges"
    assert entry.lines[1].description == "[1000] Bank"


def test_bank_reference_is_used_when_present(temp_db, engine, sample_company, sample_accounts, add_transaction):
    """Transactions with a bank reference keep it on the entry."""
    txn_id = add_transaction(sample_company.id, "FEE", debit="5.00", reference="BANK-REF-100")
    target, control = _accounts(temp_db, sample_company.id, "9600")

    entry = engine.post(temp_db.get_transaction(txn_id), target, control, created_by="SYSTEM")
    assert entry.reference == "BANK-REF-100"


def test_posting_twice_is_refused(temp_db, engine, sample_company, sample_accounts, add_transaction):
    """A transaction with existing lines is never posted again."""
    txn_id = add_transaction(sample_company.id, "FEE", debit="35.00")
    target, control = _accounts(temp_db, sample_company.id, "9600")
    transaction = temp_db.get_transaction(txn_id)

    engine.post(transaction, target, control, created_by="SYSTEM")
    with pytest.raises(ConflictError, match="already has journal entry lines"):
        engine.post(transaction, target, control, created_by="SYSTEM")

    assert len(temp_db.list_journal_entries(sample_company.id)) == 1


def test_no_postable_amount_is_rejected(temp_db, engine, sample_company, sample_accounts, add_transaction):
    """Neither amount positive means no entry is created."""
    txn_id = add_transaction(sample_company.id, "BALANCE BROUGHT FORWARD")
    target, control = _accounts(temp_db, sample_company.id, "9600")

    with pytest.raises(ValidationError, match="no postable amount"):
        engine.post(temp_db.get_transaction(txn_id), target, control, created_by="SYSTEM")
    assert temp_db.list_journal_entries(sample_company.id) == []


def test_both_amounts_positive_is_rejected(temp_db, engine, sample_company, sample_accounts):
    """A row with both a debit and a credit is refused instead of posting one side."""
    txn_id = temp_db.create_transaction(
        sample_company.id, None, date(2024, 3, 15), "FEE REVERSAL", Decimal("35.00"), Decimal("10.00")
    )
    target, control = _accounts(temp_db, sample_company.id, "9600")

    with pytest.raises(ValidationError, match="exactly one of debit and credit"):
        engine.post(temp_db.get_transaction(txn_id), target, control, created_by="SYSTEM")
    assert temp_db.list_journal_entries(sample_company.id) == []


def test_foreign_account_is_rejected(
    temp_db, engine, company_service, account_service, sample_company, sample_accounts, add_transaction
):
    """Accounts of another company cannot be posted to."""
    other_id = company_service.create_company("Other Co")
    account_service.create_account(other_id, "9600", "Other Charges")
    txn_id = add_transaction(sample_company.id, "FEE", debit="35.00")
    foreign_target = AccountResolver(temp_db).resolve(other_id, "9600")
    control = AccountResolver(temp_db).resolve(sample_company.id, "1000")

    with pytest.raises(ValidationError, match="does not belong to company"):
        engine.post(temp_db.get_transaction(txn_id), foreign_target, control, created_by="SYSTEM")


def test_post_can_classify_in_same_unit(temp_db, engine, sample_company, sample_accounts, add_transaction):
    """classify=True stamps the target code on the transaction with the entry."""
    txn_id = add_transaction(sample_company.id, "FEE", debit="35.00")
    target, control = _accounts(temp_db, sample_company.id, "9600")

    engine.post(temp_db.get_transaction(txn_id), target, control, created_by="clerk", classify=True)

    transaction = temp_db.get_transaction(txn_id)
    assert transaction.account_code == "9600"
    assert transaction.updated_by == "clerk"


class FailingLineDatabase(SQLAlchemyDatabase):
    """Database whose second journal line write fails."""

    def _add_journal_line(self, session, journal_entry_id, line):
        if line.line_number == 2:
            raise OperationalError("INSERT INTO journal_entry_lines", {}, Exception("disk I/O error"))
        super()._add_journal_line(session, journal_entry_id, line)


def test_failed_line_write_rolls_back_whole_entry(temp_db, sample_company, sample_accounts, add_transaction):
    """A failure after the header and first line leaves nothing behind."""
    txn_id = add_transaction(sample_company.id, "FEE", debit="35.00")
    failing_db = FailingLineDatabase(f"sqlite:///{temp_db.database_path}")
    try:
        target, control = _accounts(failing_db, sample_company.id, "9600")
        engine = PostingEngine(failing_db)

        with pytest.raises(PersistenceError):
            engine.post(failing_db.get_transaction(txn_id), target, control, created_by="SYSTEM", classify=True)

        assert failing_db.list_journal_entries(sample_company.id) == []
        assert failing_db.list_lines_for_transaction(txn_id) == []
        assert failing_db.get_transaction(txn_id).account_code is None
    finally:
        failing_db.disconnect()

    assert temp_db.list_journal_entries(sample_company.id) == []
