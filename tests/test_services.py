"""Tests for company, account and transaction services."""

from datetime import date
from decimal import Decimal

import pytest

from autoledger.domain.errors import ConflictError, NotFoundError, ValidationError


class TestCompanyService:
    """Companies and fiscal periods."""

    def test_create_and_resolve(self, company_service):
        """Companies resolve by ID or by name."""
        company_id = company_service.create_company("Acme")
        assert company_service.resolve_company(str(company_id)).name == "Acme"
        assert company_service.resolve_company("Acme").id == company_id

    def test_duplicate_name(self, company_service):
        """Company names are unique."""
        company_service.create_company("Acme")
        with pytest.raises(ConflictError, match="already exists"):
            company_service.create_company("Acme")

    def test_resolve_unknown(self, company_service):
        """Unknown names raise NotFoundError."""
        with pytest.raises(NotFoundError, match="Company 'Nobody' not found"):
            company_service.resolve_company("Nobody")

    def test_inverted_period_rejected(self, company_service, sample_company):
        """Fiscal periods cannot end before they start."""
        with pytest.raises(ValidationError, match="before start date"):
            company_service.create_fiscal_period(sample_company.id, "Bad", date(2024, 3, 1), date(2024, 2, 1))

    def test_find_period_for_date(self, company_service, sample_company, sample_period):
        """A date inside a period finds it; dates outside find nothing."""
        assert company_service.find_period_for_date(sample_company.id, date(2024, 12, 25)).id == sample_period.id
        assert company_service.find_period_for_date(sample_company.id, date(2023, 12, 25)) is None


class TestAccountService:
    """Chart of accounts."""

    def test_duplicate_code_within_company(self, account_service, sample_company, sample_accounts):
        """Codes are unique within a company."""
        with pytest.raises(ConflictError):
            account_service.create_account(sample_company.id, "9600", "Duplicate")

    def test_same_code_in_other_company(self, account_service, company_service, sample_accounts):
        """Codes may repeat across companies."""
        other_id = company_service.create_company("Other Co")
        account_id = account_service.create_account(other_id, "9600", "Charges")
        assert account_service.get_account(account_id).company_id == other_id

    def test_set_active_unknown_code(self, account_service, sample_company):
        """Unknown codes raise NotFoundError."""
        with pytest.raises(NotFoundError):
            account_service.set_active(sample_company.id, "0000", False)


class TestTransactionService:
    """Transaction intake and single classification."""

    def test_record_assigns_period_by_date(self, transaction_service, sample_company, sample_period):
        """Without a period, the one containing the date is used."""
        txn_id = transaction_service.record_transaction(
            sample_company.id, date(2024, 7, 1), "FEE", debit_amount=Decimal("5.00")
        )
        transaction = transaction_service.get_transaction(txn_id)
        assert transaction.fiscal_period_id == sample_period.id
        assert transaction.debit_amount == Decimal("5.00")
        assert transaction.credit_amount == Decimal("0.00")
        assert transaction.account_code is None

    def test_record_rejects_negative_amounts(self, transaction_service, sample_company):
        """Amounts are stored as positive debit or credit values."""
        with pytest.raises(ValidationError, match="cannot be negative"):
            transaction_service.record_transaction(
                sample_company.id, date(2024, 7, 1), "FEE", debit_amount=Decimal("-5.00")
            )

    def test_record_rejects_both_amounts(self, transaction_service, sample_company):
        """A statement line is either money out or money in, never both."""
        with pytest.raises(ValidationError, match="both a debit and a credit"):
            transaction_service.record_transaction(
                sample_company.id,
                date(2024, 7, 1),
                "FEE REVERSAL",
                debit_amount=Decimal("35.00"),
                credit_amount=Decimal("10.00"),
            )
        assert transaction_service.list_transactions(sample_company.id) == []

    def test_record_rejects_foreign_period(self, transaction_service, company_service, sample_company, sample_period):
        """A period of another company cannot be used."""
        other_id = company_service.create_company("Other Co")
        with pytest.raises(NotFoundError):
            transaction_service.record_transaction(
                other_id, date(2024, 7, 1), "FEE", debit_amount=Decimal("5.00"), fiscal_period_id=sample_period.id
            )

    def test_classify_transaction(self, transaction_service, sample_company, sample_accounts, add_transaction):
        """A transaction can be classified by hand to an existing account."""
        txn_id = add_transaction(sample_company.id, "SOMETHING", debit="10.00")
        transaction_service.classify_transaction(txn_id, "8800", actor="jane")

        transaction = transaction_service.get_transaction(txn_id)
        assert transaction.account_code == "8800"
        assert transaction.updated_by == "jane"

    def test_classify_transaction_unknown_account(self, transaction_service, sample_company, sample_accounts, add_transaction):
        """Unknown account codes are refused."""
        txn_id = add_transaction(sample_company.id, "SOMETHING", debit="10.00")
        with pytest.raises(NotFoundError):
            transaction_service.classify_transaction(txn_id, "4242")

    def test_list_unclassified(self, transaction_service, sample_company, sample_accounts, add_transaction):
        """The unclassified filter hides classified transactions."""
        first = add_transaction(sample_company.id, "ONE", debit="1.00")
        second = add_transaction(sample_company.id, "TWO", debit="2.00")
        transaction_service.classify_transaction(first, "8800")

        unclassified = transaction_service.list_transactions(sample_company.id, unclassified=True)
        assert [t.id for t in unclassified] == [second]
