"""Shared pytest fixtures for autoledger tests."""

import os
import tempfile
from datetime import date
from decimal import Decimal

import pytest

from autoledger.database.factories import create_sqlite_database
from autoledger.domain.account import AccountService
from autoledger.domain.company import CompanyService
from autoledger.domain.entities import MatchType
from autoledger.domain.resync import ResyncService
from autoledger.domain.rule import RuleService
from autoledger.domain.transaction import TransactionService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def company_service(temp_db):
    """Create a CompanyService with a temporary database."""
    return CompanyService(temp_db)


@pytest.fixture
def account_service(temp_db):
    """Create an AccountService with a temporary database."""
    return AccountService(temp_db)


@pytest.fixture
def rule_service(temp_db):
    """Create a RuleService with a temporary database."""
    return RuleService(temp_db)


@pytest.fixture
def transaction_service(temp_db):
    """Create a TransactionService with a temporary database."""
    return TransactionService(temp_db)


@pytest.fixture
def resync_service(temp_db):
    """Create a ResyncService using control account 1000."""
    return ResyncService(temp_db, control_account_code="1000")


@pytest.fixture
def sample_company(company_service):
    """Create a company with one fiscal year."""
    company_id = company_service.create_company("Xinghizana Group")
    company_service.create_fiscal_period(company_id, "FY2024-2025", date(2024, 3, 1), date(2025, 2, 28))
    return company_service.get_company(company_id)


@pytest.fixture
def sample_period(company_service, sample_company):
    """Return the sample company's fiscal period."""
    return company_service.list_fiscal_periods(sample_company.id)[0]


@pytest.fixture
def sample_accounts(account_service, sample_company):
    """Create a small chart of accounts and return account IDs by code."""
    chart = (
        ("1000", "Bank", "Current Assets"),
        ("6100-001", "Corobrik Sales", "Operating Revenue"),
        ("8100", "Employee Costs", "Operating Expenses"),
        ("8800", "Insurance", "Operating Expenses"),
        ("9600", "Bank Charges", "Finance Costs"),
    )
    return {
        code: account_service.create_account(sample_company.id, code, name, category=category)
        for code, name, category in chart
    }


@pytest.fixture
def sample_rules(rule_service, sample_company, sample_accounts):
    """Create the rules used across classification scenarios."""
    rules = (
        ("Insurance Chauke Salaries", MatchType.CONTAINS, "INSURANCE CHAUKE", "8100", 10),
        ("Generic insurance", MatchType.CONTAINS, "INSURANCE", "8800", 5),
        ("Bank fees", MatchType.CONTAINS, "FEE", "9600", 20),
        ("Corobrik", MatchType.CONTAINS, "COROBRIK", "6100-001", 10),
    )
    return {
        name: rule_service.add_rule(sample_company.id, name, match_type, value, code, priority)
        for name, match_type, value, code, priority in rules
    }


@pytest.fixture
def standard_company(company_service, account_service, rule_service):
    """Create a company with the standard chart and rule catalog installed."""
    company_id = company_service.create_company("Standard Books")
    company_service.create_fiscal_period(company_id, "FY2024", date(2024, 3, 1), date(2025, 2, 28))
    account_service.install_standard_chart(company_id)
    rule_service.install_standard_rules(company_id)
    return company_service.get_company(company_id)


@pytest.fixture
def add_transaction(transaction_service):
    """Return a helper that records a transaction with sensible defaults."""

    def _add(company_id, details, debit="0.00", credit="0.00", on=date(2024, 3, 15), reference=None):
        return transaction_service.record_transaction(
            company_id,
            on,
            details,
            debit_amount=Decimal(debit),
            credit_amount=Decimal(credit),
            reference=reference,
        )

    return _add


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()

