"""Tests for the classification selector and account resolver."""

from datetime import date
from decimal import Decimal

import pytest

from autoledger.domain.classification import AccountResolver, ClassificationSelector
from autoledger.domain.entities import BankTransaction, MatchType
from autoledger.domain.errors import NotFoundError
from autoledger.domain.rule_catalog import RuleCatalog, RuleDefinition
from autoledger.domain.rulebook import STANDARD_RULES


def _transaction(details, debit="0.00", credit="0.00"):
    return BankTransaction(
        id=1,
        company_id=1,
        fiscal_period_id=None,
        date=date(2024, 3, 15),
        details=details,
        debit_amount=Decimal(debit),
        credit_amount=Decimal(credit),
    )


@pytest.fixture
def scenario_selector():
    """Selector over the insurance rules from the priority scenario."""
    return ClassificationSelector(
        RuleCatalog(
            [
                RuleDefinition("Generic insurance", MatchType.CONTAINS, "INSURANCE", "8800", 5),
                RuleDefinition("Insurance Chauke", MatchType.CONTAINS, "INSURANCE CHAUKE", "8100", 10),
            ]
        )
    )


def test_specific_rule_outranks_generic_keyword(scenario_selector):
    """A named payee rule wins over the generic keyword it contains."""
    transaction = _transaction("INSURANCE CHAUKE SALARY", debit="5000.00")
    assert scenario_selector.classify(transaction) == "8100"


def test_generic_rule_applies_without_specific_match(scenario_selector):
    """The generic rule still classifies other insurance lines."""
    assert scenario_selector.classify(_transaction("OLD MUTUAL INSURANCE", debit="300.00")) == "8800"


def test_classification_is_deterministic(scenario_selector):
    """Repeated calls with the same description return the same code."""
    transaction = _transaction("INSURANCE CHAUKE SALARY", debit="5000.00")
    results = {scenario_selector.classify(transaction) for _ in range(20)}
    assert results == {"8100"}


def test_unmatched_transaction_returns_none(scenario_selector):
    """No matching rule means the transaction stays unclassified."""
    assert scenario_selector.classify(_transaction("CASH DEPOSIT", credit="100.00")) is None


def test_selector_ignores_inactive_rules(temp_db, rule_service, sample_company, sample_rules):
    """Deactivated rules are not consulted."""
    rule_service.set_active(sample_rules["Insurance Chauke Salaries"], False)
    selector = ClassificationSelector(rule_service.load_catalog(sample_company.id, active_only=False))

    transaction = _transaction("INSURANCE CHAUKE SALARY", debit="5000.00")
    assert selector.classify(transaction) == "8800"


@pytest.mark.parametrize(
    "details,expected",
    [
        ("INSURANCE CHAUKE SALARY", "8100"),
        ("FEE IMMEDIATE PAYMENT", "9600"),
        ("COROBRIK PAYMENT", "6100-001"),
        ("RTD-DEBIT AGAINST PAYERS AUTH DOTSURE", "8800-002"),
        ("RTD-NOT PROVIDED FOR", "8800"),
        ("IMMEDIATE PAYMENT 123456 JOHN SMITH", "8100"),
        ("CARTRACK SUBSCRIPTION", "8500-001"),
        ("AUTOBANK CASH DEPOSIT", "1000"),
        ("SOMETHING ENTIRELY NEW", None),
    ],
)
def test_standard_rule_table(details, expected):
    """The standard rule table classifies representative statement lines."""
    selector = ClassificationSelector(RuleCatalog(STANDARD_RULES))
    assert selector.classify(_transaction(details, debit="10.00")) == expected


class TestAccountResolver:
    """Tenant-scoped account resolution."""

    def test_resolves_active_account(self, temp_db, sample_company, sample_accounts):
        """An active account with the code is returned."""
        account = AccountResolver(temp_db).resolve(sample_company.id, "9600")
        assert account.id == sample_accounts["9600"]
        assert account.company_id == sample_company.id

    def test_missing_code_raises_not_found(self, temp_db, sample_company, sample_accounts):
        """Unknown codes fail with NotFoundError."""
        with pytest.raises(NotFoundError, match="No active account with code '7777'"):
            AccountResolver(temp_db).resolve(sample_company.id, "7777")

    def test_inactive_account_is_not_resolved(self, temp_db, account_service, sample_company, sample_accounts):
        """Deactivated accounts do not resolve."""
        account_service.set_active(sample_company.id, "8800", False)
        with pytest.raises(NotFoundError):
            AccountResolver(temp_db).resolve(sample_company.id, "8800")

    def test_never_resolves_another_companys_account(
        self, temp_db, company_service, account_service, sample_company, sample_accounts
    ):
        """The same code in two companies resolves to each company's own account."""
        other_id = company_service.create_company("Other Co")
        other_account_id = account_service.create_account(other_id, "9600", "Other Bank Charges")
        lonely_id = company_service.create_company("Lonely Co")

        resolver = AccountResolver(temp_db)
        assert resolver.resolve(sample_company.id, "9600").id == sample_accounts["9600"]
        assert resolver.resolve(other_id, "9600").id == other_account_id
        with pytest.raises(NotFoundError):
            resolver.resolve(lonely_id, "9600")
