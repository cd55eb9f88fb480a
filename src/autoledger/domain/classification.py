"""Classification selector and tenant-scoped account resolution."""

from typing import Optional

from autoledger.database.base import AccountStore
from autoledger.domain.entities import Account, BankTransaction
from autoledger.domain.errors import NotFoundError, account_code_not_found
from autoledger.domain.rule_catalog import RuleCatalog, RuleLike


class ClassificationSelector:
    """Pick the single best-matching active rule for a transaction.

    The selector holds a snapshot of the catalog taken at construction, so a
    batch sees one consistent rule set and the same description always yields
    the same account code.
    """

    def __init__(self, catalog: RuleCatalog):
        self.catalog = catalog.active()

    def select_rule(self, description: Optional[str]) -> Optional[RuleLike]:
        """Return the winning rule for a description, or None."""
        return self.catalog.first_match(description)

    def classify(self, transaction: BankTransaction) -> Optional[str]:
        """Return the target account code for a transaction.

        Args:
            transaction: Transaction to classify

        Returns:
            Account code of the first matching active rule, or None if the
            transaction stays unclassified
        """
        rule = self.select_rule(transaction.details)
        if rule is None:
            return None
        return rule.account_code


class AccountResolver:
    """Resolve account codes to active accounts within one company."""

    def __init__(self, accounts: AccountStore):
        self.accounts = accounts

    def resolve(self, company_id: int, account_code: str) -> Account:
        """Look up an active account by code for a company.

        Raises:
            NotFoundError: If the company has no active account with that code
        """
        account = self.accounts.get_account_by_code(company_id, account_code)
        if account is None or not account.is_active or account.company_id != company_id:
            raise NotFoundError(account_code_not_found(company_id, account_code))
        return account
