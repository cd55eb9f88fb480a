"""Chart of accounts domain service."""

from typing import Optional

import structlog

from autoledger.database.base import Database
from autoledger.domain import errors
from autoledger.domain.entities import Account
from autoledger.domain.rulebook import STANDARD_ACCOUNTS

logger = structlog.get_logger(__name__)


class AccountService:
    """Service for managing a company's chart of accounts."""

    def __init__(self, db: Database):
        """Initialize account service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_account(
        self,
        company_id: int,
        code: str,
        name: str,
        category: Optional[str] = None,
        description: Optional[str] = None,
    ) -> int:
        """Create a new account.

        Args:
            company_id: Owning company
            code: Account code, unique within the company
            name: Account name
            category: Optional category (e.g. "Operating Expenses")
            description: Optional free-text description

        Returns:
            Account ID

        Raises:
            NotFoundError: If the company does not exist
            ValidationError: If code or name is empty
            ConflictError: If the code is already used in the company
        """
        if self.db.get_company(company_id) is None:
            raise errors.NotFoundError(errors.company_not_found(company_id))

        code = (code or "").strip()
        name = (name or "").strip()
        if not code:
            raise errors.ValidationError("Account code cannot be empty")
        if not name:
            raise errors.ValidationError("Account name cannot be empty")
        if self.db.get_account_by_code(company_id, code) is not None:
            raise errors.ConflictError(f"Account code '{code}' already exists for company {company_id}")

        return self.db.create_account(company_id, code, name, category=category, description=description)

    def get_account(self, account_id: int) -> Optional[Account]:
        """Get account by ID."""
        return self.db.get_account(account_id)

    def get_account_by_code(self, company_id: int, code: str) -> Optional[Account]:
        """Get a company's account by code."""
        return self.db.get_account_by_code(company_id, code)

    def list_accounts(self, company_id: int) -> list[Account]:
        """List all accounts of a company ordered by code."""
        return self.db.list_accounts(company_id)

    def set_active(self, company_id: int, code: str, is_active: bool) -> None:
        """Activate or deactivate a company's account by code.

        Raises:
            NotFoundError: If the code does not exist for the company
        """
        account = self.db.get_account_by_code(company_id, code)
        if account is None:
            raise errors.NotFoundError(f"Account '{code}' not found for company {company_id}")
        self.db.set_account_active(account.id, is_active)

    def install_standard_chart(self, company_id: int) -> int:
        """Create the standard chart of accounts for a company.

        Codes that already exist are left as they are, so running this again
        is harmless.

        Returns:
            Number of accounts created
        """
        if self.db.get_company(company_id) is None:
            raise errors.NotFoundError(errors.company_not_found(company_id))

        existing = {account.code for account in self.db.list_accounts(company_id)}
        created = 0
        for code, name, category, description in STANDARD_ACCOUNTS:
            if code in existing:
                continue
            self.db.create_account(company_id, code, name, category=category, description=description)
            created += 1

        logger.info("standard_chart_installed", company_id=company_id, created=created)
        return created
