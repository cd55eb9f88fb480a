"""Abstract database interface.

The classification core depends only on three collaborators: a rule store, an
account store and a ledger store. ``Database`` combines them with the company,
fiscal period and bank transaction operations used around the core.
"""

from abc import ABC, abstractmethod
from datetime import date, datetime
from decimal import Decimal
from typing import Optional, Sequence

# Import entities directly to avoid circular import through domain/__init__.py
from autoledger.domain.entities import (
    Account,
    BankTransaction,
    ClassificationRule,
    Company,
    FiscalPeriod,
    JournalEntry,
    JournalEntryLine,
    MatchType,
    NewJournalLine,
)


class RuleStore(ABC):
    """Storage for classification rules."""

    @abstractmethod
    def create_rule(
        self,
        company_id: int,
        name: str,
        match_type: MatchType,
        match_value: str,
        account_code: str,
        priority: int,
        description: Optional[str] = None,
        is_active: bool = True,
    ) -> int:
        """Create a classification rule. Returns rule ID."""
        pass

    @abstractmethod
    def get_rule(self, rule_id: int) -> Optional[ClassificationRule]:
        """Get rule by ID."""
        pass

    @abstractmethod
    def update_rule(
        self,
        rule_id: int,
        priority: Optional[int] = None,
        is_active: Optional[bool] = None,
        account_code: Optional[str] = None,
    ) -> None:
        """Update mutable rule fields."""
        pass

    @abstractmethod
    def list_rules(self, company_id: int, active_only: bool = False) -> list[ClassificationRule]:
        """List rules for a company ordered by priority descending, then ID."""
        pass


class AccountStore(ABC):
    """Storage for the chart of accounts."""

    @abstractmethod
    def create_account(
        self,
        company_id: int,
        code: str,
        name: str,
        category: Optional[str] = None,
        description: Optional[str] = None,
    ) -> int:
        """Create an account. Returns account ID."""
        pass

    @abstractmethod
    def get_account(self, account_id: int) -> Optional[Account]:
        """Get account by ID."""
        pass

    @abstractmethod
    def get_account_by_code(self, company_id: int, code: str) -> Optional[Account]:
        """Get account by code, scoped to one company."""
        pass

    @abstractmethod
    def list_accounts(self, company_id: int) -> list[Account]:
        """List a company's accounts ordered by code."""
        pass

    @abstractmethod
    def set_account_active(self, account_id: int, is_active: bool) -> None:
        """Activate or deactivate an account."""
        pass


class LedgerStore(ABC):
    """Storage for journal entries and the transaction queries posting needs."""

    @abstractmethod
    def create_journal_entry(
        self,
        company_id: int,
        fiscal_period_id: Optional[int],
        reference: str,
        entry_date: date,
        description: Optional[str],
        created_by: str,
        lines: Sequence[NewJournalLine],
        classify_transaction: Optional[tuple[int, str]] = None,
    ) -> int:
        """Write a journal entry header and its lines as one atomic unit.

        Args:
            classify_transaction: Optional (transaction_id, account_code) to
                stamp on the source transaction in the same unit of work

        Returns:
            Journal entry ID

        Raises:
            PersistenceError: If any part of the write fails; nothing is kept
        """
        pass

    @abstractmethod
    def get_journal_entry(self, entry_id: int) -> Optional[JournalEntry]:
        """Get journal entry with its lines."""
        pass

    @abstractmethod
    def list_journal_entries(self, company_id: int) -> list[JournalEntry]:
        """List a company's journal entries with their lines."""
        pass

    @abstractmethod
    def list_lines_for_transaction(self, transaction_id: int) -> list[JournalEntryLine]:
        """List journal lines whose source is the given transaction."""
        pass

    @abstractmethod
    def update_journal_lines(
        self, updates: Sequence[tuple[int, int, Optional[str]]]
    ) -> None:
        """Re-point journal lines as one atomic unit.

        Args:
            updates: (line_id, account_id, description) tuples

        Raises:
            PersistenceError: If any update fails; nothing is kept
        """
        pass

    @abstractmethod
    def list_classified_transactions_without_lines(self, company_id: int) -> list[BankTransaction]:
        """List classified transactions of a company that have no journal lines."""
        pass


class Database(RuleStore, AccountStore, LedgerStore):
    """Abstract database interface for autoledger."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Company operations
    @abstractmethod
    def create_company(self, name: str) -> int:
        """Create a company. Returns company ID."""
        pass

    @abstractmethod
    def get_company(self, company_id: int) -> Optional[Company]:
        """Get company by ID."""
        pass

    @abstractmethod
    def get_company_by_name(self, name: str) -> Optional[Company]:
        """Get company by name."""
        pass

    @abstractmethod
    def list_companies(self) -> list[Company]:
        """List all companies."""
        pass

    # Fiscal period operations
    @abstractmethod
    def create_fiscal_period(self, company_id: int, name: str, start_date: date, end_date: date) -> int:
        """Create a fiscal period. Returns period ID."""
        pass

    @abstractmethod
    def get_fiscal_period(self, period_id: int) -> Optional[FiscalPeriod]:
        """Get fiscal period by ID."""
        pass

    @abstractmethod
    def list_fiscal_periods(self, company_id: int) -> list[FiscalPeriod]:
        """List a company's fiscal periods ordered by start date."""
        pass

    # Bank transaction operations
    @abstractmethod
    def create_transaction(
        self,
        company_id: int,
        fiscal_period_id: Optional[int],
        date: date,
        details: str,
        debit_amount: Decimal,
        credit_amount: Decimal,
        reference: Optional[str] = None,
    ) -> int:
        """Create a bank transaction. Returns transaction ID."""
        pass

    @abstractmethod
    def get_transaction(self, transaction_id: int) -> Optional[BankTransaction]:
        """Get bank transaction by ID."""
        pass

    @abstractmethod
    def list_transactions(
        self,
        company_id: int,
        fiscal_period_id: Optional[int] = None,
        unclassified: bool = False,
    ) -> list[BankTransaction]:
        """List a company's transactions ordered by date, then ID.

        Args:
            fiscal_period_id: Optional fiscal period filter
            unclassified: If True, only return transactions without an account code
        """
        pass

    @abstractmethod
    def update_transaction_classification(
        self,
        transaction_id: int,
        account_code: Optional[str],
        updated_by: str,
        updated_at: datetime,
    ) -> None:
        """Set a transaction's account code and audit fields."""
        pass

    @abstractmethod
    def count_transactions(
        self, company_id: int, fiscal_period_id: Optional[int] = None, classified: Optional[bool] = None
    ) -> int:
        """Count a company's transactions.

        Args:
            fiscal_period_id: Optional fiscal period filter
            classified: True/False to count only classified/unclassified rows
        """
        pass
