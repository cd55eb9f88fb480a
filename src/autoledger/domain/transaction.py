"""Bank transaction domain service."""

from datetime import UTC, date, datetime
from decimal import Decimal
from typing import Optional

import structlog

from autoledger.config import SYSTEM_ACTOR
from autoledger.database.base import Database
from autoledger.domain import errors
from autoledger.domain.classification import AccountResolver
from autoledger.domain.entities import ZERO, BankTransaction

logger = structlog.get_logger(__name__)


class TransactionService:
    """Service for recording and classifying bank transactions."""

    def __init__(self, db: Database):
        """Initialize transaction service.

        Args:
            db: Database instance
        """
        self.db = db

    def record_transaction(
        self,
        company_id: int,
        date: date,
        details: str,
        debit_amount: Decimal = ZERO,
        credit_amount: Decimal = ZERO,
        fiscal_period_id: Optional[int] = None,
        reference: Optional[str] = None,
    ) -> int:
        """Record a structured bank statement line.

        When no fiscal period is given, the company's period containing the
        date is used, if there is one.

        Args:
            company_id: Owning company
            date: Transaction date
            details: Statement description text
            debit_amount: Money paid out (zero if none)
            credit_amount: Money received (zero if none)
            fiscal_period_id: Optional fiscal period
            reference: Optional bank reference

        Returns:
            Transaction ID

        Raises:
            NotFoundError: If the company or fiscal period does not exist
            ValidationError: If amounts are negative, both positive, or details are empty
        """
        if self.db.get_company(company_id) is None:
            raise errors.NotFoundError(errors.company_not_found(company_id))

        details = (details or "").strip()
        if not details:
            raise errors.ValidationError("Transaction details cannot be empty")

        debit_amount = Decimal(debit_amount or ZERO)
        credit_amount = Decimal(credit_amount or ZERO)
        if debit_amount < 0 or credit_amount < 0:
            raise errors.ValidationError("Debit and credit amounts cannot be negative")
        if debit_amount > 0 and credit_amount > 0:
            raise errors.ValidationError("A transaction cannot have both a debit and a credit amount")

        if fiscal_period_id is not None:
            period = self.db.get_fiscal_period(fiscal_period_id)
            if period is None or period.company_id != company_id:
                raise errors.NotFoundError(errors.fiscal_period_not_found(fiscal_period_id))
        else:
            for period in self.db.list_fiscal_periods(company_id):
                if period.start_date <= date <= period.end_date:
                    fiscal_period_id = period.id
                    break

        return self.db.create_transaction(
            company_id,
            fiscal_period_id,
            date,
            details,
            debit_amount,
            credit_amount,
            reference=reference,
        )

    def get_transaction(self, transaction_id: int) -> Optional[BankTransaction]:
        """Get transaction by ID."""
        return self.db.get_transaction(transaction_id)

    def list_transactions(
        self,
        company_id: int,
        fiscal_period_id: Optional[int] = None,
        unclassified: bool = False,
    ) -> list[BankTransaction]:
        """List a company's transactions ordered by date."""
        return self.db.list_transactions(company_id, fiscal_period_id=fiscal_period_id, unclassified=unclassified)

    def classify_transaction(
        self,
        transaction_id: int,
        account_code: str,
        actor: str = SYSTEM_ACTOR,
        company_id: Optional[int] = None,
    ) -> None:
        """Assign an account code to one transaction by hand.

        Args:
            transaction_id: Transaction to classify
            account_code: Code of an active account in the transaction's company
            actor: Name recorded in the audit fields
            company_id: If given, the transaction must belong to this company

        Raises:
            NotFoundError: If the transaction or account does not exist
        """
        transaction = self.db.get_transaction(transaction_id)
        if transaction is None or (company_id is not None and transaction.company_id != company_id):
            raise errors.NotFoundError(errors.transaction_not_found(transaction_id))

        account = AccountResolver(self.db).resolve(transaction.company_id, account_code)
        self.db.update_transaction_classification(
            transaction.id, account.code, updated_by=actor, updated_at=datetime.now(UTC)
        )
        logger.info(
            "transaction_classified",
            company_id=transaction.company_id,
            transaction_id=transaction.id,
            account_code=account.code,
            actor=actor,
        )
