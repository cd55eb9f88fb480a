"""Manual classification override."""

from typing import Optional, Sequence

import structlog

from autoledger.database.base import Database
from autoledger.domain import errors
from autoledger.domain.entities import Account, JournalEntry, JournalEntryLine
from autoledger.domain.posting import build_lines, line_description

logger = structlog.get_logger(__name__)

DEFAULT_OVERRIDE_ACTOR = "FIN"


def single_sides(lines: Sequence[JournalEntryLine]) -> tuple[JournalEntryLine, JournalEntryLine]:
    """Return the one positive-debit line and the one positive-credit line.

    Raises:
        ValidationError: If there is not exactly one line on each side
    """
    debits = [line for line in lines if line.debit_amount > 0]
    credits = [line for line in lines if line.credit_amount > 0]
    if len(debits) != 1 or len(credits) != 1:
        raise errors.ValidationError(
            f"Cannot override: expected one debit and one credit line, "
            f"found {len(debits)} debit and {len(credits)} credit"
        )
    return debits[0], credits[0]


class ManualOverrideService:
    """Reassign a transaction's posting to operator-chosen accounts.

    Overrides never consult the rule catalog and keep the posted amount.
    """

    def __init__(self, db: Database):
        """Initialize override service.

        Args:
            db: Database instance
        """
        self.db = db

    def _company_account(self, account_id: int, company_id: int) -> Account:
        account = self.db.get_account(account_id)
        if account is None:
            raise errors.NotFoundError(errors.account_not_found(account_id))
        if account.company_id != company_id:
            raise errors.ValidationError(errors.foreign_account(account.code, company_id))
        return account

    def override(
        self,
        transaction_id: int,
        debit_account_id: int,
        credit_account_id: int,
        actor: Optional[str] = None,
        company_id: Optional[int] = None,
    ) -> JournalEntry:
        """Point a transaction's journal lines at the chosen accounts.

        Existing lines are re-pointed in place. Without lines, a new entry is
        written with reference ``MANUAL-<id>`` and the transaction takes the
        debit account's code.

        Args:
            transaction_id: Transaction to override
            debit_account_id: Account receiving the debit line
            credit_account_id: Account receiving the credit line
            actor: Operator name recorded on new entries
            company_id: If given, the transaction must belong to this company

        Returns:
            The journal entry holding the transaction's lines

        Raises:
            NotFoundError: If the transaction or an account does not exist
            ValidationError: If an account belongs to another company, the
                transaction has no postable amount, or existing lines are
                ambiguous
            PersistenceError: If the write failed and was rolled back
        """
        actor = actor or DEFAULT_OVERRIDE_ACTOR

        transaction = self.db.get_transaction(transaction_id)
        if transaction is None or (company_id is not None and transaction.company_id != company_id):
            raise errors.NotFoundError(errors.transaction_not_found(transaction_id))

        debit_account = self._company_account(debit_account_id, transaction.company_id)
        credit_account = self._company_account(credit_account_id, transaction.company_id)

        if transaction.postable_amount is None:
            raise errors.ValidationError(errors.no_postable_amount(transaction.id))

        existing = self.db.list_lines_for_transaction(transaction.id)
        if existing:
            debit_line, credit_line = single_sides(existing)
            self.db.update_journal_lines(
                [
                    (debit_line.id, debit_account.id, line_description(debit_account)),
                    (credit_line.id, credit_account.id, line_description(credit_account)),
                ]
            )
            logger.info(
                "override_updated_lines",
                transaction_id=transaction.id,
                debit_account=debit_account.code,
                credit_account=credit_account.code,
                actor=actor,
            )
            return self.db.get_journal_entry(debit_line.journal_entry_id)

        entry_id = self.db.create_journal_entry(
            company_id=transaction.company_id,
            fiscal_period_id=transaction.fiscal_period_id,
            reference=f"MANUAL-{transaction.id}",
            entry_date=transaction.date,
            description=f"{debit_account.name} - {credit_account.name}",
            created_by=actor,
            lines=build_lines(transaction, debit_account, credit_account),
            classify_transaction=(transaction.id, debit_account.code),
        )
        logger.info(
            "override_created_entry",
            transaction_id=transaction.id,
            journal_entry_id=entry_id,
            debit_account=debit_account.code,
            credit_account=credit_account.code,
            actor=actor,
        )
        return self.db.get_journal_entry(entry_id)
