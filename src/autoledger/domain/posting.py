"""Double-entry posting of classified bank transactions."""

import structlog

from autoledger.database.base import LedgerStore
from autoledger.domain import errors
from autoledger.domain.entities import ZERO, Account, BankTransaction, JournalEntry, NewJournalLine

logger = structlog.get_logger(__name__)


def line_description(account: Account) -> str:
    """Human-readable line description combining account code and name."""
    return f"[{account.code}] {account.name}"


def entry_reference(transaction: BankTransaction) -> str:
    """Journal entry reference for a transaction."""
    return transaction.reference or f"TXN-{transaction.id}"


def build_lines(
    transaction: BankTransaction, debit_account: Account, credit_account: Account
) -> tuple[NewJournalLine, NewJournalLine]:
    """Build the debit line and the credit line for a transaction's amount.

    Raises:
        ValidationError: If the transaction has no postable amount
    """
    amount = transaction.postable_amount
    if amount is None:
        raise errors.ValidationError(errors.no_postable_amount(transaction.id))

    debit_line = NewJournalLine(
        account_id=debit_account.id,
        debit_amount=amount,
        credit_amount=ZERO,
        description=line_description(debit_account),
        source_transaction_id=transaction.id,
        line_number=1,
    )
    credit_line = NewJournalLine(
        account_id=credit_account.id,
        debit_amount=ZERO,
        credit_amount=amount,
        description=line_description(credit_account),
        source_transaction_id=transaction.id,
        line_number=2,
    )
    return debit_line, credit_line


class PostingEngine:
    """Turn a classified transaction into a balanced two-line journal entry."""

    def __init__(self, ledger: LedgerStore):
        """Initialize posting engine.

        Args:
            ledger: Store that writes journal entries atomically
        """
        self.ledger = ledger

    def post(
        self,
        transaction: BankTransaction,
        target_account: Account,
        control_account: Account,
        created_by: str,
        classify: bool = False,
    ) -> JournalEntry:
        """Post a transaction against its target and the control account.

        Money received debits the control account and credits the target
        account; money paid out debits the target and credits the control
        account. Both lines carry the full amount.

        Args:
            transaction: Transaction to post
            target_account: Classified account
            control_account: Bank/control account for the company
            created_by: Actor recorded on the entry
            classify: Also stamp the target account's code on the transaction
                in the same unit of work

        Returns:
            The created journal entry with its lines

        Raises:
            ValidationError: If there is no postable amount or an account
                belongs to another company
            ConflictError: If the transaction already has journal lines
            PersistenceError: If the write failed and was rolled back
        """
        for account in (target_account, control_account):
            if account.company_id != transaction.company_id:
                raise errors.ValidationError(errors.foreign_account(account.code, transaction.company_id))

        if self.ledger.list_lines_for_transaction(transaction.id):
            raise errors.ConflictError(errors.already_posted(transaction.id))

        if transaction.is_money_in:
            lines = build_lines(transaction, debit_account=control_account, credit_account=target_account)
        else:
            lines = build_lines(transaction, debit_account=target_account, credit_account=control_account)

        entry_id = self.ledger.create_journal_entry(
            company_id=transaction.company_id,
            fiscal_period_id=transaction.fiscal_period_id,
            reference=entry_reference(transaction),
            entry_date=transaction.date,
            description=transaction.details,
            created_by=created_by,
            lines=lines,
            classify_transaction=(transaction.id, target_account.code) if classify else None,
        )
        logger.debug(
            "transaction_posted",
            transaction_id=transaction.id,
            journal_entry_id=entry_id,
            account_code=target_account.code,
        )
        return self.ledger.get_journal_entry(entry_id)

    def is_posted(self, transaction_id: int) -> bool:
        """Return True if journal lines already exist for the transaction."""
        return bool(self.ledger.list_lines_for_transaction(transaction_id))
