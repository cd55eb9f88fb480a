"""Batch classification and journal generation for one company."""

from datetime import UTC, datetime
from typing import Iterable

import structlog
from sqlalchemy.exc import SQLAlchemyError

from autoledger.config import DEFAULT_CONTROL_ACCOUNT, SYSTEM_ACTOR
from autoledger.database.base import Database
from autoledger.domain import errors
from autoledger.domain.classification import AccountResolver, ClassificationSelector
from autoledger.domain.entities import BankTransaction, BatchResult, RegenerationResult
from autoledger.domain.errors import DomainError
from autoledger.domain.posting import PostingEngine
from autoledger.domain.rule_catalog import RuleCatalog

logger = structlog.get_logger(__name__)


class ResyncService:
    """Run classification and posting over a company's transactions.

    Every operation is scoped to one company and processes transactions one
    at a time: a failure on one transaction is logged and recorded in the
    result while the rest of the batch carries on. Runs are safe to repeat.
    """

    def __init__(self, db: Database, control_account_code: str = DEFAULT_CONTROL_ACCOUNT):
        """Initialize resync service.

        Args:
            db: Database instance
            control_account_code: Code of the bank/control account used for
                the cash side of every posting
        """
        self.db = db
        self.control_account_code = control_account_code
        self.resolver = AccountResolver(db)
        self.engine = PostingEngine(db)

    def _require_company(self, company_id: int) -> None:
        if self.db.get_company(company_id) is None:
            raise errors.NotFoundError(errors.company_not_found(company_id))

    def load_selector(self, company_id: int) -> ClassificationSelector:
        """Snapshot the company's active rules into a selector."""
        rules = self.db.list_rules(company_id, active_only=True)
        return ClassificationSelector(RuleCatalog.from_stored_rules(rules))

    def _classify(
        self, company_id: int, transactions: Iterable[BankTransaction], actor: str, operation: str
    ) -> BatchResult:
        selector = self.load_selector(company_id)
        processed = succeeded = unmatched = stale = 0
        failures = []

        for transaction in transactions:
            processed += 1
            account_code = selector.classify(transaction)
            if account_code is None:
                unmatched += 1
                continue
            try:
                self.resolver.resolve(company_id, account_code)
                if transaction.account_code not in (None, account_code) and self.engine.is_posted(transaction.id):
                    # Existing journal lines stay on the previous account
                    stale += 1
                    logger.warning(
                        "posted_transaction_reclassified",
                        company_id=company_id,
                        transaction_id=transaction.id,
                        previous_code=transaction.account_code,
                        account_code=account_code,
                    )
                self.db.update_transaction_classification(
                    transaction.id, account_code, updated_by=actor, updated_at=datetime.now(UTC)
                )
                succeeded += 1
            except (DomainError, SQLAlchemyError) as e:
                logger.warning(
                    "classification_failed",
                    company_id=company_id,
                    transaction_id=transaction.id,
                    account_code=account_code,
                    error=str(e),
                )
                failures.append(f"Transaction {transaction.id}: {e}")

        result = BatchResult(
            processed=processed,
            succeeded=succeeded,
            unmatched=unmatched,
            stale_postings=stale,
            errors=tuple(failures),
        )
        logger.info(
            operation,
            company_id=company_id,
            processed=result.processed,
            classified=result.succeeded,
            unmatched=result.unmatched,
            stale_postings=result.stale_postings,
            failed=result.failed,
        )
        return result

    def classify_all_unclassified(self, company_id: int, actor: str = SYSTEM_ACTOR) -> BatchResult:
        """Classify every transaction of the company that has no account code.

        Raises:
            NotFoundError: If the company does not exist
        """
        self._require_company(company_id)
        transactions = self.db.list_transactions(company_id, unclassified=True)
        return self._classify(company_id, transactions, actor, "classify_all_unclassified")

    def reclassify_all(self, company_id: int, actor: str = SYSTEM_ACTOR) -> BatchResult:
        """Re-run classification over every transaction of the company.

        A matching rule overwrites the previous account code. Transactions no
        active rule matches keep their current code and count as unmatched.

        Raises:
            NotFoundError: If the company does not exist
        """
        self._require_company(company_id)
        transactions = self.db.list_transactions(company_id)
        return self._classify(company_id, transactions, actor, "reclassify_all")

    def generate_journal_entries_for_classified(self, company_id: int, actor: str = SYSTEM_ACTOR) -> BatchResult:
        """Post every classified transaction that has no journal lines yet.

        A missing control account fails every pending transaction, leaving
        them for the next run.

        Raises:
            NotFoundError: If the company does not exist
        """
        self._require_company(company_id)
        try:
            control_account = self.resolver.resolve(company_id, self.control_account_code)
            control_error = None
        except errors.NotFoundError as e:
            control_account, control_error = None, e
            logger.error("control_account_missing", company_id=company_id, account_code=self.control_account_code)

        processed = succeeded = 0
        failures = []
        for transaction in self.db.list_classified_transactions_without_lines(company_id):
            processed += 1
            if control_error is not None:
                failures.append(f"Transaction {transaction.id}: {control_error}")
                continue
            try:
                target_account = self.resolver.resolve(company_id, transaction.account_code)
                self.engine.post(transaction, target_account, control_account, created_by=actor)
                succeeded += 1
            except (DomainError, SQLAlchemyError) as e:
                logger.warning(
                    "posting_failed",
                    company_id=company_id,
                    transaction_id=transaction.id,
                    account_code=transaction.account_code,
                    error=str(e),
                )
                failures.append(f"Transaction {transaction.id}: {e}")

        result = BatchResult(processed=processed, succeeded=succeeded, errors=tuple(failures))
        logger.info(
            "generate_journal_entries",
            company_id=company_id,
            processed=result.processed,
            posted=result.succeeded,
            failed=result.failed,
        )
        return result

    def regenerate_all(self, company_id: int, actor: str = SYSTEM_ACTOR) -> RegenerationResult:
        """Reclassify everything, then post whatever still lacks journal lines."""
        reclassified = self.reclassify_all(company_id, actor)
        posted = self.generate_journal_entries_for_classified(company_id, actor)
        return RegenerationResult(reclassified=reclassified, posted=posted)
