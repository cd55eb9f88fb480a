"""Domain model entities for autoledger.

These are pure data classes representing bookkeeping concepts, independent of
database schema. Stores return these entities so that the classification and
posting logic never touches ORM objects directly.
"""

from dataclasses import dataclass, field
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional


ZERO = Decimal("0.00")


class MatchType(str, Enum):
    """How a rule's match value is compared against a transaction description."""

    CONTAINS = "CONTAINS"
    STARTS_WITH = "STARTS_WITH"
    ENDS_WITH = "ENDS_WITH"
    EQUALS = "EQUALS"
    REGEX = "REGEX"

    @classmethod
    def parse(cls, value: "str | MatchType") -> "MatchType":
        """Parse a match type name, case-insensitively."""
        if isinstance(value, MatchType):
            return value
        try:
            return cls(value.strip().upper())
        except ValueError:
            valid = ", ".join(m.value for m in cls)
            raise ValueError(f"Unknown match type '{value}' (expected one of: {valid})")


@dataclass(frozen=True)
class Company:
    """Tenant owning accounts, rules and transactions."""

    id: int
    name: str
    created_at: datetime


@dataclass(frozen=True)
class FiscalPeriod:
    """Bounded date range that transactions are grouped into."""

    id: int
    company_id: int
    name: str
    start_date: date
    end_date: date


@dataclass(frozen=True)
class Account:
    """Chart of accounts entry, unique by code within a company."""

    id: int
    company_id: int
    code: str
    name: str
    category: Optional[str]
    is_active: bool = True


@dataclass(frozen=True)
class ClassificationRule:
    """Pattern-to-account-code mapping used to auto-classify transactions."""

    id: int
    company_id: int
    name: str
    match_type: MatchType
    match_value: str
    account_code: str
    priority: int
    is_active: bool = True
    description: Optional[str] = None


@dataclass(frozen=True)
class BankTransaction:
    """Bank statement line, unclassified while account_code is None."""

    id: int
    company_id: int
    fiscal_period_id: Optional[int]
    date: date
    details: str
    debit_amount: Decimal = ZERO
    credit_amount: Decimal = ZERO
    account_code: Optional[str] = None
    reference: Optional[str] = None
    updated_by: Optional[str] = None
    updated_at: Optional[datetime] = None

    @property
    def is_classified(self) -> bool:
        return self.account_code is not None

    @property
    def postable_amount(self) -> Optional[Decimal]:
        """Return the one positive amount, or None unless exactly one of debit and credit is positive."""
        credit = self.credit_amount is not None and self.credit_amount > 0
        debit = self.debit_amount is not None and self.debit_amount > 0
        if credit == debit:
            return None
        return self.credit_amount if credit else self.debit_amount

    @property
    def is_money_in(self) -> bool:
        return self.credit_amount is not None and self.credit_amount > 0


@dataclass(frozen=True)
class JournalEntryLine:
    """One side of a journal entry."""

    id: int
    journal_entry_id: int
    account_id: int
    debit_amount: Decimal
    credit_amount: Decimal
    description: Optional[str]
    source_transaction_id: Optional[int]
    line_number: int


@dataclass(frozen=True)
class JournalEntry:
    """Journal entry header together with its lines."""

    id: int
    company_id: int
    fiscal_period_id: Optional[int]
    reference: str
    entry_date: date
    description: Optional[str]
    created_by: str
    created_at: datetime
    lines: tuple[JournalEntryLine, ...] = ()

    @property
    def total_debit(self) -> Decimal:
        return sum((line.debit_amount for line in self.lines), ZERO)

    @property
    def total_credit(self) -> Decimal:
        return sum((line.credit_amount for line in self.lines), ZERO)

    @property
    def is_balanced(self) -> bool:
        return self.total_debit == self.total_credit


@dataclass(frozen=True)
class NewJournalLine:
    """Line values for a journal entry that has not been written yet."""

    account_id: int
    debit_amount: Decimal
    credit_amount: Decimal
    description: Optional[str]
    source_transaction_id: Optional[int]
    line_number: int


@dataclass(frozen=True)
class BatchResult:
    """Outcome of one batch run over a company's transactions.

    succeeded counts items that were classified or posted, unmatched counts
    items no active rule matched, stale_postings counts posted items whose
    code changed while their journal lines kept the old account, and errors
    holds one message per failed item.
    """

    processed: int = 0
    succeeded: int = 0
    unmatched: int = 0
    stale_postings: int = 0
    errors: tuple[str, ...] = ()

    @property
    def failed(self) -> int:
        return len(self.errors)


@dataclass(frozen=True)
class RegenerationResult:
    """Outcome of a reclassify-then-post run."""

    reclassified: BatchResult
    posted: BatchResult


@dataclass(frozen=True)
class ClassificationStats:
    """Classification coverage for one fiscal period (or overall)."""

    label: str
    total: int
    classified: int
    fiscal_period_id: Optional[int] = None

    @property
    def unclassified(self) -> int:
        return self.total - self.classified

    @property
    def classification_rate(self) -> float:
        if self.total == 0:
            return 0.0
        return self.classified / self.total * 100


@dataclass(frozen=True)
class CoverageReport:
    """Per-period classification coverage for a company."""

    company: Company
    periods: tuple[ClassificationStats, ...] = field(default_factory=tuple)
    unassigned: Optional[ClassificationStats] = None

    @property
    def overall(self) -> ClassificationStats:
        rows = list(self.periods)
        if self.unassigned is not None:
            rows.append(self.unassigned)
        return ClassificationStats(
            label="OVERALL",
            total=sum(row.total for row in rows),
            classified=sum(row.classified for row in rows),
        )
