"""Classification coverage reports."""

from typing import Optional

from autoledger.database.base import Database
from autoledger.domain import errors
from autoledger.domain.entities import BankTransaction, ClassificationStats, CoverageReport, FiscalPeriod

UNASSIGNED_LABEL = "(no fiscal period)"


def truncate(text: Optional[str], max_length: int) -> str:
    """Shorten text to max_length characters, marking the cut with '...'."""
    text = text or ""
    if len(text) <= max_length:
        return text
    return text[: max_length - 3] + "..."


class ReportService:
    """Build classification coverage and unclassified listings for a company."""

    def __init__(self, db: Database):
        """Initialize report service.

        Args:
            db: Database instance
        """
        self.db = db

    def _require_company(self, company_id: int):
        company = self.db.get_company(company_id)
        if company is None:
            raise errors.NotFoundError(errors.company_not_found(company_id))
        return company

    def period_stats(self, company_id: int, period: FiscalPeriod) -> ClassificationStats:
        """Coverage for one fiscal period."""
        return ClassificationStats(
            label=period.name,
            total=self.db.count_transactions(company_id, fiscal_period_id=period.id),
            classified=self.db.count_transactions(company_id, fiscal_period_id=period.id, classified=True),
            fiscal_period_id=period.id,
        )

    def coverage_report(self, company_id: int) -> CoverageReport:
        """Classification coverage per fiscal period, plus transactions without one.

        Raises:
            NotFoundError: If the company does not exist
        """
        company = self._require_company(company_id)
        periods = tuple(self.period_stats(company_id, p) for p in self.db.list_fiscal_periods(company_id))

        total = self.db.count_transactions(company_id)
        classified = self.db.count_transactions(company_id, classified=True)
        unassigned_total = total - sum(p.total for p in periods)
        unassigned = None
        if unassigned_total > 0:
            unassigned = ClassificationStats(
                label=UNASSIGNED_LABEL,
                total=unassigned_total,
                classified=classified - sum(p.classified for p in periods),
            )
        return CoverageReport(company=company, periods=periods, unassigned=unassigned)

    def unclassified_by_period(self, company_id: int) -> list[tuple[str, list[BankTransaction]]]:
        """Unclassified transactions grouped under their period name.

        Periods without unclassified transactions are left out.
        """
        self._require_company(company_id)
        names = {p.id: p.name for p in self.db.list_fiscal_periods(company_id)}
        groups: dict[str, list[BankTransaction]] = {name: [] for name in names.values()}
        for transaction in self.db.list_transactions(company_id, unclassified=True):
            label = names.get(transaction.fiscal_period_id, UNASSIGNED_LABEL)
            groups.setdefault(label, []).append(transaction)
        return [(label, rows) for label, rows in groups.items() if rows]


def format_coverage_report(report: CoverageReport) -> str:
    """Render a coverage report as plain text."""
    lines = [
        f"CLASSIFICATION SUMMARY: {report.company.name}",
        "=" * 40,
        "",
    ]
    rows = list(report.periods)
    if report.unassigned is not None:
        rows.append(report.unassigned)
    for stats in rows:
        lines.append(f"Period: {stats.label}")
        lines.append(
            f"  Total: {stats.total}, Classified: {stats.classified}, "
            f"Unclassified: {stats.unclassified} ({stats.classification_rate:.1f}%)"
        )
        lines.append("")

    overall = report.overall
    lines.append(
        f"OVERALL: {overall.classified}/{overall.total} transactions classified "
        f"({overall.classification_rate:.1f}%)"
    )
    return "\n".join(lines)


def format_unclassified(groups: list[tuple[str, list[BankTransaction]]]) -> str:
    """Render unclassified transactions grouped by period as plain text."""
    if not groups:
        return "No unclassified transactions."

    lines = ["UNCLASSIFIED TRANSACTIONS", "=" * 25, ""]
    for label, transactions in groups:
        lines.append(f"PERIOD: {label} ({len(transactions)} transactions)")
        lines.append("-" * 50)
        for txn in transactions:
            amount = txn.postable_amount
            amount_str = f"{amount:,.2f}" if amount is not None else "0.00"
            lines.append(f"ID: {txn.id} | {txn.date} | {truncate(txn.details, 50)} | {amount_str}")
        lines.append("")
    return "\n".join(lines).rstrip()
