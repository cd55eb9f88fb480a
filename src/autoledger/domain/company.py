"""Company and fiscal period domain service."""

from datetime import date
from typing import Optional

from autoledger.database.base import Database
from autoledger.domain import errors
from autoledger.domain.entities import Company, FiscalPeriod


class CompanyService:
    """Service for managing companies (tenants) and their fiscal periods."""

    def __init__(self, db: Database):
        """Initialize company service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_company(self, name: str) -> int:
        """Create a new company.

        Args:
            name: Unique company name

        Returns:
            Company ID

        Raises:
            ValidationError: If the name is empty
            ConflictError: If a company with that name already exists
        """
        name = (name or "").strip()
        if not name:
            raise errors.ValidationError("Company name cannot be empty")
        if self.db.get_company_by_name(name) is not None:
            raise errors.ConflictError(f"Company '{name}' already exists")
        return self.db.create_company(name)

    def get_company(self, company_id: int) -> Optional[Company]:
        """Get company by ID."""
        return self.db.get_company(company_id)

    def list_companies(self) -> list[Company]:
        """List all companies."""
        return self.db.list_companies()

    def resolve_company(self, company: str | int) -> Company:
        """Resolve a company name or ID to a company.

        Raises:
            NotFoundError: If no company matches
        """
        if isinstance(company, int) or str(company).isdigit():
            found = self.db.get_company(int(company))
            if found is not None:
                return found
        found = self.db.get_company_by_name(str(company))
        if found is None:
            raise errors.NotFoundError(f"Company '{company}' not found")
        return found

    def create_fiscal_period(self, company_id: int, name: str, start_date: date, end_date: date) -> int:
        """Create a fiscal period for a company.

        Raises:
            NotFoundError: If the company does not exist
            ValidationError: If the name is empty or the range is inverted
        """
        if self.db.get_company(company_id) is None:
            raise errors.NotFoundError(errors.company_not_found(company_id))
        name = (name or "").strip()
        if not name:
            raise errors.ValidationError("Fiscal period name cannot be empty")
        if end_date < start_date:
            raise errors.ValidationError(
                f"Fiscal period end date {end_date} is before start date {start_date}"
            )
        return self.db.create_fiscal_period(company_id, name, start_date, end_date)

    def list_fiscal_periods(self, company_id: int) -> list[FiscalPeriod]:
        """List a company's fiscal periods ordered by start date."""
        return self.db.list_fiscal_periods(company_id)

    def find_period_for_date(self, company_id: int, on: date) -> Optional[FiscalPeriod]:
        """Return the company's fiscal period containing a date, if any."""
        for period in self.db.list_fiscal_periods(company_id):
            if period.start_date <= on <= period.end_date:
                return period
        return None
