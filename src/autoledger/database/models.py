"""SQLAlchemy models for autoledger database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Date,
    Numeric,
    Boolean,
    UniqueConstraint,
    Index,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()

AMOUNT = Numeric(15, 2, asdecimal=True)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class Company(Base):
    """Company (tenant) model."""

    __tablename__ = "companies"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    created_at = Column(DateTime, default=_utcnow, nullable=False)

    # Relationships
    fiscal_periods = relationship("FiscalPeriod", back_populates="company", cascade="all, delete-orphan")
    accounts = relationship("Account", back_populates="company", cascade="all, delete-orphan")


class FiscalPeriod(Base):
    """Fiscal period model."""

    __tablename__ = "fiscal_periods"

    id = Column(Integer, primary_key=True)
    company_id = Column(Integer, ForeignKey("companies.id"), nullable=False)
    name = Column(String, nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)

    __table_args__ = (UniqueConstraint("company_id", "name", name="uq_company_period_name"),)

    # Relationships
    company = relationship("Company", back_populates="fiscal_periods")


class Account(Base):
    """Chart of accounts model."""

    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True)
    company_id = Column(Integer, ForeignKey("companies.id"), nullable=False)
    code = Column(String, nullable=False)
    name = Column(String, nullable=False)
    category = Column(String, nullable=True)
    description = Column(String, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=_utcnow, nullable=False)

    # Account codes are unique per company, never globally
    __table_args__ = (UniqueConstraint("company_id", "code", name="uq_company_account_code"),)

    # Relationships
    company = relationship("Company", back_populates="accounts")


class ClassificationRule(Base):
    """Transaction classification rule model."""

    __tablename__ = "classification_rules"

    id = Column(Integer, primary_key=True)
    company_id = Column(Integer, ForeignKey("companies.id"), nullable=False)
    name = Column(String, nullable=False)
    description = Column(String, nullable=True)
    match_type = Column(String, nullable=False)
    match_value = Column(String, nullable=False)
    account_code = Column(String, nullable=False)
    priority = Column(Integer, default=0, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=_utcnow, nullable=False)
    updated_at = Column(DateTime, default=_utcnow, onupdate=_utcnow, nullable=False)

    __table_args__ = (
        Index("ix_rules_company_active_priority", "company_id", "is_active", "priority"),
    )


class BankTransaction(Base):
    """Bank statement transaction model."""

    __tablename__ = "bank_transactions"

    id = Column(Integer, primary_key=True)
    company_id = Column(Integer, ForeignKey("companies.id"), nullable=False)
    fiscal_period_id = Column(Integer, ForeignKey("fiscal_periods.id"), nullable=True)
    date = Column(Date, nullable=False)
    details = Column(String, nullable=False)
    debit_amount = Column(AMOUNT, default=0, nullable=False)
    credit_amount = Column(AMOUNT, default=0, nullable=False)
    account_code = Column(String, nullable=True)
    reference = Column(String, nullable=True)
    created_at = Column(DateTime, default=_utcnow, nullable=False)
    updated_by = Column(String, nullable=True)
    updated_at = Column(DateTime, nullable=True)

    __table_args__ = (Index("ix_transactions_company_code", "company_id", "account_code"),)


class JournalEntry(Base):
    """Journal entry header model."""

    __tablename__ = "journal_entries"

    id = Column(Integer, primary_key=True)
    company_id = Column(Integer, ForeignKey("companies.id"), nullable=False)
    fiscal_period_id = Column(Integer, ForeignKey("fiscal_periods.id"), nullable=True)
    reference = Column(String, nullable=False)
    entry_date = Column(Date, nullable=False)
    description = Column(String, nullable=True)
    created_by = Column(String, nullable=False)
    created_at = Column(DateTime, default=_utcnow, nullable=False)
    updated_at = Column(DateTime, default=_utcnow, onupdate=_utcnow, nullable=False)

    # Relationships
    lines = relationship(
        "JournalEntryLine",
        back_populates="journal_entry",
        order_by="JournalEntryLine.line_number",
    )


class JournalEntryLine(Base):
    """Journal entry line model."""

    __tablename__ = "journal_entry_lines"

    id = Column(Integer, primary_key=True)
    journal_entry_id = Column(Integer, ForeignKey("journal_entries.id"), nullable=False)
    account_id = Column(Integer, ForeignKey("accounts.id"), nullable=False)
    debit_amount = Column(AMOUNT, default=0, nullable=False)
    credit_amount = Column(AMOUNT, default=0, nullable=False)
    description = Column(String, nullable=True)
    source_transaction_id = Column(Integer, ForeignKey("bank_transactions.id"), nullable=True)
    line_number = Column(Integer, nullable=False)

    __table_args__ = (Index("ix_lines_source_transaction", "source_transaction_id"),)

    # Relationships
    journal_entry = relationship("JournalEntry", back_populates="lines")


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
