"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations or an already posted transaction."""


class PersistenceError(DomainError):
    """The underlying store failed; the partial write was rolled back."""


def company_not_found(company_id: int) -> str:
    """Return message for missing company."""
    return f"Company {company_id} not found"


def fiscal_period_not_found(period_id: int) -> str:
    """Return message for missing fiscal period."""
    return f"Fiscal period {period_id} not found"


def transaction_not_found(transaction_id: int) -> str:
    """Return message for missing bank transaction."""
    return f"Transaction {transaction_id} not found"


def account_not_found(account_id: int) -> str:
    """Return message for missing account by ID."""
    return f"Account {account_id} not found"


def account_code_not_found(company_id: int, code: str) -> str:
    """Return message for a code with no active account in the company."""
    return f"No active account with code '{code}' for company {company_id}"


def rule_not_found(rule_id: int) -> str:
    """Return message for missing classification rule."""
    return f"Classification rule {rule_id} not found"


def no_postable_amount(transaction_id: int) -> str:
    """Return message for a transaction without exactly one positive amount."""
    return f"Transaction {transaction_id} has no postable amount: exactly one of debit and credit must be positive"


def already_posted(transaction_id: int) -> str:
    """Return message for a transaction that already has journal lines."""
    return f"Transaction {transaction_id} already has journal entry lines"


def foreign_account(account_code: str, company_id: int) -> str:
    """Return message for an account belonging to another company."""
    return f"Account '{account_code}' does not belong to company {company_id}"
