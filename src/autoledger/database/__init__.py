"""Database layer for autoledger application."""

from autoledger.database.base import AccountStore, Database, LedgerStore, RuleStore
from autoledger.database.factories import create_database, create_sqlite_database

__all__ = [
    "AccountStore",
    "Database",
    "LedgerStore",
    "RuleStore",
    "create_database",
    "create_sqlite_database",
]
