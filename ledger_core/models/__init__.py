"""
Database models package.

All models must be imported here so that Base.metadata knows
every table before create_all() runs.
"""

from ledger_core.models.base import Base, SessionLocal, engine, session_scope
from ledger_core.models.ledger_account import LedgerAccount
from ledger_core.models.journal_entry import JournalEntry
from ledger_core.models.amount import AmountRow

__all__ = [
    "Base",
    "SessionLocal",
    "engine",
    "session_scope",
    "LedgerAccount",
    "JournalEntry",
    "AmountRow",
]
