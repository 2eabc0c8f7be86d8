"""
The accounting core: accounts, amounts, entries and balances.

Nothing in this package touches the database.
"""

from ledger_core.domain.enums import AccountType, Side, Violation
from ledger_core.domain.money import Money, sum_money
from ledger_core.domain.account import Account
from ledger_core.domain.amount import Amount
from ledger_core.domain.clock import Clock, SystemClock, FixedClock
from ledger_core.domain.entry import DocumentRef, Entry, Posting, collect_violations
from ledger_core.domain.balance import (
    account_balance,
    in_window,
    trial_balance,
    type_balance,
    type_balance_money,
)

__all__ = [
    "AccountType",
    "Side",
    "Violation",
    "Money",
    "sum_money",
    "Account",
    "Amount",
    "Clock",
    "SystemClock",
    "FixedClock",
    "DocumentRef",
    "Entry",
    "Posting",
    "collect_violations",
    "account_balance",
    "in_window",
    "trial_balance",
    "type_balance",
    "type_balance_money",
]
