"""
Pydantic schemas for ledger operations.

These are the shapes callers hand to and get back from the
LedgerService. They are separate from the database models
because the request shape and the storage shape differ.
"""

from typing import Annotated

from pydantic import BaseModel, Field, StringConstraints, computed_field

from ledger_core.config import get_settings
from ledger_core.domain.enums import AccountType

ISOCurrencyCode = Annotated[
    str,
    StringConstraints(strip_whitespace=True, to_upper=True, min_length=3, max_length=3),
]


class LedgerAccountCreate(BaseModel):
    """Request to create a new ledger account."""
    name: str = Field(min_length=1, max_length=100)
    account_type: AccountType
    is_contra: bool = False
    currency: ISOCurrencyCode = Field(
        default_factory=lambda: get_settings().DEFAULT_CURRENCY
    )


class TrialBalanceReport(BaseModel):
    """
    Integrity check for one currency of the ledger.

    Every accepted entry balances, so total debits equal total
    credits and the trial balance is zero on a healthy ledger.
    """
    currency: str
    total_debits: int
    total_credits: int
    difference: int
    trial_balance: int

    @computed_field
    @property
    def is_balanced(self) -> bool:
        return self.difference == 0 and self.trial_balance == 0
