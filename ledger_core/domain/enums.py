"""
Shared enumerations for the ledger.

Account types carry their normal balance as data, so balance
computation is a single polarity-aware function rather than a
method overridden per account type.
"""

import enum


class Side(str, enum.Enum):
    """Direction of a posting."""
    DEBIT = "DEBIT"
    CREDIT = "CREDIT"

    def opposite(self) -> "Side":
        return Side.CREDIT if self is Side.DEBIT else Side.DEBIT


class AccountType(str, enum.Enum):
    """The five fundamental accounting categories."""
    ASSET = "ASSET"
    LIABILITY = "LIABILITY"
    EQUITY = "EQUITY"
    REVENUE = "REVENUE"
    EXPENSE = "EXPENSE"

    @property
    def normal_balance(self) -> Side:
        """The side that increases an account of this type."""
        if self in (AccountType.ASSET, AccountType.EXPENSE):
            return Side.DEBIT
        return Side.CREDIT


class Violation(str, enum.Enum):
    """A broken entry invariant. The value is the message shown to callers."""
    MISSING_DESCRIPTION = "Entry must have a description"
    NO_DEBIT_AMOUNTS = "Entry must have at least one debit amount"
    NO_CREDIT_AMOUNTS = "Entry must have at least one credit amount"
    MULTIPLE_CURRENCIES = "An entry can only have one currency"
    UNBALANCED = "The credit and debit amounts are not equal"
    NON_POSITIVE_AMOUNT = "Entry amounts must be greater than zero"
    SIDE_MISMATCH = "Amounts must be listed under their own side"
