"""
Money values.

An amount is an integer count of minor units (cents for USD)
tagged with a currency code. The ledger never converts between
currencies; combining two of them is an error.
"""

from typing import Annotated, Iterable

from pydantic import BaseModel, ConfigDict, StringConstraints

from ledger_core.config import get_settings
from ledger_core.exceptions import CurrencyMismatchError

# Stripped and uppercased before min_length is checked
CurrencyCode = Annotated[
    str, StringConstraints(strip_whitespace=True, to_upper=True, min_length=1)
]


class Money(BaseModel):
    """
    Immutable minor-unit amount in one currency.

    Balances can be negative, so Money accepts any integer.
    Posted amounts are kept non-negative by Amount.
    """

    model_config = ConfigDict(frozen=True)

    amount: int
    currency: CurrencyCode

    @classmethod
    def zero(cls, currency: str | None = None) -> "Money":
        return cls(amount=0, currency=currency or get_settings().DEFAULT_CURRENCY)

    def _check_currency(self, other: "Money") -> None:
        if other.currency != self.currency:
            raise CurrencyMismatchError(self.currency, other.currency)

    def __add__(self, other: "Money") -> "Money":
        self._check_currency(other)
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def __sub__(self, other: "Money") -> "Money":
        self._check_currency(other)
        return Money(amount=self.amount - other.amount, currency=self.currency)

    def __neg__(self) -> "Money":
        return Money(amount=-self.amount, currency=self.currency)

    def __lt__(self, other: "Money") -> bool:
        self._check_currency(other)
        return self.amount < other.amount

    def __le__(self, other: "Money") -> bool:
        self._check_currency(other)
        return self.amount <= other.amount

    def is_zero(self) -> bool:
        return self.amount == 0

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"


def sum_money(amounts: Iterable, currency: str | None = None) -> Money:
    """
    Total the money of a sequence of Amounts.

    An empty sequence totals to zero in ``currency``, or in the
    configured default currency when none is given. Mixed
    currencies raise CurrencyMismatchError.
    """
    amounts = list(amounts)
    if currency is None:
        currency = amounts[0].currency if amounts else None
    total = Money.zero(currency)
    for amount in amounts:
        total = total + amount.money
    return total
