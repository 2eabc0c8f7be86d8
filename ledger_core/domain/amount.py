"""
Amounts: single debit or credit postings against one account.
"""

from pydantic import BaseModel, ConfigDict, field_validator

from ledger_core.config import get_settings
from ledger_core.domain.enums import Side
from ledger_core.domain.money import Money


def _account_id(account) -> int:
    return account if isinstance(account, int) else account.id


def _money(account, amount: int, currency: str | None) -> Money:
    # An Account passed in supplies its own currency
    if currency is None and not isinstance(account, int):
        currency = getattr(account, "currency", None)
    return Money(amount=amount, currency=currency or get_settings().DEFAULT_CURRENCY)


class Amount(BaseModel):
    """
    An immutable (account, money, side) posting.

    The direction lives in ``side``; the money is never negative.
    """

    model_config = ConfigDict(frozen=True)

    account_id: int
    money: Money
    side: Side

    @field_validator("money")
    @classmethod
    def money_must_not_be_negative(cls, v: Money) -> Money:
        if v.amount < 0:
            raise ValueError("amount must not be negative")
        return v

    @classmethod
    def debit(cls, account, amount: int, currency: str | None = None) -> "Amount":
        """
        Build a debit against an Account or an account id.

        Without an explicit currency, an Account's own currency is
        used, then the configured default.
        """
        return cls(
            account_id=_account_id(account),
            money=_money(account, amount, currency),
            side=Side.DEBIT,
        )

    @classmethod
    def credit(cls, account, amount: int, currency: str | None = None) -> "Amount":
        """Build a credit against an Account or an account id."""
        return cls(
            account_id=_account_id(account),
            money=_money(account, amount, currency),
            side=Side.CREDIT,
        )

    @property
    def currency(self) -> str:
        return self.money.currency

    @property
    def signed_amount(self) -> int:
        """Debits count up, credits count down."""
        if self.side is Side.DEBIT:
            return self.money.amount
        return -self.money.amount
