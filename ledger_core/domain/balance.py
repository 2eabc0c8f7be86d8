"""
Balance calculation.

Balance is never stored; it is always derived from postings.
Every function here is a pure reduction over the postings it is
given, so calling it twice with the same input gives the same
answer.

For an account whose effective normal balance is DEBIT
(assets, expenses, contra liabilities...):
    balance = debits - credits
For an effective normal balance of CREDIT:
    balance = credits - debits

Date windows are inclusive on both ends. Either end may be
left open. A window whose start is after its end selects
nothing and yields a zero balance.
"""

import datetime as dt
from typing import Iterable, Sequence

from ledger_core.config import get_settings
from ledger_core.domain.account import Account
from ledger_core.domain.entry import Posting
from ledger_core.domain.enums import AccountType, Side
from ledger_core.domain.money import Money
from ledger_core.exceptions import CurrencyMismatchError

__all__ = [
    "Posting",
    "in_window",
    "account_balance",
    "type_balance",
    "type_balance_money",
    "trial_balance",
]


def in_window(
    posting_date: dt.date,
    from_date: dt.date | None = None,
    to_date: dt.date | None = None,
) -> bool:
    if from_date is not None and posting_date < from_date:
        return False
    if to_date is not None and posting_date > to_date:
        return False
    return True


def _apply_polarity(raw: Money, normal_balance: Side) -> Money:
    return raw if normal_balance is Side.DEBIT else -raw


def _raw_balance(
    account: Account,
    postings: Iterable[Posting],
    from_date: dt.date | None,
    to_date: dt.date | None,
) -> Money:
    """Debits minus credits for one account inside the window."""
    debit_sum = Money.zero(account.currency)
    credit_sum = Money.zero(account.currency)
    for amount, posting_date in postings:
        if amount.account_id != account.id:
            continue
        if not in_window(posting_date, from_date, to_date):
            continue
        if amount.side is Side.DEBIT:
            debit_sum = debit_sum + amount.money
        else:
            credit_sum = credit_sum + amount.money
    return debit_sum - credit_sum


def account_balance(
    account: Account,
    postings: Iterable[Posting],
    from_date: dt.date | None = None,
    to_date: dt.date | None = None,
) -> Money:
    """
    The balance of one account, in its own currency.

    Postings for other accounts are ignored. An account with no
    postings in the window has a zero balance. Postings in a
    currency other than the account's raise CurrencyMismatchError.
    """
    raw = _raw_balance(account, postings, from_date, to_date)
    return _apply_polarity(raw, account.effective_normal_balance)


def type_balance_money(
    account_type: AccountType,
    accounts: Iterable[Account],
    postings: Iterable[Posting],
    from_date: dt.date | None = None,
    to_date: dt.date | None = None,
    currency: str | None = None,
) -> Money:
    """
    The combined balance of every account of one type.

    Each account is reduced with the type's normal balance, so a
    contra account (whose own balance runs the other way) is
    subtracted from the total without any special casing.

    With ``currency`` only accounts in that currency are counted.
    Without it, the accounts of the type must share one currency;
    a mixed type raises CurrencyMismatchError.
    """
    postings = list(postings)
    members = [a for a in accounts if a.account_type is account_type]
    if currency is not None:
        currency = currency.upper()
        members = [a for a in members if a.currency == currency]
    elif members:
        currency = members[0].currency
        for account in members[1:]:
            if account.currency != currency:
                raise CurrencyMismatchError(currency, account.currency)
    else:
        currency = get_settings().DEFAULT_CURRENCY

    total = Money.zero(currency)
    for account in members:
        raw = _raw_balance(account, postings, from_date, to_date)
        total = total + _apply_polarity(raw, account_type.normal_balance)
    return total


def type_balance(
    account_type: AccountType,
    accounts: Iterable[Account],
    postings: Iterable[Posting],
    from_date: dt.date | None = None,
    to_date: dt.date | None = None,
    currency: str | None = None,
) -> int:
    """type_balance_money() as a plain minor-unit integer."""
    return type_balance_money(
        account_type, accounts, postings, from_date, to_date, currency
    ).amount


def trial_balance(
    accounts: Sequence[Account],
    postings: Iterable[Posting],
    from_date: dt.date | None = None,
    to_date: dt.date | None = None,
    currency: str | None = None,
) -> int:
    """
    assets - (liabilities + equity + revenue - expenses)

    Zero whenever the postings come from balanced entries. A
    ledger with accounts in several currencies is checked one
    currency at a time.
    """
    postings = list(postings)
    if currency is None:
        currencies = sorted({a.currency for a in accounts})
        if len(currencies) > 1:
            raise CurrencyMismatchError(currencies[0], currencies[1])

    def total(account_type: AccountType) -> int:
        return type_balance(
            account_type, accounts, postings, from_date, to_date, currency
        )

    return total(AccountType.ASSET) - (
        total(AccountType.LIABILITY)
        + total(AccountType.EQUITY)
        + total(AccountType.REVENUE)
        - total(AccountType.EXPENSE)
    )
