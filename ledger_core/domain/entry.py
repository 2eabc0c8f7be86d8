"""
Journal entries.

An entry is the record of one balanced transaction: one or
more debit amounts and one or more credit amounts, all in the
same currency, whose totals cancel exactly.

Entry.create() is the only way callers should build one. It
checks every invariant, collects all violations and raises a
single StructuralValidationError listing them, so a caller can
show the complete problem at once. A rejected entry leaves
nothing behind.

Entries are immutable. Amending one means posting a new entry.
"""

import datetime as dt
from typing import Iterable, NamedTuple, Sequence

from pydantic import BaseModel, ConfigDict, model_validator

from ledger_core.config import get_settings
from ledger_core.domain.amount import Amount
from ledger_core.domain.clock import Clock, SystemClock
from ledger_core.domain.enums import Side, Violation
from ledger_core.domain.money import Money, sum_money
from ledger_core.exceptions import StructuralValidationError


class DocumentRef(BaseModel):
    """
    Opaque pointer to the business document behind an entry
    (an invoice, a receipt). The ledger stores it and never
    looks inside.
    """

    model_config = ConfigDict(frozen=True)

    document_type: str
    document_id: str


class Posting(NamedTuple):
    """A historical amount together with its entry's date."""
    amount: Amount
    date: dt.date


def collect_violations(
    description: str | None,
    debit_amounts: Sequence[Amount],
    credit_amounts: Sequence[Amount],
    allow_zero_amounts: bool = False,
) -> list[Violation]:
    """
    Check an entry's invariants and return every one that fails.

    The currency check runs before the totals check and replaces
    it: with two currencies in play the totals mean nothing, so
    only the currency problem is reported.
    """
    violations = []

    if not description or not description.strip():
        violations.append(Violation.MISSING_DESCRIPTION)
    if not debit_amounts:
        violations.append(Violation.NO_DEBIT_AMOUNTS)
    if not credit_amounts:
        violations.append(Violation.NO_CREDIT_AMOUNTS)

    amounts = list(debit_amounts) + list(credit_amounts)
    currencies = {a.currency for a in amounts}
    if len(currencies) > 1:
        violations.append(Violation.MULTIPLE_CURRENCIES)
    else:
        currency = next(iter(currencies), None)
        if sum_money(debit_amounts, currency) != sum_money(credit_amounts, currency):
            violations.append(Violation.UNBALANCED)

    if not allow_zero_amounts and any(a.money.amount == 0 for a in amounts):
        violations.append(Violation.NON_POSITIVE_AMOUNT)

    if any(a.side is not Side.DEBIT for a in debit_amounts) or any(
        a.side is not Side.CREDIT for a in credit_amounts
    ):
        violations.append(Violation.SIDE_MISMATCH)

    return violations


class Entry(BaseModel):
    """
    A validated, immutable journal entry.

    ``id`` is empty until the entry has been stored.
    """

    model_config = ConfigDict(frozen=True)

    description: str
    date: dt.date
    debit_amounts: tuple[Amount, ...]
    credit_amounts: tuple[Amount, ...]
    document_ref: DocumentRef | None = None
    id: int | None = None

    @model_validator(mode="after")
    def check_balanced(self) -> "Entry":
        # Zero amounts are a posting policy, enforced by create().
        violations = collect_violations(
            self.description,
            self.debit_amounts,
            self.credit_amounts,
            allow_zero_amounts=True,
        )
        if violations:
            raise ValueError("; ".join(v.value for v in violations))
        return self

    @classmethod
    def create(
        cls,
        description: str,
        debit_amounts: Iterable[Amount],
        credit_amounts: Iterable[Amount],
        date: dt.date | None = None,
        document_ref: DocumentRef | None = None,
        clock: Clock | None = None,
        allow_zero_amounts: bool | None = None,
    ) -> "Entry":
        """
        Validate and build an entry.

        Raises StructuralValidationError listing every violated
        invariant. When ``date`` is omitted the clock's current
        date is used.
        """
        debit_amounts = tuple(debit_amounts)
        credit_amounts = tuple(credit_amounts)
        if allow_zero_amounts is None:
            allow_zero_amounts = get_settings().ALLOW_ZERO_AMOUNTS

        violations = collect_violations(
            description,
            debit_amounts,
            credit_amounts,
            allow_zero_amounts=allow_zero_amounts,
        )
        if violations:
            raise StructuralValidationError(violations)

        if date is None:
            date = (clock or SystemClock()).today()

        return cls(
            description=description,
            date=date,
            debit_amounts=debit_amounts,
            credit_amounts=credit_amounts,
            document_ref=document_ref,
        )

    @property
    def amounts(self) -> tuple[Amount, ...]:
        """Debits first, then credits."""
        return self.debit_amounts + self.credit_amounts

    def currency(self, default: str | None = None) -> str:
        """
        The single currency of this entry's amounts.

        Only an entry with no amounts at all, which validation
        never lets through, falls back to the default currency.
        """
        for amount in self.credit_amounts + self.debit_amounts:
            return amount.currency
        return default or get_settings().DEFAULT_CURRENCY

    @property
    def total(self) -> Money:
        """The amount moved by this entry (debit total)."""
        return sum_money(self.debit_amounts, self.currency())

    def postings(self) -> list[Posting]:
        return [Posting(amount, self.date) for amount in self.amounts]
