"""
Tests for Entry construction and validation.

Tests cover:
- Balanced entries are accepted
- Every violation is reported together
- Currency mismatch replaces the totals check
- Zero amount policy
- Default date comes from the injected clock
"""

from datetime import date

import pytest
from pydantic import ValidationError

from ledger_core.domain.amount import Amount
from ledger_core.domain.clock import FixedClock
from ledger_core.domain.entry import DocumentRef, Entry, collect_violations
from ledger_core.domain.enums import Violation
from ledger_core.domain.money import Money, sum_money
from ledger_core.exceptions import StructuralValidationError

CASH = 1
RECEIVABLE = 2
REVENUE = 3


def make_entry(**overrides):
    params = dict(
        description="Receiving payment on an invoice",
        debit_amounts=[Amount.debit(CASH, 1000, "USD")],
        credit_amounts=[Amount.credit(RECEIVABLE, 1000, "USD")],
        date=date(2024, 3, 1),
    )
    params.update(overrides)
    return Entry.create(**params)


class TestCreateEntry:

    def test_balanced_entry_succeeds(self):
        entry = make_entry()
        assert entry.description == "Receiving payment on an invoice"
        assert entry.date == date(2024, 3, 1)
        assert entry.id is None

    def test_totals_are_equal_on_accepted_entry(self):
        entry = make_entry(
            debit_amounts=[
                Amount.debit(CASH, 600, "USD"),
                Amount.debit(RECEIVABLE, 400, "USD"),
            ],
            credit_amounts=[Amount.credit(REVENUE, 1000, "USD")],
        )
        assert sum_money(entry.debit_amounts) == sum_money(entry.credit_amounts)
        assert entry.total == Money(amount=1000, currency="USD")

    def test_amounts_keep_their_order(self):
        debits = [Amount.debit(CASH, 600, "USD"), Amount.debit(RECEIVABLE, 400, "USD")]
        entry = make_entry(
            debit_amounts=debits,
            credit_amounts=[Amount.credit(REVENUE, 1000, "USD")],
        )
        assert list(entry.debit_amounts) == debits
        assert entry.amounts[-1].account_id == REVENUE

    def test_document_reference_is_kept_opaque(self):
        ref = DocumentRef(document_type="Invoice", document_id="INV-42")
        entry = make_entry(document_ref=ref)
        assert entry.document_ref == ref

    def test_entry_is_immutable(self):
        entry = make_entry()
        with pytest.raises(ValidationError):
            entry.description = "changed"

    def test_postings_carry_entry_date(self):
        entry = make_entry()
        postings = entry.postings()
        assert len(postings) == 2
        assert all(p.date == date(2024, 3, 1) for p in postings)


class TestEntryValidation:

    def test_unbalanced_entry_rejected(self):
        with pytest.raises(StructuralValidationError) as exc_info:
            make_entry(credit_amounts=[Amount.credit(RECEIVABLE, 999, "USD")])
        assert exc_info.value.errors == [Violation.UNBALANCED]
        assert "not equal" in str(exc_info.value)

    def test_missing_description_rejected(self):
        with pytest.raises(StructuralValidationError) as exc_info:
            make_entry(description="   ")
        assert exc_info.value.errors == [Violation.MISSING_DESCRIPTION]

    def test_all_violations_reported_together(self):
        with pytest.raises(StructuralValidationError) as exc_info:
            make_entry(
                description="",
                debit_amounts=[],
                credit_amounts=[Amount.credit(RECEIVABLE, 100, "USD")],
            )
        assert exc_info.value.errors == [
            Violation.MISSING_DESCRIPTION,
            Violation.NO_DEBIT_AMOUNTS,
            Violation.UNBALANCED,
        ]

    def test_empty_entry_reports_every_missing_part(self):
        with pytest.raises(StructuralValidationError) as exc_info:
            make_entry(description=None, debit_amounts=[], credit_amounts=[])
        assert exc_info.value.codes == [
            "MISSING_DESCRIPTION",
            "NO_DEBIT_AMOUNTS",
            "NO_CREDIT_AMOUNTS",
        ]

    def test_mixed_currencies_rejected_even_when_totals_match(self):
        with pytest.raises(StructuralValidationError) as exc_info:
            make_entry(credit_amounts=[Amount.credit(RECEIVABLE, 1000, "EUR")])
        assert exc_info.value.errors == [Violation.MULTIPLE_CURRENCIES]

    def test_currency_mismatch_replaces_totals_check(self):
        violations = collect_violations(
            "Mixed",
            [Amount.debit(CASH, 1000, "USD")],
            [Amount.credit(RECEIVABLE, 10, "EUR")],
        )
        assert violations == [Violation.MULTIPLE_CURRENCIES]

    def test_amount_on_wrong_side_rejected(self):
        with pytest.raises(StructuralValidationError) as exc_info:
            make_entry(
                debit_amounts=[Amount.credit(CASH, 1000, "USD")],
            )
        assert Violation.SIDE_MISMATCH in exc_info.value.errors

    def test_rejection_is_a_value_error(self):
        with pytest.raises(ValueError):
            make_entry(debit_amounts=[])

    def test_direct_construction_cannot_bypass_invariants(self):
        with pytest.raises(ValidationError):
            Entry(
                description="Unbalanced",
                date=date(2024, 1, 1),
                debit_amounts=(Amount.debit(CASH, 10, "USD"),),
                credit_amounts=(Amount.credit(RECEIVABLE, 5, "USD"),),
            )


class TestZeroAmountPolicy:

    def test_zero_amounts_rejected_by_default(self):
        with pytest.raises(StructuralValidationError) as exc_info:
            make_entry(
                debit_amounts=[Amount.debit(CASH, 0, "USD")],
                credit_amounts=[Amount.credit(RECEIVABLE, 0, "USD")],
                allow_zero_amounts=False,
            )
        assert exc_info.value.errors == [Violation.NON_POSITIVE_AMOUNT]

    def test_zero_amounts_allowed_when_enabled(self):
        entry = make_entry(
            debit_amounts=[Amount.debit(CASH, 0, "USD")],
            credit_amounts=[Amount.credit(RECEIVABLE, 0, "USD")],
            allow_zero_amounts=True,
        )
        assert entry.total.is_zero()


class TestDefaultDate:

    def test_missing_date_comes_from_clock(self):
        clock = FixedClock(date(2024, 6, 30))
        entry = make_entry(date=None, clock=clock)
        assert entry.date == date(2024, 6, 30)

    def test_clock_is_read_at_creation(self):
        clock = FixedClock(date(2024, 6, 30))
        first = make_entry(date=None, clock=clock)
        clock.advance(2)
        second = make_entry(date=None, clock=clock)
        assert first.date == date(2024, 6, 30)
        assert second.date == date(2024, 7, 2)

    def test_explicit_date_wins_over_clock(self):
        clock = FixedClock(date(2024, 6, 30))
        entry = make_entry(date=date(2023, 12, 31), clock=clock)
        assert entry.date == date(2023, 12, 31)

    def test_system_clock_used_without_injection(self):
        entry = make_entry(date=None)
        assert entry.date == date.today()


class TestEntryCurrency:

    def test_currency_of_amounts(self):
        entry = make_entry(
            debit_amounts=[Amount.debit(CASH, 5, "EUR")],
            credit_amounts=[Amount.credit(RECEIVABLE, 5, "EUR")],
        )
        assert entry.currency() == "EUR"

    def test_default_currency_without_amounts(self):
        entry = Entry.model_construct(
            description="empty",
            date=date(2024, 1, 1),
            debit_amounts=(),
            credit_amounts=(),
        )
        assert entry.currency(default="GBP") == "GBP"
