"""
Ledger service: the storage side of the ledger.

This service is the only writer of journal entries. It enforces:
1. Every entry passes Entry.create() (balanced, one currency,
   described, both sides present)
2. Every referenced account exists and is active
3. Every account uses the entry's currency
4. Entries are append-only

All checks run before anything is added to the session, so a
rejected entry writes nothing. The service takes a session as a
constructor argument: the caller owns the transaction boundary
and decides when to commit or roll back.
"""

import datetime as dt
from typing import Iterable

from sqlalchemy import select, func
from sqlalchemy.orm import Session

from ledger_core.config import Settings, get_settings
from ledger_core.domain.account import Account
from ledger_core.domain.amount import Amount
from ledger_core.domain.balance import (
    account_balance,
    trial_balance,
    type_balance,
)
from ledger_core.domain.clock import Clock, SystemClock
from ledger_core.domain.entry import DocumentRef, Entry, Posting
from ledger_core.domain.enums import AccountType, Side
from ledger_core.domain.money import Money
from ledger_core.exceptions import (
    CurrencyMismatchError,
    InactiveAccountError,
    NotFoundError,
    StructuralValidationError,
)
from ledger_core.logging_config import get_logger
from ledger_core.models.amount import AmountRow
from ledger_core.models.journal_entry import JournalEntry
from ledger_core.models.ledger_account import LedgerAccount
from ledger_core.schemas.ledger import LedgerAccountCreate, TrialBalanceReport

logger = get_logger(__name__)


class LedgerService:
    """
    All ledger reads and writes pass through this service.
    """

    def __init__(
        self,
        db: Session,
        clock: Clock | None = None,
        settings: Settings | None = None,
    ):
        self.db = db
        self.clock = clock or SystemClock()
        self.settings = settings or get_settings()

    # --- Accounts ---

    def create_account(self, request: LedgerAccountCreate) -> LedgerAccount:
        """
        Create a new ledger account.

        Raises ValueError if the account name already exists.
        """
        existing = self.db.execute(
            select(LedgerAccount).where(LedgerAccount.name == request.name)
        ).scalar_one_or_none()

        if existing:
            raise ValueError(f"Account with name '{request.name}' already exists")

        account = LedgerAccount(
            name=request.name,
            account_type=request.account_type,
            is_contra=request.is_contra,
            currency=request.currency,
        )
        self.db.add(account)
        self.db.flush()
        logger.info(
            "Created %s account %s (id=%s, contra=%s)",
            account.account_type.value, account.name, account.id, account.is_contra,
        )
        return account

    def get_account(self, account_id: int) -> Account:
        """Raises NotFoundError for an unknown account."""
        row = self.db.get(LedgerAccount, account_id)
        if row is None:
            raise NotFoundError("account", account_id)
        return row.to_domain()

    def deactivate_account(self, account_id: int) -> Account:
        """
        Stop new postings to an account. Its history, and so its
        balance, is kept.
        """
        row = self.db.get(LedgerAccount, account_id)
        if row is None:
            raise NotFoundError("account", account_id)
        row.is_active = False
        self.db.flush()
        logger.info("Deactivated account %s", row.name)
        return row.to_domain()

    def get_accounts(
        self, account_type: AccountType | None = None
    ) -> list[Account]:
        stmt = select(LedgerAccount).order_by(LedgerAccount.id)
        if account_type is not None:
            stmt = stmt.where(LedgerAccount.account_type == account_type)
        rows = self.db.execute(stmt).scalars().all()
        return [row.to_domain() for row in rows]

    # --- Entries ---

    def post_entry(
        self,
        description: str,
        debit_amounts: Iterable[Amount],
        credit_amounts: Iterable[Amount],
        date: dt.date | None = None,
        document_ref: DocumentRef | None = None,
    ) -> Entry:
        """
        Validate an entry and store it with all of its amounts.

        Raises StructuralValidationError (every violated invariant),
        NotFoundError, InactiveAccountError or CurrencyMismatchError.
        Nothing is added to the session unless every check passes.
        Returns the stored entry with its id set.
        """
        try:
            entry = Entry.create(
                description,
                debit_amounts,
                credit_amounts,
                date=date,
                document_ref=document_ref,
                clock=self.clock,
                allow_zero_amounts=self.settings.ALLOW_ZERO_AMOUNTS,
            )
        except StructuralValidationError as e:
            logger.warning("Rejected entry %r: %s", description, ", ".join(e.codes))
            raise

        self._check_accounts(entry)

        row = JournalEntry(
            description=entry.description,
            date=entry.date,
            document_type=entry.document_ref.document_type if entry.document_ref else None,
            document_id=entry.document_ref.document_id if entry.document_ref else None,
            amounts=[AmountRow.from_domain(a) for a in entry.amounts],
        )
        self.db.add(row)
        self.db.flush()

        logger.info(
            "Posted entry %s on %s: %s (%d debits, %d credits)",
            row.id, entry.date, entry.total,
            len(entry.debit_amounts), len(entry.credit_amounts),
        )
        return entry.model_copy(update={"id": row.id})

    def _check_accounts(self, entry: Entry) -> None:
        account_ids = {a.account_id for a in entry.amounts}
        rows = self.db.execute(
            select(LedgerAccount).where(LedgerAccount.id.in_(account_ids))
        ).scalars().all()
        accounts_by_id = {row.id: row for row in rows}

        missing = account_ids - set(accounts_by_id)
        if missing:
            raise NotFoundError("account", sorted(missing))

        currency = entry.currency()
        for account in accounts_by_id.values():
            if not account.is_active:
                raise InactiveAccountError(account.id, account.name)
            if account.currency != currency:
                raise CurrencyMismatchError(account.currency, currency)

    def get_entry(self, entry_id: int) -> Entry:
        row = self.db.get(JournalEntry, entry_id)
        if row is None:
            raise NotFoundError("entry", entry_id)
        return row.to_domain()

    def get_entries(
        self,
        from_date: dt.date | None = None,
        to_date: dt.date | None = None,
    ) -> list[Entry]:
        """Entries in date order, optionally windowed (inclusive)."""
        stmt = select(JournalEntry).order_by(JournalEntry.date, JournalEntry.id)
        if from_date is not None:
            stmt = stmt.where(JournalEntry.date >= from_date)
        if to_date is not None:
            stmt = stmt.where(JournalEntry.date <= to_date)
        return [row.to_domain() for row in self.db.execute(stmt).scalars().all()]

    # --- History ---

    def get_postings(
        self,
        account_ids: Iterable[int] | None = None,
        from_date: dt.date | None = None,
        to_date: dt.date | None = None,
    ) -> list[Posting]:
        """
        Amounts with their entry dates, ordered by entry date then
        by amount id so repeated reads come back in the same order.
        The date window is inclusive; a reversed window is empty.
        """
        stmt = (
            select(AmountRow, JournalEntry.date)
            .join(JournalEntry, AmountRow.entry_id == JournalEntry.id)
            .order_by(JournalEntry.date, AmountRow.id)
        )
        if account_ids is not None:
            stmt = stmt.where(AmountRow.account_id.in_(list(account_ids)))
        if from_date is not None:
            stmt = stmt.where(JournalEntry.date >= from_date)
        if to_date is not None:
            stmt = stmt.where(JournalEntry.date <= to_date)

        return [
            Posting(row.to_domain(), entry_date)
            for row, entry_date in self.db.execute(stmt).all()
        ]

    # --- Balances ---

    def get_account_balance(
        self,
        account_id: int,
        from_date: dt.date | None = None,
        to_date: dt.date | None = None,
    ) -> Money:
        """
        An account's balance, derived from its amounts.

        Raises NotFoundError for an unknown account; an account
        with no amounts in the window has a zero balance.
        """
        account = self.get_account(account_id)
        postings = self.get_postings([account.id], from_date, to_date)
        balance = account_balance(account, postings, from_date, to_date)
        logger.debug(
            "Balance of %s [%s..%s]: %s", account.name, from_date, to_date, balance
        )
        return balance

    def get_type_balance(
        self,
        account_type: AccountType,
        from_date: dt.date | None = None,
        to_date: dt.date | None = None,
        currency: str | None = None,
    ) -> int:
        """
        Combined balance of all accounts of one type, in minor
        units. Contra accounts are netted against the rest.

        Pass ``currency`` when accounts of the type are kept in more
        than one currency; otherwise a mixed type raises
        CurrencyMismatchError.
        """
        accounts = self.get_accounts(account_type)
        if not accounts:
            return 0
        postings = self.get_postings([a.id for a in accounts], from_date, to_date)
        return type_balance(
            account_type, accounts, postings, from_date, to_date, currency
        )

    def check_integrity(self) -> list[TrialBalanceReport]:
        """
        Verify that the whole ledger balances.

        Returns one report per currency in use, ordered by currency
        code. Each sums every debit and credit ever posted in that
        currency and recomputes the trial balance from the accounts
        kept in it. An empty ledger yields no reports.
        """
        totals = {}
        rows = self.db.execute(
            select(
                AmountRow.currency,
                AmountRow.side,
                func.coalesce(func.sum(AmountRow.amount), 0),
            ).group_by(AmountRow.currency, AmountRow.side)
        ).all()
        for currency, side, total in rows:
            totals[(currency, side)] = int(total)

        accounts = self.get_accounts()
        postings = self.get_postings()
        currencies = sorted(
            {a.currency for a in accounts} | {currency for currency, _ in totals}
        )

        reports = []
        for currency in currencies:
            total_debits = totals.get((currency, Side.DEBIT), 0)
            total_credits = totals.get((currency, Side.CREDIT), 0)
            report = TrialBalanceReport(
                currency=currency,
                total_debits=total_debits,
                total_credits=total_credits,
                difference=total_debits - total_credits,
                trial_balance=trial_balance(
                    accounts, postings, currency=currency
                ),
            )
            if not report.is_balanced:
                logger.error(
                    "Ledger out of balance in %s: debits=%s credits=%s trial=%s",
                    currency, total_debits, total_credits, report.trial_balance,
                )
            reports.append(report)
        return reports
