"""
Amount model.

Each row is one debit or one credit of a journal entry. The
amount is stored in minor units and is never negative; the
direction is in ``side``.
"""

from sqlalchemy import (
    BigInteger, String, ForeignKey, CheckConstraint,
    Enum as SAEnum,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ledger_core.domain.amount import Amount
from ledger_core.domain.enums import Side
from ledger_core.domain.money import Money
from ledger_core.models.base import Base


class AmountRow(Base):
    __tablename__ = "ledger_amounts"
    __table_args__ = (
        CheckConstraint("amount >= 0", name="ck_ledger_amounts_non_negative"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    entry_id: Mapped[int] = mapped_column(
        ForeignKey("journal_entries.id"), nullable=False, index=True
    )
    account_id: Mapped[int] = mapped_column(
        ForeignKey("ledger_accounts.id"), nullable=False, index=True
    )
    side: Mapped[Side] = mapped_column(
        SAEnum(Side, name="side_enum"),
        nullable=False,
    )
    amount: Mapped[int] = mapped_column(BigInteger, nullable=False)
    currency: Mapped[str] = mapped_column(String(3), nullable=False)

    entry: Mapped["JournalEntry"] = relationship(back_populates="amounts")
    account: Mapped["LedgerAccount"] = relationship(back_populates="amounts")

    @classmethod
    def from_domain(cls, amount: Amount) -> "AmountRow":
        return cls(
            account_id=amount.account_id,
            side=amount.side,
            amount=amount.money.amount,
            currency=amount.currency,
        )

    def to_domain(self) -> Amount:
        return Amount(
            account_id=self.account_id,
            money=Money(amount=self.amount, currency=self.currency),
            side=self.side,
        )

    def __repr__(self) -> str:
        return f"<AmountRow {self.side.value} {self.amount} {self.currency}>"
