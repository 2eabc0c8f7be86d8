"""
Journal entry model.

One row per accepted entry, with its amounts in ledger_amounts.
Rows are append-only: an entry is never updated or deleted.
"""

import datetime as dt

from sqlalchemy import String, Date, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ledger_core.domain.entry import DocumentRef, Entry
from ledger_core.domain.enums import Side
from ledger_core.models.base import Base


class JournalEntry(Base):
    """
    Stored form of a validated Entry.

    The entry was checked by Entry.create() before this row was
    built; the model is just the data structure.
    """

    __tablename__ = "journal_entries"

    id: Mapped[int] = mapped_column(primary_key=True)
    description: Mapped[str] = mapped_column(String(255), nullable=False)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    # Polymorphic "commercial document" reference, stored opaquely
    document_type: Mapped[str | None] = mapped_column(
        String(100), nullable=True
    )
    document_id: Mapped[str | None] = mapped_column(
        String(100), nullable=True
    )
    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime, nullable=False, default=dt.datetime.utcnow
    )

    amounts: Mapped[list["AmountRow"]] = relationship(
        back_populates="entry",
        order_by="AmountRow.id",
        cascade="all, delete-orphan",
    )

    def to_domain(self) -> Entry:
        document_ref = None
        if self.document_type is not None:
            document_ref = DocumentRef(
                document_type=self.document_type,
                document_id=self.document_id,
            )
        amounts = [row.to_domain() for row in self.amounts]
        return Entry(
            id=self.id,
            description=self.description,
            date=self.date,
            document_ref=document_ref,
            debit_amounts=tuple(a for a in amounts if a.side is Side.DEBIT),
            credit_amounts=tuple(a for a in amounts if a.side is Side.CREDIT),
        )

    def __repr__(self) -> str:
        return f"<JournalEntry {self.id} {self.date} {self.description!r}>"
