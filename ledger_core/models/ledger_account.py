"""
Ledger account model (chart of accounts).

Entries are posted against these accounts. Once an account
has amounts it is never deleted, only deactivated.
"""

from datetime import datetime

from sqlalchemy import String, Boolean, DateTime, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ledger_core.config import get_settings
from ledger_core.domain.account import Account
from ledger_core.domain.enums import AccountType
from ledger_core.models.base import Base


class LedgerAccount(Base):
    __tablename__ = "ledger_accounts"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(
        String(100), unique=True, nullable=False
    )
    account_type: Mapped[AccountType] = mapped_column(
        SAEnum(AccountType, name="account_type_enum"),
        nullable=False,
        index=True,
    )
    is_contra: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False
    )
    currency: Mapped[str] = mapped_column(
        String(3),
        nullable=False,
        default=lambda: get_settings().DEFAULT_CURRENCY,
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow
    )

    amounts: Mapped[list["AmountRow"]] = relationship(
        back_populates="account"
    )

    def to_domain(self) -> Account:
        return Account(
            id=self.id,
            name=self.name,
            account_type=self.account_type,
            is_contra=self.is_contra,
            currency=self.currency,
            is_active=self.is_active,
        )

    def __repr__(self) -> str:
        contra = " contra" if self.is_contra else ""
        return f"<LedgerAccount {self.name} ({self.account_type.value}{contra})>"
