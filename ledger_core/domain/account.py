"""
Ledger account (chart of accounts entry) as seen by the core.

Accounts own no amounts; amounts refer to them by id.
"""

from pydantic import BaseModel, ConfigDict, Field

from ledger_core.config import get_settings
from ledger_core.domain.enums import AccountType, Side
from ledger_core.domain.money import CurrencyCode


class Account(BaseModel):
    """
    A named, typed posting target.

    A contra account (accumulated depreciation, sales returns)
    keeps its type but has the opposite polarity.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    name: str = Field(min_length=1)
    account_type: AccountType
    is_contra: bool = False
    currency: CurrencyCode = Field(
        default_factory=lambda: get_settings().DEFAULT_CURRENCY
    )
    is_active: bool = True

    @property
    def normal_balance(self) -> Side:
        return self.account_type.normal_balance

    @property
    def effective_normal_balance(self) -> Side:
        """Normal balance after the contra flag is applied."""
        if self.is_contra:
            return self.normal_balance.opposite()
        return self.normal_balance
