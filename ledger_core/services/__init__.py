"""Business logic services."""

from ledger_core.services.ledger_service import LedgerService

__all__ = ["LedgerService"]
