"""
Tests for logging setup and the log lines the service writes.
"""

import logging

import pytest

from ledger_core.domain.amount import Amount
from ledger_core.domain.enums import AccountType
from ledger_core.exceptions import StructuralValidationError
from ledger_core.logging_config import (
    LOGGER_NAME,
    configure_logging,
    get_logger,
    reset_logging,
)
from ledger_core.schemas.ledger import LedgerAccountCreate


@pytest.fixture
def ledger_logger():
    yield configure_logging("DEBUG")
    reset_logging()


def test_configure_logging_sets_level(ledger_logger):
    assert ledger_logger.name == LOGGER_NAME
    assert ledger_logger.level == logging.DEBUG


def test_configure_logging_does_not_stack_handlers(ledger_logger):
    configure_logging("INFO")
    installed = [h for h in ledger_logger.handlers if getattr(h, "_ledger_core", False)]
    assert len(installed) == 1


def test_posting_is_logged(service, db_session, caplog):
    cash = service.create_account(LedgerAccountCreate(name="Cash", account_type=AccountType.ASSET))
    sales = service.create_account(LedgerAccountCreate(name="Sales", account_type=AccountType.REVENUE))

    with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
        service.post_entry(
            "Cash sale",
            [Amount.debit(cash.id, 100, "USD")],
            [Amount.credit(sales.id, 100, "USD")],
        )
    assert "Posted entry" in caplog.text


def test_rejection_is_logged_with_codes(service, caplog):
    with caplog.at_level(logging.WARNING, logger=LOGGER_NAME):
        with pytest.raises(StructuralValidationError):
            service.post_entry("Nothing", [], [])
    assert "NO_DEBIT_AMOUNTS" in caplog.text
    assert "NO_CREDIT_AMOUNTS" in caplog.text


def test_get_logger_nests_under_ledger_core():
    assert get_logger("ledger_core.services.ledger_service").name == (
        "ledger_core.services.ledger_service"
    )
    assert get_logger("reports").name == "ledger_core.reports"
