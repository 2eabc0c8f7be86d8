"""
Typed exceptions for the ledger.

Every exception carries a machine-readable ``code`` and the
structured data that caused it, so callers react by type and
attribute instead of parsing messages.

All of them subclass ValueError: code that only knows the
ledger rejects bad input with ValueError keeps working.
"""


class LedgerError(ValueError):
    """Base class for every ledger error."""

    code: str = "LEDGER_ERROR"


class StructuralValidationError(LedgerError):
    """
    An entry broke one or more double-entry invariants.

    ``errors`` lists every violation found, not just the first,
    so a caller can report the complete problem in one pass.
    """

    code: str = "STRUCTURAL_VALIDATION"

    def __init__(self, errors):
        self.errors = list(errors)
        super().__init__(
            "Entry is invalid: " + "; ".join(e.value for e in self.errors)
        )

    @property
    def codes(self) -> list[str]:
        return [e.name for e in self.errors]


class NotFoundError(LedgerError):
    """A referenced account or entry does not exist."""

    code: str = "NOT_FOUND"

    def __init__(self, kind: str, identifier):
        self.kind = kind
        self.identifier = identifier
        super().__init__(f"{kind.capitalize()} {identifier} not found")


class CurrencyMismatchError(LedgerError):
    """Money in two different currencies was combined."""

    code: str = "CURRENCY_MISMATCH"

    def __init__(self, expected: str, actual: str):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Currency mismatch: expected {expected}, got {actual}"
        )


class InactiveAccountError(LedgerError):
    """An entry referenced a deactivated account."""

    code: str = "ACCOUNT_INACTIVE"

    def __init__(self, account_id: int, name: str):
        self.account_id = account_id
        self.name = name
        super().__init__(f"Account {name} is not active")
