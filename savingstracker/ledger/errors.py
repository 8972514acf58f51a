"""Mini README: Error hierarchy raised by the ledger store.

Structure:
    * LedgerError - base class for every ledger failure.
    * InvalidAmountError - rejected user input, the ledger is left unchanged.
    * InvalidTransactionTypeError - unknown income/expense label.
    * CorruptStateError - persisted blob could not be parsed during hydration.
    * PersistenceError - the blob store refused a write; the mutation was rolled back.
"""

from __future__ import annotations

from typing import Optional


class LedgerError(Exception):
    """Base class for ledger failures."""


class InvalidAmountError(LedgerError, ValueError):
    """Raised when an amount is missing, non-numeric, or not strictly positive."""

    def __init__(self, value: object, reason: str = "amount must be a number greater than zero") -> None:
        super().__init__(f"Invalid amount {value!r}: {reason}")
        self.value = value
        self.reason = reason


class InvalidTransactionTypeError(LedgerError, ValueError):
    """Raised when a transaction type is neither income nor expense."""


class CorruptStateError(LedgerError):
    """Raised when persisted ledger state cannot be deserialised."""

    def __init__(self, storage_key: str, detail: str) -> None:
        super().__init__(f"Persisted ledger under '{storage_key}' is corrupt: {detail}")
        self.storage_key = storage_key
        self.detail = detail


class PersistenceError(LedgerError):
    """Raised when the blob store fails to save the ledger."""

    def __init__(self, storage_key: str, operation: str, cause: Optional[str] = None) -> None:
        message = f"Failed to persist ledger under '{storage_key}' after {operation}"
        if cause:
            message = f"{message}: {cause}"
        super().__init__(message)
        self.storage_key = storage_key
        self.operation = operation
