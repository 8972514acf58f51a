"""Mini README: Ledger records, aggregates, and the persisted ledger store.

This package owns the income and expense entries. ``LedgerStore`` keeps
them newest-first, recomputes totals on demand, and writes the full
collection to a blob store after every change.
"""

from .errors import (
    CorruptStateError,
    InvalidAmountError,
    InvalidTransactionTypeError,
    LedgerError,
    PersistenceError,
)
from .models import (
    LedgerTotals,
    Transaction,
    TransactionType,
    dump_transactions,
    load_transactions,
    parse_amount,
)
from .store import DEFAULT_STORAGE_KEY, LedgerStore

__all__ = [
    "CorruptStateError",
    "DEFAULT_STORAGE_KEY",
    "InvalidAmountError",
    "InvalidTransactionTypeError",
    "LedgerError",
    "LedgerStore",
    "LedgerTotals",
    "PersistenceError",
    "Transaction",
    "TransactionType",
    "dump_transactions",
    "load_transactions",
    "parse_amount",
]
