"""Mini README: Controller composing the ledger store with the formatters.

Structure:
    * EntryView / LedgerView - display-ready snapshots of the ledger.
    * LedgerController - load-then-serve lifecycle used by the command line.

The controller hydrates the store once at startup, forwards user actions to
it, and renders formatted totals after each action. Confirmation before a
full clear is the controller's job; the store clears unconditionally.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional, Tuple, Union

from ..formatting import (
    DEFAULT_CURRENCY_FORMAT,
    CurrencyFormat,
    format_currency,
    format_relative_time,
    format_signed_currency,
)
from ..ledger import CorruptStateError, LedgerStore, Transaction, TransactionType
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

INVALID_AMOUNT_MESSAGE = "Please enter a valid amount"
CLEAR_CONFIRMATION_PROMPT = "Are you sure you want to clear all transactions? This cannot be undone."


@dataclass(frozen=True)
class EntryView:
    """One formatted row of the transaction feed."""

    transaction_id: int
    transaction_type: TransactionType
    description: str
    date_label: str
    amount_label: str


@dataclass(frozen=True)
class LedgerView:
    """Formatted balance card plus the newest-first feed."""

    balance: str
    total_income: str
    total_expense: str
    entries: Tuple[EntryView, ...]

    @property
    def is_empty(self) -> bool:
        return not self.entries


class LedgerController:
    """Drive a ``LedgerStore`` on behalf of a user interface."""

    def __init__(
        self,
        store: LedgerStore,
        currency_format: CurrencyFormat = DEFAULT_CURRENCY_FORMAT,
    ) -> None:
        self.store = store
        self.currency_format = currency_format
        self._started = False

    def start(self, *, reset_on_corrupt: bool = False) -> int:
        """Hydrate the store.

        A corrupt blob propagates ``CorruptStateError`` unless
        ``reset_on_corrupt`` is set, in which case the blob is copied to
        ``<key>.corrupt`` and the ledger starts empty with a warning.
        """

        try:
            loaded = self.store.hydrate()
        except CorruptStateError as error:
            if not reset_on_corrupt:
                LOGGER.error("Refusing to start: %s", error)
                raise
            loaded = self._reset_corrupt_state(error)
        self._started = True
        LOGGER.info("Ledger ready with %s transactions", loaded)
        return loaded

    def _reset_corrupt_state(self, error: CorruptStateError) -> int:
        backing = self.store.blob_store
        backup_key = f"{error.storage_key}.corrupt"
        if not backing.copy(error.storage_key, backup_key):
            LOGGER.error("Could not back up corrupt ledger to '%s'; refusing to reset", backup_key)
            raise error
        LOGGER.warning(
            "Discarding corrupt ledger (%s); original saved under '%s'", error.detail, backup_key
        )
        self.store.clear()
        return 0

    def submit(
        self,
        amount_text: Union[str, float, int, None],
        transaction_type: Union[TransactionType, str],
        description_text: Optional[str] = None,
    ) -> Transaction:
        """Record a new entry; ``InvalidAmountError`` reaches the caller untouched."""

        self._ensure_started()
        return self.store.add(amount_text, transaction_type, description_text)

    def delete(self, transaction_id: int) -> bool:
        self._ensure_started()
        return self.store.remove(transaction_id)

    def clear(self, confirm: Callable[[], bool]) -> bool:
        """Clear the ledger when it holds entries and ``confirm`` agrees."""

        self._ensure_started()
        if len(self.store) == 0:
            return False
        if not confirm():
            LOGGER.info("Clear cancelled by user")
            return False
        self.store.clear()
        return True

    def render(self, now: datetime) -> LedgerView:
        """Format totals and the feed relative to ``now``."""

        totals = self.store.aggregate()
        entries = tuple(
            EntryView(
                transaction_id=transaction.transaction_id,
                transaction_type=transaction.transaction_type,
                description=transaction.description,
                date_label=format_relative_time(transaction.created_at, now),
                amount_label=format_signed_currency(transaction, self.currency_format),
            )
            for transaction in self.store.list()
        )
        return LedgerView(
            balance=format_currency(totals.balance, self.currency_format),
            total_income=format_currency(totals.total_income, self.currency_format),
            total_expense=format_currency(totals.total_expense, self.currency_format),
            entries=entries,
        )

    @staticmethod
    def notification_for(transaction: Transaction) -> str:
        return f"{transaction.transaction_type.label} added successfully!"

    def _ensure_started(self) -> None:
        if not self._started:
            raise RuntimeError("LedgerController.start() must be called before use")
