"""Mini README: Persisted ledger store owning the transaction sequence.

Structure:
    * LedgerStore - add/remove/clear/aggregate/list operations over a
      newest-first sequence, hydrated from and saved to a ``BlobStore``.

Every mutation re-serialises the whole sequence and writes it under a single
storage key before returning. When the blob store reports a failed write the
in-memory change is rolled back and ``PersistenceError`` is raised, so the
ledger held in memory never drifts from what is on disk. There is no guard
against a second process writing the same key; the last writer wins.
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable, List, Optional, Tuple, Union

from ..logging_utils import get_logger
from ..storage import BlobStore
from .errors import CorruptStateError, PersistenceError
from .models import (
    AmountInput,
    LedgerTotals,
    Transaction,
    TransactionType,
    default_description,
    dump_transactions,
    load_transactions,
    parse_amount,
)

LOGGER = get_logger(__name__)

DEFAULT_STORAGE_KEY = "savingsTransactions"


class LedgerStore:
    """Manage the ordered collection of transactions and its persistence."""

    def __init__(
        self,
        store: BlobStore,
        *,
        storage_key: str = DEFAULT_STORAGE_KEY,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._store = store
        self._storage_key = storage_key
        self._clock = clock
        self._transactions: List[Transaction] = []

    @property
    def storage_key(self) -> str:
        return self._storage_key

    @property
    def blob_store(self) -> BlobStore:
        return self._store

    def __len__(self) -> int:
        return len(self._transactions)

    def hydrate(self) -> int:
        """Load the persisted sequence, replacing whatever is held in memory.

        An absent blob yields an empty ledger. A blob that cannot be parsed
        raises ``CorruptStateError`` and leaves the current state untouched;
        callers decide whether to refuse to start or reset explicitly.
        """

        try:
            blob = self._store.get(self._storage_key)
        except UnicodeDecodeError as error:
            raise CorruptStateError(self._storage_key, f"not valid UTF-8 text ({error})") from error
        if blob is None:
            LOGGER.debug("No persisted ledger under '%s'; starting empty", self._storage_key)
            self._transactions = []
            return 0
        transactions = load_transactions(blob, storage_key=self._storage_key)
        self._transactions = transactions
        LOGGER.debug(
            "Hydrated %s transactions from '%s'", len(transactions), self._storage_key
        )
        return len(transactions)

    def add(
        self,
        amount: AmountInput,
        transaction_type: Union[TransactionType, str],
        description: Optional[str] = None,
    ) -> Transaction:
        """Validate, prepend, and persist a new transaction."""

        parsed_amount = parse_amount(amount)
        resolved_type = TransactionType.from_str(transaction_type)
        created_at = self._next_timestamp()
        transaction = Transaction(
            transaction_id=self._next_id(created_at),
            amount=parsed_amount,
            transaction_type=resolved_type,
            description=default_description(description, resolved_type),
            created_at=created_at,
        )
        previous = self._transactions
        self._transactions = [transaction, *previous]
        self._persist(previous, operation="add")
        LOGGER.info(
            "Recorded %s %s (%s) as %s",
            resolved_type.value,
            parsed_amount,
            transaction.description,
            transaction.transaction_id,
        )
        return transaction

    def remove(self, transaction_id: int) -> bool:
        """Remove the matching transaction; absent ids are a no-op."""

        previous = self._transactions
        remaining = [entry for entry in previous if entry.transaction_id != transaction_id]
        if len(remaining) == len(previous):
            LOGGER.debug("Remove ignored, transaction %s not found", transaction_id)
            return False
        self._transactions = remaining
        self._persist(previous, operation="remove")
        LOGGER.info("Removed transaction %s", transaction_id)
        return True

    def clear(self) -> None:
        """Drop every transaction and persist an empty collection."""

        previous = self._transactions
        self._transactions = []
        self._persist(previous, operation="clear")
        LOGGER.info("Cleared %s transactions", len(previous))

    def aggregate(self) -> LedgerTotals:
        """Recompute income, expense, and balance from the full sequence."""

        return LedgerTotals.from_transactions(self._transactions)

    def list(self) -> Tuple[Transaction, ...]:
        """Return the transactions newest-first as an immutable snapshot."""

        return tuple(self._transactions)

    def get(self, transaction_id: int) -> Optional[Transaction]:
        for transaction in self._transactions:
            if transaction.transaction_id == transaction_id:
                return transaction
        return None

    def serialize(self) -> str:
        return dump_transactions(self._transactions)

    def _next_timestamp(self) -> datetime:
        """Read the clock, never going earlier than the newest entry."""

        now = self._clock()
        if self._transactions and now < self._transactions[0].created_at:
            LOGGER.warning(
                "Clock moved backwards (%s < %s); reusing newest timestamp",
                now.isoformat(),
                self._transactions[0].created_at.isoformat(),
            )
            return self._transactions[0].created_at
        return now

    def _next_id(self, created_at: datetime) -> int:
        """Derive a millisecond id from the timestamp, bumped past any existing id."""

        candidate = int(created_at.timestamp() * 1000)
        if self._transactions:
            newest = max(entry.transaction_id for entry in self._transactions)
            candidate = max(candidate, newest + 1)
        return candidate

    def _persist(self, previous: List[Transaction], *, operation: str) -> None:
        """Write the full sequence, restoring ``previous`` when the write fails."""

        blob = self.serialize()
        if self._store.set(self._storage_key, blob):
            LOGGER.debug(
                "Persisted %s transactions under '%s' after %s",
                len(self._transactions),
                self._storage_key,
                operation,
            )
            return
        self._transactions = previous
        LOGGER.error(
            "Persisting '%s' failed after %s; in-memory change rolled back",
            self._storage_key,
            operation,
        )
        raise PersistenceError(self._storage_key, operation)
