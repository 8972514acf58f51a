"""Mini README: Ledger records and their persisted JSON representation.

Structure:
    * TransactionType - closed enum for income versus expense entries.
    * Transaction - immutable ledger entry with serialisation helpers.
    * LedgerTotals - derived income, expense, and balance aggregate.
    * parse_amount - validates user supplied amounts.
    * dump_transactions / load_transactions - the persisted blob codec.

The blob is a JSON array of objects with ``id``, ``amount``, ``type``,
``description`` and ``createdAt`` keys, newest entry first. Reading also
accepts blobs written by the browser edition of the tracker, which stored
the timestamp under ``date`` as a UTC ISO string.
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Union

from .errors import CorruptStateError, InvalidAmountError, InvalidTransactionTypeError

AmountInput = Union[str, int, float, Decimal, None]


class TransactionType(str, Enum):
    """Enumerate the supported transaction categories."""

    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def from_str(cls, value: Union[str, "TransactionType"]) -> "TransactionType":
        """Coerce arbitrary casing into a valid transaction type."""

        if isinstance(value, cls):
            return value
        try:
            normalised = value.strip().lower()
            return cls(normalised)
        except (ValueError, AttributeError) as error:
            raise InvalidTransactionTypeError(f"Unsupported transaction type: {value!r}") from error

    @property
    def label(self) -> str:
        """Human readable label, also the default description."""

        if self is TransactionType.INCOME:
            return "Income"
        if self is TransactionType.EXPENSE:
            return "Expense"
        raise AssertionError(f"Unhandled transaction type {self!r}")


@dataclass(frozen=True, slots=True)
class Transaction:
    """Represent a single income or expense entry."""

    transaction_id: int
    amount: float
    transaction_type: TransactionType
    description: str
    created_at: datetime

    @property
    def signed_amount(self) -> float:
        """Return the amount with the sign it contributes to the balance."""

        if self.transaction_type is TransactionType.INCOME:
            return self.amount
        if self.transaction_type is TransactionType.EXPENSE:
            return -self.amount
        raise AssertionError(f"Unhandled transaction type {self.transaction_type!r}")

    def as_dict(self) -> Dict[str, object]:
        """Export the transaction using the persisted key names."""

        return {
            "id": self.transaction_id,
            "amount": self.amount,
            "type": self.transaction_type.value,
            "description": self.description,
            "createdAt": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Transaction":
        """Rebuild a transaction from its persisted form, raising ``ValueError`` on bad data."""

        if not isinstance(payload, dict):
            raise ValueError(f"expected an object, got {type(payload).__name__}")
        missing = [key for key in ("id", "amount", "type") if key not in payload]
        if missing:
            raise ValueError(f"missing field(s): {', '.join(missing)}")
        raw_timestamp = payload.get("createdAt", payload.get("date"))
        if raw_timestamp is None:
            raise ValueError("missing field(s): createdAt")

        transaction_type = TransactionType.from_str(payload["type"])
        description = payload.get("description")
        if description is not None and not isinstance(description, str):
            raise ValueError("description must be text")
        return cls(
            transaction_id=_parse_identifier(payload["id"]),
            amount=_parse_stored_amount(payload["amount"]),
            transaction_type=transaction_type,
            description=default_description(description, transaction_type),
            created_at=_parse_timestamp(raw_timestamp),
        )


@dataclass(frozen=True, slots=True)
class LedgerTotals:
    """Income, expense, and balance computed from the full ledger."""

    total_income: float
    total_expense: float
    balance: float

    @classmethod
    def empty(cls) -> "LedgerTotals":
        return cls(total_income=0.0, total_expense=0.0, balance=0.0)

    @classmethod
    def from_transactions(cls, transactions: Iterable[Transaction]) -> "LedgerTotals":
        """Sum amounts per type; O(n) in the number of transactions."""

        income = 0.0
        expense = 0.0
        for transaction in transactions:
            if transaction.transaction_type is TransactionType.INCOME:
                income += transaction.amount
            elif transaction.transaction_type is TransactionType.EXPENSE:
                expense += transaction.amount
            else:
                raise AssertionError(f"Unhandled transaction type {transaction.transaction_type!r}")
        return cls(total_income=income, total_expense=expense, balance=income - expense)


def default_description(description: Optional[str], transaction_type: TransactionType) -> str:
    """Strip the description and fall back to the type label when blank."""

    cleaned = (description or "").strip()
    return cleaned or transaction_type.label


def parse_amount(value: AmountInput) -> float:
    """Validate a user supplied amount and return it as a float."""

    if value is None or isinstance(value, bool):
        raise InvalidAmountError(value, "amount is required")
    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise InvalidAmountError(value, "amount is required")
        try:
            number = float(Decimal(text))
        except (InvalidOperation, ValueError, OverflowError) as error:
            raise InvalidAmountError(value, "amount is not a number") from error
    elif isinstance(value, (int, float, Decimal)):
        try:
            number = float(value)
        except (ValueError, OverflowError) as error:
            raise InvalidAmountError(value, "amount is not a representable number") from error
    else:
        raise InvalidAmountError(value, "amount is not a number")

    if not math.isfinite(number):
        raise InvalidAmountError(value, "amount must be finite")
    if number <= 0:
        raise InvalidAmountError(value, "amount must be greater than zero")
    return number


def _parse_stored_amount(value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"amount must be numeric, got {value!r}")
    number = float(value)
    if not math.isfinite(number) or number <= 0:
        raise ValueError(f"amount must be a positive number, got {value!r}")
    return number


def _parse_identifier(value: object) -> int:
    if isinstance(value, bool):
        raise ValueError(f"id must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    raise ValueError(f"id must be an integer, got {value!r}")


def _parse_timestamp(value: object) -> datetime:
    """Parse ISO timestamps, converting aware values to naive local time."""

    if not isinstance(value, str):
        raise ValueError(f"timestamp must be an ISO string, got {value!r}")
    text = value.strip()
    if text.endswith("Z"):
        text = f"{text[:-1]}+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def dump_transactions(transactions: Iterable[Transaction]) -> str:
    """Serialise transactions, preserving their order, into the blob format."""

    return json.dumps([transaction.as_dict() for transaction in transactions])


def load_transactions(blob: str, *, storage_key: str = "<memory>") -> List[Transaction]:
    """Parse a persisted blob, raising ``CorruptStateError`` on any malformed content."""

    try:
        payload = json.loads(blob)
    except (json.JSONDecodeError, TypeError) as error:
        raise CorruptStateError(storage_key, f"invalid JSON ({error})") from error
    if not isinstance(payload, list):
        raise CorruptStateError(storage_key, f"expected a list, got {type(payload).__name__}")

    transactions: List[Transaction] = []
    seen_ids = set()
    for index, entry in enumerate(payload):
        try:
            transaction = Transaction.from_dict(entry)
        except ValueError as error:
            raise CorruptStateError(storage_key, f"entry {index}: {error}") from error
        if transaction.transaction_id in seen_ids:
            raise CorruptStateError(
                storage_key, f"entry {index}: duplicate id {transaction.transaction_id}"
            )
        seen_ids.add(transaction.transaction_id)
        transactions.append(transaction)
    return transactions
