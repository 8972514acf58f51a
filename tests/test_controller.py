"""Mini README: Tests for the ledger controller.

Structure:
    * startup policy for corrupt persisted state.
    * confirmation handling around a full clear.
    * rendering of the balance card and feed.
"""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from savingstracker.formatting import CurrencyFormat
from savingstracker.interface import LedgerController
from savingstracker.ledger import CorruptStateError, InvalidAmountError, LedgerStore
from savingstracker.storage import FileBlobStore, MemoryBlobStore

START = datetime(2024, 6, 10, 8, 0)


def _controller(blob_store: MemoryBlobStore) -> LedgerController:
    readings = iter(START + timedelta(hours=offset) for offset in range(100))
    store = LedgerStore(blob_store, clock=lambda: next(readings))
    return LedgerController(store)


def test_corrupt_state_refuses_to_start() -> None:
    blob_store = MemoryBlobStore({"savingsTransactions": "{broken"})
    controller = _controller(blob_store)

    with pytest.raises(CorruptStateError):
        controller.start()

    assert blob_store.blobs["savingsTransactions"] == "{broken"
    with pytest.raises(RuntimeError):
        controller.submit("10", "income", "")


def test_corrupt_state_reset_keeps_backup() -> None:
    blob_store = MemoryBlobStore({"savingsTransactions": "{broken"})
    controller = _controller(blob_store)

    assert controller.start(reset_on_corrupt=True) == 0

    assert blob_store.blobs["savingsTransactions.corrupt"] == "{broken"
    assert blob_store.blobs["savingsTransactions"] == "[]"


def test_submit_propagates_invalid_amount() -> None:
    controller = _controller(MemoryBlobStore())
    controller.start()

    with pytest.raises(InvalidAmountError):
        controller.submit("-5", "income", "bad")

    assert controller.render(START).is_empty


def test_clear_requires_confirmation() -> None:
    controller = _controller(MemoryBlobStore())
    controller.start()
    controller.submit("100", "income", "Pocket money")

    assert controller.clear(lambda: False) is False
    assert len(controller.store) == 1
    assert controller.clear(lambda: True) is True
    assert len(controller.store) == 0


def test_clear_on_empty_ledger_skips_prompt() -> None:
    controller = _controller(MemoryBlobStore())
    controller.start()
    prompted = []

    assert controller.clear(lambda: prompted.append(True) or True) is False
    assert prompted == []


def test_render_formats_totals_and_feed() -> None:
    controller = _controller(MemoryBlobStore())
    controller.start()
    salary = controller.submit("50000", "income", "Salary")
    groceries = controller.submit("20000", "expense", "")

    view = controller.render(START + timedelta(days=1, minutes=30))

    assert view.balance == "Rp\u00a030.000"
    assert view.total_income == "Rp\u00a050.000"
    assert view.total_expense == "Rp\u00a020.000"
    assert [entry.transaction_id for entry in view.entries] == [
        groceries.transaction_id,
        salary.transaction_id,
    ]
    assert view.entries[0].description == "Expense"
    assert view.entries[0].amount_label == "-Rp\u00a020.000"
    assert view.entries[0].date_label == "Today, 09:00 AM"
    assert view.entries[1].date_label == "Yesterday, 08:00 AM"
    assert controller.notification_for(salary) == "Income added successfully!"


def test_render_uses_configured_currency() -> None:
    store = LedgerStore(MemoryBlobStore(), clock=lambda: START)
    controller = LedgerController(store, CurrencyFormat(locale="en-US", currency_code="USD", symbol_override=None))
    controller.start()
    controller.submit("1999.99", "income", "Refund")

    assert controller.render(START).balance == "$2,000"


def test_reset_backs_up_undecodable_ledger_file(tmp_path) -> None:
    (tmp_path / "savingsTransactions.json").write_bytes(b"[\xff\xfe]")
    controller = LedgerController(LedgerStore(FileBlobStore(tmp_path)))

    with pytest.raises(CorruptStateError):
        controller.start()
    assert controller.start(reset_on_corrupt=True) == 0

    assert (tmp_path / "savingsTransactions.corrupt.json").read_bytes() == b"[\xff\xfe]"
    assert (tmp_path / "savingsTransactions.json").read_text(encoding="utf-8") == "[]"


def test_render_handles_very_large_amounts() -> None:
    controller = _controller(MemoryBlobStore())
    controller.start()
    controller.submit("1e30", "income", "big")

    view = controller.render(START)

    assert view.balance == "Rp\u00a01" + ".000" * 10
    assert view.entries[0].amount_label == "+Rp\u00a01" + ".000" * 10
