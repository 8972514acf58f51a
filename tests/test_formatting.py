"""Mini README: Tests for the currency and relative time formatters."""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from savingstracker.formatting import (
    CurrencyFormat,
    format_currency,
    format_relative_time,
    format_signed_currency,
)
from savingstracker.ledger import Transaction, TransactionType

NOW = datetime(2024, 6, 15, 14, 30)  # a Saturday


@pytest.mark.parametrize(
    "amount, expected",
    [
        (50000, "Rp\u00a050.000"),
        (1234567.89, "Rp\u00a01.234.568"),
        (999.5, "Rp\u00a01.000"),
        (0, "Rp\u00a00"),
        (-30000, "-Rp\u00a030.000"),
        (-0.4, "-Rp\u00a00"),
        (1e30, "Rp\u00a01" + ".000" * 10),
    ],
)
def test_format_currency_default_rupiah(amount, expected) -> None:
    assert format_currency(amount) == expected


def test_format_currency_respects_configuration() -> None:
    dollars = CurrencyFormat(locale="en-US", currency_code="usd", symbol_override=None)
    euros = CurrencyFormat(locale="de-DE", currency_code="EUR", symbol_override=None)
    custom = CurrencyFormat(locale="en-US", currency_code="XYZ", symbol_override=None)

    assert format_currency(1234.5, dollars) == "$1,235"
    assert format_currency(-1234, euros) == "-1.234\u00a0€"
    assert format_currency(10, custom) == "XYZ10"


def test_currency_format_rejects_unknown_locale() -> None:
    with pytest.raises(ValueError):
        CurrencyFormat(locale="xx-XX")


def test_format_currency_does_not_change_stored_amount() -> None:
    transaction = Transaction(
        transaction_id=1,
        amount=12.6,
        transaction_type=TransactionType.EXPENSE,
        description="Coffee",
        created_at=NOW,
    )

    assert format_signed_currency(transaction) == "-Rp\u00a013"
    assert transaction.amount == pytest.approx(12.6)


def test_today_label_for_same_instant() -> None:
    assert format_relative_time(NOW, NOW) == "Today, 02:30 PM"


def test_yesterday_uses_elapsed_hours_not_calendar_days() -> None:
    assert format_relative_time(NOW - timedelta(hours=25), NOW) == "Yesterday, 01:30 PM"
    # previous calendar day but under 24 hours ago still counts as today
    late_yesterday = datetime(2024, 6, 14, 23, 45)
    assert format_relative_time(late_yesterday, NOW) == "Today, 11:45 PM"


def test_weekday_label_within_a_week() -> None:
    assert format_relative_time(NOW - timedelta(days=3), NOW) == "Wednesday, 02:30 PM"
    assert format_relative_time(NOW - timedelta(days=6, hours=23), NOW) == "Saturday, 03:30 PM"


def test_absolute_label_after_a_week() -> None:
    timestamp = datetime(2024, 1, 5, 9, 5)
    assert format_relative_time(timestamp, NOW) == "Jan 5, 2024, 09:05 AM"


def test_future_timestamps_use_absolute_difference() -> None:
    assert format_relative_time(NOW + timedelta(hours=30), NOW) == "Yesterday, 08:30 PM"


def test_midnight_and_noon_render_as_twelve() -> None:
    assert format_relative_time(datetime(2024, 6, 15, 0, 7), NOW) == "Today, 12:07 AM"
    assert format_relative_time(datetime(2024, 6, 15, 12, 0), NOW) == "Today, 12:00 PM"
