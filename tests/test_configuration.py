"""Mini README: Tests for environment driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from savingstracker.configuration import SavingsTrackerSettings


def test_settings_read_prefixed_environment(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("SAVINGS_TRACKER_DATA_DIRECTORY", str(tmp_path / "ledger"))
    monkeypatch.setenv("SAVINGS_TRACKER_LOCALE", "en-US")
    monkeypatch.setenv("SAVINGS_TRACKER_CURRENCY_CODE", "USD")
    monkeypatch.setenv("SAVINGS_TRACKER_SYMBOL_OVERRIDE", "")

    settings = SavingsTrackerSettings()

    assert settings.data_directory == (tmp_path / "ledger").resolve()
    assert settings.data_directory.is_dir()
    assert settings.currency_format().symbol == "$"


def test_settings_defaults_match_rupiah_display(monkeypatch) -> None:
    for name in ("LOCALE", "CURRENCY_CODE", "SYMBOL_OVERRIDE", "STORAGE_KEY"):
        monkeypatch.delenv(f"SAVINGS_TRACKER_{name}", raising=False)

    settings = SavingsTrackerSettings()

    assert settings.storage_key == "savingsTransactions"
    assert settings.currency_format().symbol == "Rp"


def test_settings_reject_unknown_locale(monkeypatch) -> None:
    monkeypatch.setenv("SAVINGS_TRACKER_LOCALE", "tlh-KL")
    with pytest.raises(ValidationError):
        SavingsTrackerSettings()
