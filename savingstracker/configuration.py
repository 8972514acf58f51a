"""Mini README: Centralised configuration model and helpers for the savings tracker.

Structure:
    * SavingsTrackerSettings - Pydantic settings describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read environment variables (prefixed with
    ``SAVINGS_TRACKER_``) or a local ``.env`` file. Settings choose where the
    ledger blob lives, which key it is stored under, and how amounts are
    displayed. The configuration is cached so validation runs once per
    process.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional, Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .formatting import CurrencyFormat
from .formatting.currency import LOCALE_CONVENTIONS


class SavingsTrackerSettings(BaseSettings):
    """Runtime configuration for the savings tracker."""

    model_config = SettingsConfigDict(
        env_prefix="SAVINGS_TRACKER_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    data_directory: Path = Field(
        Path("data"),
        description="Directory holding the persisted ledger blob.",
    )
    storage_key: str = Field(
        "savingsTransactions",
        description="Key the ledger is stored under inside the blob store.",
        min_length=1,
    )
    locale: str = Field("id-ID", description="Locale used for currency grouping and symbol placement.")
    currency_code: str = Field("IDR", description="ISO 4217 code of the display currency.")
    symbol_override: Optional[str] = Field(
        "Rp",
        description="Symbol printed instead of the currency's default. Empty disables the override.",
    )
    log_level: str = Field("INFO", description="Root logging level for the command line.")

    @field_validator("data_directory", mode="before")
    @classmethod
    def _expand_path(cls, value: Union[str, Path]) -> Path:
        """Ensure configured paths expand user directories and exist."""

        path = Path(value).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @field_validator("locale")
    @classmethod
    def _known_locale(cls, value: str) -> str:
        if value not in LOCALE_CONVENTIONS:
            raise ValueError(f"Unsupported locale '{value}'")
        return value

    @field_validator("symbol_override")
    @classmethod
    def _blank_symbol_is_none(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            return None
        return value

    def currency_format(self) -> CurrencyFormat:
        """Build the formatter configuration from these settings."""

        return CurrencyFormat(
            locale=self.locale,
            currency_code=self.currency_code,
            symbol_override=self.symbol_override,
        )


@lru_cache()
def get_settings() -> SavingsTrackerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return SavingsTrackerSettings()
