"""Mini README: Stateless presentation helpers.

Pure functions that turn amounts into currency strings and timestamps into
relative labels. Nothing here reads the system clock or mutates state.
"""

from .currency import (
    DEFAULT_CURRENCY_FORMAT,
    CurrencyFormat,
    format_currency,
    format_signed_currency,
)
from .relative_time import format_relative_time

__all__ = [
    "CurrencyFormat",
    "DEFAULT_CURRENCY_FORMAT",
    "format_currency",
    "format_relative_time",
    "format_signed_currency",
]
