"""Mini README: Whole-unit currency rendering for balances and feed entries.

Structure:
    * CurrencyFormat - locale, currency code, and optional symbol override.
    * format_currency - rounds for display and applies locale conventions.
    * format_signed_currency - prefixes ``+``/``-`` by transaction type.

Only the display is rounded; stored amounts keep their full precision.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Dict, NamedTuple, Optional, Union

from ..ledger.models import Transaction, TransactionType

NBSP = "\u00a0"
NARROW_NBSP = "\u202f"


class LocaleConvention(NamedTuple):
    group_separator: str
    symbol_first: bool
    symbol_spacing: str


LOCALE_CONVENTIONS: Dict[str, LocaleConvention] = {
    "id-ID": LocaleConvention(".", True, NBSP),
    "en-US": LocaleConvention(",", True, ""),
    "en-GB": LocaleConvention(",", True, ""),
    "de-DE": LocaleConvention(".", False, NBSP),
    "fr-FR": LocaleConvention(NARROW_NBSP, False, NBSP),
    "ja-JP": LocaleConvention(",", True, ""),
}

CURRENCY_SYMBOLS: Dict[str, str] = {
    "IDR": "Rp",
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
}


@dataclass(frozen=True)
class CurrencyFormat:
    """Display configuration for monetary amounts."""

    locale: str = "id-ID"
    currency_code: str = "IDR"
    symbol_override: Optional[str] = "Rp"

    def __post_init__(self) -> None:
        if self.locale not in LOCALE_CONVENTIONS:
            supported = ", ".join(sorted(LOCALE_CONVENTIONS))
            raise ValueError(f"Unsupported locale '{self.locale}'. Supported: {supported}")
        object.__setattr__(self, "currency_code", self.currency_code.strip().upper())

    @property
    def convention(self) -> LocaleConvention:
        return LOCALE_CONVENTIONS[self.locale]

    @property
    def symbol(self) -> str:
        if self.symbol_override:
            return self.symbol_override
        return CURRENCY_SYMBOLS.get(self.currency_code, self.currency_code)


DEFAULT_CURRENCY_FORMAT = CurrencyFormat()


def _group_digits(digits: str, separator: str) -> str:
    groups = []
    while len(digits) > 3:
        groups.insert(0, digits[-3:])
        digits = digits[:-3]
    groups.insert(0, digits)
    return separator.join(groups)


def format_currency(
    amount: Union[int, float, Decimal], fmt: CurrencyFormat = DEFAULT_CURRENCY_FORMAT
) -> str:
    """Render ``amount`` rounded half away from zero to whole currency units.

    Values that round to zero keep their minus sign (``-0.4`` renders as
    ``-Rp 0``), as browsers do with ``Intl.NumberFormat``.
    """

    value = Decimal(str(amount))
    with localcontext() as ctx:
        ctx.prec = max(28, value.adjusted() + 2)
        rounded = value.quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    negative = value.is_signed()
    convention = fmt.convention
    number = _group_digits(str(abs(int(rounded))), convention.group_separator)
    if convention.symbol_first:
        body = f"{fmt.symbol}{convention.symbol_spacing}{number}"
    else:
        body = f"{number}{convention.symbol_spacing}{fmt.symbol}"
    return f"-{body}" if negative else body


def format_signed_currency(
    transaction: Transaction, fmt: CurrencyFormat = DEFAULT_CURRENCY_FORMAT
) -> str:
    """Format a feed amount with ``+`` for income and ``-`` for expense."""

    if transaction.transaction_type is TransactionType.INCOME:
        sign = "+"
    elif transaction.transaction_type is TransactionType.EXPENSE:
        sign = "-"
    else:
        raise AssertionError(f"Unhandled transaction type {transaction.transaction_type!r}")
    return f"{sign}{format_currency(transaction.amount, fmt)}"
