"""Mini README: User-facing interfaces for the savings tracker.

Exports the controller that composes the ledger store with the formatters.
The Typer command line in ``main_savings_tracker.py`` is built on top of it.
"""

from .controller import (
    CLEAR_CONFIRMATION_PROMPT,
    INVALID_AMOUNT_MESSAGE,
    EntryView,
    LedgerController,
    LedgerView,
)

__all__ = [
    "CLEAR_CONFIRMATION_PROMPT",
    "EntryView",
    "INVALID_AMOUNT_MESSAGE",
    "LedgerController",
    "LedgerView",
]
