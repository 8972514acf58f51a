"""Mini README: Entry point CLI for the savings tracker.

This script exposes a Typer CLI for recording income and expenses, removing
or clearing entries, and printing the balance card with the transaction
feed. Settings come from environment variables (``SAVINGS_TRACKER_*``) with
command line overrides for the data directory.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Optional

import typer

from savingstracker.configuration import get_settings
from savingstracker.interface import (
    CLEAR_CONFIRMATION_PROMPT,
    INVALID_AMOUNT_MESSAGE,
    LedgerController,
    LedgerView,
)
from savingstracker.ledger import (
    CorruptStateError,
    InvalidAmountError,
    LedgerStore,
    PersistenceError,
    TransactionType,
)
from savingstracker.logging_utils import configure_root_logger
from savingstracker.storage import FileBlobStore

cli = typer.Typer(help="Track savings: record income and expenses and watch the balance.")


@cli.callback()
def main(
    ctx: typer.Context,
    data_dir: Optional[Path] = typer.Option(None, help="Directory holding the ledger file."),
    reset_corrupt: bool = typer.Option(
        False,
        help="Back up and discard an unreadable ledger instead of refusing to start.",
    ),
) -> None:
    """Load the ledger before running a command."""

    settings = get_settings()
    configure_root_logger(settings.log_level)
    store = LedgerStore(
        FileBlobStore(data_dir or settings.data_directory),
        storage_key=settings.storage_key,
    )
    controller = LedgerController(store, settings.currency_format())
    try:
        controller.start(reset_on_corrupt=reset_corrupt)
    except CorruptStateError as error:
        typer.secho(f"Error: {error}", fg=typer.colors.RED, err=True)
        typer.echo("Re-run with --reset-corrupt to back it up and start empty.", err=True)
        raise typer.Exit(code=2) from error
    ctx.obj = controller


def _print_view(view: LedgerView) -> None:
    typer.echo(f"Balance: {view.balance}")
    typer.echo(f"Income:  {view.total_income}")
    typer.echo(f"Expense: {view.total_expense}")
    typer.echo("")
    if view.is_empty:
        typer.echo("No transactions yet")
        typer.echo("Start by adding your first transaction above")
        return
    for entry in view.entries:
        typer.echo(
            f"[{entry.transaction_id}] {entry.amount_label:>16}  "
            f"{entry.description}  ({entry.date_label})"
        )


@cli.command()
def show(ctx: typer.Context) -> None:
    """Print the balance card and the newest-first transaction feed."""

    controller: LedgerController = ctx.obj
    _print_view(controller.render(datetime.now()))


@cli.command()
def add(
    ctx: typer.Context,
    amount: str = typer.Argument(..., help="Amount in whole currency units."),
    transaction_type: TransactionType = typer.Option(
        TransactionType.INCOME, "--type", "-t", case_sensitive=False, help="income or expense"
    ),
    description: str = typer.Option("", "--description", "-d", help="Optional label."),
) -> None:
    """Record an income or expense entry."""

    controller: LedgerController = ctx.obj
    try:
        transaction = controller.submit(amount, transaction_type, description)
    except InvalidAmountError as error:
        typer.secho(INVALID_AMOUNT_MESSAGE, fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from error
    except PersistenceError as error:
        typer.secho(f"Error: {error}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from error
    typer.secho(controller.notification_for(transaction), fg=typer.colors.GREEN)
    _print_view(controller.render(datetime.now()))


@cli.command()
def remove(
    ctx: typer.Context,
    transaction_id: int = typer.Argument(..., help="Identifier shown in brackets by 'show'."),
) -> None:
    """Delete a single entry."""

    controller: LedgerController = ctx.obj
    try:
        removed = controller.delete(transaction_id)
    except PersistenceError as error:
        typer.secho(f"Error: {error}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from error
    if removed:
        typer.echo(f"Removed transaction {transaction_id}.")
    else:
        typer.echo(f"No transaction with id {transaction_id}.")


@cli.command()
def clear(
    ctx: typer.Context,
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt."),
) -> None:
    """Delete every entry after confirmation."""

    controller: LedgerController = ctx.obj
    try:
        cleared = controller.clear(lambda: yes or typer.confirm(CLEAR_CONFIRMATION_PROMPT))
    except PersistenceError as error:
        typer.secho(f"Error: {error}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from error
    typer.echo("All transactions cleared." if cleared else "Nothing cleared.")


if __name__ == "__main__":
    cli()
