"""Output formatting utilities for CLI.

Follows the golden rule:
- stdout = machine-readable data (JSON)
- stderr = human-readable logs (progress, errors, info)
"""

import json
from typing import Any, Optional

from rich.console import Console

from payment_instructions.shared.data_contracts import Outcome, TransactionStatus

# stderr console for human logs (preserves colors when redirected)
console = Console(stderr=True)


def output_json(data: Any, indent: Optional[int] = 2):
    """Output JSON to stdout (machine-readable).

    Args:
        data: Data to serialize as JSON
        indent: Indentation level (None for compact)
    """
    print(json.dumps(data, indent=indent), flush=True)


def log_info(message: str, quiet: bool = False):
    """Log info message to stderr.

    Args:
        message: Message to log
        quiet: If True, suppress output
    """
    if not quiet:
        console.print(f"[blue]ℹ[/blue] {message}")


def log_success(message: str, quiet: bool = False):
    """Log success message to stderr.

    Args:
        message: Message to log
        quiet: If True, suppress output
    """
    if not quiet:
        console.print(f"[green]✓[/green] {message}")


def log_error(message: str):
    """Log error message to stderr (always shown).

    Args:
        message: Error message to log
    """
    console.print(f"[red]✗[/red] {message}", style="bold red")


def log_warning(message: str, quiet: bool = False):
    """Log warning message to stderr.

    Args:
        message: Warning message to log
        quiet: If True, suppress output
    """
    if not quiet:
        console.print(f"[yellow]⚠[/yellow] {message}", style="yellow")


def log_outcome(outcome: Outcome, quiet: bool = False):
    """Summarize an outcome on stderr, colored by status."""
    summary = f"{outcome.status.value} [{outcome.status_code}] {outcome.status_reason}"
    if outcome.status is TransactionStatus.SUCCESSFUL:
        log_success(summary, quiet)
        for account in outcome.accounts:
            log_info(
                f"  {account.id}: {account.balance_before} → {account.balance} "
                f"{account.currency}",
                quiet,
            )
    elif outcome.status is TransactionStatus.PENDING:
        log_warning(summary, quiet)
    else:
        log_error(summary)
