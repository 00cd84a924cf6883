"""Evaluate command - run one instruction against accounts from a file."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

import typer
from typing_extensions import Annotated

from payment_instructions.api.services import InstructionService, PaymentRequestError
from payment_instructions.cli.commands._config import resolve_config
from payment_instructions.cli.output import log_error, log_info, log_outcome, output_json


def _load_accounts(accounts_file: Path) -> Any:
    """Read accounts from a JSON list or an object with an "accounts" list."""
    if not accounts_file.exists():
        log_error(f"Accounts file not found: {accounts_file}")
        raise typer.Exit(code=1)

    try:
        data = json.loads(accounts_file.read_text())
    except json.JSONDecodeError as e:
        log_error(f"Invalid JSON in {accounts_file}: {e}")
        raise typer.Exit(code=1)

    if isinstance(data, dict) and "accounts" in data:
        return data["accounts"]
    return data


def evaluate_command(
    instruction: Annotated[
        str,
        typer.Argument(help="Instruction text, e.g. 'DEBIT 100 USD FROM ACCOUNT A1 TO ACCOUNT A2'"),
    ],
    accounts: Annotated[
        Path,
        typer.Option("--accounts", "-a", help="JSON file with the account records"),
    ],
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Service configuration YAML file"),
    ] = None,
    as_of: Annotated[
        Optional[datetime],
        typer.Option(
            "--as-of",
            formats=["%Y-%m-%d"],
            help="Evaluate as if today were this date (YYYY-MM-DD)",
        ),
    ] = None,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Suppress logs on stderr"),
    ] = False,
):
    """Evaluate an instruction and print the outcome as JSON.

    Exits with code 0 for successful and pending outcomes and 1 for failed
    outcomes or invalid input.

    Examples:

        # Settle against accounts.json
        payment-instructions evaluate "DEBIT 100 USD FROM ACCOUNT A1 TO ACCOUNT A2" -a accounts.json

        # Check how a scheduled instruction is treated on a given day
        payment-instructions evaluate "DEBIT 100 USD FROM ACCOUNT A1 TO ACCOUNT A2 ON 2025-06-01" \\
            -a accounts.json --as-of 2025-06-01
    """
    service_config = resolve_config(config)
    account_records = _load_accounts(accounts)

    if as_of is not None:
        evaluation_day = as_of.date()
        service = InstructionService(
            service_config.supported_currencies, today=lambda: evaluation_day
        )
        log_info(f"Evaluating as of {evaluation_day.isoformat()}", quiet)
    else:
        service = InstructionService(service_config.supported_currencies)

    try:
        outcome = service.handle_payment_instruction(
            {"accounts": account_records, "instruction": instruction}
        )
    except PaymentRequestError as e:
        log_error(f"Invalid input: {e.message}")
        raise typer.Exit(code=1)

    log_outcome(outcome, quiet)
    output_json(outcome.to_dict())

    if outcome.is_failed:
        raise typer.Exit(code=1)
