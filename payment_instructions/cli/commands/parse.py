"""Parse command - show how an instruction is read."""

from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from payment_instructions.cli.commands._config import resolve_config
from payment_instructions.cli.output import log_error, log_success, output_json
from payment_instructions.instructions import InstructionError, parse_instruction


def parse_command(
    instruction: Annotated[
        str,
        typer.Argument(help="Instruction text, e.g. 'DEBIT 100 USD FROM ACCOUNT A1 TO ACCOUNT A2'"),
    ],
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Service configuration YAML file"),
    ] = None,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Suppress logs on stderr"),
    ] = False,
):
    """Parse an instruction without evaluating it.

    Prints the parsed instruction as JSON. On a parse failure prints the
    error kind, status code and message as JSON and exits with code 1.

    Examples:

        payment-instructions parse "CREDIT 50 NGN TO ACCOUNT B2 FROM ACCOUNT B1"
    """
    service_config = resolve_config(config)

    try:
        parsed = parse_instruction(instruction, service_config.supported_currencies)
    except InstructionError as e:
        log_error(f"{e.kind} [{e.status_code}]: {e.message}")
        output_json(e.to_dict())
        raise typer.Exit(code=1)

    log_success(f"Parsed {parsed.type.value} instruction", quiet)
    output_json(parsed.to_dict())
