"""Config resolution shared by CLI commands."""

from pathlib import Path
from typing import Optional

import typer

from payment_instructions.cli.output import log_error
from payment_instructions.config import ServiceConfig, load_config


def resolve_config(config_path: Optional[Path]) -> ServiceConfig:
    """Load the config file if given, otherwise return defaults.

    Exits with code 1 when the file is missing or invalid.
    """
    if config_path is None:
        return ServiceConfig()
    try:
        return load_config(config_path)
    except (FileNotFoundError, ValueError) as e:
        log_error(str(e))
        raise typer.Exit(code=1)
