"""Serve command - run the HTTP API with uvicorn."""

import logging
from pathlib import Path
from typing import Optional

import typer
import uvicorn
from typing_extensions import Annotated

from payment_instructions.api.main import create_app
from payment_instructions.cli.commands._config import resolve_config
from payment_instructions.cli.output import log_info


def serve_command(
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Service configuration YAML file"),
    ] = None,
    host: Annotated[
        Optional[str],
        typer.Option("--host", help="Override server.host from the config"),
    ] = None,
    port: Annotated[
        Optional[int],
        typer.Option("--port", "-p", help="Override server.port from the config"),
    ] = None,
):
    """Run the payment instructions HTTP API.

    Examples:

        payment-instructions serve --config config/service.yaml --port 9000
    """
    service_config = resolve_config(config)
    bind_host = host or service_config.server.host
    bind_port = port or service_config.server.port
    level = service_config.logging.level

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    log_info(
        f"Serving on http://{bind_host}:{bind_port} "
        f"(currencies: {', '.join(sorted(service_config.supported_currencies))})"
    )
    uvicorn.run(
        create_app(service_config),
        host=bind_host,
        port=bind_port,
        log_level=level.lower(),
    )
