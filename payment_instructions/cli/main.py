"""Payment Instructions CLI - Main entry point."""

import typer
from typing_extensions import Annotated

app = typer.Typer(
    name="payment-instructions",
    help="Payment Instructions - parse and settle free-text payment instructions",
    add_completion=True,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        from payment_instructions import __version__
        from payment_instructions.cli.output import console
        console.print(f"[bold]Payment Instructions[/bold] v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
) -> None:
    """Payment Instructions CLI - evaluate instructions or serve the HTTP API."""
    pass


# Import commands after app is defined to avoid circular imports
from payment_instructions.cli.commands.evaluate import evaluate_command
from payment_instructions.cli.commands.parse import parse_command
from payment_instructions.cli.commands.serve import serve_command

app.command(name="parse", help="Parse an instruction and print its structure")(parse_command)
app.command(name="evaluate", help="Evaluate an instruction against accounts from a JSON file")(evaluate_command)
app.command(name="serve", help="Run the HTTP API")(serve_command)


if __name__ == "__main__":
    app()
