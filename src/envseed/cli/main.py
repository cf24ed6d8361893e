"""Main CLI application for envseed."""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from ..settings import APP_NAME, VERSION
from .environments_cmd import list_environments
from .run_cmd import run

# Create main Typer app
app = typer.Typer(
    name=APP_NAME,
    help="Provision GitHub repository environments and seed their variables",
    no_args_is_help=True,
)


def configure_logging(verbose: bool) -> None:
    """Route log records to stderr through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{APP_NAME} {VERSION}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug logging"
    ),
):
    """Provision GitHub repository environments and seed their variables."""
    configure_logging(verbose)


# Register commands
app.command("run")(run)
app.command("environments")(list_environments)
app.command("envs")(list_environments)  # Alias for environments
