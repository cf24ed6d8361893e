"""Environments command for envseed."""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from ..catalog import load_catalog
from ..exceptions import ConfigurationError
from ..settings import DEFAULT_CATALOG_FILE
from .display import build_catalog_table

# Shared instances
console = Console()


def list_environments(
    catalog_path: Path = typer.Option(
        Path(DEFAULT_CATALOG_FILE),
        "--catalog",
        "-c",
        help="Environment catalog (YAML or JSON mapping of code to name)",
    ),
):
    """List the environments in the catalog."""
    try:
        catalog = load_catalog(catalog_path)
    except ConfigurationError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e

    console.print()
    console.print(build_catalog_table(catalog, title=f"Environments ({catalog_path})"))
    console.print()
