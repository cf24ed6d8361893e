"""Run command for envseed."""

import re
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from ..catalog import load_catalog
from ..exceptions import ConfigurationError, GitHubError, PreflightError, ValidationError
from ..gh import GitHubBackend, GitHubCLI
from ..preflight import check_prerequisites
from ..provisioning import provision
from ..resolver import resolve_parameters
from ..settings import (
    DEFAULT_CATALOG_FILE,
    PROJECT_NAME_MAX_LENGTH,
    PROJECT_NAME_MIN_LENGTH,
    PROJECT_NAME_VARIABLE,
    RESERVED_VARIABLE_PREFIX,
    VARIABLE_NAME_PATTERN,
)
from .display import display_disclaimer, display_summary
from .prompts import confirm

# Shared instances
console = Console()


def validate_project_name(value: str | None) -> str | None:
    """Reject explicit project names outside the allowed length."""
    if value is None:
        return value
    if not PROJECT_NAME_MIN_LENGTH <= len(value) <= PROJECT_NAME_MAX_LENGTH:
        raise typer.BadParameter(
            f"must be {PROJECT_NAME_MIN_LENGTH}-{PROJECT_NAME_MAX_LENGTH} "
            f"characters long (got {len(value)})"
        )
    return value


def validate_variable_name(value: str) -> str:
    """Reject names GitHub would refuse as an Actions variable."""
    if not re.fullmatch(VARIABLE_NAME_PATTERN, value):
        raise typer.BadParameter(
            f"'{value}' must contain only letters, digits and underscores "
            "and must not start with a digit"
        )
    if value.upper().startswith(RESERVED_VARIABLE_PREFIX):
        raise typer.BadParameter(
            f"'{value}' must not start with {RESERVED_VARIABLE_PREFIX}"
        )
    return value


def run(
    organisation_name: str = typer.Argument(
        None, help="GitHub organisation or user (default: owner of current repo)"
    ),
    repository_name: str = typer.Argument(
        None, help="Repository name (default: current repo)"
    ),
    project_name: str = typer.Argument(
        None,
        callback=validate_project_name,
        help="Project name, 4-17 characters (default: repository name)",
    ),
    catalog_path: Path = typer.Option(
        Path(DEFAULT_CATALOG_FILE),
        "--catalog",
        "-c",
        help="Environment catalog (YAML or JSON mapping of code to name)",
    ),
    variable_name: str = typer.Option(
        PROJECT_NAME_VARIABLE,
        "--variable-name",
        callback=validate_variable_name,
        help="Name of the variable that carries the project name",
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", help="Show what would be provisioned without changing anything"
    ),
    yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Skip the confirmation prompt (use with caution)",
    ),
):
    """Create repository environments and seed the project name variable.

    Examples:
        # Inside a clone, everything is taken from the current repository
        envseed run

        envseed run acme payments-api
        envseed run acme payments-api payments --catalog envs.json
        envseed run acme payments-api --dry-run
    """
    cli = GitHubCLI()

    try:
        check_prerequisites(cli)
    except PreflightError as e:
        console.print(f"[red]✗ {escape(str(e))}[/red]")
        if e.instructions:
            console.print(f"[dim]{escape(e.instructions)}[/dim]")
        raise typer.Exit(1) from e

    backend = GitHubBackend(cli)

    resolved = resolve_parameters(
        organisation_name,
        repository_name,
        project_name,
        backend.get_repository_context,
    )

    try:
        catalog = load_catalog(catalog_path)
    except ConfigurationError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e

    display_summary(console, resolved, catalog, variable_name)

    if resolved.missing:
        console.print(
            "[red]Error:[/red] Missing parameters. Pass them explicitly or run "
            "from inside a clone of the target repository."
        )
        raise typer.Exit(1)

    try:
        parameters = resolved.to_parameters()
    except ValidationError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e

    if dry_run:
        console.print(
            "[dim]Dry run: nothing was changed. Run again without --dry-run "
            "to provision.[/dim]"
        )
        return

    display_disclaimer(console, parameters.full_name)

    if not yes and not confirm("Type 'y' to continue: "):
        console.print("[yellow]Cancelled[/yellow]")
        return

    try:
        provision(
            parameters,
            catalog,
            backend,
            variable_name=variable_name,
            on_environment=lambda name: console.print(f"  [green]✓[/green] {escape(name)}"),
        )
    except GitHubError as e:
        console.print(f"[red]✗ {escape(str(e))}[/red]")
        raise typer.Exit(1) from e

    console.print()
    console.print("[bold green]✓ Done[/bold green]")
