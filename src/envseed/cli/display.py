"""Display helper functions for CLI output."""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..models import EnvironmentCatalog, ResolvedParameters

MISSING = "[red]<missing>[/red]"


def _value(value: str | None) -> str:
    return escape(value) if value else MISSING


def build_catalog_table(catalog: EnvironmentCatalog, title: str = "Environments") -> Table:
    """Build a table of environment codes and names in catalog order."""
    table = Table(title=title, show_header=True)
    table.add_column("Code", style="cyan", no_wrap=True)
    table.add_column("Environment", style="bold white")

    for entry in catalog:
        table.add_row(escape(entry.abbreviation), escape(entry.name))

    return table


def display_summary(
    console: Console,
    resolved: ResolvedParameters,
    catalog: EnvironmentCatalog,
    variable_name: str,
) -> None:
    """Show the resolved parameters and the environments to be created."""
    params_table = Table(title="Parameters", show_header=True)
    params_table.add_column("Parameter", style="dim", no_wrap=True)
    params_table.add_column("Value", style="bold white")

    params_table.add_row("Organisation", _value(resolved.organisation_name))
    params_table.add_row("Repository", _value(resolved.repository_name))
    params_table.add_row("Project", _value(resolved.project_name))
    params_table.add_row("Variable", escape(variable_name))

    console.print()
    console.print(params_table)
    console.print()
    console.print(build_catalog_table(catalog))
    console.print()


def display_disclaimer(console: Console, full_name: str) -> None:
    """Show the warning shown before any change is made."""
    console.print(
        Panel(
            f"[bold yellow]⚠ This will create environments and set variables in "
            f"{full_name}.[/bold yellow]\n\n"
            "Existing environments are kept; variables with the same name are "
            "overwritten.\n"
            "[dim]Changes are applied one by one and are not rolled back if a "
            "step fails. Use at your own risk.[/dim]",
            title="Warning",
            border_style="yellow",
        )
    )
    console.print()
