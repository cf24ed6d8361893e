"""CLI package for envseed.

This package contains the Typer application and its command modules:
- main: Application, global options and command registration
- run_cmd: Provision environments and seed variables
- environments_cmd: Show the environment catalog
- display: Summary and disclaimer rendering
- prompts: Interactive confirmation
"""

from .main import app

__all__ = ["app"]
