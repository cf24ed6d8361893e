"""Pre-flight checks run before anything is read from or written to GitHub."""

import logging

from .exceptions import PreflightError
from .gh import GitHubCLI

logger = logging.getLogger(__name__)


def check_prerequisites(cli: GitHubCLI) -> None:
    """Ensure the gh CLI is installed and logged in.

    Raises:
        PreflightError: If either check fails.
    """
    if not cli.is_installed():
        raise PreflightError(
            f"GitHub CLI '{cli.executable}' is not installed or not on PATH",
            instructions="Install it from https://cli.github.com/",
        )

    if not cli.is_authenticated():
        raise PreflightError(
            "GitHub CLI is not authenticated",
            instructions="Run: gh auth login",
        )

    logger.debug("Pre-flight checks passed")
