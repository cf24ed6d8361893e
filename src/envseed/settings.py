"""Simple settings for envseed."""

from importlib.metadata import PackageNotFoundError, version


def get_version():
    """Get the current version of envseed."""
    try:
        return version("envseed")
    except PackageNotFoundError:
        # Fallback for development when package isn't installed
        return "dev"


# Application metadata
APP_NAME = "envseed"
VERSION = get_version()

# Environment catalog looked up in the working directory when --catalog is omitted
DEFAULT_CATALOG_FILE = "environments.yaml"

# Variable seeded at repository scope and in every environment
PROJECT_NAME_VARIABLE = "PROJECT_NAME"

# Project name length bounds (inclusive)
PROJECT_NAME_MIN_LENGTH = 4
PROJECT_NAME_MAX_LENGTH = 17

# GitHub REST API
GITHUB_API_URL = "https://api.github.com"
GITHUB_API_VERSION = "2022-11-28"
GITHUB_REQUEST_TIMEOUT = 30  # Seconds

# GitHub Actions variable names: letters, digits, underscores; no leading digit
VARIABLE_NAME_PATTERN = r"[A-Za-z_][A-Za-z0-9_]*"
RESERVED_VARIABLE_PREFIX = "GITHUB_"
