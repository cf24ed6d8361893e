"""Custom exceptions for envseed.

This module provides a hierarchical exception structure so the CLI layer can
translate library failures into consistent console output and exit codes.
"""

from typing import Any


class EnvseedError(Exception):
    """Base exception for all envseed operations."""

    pass


class PreflightError(EnvseedError):
    """A required tool or login is missing before any mutation happens."""

    def __init__(self, message: str, instructions: str | None = None):
        super().__init__(message)
        self.instructions = instructions


class ConfigurationError(EnvseedError):
    """Environment catalog is missing or malformed."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class ValidationError(EnvseedError):
    """Parameter validation failures."""

    def __init__(self, message: str, field: str | None = None, value: Any = None):
        super().__init__(message)
        self.field = field
        self.value = value


class GitHubError(EnvseedError):
    """GitHub API and gh CLI errors."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_text: str | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response_text = response_text
