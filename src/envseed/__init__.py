"""envseed - provision GitHub repository environments and seed their variables."""

from .models import (
    EnvironmentEntry,
    ProjectParameters,
    RepositoryContext,
    RepositoryVariable,
    ResolvedParameters,
    VariableScope,
)

__version__ = "1.0.0"

__all__ = [
    "EnvironmentEntry",
    "ProjectParameters",
    "RepositoryContext",
    "RepositoryVariable",
    "ResolvedParameters",
    "VariableScope",
    "__version__",
]
