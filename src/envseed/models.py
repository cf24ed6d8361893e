"""Domain models for envseed.

All models are immutable once built: parameters are resolved once at startup
and the environment catalog is read once, then both are threaded through the
provisioning workflow unchanged.
"""

from enum import Enum

import pydantic
from pydantic import BaseModel, ConfigDict, Field, model_validator

from .exceptions import ValidationError
from .settings import PROJECT_NAME_MAX_LENGTH, PROJECT_NAME_MIN_LENGTH


class ProjectParameters(BaseModel):
    """Fully resolved target of a provisioning run.

    Examples:
        >>> params = ProjectParameters(
        ...     organisation_name="acme",
        ...     repository_name="payments-api",
        ...     project_name="payments",
        ... )
        >>> params.full_name
        'acme/payments-api'
    """

    model_config = ConfigDict(frozen=True)

    organisation_name: str = Field(min_length=1)
    repository_name: str = Field(min_length=1)
    project_name: str = Field(
        min_length=PROJECT_NAME_MIN_LENGTH, max_length=PROJECT_NAME_MAX_LENGTH
    )

    @property
    def full_name(self) -> str:
        """Repository in "owner/repo" form."""
        return f"{self.organisation_name}/{self.repository_name}"


class ResolvedParameters(BaseModel):
    """Outcome of parameter resolution.

    Any field may still be None; ``missing`` is set when at least one
    required field could not be filled in.
    """

    model_config = ConfigDict(frozen=True)

    organisation_name: str | None = None
    repository_name: str | None = None
    project_name: str | None = None
    missing: bool = False

    def to_parameters(self) -> ProjectParameters:
        """Build validated ProjectParameters.

        Raises:
            ValidationError: If a field is missing or the project name is out
                of bounds.
        """
        if self.missing:
            raise ValidationError("One or more required parameters are missing")

        try:
            return ProjectParameters(
                organisation_name=self.organisation_name,
                repository_name=self.repository_name,
                project_name=self.project_name,
            )
        except pydantic.ValidationError as e:
            first = e.errors()[0]
            field = str(first["loc"][0]) if first.get("loc") else None
            raise ValidationError(
                f"Invalid {field or 'parameter'}: {first['msg']}",
                field=field,
                value=first.get("input"),
            ) from e


class RepositoryContext(BaseModel):
    """Owner and name of the repository the tool is run from."""

    model_config = ConfigDict(frozen=True)

    owner: str
    name: str


class EnvironmentEntry(BaseModel):
    """One catalog line: short code mapped to the remote environment name."""

    model_config = ConfigDict(frozen=True)

    abbreviation: str
    name: str


# Ordered, read-only
EnvironmentCatalog = tuple[EnvironmentEntry, ...]


class VariableScope(str, Enum):
    """Where a GitHub Actions variable is visible."""

    REPOSITORY = "repository"
    ENVIRONMENT = "environment"


class RepositoryVariable(BaseModel):
    """A GitHub Actions variable to set with overwrite semantics.

    Examples:
        >>> var = RepositoryVariable(
        ...     name="PROJECT_NAME",
        ...     value="payments",
        ...     scope=VariableScope.ENVIRONMENT,
        ...     environment="staging",
        ... )
        >>> var.environment
        'staging'
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    value: str
    scope: VariableScope = VariableScope.REPOSITORY
    environment: str | None = None

    @model_validator(mode="after")
    def check_environment_matches_scope(self) -> "RepositoryVariable":
        if self.scope == VariableScope.ENVIRONMENT and not self.environment:
            raise ValueError("environment is required for environment-scoped variables")
        if self.scope == VariableScope.REPOSITORY and self.environment:
            raise ValueError("environment is not allowed for repository-scoped variables")
        return self
