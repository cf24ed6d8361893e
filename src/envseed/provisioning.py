"""Environment creation and variable seeding for a target repository."""

import logging
from collections.abc import Callable

from .gh import RepositoryBackend
from .models import (
    EnvironmentCatalog,
    ProjectParameters,
    RepositoryVariable,
    VariableScope,
)
from .settings import PROJECT_NAME_VARIABLE

logger = logging.getLogger(__name__)


class EnvironmentProvisioner:
    """Creates environments in the target repository."""

    def __init__(self, parameters: ProjectParameters, backend: RepositoryBackend):
        self.parameters = parameters
        self.backend = backend

    def create_environment(self, name: str) -> None:
        """Create the environment, or no-op if it already exists.

        Raises:
            GitHubError: If the API rejects the request.
        """
        logger.debug(f"Creating environment {name} in {self.parameters.full_name}")
        self.backend.upsert_environment(
            self.parameters.organisation_name, self.parameters.repository_name, name
        )


class VariableSetter:
    """Sets GitHub Actions variables on the target repository."""

    def __init__(self, parameters: ProjectParameters, backend: RepositoryBackend):
        self.parameters = parameters
        self.backend = backend

    def _set(self, variable: RepositoryVariable) -> None:
        self.backend.set_variable(
            self.parameters.organisation_name,
            self.parameters.repository_name,
            variable,
        )

    def set_repository_variable(self, name: str, value: str) -> None:
        """Set a repository-wide variable, overwriting any previous value."""
        self._set(RepositoryVariable(name=name, value=value))

    def set_environment_variable(
        self, name: str, value: str, environment_name: str
    ) -> None:
        """Set a variable visible only inside one environment."""
        self._set(
            RepositoryVariable(
                name=name,
                value=value,
                scope=VariableScope.ENVIRONMENT,
                environment=environment_name,
            )
        )


def provision(
    parameters: ProjectParameters,
    catalog: EnvironmentCatalog,
    backend: RepositoryBackend,
    variable_name: str = PROJECT_NAME_VARIABLE,
    on_environment: Callable[[str], None] | None = None,
) -> list[str]:
    """Create every catalog environment and seed the project name variable.

    The repository variable is set first, then each environment is created
    and given its own copy of the variable, in catalog order. The first
    failure aborts the loop; environments already handled stay as they are.

    Args:
        parameters: Target repository and project name.
        catalog: Environments to create.
        backend: GitHub access.
        variable_name: Name of the variable carrying the project name.
        on_environment: Optional callback invoked with each finished
            environment name.

    Returns:
        Names of the environments provisioned, in order.
    """
    provisioner = EnvironmentProvisioner(parameters, backend)
    setter = VariableSetter(parameters, backend)

    setter.set_repository_variable(variable_name, parameters.project_name)

    provisioned = []
    for entry in catalog:
        provisioner.create_environment(entry.name)
        setter.set_environment_variable(
            variable_name, parameters.project_name, entry.name
        )
        provisioned.append(entry.name)
        if on_environment is not None:
            on_environment(entry.name)

    logger.info(
        f"Provisioned {len(provisioned)} environment(s) in {parameters.full_name}"
    )
    return provisioned
