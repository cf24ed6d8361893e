"""Pytest configuration and fixtures for envseed tests."""

import pytest

from envseed.exceptions import GitHubError
from envseed.models import ProjectParameters, RepositoryContext


class RecordingBackend:
    """In-memory RepositoryBackend that records every call.

    Environments and variables are stored with upsert/overwrite semantics so
    repeated runs can be checked for idempotence.
    """

    def __init__(
        self,
        context: RepositoryContext | None = None,
        fail_on_environment: str | None = None,
        fail_on_variable: str | None = None,
    ):
        self.context = context
        self.fail_on_environment = fail_on_environment
        self.fail_on_variable = fail_on_variable
        self.calls: list[tuple] = []
        self.environments: dict[str, list[str]] = {}
        self.variables: dict[tuple, str] = {}

    def get_repository_context(self):
        self.calls.append(("context",))
        return self.context

    def upsert_environment(self, owner, repo, name):
        if name == self.fail_on_environment:
            raise GitHubError(f"Failed to create environment {name}", status_code=422)
        self.calls.append(("environment", f"{owner}/{repo}", name))
        envs = self.environments.setdefault(f"{owner}/{repo}", [])
        if name not in envs:
            envs.append(name)

    def set_variable(self, owner, repo, variable):
        if self.fail_on_variable and variable.environment == self.fail_on_variable:
            raise GitHubError(
                f"gh variable set failed for {variable.environment}", response_text="HTTP 403"
            )
        self.calls.append(
            ("variable", f"{owner}/{repo}", variable.name, variable.value, variable.environment)
        )
        self.variables[(f"{owner}/{repo}", variable.environment, variable.name)] = (
            variable.value
        )


@pytest.fixture
def backend():
    """Recording backend with no repository context."""
    return RecordingBackend()


@pytest.fixture
def make_backend():
    """Factory for recording backends with custom behaviour."""
    return RecordingBackend


@pytest.fixture
def parameters():
    """Typical resolved parameters."""
    return ProjectParameters(
        organisation_name="acme",
        repository_name="payments-api",
        project_name="payments",
    )


@pytest.fixture
def catalog_file(tmp_path):
    """Write a catalog document and return its path."""

    def _write(content: str, name: str = "environments.yaml"):
        path = tmp_path / name
        path.write_text(content)
        return path

    return _write
