"""Tests for the provisioning workflow."""

import pytest

from envseed.exceptions import GitHubError
from envseed.models import EnvironmentEntry
from envseed.provisioning import EnvironmentProvisioner, VariableSetter, provision

DEV_PROD = (
    EnvironmentEntry(abbreviation="dev", name="development"),
    EnvironmentEntry(abbreviation="prod", name="production"),
)


class TestEnvironmentProvisioner:
    """Tests for EnvironmentProvisioner."""

    def test_create_environment(self, parameters, backend):
        """Test the environment is created in the target repository."""
        EnvironmentProvisioner(parameters, backend).create_environment("staging")
        assert backend.calls == [("environment", "acme/payments-api", "staging")]


class TestVariableSetter:
    """Tests for VariableSetter."""

    def test_set_repository_variable(self, parameters, backend):
        """Test repository variables carry no environment."""
        VariableSetter(parameters, backend).set_repository_variable("PROJECT_NAME", "payments")
        assert backend.calls == [
            ("variable", "acme/payments-api", "PROJECT_NAME", "payments", None)
        ]

    def test_set_environment_variable(self, parameters, backend):
        """Test environment variables are scoped to the environment."""
        VariableSetter(parameters, backend).set_environment_variable(
            "PROJECT_NAME", "payments", "staging"
        )
        assert backend.calls == [
            ("variable", "acme/payments-api", "PROJECT_NAME", "payments", "staging")
        ]


class TestProvision:
    """Tests for the provision workflow."""

    def test_environments_created_in_catalog_order(self, parameters, backend):
        """Test each catalog environment is created once, in order."""
        provision(parameters, DEV_PROD, backend)

        created = [call[2] for call in backend.calls if call[0] == "environment"]
        assert created == ["development", "production"]

    def test_interleaved_call_order(self, parameters, backend):
        """Test repository variable first, then environment and its variable."""
        result = provision(parameters, DEV_PROD, backend)

        assert backend.calls == [
            ("variable", "acme/payments-api", "PROJECT_NAME", "payments", None),
            ("environment", "acme/payments-api", "development"),
            ("variable", "acme/payments-api", "PROJECT_NAME", "payments", "development"),
            ("environment", "acme/payments-api", "production"),
            ("variable", "acme/payments-api", "PROJECT_NAME", "payments", "production"),
        ]
        assert result == ["development", "production"]

    def test_custom_variable_name(self, parameters, backend):
        """Test the variable name can be overridden."""
        provision(parameters, DEV_PROD[:1], backend, variable_name="APP_NAME")

        names = {call[2] for call in backend.calls if call[0] == "variable"}
        assert names == {"APP_NAME"}

    def test_on_environment_callback(self, parameters, backend):
        """Test the callback sees each finished environment."""
        seen = []
        provision(parameters, DEV_PROD, backend, on_environment=seen.append)
        assert seen == ["development", "production"]

    def test_rerun_is_idempotent(self, parameters, backend):
        """Test running twice leaves the same state and does not fail."""
        provision(parameters, DEV_PROD, backend)
        first_environments = {k: list(v) for k, v in backend.environments.items()}
        first_variables = dict(backend.variables)

        provision(parameters, DEV_PROD, backend)

        assert backend.environments == first_environments
        assert backend.variables == first_variables
        assert len(backend.variables) == 3

    def test_failure_stops_loop(self, parameters, make_backend):
        """Test the first failure aborts and earlier changes remain."""
        backend = make_backend(fail_on_environment="development")
        catalog = (
            EnvironmentEntry(abbreviation="stg", name="staging"),
            *DEV_PROD,
        )

        with pytest.raises(GitHubError):
            provision(parameters, catalog, backend)

        assert backend.environments == {"acme/payments-api": ["staging"]}
        assert ("environment", "acme/payments-api", "production") not in backend.calls

    def test_variable_failure_stops_loop(self, parameters, make_backend):
        """Test a failing environment variable aborts before later environments."""
        backend = make_backend(fail_on_variable="development")

        with pytest.raises(GitHubError):
            provision(parameters, DEV_PROD, backend)

        assert backend.environments == {"acme/payments-api": ["development"]}
        assert ("environment", "acme/payments-api", "production") not in backend.calls
        assert backend.variables == {
            ("acme/payments-api", None, "PROJECT_NAME"): "payments"
        }
