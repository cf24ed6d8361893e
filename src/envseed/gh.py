"""GitHub access through the gh CLI and the REST API.

Authentication is delegated entirely to the gh CLI: its cached token is used
as the bearer token for REST calls, and variables are set with
``gh variable set``.
"""

import asyncio
import json
import logging
import shutil
import subprocess
from typing import Protocol
from urllib.parse import quote

import httpx

from .exceptions import GitHubError
from .models import RepositoryContext, RepositoryVariable, VariableScope
from .settings import GITHUB_API_URL, GITHUB_API_VERSION, GITHUB_REQUEST_TIMEOUT

logger = logging.getLogger(__name__)


class RepositoryBackend(Protocol):
    """Everything the provisioning workflow needs from GitHub."""

    def get_repository_context(self) -> RepositoryContext | None: ...

    def upsert_environment(self, owner: str, repo: str, name: str) -> None: ...

    def set_variable(
        self, owner: str, repo: str, variable: RepositoryVariable
    ) -> None: ...


class GitHubCLI:
    """Thin wrapper around the gh executable."""

    def __init__(self, executable: str = "gh"):
        self.executable = executable

    def _run(self, args: list[str]) -> subprocess.CompletedProcess:
        """Run a gh command, raising GitHubError on a non-zero exit."""
        command = [self.executable, *args]
        logger.debug(f"Running: {' '.join(command[:3])}")
        try:
            return subprocess.run(
                command,
                capture_output=True,
                text=True,
                check=True,
            )
        except FileNotFoundError as e:
            raise GitHubError(f"gh CLI not found: {self.executable}") from e
        except subprocess.CalledProcessError as e:
            error_msg = f"gh {args[0]} {args[1] if len(args) > 1 else ''}".strip()
            error_msg += f" failed with exit code {e.returncode}"
            if e.stderr:
                error_msg += f": {e.stderr.strip()}"
            logger.debug(error_msg)
            raise GitHubError(error_msg, response_text=e.stderr) from e

    def is_installed(self) -> bool:
        """Check if the gh executable is on PATH."""
        return shutil.which(self.executable) is not None

    def is_authenticated(self) -> bool:
        """Check if gh has a logged-in session."""
        try:
            self._run(["auth", "status"])
            return True
        except GitHubError:
            return False

    def get_token(self) -> str:
        """Get the cached gh authentication token.

        Raises:
            GitHubError: If gh has no token.
        """
        token = self._run(["auth", "token"]).stdout.strip()
        if not token:
            raise GitHubError("gh returned an empty authentication token")
        return token

    def get_repository_context(self) -> RepositoryContext | None:
        """Get owner and name of the repository in the working directory.

        Returns:
            RepositoryContext, or None when not inside a GitHub repository.
        """
        try:
            result = self._run(["repo", "view", "--json", "owner,name"])
            data = json.loads(result.stdout)
            return RepositoryContext(owner=data["owner"]["login"], name=data["name"])
        except (GitHubError, ValueError, KeyError, TypeError) as e:
            logger.debug(f"No repository context available: {e}")
            return None

    def set_variable(self, owner: str, repo: str, variable: RepositoryVariable) -> None:
        """Create or overwrite a GitHub Actions variable.

        Raises:
            GitHubError: If gh exits non-zero.
        """
        args = [
            "variable",
            "set",
            variable.name,
            "--body",
            variable.value,
            "--repo",
            f"{owner}/{repo}",
        ]
        if variable.scope == VariableScope.ENVIRONMENT:
            args.extend(["--env", variable.environment])

        self._run(args)
        logger.info(
            f"Set variable {variable.name} on {owner}/{repo}"
            + (f" ({variable.environment})" if variable.environment else "")
        )


class GitHubClient:
    """GitHub API client."""

    def __init__(self, token: str):
        self.token = token
        self.base_url = GITHUB_API_URL
        self.headers = {
            "Authorization": f"Bearer {token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
        }

    async def _request(self, method: str, endpoint: str, **kwargs) -> httpx.Response:
        """Make an authenticated request to the GitHub API."""
        async with httpx.AsyncClient(timeout=GITHUB_REQUEST_TIMEOUT) as client:
            response = await client.request(
                method=method,
                url=f"{self.base_url}{endpoint}",
                headers=self.headers,
                **kwargs,
            )
            return response

    def _parse_error_response(
        self, response: httpx.Response, operation: str, target: str
    ) -> str:
        """Parse GitHub API error response into a descriptive message."""
        error_msg = f"Failed to {operation} {target}: {response.status_code}"
        try:
            error_details = response.json().get("message", response.text)
            error_msg += f" - {error_details}"
        except Exception:
            error_msg += f" - {response.text}"
        return error_msg

    async def create_or_update_environment(
        self, owner: str, repo: str, name: str
    ) -> dict:
        """
        Create an environment, or leave an existing one as it is.

        Args:
            owner: Repository owner
            repo: Repository name
            name: Environment name

        Returns:
            Environment data

        Raises:
            GitHubError: If the API request fails
        """
        response = await self._request(
            "PUT", f"/repos/{owner}/{repo}/environments/{quote(name, safe='')}"
        )

        if response.status_code in (200, 201):
            return response.json()
        else:
            error_msg = self._parse_error_response(
                response, "create environment", f"{name} in {owner}/{repo}"
            )
            logger.error(error_msg)
            raise GitHubError(
                error_msg,
                status_code=response.status_code,
                response_text=response.text,
            )


class GitHubBackend:
    """RepositoryBackend backed by the gh CLI and the REST API."""

    def __init__(self, cli: GitHubCLI | None = None):
        self.cli = cli or GitHubCLI()

    def get_repository_context(self) -> RepositoryContext | None:
        return self.cli.get_repository_context()

    def upsert_environment(self, owner: str, repo: str, name: str) -> None:
        # Token is re-read on every call; gh owns refresh
        client = GitHubClient(self.cli.get_token())
        asyncio.run(client.create_or_update_environment(owner, repo, name))
        logger.info(f"Environment {name} ready in {owner}/{repo}")

    def set_variable(self, owner: str, repo: str, variable: RepositoryVariable) -> None:
        self.cli.set_variable(owner, repo, variable)
