"""Parameter resolution from explicit input and the current repository."""

import logging
from collections.abc import Callable

from .models import RepositoryContext, ResolvedParameters

logger = logging.getLogger(__name__)


def resolve_parameters(
    organisation_name: str | None,
    repository_name: str | None,
    project_name: str | None,
    context_provider: Callable[[], RepositoryContext | None],
) -> ResolvedParameters:
    """Fill in missing parameters from the current repository context.

    Explicit values always win. The context provider is only called when the
    organisation or repository name is absent, and at most once. A project
    name that is not given defaults to the repository name.

    Args:
        organisation_name: Explicit organisation (owner login), or None.
        repository_name: Explicit repository name, or None.
        project_name: Explicit project name, or None.
        context_provider: Returns the current repository, or None if unknown.

    Returns:
        ResolvedParameters; ``missing`` is True if anything is still unset.
    """
    context = None
    if not organisation_name or not repository_name:
        context = context_provider()
        if context is None:
            logger.debug("Repository context unavailable")

    if not organisation_name and context is not None:
        organisation_name = context.owner
    if not repository_name and context is not None:
        repository_name = context.name
    if not project_name and repository_name:
        project_name = repository_name

    missing = not (organisation_name and repository_name and project_name)

    return ResolvedParameters(
        organisation_name=organisation_name or None,
        repository_name=repository_name or None,
        project_name=project_name or None,
        missing=missing,
    )
