"""Resolve the repository list handed to the open-source render workflow."""

from typing import Optional, Union

from pydantic import BaseModel, TypeAdapter, ValidationError

from metrics_orchestrator.constants import (
    DEFAULT_CONTRIBUTORS_BRANCH,
    DEFAULT_OPEN_SOURCE_REPOSITORIES,
)
from metrics_orchestrator.errors import ConfigValidationError
from metrics_orchestrator.normalizing.rules import resolve_contributors_branch


class OpenSourceRepository(BaseModel):
    """Repository plus the branch the contributors plugin should analyze."""

    repository: str
    contributors_branch: str = DEFAULT_CONTRIBUTORS_BRANCH


class RepositoryDescriptor(BaseModel):
    """Object form of a repository item in the workflow input."""

    repository: str
    contributors_branch: Optional[str] = None


_RepositoryInputs = TypeAdapter(list[Union[str, RepositoryDescriptor]])


def _normalize_repository(name: str) -> str:
    trimmed = name.strip()
    if not trimmed:
        raise ConfigValidationError("repository names cannot be empty strings", field="repository")
    return trimmed


def resolve_open_source_targets(raw_input: Optional[str]) -> list[OpenSourceRepository]:
    """
    Parse a JSON array of repository names or {repository, contributors_branch}
    objects. Missing or blank input yields the default repositories.
    """
    value = (raw_input or "").strip()
    if not value:
        return [OpenSourceRepository(repository=name) for name in DEFAULT_OPEN_SOURCE_REPOSITORIES]

    try:
        items = _RepositoryInputs.validate_json(value)
    except ValidationError as e:
        raise ConfigValidationError(f"invalid repositories JSON: {e}") from e

    if not items:
        raise ConfigValidationError(
            "repositories input must be a non-empty JSON array of repository names"
        )

    resolved: list[OpenSourceRepository] = []
    for item in items:
        if isinstance(item, str):
            resolved.append(OpenSourceRepository(repository=_normalize_repository(item)))
        else:
            resolved.append(
                OpenSourceRepository(
                    repository=_normalize_repository(item.repository),
                    contributors_branch=resolve_contributors_branch(item.contributors_branch),
                )
            )
    return resolved


def resolve_open_source_repositories(raw_input: Optional[str]) -> list[str]:
    """Repository names only."""
    return [r.repository for r in resolve_open_source_targets(raw_input)]
