"""Normalize raw action inputs for the profile and repository render workflows.

Workflow inputs arrive as plain strings where an empty string means "unset",
so every override here treats blank as missing.
"""

from typing import Optional

from pydantic import BaseModel

from metrics_orchestrator.constants import (
    DEFAULT_BRANCH_PREFIX,
    DEFAULT_EXTENSION,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_PROFILE_DISPLAY_NAME,
    DEFAULT_PROFILE_SLUG,
    DEFAULT_TEMP_DIR,
    DEFAULT_TIME_ZONE,
)
from metrics_orchestrator.errors import ConfigValidationError
from metrics_orchestrator.normalizing.rules import resolve_contributors_branch

_TRUE_FLAGS = ("true", "1", "yes")
_FALSE_FLAGS = ("", "false", "0", "no")

# include_private -> (affiliations, activity/code visibility, achievements secrets)
_PRIVATE_SETTINGS = ("owner, collaborator, organization_member", "all", "yes")
_PUBLIC_SETTINGS = ("owner, organization_member", "public", "no")


class ProfileInputs(BaseModel):
    """Resolved inputs for rendering a profile dashboard."""

    target_user: str
    branch_name: str
    target_path: str
    temp_artifact: str
    time_zone: str
    display_name: str
    include_private: str
    repositories_affiliations: str
    plugin_repositories_affiliations: str
    plugin_activity_visibility: str
    plugin_code_visibility: str
    plugin_achievements_secrets: str


class RepositoryInputs(BaseModel):
    """Resolved inputs for rendering a single repository."""

    target_owner: str
    target_repo: str
    target_path: str
    temp_artifact: str
    branch_name: str
    contributors_branch: str
    time_zone: str


def _or_default(value: Optional[str], default: str) -> str:
    return value if value else default


def parse_flag(value: Optional[str], field: str) -> bool:
    """Interpret a workflow boolean string; empty means false."""
    normalized = (value or "").strip().lower()
    if normalized in _TRUE_FLAGS:
        return True
    if normalized in _FALSE_FLAGS:
        return False
    raise ConfigValidationError(f"{field} must be a boolean value", field=field)


def normalize_profile_inputs(
    target_user: str,
    branch_name: Optional[str] = None,
    target_path: Optional[str] = None,
    temp_artifact: Optional[str] = None,
    time_zone: Optional[str] = None,
    display_name: Optional[str] = None,
    include_private: Optional[str] = None,
) -> ProfileInputs:
    """Fill profile workflow inputs and expand include_private into plugin settings."""
    if not target_user:
        raise ConfigValidationError("target_user must be provided", field="target_user")

    private = parse_flag(include_private, "include_private")
    affiliations, visibility, secrets = _PRIVATE_SETTINGS if private else _PUBLIC_SETTINGS

    return ProfileInputs(
        target_user=target_user,
        branch_name=_or_default(branch_name, f"{DEFAULT_BRANCH_PREFIX}{DEFAULT_PROFILE_SLUG}"),
        target_path=_or_default(
            target_path, f"{DEFAULT_OUTPUT_DIR}/{DEFAULT_PROFILE_SLUG}.{DEFAULT_EXTENSION}"
        ),
        temp_artifact=_or_default(
            temp_artifact, f"{DEFAULT_TEMP_DIR}/{DEFAULT_PROFILE_SLUG}.{DEFAULT_EXTENSION}"
        ),
        time_zone=_or_default(time_zone, DEFAULT_TIME_ZONE),
        display_name=_or_default(display_name, DEFAULT_PROFILE_DISPLAY_NAME),
        include_private="true" if private else "false",
        repositories_affiliations=affiliations,
        plugin_repositories_affiliations=affiliations,
        plugin_activity_visibility=visibility,
        plugin_code_visibility=visibility,
        plugin_achievements_secrets=secrets,
    )


def normalize_repository_inputs(
    target_repo: str,
    github_repo: str,
    target_owner: Optional[str] = None,
    target_path: Optional[str] = None,
    temp_artifact: Optional[str] = None,
    branch_name: Optional[str] = None,
    contributors_branch: Optional[str] = None,
    time_zone: Optional[str] = None,
) -> RepositoryInputs:
    """
    Fill repository workflow inputs. The owner falls back to the owner half of
    github_repo ("owner/name"), as exposed by GITHUB_REPOSITORY in Actions.
    """
    if not target_repo:
        raise ConfigValidationError("target_repo must be provided", field="target_repo")

    owner = target_owner or github_repo.split("/", 1)[0]
    if not owner:
        raise ConfigValidationError("invalid GITHUB_REPOSITORY format", field="github_repo")

    return RepositoryInputs(
        target_owner=owner,
        target_repo=target_repo,
        target_path=_or_default(
            target_path, f"{DEFAULT_OUTPUT_DIR}/{target_repo}.{DEFAULT_EXTENSION}"
        ),
        temp_artifact=_or_default(
            temp_artifact, f"{DEFAULT_TEMP_DIR}/{target_repo}.{DEFAULT_EXTENSION}"
        ),
        branch_name=_or_default(branch_name, f"{DEFAULT_BRANCH_PREFIX}{target_repo}"),
        contributors_branch=resolve_contributors_branch(contributors_branch or None),
        time_zone=_or_default(time_zone, DEFAULT_TIME_ZONE),
    )
