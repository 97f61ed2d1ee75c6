"""Normalization engine: raw target entries to a collision-free document."""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from metrics_orchestrator.errors import ConfigParseError, ConfigReadError, ConfigValidationError
from metrics_orchestrator.models.raw import TargetConfig, TargetEntry
from metrics_orchestrator.models.target import RenderTarget, TargetsDocument

from .rules import (
    default_include_private,
    normalize_badge,
    normalize_identifier,
    resolve_branch_name,
    resolve_contributors_branch,
    resolve_target_path,
    resolve_temp_artifact,
    resolve_time_zone,
)

logger = logging.getLogger(__name__)

# Fields that must be unique across a document, in the order they are checked
UNIQUE_FIELDS: tuple[str, ...] = ("slug", "target_path", "temp_artifact", "branch_name")


def normalize_entry(entry: TargetEntry) -> RenderTarget:
    """
    Resolve every field of one entry. Steps run in a fixed order and the
    first failure raises ConfigValidationError.
    """
    owner = normalize_identifier(entry.owner, "owner")

    repository = None
    if entry.kind.is_repository:
        if entry.repository is None:
            raise ConfigValidationError(
                "repository is required for repository targets", field="repository"
            )
        repository = normalize_identifier(entry.repository, "repository")

    slug = entry.resolved_slug()
    if slug is None:
        raise ConfigValidationError("unable to derive slug for target", field="slug")

    branch_name = resolve_branch_name(entry.branch_name, slug)
    target_path = resolve_target_path(entry.target_path, slug)
    temp_artifact = resolve_temp_artifact(entry.temp_artifact, slug)
    time_zone = resolve_time_zone(entry.time_zone)

    display_name = entry.resolved_display_name()
    if display_name is None:
        raise ConfigValidationError(
            "unable to derive display name for target", field="display_name"
        )

    contributors_branch = resolve_contributors_branch(entry.contributors_branch)
    include_private = (
        entry.include_private
        if entry.include_private is not None
        else default_include_private(owner, entry.kind)
    )
    badge = normalize_badge(entry.badge)

    return RenderTarget(
        slug=slug,
        owner=owner,
        repository=repository,
        kind=entry.kind,
        branch_name=branch_name,
        target_path=target_path,
        temp_artifact=temp_artifact,
        time_zone=time_zone,
        display_name=display_name,
        contributors_branch=contributors_branch,
        include_private=include_private,
        badge=badge,
    )


def normalize_targets(entries: list[TargetEntry]) -> TargetsDocument:
    """
    Normalize entries in order and reject the first duplicate slug, target_path,
    temp_artifact or branch_name. Never returns a partial document.
    """
    seen: dict[str, set[str]] = {name: set() for name in UNIQUE_FIELDS}
    normalized: list[RenderTarget] = []

    for entry in entries:
        target = normalize_entry(entry)
        for name in UNIQUE_FIELDS:
            value = getattr(target, name)
            if value in seen[name]:
                raise ConfigValidationError(f"duplicate {name} '{value}'", field=name)
            seen[name].add(value)
        logger.debug("Normalized target %s (%s)", target.slug, target.kind.value)
        normalized.append(target)

    return TargetsDocument(targets=tuple(normalized))


def decode_config(contents: str) -> TargetConfig:
    """Decode YAML text into TargetConfig; shape errors become ConfigParseError."""
    try:
        data = yaml.safe_load(contents)
    except yaml.YAMLError as e:
        raise ConfigParseError(str(e)) from e
    if data is None:
        data = {}
    try:
        return TargetConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigParseError(str(e)) from e


def parse_targets(contents: str) -> TargetsDocument:
    """Parse a targets YAML document and normalize it."""
    config = decode_config(contents)
    if not config.targets:
        raise ConfigValidationError("configuration must include at least one target")
    return normalize_targets(config.targets)


def load_targets(path: str | Path) -> TargetsDocument:
    """Read targets YAML from disk and normalize it."""
    path = Path(path)
    try:
        contents = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigReadError(path, e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise ConfigReadError(path, f"not valid UTF-8 ({e.reason} at byte {e.start})") from e
    document = parse_targets(contents)
    logger.info("Loaded %d targets from %s", len(document.targets), path)
    return document
