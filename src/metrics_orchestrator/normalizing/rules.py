"""Field rules: each resolves one override to its final value or raises."""

from typing import Optional

from metrics_orchestrator.constants import (
    DEFAULT_BADGE_ALIGNMENT,
    DEFAULT_BADGE_BORDER_RADIUS,
    DEFAULT_BADGE_COLUMNS,
    DEFAULT_BADGE_STYLE,
    DEFAULT_BRANCH_PREFIX,
    DEFAULT_CONTRIBUTORS_BRANCH,
    DEFAULT_EXTENSION,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_TEMP_DIR,
    DEFAULT_TIME_ZONE,
    PRIVATE_PROFILE_OWNER,
)
from metrics_orchestrator.errors import ConfigValidationError
from metrics_orchestrator.models.raw import (
    BadgeOptions,
    BadgeStyle,
    BadgeWidgetAlignment,
    TargetKind,
    check_badge_border_radius,
    check_badge_columns,
)
from metrics_orchestrator.models.target import BadgeDescriptor, BadgeWidgetDescriptor

_DEFAULT_STYLE = BadgeStyle(DEFAULT_BADGE_STYLE)
_DEFAULT_ALIGNMENT = BadgeWidgetAlignment(DEFAULT_BADGE_ALIGNMENT)


def normalize_identifier(value: str, field: str) -> str:
    """Trimmed value; must be non-empty and free of whitespace (owners, repos, branches)."""
    trimmed = value.strip()
    if not trimmed:
        raise ConfigValidationError(f"{field} cannot be empty", field=field)
    if any(ch.isspace() for ch in trimmed):
        raise ConfigValidationError(f"{field} cannot contain whitespace", field=field)
    return trimmed


def normalize_path_like(value: str, field: str) -> str:
    """Trimmed override; a blank override is an error, not a request for the default."""
    trimmed = value.strip()
    if not trimmed:
        raise ConfigValidationError(f"{field} override cannot be empty", field=field)
    return trimmed


def resolve_branch_name(override: Optional[str], slug: str) -> str:
    if override is None:
        return f"{DEFAULT_BRANCH_PREFIX}{slug}"
    return normalize_path_like(override, "branch_name")


def resolve_target_path(override: Optional[str], slug: str) -> str:
    if override is None:
        return f"{DEFAULT_OUTPUT_DIR}/{slug}.{DEFAULT_EXTENSION}"
    return normalize_path_like(override, "target_path")


def resolve_temp_artifact(override: Optional[str], slug: str) -> str:
    if override is None:
        return f"{DEFAULT_TEMP_DIR}/{slug}.{DEFAULT_EXTENSION}"
    return normalize_path_like(override, "temp_artifact")


def resolve_time_zone(override: Optional[str]) -> str:
    """Blank or missing time zone means the default."""
    trimmed = (override or "").strip()
    return trimmed or DEFAULT_TIME_ZONE


def resolve_contributors_branch(override: Optional[str]) -> str:
    if override is None:
        return DEFAULT_CONTRIBUTORS_BRANCH
    return normalize_identifier(override, "contributors_branch")


def default_include_private(owner: str, kind: TargetKind) -> bool:
    """Only the reserved account's profile shows private repositories by default."""
    if kind.is_repository:
        return False
    return owner == PRIVATE_PROFILE_OWNER


def validate_badge_columns(value: int) -> int:
    try:
        check_badge_columns(value)
    except ValueError as e:
        raise ConfigValidationError(str(e), field="badge.widget.columns") from e
    return value


def validate_badge_border_radius(value: int) -> int:
    try:
        check_badge_border_radius(value)
    except ValueError as e:
        raise ConfigValidationError(str(e), field="badge.widget.border_radius") from e
    return value


def normalize_badge(badge: Optional[BadgeOptions]) -> BadgeDescriptor:
    """
    Fill in badge defaults field by field, then re-check the ranges.
    The re-check catches options built with model_construct, which skips validators.
    """
    style = badge.style if badge and badge.style is not None else _DEFAULT_STYLE
    widget = badge.widget if badge else None

    columns = DEFAULT_BADGE_COLUMNS
    alignment = _DEFAULT_ALIGNMENT
    border_radius = DEFAULT_BADGE_BORDER_RADIUS
    if widget is not None:
        if widget.columns is not None:
            columns = widget.columns
        if widget.alignment is not None:
            alignment = widget.alignment
        if widget.border_radius is not None:
            border_radius = widget.border_radius

    return BadgeDescriptor(
        style=style,
        widget=BadgeWidgetDescriptor(
            columns=validate_badge_columns(columns),
            alignment=alignment,
            border_radius=validate_badge_border_radius(border_radius),
        ),
    )
