"""Raw target configuration as authored in targets YAML, before normalization."""

from enum import Enum
from typing import Optional

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    field_validator,
)

from metrics_orchestrator.constants import (
    MAX_BADGE_BORDER_RADIUS,
    MAX_BADGE_COLUMNS,
    MIN_BADGE_BORDER_RADIUS,
    MIN_BADGE_COLUMNS,
)
from metrics_orchestrator.slug import derive_slug


class TargetKind(str, Enum):
    """Category of a metrics target. Closed set; not extensible from YAML."""

    PROFILE = "profile"
    OPEN_SOURCE = "open_source"
    PRIVATE_PROJECT = "private_project"

    @property
    def is_repository(self) -> bool:
        """True for kinds that render a single repository."""
        return _REPOSITORY_KINDS[self]


_REPOSITORY_KINDS: dict[TargetKind, bool] = {
    TargetKind.PROFILE: False,
    TargetKind.OPEN_SOURCE: True,
    TargetKind.PRIVATE_PROJECT: True,
}


class BadgeStyle(str, Enum):
    """Visual preset for a badge."""

    CLASSIC = "classic"
    FLAT = "flat"
    FLAT_SQUARE = "flat_square"
    PLASTIC = "plastic"
    FOR_THE_BADGE = "for_the_badge"


class BadgeWidgetAlignment(str, Enum):
    """Horizontal alignment of badge content."""

    START = "start"
    CENTER = "center"
    END = "end"


def check_badge_columns(value: Optional[int]) -> Optional[int]:
    """Columns must be within 1..4 when set."""
    if value is not None and not MIN_BADGE_COLUMNS <= value <= MAX_BADGE_COLUMNS:
        raise ValueError(
            f"badge.widget.columns must be between {MIN_BADGE_COLUMNS} and {MAX_BADGE_COLUMNS}"
        )
    return value


def check_badge_border_radius(value: Optional[int]) -> Optional[int]:
    """Border radius must be within 0..32 when set."""
    if value is not None and not MIN_BADGE_BORDER_RADIUS <= value <= MAX_BADGE_BORDER_RADIUS:
        raise ValueError(
            "badge.widget.border_radius must be between "
            f"{MIN_BADGE_BORDER_RADIUS} and {MAX_BADGE_BORDER_RADIUS}"
        )
    return value


class BadgeWidgetOptions(BaseModel):
    """Layout overrides for the badge widget."""

    model_config = ConfigDict(extra="forbid")

    columns: Optional[StrictInt] = None
    alignment: Optional[BadgeWidgetAlignment] = None
    border_radius: Optional[StrictInt] = None

    @field_validator("columns")
    @classmethod
    def validate_columns(cls, value: Optional[int]) -> Optional[int]:
        return check_badge_columns(value)

    @field_validator("border_radius")
    @classmethod
    def validate_border_radius(cls, value: Optional[int]) -> Optional[int]:
        return check_badge_border_radius(value)


class BadgeOptions(BaseModel):
    """Badge overrides attached to a target entry."""

    model_config = ConfigDict(extra="forbid")

    style: Optional[BadgeStyle] = None
    widget: Optional[BadgeWidgetOptions] = None


class TargetEntry(BaseModel):
    """
    One target as written by the author. Only owner and kind are required;
    every other field is an override resolved during normalization.
    """

    model_config = ConfigDict(extra="ignore")

    owner: str = Field(..., validation_alias=AliasChoices("owner", "user"))
    repository: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("repository", "repo"),
    )
    kind: TargetKind = Field(..., validation_alias=AliasChoices("kind", "type"))
    slug: Optional[str] = None
    branch_name: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("branch_name", "branch", "branch-name", "branchName"),
    )
    contributors_branch: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices(
            "contributors_branch", "contributors-branch", "contributorsBranch"
        ),
    )
    target_path: Optional[str] = None
    temp_artifact: Optional[str] = None
    time_zone: Optional[str] = None
    display_name: Optional[str] = None
    include_private: Optional[StrictBool] = None
    badge: Optional[BadgeOptions] = None

    def resolved_slug(self) -> Optional[str]:
        """
        Slug from the custom override when given, else from the kind:
        "{owner}-profile" for profiles, the repository name otherwise.
        """
        if self.slug is not None:
            return derive_slug(self.slug)
        if not self.kind.is_repository:
            return derive_slug(f"{self.owner}-profile")
        if self.repository is None:
            return None
        return derive_slug(self.repository)

    def resolved_display_name(self) -> Optional[str]:
        """Trimmed override; blank overrides fall back to the kind default."""
        if self.display_name is not None and self.display_name.strip():
            return self.display_name.strip()
        if not self.kind.is_repository:
            return "profile"
        if self.repository is None:
            return None
        return self.repository.strip()


class TargetConfig(BaseModel):
    """Root of a targets YAML document."""

    targets: list[TargetEntry] = Field(default_factory=list)
