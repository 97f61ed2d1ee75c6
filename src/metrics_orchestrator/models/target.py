"""Normalized render targets emitted for downstream workflows."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from metrics_orchestrator.models.raw import BadgeStyle, BadgeWidgetAlignment, TargetKind


class BadgeWidgetDescriptor(BaseModel):
    """Resolved widget layout."""

    model_config = ConfigDict(frozen=True)

    columns: int
    alignment: BadgeWidgetAlignment
    border_radius: int


class BadgeDescriptor(BaseModel):
    """Resolved badge style and layout."""

    model_config = ConfigDict(frozen=True)

    style: BadgeStyle
    widget: BadgeWidgetDescriptor


class RenderTarget(BaseModel):
    """Fully resolved target; every override has been applied or defaulted."""

    model_config = ConfigDict(frozen=True)

    slug: str = Field(..., description="Unique across the document")
    owner: str
    repository: Optional[str] = None
    kind: TargetKind
    branch_name: str = Field(..., description="Branch for refreshed metrics commits")
    target_path: str = Field(..., description="Published SVG path")
    temp_artifact: str = Field(..., description="Renderer staging path")
    time_zone: str
    display_name: str
    contributors_branch: str
    include_private: bool
    badge: BadgeDescriptor


class TargetsDocument(BaseModel):
    """Ordered targets, in the order they were configured."""

    model_config = ConfigDict(frozen=True)

    targets: tuple[RenderTarget, ...] = ()

    def slugs(self) -> list[str]:
        """Slugs in document order."""
        return [t.slug for t in self.targets]

    def get(self, slug: str) -> Optional[RenderTarget]:
        """Look up a target by slug."""
        for target in self.targets:
            if target.slug == slug:
                return target
        return None
