"""Raw configuration and normalized target models."""

from metrics_orchestrator.models.raw import (
    BadgeOptions,
    BadgeStyle,
    BadgeWidgetAlignment,
    BadgeWidgetOptions,
    TargetConfig,
    TargetEntry,
    TargetKind,
)
from metrics_orchestrator.models.target import (
    BadgeDescriptor,
    BadgeWidgetDescriptor,
    RenderTarget,
    TargetsDocument,
)

__all__ = [
    "BadgeDescriptor",
    "BadgeOptions",
    "BadgeStyle",
    "BadgeWidgetAlignment",
    "BadgeWidgetDescriptor",
    "BadgeWidgetOptions",
    "RenderTarget",
    "TargetConfig",
    "TargetEntry",
    "TargetKind",
    "TargetsDocument",
]
