"""Normalize metrics badge targets into collision-free render instructions."""

from metrics_orchestrator.errors import (
    ConfigError,
    ConfigParseError,
    ConfigReadError,
    ConfigValidationError,
)
from metrics_orchestrator.models import RenderTarget, TargetEntry, TargetKind, TargetsDocument
from metrics_orchestrator.normalizing import (
    load_targets,
    normalize_entry,
    normalize_targets,
    parse_targets,
)
from metrics_orchestrator.slug import derive_slug

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "ConfigParseError",
    "ConfigReadError",
    "ConfigValidationError",
    "RenderTarget",
    "TargetEntry",
    "TargetKind",
    "TargetsDocument",
    "derive_slug",
    "load_targets",
    "normalize_entry",
    "normalize_targets",
    "parse_targets",
]
