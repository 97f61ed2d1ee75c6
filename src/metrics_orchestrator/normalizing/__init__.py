"""Target normalization: per-entry field resolution and document-wide uniqueness."""

from .engine import (
    decode_config,
    load_targets,
    normalize_entry,
    normalize_targets,
    parse_targets,
)

__all__ = [
    "decode_config",
    "load_targets",
    "normalize_entry",
    "normalize_targets",
    "parse_targets",
]
