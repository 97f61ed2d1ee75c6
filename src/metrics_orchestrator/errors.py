"""Errors raised while loading and normalizing target configuration."""

from pathlib import Path
from typing import Optional


class ConfigError(Exception):
    """
    Base class for configuration failures.
    `kind` tells callers which stage failed: parse, io or validation.
    """

    kind: str = ""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigParseError(ConfigError):
    """The document could not be decoded into the expected shape."""

    kind = "parse"

    def __str__(self) -> str:
        return f"failed to parse configuration: {self.message}"


class ConfigReadError(ConfigError):
    """The configuration file could not be read."""

    kind = "io"

    def __init__(self, path: str | Path, reason: str):
        super().__init__(reason)
        self.path = Path(path)

    def __str__(self) -> str:
        return f"failed to read configuration from {self.path}: {self.message}"


class ConfigValidationError(ConfigError):
    """The document decoded fine but breaks a naming or uniqueness rule."""

    kind = "validation"

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field

    def __str__(self) -> str:
        return f"invalid configuration: {self.message}"
