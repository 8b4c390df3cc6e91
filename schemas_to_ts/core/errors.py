"""
Error taxonomy — every failure surfaced to the host is one of these.

All messages carry the plugin tag so they stand out in the host's
startup log.  None of them are retried: the host halts initialization
and the user re-runs after fixing the cause.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

PLUGIN_TAG = "schemas-to-ts"


class ReservedArea(str, Enum):
    """Which rule a rejected destination folder violated."""

    OUTSIDE_ROOT = "outside-root"
    SAME_AS_ROOT = "same-as-root"
    SAME_AS_SRC = "same-as-src"
    INSIDE_API = "inside-api"
    INSIDE_COMPONENTS = "inside-components"
    INSIDE_EXTENSIONS = "inside-extensions"
    INSIDE_POLICIES = "inside-policies"
    INSIDE_MIDDLEWARES = "inside-middlewares"
    INSIDE_CONFIG = "inside-config"
    INSIDE_DIST = "inside-dist"
    INSIDE_STATIC = "inside-static"


class SchemasToTsError(Exception):
    """Base error; the message is prefixed with the plugin tag."""

    def __init__(self, message: str) -> None:
        self.detail = message
        super().__init__(f"{PLUGIN_TAG} ⚠️  {message}")


class ConfigurationError(SchemasToTsError):
    """The plugin configuration is unusable for this project layout.

    ``area`` is set when a destination folder collides with a reserved
    part of the host project; it is None for plain config-file problems.
    """

    def __init__(self, message: str, area: ReservedArea | None = None) -> None:
        self.area = area
        super().__init__(message)


class DuplicateArtifactError(ConfigurationError):
    """Two generated artifacts target the same path in one run."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"More than one generated file targets '{path}'")


class ArtifactIOError(SchemasToTsError):
    """A filesystem read, write, stat or delete failed."""

    def __init__(self, action: str, path: Path, cause: OSError) -> None:
        self.action = action
        self.path = path
        super().__init__(f"Cannot {action} '{path}': {cause}")
