"""
Path safety — the gate that keeps output away from the host's own code.

Pure functions over paths: nothing here touches the filesystem.
"""

from __future__ import annotations

import os
from pathlib import Path

from schemas_to_ts.core.errors import ConfigurationError, ReservedArea
from schemas_to_ts.core.models.layout import DirectoryLayout

# Human-readable rule per violation, used in the error message.
_MESSAGES: dict[ReservedArea, str] = {
    ReservedArea.OUTSIDE_ROOT: "is not inside the Strapi project",
    ReservedArea.SAME_AS_ROOT: "is the same as the Strapi root",
    ReservedArea.SAME_AS_SRC: "is the same as the Strapi src",
    ReservedArea.INSIDE_API: "is inside the Strapi api",
    ReservedArea.INSIDE_COMPONENTS: "is inside the Strapi components",
    ReservedArea.INSIDE_EXTENSIONS: "is inside the Strapi extensions",
    ReservedArea.INSIDE_POLICIES: "is inside the Strapi policies",
    ReservedArea.INSIDE_MIDDLEWARES: "is inside the Strapi middlewares",
    ReservedArea.INSIDE_CONFIG: "is inside the Strapi config",
    ReservedArea.INSIDE_DIST: "is inside the Strapi dist",
    ReservedArea.INSIDE_STATIC: "is inside the Strapi static",
}


def normalize(path: Path | str) -> Path:
    """Collapse ``.``/``..`` and duplicate separators without resolving links."""
    return Path(os.path.normpath(str(path)))


def is_inside_root(path: Path | str, root: Path | str) -> bool:
    """True when *path* equals *root* or lies below it."""
    candidate = normalize(path)
    base = normalize(root)
    return candidate == base or base in candidate.parents


def find_reserved_area(path: Path | str, layout: DirectoryLayout) -> ReservedArea | None:
    """Return the reserved area *path* collides with, or None.

    Root and src are only forbidden as exact matches (output may live
    below them); every other reserved folder is forbidden together with
    everything inside it.  The first matching rule wins.
    """
    candidate = normalize(path)

    if candidate == normalize(layout.app.root):
        return ReservedArea.SAME_AS_ROOT
    if candidate == normalize(layout.app.src):
        return ReservedArea.SAME_AS_SRC

    nested = (
        (layout.app.api, ReservedArea.INSIDE_API),
        (layout.app.components, ReservedArea.INSIDE_COMPONENTS),
        (layout.app.extensions, ReservedArea.INSIDE_EXTENSIONS),
        (layout.app.policies, ReservedArea.INSIDE_POLICIES),
        (layout.app.middlewares, ReservedArea.INSIDE_MIDDLEWARES),
        (layout.app.config, ReservedArea.INSIDE_CONFIG),
        (layout.dist.root, ReservedArea.INSIDE_DIST),
        (layout.static.public, ReservedArea.INSIDE_STATIC),
    )
    for reserved, area in nested:
        if is_inside_root(candidate, reserved):
            return area

    return None


def assert_destination_allowed(path: Path | str, layout: DirectoryLayout) -> None:
    """Raise ConfigurationError unless *path* is a safe destination folder.

    Raises:
        ConfigurationError: With ``area`` naming the violated rule.
    """
    if not is_inside_root(path, layout.app.root):
        raise _violation(ReservedArea.OUTSIDE_ROOT, path)

    area = find_reserved_area(path, layout)
    if area is not None:
        raise _violation(area, path)


def _violation(area: ReservedArea, path: Path | str) -> ConfigurationError:
    return ConfigurationError(
        f"The given destinationFolder {_MESSAGES[area]}: '{path}'",
        area=area,
    )
