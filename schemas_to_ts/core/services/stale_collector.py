"""
Stale artifact collector — delete generated files the compiler no longer emits.

Ownership is read from the file itself: a .ts file is ours only if its
first line is the generator header.  Hand-written files are never
deleted, whatever the keep-set says.

Dependency and build folders (node_modules, public, database, dist,
src/plugins, src/admin) and any dot-folder (.git, .cache, ...) are not
scanned.  Symlinks are neither followed nor deleted.
"""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Iterable
from pathlib import Path

from schemas_to_ts.core.errors import ArtifactIOError
from schemas_to_ts.core.models.artifact import TS_EXTENSION, is_header_line
from schemas_to_ts.core.models.layout import DirectoryLayout
from schemas_to_ts.core.services.path_safety import normalize

logger = logging.getLogger(__name__)

ROOT_EXCLUDED_FOLDERS = ("node_modules", "public", "database", "dist")
SRC_EXCLUDED_FOLDERS = ("plugins", "admin")


def excluded_paths(layout: DirectoryLayout) -> set[Path]:
    """Folders never scanned for stale artifacts."""
    paths = {normalize(layout.app.root / name) for name in ROOT_EXCLUDED_FOLDERS}
    paths |= {normalize(layout.app.src / name) for name in SRC_EXCLUDED_FOLDERS}
    return paths


def collect_stale_artifacts(
    layout: DirectoryLayout,
    keep: Iterable[Path],
    root: Path | None = None,
) -> list[Path]:
    """Delete generated files under *root* that are not in *keep*.

    Args:
        layout: Host project directories (for the exclusion list).
        keep: Paths written by the current run; they are preserved.
        root: Where to start scanning (default: the project root).

    Returns:
        The deleted paths, in traversal order.

    Raises:
        ArtifactIOError: Listing, stat-ing, reading or deleting failed.
            The pass stops at the first failure.
    """
    excluded = excluded_paths(layout)
    keep_set = {normalize(p) for p in keep}
    logger.debug("Excluded from stale scan: %s", sorted(str(p) for p in excluded))

    deleted: list[Path] = []
    _scan(normalize(os.path.abspath(root or layout.app.root)), excluded, keep_set, deleted)

    if deleted:
        logger.info("Deleted %d stale generated file(s)", len(deleted))
    return deleted


def _scan(directory: Path, excluded: set[Path], keep: set[Path], deleted: list[Path]) -> None:
    logger.debug("Looking for files to delete in %s", directory)

    if directory in excluded or directory.name.startswith("."):
        return

    # Snapshot the listing before deleting anything in this folder.
    try:
        entries = sorted(directory.iterdir())
    except OSError as e:
        raise ArtifactIOError("list", directory, e) from e

    for entry in entries:
        try:
            mode = entry.lstat().st_mode
        except OSError as e:
            raise ArtifactIOError("stat", entry, e) from e

        # Links may lead out of the project; their targets are not ours.
        if stat.S_ISLNK(mode):
            logger.debug("Skipping symlink %s", entry)
        elif stat.S_ISDIR(mode):
            _scan(entry, excluded, keep, deleted)
        elif entry in keep:
            continue
        elif entry.suffix == TS_EXTENSION and _has_generator_header(entry):
            try:
                entry.unlink()
            except OSError as e:
                raise ArtifactIOError("delete", entry, e) from e
            logger.debug("Deleted: %s", entry)
            deleted.append(entry)


def _has_generator_header(path: Path) -> bool:
    try:
        with path.open(encoding="utf-8", errors="replace", newline="") as fh:
            first_line = fh.readline()
    except OSError as e:
        raise ArtifactIOError("read", path, e) from e
    return is_header_line(first_line)
