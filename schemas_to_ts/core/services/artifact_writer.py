"""
Artifact writer — write generated files only when their content changed.

Skipping identical content keeps file mtimes stable, so the host's
watcher does not trigger a rebuild on every startup.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from schemas_to_ts.core.errors import ArtifactIOError, DuplicateArtifactError
from schemas_to_ts.core.models.artifact import GeneratedArtifact

logger = logging.getLogger(__name__)


def write_artifact(directory: Path, file_name: str, content: str) -> Path:
    """Write *content* to ``directory / file_name`` unless it is already there.

    Returns:
        The target path, whether or not a write happened.

    Raises:
        ArtifactIOError: Reading the existing file or writing failed.
    """
    destination = directory / file_name
    _write_if_changed(destination, content)
    return destination


def _write_if_changed(destination: Path, content: str) -> bool:
    """Return True when the file was (re)written."""
    data = content.encode("utf-8")

    if destination.is_file():
        try:
            current = destination.read_bytes()
        except OSError as e:
            raise ArtifactIOError("read", destination, e) from e
        if current == data:
            logger.debug("File %s is up to date.", destination)
            return False

    logger.debug("Writing file %s", destination)
    try:
        destination.write_bytes(data)
    except OSError as e:
        raise ArtifactIOError("write", destination, e) from e
    return True


@dataclass
class WriteReport:
    """Outcome of writing a batch of artifacts."""

    written: list[Path] = field(default_factory=list)
    unchanged: list[Path] = field(default_factory=list)

    @property
    def keep_set(self) -> set[Path]:
        """Every path handled this run, written or confirmed up to date."""
        return set(self.written) | set(self.unchanged)

    def to_dict(self) -> dict:
        return {
            "written": [str(p) for p in self.written],
            "unchanged": [str(p) for p in self.unchanged],
        }


def write_artifacts(artifacts: Iterable[GeneratedArtifact]) -> WriteReport:
    """Write every artifact, refusing two artifacts with the same path.

    The whole batch is checked for duplicates before anything is written.

    Raises:
        DuplicateArtifactError: Two artifacts share a target path.
        ArtifactIOError: A read or write failed.
    """
    batch = list(artifacts)
    seen: set[Path] = set()
    for artifact in batch:
        if artifact.path in seen:
            raise DuplicateArtifactError(artifact.path)
        seen.add(artifact.path)

    report = WriteReport()
    for artifact in batch:
        if not artifact.has_header():
            logger.warning(
                "%s has no generator header; it will never be cleaned up as stale",
                artifact.path,
            )
        if _write_if_changed(artifact.path, artifact.content):
            report.written.append(artifact.path)
        else:
            report.unchanged.append(artifact.path)

    logger.info(
        "Generated files: %d written, %d up to date",
        len(report.written), len(report.unchanged),
    )
    return report
