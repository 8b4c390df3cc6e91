"""
Generation use case — one full output pass.

resolve destinations → write artifacts → delete stale artifacts →
regenerate index files.

Any error aborts the run; nothing is rolled back.  Re-running after
fixing the cause converges, since unchanged files are not rewritten and
only header-tagged files are ever deleted.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path

from schemas_to_ts.core.models.artifact import GeneratedArtifact
from schemas_to_ts.core.models.destination import DestinationTree
from schemas_to_ts.core.models.layout import DirectoryLayout
from schemas_to_ts.core.models.plugin_config import PluginConfig
from schemas_to_ts.core.services.artifact_writer import write_artifacts
from schemas_to_ts.core.services.destination_paths import resolve_destination_paths
from schemas_to_ts.core.services.index_aggregator import generate_index_files
from schemas_to_ts.core.services.stale_collector import collect_stale_artifacts

logger = logging.getLogger(__name__)

# The compiler gets the resolved folders and returns what to write there.
ArtifactSource = Callable[[DestinationTree], Iterable[GeneratedArtifact]]


@dataclass
class GenerationResult:
    """Result of a generation run."""

    destinations: DestinationTree | None = None
    written: list[Path] = field(default_factory=list)
    unchanged: list[Path] = field(default_factory=list)
    deleted: list[Path] = field(default_factory=list)
    index_files: list[Path] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "destinations": self.destinations.to_dict() if self.destinations else None,
            "written": [str(p) for p in self.written],
            "unchanged": [str(p) for p in self.unchanged],
            "deleted": [str(p) for p in self.deleted],
            "index_files": [str(p) for p in self.index_files],
        }


def run_generation(
    config: PluginConfig,
    layout: DirectoryLayout,
    artifacts: Iterable[GeneratedArtifact] | ArtifactSource,
) -> GenerationResult:
    """Run the output pipeline for one set of compiler artifacts.

    Args:
        config: Plugin configuration.
        layout: Host project directories.
        artifacts: The generated files, or a callable that produces them
            from the resolved destination tree.

    Returns:
        GenerationResult listing what was written, kept, deleted and indexed.

    Raises:
        ConfigurationError: The destination folder is not allowed, or two
            artifacts share a path.
        ArtifactIOError: Any filesystem failure.
    """
    result = GenerationResult()

    result.destinations = resolve_destination_paths(config, layout)

    if callable(artifacts):
        artifacts = artifacts(result.destinations)

    report = write_artifacts(artifacts)
    result.written = report.written
    result.unchanged = report.unchanged

    result.deleted = collect_stale_artifacts(layout, report.keep_set)
    result.index_files = generate_index_files(result.destinations)

    logger.info(
        "Generation done: %d written, %d unchanged, %d deleted, %d index file(s)",
        len(result.written), len(result.unchanged),
        len(result.deleted), len(result.index_files),
    )
    return result
