"""
Artifact manifest — the compiler's output handed over as a file.

The CLI reads generated interfaces from a YAML (or JSON) document:

    artifacts:
      - path: src/common/schemas-to-ts/Media.ts
        content: |
          // Interface automatically generated by schemas-to-ts
          ...

A bare list of ``{path, content}`` items is accepted too.  Relative
paths are taken from the project root.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from schemas_to_ts.core.errors import ConfigurationError
from schemas_to_ts.core.models.artifact import GeneratedArtifact

logger = logging.getLogger(__name__)


def load_artifact_manifest(path: Path, project_root: Path) -> list[GeneratedArtifact]:
    """Read the artifacts listed in a manifest file.

    Raises:
        ConfigurationError: The manifest is missing, unreadable or malformed.
    """
    if not path.is_file():
        raise ConfigurationError(f"Artifact manifest not found: {path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigurationError(f"Cannot read {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid manifest {path}: {e}") from e

    items = data.get("artifacts", []) if isinstance(data, dict) else data
    if items is None:
        items = []
    if not isinstance(items, list):
        raise ConfigurationError(f"Expected a list of artifacts in {path}")

    artifacts: list[GeneratedArtifact] = []
    for i, item in enumerate(items):
        if not isinstance(item, dict):
            raise ConfigurationError(f"Artifact #{i} in {path} is not a mapping")
        target = Path(str(item.get("path", "")))
        if not target.is_absolute():
            item = {**item, "path": project_root / target}
        try:
            artifacts.append(GeneratedArtifact.model_validate(item))
        except ValidationError as e:
            raise ConfigurationError(f"Invalid artifact #{i} in {path}: {e}") from e

    logger.debug("Loaded %d artifact(s) from %s", len(artifacts), path)
    return artifacts
