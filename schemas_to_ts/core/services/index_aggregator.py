"""
Index aggregator — barrel files for every generated folder.

Walks each destination root bottom-up.  A folder gets an ``index.ts``
re-exporting its modules and every subfolder that ended up with its own
``index.ts``; a folder with nothing to export gets none.
"""

from __future__ import annotations

import logging
import stat
from pathlib import Path

from schemas_to_ts.core.errors import ArtifactIOError
from schemas_to_ts.core.models.destination import DestinationTree
from schemas_to_ts.core.services.artifact_writer import write_artifact

logger = logging.getLogger(__name__)

INDEX_FILE_NAME = "index.ts"
MODULE_EXTENSIONS = (".ts", ".tsx")
DECLARATION_SUFFIX = ".d.ts"


def generate_index_files(destinations: DestinationTree) -> list[Path]:
    """Generate barrel files under every populated destination root.

    Returns:
        Paths of the index files present after the pass.
    """
    index_files: list[Path] = []
    for root in destinations.roots():
        index_files.extend(generate_index_files_for_path(root))
    return index_files


def generate_index_files_for_path(root_path: Path) -> list[Path]:
    """Post-order pass over *root_path*: children first, then the folder itself."""
    index_files: list[Path] = []
    try:
        for entry in _list_entries(root_path):
            if _is_dir(entry):
                index_files.extend(generate_index_files_for_path(entry))

        content = build_index_content(root_path)
        if content:
            index_files.append(write_artifact(root_path, INDEX_FILE_NAME, content))
            logger.debug("Generated index file at %s", root_path / INDEX_FILE_NAME)
    except ArtifactIOError as e:
        logger.error("Error processing directory %s: %s", root_path, e)
        raise
    return index_files


def build_index_content(folder_path: Path) -> str:
    """Return the barrel text for *folder_path*, or "" if nothing is exportable.

    Children must already have been processed: a subfolder is exported
    only if it contains an index file at this point.
    """
    exports: list[str] = []
    for entry in _list_entries(folder_path):
        if _is_dir(entry):
            if (entry / INDEX_FILE_NAME).is_file():
                exports.append(f"export * from './{entry.name}';")
        elif _is_module(entry.name):
            exports.append(f"export * from './{Path(entry.name).stem}';")

    if not exports:
        return ""
    return "\n".join(exports) + "\n"


def _is_module(file_name: str) -> bool:
    return (
        file_name != INDEX_FILE_NAME
        and file_name.endswith(MODULE_EXTENSIONS)
        and not file_name.endswith(DECLARATION_SUFFIX)
    )


def _list_entries(folder_path: Path) -> list[Path]:
    try:
        return sorted(folder_path.iterdir())
    except OSError as e:
        raise ArtifactIOError("list", folder_path, e) from e


def _is_dir(path: Path) -> bool:
    try:
        return stat.S_ISDIR(path.stat().st_mode)
    except OSError as e:
        raise ArtifactIOError("stat", path, e) from e
