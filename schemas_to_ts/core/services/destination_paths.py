"""
Destination paths — turn the configured destinationFolder into folders on disk.

Without a destination folder, shared interfaces go to
``src/common/<commonInterfacesFolderName>`` and extension interfaces to
``src/extensions``; api and component interfaces stay next to their
schemas and are not managed here.

With a destination folder, it is validated against the project layout
first (nothing is created for a rejected folder) and then receives four
fixed subfolders: common, api, components, extensions.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from schemas_to_ts.core.errors import ArtifactIOError
from schemas_to_ts.core.models.destination import DestinationTree
from schemas_to_ts.core.models.layout import DirectoryLayout
from schemas_to_ts.core.models.plugin_config import PluginConfig
from schemas_to_ts.core.services.path_safety import (
    assert_destination_allowed,
    is_inside_root,
    normalize,
)

logger = logging.getLogger(__name__)

COMMON_FOLDER_NAME = "common"
APIS_FOLDER_NAME = "api"
COMPONENTS_FOLDER_NAME = "components"
EXTENSIONS_FOLDER_NAME = "extensions"


def normalize_without_trailing_separator(folder_path: Path | str) -> Path:
    """Normalize a folder path and drop any trailing separator."""
    text = os.path.normpath(str(folder_path))
    if len(text) > 1 and text.endswith(os.sep):
        text = text[:-1]
    return Path(text)


def ensure_folder_path(base: Path, *subfolders: str) -> Path:
    """Create each level of *subfolders* under *base* that is missing.

    Existing levels are left alone, so calling this twice is harmless.

    Returns:
        The deepest folder.
    """
    folder = base
    for subfolder in subfolders:
        folder = folder / subfolder
        if not folder.is_dir():
            try:
                folder.mkdir(exist_ok=True)
            except OSError as e:
                raise ArtifactIOError("create folder", folder, e) from e
            logger.debug("Created folder %s", folder)
    return folder


def resolve_destination_paths(config: PluginConfig, layout: DirectoryLayout) -> DestinationTree:
    """Resolve (and create) the output folders for this run.

    Args:
        config: Plugin configuration; only ``destination_folder`` and
            ``common_interfaces_folder_name`` are used.
        layout: The host project's directories.

    Returns:
        DestinationTree whose populated folders all exist.

    Raises:
        ConfigurationError: destinationFolder is outside the project or
            collides with a reserved Strapi folder.
        ArtifactIOError: A folder could not be created.
    """
    if not config.has_destination_folder():
        tree = DestinationTree(
            commons=ensure_folder_path(
                layout.app.src, COMMON_FOLDER_NAME, config.common_interfaces_folder_name
            ),
            extensions=ensure_folder_path(layout.app.src, EXTENSIONS_FOLDER_NAME),
            use_for_apis_and_components=False,
        )
        logger.debug("Using default destination folders: %s", tree.to_dict())
        return tree

    assert config.destination_folder is not None  # guaranteed by has_destination_folder()
    destination = _final_destination_folder(config.destination_folder.strip(), layout)
    tree = DestinationTree(
        commons=ensure_folder_path(destination, COMMON_FOLDER_NAME),
        apis=ensure_folder_path(destination, APIS_FOLDER_NAME),
        components=ensure_folder_path(destination, COMPONENTS_FOLDER_NAME),
        extensions=ensure_folder_path(destination, EXTENSIONS_FOLDER_NAME),
        use_for_apis_and_components=True,
    )
    logger.info("Using destination folder %s", destination)
    return tree


def validate_destination_folder(destination_folder: str, layout: DirectoryLayout) -> Path:
    """Return the absolute destination folder without creating anything.

    Raises:
        ConfigurationError: The folder is outside the project or reserved.
    """
    root = layout.app.root

    # An absolute path inside the project is re-expressed relative to it;
    # anything else is taken as relative to the root.
    if os.path.isabs(destination_folder) and is_inside_root(destination_folder, root):
        relative = os.path.relpath(normalize(destination_folder), normalize(root))
    else:
        relative = destination_folder.lstrip("/" + os.sep)

    candidate = normalize(root / relative)
    assert_destination_allowed(candidate, layout)
    return normalize_without_trailing_separator(candidate)


def _final_destination_folder(destination_folder: str, layout: DirectoryLayout) -> Path:
    root = layout.app.root
    candidate = validate_destination_folder(destination_folder, layout)
    folders = [part for part in candidate.relative_to(normalize(root)).parts if part]
    return ensure_folder_path(root, *folders)
