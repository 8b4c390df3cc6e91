"""
Domain models — Pydantic types for the output manager.

All models are re-exported here for convenient access:

    from schemas_to_ts.core.models import DirectoryLayout, DestinationTree, GeneratedArtifact
"""

from schemas_to_ts.core.models.artifact import (
    HEADER_COMMENT,
    TS_EXTENSION,
    GeneratedArtifact,
    is_header_line,
)
from schemas_to_ts.core.models.destination import (
    COMPONENT_INTERFACES_FOLDER_NAME,
    DestinationTree,
)
from schemas_to_ts.core.models.layout import (
    AppDirectories,
    DirectoryLayout,
    DistDirectories,
    StaticDirectories,
)
from schemas_to_ts.core.models.plugin_config import PluginConfig

__all__ = [
    # artifact.py
    "GeneratedArtifact",
    "HEADER_COMMENT",
    "TS_EXTENSION",
    "is_header_line",
    # destination.py
    "COMPONENT_INTERFACES_FOLDER_NAME",
    "DestinationTree",
    # layout.py
    "AppDirectories",
    "DirectoryLayout",
    "DistDirectories",
    "StaticDirectories",
    # plugin_config.py
    "PluginConfig",
]
