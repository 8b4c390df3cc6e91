"""
Destination tree — where generated interfaces are written.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from pydantic import BaseModel

COMPONENT_INTERFACES_FOLDER_NAME = "interfaces"


class DestinationTree(BaseModel):
    """Resolved output folders, each one existing on disk.

    Attributes:
        commons:    Shared interfaces (always set).
        apis:       Content-type interfaces (custom destination only).
        components: Component interfaces (custom destination only).
        extensions: Plugin extension interfaces (always set).
        use_for_apis_and_components: True when a custom destination folder
            is configured; otherwise apis/components live next to their
            schemas and are not managed here.
    """

    commons: Path | None = None
    apis: Path | None = None
    components: Path | None = None
    extensions: Path | None = None
    use_for_apis_and_components: bool = False
    component_interfaces_folder_name: str = COMPONENT_INTERFACES_FOLDER_NAME

    def roots(self) -> Iterator[Path]:
        """Yield the populated folders in commons, apis, components, extensions order."""
        for folder in (self.commons, self.apis, self.components, self.extensions):
            if folder:
                yield folder

    def to_dict(self) -> dict:
        return {
            "commons": str(self.commons) if self.commons else None,
            "apis": str(self.apis) if self.apis else None,
            "components": str(self.components) if self.components else None,
            "extensions": str(self.extensions) if self.extensions else None,
            "use_for_apis_and_components": self.use_for_apis_and_components,
        }
