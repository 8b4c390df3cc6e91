"""
Plugin configuration model — loaded from schemas-to-ts.yml.

Only the keys that affect where output goes are modelled; any other
plugin option present in the file is ignored.
"""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

DEFAULT_COMMON_INTERFACES_FOLDER_NAME = "schemas-to-ts"


class PluginConfig(BaseModel):
    """Output-related plugin settings.

    Both snake_case and the host's camelCase key names are accepted.
    """

    model_config = ConfigDict(extra="ignore")

    destination_folder: str | None = Field(
        default=None,
        validation_alias=AliasChoices("destination_folder", "destinationFolder"),
    )
    common_interfaces_folder_name: str = Field(
        default=DEFAULT_COMMON_INTERFACES_FOLDER_NAME,
        validation_alias=AliasChoices(
            "common_interfaces_folder_name", "commonInterfacesFolderName"
        ),
    )
    log_level: str = Field(
        default="WARNING",
        validation_alias=AliasChoices("log_level", "logLevel"),
    )

    def has_destination_folder(self) -> bool:
        """An empty or blank destination counts as not configured."""
        return bool(self.destination_folder and self.destination_folder.strip())
