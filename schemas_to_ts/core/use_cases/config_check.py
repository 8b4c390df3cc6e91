"""
Config check use case — validate schemas-to-ts.yml against a project layout.

Creates no folders: the destination is validated, not resolved.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from schemas_to_ts.core.config.loader import find_config_file, load_plugin_config
from schemas_to_ts.core.errors import ConfigurationError
from schemas_to_ts.core.models.layout import DirectoryLayout
from schemas_to_ts.core.models.plugin_config import PluginConfig
from schemas_to_ts.core.services.destination_paths import validate_destination_folder


@dataclass
class ConfigCheckResult:
    """Result of configuration validation."""

    valid: bool = False
    config: PluginConfig | None = None
    config_path: Path | None = None
    destination: Path | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "config_path": str(self.config_path) if self.config_path else None,
            "destination": str(self.destination) if self.destination else None,
            "errors": self.errors,
            "warnings": self.warnings,
        }


def check_config(layout: DirectoryLayout, config_path: Path | None = None) -> ConfigCheckResult:
    """Validate the plugin configuration for the project described by *layout*.

    Args:
        layout: Host project directories.
        config_path: Optional explicit path to schemas-to-ts.yml.

    Returns:
        ConfigCheckResult with validation status and any issues.
    """
    result = ConfigCheckResult()

    if config_path is None:
        config_path = find_config_file(layout.app.root)
        if config_path is None:
            result.warnings.append("No schemas-to-ts.yml found. Defaults will be used.")
    result.config_path = config_path

    try:
        config = load_plugin_config(config_path) if config_path else PluginConfig()
    except ConfigurationError as e:
        result.errors.append(str(e))
        return result
    result.config = config

    if config.has_destination_folder():
        assert config.destination_folder is not None
        try:
            result.destination = validate_destination_folder(
                config.destination_folder.strip(), layout
            )
        except ConfigurationError as e:
            result.errors.append(str(e))
    else:
        result.warnings.append(
            "No destinationFolder configured. API and component interfaces "
            "will be written next to their schemas."
        )

    if not layout.app.src.is_dir():
        result.warnings.append(f"Strapi src folder does not exist: {layout.app.src}")

    result.valid = len(result.errors) == 0
    return result
