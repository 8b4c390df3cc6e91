"""
Configuration loader — reads schemas-to-ts.yml into a PluginConfig.

The file is optional: without one, every setting takes its default and
interfaces go to the default folders.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from schemas_to_ts.core.errors import ConfigurationError
from schemas_to_ts.core.models.plugin_config import PluginConfig

logger = logging.getLogger(__name__)

# Default config filename
CONFIG_FILE = "schemas-to-ts.yml"

# Optional wrapper key, matching the plugin name used by the host config
WRAPPER_KEY = "schemas-to-ts"


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for schemas-to-ts.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to the config file, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_plugin_config(path: Path | None = None) -> PluginConfig:
    """Load and validate the plugin configuration.

    Args:
        path: Explicit path to the config file.  If None, searches upward
            and falls back to defaults when nothing is found.

    Returns:
        Validated PluginConfig.

    Raises:
        ConfigurationError: If an explicit file is missing or any file is invalid.
    """
    if path is None:
        path = find_config_file()
        if path is None:
            logger.debug("No %s found, using default configuration", CONFIG_FILE)
            return PluginConfig()

    if not path.is_file():
        raise ConfigurationError(f"Config file not found: {path}")

    logger.debug("Loading plugin config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    # The YAML may wrap everything under a "schemas-to-ts" key or be flat
    config_data = data.get(WRAPPER_KEY, data)
    if not isinstance(config_data, dict):
        raise ConfigurationError(f"Expected a mapping under '{WRAPPER_KEY}' in {path}")

    try:
        config = PluginConfig.model_validate(config_data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid plugin configuration: {e}") from e

    logger.info(
        "Loaded plugin config (destination folder: %s)",
        config.destination_folder or "default",
    )
    return config
