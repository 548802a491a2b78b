"""Configuration schema and loading for the placement engine.

Public API:
    - PlacementConfiguration: Root configuration model
    - BoundsConfig, SnappingConfig, SearchConfig, OverlapConfig, LayoutConfig:
      Section models
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - load_settings: Load domain PlacementSettings (defaults without a file)
    - config_to_settings: Convert a configuration to PlacementSettings
    - ConfigError: Exception for configuration errors

Example:
    >>> from pathlib import Path
    >>> from wallcraft.application.config import load_settings, ConfigError
    >>>
    >>> try:
    ...     settings = load_settings(Path("placement.json"))
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from wallcraft.application.config.adapter import config_to_settings
from wallcraft.application.config.loader import (
    ConfigError,
    extract_validation_errors,
    format_json_path,
    format_validation_error_message,
    load_config,
    load_config_from_dict,
    load_settings,
)
from wallcraft.application.config.schema import (
    SUPPORTED_VERSIONS,
    BoundsConfig,
    LayoutConfig,
    OverlapConfig,
    PlacementConfiguration,
    SearchConfig,
    SnappingConfig,
)

__all__ = [
    "BoundsConfig",
    "ConfigError",
    "LayoutConfig",
    "OverlapConfig",
    "PlacementConfiguration",
    "SUPPORTED_VERSIONS",
    "SearchConfig",
    "SnappingConfig",
    "config_to_settings",
    "extract_validation_errors",
    "format_json_path",
    "format_validation_error_message",
    "load_config",
    "load_config_from_dict",
    "load_settings",
]
