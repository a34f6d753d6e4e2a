"""Catalog configuration loading for video wall sizing.

Public API:
    - CatalogConfiguration: Root configuration model
    - LimitsConfig, CabinetConfig, AspectRatioConfig: Section models
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - config_to_limits, config_to_cabinets, config_to_presets: Domain adapters

Example:
    >>> from pathlib import Path
    >>> from videowall.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("catalog.json"))
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from videowall.application.config.adapter import (
    config_to_cabinets,
    config_to_limits,
    config_to_presets,
)
from videowall.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from videowall.application.config.schema import (
    SUPPORTED_VERSIONS,
    AspectRatioConfig,
    CabinetConfig,
    CatalogConfiguration,
    LimitsConfig,
)

__all__ = [
    "AspectRatioConfig",
    "CabinetConfig",
    "CatalogConfiguration",
    "ConfigError",
    "LimitsConfig",
    "SUPPORTED_VERSIONS",
    "config_to_cabinets",
    "config_to_limits",
    "config_to_presets",
    "load_config",
    "load_config_from_dict",
]
