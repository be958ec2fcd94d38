"""Configuration schema and loading for blueprints.

Public API:
    - BlueprintsConfiguration: Root configuration model
    - RegistryPolicyConfig: Unknown-key policies per registry
    - DirectorConfig: Director behaviour
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - RegistrySet, config_to_registries, config_to_director: Adapters

Example:
    >>> from pathlib import Path
    >>> from blueprints.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("blueprints.json"))
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from blueprints.application.config.adapter import (
    RegistrySet,
    config_to_director,
    config_to_registries,
)
from blueprints.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from blueprints.application.config.schemas import (
    SUPPORTED_VERSIONS,
    BlueprintsConfiguration,
    DirectorConfig,
    RegistryPolicyConfig,
)

__all__ = [
    "BlueprintsConfiguration",
    "ConfigError",
    "DirectorConfig",
    "RegistryPolicyConfig",
    "RegistrySet",
    "SUPPORTED_VERSIONS",
    "config_to_director",
    "config_to_registries",
    "load_config",
    "load_config_from_dict",
]
