"""
envstruct Configuration Module

Re-exports commonly used functions for cleaner imports across the codebase.
"""

# Logging (most commonly used)
from envstruct.configs.logging import get_logger, setup_logging

# Paths
from envstruct.configs.paths import get_data_path

# Constants
from envstruct.configs.constants import (
    ENV_TAG_KEY,
    EXTENSION_TO_LANGUAGE,
    POINTER_MARKER,
    RAW_TAG_QUOTE,
    SLICE_MARKER,
)

# YAML config
from envstruct.configs.yaml_config import (
    DEFAULT_CONFIG,
    DEFAULT_CONFIG_YAML,
    get_config_path,
    get_full_config,
    load_yaml_config,
)

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    # Paths
    "get_data_path",
    # Constants
    "ENV_TAG_KEY",
    "EXTENSION_TO_LANGUAGE",
    "POINTER_MARKER",
    "RAW_TAG_QUOTE",
    "SLICE_MARKER",
    # YAML config
    "DEFAULT_CONFIG",
    "DEFAULT_CONFIG_YAML",
    "get_config_path",
    "get_full_config",
    "load_yaml_config",
]
