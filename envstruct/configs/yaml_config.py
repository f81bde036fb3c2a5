"""
envstruct YAML Configuration

Loading and defaults for ~/.envstruct/config.yaml.
"""

import os
from pathlib import Path
from typing import Optional

import yaml

from envstruct.configs.paths import get_data_path
from envstruct.exceptions import ConfigurationError

# --- Default Config Template ---

DEFAULT_CONFIG_YAML = """\
# envstruct Configuration

# Enable debug logging
debug: false

# Write logs to this file in addition to stderr
# log_file: ~/.envstruct/envstruct.log
"""

DEFAULT_CONFIG = {
    "debug": False,
    "log_file": None,
}


def get_config_path() -> Path:
    """Get the path to config.yaml (ENVSTRUCT_CONFIG overrides)."""
    env_path = os.environ.get("ENVSTRUCT_CONFIG")
    if env_path:
        return Path(env_path).expanduser()
    return get_data_path() / "config.yaml"


def load_yaml_config(config_path: Optional[Path] = None) -> dict:
    """
    Load configuration from config.yaml.

    Args:
        config_path: Explicit path; defaults to get_config_path()

    Returns:
        Configuration dictionary (empty if file doesn't exist)

    Raises:
        ConfigurationError: File is not valid YAML or not a mapping
    """
    config_path = config_path or get_config_path()
    if not config_path.exists():
        return {}

    try:
        content = yaml.safe_load(config_path.read_text())
    except yaml.YAMLError as e:
        raise ConfigurationError(
            "Invalid YAML configuration", {"path": str(config_path), "error": str(e)}
        ) from e

    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ConfigurationError(
            "Configuration must be a mapping", {"path": str(config_path)}
        )
    return content


def get_full_config(config_path: Optional[Path] = None) -> dict:
    """
    Merge defaults, config.yaml and ENVSTRUCT_* environment variables.

    Priority: environment > YAML > defaults.
    """
    config = dict(DEFAULT_CONFIG)
    yaml_config = load_yaml_config(config_path)
    for key in DEFAULT_CONFIG:
        if key in yaml_config:
            config[key] = yaml_config[key]

    env_debug = os.environ.get("ENVSTRUCT_DEBUG")
    if env_debug:
        config["debug"] = env_debug.lower() in ("true", "1", "yes")
    env_log_file = os.environ.get("ENVSTRUCT_LOG_FILE")
    if env_log_file:
        config["log_file"] = env_log_file

    config["debug"] = bool(config["debug"])
    if config["log_file"]:
        config["log_file"] = str(Path(config["log_file"]).expanduser())
    return config
