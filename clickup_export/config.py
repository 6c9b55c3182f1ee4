#!/usr/bin/env python3
"""
Configuration loading for the docs exporter.

Settings come from built-in defaults, optionally overridden by a JSON
config file laid out like DEFAULT_CONFIG. Command-line flags override both.

Usage:
    from clickup_export.config import load_config

    config = load_config("config.json")
    delay = config["api"]["request_delay_seconds"]
"""

import copy
import json
import os
from pathlib import Path
from typing import Optional

from clickup_export.errors import ConfigError

DEFAULT_CONFIG = {
    "api": {
        "base_url": "https://api.clickup.com/api/v3",
        "legacy_base_url": "https://api.clickup.com/api/v2",
        "timeout_seconds": 30,
        "request_delay_seconds": 0.1,
        "max_server_retries": 3,
        "user_agent": "clickup-docs-exporter/1.0",
    },
    "export": {
        "output_dir": "./clickup-docs",
        "page_delay_seconds": 0.1,
    },
    "logging": {
        "log_dir": None,
    },
}

TOKEN_ENV_VAR = "CLICKUP_API_TOKEN"
WORKSPACE_ENV_VAR = "CLICKUP_WORKSPACE_ID"


def _merge(base: dict, overrides: dict) -> dict:
    """Recursively merge overrides into base (in place)."""
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base


def load_config(path: Optional[str] = None) -> dict:
    """
    Load exporter configuration.

    Args:
        path: JSON config file (None = defaults only)

    Returns:
        Config dict with "api", "export" and "logging" sections

    Raises:
        ConfigError: If the file does not exist, is not a JSON object,
            or replaces a section with something other than an object
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path is None:
        return config

    config_path = Path(path)
    if not config_path.exists():
        raise ConfigError(str(config_path), "file not found")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            overrides = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(str(config_path), f"invalid JSON ({e})") from e

    if not isinstance(overrides, dict):
        raise ConfigError(str(config_path), "top level must be a JSON object")

    config = _merge(config, overrides)
    for section in DEFAULT_CONFIG:
        if not isinstance(config[section], dict):
            raise ConfigError(str(config_path), f'section "{section}" must be a JSON object')
    return config


def env_default(name: str, default: Optional[str] = None) -> Optional[str]:
    """Read an environment variable, treating empty values as unset."""
    return os.environ.get(name) or default
