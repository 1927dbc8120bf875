"""
Configuration management utilities for the texsync package.

This module provides functions for loading, validating, and accessing configuration settings.

Configuration Hierarchy:
1. Default configuration (texsync/core/default_config.json) - Base settings for all installations
2. User configuration (~/.texsync/config.json) - User-specific overrides that persist across runs
3. Project configuration (texsync.json in the source directory) - Settings for one asset folder
4. Runtime overrides - Temporary changes made during execution via set_config_value()

Every layer is deep merged into the previous one, so a file only needs to name
the values it changes. The merged result is validated against the
``sync_config`` JSON schema.
"""

import os
import json
import copy
from typing import Dict, Any, Optional

import jsonschema
from dotenv import load_dotenv

from texsync.core.constants import PROJECT_CONFIG_FILENAME
from texsync.core.error_handler import ConfigurationError
from texsync.schemas import load_schema

# Tool executable overrides may live in a .env file
load_dotenv()

# Default configuration paths
DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "default_config.json")
USER_CONFIG_PATH = os.path.expanduser("~/.texsync/config.json")

# Loaded configurations, keyed by project directory (None for no project)
_config_cache = {}

# Values set with set_config_value(save=False); applied on top of every load
_runtime_overrides = {}

def get_config(project_dir: Optional[str] = None, reload: bool = False) -> Dict[str, Any]:
    """
    Get the configuration dictionary, loading it if necessary.

    Args:
        project_dir (str, optional): Source directory whose texsync.json should be applied
        reload (bool): Force reload the configuration even if cached

    Returns:
        Dict[str, Any]: The configuration dictionary
    """
    cache_key = os.path.abspath(project_dir) if project_dir else None

    if cache_key not in _config_cache or reload:
        _config_cache[cache_key] = load_config(project_dir)

    return _config_cache[cache_key]

def load_config(project_dir: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from the default, user and project files.

    Args:
        project_dir (str, optional): Directory that may hold a texsync.json file

    Returns:
        Dict[str, Any]: The merged and validated configuration dictionary

    Raises:
        ConfigurationError: If a file is not valid JSON or the result fails validation
    """
    config = {}

    if os.path.exists(DEFAULT_CONFIG_PATH):
        config.update(load_json_config(DEFAULT_CONFIG_PATH))

    if os.path.exists(USER_CONFIG_PATH):
        deep_merge(config, load_json_config(USER_CONFIG_PATH))

    if project_dir:
        project_config_path = os.path.join(project_dir, PROJECT_CONFIG_FILENAME)
        if os.path.exists(project_config_path):
            deep_merge(config, load_json_config(project_config_path))

    deep_merge(config, copy.deepcopy(_runtime_overrides))

    validate_config(config)
    return config

def load_json_config(path: str) -> Dict[str, Any]:
    """
    Load one JSON configuration file.

    Args:
        path (str): Path to the JSON file

    Returns:
        Dict[str, Any]: Parsed configuration

    Raises:
        ConfigurationError: If the file is not a valid JSON object
    """
    try:
        with open(path, 'r') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in {path}: {e.msg}", component="config")

    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file {path} must contain a JSON object", component="config")

    return data

def validate_config(config: Dict[str, Any]) -> None:
    """
    Validate a configuration dictionary against the sync_config schema.

    Args:
        config (Dict[str, Any]): Configuration to validate

    Raises:
        ConfigurationError: If the configuration does not conform to the schema
    """
    try:
        jsonschema.validate(instance=config, schema=load_schema("sync_config"))
    except jsonschema.exceptions.ValidationError as e:
        key = ".".join(str(part) for part in e.absolute_path)
        raise ConfigurationError(
            message=e.message,
            component="config",
            invalid_keys=[key] if key else None
        )

def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> None:
    """
    Recursively merge override dictionary into base dictionary.

    If a key exists in both dictionaries and both values are dictionaries,
    they are merged recursively; otherwise the override value wins.

    Args:
        base (Dict[str, Any]): Base dictionary to be updated
        override (Dict[str, Any]): Dictionary with values to override
    """
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            deep_merge(base[key], value)
        else:
            base[key] = value

def save_user_config(config: Dict[str, Any]) -> None:
    """
    Save user configuration to the user config file.

    Args:
        config (Dict[str, Any]): Configuration dictionary to save
    """
    os.makedirs(os.path.dirname(USER_CONFIG_PATH), exist_ok=True)

    with open(USER_CONFIG_PATH, 'w') as f:
        json.dump(config, f, indent=2)

    _config_cache.clear()

def get_config_value(key: str, default: Any = None, config: Optional[Dict[str, Any]] = None) -> Any:
    """
    Get a specific configuration value by key.

    Dot notation reaches nested values, so 'sync.target_width' reads
    config['sync']['target_width'].

    Examples:
        >>> get_config_value('sync.target_width', 64)
        64

        >>> get_config_value('nonexistent.key', 'default-value')
        'default-value'

    Args:
        key (str): The configuration key (can use dot notation for nested keys)
        default (Any): Default value if key is not found
        config (Dict[str, Any], optional): Configuration to read instead of the global one

    Returns:
        Any: The configuration value or default
    """
    if config is None:
        config = get_config()

    current = config
    for part in key.split('.'):
        if isinstance(current, dict) and part in current:
            current = current[part]
        else:
            return default

    return current

def set_config_value(key: str, value: Any, save: bool = False) -> None:
    """
    Set a specific configuration value by key.

    With save=False (default) the value is a runtime override that applies to
    every configuration loaded during this process. With save=True it is also
    written to the user configuration file.

    Args:
        key (str): The configuration key (can use dot notation for nested keys)
        value (Any): The value to set
        save (bool): Whether to persist the value in the user configuration file
    """
    parts = key.split('.')

    if save:
        user_config = load_json_config(USER_CONFIG_PATH) if os.path.exists(USER_CONFIG_PATH) else {}
        _set_nested(user_config, parts, value)
        save_user_config(user_config)
    else:
        _set_nested(_runtime_overrides, parts, value)
        _config_cache.clear()

def reset_runtime_overrides() -> None:
    """
    Drop all runtime overrides and cached configurations.
    """
    _runtime_overrides.clear()
    _config_cache.clear()

def _set_nested(target: Dict[str, Any], parts: list, value: Any) -> None:
    current = target
    for part in parts[:-1]:
        if part not in current or not isinstance(current[part], dict):
            current[part] = {}
        current = current[part]
    current[parts[-1]] = value
