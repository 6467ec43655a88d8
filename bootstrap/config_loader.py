# bootstrap/config_loader.py
# -*- coding: utf-8 -*-
"""
Configuration loader for the bootstrap sequencer.

Settings are resolved with the following order of precedence:
1. Pydantic Model Defaults
2. Environment Variables (``BOOTSTRAP_*``, read by pydantic-settings)
3. YAML Configuration File (``bootstrap.yaml`` in the project root, or the
   file named by ``BOOTSTRAP_CONFIG_FILE``)

There is no command-line layer: every argument is forwarded to the
downstream application.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from bootstrap.errors import BootstrapError, ErrorKind

from .config_models import AppSettings

module_logger = logging.getLogger(__name__)

CONFIG_FILE_DEFAULT = "bootstrap.yaml"
CONFIG_FILE_ENV_VAR = "BOOTSTRAP_CONFIG_FILE"


def _deep_update(
    source: Dict[str, Any], overrides: Dict[str, Any]
) -> Dict[str, Any]:
    """
    Recursively updates ``source`` with values from ``overrides``.

    Nested dictionaries are merged key by key; any other value replaces the
    one in ``source``. A None override never replaces an existing value.

    Returns:
        Dict[str, Any]: ``source``, modified in place.
    """
    for key, value in overrides.items():
        if (
            isinstance(value, dict)
            and key in source
            and isinstance(source[key], dict)
        ):
            source[key] = _deep_update(source[key], value)
        elif value is not None:
            source[key] = value
        elif key not in source:
            source[key] = value
    return source


def _read_yaml_config(
    yaml_config_path: Path, logger_to_use: logging.Logger
) -> Dict[str, Any]:
    if not yaml_config_path.is_file():
        logger_to_use.debug(
            f"Configuration file '{yaml_config_path}' not found. Using defaults and environment variables."
        )
        return {}

    try:
        with open(yaml_config_path, "r", encoding="utf-8") as f:
            yaml_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise BootstrapError(
            ErrorKind.CONFIGURATION,
            f"Could not parse YAML config file '{yaml_config_path}': {e}",
        ) from e
    except OSError as e:
        raise BootstrapError(
            ErrorKind.CONFIGURATION,
            f"Could not read config file '{yaml_config_path}': {e}",
        ) from e

    if yaml_data is None:
        return {}
    if not isinstance(yaml_data, dict):
        logger_to_use.warning(
            f"Config file '{yaml_config_path}' does not contain a valid YAML dictionary. Ignoring."
        )
        return {}

    logger_to_use.info(f"Loaded configuration from {yaml_config_path}")
    return yaml_data


def load_app_settings(
    config_file_path: Optional[str] = None,
    project_root: Optional[Path] = None,
    current_logger: Optional[logging.Logger] = None,
) -> AppSettings:
    """
    Loads bootstrap settings: defaults < environment variables < YAML file.

    Args:
        config_file_path: YAML file to read. Relative paths are resolved
            against the project root. Defaults to ``$BOOTSTRAP_CONFIG_FILE``
            or ``bootstrap.yaml``.
        project_root: Directory the YAML path is relative to. Defaults to
            ``BOOTSTRAP_PROJECT_ROOT`` or the current working directory.
        current_logger: Optional logger to use instead of the module logger.

    Returns:
        The fully resolved AppSettings.

    Raises:
        BootstrapError: The YAML file is unreadable or the settings are invalid.
    """
    logger_to_use = current_logger if current_logger else module_logger

    try:
        settings_after_env_and_defaults = AppSettings()
    except ValidationError as e:
        raise BootstrapError(
            ErrorKind.CONFIGURATION, f"Configuration validation failed: {e}"
        ) from e
    current_values_dict = settings_after_env_and_defaults.model_dump()

    root = Path(
        project_root
        or settings_after_env_and_defaults.project_root
        or Path.cwd()
    )
    config_file = Path(
        config_file_path
        or os.environ.get(CONFIG_FILE_ENV_VAR)
        or CONFIG_FILE_DEFAULT
    )
    yaml_config_path = (
        config_file if config_file.is_absolute() else root / config_file
    )

    yaml_data = _read_yaml_config(yaml_config_path, logger_to_use)
    current_values_dict = _deep_update(current_values_dict, yaml_data)

    try:
        final_settings = AppSettings(**current_values_dict)
    except ValidationError as e:
        raise BootstrapError(
            ErrorKind.CONFIGURATION, f"Configuration validation failed: {e}"
        ) from e

    logger_to_use.debug(
        "Successfully loaded and validated application settings"
    )
    return final_settings
