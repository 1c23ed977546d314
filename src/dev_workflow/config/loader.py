"""Configuration loader with merge logic and precedence handling."""

import copy
import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from dev_workflow.config.defaults import (
    DEFAULT_CONFIG,
    PROJECT_CONFIG_FILENAME,
    USER_CONFIG_PATH,
)
from dev_workflow.config.schema import WorkflowConfig
from dev_workflow.errors import ConfigError

TRUTHY = {"1", "true", "yes", "on"}


def find_config_files(project_root: Path) -> list[Path]:
    """Find configuration files in standard locations.

    Searches for configuration files in order of precedence (lowest to highest):
    1. User config (~/.config/dev-workflow/config.yaml)
    2. Project config (dev-workflow.yaml in the project root)

    Args:
        project_root: Root directory of the project being set up

    Returns:
        List of Path objects for existing config files, ordered from lowest
        to highest precedence (so later configs override earlier ones)
    """
    config_files = []

    user_config = Path(USER_CONFIG_PATH).expanduser()
    if user_config.exists():
        config_files.append(user_config)

    project_config = project_root / PROJECT_CONFIG_FILENAME
    if project_config.exists():
        config_files.append(project_config)

    return config_files


def load_yaml_file(file_path: Path) -> dict[str, Any]:
    """Load and parse a YAML configuration file.

    Args:
        file_path: Path to the YAML file

    Returns:
        Dictionary containing the parsed YAML content

    Raises:
        yaml.YAMLError: If the file contains invalid YAML
        ValueError: If the top level is not a mapping
    """
    with open(file_path, "r", encoding="utf-8") as f:
        content = yaml.safe_load(f)
    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ValueError("top level must be a mapping")
    return content


def merge_configs(configs: list[dict[str, Any]]) -> dict[str, Any]:
    """Deep merge multiple configuration dictionaries.

    Later configs override earlier ones. Nested dictionaries merge
    recursively; lists are replaced wholesale.

    Args:
        configs: Configuration dictionaries from lowest to highest precedence

    Returns:
        Merged configuration dictionary
    """
    result: dict[str, Any] = {}

    for config in configs:
        result = _deep_merge(result, config)

    return result


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def apply_env_overrides(config: dict[str, Any]) -> dict[str, Any]:
    """Apply environment variable overrides to configuration.

    Supports the following environment variables:
    - DEV_WORKFLOW_PACKAGE_MANAGER: Override settings.package_manager
    - DEV_WORKFLOW_SKIP_INSTALL: Disable settings.install_dependencies when truthy
    - DEV_WORKFLOW_SKIP_HOOKS: Disable settings.initialize_hooks when truthy

    Args:
        config: Configuration dictionary to apply overrides to

    Returns:
        Configuration dictionary with environment overrides applied
    """
    result = config.copy()
    settings = dict(result.get("settings") or {})

    if package_manager := os.getenv("DEV_WORKFLOW_PACKAGE_MANAGER"):
        settings["package_manager"] = package_manager.strip().lower()

    if _is_truthy(os.getenv("DEV_WORKFLOW_SKIP_INSTALL")):
        settings["install_dependencies"] = False

    if _is_truthy(os.getenv("DEV_WORKFLOW_SKIP_HOOKS")):
        settings["initialize_hooks"] = False

    result["settings"] = settings
    return result


def _is_truthy(value: Optional[str]) -> bool:
    return value is not None and value.strip().lower() in TRUTHY


def load_config(project_root: Path) -> WorkflowConfig:
    """Load and merge configuration from all sources.

    Configuration precedence (lowest to highest):
    1. Built-in defaults
    2. User config (~/.config/dev-workflow/config.yaml)
    3. Project config (dev-workflow.yaml)
    4. Environment variables

    Args:
        project_root: Root directory of the project being set up

    Returns:
        Validated WorkflowConfig instance

    Raises:
        ConfigError: If a config file is unreadable or the merged
            configuration fails validation
    """
    configs_to_merge = [copy.deepcopy(DEFAULT_CONFIG)]

    for config_file in find_config_files(project_root):
        try:
            configs_to_merge.append(load_yaml_file(config_file))
        except (yaml.YAMLError, ValueError, OSError) as e:
            raise ConfigError(f"Error loading {config_file}: {e}") from e

    merged_config = apply_env_overrides(merge_configs(configs_to_merge))

    try:
        return WorkflowConfig(**merged_config)
    except ValidationError as e:
        raise ConfigError(f"Configuration validation failed: {e}") from e
