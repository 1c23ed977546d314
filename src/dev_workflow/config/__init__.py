"""Configuration loading and management."""

from dev_workflow.config.loader import (
    apply_env_overrides,
    find_config_files,
    load_config,
    merge_configs,
)
from dev_workflow.config.schema import (
    PackageManager,
    SettingsConfig,
    WorkflowConfig,
)

__all__ = [
    # Loader functions
    "apply_env_overrides",
    "find_config_files",
    "load_config",
    "merge_configs",
    # Schema classes
    "PackageManager",
    "SettingsConfig",
    "WorkflowConfig",
]
