"""Pydantic models for dev-workflow configuration."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from dev_workflow.config.defaults import DEFAULT_DEPENDENCIES


class PackageManager(str, Enum):
    """Package managers the installer knows how to drive."""

    NPM = "npm"
    PNPM = "pnpm"
    YARN = "yarn"


class SettingsConfig(BaseModel):
    """Global settings for the setup run."""

    package_manager: Optional[PackageManager] = Field(
        default=None,
        description="Force a package manager instead of detecting it from lock files",
    )
    install_dependencies: bool = Field(
        default=True, description="Install the development packages"
    )
    initialize_hooks: bool = Field(
        default=True, description="Run 'npx husky init' before copying hooks"
    )


class WorkflowConfig(BaseModel):
    """Root configuration for dev-workflow setup."""

    version: str = Field(description="Config schema version")
    settings: SettingsConfig = Field(default_factory=SettingsConfig)
    dependencies: list[str] = Field(
        default_factory=lambda: list(DEFAULT_DEPENDENCIES),
        description="Package specs passed to the package manager",
    )

    @field_validator("version", mode="before")
    @classmethod
    def coerce_version(cls, v):
        """Accept unquoted YAML versions such as ``version: 1.0``."""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("version")
    @classmethod
    def validate_version(cls, v: str) -> str:
        """Validate version format."""
        if not v.startswith("1."):
            raise ValueError(
                f"Unsupported config version: {v}. Only version 1.x is supported."
            )
        return v

    @field_validator("dependencies")
    @classmethod
    def validate_dependencies(cls, v: list[str]) -> list[str]:
        """Reject blank package specs."""
        for spec in v:
            if not spec.strip():
                raise ValueError("Dependency specs must not be empty")
        return v
