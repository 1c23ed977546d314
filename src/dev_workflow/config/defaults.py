"""Built-in default configuration for dev-workflow setup."""

# Development packages installed into the target project
DEFAULT_DEPENDENCIES = [
    "husky@^9.1.7",
    "lint-staged@^16.1.2",
    "@commitlint/cli@^19.8.1",
    "@commitlint/config-conventional@^19.8.1",
    "commitizen@^4.3.1",
    "cz-conventional-changelog@^3.3.0",
]

# Default configuration that serves as the base for all other configs
DEFAULT_CONFIG = {
    "version": "1.0",
    "settings": {
        "package_manager": None,
        "install_dependencies": True,
        "initialize_hooks": True,
    },
    "dependencies": list(DEFAULT_DEPENDENCIES),
}

PROJECT_CONFIG_FILENAME = "dev-workflow.yaml"
USER_CONFIG_PATH = "~/.config/dev-workflow/config.yaml"
