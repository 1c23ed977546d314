"""Package manager detection and development dependency installation."""

from pathlib import Path

from dev_workflow.config.schema import PackageManager
from dev_workflow.core.context import ProjectContext
from dev_workflow.errors import DelegatedProcessError
from dev_workflow.utils.output import print_info, print_step, print_success

# Checked in order; the first lock file present wins
LOCK_FILES = [
    ("pnpm-lock.yaml", PackageManager.PNPM),
    ("yarn.lock", PackageManager.YARN),
]

INSTALL_COMMANDS = {
    PackageManager.NPM: ["npm", "install", "--save-dev"],
    PackageManager.PNPM: ["pnpm", "add", "-D"],
    PackageManager.YARN: ["yarn", "add", "--dev"],
}


def detect_package_manager(project_root: Path) -> PackageManager:
    """Pick the package manager that owns the project.

    Args:
        project_root: Directory to inspect for lock files

    Returns:
        The manager whose lock file is present, npm when there is none
    """
    for lock_file, manager in LOCK_FILES:
        if (project_root / lock_file).exists():
            return manager
    return PackageManager.NPM


def resolve_package_manager(context: ProjectContext) -> PackageManager:
    """Return the configured package manager, detecting it when unset."""
    configured = context.config.settings.package_manager
    if configured is not None:
        return configured
    return detect_package_manager(context.root)


def build_install_command(manager: PackageManager, packages: list[str]) -> list[str]:
    """Build the command that adds packages as development dependencies."""
    return [*INSTALL_COMMANDS[manager], *packages]


def install_dependencies(context: ProjectContext) -> PackageManager:
    """Install the configured development packages.

    Returns:
        The package manager that was used

    Raises:
        DelegatedProcessError: If the package manager exits non-zero
    """
    print_step("Installing development dependencies...")

    manager = resolve_package_manager(context)
    command = build_install_command(manager, context.config.dependencies)
    print_info(f"Using {manager.value}: {' '.join(command)}")

    result = context.runner.run(command, cwd=context.root, capture=False)
    if not result.ok:
        raise DelegatedProcessError(
            f"Failed to install dependencies: '{' '.join(command)}' "
            f"exited with status {result.returncode}",
            command=command,
            returncode=result.returncode,
        )

    print_success("Dependencies installed")
    return manager
