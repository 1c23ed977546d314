"""Setup orchestrator.

Runs the setup steps in a fixed order against a project context:
1. Check prerequisites (git repository, package.json)
2. Install development dependencies
3. Initialize husky
4. Copy configuration templates
5. Patch package.json
6. Print a summary

Each step either completes or raises, which stops the run. Nothing already
done is rolled back; re-running is safe because every step is idempotent.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dev_workflow.config.loader import load_config
from dev_workflow.config.schema import PackageManager, WorkflowConfig
from dev_workflow.core.context import ProjectContext
from dev_workflow.core.manifest import ManifestPatchResult, patch_manifest
from dev_workflow.core.materialize import MaterializedFile, materialize_templates
from dev_workflow.summary import print_summary
from dev_workflow.tooling.hooks import initialize_hooks
from dev_workflow.tooling.packages import install_dependencies, resolve_package_manager
from dev_workflow.tooling.preconditions import check_prerequisites
from dev_workflow.tooling.protocols import CommandRunner
from dev_workflow.tooling.runner import SubprocessRunner
from dev_workflow.utils.output import console, print_info


@dataclass
class SetupReport:
    """Everything a setup run did.

    Attributes:
        package_manager: Manager used (or detected, when installation was skipped)
        dependencies_installed: Whether the install step ran
        hooks_initialized: Whether husky init succeeded; None if it was skipped
        files: Per-template copy results
        manifest: Result of the package.json patch
    """

    package_manager: PackageManager
    dependencies_installed: bool = False
    hooks_initialized: Optional[bool] = None
    files: list[MaterializedFile] = field(default_factory=list)
    manifest: ManifestPatchResult = field(default_factory=ManifestPatchResult)


def create_context(
    project_root: Path,
    runner: Optional[CommandRunner] = None,
    config: Optional[WorkflowConfig] = None,
) -> ProjectContext:
    """Build the context for a project root.

    Args:
        project_root: Root directory of the target project
        runner: Command runner, a SubprocessRunner by default
        config: Configuration, loaded from the standard locations by default

    Raises:
        ConfigError: If the configuration cannot be loaded
    """
    root = Path(project_root).resolve()
    return ProjectContext(
        root=root,
        config=config if config is not None else load_config(root),
        runner=runner if runner is not None else SubprocessRunner(),
    )


def run_setup(context: ProjectContext) -> SetupReport:
    """Run every setup step against the project.

    Args:
        context: Project context

    Returns:
        SetupReport describing the run

    Raises:
        SetupError: On the first fatal step failure
        OSError: If copying templates or writing package.json fails
    """
    settings = context.config.settings

    check_prerequisites(context)
    console.print()

    if settings.install_dependencies:
        report = SetupReport(
            package_manager=install_dependencies(context),
            dependencies_installed=True,
        )
    else:
        print_info("Skipping dependency installation")
        report = SetupReport(package_manager=resolve_package_manager(context))
    console.print()

    if settings.initialize_hooks:
        report.hooks_initialized = initialize_hooks(context)
    else:
        print_info("Skipping husky initialization")
    console.print()

    report.files = materialize_templates(context)
    console.print()

    report.manifest = patch_manifest(context)
    console.print()

    print_summary(report)
    return report
