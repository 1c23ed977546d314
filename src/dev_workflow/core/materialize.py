"""Copies the bundled templates into the target project.

Hook scripts under ``.husky/`` are always overwritten and made executable.
Every other file is written only when it does not exist yet, so local
edits to configuration files survive repeated runs.
"""

import shutil
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from dev_workflow.core.context import ProjectContext
from dev_workflow.utils.output import print_step, print_success, print_warning

HOOKS_DIR = ".husky"
HOOK_MODE = 0o755


class CopyAction(str, Enum):
    """What happened to a destination file."""

    CREATED = "created"
    UPDATED = "updated"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class TemplateFile:
    """A bundled template and where it lands in the project.

    Attributes:
        source: Path relative to the templates directory
        destination: Path relative to the project root
    """

    source: str
    destination: str

    @property
    def is_hook(self) -> bool:
        return self.destination.startswith(f"{HOOKS_DIR}/")


@dataclass
class MaterializedFile:
    """Result of materializing one template."""

    destination: str
    action: CopyAction


TEMPLATE_FILES = (
    TemplateFile("lintstagedrc.js", ".lintstagedrc.js"),
    TemplateFile("commitlint.config.js", "commitlint.config.js"),
    TemplateFile("nvmrc", ".nvmrc"),
    TemplateFile("vscode/settings.json", ".vscode/settings.json"),
    TemplateFile("vscode/extensions.json", ".vscode/extensions.json"),
    TemplateFile("husky/pre-commit", ".husky/pre-commit"),
    TemplateFile("husky/pre-push", ".husky/pre-push"),
    TemplateFile("husky/commit-msg", ".husky/commit-msg"),
)


def materialize_file(
    template: TemplateFile, templates_dir: Path, project_root: Path
) -> CopyAction:
    """Copy one template into the project according to its overwrite policy.

    Args:
        template: The template to copy
        templates_dir: Directory holding the bundled templates
        project_root: Root of the target project

    Returns:
        The action taken for the destination

    Raises:
        OSError: If a directory cannot be created or the copy fails
    """
    src_path = templates_dir / template.source
    dest_path = project_root / template.destination

    dest_path.parent.mkdir(parents=True, exist_ok=True)

    existed = dest_path.exists() or dest_path.is_symlink()
    if existed and not template.is_hook:
        return CopyAction.SKIPPED

    # Replace a symlinked hook instead of writing through to its target
    if dest_path.is_symlink():
        dest_path.unlink()

    shutil.copyfile(src_path, dest_path)

    if template.is_hook:
        dest_path.chmod(HOOK_MODE)

    return CopyAction.UPDATED if existed else CopyAction.CREATED


def materialize_templates(context: ProjectContext) -> list[MaterializedFile]:
    """Copy every template in TEMPLATE_FILES into the project.

    Files already copied stay in place if a later copy fails.

    Returns:
        One MaterializedFile per template, in TEMPLATE_FILES order
    """
    print_step("Copying configuration files...")

    results = []
    for template in TEMPLATE_FILES:
        action = materialize_file(template, context.templates_dir, context.root)
        results.append(MaterializedFile(template.destination, action))

        if action is CopyAction.SKIPPED:
            print_warning(f"{template.destination} already exists, skipping...")
        else:
            print_success(f"{action.value.capitalize()} {template.destination}")

    print_success("Configuration files copied")
    return results
