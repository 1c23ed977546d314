"""Checks that must pass before the project is touched."""

from pathlib import Path

from dev_workflow.core.context import ProjectContext
from dev_workflow.errors import PreconditionError
from dev_workflow.utils.output import print_step, print_success

GIT_DIR_COMMAND = ["git", "rev-parse", "--git-dir"]


def is_git_repository(context: ProjectContext) -> bool:
    """Check whether the project root is inside a git repository.

    The check is delegated to ``git rev-parse --git-dir``. A non-zero exit,
    a missing git executable or a reported directory that does not exist
    all count as "not a repository".
    """
    result = context.runner.run(GIT_DIR_COMMAND, cwd=context.root)
    if not result.ok:
        return False

    git_dir = result.stdout.strip()
    if not git_dir:
        return False

    git_path = Path(git_dir)
    if not git_path.is_absolute():
        git_path = context.root / git_path
    return git_path.is_dir()


def check_prerequisites(context: ProjectContext) -> None:
    """Verify the project is a git repository with a package.json.

    Raises:
        PreconditionError: If either condition is not met
    """
    print_step("Checking prerequisites...")

    if not is_git_repository(context):
        raise PreconditionError('Not in a git repository. Run "git init" first.')

    if not context.manifest_path.is_file():
        raise PreconditionError('package.json not found. Run "npm init" first.')

    print_success("Prerequisites check passed")
