"""Hook infrastructure initialization through husky."""

from dev_workflow.core.context import ProjectContext
from dev_workflow.utils.output import print_step, print_success, print_warning

HUSKY_INIT = ["npx", "husky", "init"]


def initialize_hooks(context: ProjectContext) -> bool:
    """Run ``npx husky init`` in the project root.

    Failure is not fatal: husky may already be initialized from an earlier
    run, and re-initialization is allowed to fail.

    Returns:
        True if husky exited successfully, False otherwise
    """
    print_step("Initializing Husky...")

    result = context.runner.run(HUSKY_INIT, cwd=context.root, capture=False)
    if not result.ok:
        print_warning(
            f"Husky may already be initialized (exit status {result.returncode})"
        )
        return False

    print_success("Husky initialized")
    return True
