"""External tool integration: git, package managers and husky."""

from dev_workflow.tooling.protocols import CommandResult, CommandRunner
from dev_workflow.tooling.runner import SubprocessRunner

__all__ = ["CommandResult", "CommandRunner", "SubprocessRunner"]
