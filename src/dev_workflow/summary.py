"""Summary printed at the end of a successful run."""

from typing import TYPE_CHECKING

from rich.table import Table

from dev_workflow.config.schema import PackageManager
from dev_workflow.core.materialize import CopyAction
from dev_workflow.utils.output import console

if TYPE_CHECKING:
    from dev_workflow.orchestrator import SetupReport

COMMIT_COMMANDS = {
    PackageManager.NPM: "npm run commit",
    PackageManager.PNPM: "pnpm commit",
    PackageManager.YARN: "yarn commit",
}

ACTION_STYLES = {
    CopyAction.CREATED: "green",
    CopyAction.UPDATED: "cyan",
    CopyAction.SKIPPED: "yellow",
}

CONFIGURED = [
    "Git hooks (pre-commit, pre-push, commit-msg)",
    "Lint-staged for fast linting",
    "Commitizen for consistent commit messages",
    "CommitLint for conventional commits",
    "VSCode workspace settings",
    "Node.js version consistency (.nvmrc)",
]


def build_files_table(report: "SetupReport") -> Table:
    """Build a table of the per-file actions."""
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("File", style="green")
    table.add_column("Action")

    for result in report.files:
        style = ACTION_STYLES[result.action]
        table.add_row(result.destination, f"[{style}]{result.action.value}[/{style}]")

    return table


def print_summary(report: "SetupReport") -> None:
    """Print what was configured and what to do next."""
    console.print("[bold green]Development workflow setup complete![/bold green]")
    console.print()

    if report.files:
        console.print(build_files_table(report))
        console.print()

    console.print("[blue]What was configured:[/blue]")
    for item in CONFIGURED:
        console.print(f"  • {item}")

    commit_command = COMMIT_COMMANDS[report.package_manager]
    console.print()
    console.print("[blue]Usage:[/blue]")
    console.print(f"  • Use [cyan]{commit_command}[/cyan] for guided commits")
    console.print("  • Git hooks will automatically run on commit/push")
    console.print("  • VSCode will use optimized settings for the project")

    console.print()
    console.print("[blue]Next steps:[/blue]")
    console.print("  • Make your first commit to test the setup")
    console.print("  • Customize .lintstagedrc.js if needed")
    console.print("  • Adjust .vscode/settings.json for your preferences")
