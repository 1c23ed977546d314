"""CLI application entry point."""

from pathlib import Path

import typer

from dev_workflow.errors import SetupError
from dev_workflow.orchestrator import create_context, run_setup
from dev_workflow.tooling.runner import SubprocessRunner
from dev_workflow.utils.output import console, print_error

app = typer.Typer(
    name="setup-dev-workflow",
    help="Set up git hooks, linting and commit standards in the current project",
    add_completion=False,
)


@app.command()
def setup():
    """Configure the development workflow for the project in the current directory.

    Installs husky, lint-staged, commitlint and commitizen, copies their
    configuration files and adds the matching scripts to package.json.
    """
    console.print("[blue]Setting up development workflow configuration...[/blue]")
    console.print()

    try:
        context = create_context(Path.cwd(), runner=SubprocessRunner())
        run_setup(context)
    except (SetupError, OSError) as e:
        print_error(f"Setup failed: {e}")
        raise typer.Exit(1)
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
