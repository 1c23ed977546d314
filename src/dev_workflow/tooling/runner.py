"""Command runner backed by subprocess."""

import subprocess
from pathlib import Path

from dev_workflow.tooling.protocols import CommandResult

COMMAND_NOT_EXECUTABLE = 126
COMMAND_NOT_FOUND = 127


class SubprocessRunner:
    """Runs external tools with subprocess.run and reports their exit status.

    Failures to start the process are reported with the shell's codes:
    127 for a missing executable, 126 for one that cannot be executed.
    Callers only ever inspect the return code.
    """

    def run(self, args: list[str], cwd: Path, capture: bool = True) -> CommandResult:
        try:
            completed = subprocess.run(
                args,
                cwd=cwd,
                capture_output=capture,
                text=True,
                check=False,
            )
        except FileNotFoundError as e:
            return CommandResult(args=list(args), returncode=COMMAND_NOT_FOUND, stderr=str(e))
        except OSError as e:
            return CommandResult(
                args=list(args), returncode=COMMAND_NOT_EXECUTABLE, stderr=str(e)
            )

        return CommandResult(
            args=list(args),
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )
