"""Abstract interface for running external tools."""

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol


@dataclass
class CommandResult:
    """Outcome of an external command.

    Attributes:
        args: The command that was run
        returncode: Process exit status (127 when the executable is missing)
        stdout: Captured standard output, empty when not captured
        stderr: Captured standard error, empty when not captured
    """

    args: list[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class CommandRunner(Protocol):
    """Abstract interface for running external tools."""

    def run(self, args: list[str], cwd: Path, capture: bool = True) -> CommandResult:
        """Run a command and wait for it to exit.

        Args:
            args: Program and arguments
            cwd: Working directory for the process
            capture: Capture output instead of streaming it to the terminal

        Returns:
            CommandResult describing the exit status and output
        """
        ...
