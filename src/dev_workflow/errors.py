"""Exceptions raised by setup steps.

Every fatal condition derives from SetupError so the CLI can report it
and exit non-zero. OSError from file operations is not wrapped.
"""


class SetupError(Exception):
    """Base class for fatal setup errors."""


class PreconditionError(SetupError):
    """The project is not a git repository or has no package.json."""


class DelegatedProcessError(SetupError):
    """An external tool (package manager, hooks manager) failed."""

    def __init__(self, message: str, command: list[str], returncode: int):
        super().__init__(message)
        self.command = command
        self.returncode = returncode


class ManifestParseError(SetupError):
    """package.json could not be parsed as a JSON object."""


class ConfigError(SetupError):
    """The setup configuration file is invalid."""
