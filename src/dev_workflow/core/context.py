"""Project context threaded through every setup step."""

from dataclasses import dataclass
from pathlib import Path

from dev_workflow.config.schema import WorkflowConfig
from dev_workflow.tooling.protocols import CommandRunner

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
MANIFEST_FILENAME = "package.json"


@dataclass
class ProjectContext:
    """Context for a setup run.

    Attributes:
        root: Root directory of the target project
        config: Validated setup configuration
        runner: Runner used for every external command
        templates_dir: Directory holding the bundled templates
    """

    root: Path
    config: WorkflowConfig
    runner: CommandRunner
    templates_dir: Path = TEMPLATES_DIR

    @property
    def manifest_path(self) -> Path:
        return self.root / MANIFEST_FILENAME
