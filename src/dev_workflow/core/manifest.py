"""package.json loading and non-destructive patching."""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from dev_workflow.core.context import ProjectContext
from dev_workflow.errors import ManifestParseError
from dev_workflow.utils.output import print_info, print_step, print_success

SCRIPTS_TO_ADD = {
    "prepare": "husky",
    "commit": "cz",
}
COMMITIZEN_CONFIG = {"path": "cz-conventional-changelog"}
MODULE_TYPE = "module"


@dataclass
class ManifestPatchResult:
    """Outcome of patching package.json.

    Attributes:
        added: Dotted paths of the keys that were added
        written: Whether the file was written back
    """

    added: list[str] = field(default_factory=list)
    written: bool = False

    @property
    def changed(self) -> bool:
        return bool(self.added)


class PackageManifest:
    """Reads and writes a project's package.json.

    The manifest is loaded once, patched in memory and saved only by an
    explicit call to save(). Key order is preserved, new keys are appended.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self.data: dict[str, Any] = {}

    def load(self) -> dict[str, Any]:
        """Load the manifest from disk.

        Returns:
            The manifest data as a dictionary

        Raises:
            ManifestParseError: If the file is not a JSON object
            OSError: If the file cannot be read
        """
        with open(self.path, "r", encoding="utf-8-sig") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ManifestParseError(f"Invalid JSON in {self.path.name}: {e}") from e

        if not isinstance(data, dict):
            raise ManifestParseError(f"{self.path.name} must contain a JSON object")

        self.data = data
        return self.data

    def save(self) -> None:
        """Write the manifest with 2-space indentation and a trailing newline."""
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(self.data, f, indent=2, ensure_ascii=False)
            f.write("\n")

    def _mapping(self, key: str) -> dict[str, Any]:
        value = self.data.get(key)
        if value is None:
            return {}
        if not isinstance(value, dict):
            raise ManifestParseError(
                f"'{key}' in {self.path.name} must be an object, got {type(value).__name__}"
            )
        return value

    def patch(self) -> list[str]:
        """Add the workflow keys that are missing, never overwriting any.

        Returns:
            Dotted paths of the keys that were added

        Raises:
            ManifestParseError: If scripts or config is not an object
        """
        # Validate both mappings before mutating anything
        scripts = self._mapping("scripts")
        config = self._mapping("config")

        added = []

        for name, command in SCRIPTS_TO_ADD.items():
            if name not in scripts:
                scripts[name] = command
                added.append(f"scripts.{name}")
        if self.data.get("scripts") is None:
            self.data["scripts"] = scripts

        if "commitizen" not in config:
            config["commitizen"] = dict(COMMITIZEN_CONFIG)
            added.append("config.commitizen")
        if self.data.get("config") is None:
            self.data["config"] = config

        if "type" not in self.data:
            self.data["type"] = MODULE_TYPE
            added.append("type")

        return added


def patch_manifest(context: ProjectContext) -> ManifestPatchResult:
    """Patch the project's package.json, writing it only if a key was added.

    Raises:
        ManifestParseError: If package.json is malformed
        OSError: If package.json cannot be read or written
    """
    print_step("Updating package.json...")

    manifest = PackageManifest(context.manifest_path)
    manifest.load()

    result = ManifestPatchResult(added=manifest.patch())

    for key in result.added:
        print_success(f"Added {key}")

    if result.changed:
        manifest.save()
        result.written = True
        print_success("package.json updated")
    else:
        print_info("package.json already configured")

    return result
