"""Core setup models: project context, templates and manifest."""

from dev_workflow.core.context import ProjectContext
from dev_workflow.core.manifest import ManifestPatchResult, PackageManifest, patch_manifest
from dev_workflow.core.materialize import (
    TEMPLATE_FILES,
    CopyAction,
    MaterializedFile,
    TemplateFile,
    materialize_templates,
)

__all__ = [
    "CopyAction",
    "ManifestPatchResult",
    "MaterializedFile",
    "PackageManifest",
    "ProjectContext",
    "TEMPLATE_FILES",
    "TemplateFile",
    "materialize_templates",
    "patch_manifest",
]
