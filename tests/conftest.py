"""Shared pytest fixtures for dev-workflow tests."""

import json
from pathlib import Path

import pytest

from dev_workflow.config.schema import WorkflowConfig
from dev_workflow.core.context import ProjectContext
from dev_workflow.tooling.protocols import CommandResult


class FakeRunner:
    """Command runner that records invocations instead of running them.

    ``git rev-parse --git-dir`` answers ".git" (the test decides whether that
    directory exists). Every other command exits with the status configured
    in ``returncodes`` for its program name, 0 by default.
    """

    def __init__(self, returncodes=None):
        self.calls = []
        self.returncodes = dict(returncodes or {})

    def run(self, args, cwd, capture=True):
        self.calls.append({"args": list(args), "cwd": Path(cwd), "capture": capture})
        returncode = self.returncodes.get(args[0], 0)
        stdout = ".git\n" if args[:2] == ["git", "rev-parse"] and returncode == 0 else ""
        return CommandResult(args=list(args), returncode=returncode, stdout=stdout)

    def commands(self):
        return [call["args"] for call in self.calls]


@pytest.fixture
def fake_runner():
    """Provide a recording command runner."""
    return FakeRunner()


@pytest.fixture
def project_dir(tmp_path):
    """Create a git project containing only a minimal package.json."""
    root = tmp_path / "project"
    root.mkdir()
    (root / ".git").mkdir()
    (root / "package.json").write_text(json.dumps({"name": "x"}))
    return root


@pytest.fixture
def default_config():
    """Provide the built-in configuration."""
    return WorkflowConfig(version="1.0")


@pytest.fixture
def context(project_dir, fake_runner, default_config):
    """Provide a project context backed by the fake runner."""
    return ProjectContext(root=project_dir, config=default_config, runner=fake_runner)


@pytest.fixture
def isolated_env(tmp_path, monkeypatch):
    """Isolate HOME and the dev-workflow environment variables."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    for name in (
        "DEV_WORKFLOW_PACKAGE_MANAGER",
        "DEV_WORKFLOW_SKIP_INSTALL",
        "DEV_WORKFLOW_SKIP_HOOKS",
    ):
        monkeypatch.delenv(name, raising=False)
    return home_dir


@pytest.fixture
def runner_factory():
    """Provide the FakeRunner class for tests that need custom exit codes."""
    return FakeRunner
