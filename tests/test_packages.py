"""Tests for package manager detection and dependency installation."""

import pytest

from dev_workflow.config.defaults import DEFAULT_DEPENDENCIES
from dev_workflow.config.schema import PackageManager, SettingsConfig, WorkflowConfig
from dev_workflow.core.context import ProjectContext
from dev_workflow.errors import DelegatedProcessError
from dev_workflow.tooling.packages import (
    build_install_command,
    detect_package_manager,
    install_dependencies,
    resolve_package_manager,
)


class TestDetectPackageManager:
    """Test lock file based detection."""

    def test_no_lock_file_defaults_to_npm(self, tmp_path):
        assert detect_package_manager(tmp_path) == PackageManager.NPM

    def test_pnpm_lock(self, tmp_path):
        (tmp_path / "pnpm-lock.yaml").write_text("")
        assert detect_package_manager(tmp_path) == PackageManager.PNPM

    def test_yarn_lock(self, tmp_path):
        (tmp_path / "yarn.lock").write_text("")
        assert detect_package_manager(tmp_path) == PackageManager.YARN

    def test_npm_lock(self, tmp_path):
        (tmp_path / "package-lock.json").write_text("{}")
        assert detect_package_manager(tmp_path) == PackageManager.NPM

    def test_pnpm_wins_over_yarn(self, tmp_path):
        (tmp_path / "yarn.lock").write_text("")
        (tmp_path / "pnpm-lock.yaml").write_text("")
        assert detect_package_manager(tmp_path) == PackageManager.PNPM

    def test_detection_has_no_side_effects(self, tmp_path):
        detect_package_manager(tmp_path)
        assert list(tmp_path.iterdir()) == []


class TestBuildInstallCommand:
    """Test install command construction."""

    @pytest.mark.parametrize(
        "manager,prefix",
        [
            (PackageManager.NPM, ["npm", "install", "--save-dev"]),
            (PackageManager.PNPM, ["pnpm", "add", "-D"]),
            (PackageManager.YARN, ["yarn", "add", "--dev"]),
        ],
    )
    def test_prefix(self, manager, prefix):
        command = build_install_command(manager, ["husky@^9.1.7", "lint-staged@^16.1.2"])
        assert command == [*prefix, "husky@^9.1.7", "lint-staged@^16.1.2"]


class TestResolvePackageManager:
    """Test configured override versus detection."""

    def test_configured_manager_wins(self, project_dir, fake_runner):
        (project_dir / "yarn.lock").write_text("")
        config = WorkflowConfig(
            version="1.0", settings=SettingsConfig(package_manager=PackageManager.PNPM)
        )
        context = ProjectContext(root=project_dir, config=config, runner=fake_runner)

        assert resolve_package_manager(context) == PackageManager.PNPM

    def test_detected_when_unset(self, context, project_dir):
        (project_dir / "yarn.lock").write_text("")
        assert resolve_package_manager(context) == PackageManager.YARN


class TestInstallDependencies:
    """Test the installation step."""

    def test_installs_default_dependencies_with_npm(self, context, fake_runner, project_dir):
        manager = install_dependencies(context)

        assert manager == PackageManager.NPM
        assert fake_runner.calls == [
            {
                "args": ["npm", "install", "--save-dev", *DEFAULT_DEPENDENCIES],
                "cwd": project_dir,
                "capture": False,
            }
        ]

    def test_uses_pnpm_when_locked(self, context, fake_runner, project_dir):
        (project_dir / "pnpm-lock.yaml").write_text("")

        assert install_dependencies(context) == PackageManager.PNPM
        assert fake_runner.commands()[0][:3] == ["pnpm", "add", "-D"]

    def test_failure_is_fatal(self, project_dir, default_config, runner_factory):
        runner = runner_factory(returncodes={"npm": 1})
        context = ProjectContext(root=project_dir, config=default_config, runner=runner)

        with pytest.raises(DelegatedProcessError, match="Failed to install dependencies") as exc_info:
            install_dependencies(context)

        assert exc_info.value.returncode == 1
        assert exc_info.value.command[0] == "npm"

    def test_missing_executable_is_fatal(self, project_dir, default_config, runner_factory):
        runner = runner_factory(returncodes={"npm": 127})
        context = ProjectContext(root=project_dir, config=default_config, runner=runner)

        with pytest.raises(DelegatedProcessError):
            install_dependencies(context)
