"""Tests for run_bootstrap against fake gateways."""

from pathlib import Path

import pytest

from hookstrap.core.artifacts import render_pre_commit_config, render_yamllint_config
from hookstrap.core.bootstrap import run_bootstrap
from hookstrap.core.context import HookstrapContext
from hookstrap.core.propagation import PropagationError
from hookstrap.gateway.command_runner.abc import CommandFailedError
from hookstrap.gateway.command_runner.fake import FakeCommandRunner
from hookstrap.gateway.releases.fake import FakeReleaseClient

EXPORT_LINE = "export PATH=$HOME/.npm-global/bin:$PATH"


@pytest.fixture
def home(tmp_path: Path) -> Path:
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture
def project(tmp_path: Path) -> Path:
    path = tmp_path / "project"
    (path / ".git").mkdir(parents=True)
    return path


def test_runs_commands_in_order(home: Path, project: Path) -> None:
    runner = FakeCommandRunner.create_all_present()
    ctx = HookstrapContext.for_test(cwd=project, home=home, runner=runner)

    run_bootstrap(ctx)

    assert runner.commands_run == [
        f"python3 -m venv {home / '.venv'}",
        "pip install --upgrade pip",
        "pip install pre-commit",
        "pip install --upgrade pyupgrade autopep8 flake8 cpplint yamllint",
        "npm config get prefix",
        f"npm config set prefix {home / '.npm-global'}",
        "npm install -g eslint stylelint htmlhint",
        "pre-commit install",
        "pre-commit install --install-hooks",
        "pre-commit validate-config",
    ]


def test_missing_tools_are_installed_first(home: Path, project: Path) -> None:
    runner = FakeCommandRunner(missing={"go version"}, failing=None, outputs=None)
    ctx = HookstrapContext.for_test(cwd=project, home=home, runner=runner)

    summary = run_bootstrap(ctx)

    assert summary.installed_tools == ("Go",)
    assert runner.commands_run[:2] == ["apt-get update", "apt-get install -y golang"]


def test_workspace_and_npm_bin_are_on_path_for_later_commands(home: Path, project: Path) -> None:
    runner = FakeCommandRunner.create_all_present()
    ctx = HookstrapContext.for_test(cwd=project, home=home, runner=runner)

    run_bootstrap(ctx)

    calls = {" ".join(call.cmd): call for call in runner.run_calls}
    pip_env = calls["pip install pre-commit"].env
    assert pip_env is not None
    assert pip_env["VIRTUAL_ENV"] == str(home / ".venv")
    assert pip_env["PATH"].startswith(str(home / ".venv" / "bin"))

    npm_env = calls["npm install -g eslint stylelint htmlhint"].env
    assert npm_env is not None
    assert npm_env["PATH"].startswith(str(home / ".npm-global" / "bin"))

    assert calls["pre-commit validate-config"].cwd == project


def test_writes_artifacts(home: Path, project: Path) -> None:
    ctx = HookstrapContext.for_test(cwd=project, home=home)

    run_bootstrap(ctx)

    assert (project / ".pre-commit-config.yaml").read_text(encoding="utf-8") == (
        render_pre_commit_config()
    )
    assert (project / ".yamllint").read_text(encoding="utf-8") == render_yamllint_config()
    assert sorted(p.name for p in (project / "custom_hooks").iterdir()) == [
        "autocorrect.py",
        "check_large_files.py",
        "custom_linter.py",
    ]
    assert not (project / ".pre-commit-config.yaml").is_symlink()


def test_rerun_is_idempotent(home: Path, project: Path) -> None:
    ctx = HookstrapContext.for_test(cwd=project, home=home)

    run_bootstrap(ctx)
    first_config = (project / ".pre-commit-config.yaml").read_bytes()
    first_lint = (project / ".yamllint").read_bytes()
    run_bootstrap(ctx)
    run_bootstrap(ctx)

    assert (project / ".pre-commit-config.yaml").read_bytes() == first_config
    assert (project / ".yamllint").read_bytes() == first_lint

    profile = (home / ".bashrc").read_text(encoding="utf-8")
    assert profile.count(EXPORT_LINE) == 1
    assert profile.count("alias checkstyle=") == 1


def test_alias_points_at_downloaded_jar(home: Path, project: Path) -> None:
    ctx = HookstrapContext.for_test(cwd=project, home=home)

    summary = run_bootstrap(ctx)

    jar = home / ".local" / "bin" / "checkstyle-10.21.4-all.jar"
    assert summary.checkstyle.jar_path == jar
    assert summary.checkstyle.downloaded is True
    assert f"alias checkstyle='java -jar {jar}'" in (home / ".bashrc").read_text(encoding="utf-8")


def test_existing_jar_is_not_downloaded_again(home: Path, project: Path) -> None:
    jar = home / ".local" / "bin" / "checkstyle-10.21.4-all.jar"
    jar.parent.mkdir(parents=True)
    jar.write_bytes(b"cached")
    releases = FakeReleaseClient(
        latest_tags={"checkstyle/checkstyle": "checkstyle-10.21.4"}, content=b"new"
    )
    ctx = HookstrapContext.for_test(cwd=project, home=home, releases=releases)

    summary = run_bootstrap(ctx)

    assert summary.checkstyle.downloaded is False
    assert releases.downloads == []
    assert jar.read_bytes() == b"cached"


def test_nested_repos_are_linked(home: Path, project: Path) -> None:
    (project / "a" / ".git").mkdir(parents=True)
    (project / "a" / "b" / ".git").mkdir(parents=True)
    ctx = HookstrapContext.for_test(cwd=project, home=home)

    summary = run_bootstrap(ctx)

    root_config = (project / ".pre-commit-config.yaml").resolve()
    assert [link.repo_dir for link in summary.links] == [project / "a", project / "a" / "b"]
    for repo_dir in (project / "a", project / "a" / "b"):
        link = repo_dir / ".pre-commit-config.yaml"
        assert link.is_symlink()
        assert link.resolve() == root_config


def test_failing_validation_stops_the_run(home: Path, project: Path) -> None:
    (project / "a" / ".git").mkdir(parents=True)
    runner = FakeCommandRunner(
        missing=None, failing={"pre-commit validate-config": 1}, outputs=None
    )
    ctx = HookstrapContext.for_test(cwd=project, home=home, runner=runner)

    with pytest.raises(CommandFailedError) as exc_info:
        run_bootstrap(ctx)

    assert exc_info.value.returncode == 1
    # Completed steps stay in place, later ones never ran
    assert (project / ".pre-commit-config.yaml").exists()
    assert (project / "custom_hooks" / "autocorrect.py").exists()
    assert not (project / ".yamllint").exists()
    assert not (project / "a" / ".pre-commit-config.yaml").exists()


def test_failing_install_stops_before_workspace(home: Path, project: Path) -> None:
    runner = FakeCommandRunner(
        missing={"pip --version"}, failing={"apt-get install -y python3-pip": 100}, outputs=None
    )
    ctx = HookstrapContext.for_test(cwd=project, home=home, runner=runner)

    with pytest.raises(CommandFailedError):
        run_bootstrap(ctx)

    assert runner.commands_run == ["apt-get update", "apt-get install -y python3-pip"]
    assert not (project / ".pre-commit-config.yaml").exists()


def test_dry_run_writes_nothing(home: Path, project: Path) -> None:
    (project / "a" / ".git").mkdir(parents=True)
    runner = FakeCommandRunner.create_all_present()
    ctx = HookstrapContext.for_test(cwd=project, home=home, runner=runner, dry_run=True)

    run_bootstrap(ctx)

    assert runner.commands_run == []
    assert not (home / ".local").exists()
    assert sorted(p.name for p in project.iterdir()) == [".git", "a"]
    assert not (home / ".bashrc").exists()
    assert not (home / ".npm-global").exists()


def test_dry_run_reports_profile_and_link_plans_without_claims(
    home: Path, project: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    (project / "a" / ".git").mkdir(parents=True)
    ctx = HookstrapContext.for_test(cwd=project, home=home, dry_run=True)

    run_bootstrap(ctx)

    err = capsys.readouterr().err
    assert "Alias for checkstyle already exists." not in err
    assert "[DRY RUN] Would ensure \"alias checkstyle=" in err
    assert f"[DRY RUN] Would ensure '{EXPORT_LINE}' in {home / '.bashrc'}" in err
    assert f"Would link .pre-commit-config.yaml into {project / 'a'}" in err
    assert f"Would link .pre-commit-config.yaml into {project}\n" not in err


def test_directory_at_nested_config_path_stops_the_run(home: Path, project: Path) -> None:
    (project / "a" / ".git").mkdir(parents=True)
    (project / "a" / ".pre-commit-config.yaml").mkdir()
    ctx = HookstrapContext.for_test(cwd=project, home=home)

    with pytest.raises(PropagationError, match="is a directory"):
        run_bootstrap(ctx)

    assert (project / "a" / ".pre-commit-config.yaml").is_dir()
