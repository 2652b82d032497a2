"""The isolated Python workspace (virtual environment) the linters live in."""

import os
from collections.abc import Mapping
from pathlib import Path

from hookstrap.gateway.command_runner.abc import CommandRunner


def workspace_bin_dir(venv_dir: Path) -> Path:
    return venv_dir / "bin"


def ensure_workspace(
    venv_dir: Path, *, runner: CommandRunner, env: Mapping[str, str] | None
) -> bool:
    """Create the virtual environment if its directory does not exist.

    Returns:
        True if the environment was created
    """
    if venv_dir.is_dir():
        return False

    runner.run(
        ["python3", "-m", "venv", str(venv_dir)],
        operation_context=f"create virtual environment in {venv_dir}",
        cwd=None,
        env=env,
    )
    return True


def prepend_to_path(env: Mapping[str, str], directory: Path) -> dict[str, str]:
    """Return a copy of ``env`` with ``directory`` first on PATH."""
    activated = dict(env)
    current = activated.get("PATH", "")
    activated["PATH"] = f"{directory}{os.pathsep}{current}" if current else str(directory)
    return activated


def activate_workspace(venv_dir: Path, env: Mapping[str, str]) -> dict[str, str]:
    """Return the environment ``source <venv>/bin/activate`` would produce."""
    activated = prepend_to_path(env, workspace_bin_dir(venv_dir))
    activated["VIRTUAL_ENV"] = str(venv_dir)
    activated.pop("PYTHONHOME", None)
    return activated


def install_workspace_packages(
    linters: tuple[str, ...],
    *,
    runner: CommandRunner,
    env: Mapping[str, str],
) -> None:
    """Upgrade pip, install pre-commit, then the Python linters, in that order."""
    runner.run(
        ["pip", "install", "--upgrade", "pip"],
        operation_context="upgrade pip",
        cwd=None,
        env=env,
    )
    runner.run(
        ["pip", "install", "pre-commit"],
        operation_context="install pre-commit",
        cwd=None,
        env=env,
    )
    runner.run(
        ["pip", "install", "--upgrade", *linters],
        operation_context="install Python linters",
        cwd=None,
        env=env,
    )
