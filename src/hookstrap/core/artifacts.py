"""Configuration documents and helper hooks written into the working directory.

Every artifact has constant content, so rewriting it on each run is idempotent.
"""

import os
import stat
from functools import cache
from pathlib import Path
from typing import Any

import yaml

PRE_COMMIT_CONFIG_FILENAME = ".pre-commit-config.yaml"
YAMLLINT_CONFIG_FILENAME = ".yamllint"
CUSTOM_HOOKS_DIRNAME = "custom_hooks"

# Shipped in hook_templates/, written to custom_hooks/
HELPER_SCRIPT_NAMES = ("custom_linter.py", "check_large_files.py", "autocorrect.py")

_EXECUTABLE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH

_COMMIT_STAGE = ["pre-commit"]


@cache
def _hook_templates_dir() -> Path:
    """Return path to the helper hook templates (deferred, cached)."""
    return Path(__file__).parent.parent / "hook_templates"


def _hook(hook_id: str, **fields: Any) -> dict[str, Any]:
    return {"id": hook_id, **fields}


def build_pre_commit_config() -> dict[str, Any]:
    """Build the hook-runner configuration document."""
    return {
        "repos": [
            {
                "repo": "https://github.com/pre-commit/pre-commit-hooks",
                "rev": "v5.0.0",
                "hooks": [
                    _hook("trailing-whitespace"),
                    _hook("end-of-file-fixer", name="Ensure files end with a newline"),
                    _hook("check-yaml"),
                    _hook("debug-statements"),
                    _hook(
                        "double-quote-string-fixer",
                        name="Enforce double quotes for strings",
                    ),
                    _hook("name-tests-test"),
                    _hook("requirements-txt-fixer"),
                    _hook("check-docstring-first"),
                    _hook("check-added-large-files", args=["--maxkb=20000"]),
                    _hook("check-json"),
                    _hook("detect-private-key"),
                    _hook("sort-simple-yaml", stages=_COMMIT_STAGE),
                ],
            },
            {
                "repo": "https://github.com/asottile/setup-cfg-fmt",
                "rev": "v2.8.0",
                "hooks": [_hook("setup-cfg-fmt", stages=_COMMIT_STAGE)],
            },
            {
                "repo": "https://github.com/asottile/reorder-python-imports",
                "rev": "v3.14.0",
                "hooks": [
                    _hook(
                        "reorder-python-imports",
                        args=[
                            "--py39-plus",
                            "--add-import",
                            "from __future__ import annotations",
                        ],
                        stages=_COMMIT_STAGE,
                    )
                ],
            },
            {
                "repo": "https://github.com/asottile/add-trailing-comma",
                "rev": "v3.1.0",
                "hooks": [_hook("add-trailing-comma", stages=_COMMIT_STAGE)],
            },
            {
                "repo": "https://github.com/asottile/pyupgrade",
                "rev": "v3.19.1",
                "hooks": [_hook("pyupgrade", args=["--py39-plus"], stages=_COMMIT_STAGE)],
            },
            {
                "repo": "https://github.com/hhatto/autopep8",
                "rev": "v2.3.2",
                "hooks": [_hook("autopep8", stages=_COMMIT_STAGE)],
            },
            {
                "repo": "https://github.com/PyCQA/flake8",
                "rev": "7.2.0",
                "hooks": [_hook("flake8", stages=_COMMIT_STAGE, pass_filenames=False)],
            },
            {
                "repo": "https://github.com/golangci/golangci-lint",
                "rev": "v2.1.2",
                "hooks": [
                    _hook(
                        "golangci-lint",
                        name="Go linter",
                        files=r"\.go$",
                        types=["file"],
                        stages=_COMMIT_STAGE,
                    )
                ],
            },
            {
                "repo": "https://github.com/bridgecrewio/checkov",
                "rev": "3.2.406",
                "hooks": [
                    _hook(
                        "checkov",
                        name="Checkov Security Scanner",
                        entry="checkov -d .",
                        language="python",
                        pass_filenames=False,
                        stages=_COMMIT_STAGE,
                    )
                ],
            },
            {
                "repo": "https://github.com/eslint/eslint.git",
                "rev": "v9.24.0",
                "hooks": [
                    _hook("eslint", args=["."], pass_filenames=True, stages=_COMMIT_STAGE)
                ],
            },
            {
                "repo": "local",
                "hooks": [
                    _hook(
                        "custom-python-linter",
                        name="Custom Python Linter",
                        entry=f"{CUSTOM_HOOKS_DIRNAME}/custom_linter.py",
                        language="system",
                        types=["python"],
                        description="Runs a custom Python linter to enforce coding standards.",
                        stages=_COMMIT_STAGE,
                    ),
                    _hook(
                        "check-large-files",
                        name="Check for Large Files",
                        entry=f"{CUSTOM_HOOKS_DIRNAME}/check_large_files.py",
                        language="script",
                        types=["file"],
                        description="Prevents committing files larger than 20MB.",
                        stages=_COMMIT_STAGE,
                    ),
                    _hook(
                        "golang-setup",
                        name="Go Environment Setup",
                        language="system",
                        entry="go version",
                        files=r"\.go$",
                        stages=_COMMIT_STAGE,
                    ),
                    _hook(
                        "htmlhint",
                        name="HTMLHint",
                        entry="htmlhint",
                        language="system",
                        types=["text"],
                        files=r"\.html$",
                        stages=_COMMIT_STAGE,
                    ),
                    _hook(
                        "stylelint",
                        name="Stylelint for CSS",
                        entry='stylelint "**/*.css"',
                        language="node",
                        pass_filenames=False,
                        files=r"\.css$",
                        stages=_COMMIT_STAGE,
                    ),
                    _hook(
                        "checkstyle-java",
                        name="Checkstyle for Java",
                        entry="checkstyle -c /google_checks.xml",
                        language="system",
                        types=["java"],
                        files=r"\.java$",
                        stages=_COMMIT_STAGE,
                    ),
                    _hook(
                        "yamllint",
                        name="YAML Linter (yamllint)",
                        entry=f"yamllint -c {YAMLLINT_CONFIG_FILENAME}",
                        language="system",
                        files=r"\.ya?ml$",
                        stages=_COMMIT_STAGE,
                    ),
                    _hook(
                        "cpplint-c",
                        name="cpplint for C",
                        entry="cpplint",
                        language="python",
                        types=["c"],
                        files=r"\.(c|h)$",
                        stages=_COMMIT_STAGE,
                    ),
                ],
            },
            {
                "repo": "local",
                "hooks": [
                    _hook(
                        "custom-autocorrect",
                        name="Custom AutoCorrect",
                        entry=f"{CUSTOM_HOOKS_DIRNAME}/autocorrect.py",
                        language="script",
                        pass_filenames=True,
                        always_run=True,
                        types=["file"],
                        verbose=True,
                        require_serial=True,
                        stages=_COMMIT_STAGE,
                        args=[],
                        exclude="",
                    )
                ],
            },
        ]
    }


def build_yamllint_config() -> dict[str, Any]:
    return {
        "extends": "default",
        "rules": {"line-length": {"max": 150, "level": "error"}},
    }


def render_pre_commit_config() -> str:
    return yaml.safe_dump(
        build_pre_commit_config(),
        explicit_start=True,
        sort_keys=False,
        width=150,
    )


def render_yamllint_config() -> str:
    return yaml.safe_dump(build_yamllint_config(), sort_keys=False)


def write_pre_commit_config(root: Path) -> Path:
    """Write .pre-commit-config.yaml to ``root``, replacing any previous content.

    A symlink left at that path (e.g. when ``root`` is itself a nested repo
    that was linked to a parent config) is replaced by a regular file.
    """
    path = root / PRE_COMMIT_CONFIG_FILENAME
    if path.is_symlink():
        path.unlink()
    path.write_text(render_pre_commit_config(), encoding="utf-8")
    return path


def write_yamllint_config(root: Path) -> Path:
    path = root / YAMLLINT_CONFIG_FILENAME
    path.write_text(render_yamllint_config(), encoding="utf-8")
    return path


def _make_executable(path: Path) -> None:
    mode = path.stat().st_mode
    os.chmod(path, mode | _EXECUTABLE_BITS)


def write_helper_scripts(root: Path) -> list[Path]:
    """Copy the helper hooks into ``root/custom_hooks/`` and mark them executable.

    Returns:
        Paths of the written scripts, in HELPER_SCRIPT_NAMES order
    """
    hooks_dir = root / CUSTOM_HOOKS_DIRNAME
    hooks_dir.mkdir(parents=True, exist_ok=True)

    written: list[Path] = []
    for name in HELPER_SCRIPT_NAMES:
        content = (_hook_templates_dir() / name).read_text(encoding="utf-8")
        target = hooks_dir / name
        target.write_text(content, encoding="utf-8")
        _make_executable(target)
        written.append(target)
    return written
