"""Tests for the placeholder import-order linter hook."""

from collections.abc import Callable
from pathlib import Path
from types import ModuleType

import pytest


def test_flags_every_import_line(
    tmp_path: Path, load_hook: Callable[[str], ModuleType]
) -> None:
    linter = load_hook("custom_linter.py")
    source = tmp_path / "mod.py"
    source.write_text("import sys\nimport os\n\nx = 1\nfrom a import b\n", encoding="utf-8")

    messages = linter.check_code(str(source))

    assert messages == [
        f"{source}:1: Ensure correct import order.",
        f"{source}:2: Ensure correct import order.",
    ]


def test_main_prints_and_never_fails(
    tmp_path: Path,
    load_hook: Callable[[str], ModuleType],
    capsys: pytest.CaptureFixture[str],
) -> None:
    linter = load_hook("custom_linter.py")
    source = tmp_path / "mod.py"
    source.write_text("import sys\n", encoding="utf-8")

    assert linter.main([str(source)]) == 0
    assert "Ensure correct import order." in capsys.readouterr().out
