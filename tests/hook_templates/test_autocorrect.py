"""Tests for the autocorrect hook."""

from collections.abc import Callable
from pathlib import Path
from types import ModuleType

import pytest


@pytest.fixture
def autocorrect(load_hook: Callable[[str], ModuleType]) -> ModuleType:
    return load_hook("autocorrect.py")


def test_fixes_quotes_and_trailing_whitespace(tmp_path: Path, autocorrect: ModuleType) -> None:
    target = tmp_path / "greeting.js"
    target.write_text("say('hello')   \t", encoding="utf-8")

    assert autocorrect.main([str(target)]) == 0

    assert target.read_text(encoding="utf-8") == 'say("hello")\n'


def test_collapses_space_runs(autocorrect: ModuleType) -> None:
    assert autocorrect.autocorrect_text("a    b  c\n") == "a b c\n"


def test_existing_trailing_newline_is_not_doubled(autocorrect: ModuleType) -> None:
    assert autocorrect.autocorrect_text("x = 'a'  \n") == 'x = "a"\n'


def test_only_simple_strings_are_requoted(autocorrect: ModuleType) -> None:
    assert autocorrect.autocorrect_text("'a' and 'b'\n") == '"a" and "b"\n'


@pytest.mark.parametrize(
    "name", ["config.yaml", "config.yml", "script.py", ".pre-commit-config.yaml"]
)
def test_skipped_files_are_untouched(tmp_path: Path, autocorrect: ModuleType, name: str) -> None:
    target = tmp_path / name
    original = "key:   'value'   "
    target.write_text(original, encoding="utf-8")

    assert autocorrect.main([str(target)]) == 0

    assert target.read_text(encoding="utf-8") == original


def test_missing_file_still_exits_zero(tmp_path: Path, autocorrect: ModuleType) -> None:
    assert autocorrect.main([str(tmp_path / "missing.txt")]) == 0


def test_undecodable_file_is_reported_and_skipped(
    tmp_path: Path, autocorrect: ModuleType, capsys: pytest.CaptureFixture[str]
) -> None:
    binary = tmp_path / "blob.bin"
    binary.write_bytes(b"\xff\xfe\x00'x'")

    assert autocorrect.main([str(binary)]) == 0

    assert binary.read_bytes() == b"\xff\xfe\x00'x'"
    assert "Could not autocorrect" in capsys.readouterr().out


def test_apostrophes_on_separate_lines_are_left_alone(autocorrect: ModuleType) -> None:
    text = "don't stop\nwon't stop\n"

    assert autocorrect.autocorrect_text(text) == text


def test_quoted_strings_are_matched_within_a_line(autocorrect: ModuleType) -> None:
    assert autocorrect.autocorrect_text("it's\nsay('hi')\n") == "it's\nsay(\"hi\")\n"
