#!/usr/bin/env python3
"""Apply simple text fixes to the files pre-commit passes in.

Configuration files and Python sources are skipped. The hook always exits 0
so pre-commit never marks it as failed; the fixes show up as modified files.
"""

import os
import re
import sys

SKIPPED_NAMES = (".pre-commit-config.yaml",)
SKIPPED_SUFFIXES = (".yaml", ".yml", ".py")

_SPACE_RUN = re.compile(r" +")
_TRAILING_WHITESPACE = re.compile(r"[ \t]+$", re.MULTILINE)
_SINGLE_QUOTED = re.compile(r"'([^'\n]*)'")


def should_skip(path: str) -> bool:
    name = os.path.basename(path)
    return name in SKIPPED_NAMES or name.endswith(SKIPPED_SUFFIXES)


def autocorrect_text(text: str) -> str:
    text = _SPACE_RUN.sub(" ", text)
    if text and not text.endswith("\n"):
        text += "\n"
    text = _TRAILING_WHITESPACE.sub("", text)
    return _SINGLE_QUOTED.sub(r'"\1"', text)


def autocorrect_file(path: str) -> None:
    with open(path, encoding="utf-8", newline="") as f:
        original = f.read()
    corrected = autocorrect_text(original)
    if corrected != original:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(corrected)


def main(argv: list[str]) -> int:
    for path in argv:
        if not os.path.isfile(path) or should_skip(path):
            continue

        print(f"Autocorrecting: {path}")
        try:
            autocorrect_file(path)
        except (OSError, UnicodeDecodeError) as e:
            print(f"Could not autocorrect {path}: {e}")
            continue
        print(f"Fixed: {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
