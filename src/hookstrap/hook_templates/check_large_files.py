#!/usr/bin/env python3
"""Reject files larger than MAX_SIZE bytes (default 20 MiB)."""

import os
import sys
from collections.abc import Mapping

DEFAULT_MAX_SIZE = 20 * 1024 * 1024
BYTES_PER_MB = 1024 * 1024


def max_size_from_env(environ: Mapping[str, str]) -> int:
    value = environ.get("MAX_SIZE")
    if not value:
        return DEFAULT_MAX_SIZE
    return int(value)


def find_oversized(paths: list[str], max_size: int) -> str | None:
    """Return the first path whose size exceeds ``max_size``; missing paths are skipped."""
    for path in paths:
        if not os.path.isfile(path):
            continue
        if os.path.getsize(path) > max_size:
            return path
    return None


def main(argv: list[str]) -> int:
    try:
        max_size = max_size_from_env(os.environ)
    except ValueError:
        print(f"❌ MAX_SIZE must be a whole number of bytes, got {os.environ['MAX_SIZE']!r}.")
        return 1

    oversized = find_oversized(argv, max_size)
    if oversized is None:
        return 0

    limit_mb = max_size / BYTES_PER_MB
    print(f"❌ File {oversized} is too large! Size exceeds {limit_mb:g} MB.")
    return 1


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
