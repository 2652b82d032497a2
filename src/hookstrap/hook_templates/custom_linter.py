#!/usr/bin/env python3
"""Flag import statements for manual import-order review.

Placeholder check: every line starting with ``import`` is reported, and the
hook never fails.
"""

import sys


def check_code(file_path: str) -> list[str]:
    messages: list[str] = []
    with open(file_path, encoding="utf-8") as f:
        for line_num, line in enumerate(f, 1):
            if line.startswith("import"):
                messages.append(f"{file_path}:{line_num}: Ensure correct import order.")
    return messages


def main(argv: list[str]) -> int:
    for file_path in argv:
        for message in check_code(file_path):
            print(message)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
