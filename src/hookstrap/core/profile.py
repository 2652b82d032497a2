"""Idempotent edits to the user's shell profile."""

from pathlib import Path


def ensure_line_present(path: Path, line: str, *, guard: str | None) -> bool:
    """Append ``line`` to ``path`` unless it is already there.

    The duplicate check is textual: when ``guard`` is given, any occurrence of
    ``guard`` counts as present (e.g. ``"alias checkstyle="`` matches an alias
    pointing at an older jar); otherwise the line itself is searched for.
    A missing file is created.

    Args:
        path: Profile file (e.g. ~/.bashrc)
        line: Line to ensure, without trailing newline
        guard: Substring that marks the line as already present

    Returns:
        True if the file was changed, False if it already had the line
    """
    existing = path.read_text(encoding="utf-8") if path.exists() else ""
    needle = guard if guard is not None else line
    if needle in existing:
        return False

    prefix = "" if existing == "" or existing.endswith("\n") else "\n"
    with path.open("a", encoding="utf-8") as f:
        f.write(f"{prefix}{line}\n")
    return True
