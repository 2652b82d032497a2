from pathlib import Path

from hookstrap.gateway.shell.abc import Shell


class FakeShell(Shell):
    def __init__(self, *, shell_name: str, profile_path: Path) -> None:
        self._shell_name = shell_name
        self._profile_path = profile_path

    def detect_shell(self) -> tuple[str, Path]:
        return (self._shell_name, self._profile_path)
