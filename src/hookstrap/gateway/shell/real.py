import os
from pathlib import Path

from hookstrap.gateway.shell.abc import Shell, detect_shell_from_env


class RealShell(Shell):
    def detect_shell(self) -> tuple[str, Path]:
        return detect_shell_from_env(os.environ, Path.home())
