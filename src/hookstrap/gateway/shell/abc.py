"""Abstract interface for detecting the user's shell and its profile file."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path


def detect_shell_from_env(environ: Mapping[str, str], home: Path) -> tuple[str, Path]:
    """Select the shell and profile file to edit from environment variables.

    ``ZSH_VERSION`` (set inside a running zsh) or a ``SHELL`` ending in ``zsh``
    selects ``~/.zshrc``. Everything else falls back to bash and ``~/.bashrc``.

    Args:
        environ: Environment mapping (usually ``os.environ``)
        home: The user's home directory

    Returns:
        Tuple of (shell_name, profile_path)

    Example:
        >>> detect_shell_from_env({"SHELL": "/bin/zsh"}, Path("/home/u"))
        ('zsh', PosixPath('/home/u/.zshrc'))
    """
    shell_path = environ.get("SHELL", "")
    if environ.get("ZSH_VERSION") or Path(shell_path).name == "zsh":
        return ("zsh", home / ".zshrc")
    return ("bash", home / ".bashrc")


class Shell(ABC):
    @abstractmethod
    def detect_shell(self) -> tuple[str, Path]:
        """Return (shell_name, profile_path) for the invoking user."""
        ...
