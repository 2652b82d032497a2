"""Bootstrap configuration: locations and tool lists."""

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

# Environment variable that relocates the virtual environment
VENV_OVERRIDE_ENV_VAR = "HOOKSTRAP_VENV"

PYTHON_LINTERS = ("pyupgrade", "autopep8", "flake8", "cpplint", "yamllint")
NODE_LINTERS = ("eslint", "stylelint", "htmlhint")


@dataclass(frozen=True)
class BootstrapConfig:
    """Where the bootstrap installs things and what it installs."""

    home: Path
    venv_dir: Path
    npm_prefix: Path
    install_dir: Path  # checkstyle jar location
    use_sudo: bool
    python_linters: tuple[str, ...]
    node_linters: tuple[str, ...]

    @staticmethod
    def from_environment(
        *, home: Path, environ: Mapping[str, str], is_root: bool
    ) -> "BootstrapConfig":
        """Build the configuration for the invoking user.

        Args:
            home: The user's home directory
            environ: Environment mapping (usually ``os.environ``)
            is_root: Whether the process already runs as root (no sudo needed)
        """
        venv_override = environ.get(VENV_OVERRIDE_ENV_VAR)
        venv_dir = Path(venv_override).expanduser() if venv_override else home / ".venv"
        return BootstrapConfig(
            home=home,
            venv_dir=venv_dir,
            npm_prefix=home / ".npm-global",
            install_dir=home / ".local" / "bin",
            use_sudo=not is_root,
            python_linters=PYTHON_LINTERS,
            node_linters=NODE_LINTERS,
        )

    @staticmethod
    def test(home: Path) -> "BootstrapConfig":
        """Configuration rooted at a temporary home, without sudo."""
        return BootstrapConfig(
            home=home,
            venv_dir=home / ".venv",
            npm_prefix=home / ".npm-global",
            install_dir=home / ".local" / "bin",
            use_sudo=False,
            python_linters=PYTHON_LINTERS,
            node_linters=NODE_LINTERS,
        )
