"""Presence-checked installation of system tools.

Each tool is a row in ``TOOL_TABLE``: the probes that tell whether it is
already usable and the platform packages that provide it.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from hookstrap.gateway.command_runner.abc import CommandRunner
from hookstrap.output import action_output, success_output

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolSpec:
    name: str
    probes: tuple[tuple[str, ...], ...]  # every probe must pass
    packages: tuple[str, ...]


TOOL_TABLE: tuple[ToolSpec, ...] = (
    ToolSpec(name="pip", probes=(("pip", "--version"),), packages=("python3-pip",)),
    ToolSpec(
        name="python3-venv",
        probes=(("python3", "-m", "venv", "--help"),),
        packages=("python3-venv",),
    ),
    ToolSpec(
        name="Node.js",
        probes=(("node", "--version"), ("npm", "--version")),
        packages=("nodejs", "npm"),
    ),
    ToolSpec(name="Java", probes=(("java", "-version"),), packages=("default-jre-headless",)),
    ToolSpec(name="Go", probes=(("go", "version"),), packages=("golang",)),
)


class PackageInstaller:
    """Installs OS packages with apt-get, refreshing the index once per run."""

    def __init__(
        self,
        *,
        runner: CommandRunner,
        use_sudo: bool,
        env: Mapping[str, str] | None,
    ) -> None:
        self._runner = runner
        self._prefix: tuple[str, ...] = ("sudo",) if use_sudo else ()
        self._env = env
        self._index_updated = False

    def install(self, packages: tuple[str, ...]) -> None:
        if not self._index_updated:
            self._runner.run(
                [*self._prefix, "apt-get", "update"],
                operation_context="update the package index",
                cwd=None,
                env=self._env,
            )
            self._index_updated = True

        self._runner.run(
            [*self._prefix, "apt-get", "install", "-y", *packages],
            operation_context=f"install {' '.join(packages)}",
            cwd=None,
            env=self._env,
        )


def ensure_tool(
    tool: ToolSpec,
    *,
    runner: CommandRunner,
    installer: PackageInstaller,
    env: Mapping[str, str] | None,
) -> bool:
    """Install ``tool`` through the package manager unless already present.

    Returns:
        True if packages were installed, False if the tool was already present
    """
    missing = [probe for probe in tool.probes if not runner.probe(probe, env=env)]
    if not missing:
        success_output(f"{tool.name} is installed.")
        return False

    logger.debug("%s failed probes: %s", tool.name, missing)
    action_output(f"{tool.name} not found. Installing {' '.join(tool.packages)}...")
    installer.install(tool.packages)
    return True
