"""Global JS linters installed into a user-owned npm prefix."""

import logging
from collections.abc import Mapping
from pathlib import Path

from hookstrap.gateway.command_runner.abc import CommandRunner

logger = logging.getLogger(__name__)


def npm_path_export_line(npm_prefix: Path, home: Path) -> str:
    """Profile line that puts the npm prefix's bin dir on PATH.

    Example:
        >>> npm_path_export_line(Path("/home/u/.npm-global"), Path("/home/u"))
        'export PATH=$HOME/.npm-global/bin:$PATH'
    """
    if npm_prefix.is_relative_to(home):
        location = f"$HOME/{npm_prefix.relative_to(home).as_posix()}"
    else:
        location = str(npm_prefix)
    return f"export PATH={location}/bin:$PATH"


def npm_prefix_configured(
    npm_prefix: Path, *, runner: CommandRunner, env: Mapping[str, str]
) -> bool:
    current = runner.capture(
        ["npm", "config", "get", "prefix"],
        operation_context="read the npm prefix",
        env=env,
    ).strip()
    logger.debug("npm prefix is %r", current)
    return str(npm_prefix) in current


def set_npm_prefix(npm_prefix: Path, *, runner: CommandRunner, env: Mapping[str, str]) -> None:
    runner.run(
        ["npm", "config", "set", "prefix", str(npm_prefix)],
        operation_context=f"set the npm prefix to {npm_prefix}",
        cwd=None,
        env=env,
    )


def install_node_linters(
    linters: tuple[str, ...], *, runner: CommandRunner, env: Mapping[str, str]
) -> None:
    runner.run(
        ["npm", "install", "-g", *linters],
        operation_context="install Node linters",
        cwd=None,
        env=env,
    )
