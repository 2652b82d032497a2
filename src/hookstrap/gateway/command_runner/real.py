import logging
import shutil
import subprocess
from collections.abc import Mapping, Sequence
from pathlib import Path

from hookstrap.gateway.command_runner.abc import (
    COMMAND_NOT_FOUND_EXIT_CODE,
    CommandFailedError,
    CommandResult,
    CommandRunner,
)

logger = logging.getLogger(__name__)


def _search_path(env: Mapping[str, str] | None) -> str | None:
    if env is None:
        return None
    return env.get("PATH")


class RealCommandRunner(CommandRunner):
    def run(
        self,
        cmd: Sequence[str],
        *,
        operation_context: str,
        cwd: Path | None,
        env: Mapping[str, str] | None,
    ) -> CommandResult:
        self._require_executable(cmd, operation_context=operation_context, env=env)
        logger.debug("run: %s (cwd=%s)", " ".join(cmd), cwd)
        result = subprocess.run(
            list(cmd),
            cwd=cwd,
            env=dict(env) if env is not None else None,
            check=False,
        )
        if result.returncode != 0:
            raise CommandFailedError(
                cmd=cmd,
                returncode=result.returncode,
                operation_context=operation_context,
                stderr=None,
            )
        return CommandResult(returncode=result.returncode, stdout="")

    def capture(
        self,
        cmd: Sequence[str],
        *,
        operation_context: str,
        env: Mapping[str, str] | None,
    ) -> str:
        self._require_executable(cmd, operation_context=operation_context, env=env)
        logger.debug("capture: %s", " ".join(cmd))
        result = subprocess.run(
            list(cmd),
            env=dict(env) if env is not None else None,
            capture_output=True,
            text=True,
            encoding="utf-8",
            check=False,
        )
        if result.returncode != 0:
            raise CommandFailedError(
                cmd=cmd,
                returncode=result.returncode,
                operation_context=operation_context,
                stderr=result.stderr,
            )
        return result.stdout

    def probe(self, cmd: Sequence[str], *, env: Mapping[str, str] | None) -> bool:
        # LBYL: a missing executable is a failed probe, not an error
        if shutil.which(cmd[0], path=_search_path(env)) is None:
            logger.debug("probe: %s not on PATH", cmd[0])
            return False

        result = subprocess.run(
            list(cmd),
            env=dict(env) if env is not None else None,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
        logger.debug("probe: %s exited %d", " ".join(cmd), result.returncode)
        return result.returncode == 0

    def _require_executable(
        self,
        cmd: Sequence[str],
        *,
        operation_context: str,
        env: Mapping[str, str] | None,
    ) -> None:
        if shutil.which(cmd[0], path=_search_path(env)) is None:
            raise CommandFailedError(
                cmd=cmd,
                returncode=COMMAND_NOT_FOUND_EXIT_CODE,
                operation_context=operation_context,
                stderr=f"command not found: {cmd[0]}",
            )
