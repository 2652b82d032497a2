"""No-op command runner for dry-run mode.

Every ``run`` and ``capture`` is treated as a mutation and only printed;
presence probes are read-only and still reach the wrapped runner.
"""

from collections.abc import Mapping, Sequence
from pathlib import Path

from hookstrap.gateway.command_runner.abc import CommandResult, CommandRunner
from hookstrap.output import user_output


class DryRunCommandRunner(CommandRunner):
    def __init__(self, wrapped: CommandRunner) -> None:
        """Create a dry-run wrapper around a CommandRunner implementation.

        Args:
            wrapped: The CommandRunner used for read-only probes
        """
        self._wrapped = wrapped

    def run(
        self,
        cmd: Sequence[str],
        *,
        operation_context: str,
        cwd: Path | None,
        env: Mapping[str, str] | None,
    ) -> CommandResult:
        user_output(f"[DRY RUN] Would run: {' '.join(cmd)}")
        return CommandResult(returncode=0, stdout="")

    def capture(
        self,
        cmd: Sequence[str],
        *,
        operation_context: str,
        env: Mapping[str, str] | None,
    ) -> str:
        user_output(f"[DRY RUN] Would run: {' '.join(cmd)}")
        return ""

    def probe(self, cmd: Sequence[str], *, env: Mapping[str, str] | None) -> bool:
        return self._wrapped.probe(cmd, env=env)
