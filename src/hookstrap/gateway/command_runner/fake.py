from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

from hookstrap.gateway.command_runner.abc import (
    CommandFailedError,
    CommandResult,
    CommandRunner,
)


@dataclass(frozen=True)
class RunCall:
    cmd: tuple[str, ...]
    cwd: Path | None
    env: Mapping[str, str] | None


class FakeCommandRunner(CommandRunner):
    """In-memory command runner that records every invocation.

    Commands are matched by their space-joined string, e.g. ``"npm config get prefix"``.
    """

    def __init__(
        self,
        *,
        missing: set[str] | None,
        failing: dict[str, int] | None,
        outputs: dict[str, str] | None,
    ) -> None:
        """Create FakeCommandRunner.

        Args:
            missing: Probe command strings that report the tool as absent
            failing: Command strings mapped to the exit code they fail with
            outputs: Command strings mapped to the stdout ``capture`` returns
        """
        self._missing = missing if missing is not None else set()
        self._failing = failing if failing is not None else {}
        self._outputs = outputs if outputs is not None else {}
        self._run_calls: list[RunCall] = []
        self._probe_calls: list[tuple[str, ...]] = []

    @classmethod
    def create_all_present(cls) -> "FakeCommandRunner":
        """Create a FakeCommandRunner where every probe passes and nothing fails."""
        return cls(missing=None, failing=None, outputs=None)

    def run(
        self,
        cmd: Sequence[str],
        *,
        operation_context: str,
        cwd: Path | None,
        env: Mapping[str, str] | None,
    ) -> CommandResult:
        self._run_calls.append(RunCall(cmd=tuple(cmd), cwd=cwd, env=env))
        self._raise_if_failing(cmd, operation_context=operation_context)
        return CommandResult(returncode=0, stdout="")

    def capture(
        self,
        cmd: Sequence[str],
        *,
        operation_context: str,
        env: Mapping[str, str] | None,
    ) -> str:
        self._run_calls.append(RunCall(cmd=tuple(cmd), cwd=None, env=env))
        self._raise_if_failing(cmd, operation_context=operation_context)
        return self._outputs.get(" ".join(cmd), "")

    def probe(self, cmd: Sequence[str], *, env: Mapping[str, str] | None) -> bool:
        self._probe_calls.append(tuple(cmd))
        return " ".join(cmd) not in self._missing

    def _raise_if_failing(self, cmd: Sequence[str], *, operation_context: str) -> None:
        key = " ".join(cmd)
        if key in self._failing:
            raise CommandFailedError(
                cmd=cmd,
                returncode=self._failing[key],
                operation_context=operation_context,
                stderr=None,
            )

    @property
    def run_calls(self) -> list[RunCall]:
        return list(self._run_calls)

    @property
    def commands_run(self) -> list[str]:
        return [" ".join(call.cmd) for call in self._run_calls]

    @property
    def probes(self) -> list[str]:
        return [" ".join(cmd) for cmd in self._probe_calls]
