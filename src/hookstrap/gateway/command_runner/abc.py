"""Abstract command runner used for every external tool invocation."""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

# Shell convention for "command not found"
COMMAND_NOT_FOUND_EXIT_CODE = 127


@dataclass(frozen=True)
class CommandResult:
    returncode: int
    stdout: str


class CommandFailedError(RuntimeError):
    """An external command exited non-zero or could not be started."""

    def __init__(
        self,
        *,
        cmd: Sequence[str],
        returncode: int,
        operation_context: str,
        stderr: str | None,
    ) -> None:
        message = f"Failed to {operation_context}"
        message += f"\nCommand: {' '.join(cmd)}"
        message += f"\nExit code: {returncode}"
        if stderr:
            message += f"\nstderr: {stderr.strip()}"
        super().__init__(message)
        self.cmd = tuple(cmd)
        self.returncode = returncode
        self.operation_context = operation_context


class CommandRunner(ABC):
    @abstractmethod
    def run(
        self,
        cmd: Sequence[str],
        *,
        operation_context: str,
        cwd: Path | None,
        env: Mapping[str, str] | None,
    ) -> CommandResult:
        """Run a command with its output streamed to the terminal.

        Raises:
            CommandFailedError: If the command is missing or exits non-zero
        """
        ...

    @abstractmethod
    def capture(
        self,
        cmd: Sequence[str],
        *,
        operation_context: str,
        env: Mapping[str, str] | None,
    ) -> str:
        """Run a command and return its stdout.

        Raises:
            CommandFailedError: If the command is missing or exits non-zero
        """
        ...

    @abstractmethod
    def probe(self, cmd: Sequence[str], *, env: Mapping[str, str] | None) -> bool:
        """Return True if the command exists and exits 0. Output is discarded."""
        ...
