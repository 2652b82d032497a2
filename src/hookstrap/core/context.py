"""Application context with dependency injection."""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from hookstrap.core.config import BootstrapConfig
from hookstrap.gateway.command_runner.abc import CommandRunner
from hookstrap.gateway.command_runner.dry_run import DryRunCommandRunner
from hookstrap.gateway.command_runner.real import RealCommandRunner
from hookstrap.gateway.releases.abc import ReleaseClient
from hookstrap.gateway.releases.dry_run import DryRunReleaseClient
from hookstrap.gateway.releases.real import GitHubReleaseClient
from hookstrap.gateway.shell.abc import Shell
from hookstrap.gateway.shell.real import RealShell


@dataclass(frozen=True)
class HookstrapContext:
    """Immutable context holding all dependencies for a bootstrap run.

    Created at the CLI entry point. Tests build one with ``for_test``.
    """

    runner: CommandRunner
    shell: Shell
    releases: ReleaseClient
    config: BootstrapConfig
    cwd: Path  # Working directory the artifacts are written to
    base_env: Mapping[str, str]  # Environment the first subprocess inherits
    dry_run: bool

    @staticmethod
    def for_test(
        *,
        cwd: Path,
        home: Path,
        runner: CommandRunner | None = None,
        shell: Shell | None = None,
        releases: ReleaseClient | None = None,
        config: BootstrapConfig | None = None,
        base_env: Mapping[str, str] | None = None,
        dry_run: bool = False,
    ) -> "HookstrapContext":
        """Create a context backed by fakes.

        Every gateway not supplied gets its standard fake: a runner where all
        tools are present, a bash shell whose profile lives in ``home``, and a
        release client that knows one checkstyle release. With ``dry_run`` the
        runner and release client are wrapped the same way ``create_context`` does.
        """
        from hookstrap.gateway.command_runner.fake import FakeCommandRunner
        from hookstrap.gateway.releases.fake import FakeReleaseClient
        from hookstrap.gateway.shell.fake import FakeShell

        resolved_runner: CommandRunner = (
            runner if runner is not None else FakeCommandRunner.create_all_present()
        )
        resolved_releases: ReleaseClient = (
            releases
            if releases is not None
            else FakeReleaseClient(
                latest_tags={"checkstyle/checkstyle": "checkstyle-10.21.4"},
                content=b"jar",
            )
        )
        if dry_run:
            resolved_runner = DryRunCommandRunner(resolved_runner)
            resolved_releases = DryRunReleaseClient(resolved_releases)

        return HookstrapContext(
            runner=resolved_runner,
            shell=(
                shell
                if shell is not None
                else FakeShell(shell_name="bash", profile_path=home / ".bashrc")
            ),
            releases=resolved_releases,
            config=config if config is not None else BootstrapConfig.test(home),
            cwd=cwd,
            base_env=(
                base_env
                if base_env is not None
                else {"PATH": "/usr/local/bin:/usr/bin:/bin", "HOME": str(home)}
            ),
            dry_run=dry_run,
        )


def create_context(*, dry_run: bool) -> HookstrapContext:
    """Create the production context for the invoking user."""
    runner: CommandRunner = RealCommandRunner()
    releases: ReleaseClient = GitHubReleaseClient()
    if dry_run:
        runner = DryRunCommandRunner(runner)
        releases = DryRunReleaseClient(releases)

    return HookstrapContext(
        runner=runner,
        shell=RealShell(),
        releases=releases,
        config=BootstrapConfig.from_environment(
            home=Path.home(),
            environ=os.environ,
            is_root=os.geteuid() == 0,
        ),
        cwd=Path.cwd(),
        base_env=dict(os.environ),
        dry_run=dry_run,
    )
