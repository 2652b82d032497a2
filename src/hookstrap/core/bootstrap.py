"""The bootstrap procedure.

Steps run top to bottom and the first failure propagates to the caller,
leaving completed steps in place. Every step is idempotent on its own, so a
rerun after fixing the failure picks up where the last run stopped.
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path

import click

from hookstrap.core.artifacts import (
    CUSTOM_HOOKS_DIRNAME,
    HELPER_SCRIPT_NAMES,
    PRE_COMMIT_CONFIG_FILENAME,
    YAMLLINT_CONFIG_FILENAME,
    write_helper_scripts,
    write_pre_commit_config,
    write_yamllint_config,
)
from hookstrap.core.checkstyle import (
    CHECKSTYLE_ALIAS_GUARD,
    CheckstyleInstall,
    checkstyle_alias_line,
    fetch_checkstyle,
)
from hookstrap.core.context import HookstrapContext
from hookstrap.core.node_tools import (
    install_node_linters,
    npm_path_export_line,
    npm_prefix_configured,
    set_npm_prefix,
)
from hookstrap.core.profile import ensure_line_present
from hookstrap.core.propagation import (
    LinkResult,
    discover_git_repos,
    is_root_config_location,
    propagate_config,
)
from hookstrap.core.tools import TOOL_TABLE, PackageInstaller, ensure_tool
from hookstrap.core.workspace import (
    activate_workspace,
    ensure_workspace,
    install_workspace_packages,
    prepend_to_path,
)
from hookstrap.debug_timing import timed_operation
from hookstrap.output import action_output, success_output, user_output, warning_output

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BootstrapSummary:
    installed_tools: tuple[str, ...]
    workspace_created: bool
    checkstyle: CheckstyleInstall
    links: tuple[LinkResult, ...]


def _step_header(message: str) -> None:
    user_output(click.style(message, bold=True))


def _install_system_tools(ctx: HookstrapContext, env: Mapping[str, str]) -> tuple[str, ...]:
    installer = PackageInstaller(runner=ctx.runner, use_sudo=ctx.config.use_sudo, env=env)
    installed: list[str] = []
    for tool in TOOL_TABLE:
        if ensure_tool(tool, runner=ctx.runner, installer=installer, env=env):
            installed.append(tool.name)
    return tuple(installed)


def _setup_workspace(
    ctx: HookstrapContext, env: Mapping[str, str]
) -> tuple[bool, dict[str, str]]:
    venv_dir = ctx.config.venv_dir
    if not venv_dir.is_dir():
        action_output(f"Creating virtual environment in {venv_dir}...")
    created = ensure_workspace(venv_dir, runner=ctx.runner, env=env)

    action_output("Activating virtual environment...")
    activated = activate_workspace(venv_dir, env)
    warning_output(
        f"Virtual environment is active for this run only. "
        f"Run 'source {venv_dir}/bin/activate' to use it in your shell."
    )
    return created, activated


def _setup_node_tools(
    ctx: HookstrapContext, env: Mapping[str, str], profile_path: Path
) -> dict[str, str]:
    npm_prefix = ctx.config.npm_prefix
    if not npm_prefix_configured(npm_prefix, runner=ctx.runner, env=env):
        action_output("Setting up a user-level global npm directory to avoid permission issues...")
        if not ctx.dry_run:
            npm_prefix.mkdir(parents=True, exist_ok=True)
        set_npm_prefix(npm_prefix, runner=ctx.runner, env=env)

    export_line = npm_path_export_line(npm_prefix, ctx.config.home)
    if ctx.dry_run:
        user_output(f"[DRY RUN] Would ensure {export_line!r} in {profile_path}")
    elif ensure_line_present(profile_path, export_line, guard=None):
        success_output(f"Added npm-global path to {profile_path}")
    node_env = prepend_to_path(env, npm_prefix / "bin")

    install_node_linters(ctx.config.node_linters, runner=ctx.runner, env=node_env)
    return node_env


def _setup_checkstyle(ctx: HookstrapContext, profile_path: Path) -> CheckstyleInstall:
    with timed_operation("fetch checkstyle"):
        install = fetch_checkstyle(ctx.config.install_dir, releases=ctx.releases)
    if install.downloaded:
        success_output(f"Installed Checkstyle {install.version} to {install.jar_path}")
    else:
        success_output(f"Checkstyle {install.version} is already installed.")

    alias_line = checkstyle_alias_line(install.jar_path)
    if ctx.dry_run:
        user_output(f"[DRY RUN] Would ensure {alias_line!r} in {profile_path}")
    elif ensure_line_present(profile_path, alias_line, guard=CHECKSTYLE_ALIAS_GUARD):
        action_output("Created alias for checkstyle.")
        warning_output(
            f"Run 'source {profile_path}' or restart your terminal "
            "to activate the 'checkstyle' alias."
        )
    else:
        user_output("Alias for checkstyle already exists.")
    return install


def _write_artifact(
    ctx: HookstrapContext, description: str, write: Callable[[Path], object]
) -> None:
    if ctx.dry_run:
        user_output(f"[DRY RUN] Would write {description}")
        return
    write(ctx.cwd)


def _propagate(ctx: HookstrapContext, root_config: Path) -> tuple[LinkResult, ...]:
    if ctx.dry_run:
        for repo_dir in discover_git_repos(ctx.cwd):
            if not is_root_config_location(root_config, repo_dir):
                user_output(f"[DRY RUN] Would link {PRE_COMMIT_CONFIG_FILENAME} into {repo_dir}")
        return ()

    links = propagate_config(ctx.cwd, root_config)
    for result in links:
        user_output(f"  Linked config into {result.repo_dir}")
    return tuple(links)


def run_bootstrap(ctx: HookstrapContext) -> BootstrapSummary:
    """Run the full bootstrap in the context's working directory.

    Raises:
        CommandFailedError: When any external command fails
        ReleaseLookupError: When the checkstyle release cannot be resolved or fetched
        PropagationError: When a nested repository's config path is a directory
    """
    _shell_name, profile_path = ctx.shell.detect_shell()
    logger.debug("shell profile: %s", profile_path)
    env: dict[str, str] = dict(ctx.base_env)

    _step_header("Checking system tools...")
    with timed_operation("install system tools"):
        installed_tools = _install_system_tools(ctx, env)

    _step_header("Preparing the Python workspace...")
    with timed_operation("set up workspace"):
        workspace_created, env = _setup_workspace(ctx, env)

    _step_header("Installing pre-commit and Python linters...")
    with timed_operation("install workspace packages"):
        install_workspace_packages(ctx.config.python_linters, runner=ctx.runner, env=env)

    _step_header("Installing Node linters...")
    with timed_operation("install node linters"):
        env = _setup_node_tools(ctx, env, profile_path)

    _step_header("Installing Checkstyle...")
    checkstyle = _setup_checkstyle(ctx, profile_path)

    root_config = ctx.cwd / PRE_COMMIT_CONFIG_FILENAME
    _step_header(f"Writing {PRE_COMMIT_CONFIG_FILENAME}...")
    _write_artifact(ctx, PRE_COMMIT_CONFIG_FILENAME, write_pre_commit_config)

    _step_header("Installing pre-commit hooks from config...")
    with timed_operation("pre-commit install"):
        ctx.runner.run(
            ["pre-commit", "install"],
            operation_context="install the pre-commit git hook",
            cwd=ctx.cwd,
            env=env,
        )
        ctx.runner.run(
            ["pre-commit", "install", "--install-hooks"],
            operation_context="install pre-commit hook environments",
            cwd=ctx.cwd,
            env=env,
        )

    _step_header("Setting up custom hooks...")
    _write_artifact(
        ctx,
        f"{CUSTOM_HOOKS_DIRNAME}/{{{', '.join(HELPER_SCRIPT_NAMES)}}}",
        write_helper_scripts,
    )
    success_output("Custom hooks have been created.")

    _step_header(f"Validating {PRE_COMMIT_CONFIG_FILENAME}...")
    ctx.runner.run(
        ["pre-commit", "validate-config"],
        operation_context=f"validate {PRE_COMMIT_CONFIG_FILENAME}",
        cwd=ctx.cwd,
        env=env,
    )
    success_output(f"{PRE_COMMIT_CONFIG_FILENAME} is valid.")

    _step_header(f"Writing {YAMLLINT_CONFIG_FILENAME}...")
    _write_artifact(ctx, YAMLLINT_CONFIG_FILENAME, write_yamllint_config)

    _step_header("Linking config into nested git repositories...")
    with timed_operation("propagate config"):
        links = _propagate(ctx, root_config)
    success_output("Linking complete.")

    user_output("")
    user_output(click.style("Pre-commit setup complete.", fg="green", bold=True))
    return BootstrapSummary(
        installed_tools=installed_tools,
        workspace_created=workspace_created,
        checkstyle=checkstyle,
        links=links,
    )
