import logging

import click

from hookstrap.core.bootstrap import run_bootstrap
from hookstrap.core.context import HookstrapContext, create_context
from hookstrap.core.propagation import PropagationError
from hookstrap.gateway.command_runner.abc import CommandFailedError
from hookstrap.gateway.releases.abc import ReleaseLookupError
from hookstrap.output import user_output

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.command("hookstrap", context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="hookstrap")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option(
    "--dry-run",
    is_flag=True,
    help="Print the commands and writes that would happen without doing them.",
)
@click.pass_context
def cli(ctx: click.Context, *, debug: bool, dry_run: bool) -> None:
    """Bootstrap pre-commit and its linters for this directory.

    Installs system tools, a Python virtual environment, Node and Java
    linters, writes .pre-commit-config.yaml, .yamllint and custom_hooks/,
    and links the config into every nested git repository. Safe to rerun.
    """
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(dry_run=dry_run)
    hookstrap_ctx: HookstrapContext = ctx.obj

    try:
        run_bootstrap(hookstrap_ctx)
    except CommandFailedError as e:
        user_output(click.style("Error: ", fg="red") + str(e))
        raise SystemExit(e.returncode) from e
    except (ReleaseLookupError, PropagationError) as e:
        user_output(click.style("Error: ", fg="red") + str(e))
        raise SystemExit(1) from e


def main() -> None:
    """CLI entry point used by the `hookstrap` console script."""
    cli()
