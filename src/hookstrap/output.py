"""User-facing output helpers.

Human-readable progress goes to stderr so that stdout stays clean for
anything a caller might want to pipe.
"""

import click


def user_output(message: str = "", *, nl: bool = True) -> None:
    """Print a message intended for a human operator (stderr)."""
    click.echo(message, nl=nl, err=True)


def success_output(message: str) -> None:
    user_output(click.style("✓", fg="green") + f" {message}")


def action_output(message: str) -> None:
    user_output(click.style("→", fg="cyan") + f" {message}")


def warning_output(message: str) -> None:
    user_output(click.style("⚠", fg="yellow") + f" {message}")
