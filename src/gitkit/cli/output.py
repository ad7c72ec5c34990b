"""Output utilities for CLI commands with clear intent.

user_output() is for diagnostics and goes to stderr; machine_output() is for
results other programs may consume and goes to stdout.
"""

import click


def user_output(message: str = "", nl: bool = True) -> None:
    """Write a user-facing diagnostic message to stderr."""
    click.echo(message, err=True, nl=nl)


def machine_output(message: str = "", nl: bool = True) -> None:
    """Write command results to stdout."""
    click.echo(message, nl=nl)
