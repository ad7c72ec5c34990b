"""Run aliases from CLI commands and report the outcome."""

import logging

import click

from gitkit.cli.output import machine_output, user_output
from gitkit.core.aliases import GitAlias
from gitkit.core.context import GitkitContext
from gitkit.core.shell.errors import EmptyOutputError, ExitFailureError

logger = logging.getLogger(__name__)


def run_alias(ctx: GitkitContext, alias: GitAlias) -> None:
    """Run an alias through the context's git session and print its output.

    Commands that succeed silently (checkout, add, ...) print nothing.

    Raises:
        SystemExit: With the command's exit code if it failed
    """
    try:
        output = ctx.git.run(alias)
    except EmptyOutputError as e:
        logger.debug("No output from %s", e.command)
        return
    except ExitFailureError as e:
        user_output(click.style("Error: ", fg="red") + (e.message or f"exit code {e.exit_code}"))
        raise SystemExit(e.exit_code) from e

    machine_output(output)
