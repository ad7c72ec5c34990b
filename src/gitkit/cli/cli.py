"""Entry point for the gitkit command line."""

import logging
import os

import click

from gitkit.cli.commands.branch import branch_group, checkout_cmd, merge_cmd
from gitkit.cli.commands.config import config_group
from gitkit.cli.commands.history import add_cmd, commit_cmd, log_cmd, tag_cmd
from gitkit.cli.commands.remote import pull_cmd, push_cmd
from gitkit.cli.commands.repo import clone_cmd, init_cmd, raw_cmd, run_cmd
from gitkit.cli.output import user_output
from gitkit.core.config_store import GitkitConfig
from gitkit.core.context import create_context

# Enable debug logging if GITKIT_DEBUG environment variable is set
if os.getenv("GITKIT_DEBUG") == "1":
    logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="gitkit")
@click.option(
    "-C", "--path", default=None, help="Run git in this directory (created for init/clone)."
)
@click.option("-v", "--verbose", is_flag=True, help="Print each command line before running it.")
@click.option("--dry-run", is_flag=True, help="Print command lines without running them.")
@click.pass_context
def cli(ctx: click.Context, path: str | None, verbose: bool, dry_run: bool) -> None:
    """Run common git operations through a shell."""
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context(dry_run=dry_run)
        except ValueError as e:
            # config commands must stay usable to repair a malformed file
            if ctx.invoked_subcommand != "config":
                user_output(click.style("Error: ", fg="red") + str(e))
                raise SystemExit(1) from e
            user_output(click.style("Warning: ", fg="yellow") + f"{e}; using defaults.")
            ctx.obj = create_context(dry_run=dry_run, config=GitkitConfig())
    if path is not None:
        ctx.obj.git.path = path
    if verbose:
        ctx.obj.git.verbose = True
    ctx.call_on_close(ctx.obj.git.close)


cli.add_command(add_cmd)
cli.add_command(branch_group)
cli.add_command(checkout_cmd)
cli.add_command(clone_cmd)
cli.add_command(commit_cmd)
cli.add_command(config_group)
cli.add_command(init_cmd)
cli.add_command(log_cmd)
cli.add_command(merge_cmd)
cli.add_command(pull_cmd)
cli.add_command(push_cmd)
cli.add_command(raw_cmd)
cli.add_command(run_cmd)
cli.add_command(tag_cmd)


def main() -> None:
    """CLI entry point used by the `gitkit` console script."""
    cli()
