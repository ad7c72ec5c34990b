"""Commands that exchange commits with remotes."""

import click

from gitkit.cli.runner import run_alias
from gitkit.core.aliases import Pull, Push
from gitkit.core.context import GitkitContext


@click.command("push")
@click.option("--remote", default=None, help="Remote to push to.")
@click.option("--branch", default=None, help="Branch to push.")
@click.pass_obj
def push_cmd(ctx: GitkitContext, remote: str | None, branch: str | None) -> None:
    """Update remote refs."""
    run_alias(ctx, Push(remote=remote, branch=branch))


@click.command("pull")
@click.option("--remote", default=None, help="Remote to pull from.")
@click.option("--branch", default=None, help="Branch to pull.")
@click.pass_obj
def pull_cmd(ctx: GitkitContext, remote: str | None, branch: str | None) -> None:
    """Fetch from and integrate with a remote."""
    run_alias(ctx, Pull(remote=remote, branch=branch))
