"""Commands that stage, commit, tag and inspect history."""

import click

from gitkit.cli.runner import run_alias
from gitkit.core.aliases import AddAll, Commit, Log, LogFormat, Tag
from gitkit.core.context import GitkitContext


@click.command("add")
@click.pass_obj
def add_cmd(ctx: GitkitContext) -> None:
    """Stage all changes in the working tree."""
    run_alias(ctx, AddAll())


@click.command("commit")
@click.option("-m", "--message", required=True, help="Commit message.")
@click.option("--allow-empty", is_flag=True, help="Allow a commit without changes.")
@click.pass_obj
def commit_cmd(ctx: GitkitContext, message: str, allow_empty: bool) -> None:
    """Record staged changes."""
    run_alias(ctx, Commit(message, allow_empty=allow_empty))


@click.command("log")
@click.option("-n", "count", type=int, default=None, help="Limit the number of commits.")
@click.option("--format", "fmt", default=None, help="Pretty format string (git log --pretty).")
@click.pass_obj
def log_cmd(ctx: GitkitContext, count: int | None, fmt: str | None) -> None:
    """Show the commit log."""
    if fmt is not None and count is not None:
        raise click.UsageError("-n and --format cannot be combined.")
    if fmt is not None:
        run_alias(ctx, LogFormat(fmt))
    else:
        run_alias(ctx, Log(count))


@click.command("tag")
@click.argument("name")
@click.pass_obj
def tag_cmd(ctx: GitkitContext, name: str) -> None:
    """Tag the current commit."""
    run_alias(ctx, Tag(name))
