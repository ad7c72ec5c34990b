"""Commands that create repositories or run arbitrary git subcommands."""

import click

from gitkit.cli.runner import run_alias
from gitkit.core.aliases import Clone, Cmd, Raw
from gitkit.core.commands import Command
from gitkit.core.context import GitkitContext


@click.command("init")
@click.pass_obj
def init_cmd(ctx: GitkitContext) -> None:
    """Create a repository, creating the working directory if needed."""
    run_alias(ctx, Cmd(Command.INIT))


@click.command("clone")
@click.argument("url")
@click.pass_obj
def clone_cmd(ctx: GitkitContext, url: str) -> None:
    """Clone URL, creating the working directory if needed."""
    run_alias(ctx, Clone(url))


@click.command("run", context_settings={"ignore_unknown_options": True})
@click.argument("subcommand", type=click.Choice([c.value for c in Command]))
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_obj
def run_cmd(ctx: GitkitContext, subcommand: str, args: tuple[str, ...]) -> None:
    """Run any git SUBCOMMAND with optional ARGS."""
    joined = " ".join(args) if args else None
    run_alias(ctx, Cmd(Command(subcommand), joined))


@click.command("raw")
@click.argument("text")
@click.pass_obj
def raw_cmd(ctx: GitkitContext, text: str) -> None:
    """Run `git TEXT` verbatim."""
    run_alias(ctx, Raw(text))
