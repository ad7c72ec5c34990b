"""Commands that switch, create, delete and merge branches."""

import click

from gitkit.cli.runner import run_alias
from gitkit.core.aliases import Checkout, CreateBranch, DeleteBranch, Merge
from gitkit.core.context import GitkitContext


@click.command("checkout")
@click.argument("branch")
@click.pass_obj
def checkout_cmd(ctx: GitkitContext, branch: str) -> None:
    """Switch to BRANCH."""
    run_alias(ctx, Checkout(branch))


@click.command("merge")
@click.argument("branch")
@click.pass_obj
def merge_cmd(ctx: GitkitContext, branch: str) -> None:
    """Merge BRANCH into the current branch."""
    run_alias(ctx, Merge(branch))


@click.group("branch")
def branch_group() -> None:
    """Create or delete branches."""


@branch_group.command("create")
@click.argument("name")
@click.pass_obj
def create_branch_cmd(ctx: GitkitContext, name: str) -> None:
    """Create branch NAME and switch to it."""
    run_alias(ctx, CreateBranch(name))


@branch_group.command("delete")
@click.argument("name")
@click.pass_obj
def delete_branch_cmd(ctx: GitkitContext, name: str) -> None:
    """Force-delete branch NAME."""
    run_alias(ctx, DeleteBranch(name))
