"""Typed git aliases assembled into shell command lines and executed."""

from gitkit.core.aliases import (
    AddAll,
    Checkout,
    Clone,
    Cmd,
    Commit,
    CreateBranch,
    DeleteBranch,
    GitAlias,
    Log,
    LogFormat,
    Merge,
    Pull,
    Push,
    Raw,
    Tag,
)
from gitkit.core.commands import Command
from gitkit.core.git import Git
from gitkit.core.shell import EmptyOutputError, ExitFailureError, RealShell, ShellError

__all__ = [
    "AddAll",
    "Checkout",
    "Clone",
    "Cmd",
    "Command",
    "Commit",
    "CreateBranch",
    "DeleteBranch",
    "EmptyOutputError",
    "ExitFailureError",
    "Git",
    "GitAlias",
    "Log",
    "LogFormat",
    "Merge",
    "Pull",
    "Push",
    "Raw",
    "RealShell",
    "ShellError",
    "Tag",
]
