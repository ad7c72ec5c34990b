"""Shell execution subpackage.

This subpackage provides the shell abstraction git commands run through, with
support for testing via fakes and dry-run via wrappers.
"""

from gitkit.core.shell.abc import Shell
from gitkit.core.shell.dry_run import DryRunShell
from gitkit.core.shell.errors import EmptyOutputError, ExitFailureError, ShellError
from gitkit.core.shell.real import RealShell

__all__ = [
    "DryRunShell",
    "EmptyOutputError",
    "ExitFailureError",
    "RealShell",
    "Shell",
    "ShellError",
]
