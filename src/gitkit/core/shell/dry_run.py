"""Dry-run Shell wrapper.

Prints the command line that would be executed instead of running it.
"""

from gitkit.cli.output import user_output
from gitkit.core.shell.abc import Shell


class DryRunShell(Shell):
    """Wrapper that reports commands instead of executing them.

    Usage:
        real_shell = RealShell()
        dry_run_shell = DryRunShell(real_shell)

        # Prints "[DRY RUN] Would run: git status" and returns the command
        dry_run_shell.run("git status")
    """

    def __init__(self, wrapped: Shell) -> None:
        """Create a dry-run wrapper around a Shell implementation.

        Args:
            wrapped: The Shell implementation that would have run the command
        """
        self._wrapped = wrapped

    @property
    def wrapped(self) -> Shell:
        return self._wrapped

    def run(self, command: str) -> str:
        """Print the command and return it as the output."""
        user_output(f"[DRY RUN] Would run: {command}")
        return command
