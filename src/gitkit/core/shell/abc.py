"""Shell execution interface.

The shell is the only collaborator that actually spawns processes. Everything
above it builds command strings; everything below it is the operating system.
"""

from abc import ABC, abstractmethod


class Shell(ABC):
    """Abstract interface for running a command line through a shell.

    All implementations (real, dry-run and fake) must implement this interface.
    """

    @abstractmethod
    def run(self, command: str) -> str:
        """Run a command line and return its output.

        Args:
            command: Command line interpreted by the shell

        Returns:
            Captured stdout without trailing newlines

        Raises:
            EmptyOutputError: If the command succeeded without writing to stdout
            ExitFailureError: If the command exited with a non-zero status
        """
        ...
