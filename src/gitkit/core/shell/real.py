"""Production Shell implementation using subprocess.

Commands are handed to a shell executable (``/bin/sh`` by default) with
``-c``, so ``&&`` chaining, quoting and globbing behave as in a terminal.
Output that is not valid UTF-8 is decoded with replacement characters.
"""

import logging
import os
import subprocess
from collections.abc import Mapping

from gitkit.core.shell.abc import Shell
from gitkit.core.shell.errors import EmptyOutputError, ExitFailureError

logger = logging.getLogger(__name__)

# Status a POSIX shell reports when a command cannot be found
COMMAND_NOT_FOUND_EXIT_CODE = 127


class RealShell(Shell):
    """Runs command lines through a shell executable via subprocess."""

    def __init__(self, shell_type: str = "/bin/sh", env: Mapping[str, str] | None = None) -> None:
        """Create a shell runner.

        Args:
            shell_type: Path of the shell executable
            env: Extra environment variables layered over the current environment
        """
        self._shell_type = shell_type
        self._env = dict(env) if env else {}

    @property
    def shell_type(self) -> str:
        return self._shell_type

    @property
    def env(self) -> dict[str, str]:
        return self._env.copy()

    def run(self, command: str) -> str:
        """Run a command line through the shell and return trimmed stdout."""
        logger.debug("Executing via %s: %s", self._shell_type, command)
        try:
            result = subprocess.run(
                [self._shell_type, "-c", command],
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                env={**os.environ, **self._env},
                check=False,
            )
        except FileNotFoundError as e:
            raise ExitFailureError(
                COMMAND_NOT_FOUND_EXIT_CODE, f"Shell not found: {self._shell_type}"
            ) from e

        if result.returncode != 0:
            message = result.stderr.strip() or result.stdout.strip()
            logger.debug("Command exited with %d: %s", result.returncode, message)
            raise ExitFailureError(result.returncode, message)

        if not result.stdout:
            raise EmptyOutputError(command)

        return result.stdout.rstrip("\n")
