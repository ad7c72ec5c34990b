"""Structured failures raised by shell executions."""


class ShellError(Exception):
    """Base class for failures of a shell command execution."""


class EmptyOutputError(ShellError):
    """The command exited successfully but wrote nothing to stdout."""

    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(f"Command produced no output: {command}")


class ExitFailureError(ShellError):
    """The command exited with a non-zero status.

    Attributes:
        exit_code: Exit status reported by the shell
        message: Captured diagnostic text (stderr, or stdout when stderr is empty)
    """

    def __init__(self, exit_code: int, message: str) -> None:
        self.exit_code = exit_code
        self.message = message
        super().__init__(f"Command failed with exit code {exit_code}: {message}")
