"""Git session that runs aliases through a shell.

A session owns the configuration that parameterizes command assembly (the
working directory and the verbosity flag) and the worker pool used by the
non-blocking path.

Configuration is read every time an alias is run and only ever written by the
caller between calls. Sessions take no locks: callers that share a session
across threads must serialize their own changes to ``path`` and ``verbose``.
"""

import logging
from collections.abc import Callable
from concurrent.futures import CancelledError, Future, ThreadPoolExecutor

from gitkit.cli.output import user_output
from gitkit.core.aliases import GitAlias
from gitkit.core.git.assembler import assemble_command
from gitkit.core.shell.abc import Shell

logger = logging.getLogger(__name__)

Completion = Callable[[str | None, BaseException | None], None]


class Git:
    """Runs git aliases through a Shell, blocking or in the background.

    Usage:
        git = Git(RealShell(), path="/tmp/repo")
        git.run(Cmd(Command.INIT))
        git.run(Commit("Initial commit", allow_empty=True))

        future = git.run_async(Log(1), completion=lambda out, err: ...)
    """

    def __init__(
        self,
        shell: Shell,
        *,
        path: str | None = None,
        verbose: bool = False,
        max_workers: int | None = None,
    ) -> None:
        """Create a session.

        Args:
            shell: Shell the assembled command lines are run through
            path: Working directory; if present, git runs after changing into it
                and init/clone create it recursively when missing
            verbose: Print each assembled command line to stderr before running it
            max_workers: Size of the background worker pool (None for the
                ThreadPoolExecutor default)
        """
        self.path = path
        self.verbose = verbose
        self._shell = shell
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="gitkit")

    @property
    def shell(self) -> Shell:
        return self._shell

    def raw_command(self, alias: GitAlias) -> str:
        """Assemble the command line for an alias with the current configuration."""
        command = assemble_command(alias, self.path)
        if self.verbose:
            user_output(command)
        return command

    def run(self, alias: GitAlias) -> str:
        """Run an alias and wait for it to finish.

        Returns:
            Output of the command without trailing newlines

        Raises:
            EmptyOutputError: If the command succeeded but printed nothing
            ExitFailureError: If the command exited with a non-zero status
        """
        command = self.raw_command(alias)
        logger.debug("Running %s", command)
        return self._shell.run(command)

    def run_async(self, alias: GitAlias, completion: Completion | None = None) -> Future[str]:
        """Run an alias on the background worker pool.

        The command line is assembled on the calling thread, so configuration
        changes made after this call returns do not affect it.

        Args:
            alias: The git alias to run
            completion: Called exactly once with ``(output, None)`` on success or
                ``(None, error)`` on failure, possibly from a worker thread

        Returns:
            Future resolving to the command output or raising its error
        """
        command = self.raw_command(alias)
        logger.debug("Scheduling %s", command)
        future = self._executor.submit(self._shell.run, command)
        if completion is not None:
            future.add_done_callback(lambda done: _deliver(done, completion))
        return future

    def close(self) -> None:
        """Wait for background commands to finish and release the worker pool."""
        self._executor.shutdown(wait=True)

    def __enter__(self) -> "Git":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def _deliver(future: Future[str], completion: Completion) -> None:
    if future.cancelled():
        completion(None, CancelledError())
        return
    error = future.exception()
    if error is not None:
        completion(None, error)
    else:
        completion(future.result(), None)
