"""Application context with dependency injection."""

from dataclasses import dataclass

from gitkit.core.config_store import ConfigStore, GitkitConfig, InMemoryConfigStore, RealConfigStore
from gitkit.core.git.session import Git
from gitkit.core.shell.abc import Shell
from gitkit.core.shell.dry_run import DryRunShell
from gitkit.core.shell.real import RealShell


@dataclass(frozen=True)
class GitkitContext:
    """Immutable context holding all dependencies for gitkit commands.

    Created at CLI entry point and threaded through the application.
    The git session itself stays mutable so callers can adjust its working
    directory and verbosity between runs.
    """

    git: Git
    config: GitkitConfig
    config_store: ConfigStore
    dry_run: bool

    @staticmethod
    def for_test(
        shell: Shell,
        *,
        config: GitkitConfig | None = None,
        config_store: ConfigStore | None = None,
        dry_run: bool = False,
    ) -> "GitkitContext":
        """Create a context around an injected shell (usually FakeShell).

        Args:
            shell: Shell implementation the git session runs through
            config: Configuration to expose (defaults to GitkitConfig())
            config_store: Store to expose (defaults to an in-memory store holding config)
            dry_run: Whether to wrap the shell in DryRunShell

        Returns:
            GitkitContext whose git session uses the given shell
        """
        if config is None:
            config = GitkitConfig()
        if config_store is None:
            config_store = InMemoryConfigStore(config)
        if dry_run:
            shell = DryRunShell(shell)

        git = Git(shell, path=config.path, verbose=config.verbose, max_workers=config.max_workers)
        return GitkitContext(git=git, config=config, config_store=config_store, dry_run=dry_run)


def create_context(
    *,
    dry_run: bool,
    config_store: ConfigStore | None = None,
    config: GitkitConfig | None = None,
) -> GitkitContext:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution.

    Args:
        dry_run: If True, wrap the shell so commands are printed, not executed
        config_store: Where to load configuration from (defaults to ~/.gitkit/config.toml)
        config: Configuration to use instead of loading it from config_store

    Returns:
        GitkitContext with real implementations, wrapped in dry-run
        wrappers if dry_run=True
    """
    if config_store is None:
        config_store = RealConfigStore()
    if config is None:
        config = config_store.load_or_default()

    shell: Shell = RealShell(config.shell, env=config.env)
    if dry_run:
        shell = DryRunShell(shell)

    git = Git(shell, path=config.path, verbose=config.verbose, max_workers=config.max_workers)
    return GitkitContext(git=git, config=config, config_store=config_store, dry_run=dry_run)
