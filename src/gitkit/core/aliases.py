"""Higher-level git aliases resolved into command strings.

Each alias is a frozen dataclass that knows the ordered list of tokens it
stands for. Joining those tokens with single spaces yields the resolved
command string that is later prefixed with ``git`` by the assembler.

Architecture:
- GitAlias: Abstract base class defining params() and the derived raw_value
- One frozen dataclass per alias variant
- resolve_alias(): Convenience function returning the resolved string
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from gitkit.core.commands import Command


class GitAlias(ABC):
    """Abstract interface for git aliases.

    Resolution is pure: the same alias value always yields the same tokens.
    Argument values are passed through without validation.
    """

    @abstractmethod
    def params(self) -> list[str]:
        """Return the ordered tokens this alias resolves to."""
        ...

    @property
    def raw_value(self) -> str:
        """Resolved command string (tokens joined by single spaces)."""
        return " ".join(self.params())

    @property
    def creates_work_tree(self) -> bool:
        """Whether running this alias needs its working directory created first.

        Only repository-creating aliases (init and clone) return True.
        """
        return False


@dataclass(frozen=True)
class Cmd(GitAlias):
    """Any catalog subcommand with an optional argument string."""

    command: Command
    args: str | None = None

    def params(self) -> list[str]:
        params = [self.command.value]
        if self.args is not None:
            params.append(self.args)
        return params

    @property
    def creates_work_tree(self) -> bool:
        return self.command in (Command.INIT, Command.CLONE)


@dataclass(frozen=True)
class AddAll(GitAlias):
    """Stage everything in the working tree."""

    def params(self) -> list[str]:
        return [Command.ADD.value, "."]


@dataclass(frozen=True)
class Commit(GitAlias):
    """Commit with a message, optionally allowing an empty commit.

    The message is wrapped in double quotes as-is; any further shell
    escaping is the caller's responsibility.
    """

    message: str
    allow_empty: bool = False

    def params(self) -> list[str]:
        params = [Command.COMMIT.value, "-m", f'"{self.message}"']
        if self.allow_empty:
            params.append("--allow-empty")
        return params


@dataclass(frozen=True)
class Clone(GitAlias):
    """Clone a repository URL."""

    url: str

    def params(self) -> list[str]:
        return [Command.CLONE.value, self.url]

    @property
    def creates_work_tree(self) -> bool:
        return True


@dataclass(frozen=True)
class Checkout(GitAlias):
    """Switch to an existing branch."""

    branch: str

    def params(self) -> list[str]:
        return [Command.CHECKOUT.value, self.branch]


@dataclass(frozen=True)
class Log(GitAlias):
    """Show the commit log, limited to ``count`` entries when given."""

    count: int | None = None

    def params(self) -> list[str]:
        params = [Command.LOG.value]
        if self.count is not None:
            params.append(f"-{self.count}")
        return params


@dataclass(frozen=True)
class LogFormat(GitAlias):
    """Show the commit log with a custom pretty format.

    The format is interpolated directly into a single token, unescaped.
    """

    format: str

    def params(self) -> list[str]:
        return [Command.LOG.value, f"--pretty=format:{self.format}"]


def _remote_params(command: Command, remote: str | None, branch: str | None) -> list[str]:
    params = [command.value]
    if remote is not None:
        params.append(remote)
    if branch is not None:
        params.append(branch)
    return params


@dataclass(frozen=True)
class Push(GitAlias):
    """Push, optionally naming the remote and/or the branch."""

    remote: str | None = None
    branch: str | None = None

    def params(self) -> list[str]:
        return _remote_params(Command.PUSH, self.remote, self.branch)


@dataclass(frozen=True)
class Pull(GitAlias):
    """Pull, optionally naming the remote and/or the branch."""

    remote: str | None = None
    branch: str | None = None

    def params(self) -> list[str]:
        return _remote_params(Command.PULL, self.remote, self.branch)


@dataclass(frozen=True)
class Merge(GitAlias):
    """Merge a branch into the current one."""

    branch: str

    def params(self) -> list[str]:
        return [Command.MERGE.value, self.branch]


@dataclass(frozen=True)
class CreateBranch(GitAlias):
    """Create a branch and switch to it."""

    branch: str

    def params(self) -> list[str]:
        return [Command.CHECKOUT.value, "-b", self.branch]


@dataclass(frozen=True)
class DeleteBranch(GitAlias):
    """Force-delete a local branch."""

    branch: str

    def params(self) -> list[str]:
        return [Command.BRANCH.value, "-D", self.branch]


@dataclass(frozen=True)
class Tag(GitAlias):
    """Create a lightweight tag."""

    name: str

    def params(self) -> list[str]:
        return [Command.TAG.value, self.name]


@dataclass(frozen=True)
class Raw(GitAlias):
    """Pass a command string through verbatim, without a subcommand prefix.

    Raw aliases never create the working directory, even when the text
    starts with ``init`` or ``clone``; use Cmd or Clone for that.
    """

    command: str

    def params(self) -> list[str]:
        return [self.command]


def resolve_alias(alias: GitAlias) -> str:
    """Resolve an alias into its space-joined command string.

    Args:
        alias: The alias to resolve

    Returns:
        Resolved command string, without the leading ``git``
    """
    return alias.raw_value
