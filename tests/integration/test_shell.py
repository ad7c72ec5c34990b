"""Integration tests for RealShell.

These tests run command lines through the system's /bin/sh.
"""

import shutil
from pathlib import Path

import pytest

from gitkit.core.aliases import Clone, Cmd, Commit, Log, Raw
from gitkit.core.commands import Command
from gitkit.core.git.session import Git
from gitkit.core.shell.errors import EmptyOutputError, ExitFailureError
from gitkit.core.shell.real import RealShell

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")


def test_real_shell_returns_trimmed_stdout() -> None:
    assert RealShell().run("printf 'hello\\n\\n'") == "hello"


def test_real_shell_replaces_undecodable_output() -> None:
    assert RealShell().run("printf 'caf\\351\\n'") == "caf\ufffd"


def test_real_shell_replaces_undecodable_error_message() -> None:
    with pytest.raises(ExitFailureError) as exc_info:
        RealShell().run("printf 'bad \\377' >&2; exit 2")

    assert exc_info.value.exit_code == 2
    assert exc_info.value.message == "bad \ufffd"


def test_real_shell_interprets_and_chains() -> None:
    assert RealShell().run("true && echo second") == "second"


def test_real_shell_empty_output() -> None:
    with pytest.raises(EmptyOutputError):
        RealShell().run("true")


def test_real_shell_exit_failure_carries_exact_code() -> None:
    with pytest.raises(ExitFailureError) as exc_info:
        RealShell().run("echo broken >&2; exit 3")

    assert exc_info.value.exit_code == 3
    assert exc_info.value.message == "broken"


def test_real_shell_passes_extra_environment() -> None:
    shell = RealShell(env={"GITKIT_GREETING": "hi there"})

    assert shell.run('echo "$GITKIT_GREETING"') == "hi there"


def test_real_shell_missing_executable() -> None:
    with pytest.raises(ExitFailureError) as exc_info:
        RealShell("/nonexistent/shell-xyz").run("echo hi")

    assert exc_info.value.exit_code == 127


def _git_identity() -> dict[str, str]:
    return {
        "GIT_AUTHOR_NAME": "Test",
        "GIT_AUTHOR_EMAIL": "test@example.com",
        "GIT_COMMITTER_NAME": "Test",
        "GIT_COMMITTER_EMAIL": "test@example.com",
    }


@requires_git
def test_init_creates_missing_work_tree(tmp_path: Path) -> None:
    repo = tmp_path / "nested" / "repo"

    with Git(RealShell(env=_git_identity()), path=str(repo)) as git:
        output = git.run(Cmd(Command.INIT))

    assert "Initialized empty Git repository" in output
    assert (repo / ".git").is_dir()


@requires_git
def test_commit_and_log_in_work_tree(tmp_path: Path) -> None:
    repo = tmp_path / "repo"

    with Git(RealShell(env=_git_identity()), path=str(repo)) as git:
        git.run(Cmd(Command.INIT))
        git.run(Commit("first", allow_empty=True))
        git.run(Commit("second", allow_empty=True))

        subjects = git.run(Raw("log --pretty=format:%s"))
        latest = git.run(Log(1))

    assert subjects == "second\nfirst"
    assert "second" in latest


@requires_git
def test_clone_creates_target_directory(tmp_path: Path) -> None:
    source = tmp_path / "source"
    target = tmp_path / "deep" / "target"
    shell = RealShell(env=_git_identity())

    with Git(shell, path=str(source)) as git:
        git.run(Cmd(Command.INIT))
        git.run(Commit("seed", allow_empty=True))

    with Git(shell, path=str(target)) as git:
        # git clone reports progress on stderr only
        with pytest.raises(EmptyOutputError):
            git.run(Clone(str(source)))

    assert (target / "source" / ".git").is_dir()


@requires_git
def test_failing_git_command_reports_git_exit_code(tmp_path: Path) -> None:
    env = {**_git_identity(), "GIT_CEILING_DIRECTORIES": str(tmp_path.parent)}

    with Git(RealShell(env=env), path=str(tmp_path)) as git:
        with pytest.raises(ExitFailureError) as exc_info:
            git.run(Log())

    assert exc_info.value.exit_code == 128
