"""Tests for command line assembly."""

from gitkit.core.aliases import Checkout, Clone, Cmd, Log, Raw
from gitkit.core.commands import Command
from gitkit.core.git.assembler import assemble_command


def test_without_path_runs_git_directly() -> None:
    assert assemble_command(Log(5), None) == "git log -5"


def test_clone_with_path_creates_and_enters_directory() -> None:
    result = assemble_command(Clone("https://x/y.git"), "/tmp/repo")

    assert result == "mkdir -p /tmp/repo && cd /tmp/repo && git clone https://x/y.git"


def test_init_with_path_creates_and_enters_directory() -> None:
    result = assemble_command(Cmd(Command.INIT), "/tmp/a/b/c")

    assert result == "mkdir -p /tmp/a/b/c && cd /tmp/a/b/c && git init"


def test_checkout_with_path_only_enters_directory() -> None:
    assert assemble_command(Checkout("main"), "/tmp/repo") == "cd /tmp/repo && git checkout main"


def test_raw_text_starting_with_init_does_not_create_directory() -> None:
    """Directory creation is decided by the alias type, not its text."""
    assert assemble_command(Raw("init"), "/tmp/repo") == "cd /tmp/repo && git init"


def test_clone_without_path_has_no_prefix() -> None:
    assert assemble_command(Clone("https://x/y.git"), None) == "git clone https://x/y.git"


def test_assembly_is_deterministic() -> None:
    alias = Clone("https://x/y.git")
    assert assemble_command(alias, "/tmp/repo") == assemble_command(alias, "/tmp/repo")
