"""Assemble shell-ready git command lines from aliases."""

from gitkit.core.aliases import GitAlias


def assemble_command(alias: GitAlias, path: str | None) -> str:
    """Build the command line for an alias and an optional working directory.

    If a working directory is given, the command changes into it first.
    Aliases that create a repository (init, clone) also create the directory
    tree with ``mkdir -p`` beforehand.

    Args:
        alias: The git alias to run
        path: Working directory, or None to run in the current directory

    Returns:
        The assembled command line, e.g.
        ``mkdir -p /tmp/repo && cd /tmp/repo && git clone https://x/y.git``
    """
    cmd: list[str] = []
    if path is not None:
        if alias.creates_work_tree:
            cmd += ["mkdir", "-p", path, "&&"]
        cmd += ["cd", path, "&&"]
    cmd += ["git", alias.raw_value]
    return " ".join(cmd)
