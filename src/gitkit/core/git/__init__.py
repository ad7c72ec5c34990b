"""Git command assembly and execution subpackage."""

from gitkit.core.git.assembler import assemble_command
from gitkit.core.git.session import Completion, Git

__all__ = [
    "Completion",
    "Git",
    "assemble_command",
]
