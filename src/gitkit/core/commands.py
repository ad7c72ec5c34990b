"""Catalog of primitive git subcommands."""

from enum import Enum


class Command(Enum):
    """Basic git subcommands, valued by their command-line token."""

    # start a working area
    CONFIG = "config"
    CLEAN = "clean"
    CLONE = "clone"
    INIT = "init"

    # work on the current change
    ADD = "add"
    MV = "mv"
    RESET = "reset"
    RM = "rm"

    # examine the history and state
    BISECT = "bisect"
    GREP = "grep"
    LOG = "log"
    SHOW = "show"
    STATUS = "status"

    # grow, mark and tweak your common history
    BRANCH = "branch"
    CHECKOUT = "checkout"
    COMMIT = "commit"
    DIFF = "diff"
    MERGE = "merge"
    REBASE = "rebase"
    TAG = "tag"

    # collaborate
    FETCH = "fetch"
    PULL = "pull"
    PUSH = "push"

