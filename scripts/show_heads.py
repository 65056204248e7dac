#!/usr/bin/env python3
"""Print the checked out commit and branch of every repo in the workspace."""

import logging

from workspace import (
    CommandError,
    WorkspaceError,
    configure_logging,
    exit_with_error,
    get_dirs,
    get_workspace,
    git_current_branch,
    git_current_head,
    print_failure,
    print_head,
)

logger = logging.getLogger(__name__)


def read_head(name, path):
    """Return (head line, branch), printing failures and falling back to ""."""
    head = branch = ""

    try:
        head = git_current_head(path)
    except CommandError as e:
        logger.info("Could not read the current head of %s", name)
        print_failure(e)

    try:
        branch = git_current_branch(path)
    except CommandError as e:
        logger.info("Could not read the current branch of %s", name)
        print_failure(e)

    return head, branch


def show_heads(workspace):
    for name in get_dirs(workspace):
        head, branch = read_head(name, workspace / name)
        print_head(name, head, branch)


def main():
    configure_logging()
    try:
        show_heads(get_workspace())
    except WorkspaceError as e:
        exit_with_error(e)


if __name__ == "__main__":
    main()
