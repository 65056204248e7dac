#!/usr/bin/env python3
"""Pull --rebase every clean repo in the workspace and list the new commits."""

import logging

from workspace import (
    Colors,
    CommandError,
    WorkspaceError,
    c,
    configure_logging,
    exit_with_error,
    get_dirs,
    get_workspace,
    git_commits_since,
    git_current_head,
    git_pull,
    git_status,
    print_failure,
    split_head,
)

logger = logging.getLogger(__name__)


def pull_repo(name, path):
    try:
        status = git_status(path)
    except CommandError as e:
        logger.info("Status failed in %s", name)
        print_failure(e)
        return

    # Never rebase over local modifications
    if status:
        print(c(Colors.YELLOW, f"There are modified files in {name}."))
        for line in status.splitlines():
            print(f"  {line}")
        return

    print(c(Colors.BOLD, f"Rebase...{name}"))

    try:
        head = git_current_head(path)
    except CommandError as e:
        logger.info("Could not read the current head of %s, skipping", name)
        print_failure(e)
        return

    sha, _message = split_head(head)
    if not sha:
        print_failure(f"No commits found in {name}")
        return

    try:
        git_pull(path)
    except CommandError as e:
        logger.info("Pull failed in %s", name)
        print_failure(e)

    try:
        changes = git_commits_since(path, sha)
    except CommandError as e:
        logger.info("Listing new commits failed in %s", name)
        print_failure(e)
    else:
        print(changes, end="")

    print(c(Colors.GREEN, "OK"))


def pull_all(workspace):
    for name in get_dirs(workspace):
        pull_repo(name, workspace / name)


def main():
    configure_logging()
    try:
        pull_all(get_workspace())
    except WorkspaceError as e:
        exit_with_error(e)


if __name__ == "__main__":
    main()
