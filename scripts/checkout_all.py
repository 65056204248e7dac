#!/usr/bin/env python3
"""Check out the same reference in every repo in the workspace."""

import argparse
import logging

from show_heads import read_head
from workspace import (
    CommandError,
    WorkspaceError,
    configure_logging,
    exit_with_error,
    get_dirs,
    get_workspace,
    git_checkout,
    print_failure,
    print_head,
)

logger = logging.getLogger(__name__)


def checkout_all(workspace, ref):
    for name in get_dirs(workspace):
        path = workspace / name

        try:
            git_checkout(path, ref)
        except CommandError as e:
            logger.info("Checkout of %s failed in %s", ref, name)
            print_failure(e)

        head, branch = read_head(name, path)
        print_head(name, head, branch)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Check out the same reference in every repo in the workspace.",
    )
    parser.add_argument("ref", help="Branch, tag or commit to check out")
    args = parser.parse_args(argv)

    configure_logging()
    try:
        checkout_all(get_workspace(), args.ref)
    except WorkspaceError as e:
        exit_with_error(e)


if __name__ == "__main__":
    main()
