#!/usr/bin/env python3
"""Run `bundle` in every workspace directory that has a Gemfile."""

import logging
import os

from workspace import (
    Colors,
    CommandError,
    WorkspaceError,
    c,
    check,
    configure_logging,
    exit_with_error,
    get_dirs,
    get_workspace,
)

MANIFEST_FILE = "Gemfile"

logger = logging.getLogger(__name__)


def bundle_all(workspace):
    for name in get_dirs(workspace):
        path = workspace / name
        # Unreadable directories count as having no manifest
        if not os.path.isfile(path / MANIFEST_FILE):
            logger.debug("No %s in %s, skipping", MANIFEST_FILE, name)
            continue

        try:
            check(["bundle"], cwd=path)
        except CommandError as e:
            logger.info("bundle failed in %s: %s", name, e)
            print(c(Colors.RED, f"{name} failed to bundle:\n{e.output or e}"))
        else:
            print(c(Colors.GREEN, f"Bundled in {name}"))


def main():
    configure_logging()
    try:
        bundle_all(get_workspace())
    except WorkspaceError as e:
        exit_with_error(e)


if __name__ == "__main__":
    main()
