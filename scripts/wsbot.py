#!/usr/bin/env python3
"""Run batch operations against every directory in $SPITFIRE_WORKSPACE.

Usage:
    wsbot bundle            # `bundle` in every directory with a Gemfile
    wsbot pull              # git pull --rebase every clean repo
    wsbot heads             # current commit and branch of every repo
    wsbot checkout <ref>    # git checkout <ref> in every repo
"""

import argparse

from bundle_all import bundle_all
from checkout_all import checkout_all
from pull_all import pull_all
from show_heads import show_heads
from workspace import WorkspaceError, configure_logging, exit_with_error, get_workspace

__version__ = "0.0.1"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wsbot",
        description="handle the robot things",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    commands = parser.add_subparsers(dest="command", metavar="command", required=True)

    bundle = commands.add_parser(
        "bundle",
        aliases=["b"],
        help="Bundles each directory in the workspace if it contains a Gemfile",
    )
    bundle.set_defaults(func=lambda ws, args: bundle_all(ws))

    pull = commands.add_parser(
        "pull",
        aliases=["p"],
        help="Pulls the branch that is checked out in each directory. Will ignore repos that have modified files",
    )
    pull.set_defaults(func=lambda ws, args: pull_all(ws))

    heads = commands.add_parser(
        "heads",
        aliases=["ch"],
        help="Returns the current head + branch of each repo in the workspace",
    )
    heads.set_defaults(func=lambda ws, args: show_heads(ws))

    checkout = commands.add_parser(
        "checkout",
        aliases=["co"],
        help="checkout the reference supplied in each directory",
    )
    checkout.add_argument("ref", help="Branch, tag or commit to check out")
    checkout.set_defaults(func=lambda ws, args: checkout_all(ws, args.ref))

    return parser


def main(argv=None) -> None:
    args = build_parser().parse_args(argv)
    configure_logging()

    try:
        workspace = get_workspace()
        args.func(workspace, args)
    except WorkspaceError as e:
        exit_with_error(e)


if __name__ == "__main__":
    main()
