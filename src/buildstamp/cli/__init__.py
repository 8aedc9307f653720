"""Unified CLI for buildstamp.

Usage:
    buildstamp inject [--target PATH] [--metadata FILE] [--set KEY=VALUE ...]
                      [--release] [--no-collect] [--lenient] [--dry-run]
    buildstamp show [--target PATH]
    buildstamp collect [--release]
"""

import argparse
import logging
import sys

from buildstamp.cli.inject import cmd_inject, cmd_show
from buildstamp.cli.metadata import cmd_collect


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="buildstamp",
        description="Stamp build metadata into a library's metadata template",
    )
    parser.add_argument(
        "--source-root", default=None,
        help="Library checkout root (default: $BUILDSTAMP_SOURCE_ROOT or .)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )
    sub = parser.add_subparsers(dest="command")

    # inject
    inj = sub.add_parser("inject", help="Rewrite the ivar block of the template")
    inj.add_argument(
        "--target", default=None,
        help="Template path (default: <root>/lib/bundler/build_metadata.rb)",
    )
    inj.add_argument(
        "--metadata", default=None,
        help="YAML file with metadata key/value pairs",
    )
    inj.add_argument(
        "--set", dest="assignments", action="append", default=[],
        metavar="KEY=VALUE",
        help="Set a metadata entry (repeatable, value parsed as YAML)",
    )
    inj.add_argument(
        "--release", action="store_true",
        help="Mark the build as a release",
    )
    inj.add_argument(
        "--no-collect", action="store_true",
        help="Skip collecting built_at/git_commit_sha/release defaults",
    )
    inj.add_argument(
        "--lenient", action="store_true",
        help="Leave the file unchanged instead of failing when markers are missing",
    )
    inj.add_argument(
        "--dry-run", action="store_true",
        help="Preview the block without writing",
    )

    # show
    show = sub.add_parser("show", help="Show the current ivar block")
    show.add_argument("--target", default=None, help="Template path")

    # collect
    col = sub.add_parser("collect", help="Print collected build metadata as YAML")
    col.add_argument(
        "--release", action="store_true",
        help="Mark the build as a release",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return 0

    dispatch = {
        "inject": cmd_inject,
        "show": cmd_show,
        "collect": cmd_collect,
    }
    return dispatch[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
