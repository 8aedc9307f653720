"""Metadata CLI commands."""

import argparse
from pathlib import Path

import yaml

from buildstamp.metadata.collector import collect_build_metadata
from buildstamp.paths import source_root


def cmd_collect(args: argparse.Namespace) -> int:
    root = Path(args.source_root).expanduser() if args.source_root else source_root()
    metadata = collect_build_metadata(root, release=args.release)
    print(yaml.safe_dump(metadata, sort_keys=True, default_flow_style=False), end="")
    return 0
