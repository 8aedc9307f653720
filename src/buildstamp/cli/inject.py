"""Inject/show CLI commands."""

import argparse
from pathlib import Path

import yaml

from buildstamp.ivars.injector import (
    MalformedTemplateError,
    inject,
    read_ivars,
    render_ivars,
)
from buildstamp.ivars.literal import UnrepresentableValueError
from buildstamp.metadata.collector import collect_build_metadata
from buildstamp.metadata.reader import load_metadata, parse_assignments
from buildstamp.paths import source_root, target_path


def _resolve_target(args: argparse.Namespace) -> Path:
    if args.target:
        return Path(args.target).expanduser()
    return target_path(args.source_root)


def _gather_metadata(args: argparse.Namespace) -> dict:
    """Merge collected defaults, then the YAML file, then --set overrides."""
    metadata: dict = {}
    if not args.no_collect:
        root = Path(args.source_root).expanduser() if args.source_root else source_root()
        metadata.update(collect_build_metadata(root, release=args.release))
    elif args.release:
        metadata["release"] = True
    if args.metadata:
        metadata.update(load_metadata(args.metadata))
    metadata.update(parse_assignments(args.assignments))
    return metadata


def _has_markers(target: Path) -> bool:
    with open(target, encoding="utf-8") as f:
        content = f.read()
    try:
        read_ivars(content)
    except MalformedTemplateError:
        return False
    return True


def cmd_inject(args: argparse.Namespace) -> int:
    target = _resolve_target(args)
    try:
        metadata = _gather_metadata(args)
        inject(
            metadata, target,
            strict=not args.lenient,
            dry_run=args.dry_run,
        )
    except (
        OSError,
        ValueError,
        yaml.YAMLError,
        UnrepresentableValueError,
    ) as e:
        # MalformedTemplateError and InvalidKeyError are ValueErrors
        print(f"ERROR: {e}")
        return 1

    if args.lenient and not _has_markers(target):
        print(f"No ivar markers in {target}; left unchanged.")
        return 0

    print(f"Build metadata → {target}")
    print("─" * 40)
    print(render_ivars(metadata) or "  (empty)")

    if args.dry_run:
        print("\n[DRY RUN] No files were modified.")

    return 0


def cmd_show(args: argparse.Namespace) -> int:
    target = _resolve_target(args)
    try:
        with open(target, encoding="utf-8") as f:
            ivars = read_ivars(f.read())
    except (OSError, MalformedTemplateError) as e:
        print(f"ERROR: {e}")
        return 1

    if not ivars:
        print(f"No build metadata in {target}")
        return 0
    width = max(len(k) for k in ivars) + 2
    for key, literal in ivars.items():
        print(f"  {key + ':':<{width}}{literal}")
    return 0
