"""Source-root and target path resolution.

Uses environment variables when available, falls back to conventional
defaults.

Environment variables:
    BUILDSTAMP_SOURCE_ROOT — library checkout root (default: current directory)
    BUILDSTAMP_TARGET — metadata template (default: <root>/lib/bundler/build_metadata.rb)
"""

from __future__ import annotations

import os
from pathlib import Path

DEFAULT_TARGET_SUBPATH = "lib/bundler/build_metadata.rb"


def source_root() -> Path:
    """Return the library source root."""
    return Path(os.environ.get("BUILDSTAMP_SOURCE_ROOT", ".")).expanduser()


def target_path(root: Path | str | None = None) -> Path:
    """Return the path to the build metadata template.

    An explicit ``root`` takes precedence over ``BUILDSTAMP_TARGET``.
    """
    if root is None:
        env = os.environ.get("BUILDSTAMP_TARGET")
        if env:
            return Path(env).expanduser()
        root = source_root()
    return Path(root) / DEFAULT_TARGET_SUBPATH
