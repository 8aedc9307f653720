"""Collect default build metadata from a source checkout."""

import subprocess
from datetime import datetime, timezone
from pathlib import Path


def _run_git(args: list[str], cwd: Path) -> subprocess.CompletedProcess:
    """Run a git command and return the result."""
    return subprocess.run(
        ["git"] + args,
        cwd=cwd,
        capture_output=True,
        text=True,
    )


def git_commit_sha(source_root: Path | str) -> str | None:
    """Return the short HEAD SHA of ``source_root``, or None outside a checkout."""
    try:
        result = _run_git(["rev-parse", "--short", "HEAD"], Path(source_root))
    except (FileNotFoundError, NotADirectoryError):
        # git not installed, or source_root is not a directory
        return None
    if result.returncode != 0:
        return None
    return result.stdout.strip() or None


def collect_build_metadata(
    source_root: Path | str,
    release: bool = False,
    now: datetime | None = None,
) -> dict:
    """Build the default metadata mapping for a checkout.

    Args:
        source_root: Library checkout to read the commit from.
        release: Whether this is a release build.
        now: Build time. Defaults to the current UTC time.

    Returns:
        Dict with built_at, git_commit_sha, and release.
    """
    built_at = now or datetime.now(timezone.utc)
    return {
        "built_at": built_at.replace(microsecond=0),
        "git_commit_sha": git_commit_sha(source_root),
        "release": release,
    }
