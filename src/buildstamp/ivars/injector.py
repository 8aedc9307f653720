"""Build metadata injection — rewrites the ivar block of a template file.

The injection process:
1. Read the target file once
2. Render every metadata entry as an ``@key = literal`` line, sorted by key
3. Replace whatever sits between the begin/end markers with the new lines
4. Write the file back in full

Content outside the marker lines is preserved byte-for-byte.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any, Mapping

from buildstamp.ivars import BEGIN_MARKER, END_MARKER, IVAR_INDENT
from buildstamp.ivars.literal import LiteralRenderer

logger = logging.getLogger(__name__)

_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_IVAR_LINE = re.compile(r"^\s*@([A-Za-z_][A-Za-z0-9_]*)\s*=\s*(.*?)\s*$")


class MalformedTemplateError(ValueError):
    """Raised when the begin/end ivar markers cannot be located."""


class InvalidKeyError(ValueError):
    """Raised when a metadata key is not a valid instance-variable name."""


def render_ivars(
    metadata: Mapping[str, Any],
    renderer: LiteralRenderer | None = None,
) -> str:
    """Render metadata as assignment lines, sorted by key.

    Args:
        metadata: Key/value pairs to stamp.
        renderer: Literal renderer. Defaults to ``LiteralRenderer()``.

    Returns:
        Newline-joined block without a trailing newline. Empty for an
        empty mapping.

    Raises:
        InvalidKeyError: If a key is not an identifier.
        UnrepresentableValueError: If a value has no literal form.
    """
    renderer = renderer or LiteralRenderer()
    # Keys are checked before sorting; mixed key types don't compare
    for key in metadata:
        if not isinstance(key, str) or not _IDENTIFIER.fullmatch(key):
            raise InvalidKeyError(f"Invalid metadata key: {key!r}")
    lines = []
    for key in sorted(metadata):
        lines.append(f"{IVAR_INDENT}@{key} = {renderer.render(metadata[key])}")
    return "\n".join(lines)


def _find_region(lines: list[str]) -> tuple[int, int] | None:
    """Return (begin, end) line indexes of the marker lines, or None."""
    begin = next(
        (i for i, line in enumerate(lines) if line.strip() == BEGIN_MARKER), None,
    )
    if begin is None:
        return None
    for j in range(begin + 1, len(lines)):
        if lines[j].strip() == END_MARKER:
            return begin, j
    return None


def splice_ivars(content: str, block: str) -> str:
    """Replace the text between the ivar markers with ``block``.

    Both marker lines are kept verbatim, including their indentation.

    Raises:
        MalformedTemplateError: If there is no begin marker followed by an
            end marker.
    """
    lines = content.splitlines(keepends=True)
    region = _find_region(lines)
    if region is None:
        raise MalformedTemplateError(
            f"Could not find '{BEGIN_MARKER}' followed by '{END_MARKER}'"
        )
    begin, end = region

    begin_line = lines[begin].rstrip("\r\n")
    middle = block + "\n" if block else ""
    return (
        "".join(lines[:begin])
        + begin_line + "\n"
        + middle
        + "".join(lines[end:])
    )


def read_ivars(content: str) -> dict[str, str]:
    """Parse the current marker block into ``{key: literal_source}``.

    Raises:
        MalformedTemplateError: If the markers are missing.
    """
    lines = content.splitlines()
    region = _find_region(lines)
    if region is None:
        raise MalformedTemplateError(
            f"Could not find '{BEGIN_MARKER}' followed by '{END_MARKER}'"
        )
    begin, end = region
    ivars = {}
    for line in lines[begin + 1:end]:
        match = _IVAR_LINE.match(line)
        if match:
            ivars[match.group(1)] = match.group(2)
    return ivars


def inject(
    metadata: Mapping[str, Any],
    target_path: Path | str,
    renderer: LiteralRenderer | None = None,
    strict: bool = True,
    dry_run: bool = False,
) -> None:
    """Stamp ``metadata`` into the ivar block of ``target_path``.

    The whole block is rendered before the file is written, so a bad key or
    value leaves the file untouched.

    Args:
        metadata: Key/value pairs to stamp.
        target_path: Template file containing the ivar markers.
        renderer: Literal renderer. Defaults to ``LiteralRenderer()``.
        strict: If False, a missing marker region logs a warning and leaves
            the file as-is instead of raising.
        dry_run: If True, don't write changes.

    Raises:
        FileNotFoundError: If the target file doesn't exist.
        MalformedTemplateError: If the markers are missing and ``strict``.
        InvalidKeyError: If a key is not an identifier.
        UnrepresentableValueError: If a value has no literal form.
    """
    path = Path(target_path)
    with open(path, encoding="utf-8", newline="") as f:
        content = f.read()

    block = render_ivars(metadata, renderer)

    try:
        new_content = splice_ivars(content, block)
    except MalformedTemplateError:
        if strict:
            raise
        logger.warning("No ivar markers in %s; leaving it unchanged", path)
        return

    if dry_run:
        return

    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(new_content)
    logger.debug("Wrote %d metadata entries to %s", len(metadata), path)
