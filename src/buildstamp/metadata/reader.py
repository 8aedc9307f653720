"""Load metadata mappings from YAML files and KEY=VALUE overrides."""

from pathlib import Path

import yaml


def load_metadata(path: Path | str) -> dict:
    """Read a YAML metadata file.

    Args:
        path: Path to the YAML file.

    Returns:
        Parsed metadata dict. An empty document yields an empty dict.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        yaml.YAMLError: If the YAML is malformed.
        ValueError: If the document is not a mapping.
    """
    metadata_path = Path(path)
    with open(metadata_path) as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{metadata_path} is not a YAML mapping")

    return data


def parse_assignments(assignments: list[str]) -> dict:
    """Parse ``KEY=VALUE`` strings, decoding each value as a YAML scalar.

    ``release=true`` yields ``True``; quote a value to keep it a string,
    e.g. ``version='"2.5"'``.
    """
    parsed = {}
    for item in assignments:
        key, sep, raw = item.partition("=")
        if not sep or not key.strip():
            raise ValueError(f"Expected KEY=VALUE, got: {item!r}")
        value = yaml.safe_load(raw) if raw.strip() else ""
        parsed[key.strip()] = value
    return parsed
