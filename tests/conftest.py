"""Shared test fixtures for buildstamp."""

import shutil
from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def template(tmp_path):
    """A writable copy of the build_metadata.rb fixture."""
    target = tmp_path / "lib" / "bundler" / "build_metadata.rb"
    target.parent.mkdir(parents=True)
    shutil.copy(FIXTURES / "build_metadata.rb", target)
    return target
