"""Fixtures for integration tests running real child processes."""

from pathlib import Path
from typing import Protocol

import pytest


class WriteScriptFn(Protocol):
    """Protocol for test executable creation function."""

    def __call__(self, body: str, *, name: str = "test") -> Path:
        """Create an executable shell script and return its path."""


class CreateFilesFn(Protocol):
    """Protocol for directory tree creation function."""

    def __call__(self, *names: str) -> Path:
        """Create empty files and return the directory containing them."""


@pytest.fixture
def write_script(tmp_path: Path) -> WriteScriptFn:
    """Return a function to create executable test scripts."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()

    def _write(body: str, *, name: str = "test") -> Path:
        script = bin_dir / name
        script.write_text(f"#!/bin/sh\n{body}\n")
        script.chmod(0o755)
        return script

    return _write


@pytest.fixture
def create_files(tmp_path: Path) -> CreateFilesFn:
    """Return a function to create files under a scan directory."""
    root = tmp_path / "docs"
    root.mkdir()

    def _create(*names: str) -> Path:
        for name in names:
            path = root / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.touch()
        return root

    return _create
