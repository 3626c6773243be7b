"""Tests for runner configuration model."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from tree_test_runner.models.config import RunnerConfig


def test_defaults() -> None:
    """Defaults to the prebuilt test executable and .chm files."""
    config = RunnerConfig()

    assert config.test_executable == Path("obj/clang/rel/test")
    assert config.extension == ".chm"


@pytest.mark.parametrize(
    ("extension", "expected"),
    [
        (".chm", ".chm"),
        ("chm", ".chm"),
        (".CHM", ".chm"),
        (" txt ", ".txt"),
    ],
)
def test_normalizes_extension(extension: str, expected: str) -> None:
    """Extension is lower-cased and always starts with a dot."""
    assert RunnerConfig(extension=extension).extension == expected


@pytest.mark.parametrize("extension", ["", ".", "  "])
def test_rejects_empty_extension(extension: str) -> None:
    """An empty extension is a validation error."""
    with pytest.raises(ValidationError):
        RunnerConfig(extension=extension)


def test_is_frozen() -> None:
    """Configuration cannot be changed after creation."""
    config = RunnerConfig()

    with pytest.raises(ValidationError):
        config.extension = ".txt"  # type: ignore[misc]


def test_rejects_unknown_fields() -> None:
    """Unknown fields are rejected."""
    with pytest.raises(ValidationError):
        RunnerConfig(timeout=10)  # type: ignore[call-arg]
