"""Runtime configuration for a directory test run."""

from pathlib import Path

from pydantic import Field, field_validator

from tree_test_runner.models.base import Model

DEFAULT_TEST_EXECUTABLE = Path("obj/clang/rel/test")
DEFAULT_EXTENSION = ".chm"


class RunnerConfig(Model):
    """Which executable to run and which files to run it on."""

    test_executable: Path = Field(
        default=DEFAULT_TEST_EXECUTABLE,
        description="Test executable, invoked as '<test_executable> <file>'",
    )
    extension: str = Field(
        default=DEFAULT_EXTENSION,
        description="Extension of the files to test (e.g., '.chm')",
    )

    @field_validator("extension")
    @classmethod
    def _normalize_extension(cls, value: str) -> str:
        """Lower-case the extension and make sure it starts with a dot."""
        value = value.strip().lower()
        if value in {"", "."}:
            raise ValueError("extension must not be empty")
        return value if value.startswith(".") else f".{value}"
