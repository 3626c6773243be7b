"""Models for test execution results."""

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, kw_only=True)
class ProcessResult:
    """Captured output and outcome of one test executable invocation.

    ``error`` is None when the process ran and exited with status zero,
    otherwise it describes why the test failed.
    """

    stdout: bytes = b""
    stderr: bytes = b""
    error: str | None = None

    @property
    def ok(self) -> bool:
        """Whether the test passed."""
        return self.error is None


@dataclass(frozen=True, kw_only=True)
class WalkSummary:
    """Outcome of a directory walk."""

    root: Path
    tested: Sequence[Path]
    failed: Path | None = None

    @property
    def halted(self) -> bool:
        """Whether the walk stopped early on a failed test."""
        return self.failed is not None
