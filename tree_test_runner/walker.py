"""Walk a directory tree and test every matching file, stopping on failure."""

import logging
import os
import stat
from collections.abc import Awaitable, Callable, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import TypeAlias

from tree_test_runner.models.config import RunnerConfig
from tree_test_runner.models.result import ProcessResult, WalkSummary
from tree_test_runner.path_filter import is_matching_file
from tree_test_runner.runner import run_test

logger = logging.getLogger(__name__)

RunnerFn: TypeAlias = Callable[[Path, Path], Awaitable[ProcessResult]]


@dataclass(frozen=True, kw_only=True)
class WalkEntry:
    """A filesystem entry reached during the walk.

    Exactly one of ``info`` and ``error`` is set, except for a directory that
    could not be listed: it is reported twice, once with its ``info`` and
    once more with the listing ``error``.
    """

    path: Path
    info: os.stat_result | None = None
    error: OSError | None = None

    @property
    def is_regular(self) -> bool:
        """Whether the entry is a regular file (symlinks are not followed)."""
        return self.info is not None and stat.S_ISREG(self.info.st_mode)


def walk(root: Path) -> Iterator[WalkEntry]:
    """Yield root and everything below it, depth first in lexical order.

    Entries are ``lstat``'ed only when they are reached, so changes made to
    the tree while walking are seen the same way a recursive walk sees them.
    """
    # Paths still to visit; the next one is on top.
    pending = [root]

    while pending:
        path = pending.pop()
        try:
            info = os.lstat(path)
        except OSError as exc:
            yield WalkEntry(path=path, error=exc)
            continue

        yield WalkEntry(path=path, info=info)
        if not stat.S_ISDIR(info.st_mode):
            continue

        try:
            names = sorted(os.listdir(path))
        except OSError as exc:
            yield WalkEntry(path=path, info=info, error=exc)
            continue

        pending.extend(path / name for name in reversed(names))


async def run_dir_tests(
    root: Path,
    config: RunnerConfig,
    runner: RunnerFn = run_test,
) -> WalkSummary:
    """Test every matching file under root, halting on the first failure.

    Progress and captured test output are printed to stdout. Traversal
    errors are printed and skipped, except permission errors, which are
    skipped silently.

    Args:
        root: Directory to scan
        config: Test executable and target extension
        runner: Coroutine running one test, ``runner(test_executable, path)``

    Returns:
        The files tested, in order, and the file that failed if any

    """
    print(f"starting in '{root}'")
    tested: list[Path] = []

    for entry in walk(root):
        if entry.error is not None:
            if isinstance(entry.error, PermissionError):
                logger.debug("Skipping %s: %s", entry.path, entry.error)
            else:
                print(f"error on path: '{entry.path}', error: '{entry.error}'")
            continue

        if not is_matching_file(entry.path, entry.is_regular, config.extension):
            continue

        print(entry.path)
        tested.append(entry.path)
        result = await runner(config.test_executable, entry.path)

        if not result.ok:
            print(f"failed with '{result.error}' on '{entry.path}'")
            if result.stdout:
                print(f"stdout:\n'{_decode(result.stdout)}'")
            if result.stderr:
                print(f"stderr:\n'{_decode(result.stderr)}'")
            logger.info("Stopped after %d file(s): %s failed", len(tested), entry.path)
            return WalkSummary(root=root, tested=tested, failed=entry.path)

        if result.stdout:
            print(_decode(result.stdout))
        if result.stderr:
            print(f"stderr:\n'{_decode(result.stderr)}'")

    logger.info("Tested %d file(s) under %s", len(tested), root)
    return WalkSummary(root=root, tested=tested)


def _decode(data: bytes) -> str:
    return data.decode(errors="replace")
