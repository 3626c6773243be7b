"""Invoke the external test executable on a single file."""

import asyncio
import logging
import signal
from pathlib import Path

from tree_test_runner.models.result import ProcessResult

logger = logging.getLogger(__name__)


async def run_test(test_executable: Path, path: Path) -> ProcessResult:
    """Run ``<test_executable> <path>`` and wait for it to finish.

    Both output streams are read fully into memory. There is no timeout: a
    test that never exits blocks the caller.

    Args:
        test_executable: Executable to run
        path: File passed as the sole argument

    Returns:
        Captured stdout/stderr, with ``error`` set if the process could not
        be started or exited with a non-zero status.

    """
    logger.debug("Running %s %s", test_executable, path)
    try:
        process = await asyncio.create_subprocess_exec(
            test_executable,
            path,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as exc:
        logger.debug("Failed to start %s: %s", test_executable, exc)
        return ProcessResult(error=str(exc))

    stdout, stderr = await process.communicate()
    logger.debug("%s exited with %s", test_executable, process.returncode)

    return ProcessResult(
        stdout=stdout,
        stderr=stderr,
        error=describe_returncode(process.returncode),
    )


def describe_returncode(returncode: int | None) -> str | None:
    """Describe a failing return code, or return None for success."""
    if returncode == 0:
        return None
    if returncode is None:
        return "process did not exit"
    if returncode < 0:
        return f"signal: {describe_signal(-returncode)}"
    return f"exit status {returncode}"


def describe_signal(signum: int) -> str:
    """Describe a signal the way the system does, e.g. ``killed``."""
    try:
        description = signal.strsignal(signum)
    except ValueError:
        description = None
    return description.lower() if description else str(signum)
