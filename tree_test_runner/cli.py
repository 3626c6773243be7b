"""CLI entry point for the directory test runner."""

import argparse
import asyncio
import io
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import NoReturn

from pydantic import ValidationError

from tree_test_runner.models.config import (
    DEFAULT_EXTENSION,
    DEFAULT_TEST_EXECUTABLE,
    RunnerConfig,
)
from tree_test_runner.path_filter import file_exists
from tree_test_runner.runner import run_test
from tree_test_runner.walker import RunnerFn, run_dir_tests


class UsageArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports usage errors on stdout with status 1."""

    def error(self, message: str) -> NoReturn:
        """Print usage and the error, then exit."""
        self.print_usage(sys.stdout)
        print(f"{self.prog}: error: {message}")
        sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = UsageArgumentParser(
        prog="tree-test-runner",
        description="Run a test executable on every matching file in a directory",
    )
    parser.add_argument("dir", type=Path, help="Directory to scan")
    parser.add_argument(
        "--test-exe",
        type=Path,
        default=DEFAULT_TEST_EXECUTABLE,
        help=f"Test executable to run on each file (default: {DEFAULT_TEST_EXECUTABLE})",
    )
    parser.add_argument(
        "--extension",
        default=DEFAULT_EXTENSION,
        help=f"Extension of the files to test (default: {DEFAULT_EXTENSION})",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log diagnostics to stderr",
    )
    return parser


async def run(root: Path, config: RunnerConfig, runner: RunnerFn = run_test) -> int:
    """Test the files under root and return exit code.

    Only a missing test executable is an error here. A scan halted by a
    failing test still exits with 0.
    """
    log = logging.getLogger("tree_test_runner")

    if not file_exists(config.test_executable):
        print(f"'{config.test_executable}' doesn't exist")
        return 1

    log.info(
        "Testing %s files under %s with %s",
        config.extension,
        root,
        config.test_executable,
    )
    summary = await run_dir_tests(root, config, runner)
    if summary.halted:
        log.info("Scan stopped at %s, rerun to continue", summary.failed)

    return 0


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        config = RunnerConfig(test_executable=args.test_exe, extension=args.extension)
    except ValidationError as exc:
        parser.error(str(exc))

    # File names that are not valid in the stdout encoding are written back
    # as their original bytes.
    if isinstance(sys.stdout, io.TextIOWrapper):
        sys.stdout.reconfigure(errors="surrogateescape")

    exit_code = asyncio.run(run(args.dir, config))
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
