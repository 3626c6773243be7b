"""Select the files the test executable should be run on."""

import os
import stat
from pathlib import Path


def is_matching_file(path: Path, is_regular: bool, extension: str) -> bool:
    """Check if an entry is a regular file with the target extension.

    The extension is everything from the last dot of the name, so a file
    named ``.chm`` has extension ``.chm``. The comparison is case-insensitive:
    ``BOOK.CHM`` matches ``.chm``.
    """
    if not is_regular:
        return False
    return file_extension(path).lower() == extension.lower()


def file_extension(path: Path) -> str:
    """Return the name from its last dot onward, or "" without a dot."""
    name = path.name
    dot = name.rfind(".")
    return name[dot:] if dot >= 0 else ""


def file_exists(path: Path) -> bool:
    """Check if path exists and is a regular file (symlinks are followed)."""
    try:
        return stat.S_ISREG(os.stat(path).st_mode)
    except (OSError, ValueError):
        return False
