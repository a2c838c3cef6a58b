"""Filesystem utility functions."""

from collections.abc import Iterator
from pathlib import Path


def ensure_exists(path: Path, what: str) -> None:
    """
    Check that a path exists, raise FileNotFoundError if not.

    Args:
        path: Path to check
        what: Description of what this path represents (for error message)

    Raises:
        FileNotFoundError: If path does not exist
    """
    if not path.exists():
        raise FileNotFoundError(f"Missing {what} at: {path}")


def iter_lines(path: Path) -> Iterator[tuple[int, str]]:
    """
    Yield (line_number, line) for every non-empty line of a UTF-8 text file.

    Line numbers are 1-based; trailing newlines are removed, other whitespace is kept
    (the tag normalizer trims it).
    """
    ensure_exists(path, "input file")
    with path.open("r", encoding="utf-8") as f:
        for lineno, line in enumerate(f, start=1):
            line = line.rstrip("\r\n")
            if line.strip():
                yield lineno, line
