"""Input directory listing helpers.

This module lists input files in a deterministic order and maps
filesystem failures onto the nsusage error hierarchy.
"""

from __future__ import annotations

from pathlib import Path

from core.errors import NsUsageSourceError


def list_directory_files(directory: Path) -> list[Path]:
    """List regular files directly inside a directory, sorted by name.

    Args:
        directory: Directory to list.

    Returns:
        Sorted non-directory entries.

    Raises:
        NsUsageSourceError: If the directory is missing or unreadable.
    """
    if not directory.is_dir():
        raise NsUsageSourceError(
            f"Failed to list input directory {directory}: directory does not exist. "
            "Create it in the working directory and retry."
        )
    try:
        entries = sorted(directory.iterdir())
    except OSError as error:
        raise NsUsageSourceError(
            f"Failed to list input directory {directory}: {error}. "
            "Check directory permissions and retry."
        ) from error
    return [entry for entry in entries if not entry.is_dir()]


def list_files_with_extension(directory: Path, extension: str) -> list[Path]:
    """List regular files with an exact extension, sorted by name."""
    return [path for path in list_directory_files(directory) if path.suffix == extension]


def strip_line_terminator(line: str) -> str:
    """Drop a trailing line feed and one carriage return before it."""
    line = line.removesuffix("\n")
    return line.removesuffix("\r")


def read_lines(file_path: Path) -> list[str]:
    """Read a UTF-8 text file into lines without line terminators.

    Lines end only at a line feed; a final line feed does not start an
    empty line.

    Args:
        file_path: File to read.

    Returns:
        File lines.

    Raises:
        NsUsageSourceError: If the file cannot be read or decoded.
    """
    try:
        with file_path.open(encoding="utf-8", newline="\n") as text_file:
            return [strip_line_terminator(line) for line in text_file]
    except (OSError, UnicodeDecodeError) as error:
        raise NsUsageSourceError(
            f"Failed to read input file {file_path}: {error}. "
            "Check file permissions and encoding and retry."
        ) from error
