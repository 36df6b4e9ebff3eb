"""Size listing reader.

This module parses whitespace-delimited ``.list`` files into a
read-only path to byte size lookup table.
"""

from __future__ import annotations

import re
from pathlib import Path

from core.constants import (
    INT64_MAX,
    INT64_MIN,
    LIST_FILE_EXTENSION,
    LIST_MIN_FIELD_COUNT,
    LIST_PATH_FIELD_INDEX,
    LIST_SIZE_FIELD_INDEX,
)
from core.errors import NsUsageParseError
from core.types import SizeIndex
from ingest.directory_listing import list_files_with_extension, read_lines

_WHITESPACE_RUN = re.compile(r"[\t\n\f\r ]+")
_BASE10_INTEGER = re.compile(r"[+-]?[0-9]+")


def build_size_index(list_dir: Path) -> SizeIndex:
    """Build the size index from every listing file in a directory.

    Args:
        list_dir: Directory containing ``.list`` files.

    Returns:
        Path to size lookup table; later entries win for repeated paths.

    Raises:
        NsUsageSourceError: If the directory or a file cannot be read.
        NsUsageParseError: If a line is malformed.
    """
    sizes: dict[str, int] = {}
    for list_path in list_files_with_extension(list_dir, LIST_FILE_EXTENSION):
        sizes.update(read_listing_file(list_path))
    return SizeIndex(sizes)


def read_listing_file(list_path: Path) -> dict[str, int]:
    """Parse one listing file into a path to size mapping."""
    sizes: dict[str, int] = {}
    for line_number, line in enumerate(read_lines(list_path), 1):
        path, size = _parse_listing_line(list_path, line, line_number)
        sizes[path] = size
    return sizes


def _parse_listing_line(list_path: Path, line: str, line_number: int) -> tuple[str, int]:
    """Split a listing line and extract its path and size fields.

    Args:
        list_path: Parent file path for context.
        line: Raw listing line.
        line_number: One-based line number.

    Returns:
        Path and size pair.

    Raises:
        NsUsageParseError: If fields are missing or the size is invalid.
    """
    fields = _WHITESPACE_RUN.split(line)
    if len(fields) < LIST_MIN_FIELD_COUNT:
        raise NsUsageParseError(
            f"Invalid listing line at {list_path}:{line_number}: "
            f"expected at least {LIST_MIN_FIELD_COUNT} whitespace-separated fields, "
            f"got {len(fields)}. Fix the listing file and retry."
        )
    size = _parse_size(list_path, fields[LIST_SIZE_FIELD_INDEX], line_number)
    return fields[LIST_PATH_FIELD_INDEX], size


def _parse_size(list_path: Path, raw_size: str, line_number: int) -> int:
    if _BASE10_INTEGER.fullmatch(raw_size) is None:
        raise NsUsageParseError(
            f"Invalid size '{raw_size}' at {list_path}:{line_number}: "
            "expected a base-10 integer. Fix the listing file and retry."
        )
    size = int(raw_size)
    if not INT64_MIN <= size <= INT64_MAX:
        raise NsUsageParseError(
            f"Invalid size '{raw_size}' at {list_path}:{line_number}: "
            "value is outside the 64-bit integer range."
        )
    return size
