"""CSV join and aggregation.

This module streams ``.csv`` join files, matches each data row to a
registry namespace, and accumulates per-file counters with sizes
looked up in the size index.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from core.constants import (
    CSV_FILE_EXTENSION,
    CSV_HEADER_TOKEN,
    CSV_MIN_FIELD_COUNT,
    CSV_NAMESPACE_FIELD_INDEX,
    CSV_PATH_FIELD_INDEX,
)
from core.errors import NsUsageParseError, NsUsageSourceError
from core.logging_config import get_logger
from core.types import AggregationStats, RegistrySource, SizeIndex
from ingest.directory_listing import list_files_with_extension, strip_line_terminator

_LOGGER = get_logger(__name__)


@dataclass
class _RowCounters:
    header_rows: int = 0
    matched_rows: int = 0
    dropped_rows: int = 0


def aggregate_csv_dir(
    csv_dir: Path,
    registry: RegistrySource,
    size_index: SizeIndex,
) -> AggregationStats:
    """Join every CSV file in a directory against the registry.

    Args:
        csv_dir: Directory containing ``.csv`` files.
        registry: Registry whose namespace records are updated in place.
        size_index: Path to size lookup table.

    Returns:
        Row counters for the whole pass.

    Raises:
        NsUsageSourceError: If the directory or a file cannot be read.
        NsUsageParseError: If a data row has too few fields.
    """
    counters = _RowCounters()
    csv_paths = list_files_with_extension(csv_dir, CSV_FILE_EXTENSION)
    for csv_path in csv_paths:
        _LOGGER.info("csv_file_processing", csv_path=str(csv_path))
        aggregate_csv_file(csv_path, registry, size_index, counters)
    return AggregationStats(
        files_processed=len(csv_paths),
        header_rows=counters.header_rows,
        matched_rows=counters.matched_rows,
        dropped_rows=counters.dropped_rows,
    )


def aggregate_csv_file(
    csv_path: Path,
    registry: RegistrySource,
    size_index: SizeIndex,
    counters: _RowCounters | None = None,
) -> None:
    """Join one CSV file against the registry.

    Matched rows are recorded under the CSV file's own base name. Rows that
    reference a namespace missing from the registry are dropped.
    """
    counters = counters if counters is not None else _RowCounters()
    filename = csv_path.name
    for line_number, fields in _iter_csv_rows(csv_path):
        if fields[0] == CSV_HEADER_TOKEN:
            counters.header_rows += 1
            continue
        if len(fields) < CSV_MIN_FIELD_COUNT:
            raise NsUsageParseError(
                f"Invalid CSV row at {csv_path}:{line_number}: "
                f"expected at least {CSV_MIN_FIELD_COUNT} comma-separated fields, "
                f"got {len(fields)}. Fix the CSV file and retry."
            )
        namespace = registry.namespaces.get(fields[CSV_NAMESPACE_FIELD_INDEX])
        if namespace is None:
            counters.dropped_rows += 1
            continue
        namespace.record(filename, size_index.size_of(fields[CSV_PATH_FIELD_INDEX]))
        counters.matched_rows += 1


def _iter_csv_rows(csv_path: Path) -> Iterator[tuple[int, list[str]]]:
    """Yield comma-split rows with one-based line numbers.

    Raises:
        NsUsageSourceError: If the file cannot be opened or decoded.
    """
    try:
        with csv_path.open(encoding="utf-8", newline="\n") as csv_file:
            for line_number, line in enumerate(csv_file, 1):
                yield line_number, strip_line_terminator(line).split(",")
    except (OSError, UnicodeDecodeError) as error:
        raise NsUsageSourceError(
            f"Failed to read CSV file {csv_path}: {error}. "
            "Check file permissions and encoding and retry."
        ) from error
