"""Shared typed models.

This module defines the size index, registry accumulators, and report
root used by the ingest and report layers to keep interfaces explicit.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class SizeIndex:
    """Read-only lookup table from storage path to size in bytes.

    Attributes:
        sizes: Path to byte size mapping.
    """

    sizes: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "sizes", MappingProxyType(dict(self.sizes)))

    def size_of(self, path: str) -> int:
        """Return the recorded size for a path, or 0 when unknown."""
        return self.sizes.get(path, 0)

    def __len__(self) -> int:
        return len(self.sizes)


@dataclass
class FileStat:
    """Accumulated counters for one (namespace, filename) pair.

    Attributes:
        count: Number of matching CSV rows.
        sum: Cumulative byte size of matched paths.
    """

    count: int = 0
    sum: int = 0

    def add(self, size: int) -> None:
        """Record one matched row contributing ``size`` bytes."""
        self.count += 1
        self.sum += size


@dataclass
class NamespaceRecord:
    """Aggregation bucket for one registry namespace.

    Attributes:
        namespace_id: Identifier from the registry file.
        name: Display name from the registry file.
        file_stats: Per-filename counters.
        total_bytes: Rolled-up byte sum over all file stats.
        total_bytes_str: Human-readable form of total_bytes.
    """

    namespace_id: str
    name: str
    file_stats: dict[str, FileStat] = field(default_factory=dict)
    total_bytes: int = 0
    total_bytes_str: str = ""

    def record(self, filename: str, size: int) -> None:
        """Add one matched row under ``filename``."""
        file_stat = self.file_stats.setdefault(filename, FileStat())
        file_stat.add(size)


@dataclass
class RegistrySource:
    """Registry-derived container holding every known namespace.

    Attributes:
        registry_id: Numeric id parsed from the registry filename.
        namespaces: Namespace id to accumulator mapping.
        total_bytes: Grand total over all namespaces.
        total_bytes_str: Human-readable form of total_bytes.
    """

    registry_id: int
    namespaces: dict[str, NamespaceRecord] = field(default_factory=dict)
    total_bytes: int = 0
    total_bytes_str: str = ""


@dataclass
class UsageReport:
    """Report root holding the single registry container."""

    source: RegistrySource


@dataclass(frozen=True)
class AggregationStats:
    """Counters describing one CSV join pass.

    Attributes:
        files_processed: Number of CSV files read.
        header_rows: Rows skipped because they carried the header token.
        matched_rows: Rows joined to a registry namespace.
        dropped_rows: Rows dropped for an unknown namespace id.
    """

    files_processed: int = 0
    header_rows: int = 0
    matched_rows: int = 0
    dropped_rows: int = 0


@dataclass(frozen=True)
class ReportVocabulary:
    """Key names used when emitting the report root.

    Attributes:
        root_key: Top-level mapping key.
        id_field: Key holding the registry id.
        collection_field: Key holding the namespace mapping.
    """

    root_key: str
    id_field: str
    collection_field: str


REPORT_VOCABULARIES: Mapping[str, ReportVocabulary] = MappingProxyType(
    {
        "source": ReportVocabulary(
            root_key="source", id_field="source_id", collection_field="names"
        ),
        "client": ReportVocabulary(
            root_key="client", id_field="client_id", collection_field="namespaces"
        ),
    }
)
