"""Public SDK surface for nsusage.

This module provides a stable import path for library users.
It re-exports the pipeline entry points and typed report models.
"""

from __future__ import annotations

from core.byte_format import format_bytes
from core.config import UsageConfig
from core.errors import (
    NsUsageAmbiguousTargetError,
    NsUsageError,
    NsUsageParseError,
    NsUsageSourceError,
    NsUsageWriteError,
)
from core.types import (
    FileStat,
    NamespaceRecord,
    RegistrySource,
    ReportVocabulary,
    SizeIndex,
    UsageReport,
)
from ingest.csv_aggregator import aggregate_csv_dir
from ingest.registry_loader import load_registry
from ingest.size_index import build_size_index
from report.pipeline import UsageReportRunner, build_usage_report
from report.report_writer import report_to_payload, write_report
from report.summarizer import summarize

__all__ = [
    "FileStat",
    "NamespaceRecord",
    "NsUsageAmbiguousTargetError",
    "NsUsageError",
    "NsUsageParseError",
    "NsUsageSourceError",
    "NsUsageWriteError",
    "RegistrySource",
    "ReportVocabulary",
    "SizeIndex",
    "UsageConfig",
    "UsageReport",
    "UsageReportRunner",
    "aggregate_csv_dir",
    "build_size_index",
    "build_usage_report",
    "format_bytes",
    "load_registry",
    "report_to_payload",
    "summarize",
    "write_report",
]
