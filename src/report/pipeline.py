"""Usage report orchestration.

This module runs the registry, size index, CSV join, summarize, and
emit stages in order and logs each completed stage.
"""

from __future__ import annotations

from pathlib import Path

from core.config import UsageConfig
from core.logging_config import get_logger
from core.types import AggregationStats, RegistrySource, SizeIndex, UsageReport
from ingest.csv_aggregator import aggregate_csv_dir
from ingest.registry_loader import load_registry
from ingest.size_index import build_size_index
from report.report_writer import write_report
from report.summarizer import summarize

_LOGGER = get_logger(__name__)


class UsageReportRunner:
    """Single-run executor for the usage report pipeline."""

    def __init__(self, config: UsageConfig) -> None:
        self._config = config

    def run(self) -> Path:
        """Execute every stage and return the written report path."""
        registry = self._load_registry()
        size_index = self._build_size_index()
        stats = self._aggregate(registry, size_index)
        report = summarize(UsageReport(source=registry))
        output_path = write_report(report, self._config.output_path, self._config.vocabulary)
        _log_report_written(report, stats, output_path)
        return output_path

    def _load_registry(self) -> RegistrySource:
        registry = load_registry(self._config.target_dir)
        _LOGGER.info(
            "registry_loaded",
            registry_id=registry.registry_id,
            namespace_count=len(registry.namespaces),
        )
        return registry

    def _build_size_index(self) -> SizeIndex:
        size_index = build_size_index(self._config.list_dir)
        _LOGGER.info("size_index_built", path_count=len(size_index))
        return size_index

    def _aggregate(self, registry: RegistrySource, size_index: SizeIndex) -> AggregationStats:
        stats = aggregate_csv_dir(self._config.csv_dir, registry, size_index)
        _LOGGER.info(
            "csv_aggregated",
            files_processed=stats.files_processed,
            matched_rows=stats.matched_rows,
            dropped_rows=stats.dropped_rows,
        )
        return stats


def build_usage_report(config: UsageConfig) -> Path:
    """Run the usage report pipeline and write the YAML report.

    Args:
        config: Runtime configuration.

    Returns:
        Path of the written report.

    Raises:
        NsUsageSourceError: If an input directory or file cannot be read.
        NsUsageParseError: If an input line is malformed.
        NsUsageAmbiguousTargetError: If the target directory has several files.
        NsUsageWriteError: If the report cannot be written.
    """
    return UsageReportRunner(config).run()


def _log_report_written(
    report: UsageReport,
    stats: AggregationStats,
    output_path: Path,
) -> None:
    """Log pipeline completion with report totals."""
    _LOGGER.info(
        "report_written",
        output_path=str(output_path),
        registry_id=report.source.registry_id,
        namespace_count=len(report.source.namespaces),
        csv_rows=stats.matched_rows + stats.dropped_rows,
        total_bytes=report.source.total_bytes,
        total_bytes_str=report.source.total_bytes_str,
    )
