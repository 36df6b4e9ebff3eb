"""Report summarization.

This module rolls per-file counters up into namespace and grand totals
and attaches human-readable size strings.
"""

from __future__ import annotations

from core.byte_format import format_bytes
from core.types import UsageReport


def summarize(report: UsageReport) -> UsageReport:
    """Compute namespace and grand totals in place.

    All namespace totals are summed before the grand total is formatted.
    Totals are recomputed from scratch on every call.

    Args:
        report: Report whose counters are complete.

    Returns:
        The same report with totals filled in.
    """
    source = report.source
    source.total_bytes = 0
    for namespace in source.namespaces.values():
        namespace.total_bytes = sum(stat.sum for stat in namespace.file_stats.values())
        source.total_bytes += namespace.total_bytes
    for namespace in source.namespaces.values():
        namespace.total_bytes_str = format_bytes(namespace.total_bytes)
    source.total_bytes_str = format_bytes(source.total_bytes)
    return report
