"""YAML report emission.

This module converts the summarized report into a plain mapping with
deterministic key order and writes it atomically as YAML.
"""

from __future__ import annotations

import os
import re
import tempfile
from pathlib import Path
from typing import Any

from core.constants import FILE_STATS_KEY, SUM_KEY, SUM_STR_KEY
from core.errors import NsUsageDependencyError, NsUsageWriteError
from core.types import NamespaceRecord, ReportVocabulary, UsageReport

_DIGIT_RUN = re.compile(r"(\d+)")


def report_to_payload(report: UsageReport, vocabulary: ReportVocabulary) -> dict[str, Any]:
    """Build the serializable report mapping.

    Namespace ids and filenames are emitted in natural sort order so that
    identical inputs always produce identical output.

    Args:
        report: Summarized report.
        vocabulary: Key names for the root, id, and collection fields.

    Returns:
        Nested mapping ready for YAML serialization.
    """
    source = report.source
    namespaces = {
        namespace_id: _namespace_payload(source.namespaces[namespace_id])
        for namespace_id in sorted(source.namespaces, key=_natural_key)
    }
    return {
        vocabulary.root_key: {
            vocabulary.id_field: source.registry_id,
            vocabulary.collection_field: namespaces,
            SUM_KEY: source.total_bytes,
            SUM_STR_KEY: source.total_bytes_str,
        }
    }


def write_report(
    report: UsageReport,
    output_path: Path,
    vocabulary: ReportVocabulary,
) -> Path:
    """Serialize the report and replace the output file atomically.

    Args:
        report: Summarized report.
        output_path: Destination YAML path; an existing file is overwritten.
        vocabulary: Key names for the root, id, and collection fields.

    Returns:
        Written output path.

    Raises:
        NsUsageDependencyError: If PyYAML is unavailable.
        NsUsageWriteError: If serialization or the write fails.
    """
    body = render_report(report, vocabulary)
    temp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=output_path.parent,
            prefix=f".{output_path.name}.",
            suffix=".tmp",
            delete=False,
        ) as temp_file:
            temp_path = Path(temp_file.name)
            temp_file.write(body)
        os.replace(temp_path, output_path)
    except OSError as error:
        if temp_path is not None:
            temp_path.unlink(missing_ok=True)
        raise NsUsageWriteError(
            f"Failed to write report to {output_path}: {error}. "
            "Check directory permissions and free space and retry."
        ) from error
    return output_path


def render_report(report: UsageReport, vocabulary: ReportVocabulary) -> str:
    """Render the report as a YAML document string."""
    try:
        import yaml  # type: ignore[import-untyped]
    except ImportError as error:  # pragma: no cover - dependency failure
        raise NsUsageDependencyError(
            "YAML report output requires PyYAML. Install with 'pip install pyyaml'."
        ) from error
    payload = report_to_payload(report, vocabulary)
    try:
        return str(
            yaml.safe_dump(
                payload,
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=True,
            )
        )
    except yaml.YAMLError as error:
        raise NsUsageWriteError(f"Failed to serialize report as YAML: {error}.") from error


def _namespace_payload(namespace: NamespaceRecord) -> dict[str, Any]:
    file_stats = {
        filename: {
            "count": namespace.file_stats[filename].count,
            SUM_KEY: namespace.file_stats[filename].sum,
        }
        for filename in sorted(namespace.file_stats, key=_natural_key)
    }
    return {
        "id": namespace.namespace_id,
        "name": namespace.name,
        FILE_STATS_KEY: file_stats,
        SUM_KEY: namespace.total_bytes,
        SUM_STR_KEY: namespace.total_bytes_str,
    }


def _natural_key(value: str) -> tuple[tuple[int, int, str], ...]:
    """Sort key ordering digit runs numerically, e.g. ``"2"`` before ``"10"``."""
    return tuple(
        (0, int(part), part) if part.isdecimal() else (1, 0, part)
        for part in _DIGIT_RUN.split(value)
        if part
    )
