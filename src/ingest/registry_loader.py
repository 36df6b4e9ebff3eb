"""Namespace registry loader.

This module reads the single target file that lists every valid
namespace and builds empty accumulators for each of them.
"""

from __future__ import annotations

import re
from pathlib import Path

from core.constants import REGISTRY_MIN_FIELD_COUNT
from core.errors import NsUsageAmbiguousTargetError, NsUsageParseError, NsUsageSourceError
from core.logging_config import get_logger
from core.types import NamespaceRecord, RegistrySource
from ingest.directory_listing import list_directory_files, read_lines

_LOGGER = get_logger(__name__)
_REGISTRY_ID = re.compile(r"[+-]?[0-9]+")


def load_registry(target_dir: Path) -> RegistrySource:
    """Load the registry file from the target directory.

    Args:
        target_dir: Directory expected to hold exactly one registry file.

    Returns:
        Registry container with one empty record per namespace.

    Raises:
        NsUsageSourceError: If the directory is unreadable or holds no file.
        NsUsageAmbiguousTargetError: If it holds more than one file.
        NsUsageParseError: If the filename or a line is malformed.
    """
    registry_path = _find_registry_file(target_dir)
    source = RegistrySource(registry_id=_parse_registry_id(registry_path))
    for line_number, line in enumerate(read_lines(registry_path), 1):
        record = _parse_registry_line(registry_path, line, line_number)
        if record.namespace_id in source.namespaces:
            _LOGGER.debug(
                "registry_namespace_overwritten",
                registry_path=str(registry_path),
                namespace_id=record.namespace_id,
                line_number=line_number,
            )
        source.namespaces[record.namespace_id] = record
    return source


def _find_registry_file(target_dir: Path) -> Path:
    files = list_directory_files(target_dir)
    if len(files) > 1:
        names = ", ".join(path.name for path in files)
        raise NsUsageAmbiguousTargetError(
            f"Target directory {target_dir} has more than 1 file ({names}). "
            "Keep exactly one registry file and retry."
        )
    if not files:
        raise NsUsageSourceError(
            f"Target directory {target_dir} has no registry file. "
            "Add one file named after the numeric registry id."
        )
    return files[0]


def _parse_registry_id(registry_path: Path) -> int:
    if _REGISTRY_ID.fullmatch(registry_path.name) is None:
        raise NsUsageParseError(
            f"Invalid registry filename '{registry_path.name}' in {registry_path.parent}: "
            "expected a numeric id. Rename the registry file and retry."
        )
    return int(registry_path.name)


def _parse_registry_line(registry_path: Path, line: str, line_number: int) -> NamespaceRecord:
    """Parse one ``id,name`` registry line.

    Args:
        registry_path: Registry file for context.
        line: Raw registry line.
        line_number: One-based line number.

    Returns:
        Empty namespace record.

    Raises:
        NsUsageParseError: If the line has fewer than two fields.
    """
    fields = line.split(",")
    if len(fields) < REGISTRY_MIN_FIELD_COUNT:
        raise NsUsageParseError(
            f"Invalid registry line at {registry_path}:{line_number}: "
            "expected 'id,name'. Fix the registry file and retry."
        )
    return NamespaceRecord(namespace_id=fields[0], name=fields[1])
