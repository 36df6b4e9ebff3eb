"""Unit tests for namespace registry loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.errors import NsUsageAmbiguousTargetError, NsUsageParseError, NsUsageSourceError
from ingest.registry_loader import load_registry
from tests.fixture_paths import fixture_path


def test_load_registry_reads_id_and_namespaces() -> None:
    """Registry id should come from the filename and names from each line."""
    registry = load_registry(fixture_path("basic/target"))

    assert registry.registry_id == 100
    assert {key: record.name for key, record in registry.namespaces.items()} == {
        "1": "Alpha",
        "2": "Beta",
        "3": "Gamma",
    }


def test_load_registry_starts_with_empty_accumulators() -> None:
    """Every namespace should start without file stats or totals."""
    registry = load_registry(fixture_path("basic/target"))

    assert all(not record.file_stats for record in registry.namespaces.values())


def test_load_registry_raises_for_multiple_files() -> None:
    """More than one registry file should be a cardinality error."""
    with pytest.raises(NsUsageAmbiguousTargetError):
        load_registry(fixture_path("ambiguous_target/target"))


def test_load_registry_ignores_subdirectories(tmp_path: Path) -> None:
    """Subdirectories should not count as registry files."""
    (tmp_path / "archive").mkdir()
    (tmp_path / "7").write_text("1,Alpha\n", encoding="utf-8")

    registry = load_registry(tmp_path)

    assert registry.registry_id == 7


def test_load_registry_raises_for_empty_directory(tmp_path: Path) -> None:
    """An empty target directory should be a source error."""
    with pytest.raises(NsUsageSourceError):
        load_registry(tmp_path)


def test_load_registry_raises_for_non_numeric_filename(tmp_path: Path) -> None:
    """The registry filename must be a numeric id."""
    (tmp_path / "clients.txt").write_text("1,Alpha\n", encoding="utf-8")

    with pytest.raises(NsUsageParseError):
        load_registry(tmp_path)


def test_load_registry_raises_for_line_without_name(tmp_path: Path) -> None:
    """Lines need both an id and a name."""
    (tmp_path / "1").write_text("1,Alpha\n2\n", encoding="utf-8")

    with pytest.raises(NsUsageParseError, match=":2"):
        load_registry(tmp_path)


def test_load_registry_duplicate_id_overwrites(tmp_path: Path) -> None:
    """Later lines should replace earlier lines with the same id."""
    (tmp_path / "1").write_text("1,Alpha\n1,Alpha Renamed\n", encoding="utf-8")

    registry = load_registry(tmp_path)

    assert registry.namespaces["1"].name == "Alpha Renamed"


def test_load_registry_raises_for_blank_line(tmp_path: Path) -> None:
    """A blank line between entries is malformed input."""
    (tmp_path / "1").write_text("1,Alpha\n\n2,Beta\n", encoding="utf-8")

    with pytest.raises(NsUsageParseError, match=":2"):
        load_registry(tmp_path)


def test_load_registry_splits_lines_only_on_line_feed(tmp_path: Path) -> None:
    """Unicode line separators and CRLF endings should stay within one entry."""
    (tmp_path / "1").write_bytes("1,Alpha\u2028Team\r\n2,Beta\x85Ops\n".encode("utf-8"))

    registry = load_registry(tmp_path)

    assert {key: record.name for key, record in registry.namespaces.items()} == {
        "1": "Alpha\u2028Team",
        "2": "Beta\x85Ops",
    }
