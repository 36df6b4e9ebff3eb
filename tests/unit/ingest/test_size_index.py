"""Unit tests for size listing parsing."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.errors import NsUsageParseError, NsUsageSourceError
from ingest.size_index import build_size_index, read_listing_file
from tests.fixture_paths import fixture_path


def test_build_size_index_reads_only_listing_files() -> None:
    """Index should load every .list file and skip other extensions."""
    index = build_size_index(fixture_path("basic/list"))

    assert dict(index.sizes) == {"/a/b/f.csv": 100, "/a/b/g.csv": 300, "/a/b/h.csv": 400}


def test_build_size_index_later_file_overwrites_path() -> None:
    """Later listing files should win for repeated paths."""
    index = build_size_index(fixture_path("basic/list"))

    assert index.size_of("/a/b/g.csv") == 300


def test_read_listing_file_splits_whitespace_runs(tmp_path: Path) -> None:
    """Tabs and repeated spaces should both separate fields."""
    list_path = tmp_path / "s3.list"
    list_path.write_text("2024-01-01\t12:00:00   42  /x/y.csv\n", encoding="utf-8")

    assert read_listing_file(list_path) == {"/x/y.csv": 42}


def test_read_listing_file_keeps_unicode_spaces_in_path(tmp_path: Path) -> None:
    """Only ASCII whitespace should separate fields."""
    list_path = tmp_path / "s3.list"
    list_path.write_text(
        "2024-01-01 12:00:00 100 /a/report\u3000final\u00a0v2.csv\n", encoding="utf-8"
    )

    assert read_listing_file(list_path) == {"/a/report\u3000final\u00a0v2.csv": 100}


def test_read_listing_file_strips_crlf_terminators(tmp_path: Path) -> None:
    """Windows line endings should not leak into the path field."""
    list_path = tmp_path / "s3.list"
    list_path.write_bytes(b"d t 1 /a.csv\r\nd t 2 /b.csv\r\n")

    assert read_listing_file(list_path) == {"/a.csv": 1, "/b.csv": 2}


def test_read_listing_file_raises_for_blank_line(tmp_path: Path) -> None:
    """A blank line has too few fields and should abort parsing."""
    list_path = tmp_path / "gap.list"
    list_path.write_text("d t 1 /a\n\nd t 2 /b\n", encoding="utf-8")

    with pytest.raises(NsUsageParseError, match="gap.list:2"):
        read_listing_file(list_path)


def test_read_listing_file_raises_for_short_line(tmp_path: Path) -> None:
    """Lines with fewer than four fields should abort parsing."""
    list_path = tmp_path / "short.list"
    list_path.write_text("2024-01-01 12:00:00 42\n", encoding="utf-8")

    with pytest.raises(NsUsageParseError, match="short.list:1"):
        read_listing_file(list_path)


def test_read_listing_file_raises_for_non_numeric_size(tmp_path: Path) -> None:
    """A non-integer size field should abort parsing."""
    list_path = tmp_path / "bad.list"
    list_path.write_text("2024-01-01 12:00:00 1.5 /x/y.csv\n", encoding="utf-8")

    with pytest.raises(NsUsageParseError):
        read_listing_file(list_path)


def test_read_listing_file_raises_for_out_of_range_size(tmp_path: Path) -> None:
    """Sizes beyond the 64-bit range should abort parsing."""
    list_path = tmp_path / "huge.list"
    list_path.write_text(f"d t {2**63} /x/y.csv\n", encoding="utf-8")

    with pytest.raises(NsUsageParseError):
        read_listing_file(list_path)


def test_build_size_index_raises_for_missing_directory(tmp_path: Path) -> None:
    """A missing listing directory should be a source error."""
    with pytest.raises(NsUsageSourceError):
        build_size_index(tmp_path / "list")
