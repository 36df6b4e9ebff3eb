"""Pytest configuration for repository test runs.

``src`` and the project root are put on ``sys.path`` by the pytest
``pythonpath`` setting in pyproject.toml.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.fixture_paths import copy_fixture_tree


@pytest.fixture
def basic_work_dir(tmp_path: Path) -> Path:
    """Writable copy of the ``basic`` input tree with target, list and csv folders."""
    return copy_fixture_tree("basic", tmp_path / "work")
