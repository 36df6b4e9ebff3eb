"""nsusage CLI entry point.

This module runs the usage report pipeline against the current
working directory and maps failures onto a non-zero exit code.
"""

from __future__ import annotations

import argparse
from typing import Sequence

from core.config import UsageConfig
from core.constants import CSV_DIR_NAME, LIST_DIR_NAME, OUTPUT_FILE_NAME, TARGET_DIR_NAME
from core.errors import NsUsageError
from core.logging_config import get_logger
from report.pipeline import build_usage_report

_LOGGER = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    return argparse.ArgumentParser(
        prog="nsusage",
        description=(
            f"Aggregate per-namespace file sizes from ./{TARGET_DIR_NAME}, "
            f"./{LIST_DIR_NAME} and ./{CSV_DIR_NAME} into ./{OUTPUT_FILE_NAME}"
        ),
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the nsusage CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    build_parser().parse_args(argv)
    try:
        config = UsageConfig.from_cwd()
        output_path = build_usage_report(config)
    except NsUsageError as error:
        _LOGGER.error("report_failed", error_type=type(error).__name__, error=str(error))
        return 1
    print(output_path)
    return 0
