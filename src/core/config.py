"""Runtime configuration model for nsusage.

This module owns input/output path resolution and vocabulary validation.
Other modules consume a typed config object instead of raw paths.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from core.constants import (
    CSV_DIR_NAME,
    DEFAULT_VOCABULARY,
    LIST_DIR_NAME,
    OUTPUT_FILE_NAME,
    TARGET_DIR_NAME,
)
from core.errors import NsUsageConfigError
from core.types import REPORT_VOCABULARIES, ReportVocabulary


@dataclass(frozen=True)
class UsageConfig:
    """Validated runtime configuration.

    Attributes:
        work_dir: Directory holding the input folders and the report.
        target_dir: Directory containing the single registry file.
        list_dir: Directory containing ``.list`` size listings.
        csv_dir: Directory containing ``.csv`` join files.
        output_path: Report file path.
        vocabulary: Key names used at report emission.
    """

    work_dir: Path
    target_dir: Path
    list_dir: Path
    csv_dir: Path
    output_path: Path
    vocabulary: ReportVocabulary

    @classmethod
    def from_work_dir(
        cls,
        work_dir: str | Path,
        vocabulary: str = DEFAULT_VOCABULARY,
    ) -> "UsageConfig":
        """Build config rooted at a working directory.

        Args:
            work_dir: Directory containing ``target``, ``list`` and ``csv``.
            vocabulary: Report vocabulary preset name.

        Returns:
            A validated config object.

        Raises:
            NsUsageConfigError: If the vocabulary name is unknown.
        """
        root = Path(work_dir).expanduser().resolve()
        return cls(
            work_dir=root,
            target_dir=root / TARGET_DIR_NAME,
            list_dir=root / LIST_DIR_NAME,
            csv_dir=root / CSV_DIR_NAME,
            output_path=root / OUTPUT_FILE_NAME,
            vocabulary=_resolve_vocabulary(vocabulary),
        )

    @classmethod
    def from_cwd(cls) -> "UsageConfig":
        """Build config rooted at the current working directory."""
        return cls.from_work_dir(Path.cwd())


def _resolve_vocabulary(name: str) -> ReportVocabulary:
    """Look up a report vocabulary preset.

    Args:
        name: Preset name.

    Returns:
        Matching vocabulary.

    Raises:
        NsUsageConfigError: If no preset has that name.
    """
    try:
        return REPORT_VOCABULARIES[name]
    except KeyError as error:
        raise NsUsageConfigError(
            f"Unknown report vocabulary '{name}': "
            f"expected one of {sorted(REPORT_VOCABULARIES)}."
        ) from error
