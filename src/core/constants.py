"""Core constants used across nsusage modules.

This module centralizes directory names, extensions, and report keys.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

TARGET_DIR_NAME = "target"
LIST_DIR_NAME = "list"
CSV_DIR_NAME = "csv"
OUTPUT_FILE_NAME = "result.yaml"
LIST_FILE_EXTENSION = ".list"
CSV_FILE_EXTENSION = ".csv"
CSV_HEADER_TOKEN = "id"
LIST_MIN_FIELD_COUNT = 4
LIST_SIZE_FIELD_INDEX = 2
LIST_PATH_FIELD_INDEX = 3
REGISTRY_MIN_FIELD_COUNT = 2
CSV_MIN_FIELD_COUNT = 3
CSV_NAMESPACE_FIELD_INDEX = 1
CSV_PATH_FIELD_INDEX = 2
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
DEFAULT_VOCABULARY = "source"
FILE_STATS_KEY = "file_sumallys"
SUM_KEY = "sum"
SUM_STR_KEY = "sum_str"
