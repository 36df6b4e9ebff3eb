"""nsusage exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each pipeline stage raises a specific error type for debuggability.
"""

from __future__ import annotations


class NsUsageError(Exception):
    """Base exception for all nsusage failures."""


class NsUsageConfigError(NsUsageError):
    """Raised for invalid runtime configuration."""


class NsUsageSourceError(NsUsageError):
    """Raised when an input directory or file cannot be accessed."""


class NsUsageParseError(NsUsageError):
    """Raised for malformed registry, listing, or CSV lines."""


class NsUsageAmbiguousTargetError(NsUsageError):
    """Raised when the target directory holds more than one registry file."""


class NsUsageWriteError(NsUsageError):
    """Raised for report serialization and output write failures."""


class NsUsageDependencyError(NsUsageError):
    """Raised when a runtime dependency is missing."""
