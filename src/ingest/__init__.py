"""Input ingestion.

This package reads the registry, size listings, and CSV join files
and accumulates per-namespace file counters.
"""
