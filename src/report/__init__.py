"""Report assembly.

This package rolls aggregated counters into totals and writes
the YAML usage report.
"""
