"""
Interval catalog - familiar names for intervals.

The built-in library ships common names (semitone, tritone, octave, ...);
projects can add or override entries with their own YAML files.
"""

from chuk_mcp_intervals.catalog.loader import IntervalCatalog

__all__ = [
    "IntervalCatalog",
]
