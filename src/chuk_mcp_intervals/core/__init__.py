"""
Core interval algebra.

These are the mathematical invariants that everything else composes on:
- SimpleIntervalNumber: Unison through seventh, tagged by perfectability
- IntervalNumber: A simple number plus additional octaves
- IntervalQuality: Perfectable and imperfectable quality variants
- SimpleInterval: Quality + number within one octave
- Interval: A simple interval extended by whole octaves
- SignedInterval: An interval with a direction
"""

from chuk_mcp_intervals.core.errors import DomainError, DomainErrorKind, IntervalUnderflowError
from chuk_mcp_intervals.core.interval import Interval
from chuk_mcp_intervals.core.notation import (
    format_interval,
    parse_interval,
    parse_signed_interval,
    parse_simple_interval,
)
from chuk_mcp_intervals.core.numbers import IntervalNumber, SimpleIntervalNumber
from chuk_mcp_intervals.core.quality import (
    ImperfectableQuality,
    IntervalQuality,
    PerfectableQuality,
)
from chuk_mcp_intervals.core.signed_interval import SignedInterval
from chuk_mcp_intervals.core.simple_interval import SimpleInterval

__all__ = [
    # Errors
    "DomainError",
    "DomainErrorKind",
    "IntervalUnderflowError",
    # Numbers
    "SimpleIntervalNumber",
    "IntervalNumber",
    # Qualities
    "IntervalQuality",
    "PerfectableQuality",
    "ImperfectableQuality",
    # Intervals
    "SimpleInterval",
    "Interval",
    "SignedInterval",
    # Notation
    "parse_interval",
    "parse_signed_interval",
    "parse_simple_interval",
    "format_interval",
]
