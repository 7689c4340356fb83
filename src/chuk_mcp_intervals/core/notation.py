"""
Interval shorthand - parsing and formatting.

    P1  m2  M2  m3  M3  P4  A4  d5  P5  m6  M6  m7  M7  P8  M10 ...

Augmented and diminished qualities repeat their symbol per degree (AA4, dd7).
Signed intervals take a leading '+' or '-'.
"""

from __future__ import annotations

import re

from chuk_mcp_intervals.constants import ErrorMessages
from chuk_mcp_intervals.core.errors import DomainError, DomainErrorKind
from chuk_mcp_intervals.core.interval import Interval
from chuk_mcp_intervals.core.numbers import IntervalNumber
from chuk_mcp_intervals.core.quality import (
    ImperfectableQuality,
    IntervalQuality,
    PerfectableQuality,
)
from chuk_mcp_intervals.core.signed_interval import SignedInterval
from chuk_mcp_intervals.core.simple_interval import SimpleInterval

_INTERVAL_PATTERN = re.compile(r"^(?P<sign>[+-]?)(?P<quality>P|M|m|A+|d+)(?P<number>\d+)$")


def _invalid(text: str) -> DomainError:
    return DomainError(
        DomainErrorKind.INVALID_NOTATION,
        ErrorMessages.INVALID_INTERVAL_NOTATION.format(text=text),
    )


def _parse_quality(symbol: str, number: IntervalNumber) -> IntervalQuality:
    """Read a quality symbol in the family of the given number."""
    perfectable = number.base.is_perfectable()
    if symbol == "P":
        return IntervalQuality.PERFECT
    if symbol == "M":
        return IntervalQuality.MAJOR
    if symbol == "m":
        return IntervalQuality.MINOR
    degree = len(symbol)
    if symbol[0] == "A":
        return (
            PerfectableQuality.augmented(degree)
            if perfectable
            else ImperfectableQuality.augmented(degree)
        )
    return (
        PerfectableQuality.diminished(degree)
        if perfectable
        else ImperfectableQuality.diminished(degree)
    )


def parse_signed_interval(text: str) -> SignedInterval:
    """
    Parse shorthand like 'M3', '+P5' or '-m10'.

    Raises:
        DomainError: INVALID_NOTATION for unreadable text,
            PERFECTABILITY_MISMATCH for e.g. 'P3' or 'M5'
    """
    match = _INTERVAL_PATTERN.match(text.strip())
    if match is None:
        raise _invalid(text)

    number = IntervalNumber.try_from_value(int(match.group("number")))
    if number is None:
        raise _invalid(text)

    quality = _parse_quality(match.group("quality"), number)
    interval = Interval(SimpleInterval(quality, number.base), number.additional_octaves)
    return SignedInterval(interval, -1 if match.group("sign") == "-" else 1)


def parse_interval(text: str) -> Interval:
    """
    Parse unsigned shorthand like 'M3' or 'P12'.

    Raises:
        DomainError: INVALID_NOTATION (including a leading '-'),
            PERFECTABILITY_MISMATCH
    """
    if text.strip().startswith("-"):
        raise _invalid(text)
    return parse_signed_interval(text).interval


def parse_simple_interval(text: str) -> SimpleInterval:
    """
    Parse shorthand for an interval below an octave, like 'm7'.

    Raises:
        DomainError: INVALID_NOTATION if the interval is an octave or larger
    """
    interval = parse_interval(text)
    if not interval.is_simple():
        raise _invalid(text)
    return interval.base


def format_interval(interval: SimpleInterval | Interval | SignedInterval) -> str:
    """Render any interval type as shorthand."""
    return str(interval)
