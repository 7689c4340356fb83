"""
Tests for interval shorthand parsing and formatting.
"""

import pytest

from chuk_mcp_intervals.core import (
    DomainError,
    DomainErrorKind,
    Interval,
    SignedInterval,
    SimpleInterval,
    format_interval,
    parse_interval,
    parse_signed_interval,
    parse_simple_interval,
)


class TestParseInterval:
    """Tests for unsigned shorthand."""

    def test_simple(self) -> None:
        assert parse_interval("M3") == Interval(SimpleInterval.MAJOR_THIRD)
        assert parse_interval("P1") == Interval.PERFECT_UNISON
        assert parse_interval("m7") == Interval(SimpleInterval.MINOR_SEVENTH)

    def test_compound(self) -> None:
        assert parse_interval("P8") == Interval.PERFECT_OCTAVE
        assert parse_interval("P12") == Interval(SimpleInterval.PERFECT_FIFTH, 1)
        assert parse_interval("m10") == Interval(SimpleInterval.MINOR_THIRD, 1)
        assert parse_interval("P15") == Interval(SimpleInterval.PERFECT_UNISON, 2)

    def test_repeated_symbols(self) -> None:
        """Each repeated A or d adds a degree."""
        assert parse_interval("AA4") == Interval(SimpleInterval.augmented(4, 2))
        assert parse_interval("dd7") == Interval(SimpleInterval.diminished(7, 2))
        assert parse_interval("d1") == Interval(SimpleInterval.diminished(1))

    def test_whitespace(self) -> None:
        assert parse_interval("  M3 ") == Interval(SimpleInterval.MAJOR_THIRD)

    def test_rejects_descending(self) -> None:
        with pytest.raises(DomainError) as info:
            parse_interval("-M3")
        assert info.value.kind is DomainErrorKind.INVALID_NOTATION

    @pytest.mark.parametrize("text", ["", "M", "3", "X3", "M0", "Mm3", "p5", "M3b"])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(DomainError) as info:
            parse_interval(text)
        assert info.value.kind is DomainErrorKind.INVALID_NOTATION

    @pytest.mark.parametrize("text", ["P3", "M5", "m4", "P9", "M11"])
    def test_perfectability_mismatch(self, text: str) -> None:
        with pytest.raises(DomainError) as info:
            parse_interval(text)
        assert info.value.kind is DomainErrorKind.PERFECTABILITY_MISMATCH


class TestParseSignedInterval:
    """Tests for signed shorthand."""

    def test_signs(self) -> None:
        assert parse_signed_interval("-P5") == SignedInterval.negative(SimpleInterval.PERFECT_FIFTH)
        assert parse_signed_interval("+M2") == SignedInterval.positive(SimpleInterval.MAJOR_SECOND)
        assert parse_signed_interval("M2") == parse_signed_interval("+M2")

    def test_descending_unison_is_canonical(self) -> None:
        assert parse_signed_interval("-d1") == parse_signed_interval("A1")


class TestParseSimpleInterval:
    """Tests for shorthand restricted to one octave."""

    def test_simple(self) -> None:
        assert parse_simple_interval("A4") == SimpleInterval.AUGMENTED_FOURTH

    def test_rejects_compound(self) -> None:
        with pytest.raises(DomainError) as info:
            parse_simple_interval("P8")
        assert info.value.kind is DomainErrorKind.INVALID_NOTATION


class TestFormat:
    """Tests for formatting."""

    @pytest.mark.parametrize("text", ["P1", "m2", "A4", "d5", "M10", "-m6", "AA11", "dd7", "-P8"])
    def test_parse_then_format(self, text: str) -> None:
        assert format_interval(parse_signed_interval(text)) == text

    def test_formats_every_type(self) -> None:
        assert format_interval(SimpleInterval.MAJOR_SIXTH) == "M6"
        assert format_interval(Interval(SimpleInterval.MAJOR_SIXTH, 1)) == "M13"
        assert format_interval(SignedInterval.negative(SimpleInterval.MAJOR_SIXTH)) == "-M6"
