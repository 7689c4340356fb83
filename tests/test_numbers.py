"""
Tests for interval numbers.

Tests cover:
- SimpleIntervalNumber families, circle of fifths and conversions
- IntervalNumber octave folding
"""

import pytest

from chuk_mcp_intervals.constants import Perfectability, TritoneQuality
from chuk_mcp_intervals.core import DomainError, DomainErrorKind, IntervalNumber
from chuk_mcp_intervals.core import SimpleIntervalNumber as N
from chuk_mcp_intervals.core.numbers import check_half_steps


class TestSimpleIntervalNumber:
    """Tests for SimpleIntervalNumber enum."""

    def test_values(self) -> None:
        """Numbers carry their conventional values."""
        assert N.UNISON == 1
        assert N.FOURTH == 4
        assert N.SEVENTH == 7

    def test_perfectability(self) -> None:
        """Unison, fourth and fifth are perfectable; the rest are not."""
        perfectable = {n for n in N if n.is_perfectable()}
        assert perfectable == {N.UNISON, N.FOURTH, N.FIFTH}
        assert N.THIRD.perfectability is Perfectability.IMPERFECTABLE
        assert N.SECOND.is_imperfectable()

    def test_circle_of_fifths_index(self) -> None:
        """Numbers sit on the circle of fifths from fourth (-1) to seventh (5)."""
        order = sorted(N, key=lambda n: n.circle_of_fifths_index)
        assert order == [N.FOURTH, N.UNISON, N.FIFTH, N.SECOND, N.SIXTH, N.THIRD, N.SEVENTH]
        assert [n.circle_of_fifths_index for n in order] == [-1, 0, 1, 2, 3, 4, 5]

    def test_perfect_or_major_half_steps(self) -> None:
        """Half steps of the perfect or major interval of each number."""
        assert [n.perfect_or_major_half_steps for n in N] == [0, 2, 4, 5, 7, 9, 11]

    def test_inversion(self) -> None:
        """Numbers invert to 9 - n, except the unison."""
        assert N.UNISON.inversion is N.UNISON
        assert N.SECOND.inversion is N.SEVENTH
        assert N.THIRD.inversion is N.SIXTH
        assert N.FOURTH.inversion is N.FIFTH
        for n in N:
            assert n.inversion.inversion is n

    def test_from_value(self) -> None:
        """Conversion from int succeeds in range."""
        assert N.from_value(5) is N.FIFTH

    @pytest.mark.parametrize("value", [0, 8, -3])
    def test_from_value_out_of_range(self, value: int) -> None:
        """Conversion from int raises outside 1..7."""
        with pytest.raises(DomainError) as info:
            N.from_value(value)
        assert info.value.kind is DomainErrorKind.INVALID_NUMBER

    def test_try_from_value(self) -> None:
        """Fallible conversion returns None instead of raising."""
        assert N.try_from_value(3) is N.THIRD
        assert N.try_from_value(0) is None
        assert N.try_from_value(8) is None

    def test_from_circle_of_fifths_index(self) -> None:
        """Index lookup inverts circle_of_fifths_index."""
        for n in N:
            assert N.from_circle_of_fifths_index(n.circle_of_fifths_index) is n

    def test_from_circle_of_fifths_index_out_of_range(self) -> None:
        """Indices outside -1..5 do not name a number."""
        with pytest.raises(DomainError) as info:
            N.from_circle_of_fifths_index(6)
        assert info.value.kind is DomainErrorKind.INVALID_ARGUMENT

    def test_simplest_number_for_half_steps(self) -> None:
        """Simplest numbers for each half step count."""
        assert N.of_simplest_interval_with_half_steps(0) is N.UNISON
        assert N.of_simplest_interval_with_half_steps(3) is N.THIRD
        assert N.of_simplest_interval_with_half_steps(7) is N.FIFTH
        assert N.of_simplest_interval_with_half_steps(11) is N.SEVENTH

    def test_simplest_number_for_tritone(self) -> None:
        """The tritone needs a choice of spelling."""
        assert N.of_simplest_interval_with_half_steps(6) is None
        assert N.of_simplest_interval_with_half_steps(6, TritoneQuality.AUGMENTED) is N.FOURTH
        assert N.of_simplest_interval_with_half_steps(6, TritoneQuality.DIMINISHED) is N.FIFTH

    def test_str(self) -> None:
        """Numbers display as abbreviations."""
        assert str(N.UNISON) == "Unison"
        assert str(N.THIRD) == "3rd"


class TestCheckHalfSteps:
    """Tests for the half step range check."""

    def test_in_range(self) -> None:
        """0..11 is accepted."""
        for half_steps in range(12):
            check_half_steps(half_steps)

    @pytest.mark.parametrize("half_steps", [-1, 12])
    def test_out_of_range(self, half_steps: int) -> None:
        """Anything else raises."""
        with pytest.raises(DomainError) as info:
            check_half_steps(half_steps)
        assert info.value.kind is DomainErrorKind.INVALID_ARGUMENT


class TestIntervalNumber:
    """Tests for IntervalNumber."""

    def test_simple_value(self) -> None:
        """A number without octaves keeps its value."""
        number = IntervalNumber(N.SIXTH)
        assert number.value == 6
        assert number.is_simple()

    def test_compound_value(self) -> None:
        """Each additional octave adds 7."""
        assert IntervalNumber(N.THIRD, 1).value == 10
        assert IntervalNumber(N.UNISON, 1).value == 8
        assert IntervalNumber(N.FIFTH, 2).value == 19
        assert int(IntervalNumber(N.SECOND, 1)) == 9

    def test_from_value_folds_octaves(self) -> None:
        """Values above 7 fold into a base and octave count."""
        assert IntervalNumber.from_value(8) == IntervalNumber(N.UNISON, 1)
        assert IntervalNumber.from_value(10) == IntervalNumber(N.THIRD, 1)
        assert IntervalNumber.from_value(15) == IntervalNumber(N.UNISON, 2)
        assert IntervalNumber.from_value(7) == IntervalNumber(N.SEVENTH)

    def test_from_value_not_positive(self) -> None:
        """Zero and negative values raise INVALID_NUMBER."""
        with pytest.raises(DomainError) as info:
            IntervalNumber.from_value(0)
        assert info.value.kind is DomainErrorKind.INVALID_NUMBER
        assert IntervalNumber.try_from_value(-1) is None

    def test_negative_octaves(self) -> None:
        """Negative octave counts are rejected."""
        with pytest.raises(DomainError) as info:
            IntervalNumber(N.THIRD, -1)
        assert info.value.kind is DomainErrorKind.INVALID_ARGUMENT

    def test_perfectability_follows_base(self) -> None:
        """Compound numbers keep their base family."""
        assert IntervalNumber.from_value(11).perfectability is Perfectability.PERFECTABLE
        assert IntervalNumber.from_value(13).perfectability is Perfectability.IMPERFECTABLE
