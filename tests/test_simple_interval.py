"""
Tests for simple intervals.

Tests cover:
- Construction and the perfectability rule
- Half steps and circle of fifths placement
- Addition, subtraction and inversion within the octave
- Simplest intervals for half step counts
"""

import pytest

from chuk_mcp_intervals.constants import TritoneQuality
from chuk_mcp_intervals.core import (
    DomainError,
    DomainErrorKind,
    ImperfectableQuality,
    Interval,
    IntervalQuality,
    PerfectableQuality,
    SimpleInterval,
)
from chuk_mcp_intervals.core import SimpleIntervalNumber as N

P1 = SimpleInterval.PERFECT_UNISON
m2 = SimpleInterval.MINOR_SECOND
M2 = SimpleInterval.MAJOR_SECOND
m3 = SimpleInterval.MINOR_THIRD
M3 = SimpleInterval.MAJOR_THIRD
P4 = SimpleInterval.PERFECT_FOURTH
A4 = SimpleInterval.AUGMENTED_FOURTH
d5 = SimpleInterval.DIMINISHED_FIFTH
P5 = SimpleInterval.PERFECT_FIFTH
m6 = SimpleInterval.MINOR_SIXTH
M6 = SimpleInterval.MAJOR_SIXTH
m7 = SimpleInterval.MINOR_SEVENTH
M7 = SimpleInterval.MAJOR_SEVENTH

NAMED = [P1, m2, M2, m3, M3, P4, A4, d5, P5, m6, M6, m7, M7]


def all_intervals(max_degree: int = 3) -> list[SimpleInterval]:
    """Every simple interval up to a degree of augmentation or diminution."""
    intervals = []
    for number in N:
        family = PerfectableQuality if number.is_perfectable() else ImperfectableQuality
        low = -max_degree if number.is_perfectable() else -max_degree - 1
        for offset in range(low, max_degree + 1):
            intervals.append(SimpleInterval(family(offset), number))
    return intervals


class TestConstruction:
    """Tests for building simple intervals."""

    def test_named_intervals(self) -> None:
        assert M3 == SimpleInterval(IntervalQuality.MAJOR, N.THIRD)
        assert P5 == SimpleInterval.perfect(5)
        assert m7 == SimpleInterval.minor(N.SEVENTH)
        assert A4 == SimpleInterval.augmented(4)
        assert d5 == SimpleInterval.diminished(5)

    @pytest.mark.parametrize(
        ("quality", "number"),
        [
            (IntervalQuality.MAJOR, N.FIFTH),
            (IntervalQuality.MINOR, N.UNISON),
            (IntervalQuality.PERFECT, N.THIRD),
            (PerfectableQuality.augmented(), N.SIXTH),
        ],
    )
    def test_perfectability_mismatch(self, quality: IntervalQuality, number: N) -> None:
        """Quality and number must share a family."""
        with pytest.raises(DomainError) as info:
            SimpleInterval(quality, number)
        assert info.value.kind is DomainErrorKind.PERFECTABILITY_MISMATCH

    def test_matching_families_always_succeed(self) -> None:
        for number in N:
            if number.is_perfectable():
                SimpleInterval(PerfectableQuality(-2), number)
            else:
                SimpleInterval(ImperfectableQuality(-2), number)

    def test_create_from_int(self) -> None:
        assert SimpleInterval.create(IntervalQuality.MAJOR, 6) == M6
        with pytest.raises(DomainError) as info:
            SimpleInterval.create(IntervalQuality.MAJOR, 8)
        assert info.value.kind is DomainErrorKind.INVALID_NUMBER

    def test_multiply_augmented(self) -> None:
        assert str(SimpleInterval.augmented(4, 2)) == "AA4"
        assert str(SimpleInterval.diminished(7, 2)) == "dd7"


class TestMeasurement:
    """Tests for half steps and circle of fifths indices."""

    def test_half_steps(self) -> None:
        assert [i.half_steps for i in NAMED] == [0, 1, 2, 3, 4, 5, 6, 6, 7, 8, 9, 10, 11]

    def test_half_steps_of_altered_unisons(self) -> None:
        """A diminished unison spans a negative number of half steps."""
        assert SimpleInterval.diminished(1).half_steps == -1
        assert SimpleInterval.augmented(1, 2).half_steps == 2

    def test_circle_of_fifths_index(self) -> None:
        assert P1.circle_of_fifths_index == 0
        assert P5.circle_of_fifths_index == 1
        assert M2.circle_of_fifths_index == 2
        assert P4.circle_of_fifths_index == -1
        assert m2.circle_of_fifths_index == -5
        assert A4.circle_of_fifths_index == 6
        assert d5.circle_of_fifths_index == -6

    def test_circle_of_fifths_round_trip(self) -> None:
        """Every integer is the index of exactly one simple interval."""
        for index in range(-30, 31):
            interval = SimpleInterval.from_circle_of_fifths_index(index)
            assert interval.circle_of_fifths_index == index

    def test_index_round_trip_from_interval(self) -> None:
        for interval in all_intervals():
            index = interval.circle_of_fifths_index
            assert SimpleInterval.from_circle_of_fifths_index(index) == interval


class TestInversion:
    """Tests for inversion within the octave."""

    def test_examples(self) -> None:
        assert P5.inversion() == P4
        assert M3.inversion() == m6
        assert A4.inversion() == d5
        assert P1.inversion() == P1
        assert m2.inversion() == M7

    def test_double_inversion(self) -> None:
        for interval in all_intervals():
            assert interval.inversion().inversion() == interval

    def test_negation_is_inversion(self) -> None:
        assert -P5 == P4
        assert -m3 == M6

    def test_inversion_completes_octave(self) -> None:
        """An interval plus its inversion is a unison, reached via the octave."""
        for interval in all_intervals():
            total, overflows = interval.plus_with_overflow(interval.inversion())
            assert total == P1
            assert overflows == (interval.number is not N.UNISON)


class TestArithmetic:
    """Tests for addition and subtraction."""

    def test_addition(self) -> None:
        assert M3 + m3 == P5
        assert P4 + P4 == m7
        assert M2 + M2 == M3
        assert m3 + m3 == d5
        assert P5 + P4 == P1

    def test_addition_overflow(self) -> None:
        """Overflow is reported when the numbers pass an octave."""
        assert M3.plus_with_overflow(m3) == (P5, False)
        assert M7.plus_with_overflow(M2) == (SimpleInterval.augmented(1), True)
        assert P5.plus_with_overflow(P5) == (M2, True)
        assert P5.plus_with_overflow(P4) == (P1, True)

    def test_unison_is_identity(self) -> None:
        for interval in all_intervals():
            assert interval + P1 == interval
            assert interval - P1 == interval

    def test_addition_is_commutative(self) -> None:
        for a in NAMED:
            for b in NAMED:
                assert a + b == b + a

    def test_half_steps_add(self) -> None:
        """Half steps of a sum match modulo the octave."""
        for a in NAMED:
            for b in NAMED:
                assert (a + b).half_steps % 12 == (a.half_steps + b.half_steps) % 12

    def test_subtraction(self) -> None:
        assert P5 - M3 == m3
        assert M3 - M3 == P1
        assert P1 - M2 == m7

    def test_subtraction_underflow(self) -> None:
        """Underflow is reported when the result falls below a unison."""
        assert P5.minus_with_underflow(M3) == (m3, False)
        assert P1.minus_with_underflow(M2) == (m7, True)
        assert M3.minus_with_underflow(M3) == (P1, False)

    def test_subtraction_undoes_addition(self) -> None:
        for a in NAMED:
            for b in NAMED:
                assert (a + b) - b == a

    def test_quality_shift(self) -> None:
        assert M3.with_quality_shifted_by(-1) == m3
        assert P5.with_quality_shifted_by(1) == SimpleInterval.augmented(5)

    def test_with_additional_octaves(self) -> None:
        assert M3.with_additional_octaves(1) == Interval(M3, 1)


class TestSimplestWithHalfSteps:
    """Tests for naming the simplest interval spanning some half steps."""

    def test_half_steps_preserved(self) -> None:
        for half_steps in range(12):
            for tritone in TritoneQuality:
                interval = SimpleInterval.simplest_with_half_steps(half_steps, tritone)
                assert interval.half_steps == half_steps

    def test_examples(self) -> None:
        assert SimpleInterval.simplest_with_half_steps(0, TritoneQuality.AUGMENTED) == P1
        assert SimpleInterval.simplest_with_half_steps(3, TritoneQuality.AUGMENTED) == m3
        assert SimpleInterval.simplest_with_half_steps(9, TritoneQuality.DIMINISHED) == M6

    def test_tritone(self) -> None:
        assert SimpleInterval.simplest_with_half_steps(6, TritoneQuality.AUGMENTED) == A4
        assert SimpleInterval.simplest_with_half_steps(6, TritoneQuality.DIMINISHED) == d5

    def test_try_without_tritone_choice(self) -> None:
        """The choice-free query returns None only for the tritone."""
        assert SimpleInterval.try_simplest_with_half_steps(6) is None
        assert SimpleInterval.try_simplest_with_half_steps(11) == M7
        for half_steps in (0, 1, 2, 3, 4, 5, 7, 8, 9, 10, 11):
            assert SimpleInterval.try_simplest_with_half_steps(half_steps) is not None

    @pytest.mark.parametrize("half_steps", [-1, 12])
    def test_out_of_range(self, half_steps: int) -> None:
        with pytest.raises(DomainError) as info:
            SimpleInterval.simplest_with_half_steps(half_steps, TritoneQuality.AUGMENTED)
        assert info.value.kind is DomainErrorKind.INVALID_ARGUMENT

    def test_tritone_requires_choice(self) -> None:
        with pytest.raises(DomainError) as info:
            SimpleInterval.simplest_with_half_steps(6, None)  # type: ignore[arg-type]
        assert info.value.kind is DomainErrorKind.INVALID_ARGUMENT


class TestDisplay:
    """Tests for string conversion."""

    def test_str(self) -> None:
        assert [str(i) for i in NAMED] == [
            "P1",
            "m2",
            "M2",
            "m3",
            "M3",
            "P4",
            "A4",
            "d5",
            "P5",
            "m6",
            "M6",
            "m7",
            "M7",
        ]

    def test_hashable(self) -> None:
        assert len(set(NAMED)) == len(NAMED)
