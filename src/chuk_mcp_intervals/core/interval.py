"""
Interval - a simple interval extended by whole octaves.

Addition and subtraction delegate to the simple interval and carry the
overflow/underflow it reports into the octave count. Intervals are unsigned:
subtracting a larger interval from a smaller one is an error here, and
SignedInterval is the type that can represent the result.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import ClassVar

from chuk_mcp_intervals.constants import OCTAVE_HALF_STEPS, ErrorMessages, Perfectability
from chuk_mcp_intervals.core.errors import IntervalUnderflowError, require_non_negative
from chuk_mcp_intervals.core.numbers import IntervalNumber
from chuk_mcp_intervals.core.quality import IntervalQuality
from chuk_mcp_intervals.core.simple_interval import SimpleInterval


@dataclass(frozen=True)
class Interval:
    """
    An ascending interval of any size.

    Examples:
        Interval(SimpleInterval.MAJOR_THIRD) = major third
        Interval(SimpleInterval.MAJOR_THIRD, 1) = major tenth
        Interval(SimpleInterval.PERFECT_UNISON, 1) = perfect octave

    Immutable and hashable.
    """

    base: SimpleInterval
    additional_octaves: int = 0

    PERFECT_UNISON: ClassVar[Interval]
    PERFECT_OCTAVE: ClassVar[Interval]

    def __post_init__(self) -> None:
        require_non_negative(
            self.additional_octaves,
            ErrorMessages.INVALID_OCTAVES.format(octaves=self.additional_octaves),
        )

    @property
    def number(self) -> IntervalNumber:
        return IntervalNumber(self.base.number, self.additional_octaves)

    @property
    def quality(self) -> IntervalQuality:
        return self.base.quality

    @property
    def perfectability(self) -> Perfectability:
        return self.base.perfectability

    @property
    def half_steps(self) -> int:
        return self.base.half_steps + self.additional_octaves * OCTAVE_HALF_STEPS

    def is_simple(self) -> bool:
        """Whether the interval is less than an octave."""
        return self.additional_octaves == 0

    @classmethod
    def from_quality_and_number(
        cls, quality: IntervalQuality, number: IntervalNumber | int
    ) -> Interval:
        """
        Combine a quality with a (possibly compound) number.

        Raises:
            DomainError: INVALID_NUMBER or PERFECTABILITY_MISMATCH
        """
        if not isinstance(number, IntervalNumber):
            number = IntervalNumber.from_value(number)
        return cls(SimpleInterval(quality, number.base), number.additional_octaves)

    def with_quality_shift(self, degree: int) -> Interval:
        return replace(self, base=self.base.with_quality_shifted_by(degree))

    def subtract_parts(self, other: Interval) -> tuple[SimpleInterval, int]:
        """
        Subtract without range checking.

        Returns the base difference and the octave difference, which may be
        negative when other is the larger interval.
        """
        base, underflows = self.base.minus_with_underflow(other.base)
        octaves = self.additional_octaves - other.additional_octaves
        if underflows:
            octaves -= 1
        return base, octaves

    def __add__(self, other: Interval) -> Interval:
        if not isinstance(other, Interval):
            return NotImplemented
        base, overflows = self.base.plus_with_overflow(other.base)
        octaves = self.additional_octaves + other.additional_octaves
        if overflows:
            octaves += 1
        return Interval(base, octaves)

    def __sub__(self, other: Interval) -> Interval:
        """
        Subtract a smaller interval.

        Raises:
            IntervalUnderflowError: if other is larger than this interval
        """
        if not isinstance(other, Interval):
            return NotImplemented
        base, octaves = self.subtract_parts(other)
        if octaves < 0:
            raise IntervalUnderflowError(ErrorMessages.UNDERFLOW)
        return Interval(base, octaves)

    def __str__(self) -> str:
        return f"{self.quality.symbol}{self.number.value}"


Interval.PERFECT_UNISON = Interval(SimpleInterval.PERFECT_UNISON)
Interval.PERFECT_OCTAVE = Interval(SimpleInterval.PERFECT_UNISON, 1)
