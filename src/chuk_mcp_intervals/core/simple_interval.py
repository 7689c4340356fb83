"""
Simple interval - a quality paired with a number, spanning less than an octave.

Arithmetic runs on the circle of fifths. Every simple interval has an index

    number.circle_of_fifths_index + 7 * quality.offset

so a perfect fifth is 1, a major second 2, a minor second -5. Adding two
intervals adds their number indices and carries whole trips round the circle
into the quality offset, which reproduces the usual interval-addition rules
(M3 + m3 = P5, P4 + P4 = m7) without any tables.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from chuk_mcp_intervals.constants import (
    SIMPLE_NUMBER_COUNT,
    ErrorMessages,
    Perfectability,
    TritoneQuality,
)
from chuk_mcp_intervals.core.errors import DomainError, DomainErrorKind
from chuk_mcp_intervals.core.numbers import SimpleIntervalNumber
from chuk_mcp_intervals.core.quality import (
    ImperfectableQuality,
    IntervalQuality,
    PerfectableQuality,
)

if TYPE_CHECKING:
    from chuk_mcp_intervals.core.interval import Interval


@dataclass(frozen=True)
class SimpleInterval:
    """
    An interval of less than one octave.

    The quality and number must belong to the same perfectability family:
    there is no major fifth and no perfect third.

    Immutable and hashable.
    """

    quality: IntervalQuality
    number: SimpleIntervalNumber

    # Named intervals (class constants)
    PERFECT_UNISON: ClassVar[SimpleInterval]
    MINOR_SECOND: ClassVar[SimpleInterval]
    MAJOR_SECOND: ClassVar[SimpleInterval]
    MINOR_THIRD: ClassVar[SimpleInterval]
    MAJOR_THIRD: ClassVar[SimpleInterval]
    PERFECT_FOURTH: ClassVar[SimpleInterval]
    AUGMENTED_FOURTH: ClassVar[SimpleInterval]
    DIMINISHED_FIFTH: ClassVar[SimpleInterval]
    PERFECT_FIFTH: ClassVar[SimpleInterval]
    MINOR_SIXTH: ClassVar[SimpleInterval]
    MAJOR_SIXTH: ClassVar[SimpleInterval]
    MINOR_SEVENTH: ClassVar[SimpleInterval]
    MAJOR_SEVENTH: ClassVar[SimpleInterval]

    def __post_init__(self) -> None:
        if self.quality.perfectability is not self.number.perfectability:
            raise DomainError(
                DomainErrorKind.PERFECTABILITY_MISMATCH,
                ErrorMessages.PERFECTABILITY_MISMATCH.format(
                    quality=self.quality,
                    perfectability=self.number.perfectability.value,
                    number=self.number.abbreviation,
                ),
            )

    @property
    def perfectability(self) -> Perfectability:
        return self.number.perfectability

    @property
    def half_steps(self) -> int:
        """Half steps spanned (negative for a diminished unison)."""
        return self.number.perfect_or_major_half_steps + self.quality.offset

    @property
    def circle_of_fifths_index(self) -> int:
        """Position on the circle of fifths relative to a perfect unison."""
        return self.number.circle_of_fifths_index + self.quality.offset * SIMPLE_NUMBER_COUNT

    def is_perfectable(self) -> bool:
        return self.number.is_perfectable()

    def is_imperfectable(self) -> bool:
        return self.number.is_imperfectable()

    def is_augmented(self) -> bool:
        return self.quality.is_augmented()

    def is_diminished(self) -> bool:
        return self.quality.is_diminished()

    # --- Factories ---

    @classmethod
    def create(cls, quality: IntervalQuality, number: SimpleIntervalNumber | int) -> SimpleInterval:
        """
        Combine a quality and a number.

        The number may be given as a plain integer 1..7.

        Raises:
            DomainError: INVALID_NUMBER or PERFECTABILITY_MISMATCH
        """
        if not isinstance(number, SimpleIntervalNumber):
            number = SimpleIntervalNumber.from_value(number)
        return cls(quality, number)

    @classmethod
    def perfect(cls, number: SimpleIntervalNumber | int) -> SimpleInterval:
        return cls.create(IntervalQuality.PERFECT, number)

    @classmethod
    def major(cls, number: SimpleIntervalNumber | int) -> SimpleInterval:
        return cls.create(IntervalQuality.MAJOR, number)

    @classmethod
    def minor(cls, number: SimpleIntervalNumber | int) -> SimpleInterval:
        return cls.create(IntervalQuality.MINOR, number)

    @classmethod
    def augmented(cls, number: SimpleIntervalNumber | int, degree: int = 1) -> SimpleInterval:
        """Augmented interval of either family."""
        if not isinstance(number, SimpleIntervalNumber):
            number = SimpleIntervalNumber.from_value(number)
        if number.is_perfectable():
            return cls(PerfectableQuality.augmented(degree), number)
        return cls(ImperfectableQuality.augmented(degree), number)

    @classmethod
    def diminished(cls, number: SimpleIntervalNumber | int, degree: int = 1) -> SimpleInterval:
        """Diminished interval of either family."""
        if not isinstance(number, SimpleIntervalNumber):
            number = SimpleIntervalNumber.from_value(number)
        if number.is_perfectable():
            return cls(PerfectableQuality.diminished(degree), number)
        return cls(ImperfectableQuality.diminished(degree), number)

    @classmethod
    def from_circle_of_fifths_index(cls, index: int) -> SimpleInterval:
        """
        Get the simple interval at a position on the circle of fifths.

        Inverse of circle_of_fifths_index for every integer.
        """
        # Shift by 1 so the perfect fourth (-1) lands on remainder 0
        quality_offset, remainder = divmod(index + 1, SIMPLE_NUMBER_COUNT)
        number = SimpleIntervalNumber.from_circle_of_fifths_index(remainder - 1)
        quality = IntervalQuality.for_perfectability(number.perfectability, quality_offset)
        return cls(quality, number)

    @classmethod
    def simplest_with_half_steps(cls, half_steps: int, tritone: TritoneQuality) -> SimpleInterval:
        """
        Get the simplest interval spanning 0..11 half steps.

        Perfect, major or minor wherever possible; six half steps becomes an
        augmented fourth or a diminished fifth according to tritone.

        Raises:
            DomainError: INVALID_ARGUMENT if half_steps is outside 0..11, or
                if six half steps is given without a tritone quality
        """
        quality = IntervalQuality.of_simplest_interval_with_half_steps(half_steps, tritone)
        number = SimpleIntervalNumber.of_simplest_interval_with_half_steps(half_steps, tritone)
        if quality is None or number is None:
            raise DomainError(
                DomainErrorKind.INVALID_ARGUMENT,
                ErrorMessages.TRITONE_REQUIRED.format(tritone=tritone),
            )
        return cls(quality, number)

    @classmethod
    def try_simplest_with_half_steps(cls, half_steps: int) -> SimpleInterval | None:
        """
        Get the simplest interval spanning 0..11 half steps.

        Returns None for six half steps, which has no unique answer.
        """
        quality = IntervalQuality.of_simplest_interval_with_half_steps(half_steps)
        number = SimpleIntervalNumber.of_simplest_interval_with_half_steps(half_steps)
        if quality is None or number is None:
            return None
        return cls(quality, number)

    # --- Computation ---

    def inversion(self) -> SimpleInterval:
        """
        The interval that completes this one to an octave.

        P5 <-> P4, M3 <-> m6, A4 <-> d5, P1 <-> P1.
        """
        return SimpleInterval(self.quality.inversion(), self.number.inversion)

    def with_quality_shifted_by(self, degree: int) -> SimpleInterval:
        """Same number, quality shifted by degree half steps."""
        return SimpleInterval(self.quality.shift(degree), self.number)

    def with_additional_octaves(self, additional_octaves: int) -> Interval:
        """Extend to an interval spanning extra octaves."""
        from chuk_mcp_intervals.core.interval import Interval

        return Interval(self, additional_octaves)

    # --- Arithmetic ---

    def plus_with_overflow(self, other: SimpleInterval) -> tuple[SimpleInterval, bool]:
        """
        Add two simple intervals, reporting whether the sum reached an octave.

        Numbers sum with one subtracted: a unison plus a unison is a unison.
        """
        overflows = self.number + other.number - 1 >= SIMPLE_NUMBER_COUNT + 1
        return self + other, overflows

    def minus_with_underflow(self, other: SimpleInterval) -> tuple[SimpleInterval, bool]:
        """
        Subtract two simple intervals, reporting whether the result fell below a unison.

        Numbers differ with one added: a third minus a unison is a third.
        """
        underflows = self.number - other.number + 1 <= 0
        return self - other, underflows

    def __add__(self, other: SimpleInterval) -> SimpleInterval:
        """Add two intervals, collapsing the result below an octave."""
        if not isinstance(other, SimpleInterval):
            return NotImplemented

        # Shift by 1 so the perfect fourth (-1) lands on remainder 0
        number_index = self.number.circle_of_fifths_index + other.number.circle_of_fifths_index
        quality_shift, remainder = divmod(number_index + 1, SIMPLE_NUMBER_COUNT)
        number = SimpleIntervalNumber.from_circle_of_fifths_index(remainder - 1)

        offset = self.quality.offset + other.quality.offset + quality_shift
        quality = IntervalQuality.for_perfectability(number.perfectability, offset)
        return SimpleInterval(quality, number)

    def __sub__(self, other: SimpleInterval) -> SimpleInterval:
        """Subtract an interval, collapsing the result below an octave."""
        if not isinstance(other, SimpleInterval):
            return NotImplemented
        return self + (-other)

    def __neg__(self) -> SimpleInterval:
        """Negation is inversion within the octave."""
        return self.inversion()

    def __str__(self) -> str:
        return f"{self.quality.symbol}{self.number.value}"

    def __repr__(self) -> str:
        return f"SimpleInterval({self.quality!r}, SimpleIntervalNumber.{self.number.name})"


# Initialize class constants after class is defined
SimpleInterval.PERFECT_UNISON = SimpleInterval.perfect(SimpleIntervalNumber.UNISON)
SimpleInterval.MINOR_SECOND = SimpleInterval.minor(SimpleIntervalNumber.SECOND)
SimpleInterval.MAJOR_SECOND = SimpleInterval.major(SimpleIntervalNumber.SECOND)
SimpleInterval.MINOR_THIRD = SimpleInterval.minor(SimpleIntervalNumber.THIRD)
SimpleInterval.MAJOR_THIRD = SimpleInterval.major(SimpleIntervalNumber.THIRD)
SimpleInterval.PERFECT_FOURTH = SimpleInterval.perfect(SimpleIntervalNumber.FOURTH)
SimpleInterval.AUGMENTED_FOURTH = SimpleInterval.augmented(SimpleIntervalNumber.FOURTH)
SimpleInterval.DIMINISHED_FIFTH = SimpleInterval.diminished(SimpleIntervalNumber.FIFTH)
SimpleInterval.PERFECT_FIFTH = SimpleInterval.perfect(SimpleIntervalNumber.FIFTH)
SimpleInterval.MINOR_SIXTH = SimpleInterval.minor(SimpleIntervalNumber.SIXTH)
SimpleInterval.MAJOR_SIXTH = SimpleInterval.major(SimpleIntervalNumber.SIXTH)
SimpleInterval.MINOR_SEVENTH = SimpleInterval.minor(SimpleIntervalNumber.SEVENTH)
SimpleInterval.MAJOR_SEVENTH = SimpleInterval.major(SimpleIntervalNumber.SEVENTH)
