"""
Interval number primitives - SimpleIntervalNumber and IntervalNumber.

A simple interval number is a scale-step count from unison (1) to seventh (7).
Each number belongs to one of two families: perfectable (unison, fourth, fifth)
or imperfectable (second, third, sixth, seventh). The family decides which
qualities the number may carry.

Numbers are placed on the circle of fifths relative to a perfect unison:

    fourth  unison  fifth  second  sixth  third  seventh
      -1      0       1      2       3      4       5

so that adding two intervals becomes adding their indices.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from chuk_mcp_intervals.constants import (
    OCTAVE_HALF_STEPS,
    SIMPLE_NUMBER_COUNT,
    ErrorMessages,
    Perfectability,
    TritoneQuality,
)
from chuk_mcp_intervals.core.errors import DomainError, DomainErrorKind, require_non_negative

# Lookup tables (module level to avoid IntEnum member issues), indexed by value - 1
_PERFECTABILITY: list[Perfectability] = [
    Perfectability.PERFECTABLE,  # Unison
    Perfectability.IMPERFECTABLE,  # Second
    Perfectability.IMPERFECTABLE,  # Third
    Perfectability.PERFECTABLE,  # Fourth
    Perfectability.PERFECTABLE,  # Fifth
    Perfectability.IMPERFECTABLE,  # Sixth
    Perfectability.IMPERFECTABLE,  # Seventh
]
_CIRCLE_OF_FIFTHS_INDEX: list[int] = [0, 2, 4, -1, 1, 3, 5]
_PERFECT_OR_MAJOR_HALF_STEPS: list[int] = [0, 2, 4, 5, 7, 9, 11]
_ABBREVIATIONS: list[str] = ["Unison", "2nd", "3rd", "4th", "5th", "6th", "7th"]

# Circle of fifths index (offset by 1 so fourths land on 0) -> number value
_VALUE_BY_CIRCLE_INDEX: list[int] = [4, 1, 5, 2, 6, 3, 7]

# Half steps 0..11 -> number value of the simplest interval (0 marks the tritone)
_SIMPLEST_VALUE_BY_HALF_STEPS: list[int] = [1, 2, 2, 3, 3, 4, 0, 5, 6, 6, 7, 7]


class SimpleIntervalNumber(IntEnum):
    """
    The number of a simple interval (unison through seventh).

    Values are the conventional interval numbers: UNISON == 1, FIFTH == 5.
    Conversion from a plain integer is explicit - use from_value() to raise on
    an out-of-range value or try_from_value() to get None instead.
    """

    UNISON = 1
    SECOND = 2
    THIRD = 3
    FOURTH = 4
    FIFTH = 5
    SIXTH = 6
    SEVENTH = 7

    @property
    def perfectability(self) -> Perfectability:
        """Which quality family this number belongs to."""
        return _PERFECTABILITY[self.value - 1]

    def is_perfectable(self) -> bool:
        return self.perfectability is Perfectability.PERFECTABLE

    def is_imperfectable(self) -> bool:
        return self.perfectability is Perfectability.IMPERFECTABLE

    @property
    def circle_of_fifths_index(self) -> int:
        """Circle of fifths index of the perfect or major interval with this number."""
        return _CIRCLE_OF_FIFTHS_INDEX[self.value - 1]

    @property
    def perfect_or_major_half_steps(self) -> int:
        """Half steps spanned by the perfect or major interval with this number."""
        return _PERFECT_OR_MAJOR_HALF_STEPS[self.value - 1]

    @property
    def inversion(self) -> SimpleIntervalNumber:
        """
        The number of the inverted interval.

        Unison inverts to itself; otherwise the two numbers sum to 9
        (second <-> seventh, third <-> sixth, fourth <-> fifth).
        """
        if self is SimpleIntervalNumber.UNISON:
            return self
        return SimpleIntervalNumber(9 - self.value)

    @property
    def abbreviation(self) -> str:
        """Short display name ('Unison', '2nd', '3rd', ...)."""
        return _ABBREVIATIONS[self.value - 1]

    @classmethod
    def from_value(cls, value: int) -> SimpleIntervalNumber:
        """
        Get the number with the given value.

        Raises:
            DomainError: INVALID_NUMBER if value is outside 1..7
        """
        number = cls.try_from_value(value)
        if number is None:
            raise DomainError(
                DomainErrorKind.INVALID_NUMBER,
                ErrorMessages.INVALID_NUMBER.format(low=1, high=SIMPLE_NUMBER_COUNT, value=value),
            )
        return number

    @classmethod
    def try_from_value(cls, value: int) -> SimpleIntervalNumber | None:
        """Get the number with the given value, or None if outside 1..7."""
        if not 1 <= value <= SIMPLE_NUMBER_COUNT:
            return None
        return cls(value)

    @classmethod
    def from_circle_of_fifths_index(cls, index: int) -> SimpleIntervalNumber:
        """
        Get the number whose perfect or major interval has the given index.

        Raises:
            DomainError: INVALID_ARGUMENT if index is outside -1..5
        """
        if not -1 <= index <= 5:
            raise DomainError(
                DomainErrorKind.INVALID_ARGUMENT,
                ErrorMessages.INVALID_CIRCLE_INDEX.format(index=index),
            )
        return cls(_VALUE_BY_CIRCLE_INDEX[index + 1])

    @classmethod
    def of_simplest_interval_with_half_steps(
        cls, half_steps: int, tritone: TritoneQuality | None = None
    ) -> SimpleIntervalNumber | None:
        """
        Get the number of the simplest interval spanning the given half steps.

        Six half steps is a fourth (augmented) or a fifth (diminished); with no
        tritone choice the result is None.

        Raises:
            DomainError: INVALID_ARGUMENT if half_steps is outside 0..11
        """
        check_half_steps(half_steps)
        value = _SIMPLEST_VALUE_BY_HALF_STEPS[half_steps]
        if value == 0:
            if tritone is None:
                return None
            return cls.FOURTH if tritone is TritoneQuality.AUGMENTED else cls.FIFTH
        return cls(value)

    def __str__(self) -> str:
        return self.abbreviation


def check_half_steps(half_steps: int) -> None:
    """Raise INVALID_ARGUMENT unless half_steps is in 0..11."""
    if not 0 <= half_steps < OCTAVE_HALF_STEPS:
        raise DomainError(
            DomainErrorKind.INVALID_ARGUMENT,
            ErrorMessages.INVALID_HALF_STEPS.format(half_steps=half_steps),
        )


@dataclass(frozen=True)
class IntervalNumber:
    """
    The number of an interval of any size.

    A simple number plus a count of additional octaves, so that a tenth is a
    third with one additional octave (3 + 7 = 10).
    """

    base: SimpleIntervalNumber
    additional_octaves: int = 0

    def __post_init__(self) -> None:
        require_non_negative(
            self.additional_octaves,
            ErrorMessages.INVALID_OCTAVES.format(octaves=self.additional_octaves),
        )

    @property
    def value(self) -> int:
        """The conventional interval number (1 = unison, 8 = octave, 10 = tenth)."""
        return self.base.value + self.additional_octaves * SIMPLE_NUMBER_COUNT

    @property
    def perfectability(self) -> Perfectability:
        return self.base.perfectability

    def is_simple(self) -> bool:
        """Whether the number is less than an octave."""
        return self.additional_octaves == 0

    @classmethod
    def from_value(cls, value: int) -> IntervalNumber:
        """
        Build an interval number from a positive integer, folding octaves.

        Raises:
            DomainError: INVALID_NUMBER if value is not positive
        """
        number = cls.try_from_value(value)
        if number is None:
            raise DomainError(
                DomainErrorKind.INVALID_NUMBER,
                ErrorMessages.INVALID_INTERVAL_NUMBER.format(value=value),
            )
        return number

    @classmethod
    def try_from_value(cls, value: int) -> IntervalNumber | None:
        """Build an interval number from an integer, or None if it is not positive."""
        if value <= 0:
            return None
        octaves, base_index = divmod(value - 1, SIMPLE_NUMBER_COUNT)
        return cls(SimpleIntervalNumber(base_index + 1), octaves)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)
