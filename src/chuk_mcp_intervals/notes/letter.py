"""
Note letters - the seven natural note names.

Letters are numbered from C so that moving up by an interval number is plain
modular arithmetic on the index.
"""

from __future__ import annotations

from enum import IntEnum

from chuk_mcp_intervals.constants import (
    OCTAVE_HALF_STEPS,
    SIMPLE_NUMBER_COUNT,
    ErrorMessages,
    TritoneQuality,
)
from chuk_mcp_intervals.core.errors import DomainError, DomainErrorKind
from chuk_mcp_intervals.core.numbers import SimpleIntervalNumber
from chuk_mcp_intervals.core.simple_interval import SimpleInterval

# Half steps above C of each natural letter (module level to avoid IntEnum member issues)
_HALF_STEPS_ABOVE_C: list[int] = [0, 2, 4, 5, 7, 9, 11]


class NoteLetter(IntEnum):
    """
    The natural note letters, C-based.

    C == 0 through B == 6, matching the order of a C major scale.
    """

    C = 0
    D = 1
    E = 2
    F = 3
    G = 4
    A = 5
    B = 6

    @property
    def half_steps_above_c(self) -> int:
        """Half steps from the C below up to this natural note."""
        return _HALF_STEPS_ABOVE_C[self.value]

    def minus(self, other: NoteLetter) -> SimpleInterval:
        """
        The interval from the natural note other up to this one.

        F up to B is an augmented fourth and B up to F a diminished fifth;
        every other pair of letters spans a perfect, major or minor interval.
        """
        half_steps = (self.half_steps_above_c - other.half_steps_above_c) % OCTAVE_HALF_STEPS
        tritone = TritoneQuality.AUGMENTED if self is NoteLetter.B else TritoneQuality.DIMINISHED
        return SimpleInterval.simplest_with_half_steps(half_steps, tritone)

    def plus(self, number: SimpleIntervalNumber) -> tuple[NoteLetter, SimpleInterval]:
        """
        Move up by an interval number.

        Returns:
            The letter reached and the natural interval spanned to reach it
        """
        letter = NoteLetter((self.value + number.value - 1) % SIMPLE_NUMBER_COUNT)
        return letter, letter.minus(self)

    @classmethod
    def parse(cls, name: str) -> NoteLetter:
        """
        Parse a letter name, case-insensitively.

        Raises:
            DomainError: INVALID_NOTATION if the name is not A-G
        """
        key = name.strip().upper()
        if key not in cls.__members__:
            raise DomainError(
                DomainErrorKind.INVALID_NOTATION, ErrorMessages.INVALID_LETTER.format(text=name)
            )
        return cls[key]

    def __str__(self) -> str:
        return self.name
