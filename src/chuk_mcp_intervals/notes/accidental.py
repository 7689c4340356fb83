"""
Accidentals - signed half-step adjustments to a natural note.

Notation: '#' sharp, 'x' double sharp, 'b' flat. A triple sharp is '#x'.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from chuk_mcp_intervals.constants import ErrorMessages
from chuk_mcp_intervals.core.errors import DomainError, DomainErrorKind, require_positive

_SYMBOL_SHIFTS: dict[str, int] = {"#": 1, "x": 2, "b": -1}


@dataclass(frozen=True)
class Accidental:
    """
    A sharp, flat or natural of any degree.

    shift is the number of half steps added to the natural note: 2 is a
    double sharp, -1 a flat, 0 natural.
    """

    shift: int = 0

    NATURAL: ClassVar[Accidental]

    @classmethod
    def sharp(cls, degree: int = 1) -> Accidental:
        return cls(require_positive(degree, ErrorMessages.INVALID_DEGREE.format(degree=degree)))

    @classmethod
    def flat(cls, degree: int = 1) -> Accidental:
        return cls(-require_positive(degree, ErrorMessages.INVALID_DEGREE.format(degree=degree)))

    def is_sharp(self) -> bool:
        return self.shift > 0

    def is_flat(self) -> bool:
        return self.shift < 0

    def is_natural(self) -> bool:
        return self.shift == 0

    def shifted_by(self, amount: int) -> Accidental:
        return Accidental(self.shift + amount)

    @property
    def notation(self) -> str:
        """Musical notation ('', '#', 'x', '#x', 'b', 'bb', ...)."""
        if self.shift > 0:
            doubles, single = divmod(self.shift, 2)
            return "#" * single + "x" * doubles
        return "b" * -self.shift

    @classmethod
    def parse(cls, text: str) -> Accidental:
        """
        Parse accidental notation. The empty string is natural.

        Sharps and flats may not be mixed.

        Raises:
            DomainError: INVALID_NOTATION for unknown symbols or mixed directions
        """
        if any(symbol not in _SYMBOL_SHIFTS for symbol in text):
            raise DomainError(
                DomainErrorKind.INVALID_NOTATION, ErrorMessages.INVALID_ACCIDENTAL.format(text=text)
            )
        if "b" in text and text.strip("b"):
            raise DomainError(
                DomainErrorKind.INVALID_NOTATION, ErrorMessages.INVALID_ACCIDENTAL.format(text=text)
            )
        return cls(sum(_SYMBOL_SHIFTS[symbol] for symbol in text))

    def __str__(self) -> str:
        return self.notation


Accidental.NATURAL = Accidental(0)
