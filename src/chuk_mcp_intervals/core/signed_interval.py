"""
Signed interval - an interval with a direction, used for transposing notes.

A descending unison is indistinguishable from an ascending unison of inverted
quality (down a diminished unison == up an augmented unison), so unisons are
always stored ascending. Every signed interval therefore has exactly one
representation and equality is plain field equality.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from chuk_mcp_intervals.constants import ErrorMessages, Perfectability
from chuk_mcp_intervals.core.errors import DomainError, DomainErrorKind
from chuk_mcp_intervals.core.interval import Interval
from chuk_mcp_intervals.core.numbers import SimpleIntervalNumber
from chuk_mcp_intervals.core.simple_interval import SimpleInterval


def _is_unison(interval: Interval) -> bool:
    return interval.is_simple() and interval.base.number is SimpleIntervalNumber.UNISON


@dataclass(frozen=True, init=False)
class SignedInterval:
    """
    An interval moving up (sign +1) or down (sign -1).

    Build with positive(), negative() or of(); the constructor applies the
    unison canonicalization.

    Immutable and hashable.
    """

    interval: Interval
    sign: int = field(default=1)

    def __init__(self, interval: Interval | SimpleInterval, sign: int = 1) -> None:
        if sign not in (1, -1):
            raise DomainError(
                DomainErrorKind.INVALID_ARGUMENT, ErrorMessages.INVALID_SIGN.format(sign=sign)
            )
        if isinstance(interval, SimpleInterval):
            interval = Interval(interval)

        if _is_unison(interval):
            if sign < 0:
                interval = Interval(interval.base.inversion())
            sign = 1

        object.__setattr__(self, "interval", interval)
        object.__setattr__(self, "sign", sign)

    @classmethod
    def positive(cls, interval: Interval | SimpleInterval) -> SignedInterval:
        return cls(interval, 1)

    @classmethod
    def negative(cls, interval: Interval | SimpleInterval) -> SignedInterval:
        return cls(interval, -1)

    @classmethod
    def of(cls, interval: Interval | SimpleInterval, sign: int) -> SignedInterval:
        return cls(interval, sign)

    @property
    def perfectability(self) -> Perfectability:
        return self.interval.perfectability

    @property
    def half_steps(self) -> int:
        """Signed half steps (negative when descending)."""
        return self.interval.half_steps * self.sign

    def is_positive(self) -> bool:
        return self.sign > 0

    def is_negative(self) -> bool:
        return self.sign < 0

    def _subtract_relative_to_left_sign(self, other: SignedInterval) -> SignedInterval:
        base, octaves = self.interval.subtract_parts(other.interval)
        if octaves >= 0:
            return SignedInterval(Interval(base, octaves), self.sign)

        # The result crossed the starting note: measure it from the other side.
        # Octave counts from the unsigned subtraction are one too low below the
        # unison, except for exact octave multiples.
        final_base = base.inversion()
        final_octaves = -octaves
        if final_base.number is not SimpleIntervalNumber.UNISON:
            final_octaves -= 1
        return SignedInterval(Interval(final_base, final_octaves), -self.sign)

    def __add__(self, other: SignedInterval) -> SignedInterval:
        if not isinstance(other, SignedInterval):
            return NotImplemented
        if self.sign == other.sign:
            return SignedInterval(self.interval + other.interval, self.sign)
        return self._subtract_relative_to_left_sign(other)

    def __sub__(self, other: SignedInterval) -> SignedInterval:
        if not isinstance(other, SignedInterval):
            return NotImplemented
        if self.sign == other.sign:
            return self._subtract_relative_to_left_sign(other)
        return SignedInterval(self.interval + other.interval, self.sign)

    def __neg__(self) -> SignedInterval:
        return SignedInterval(self.interval, -self.sign)

    def __str__(self) -> str:
        text = str(self.interval)
        return f"-{text}" if self.sign < 0 else text
