"""
Domain errors for the interval algebra.

Every failure in the core is a DomainError tagged with a kind, so callers can
tell argument-shape problems apart from value-dependent ones. Underflow has its
own subclass because it depends on operand values, not on how they were built.
"""

from __future__ import annotations

from enum import Enum


class DomainErrorKind(str, Enum):
    """Categories of domain errors."""

    INVALID_ARGUMENT = "invalid_argument"
    INVALID_NUMBER = "invalid_number"
    PERFECTABILITY_MISMATCH = "perfectability_mismatch"
    UNDERFLOW = "underflow"
    INVALID_NOTATION = "invalid_notation"


class DomainError(ValueError):
    """An operation was given arguments outside the domain it is defined on."""

    def __init__(self, kind: DomainErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.kind.value!r}, {str(self)!r})"


class IntervalUnderflowError(DomainError):
    """A subtraction produced an interval below a unison."""

    def __init__(self, message: str) -> None:
        super().__init__(DomainErrorKind.UNDERFLOW, message)


def require_positive(value: int, message: str) -> int:
    """Return value, or raise INVALID_ARGUMENT if it is not positive."""
    if value <= 0:
        raise DomainError(DomainErrorKind.INVALID_ARGUMENT, message)
    return value


def require_non_negative(value: int, message: str) -> int:
    """Return value, or raise INVALID_ARGUMENT if it is negative."""
    if value < 0:
        raise DomainError(DomainErrorKind.INVALID_ARGUMENT, message)
    return value
