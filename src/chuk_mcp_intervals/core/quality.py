"""
Interval quality primitives - PerfectableQuality and ImperfectableQuality.

A quality is a signed offset from the reference quality of its family:

    perfectable:    ... dd(-2)  d(-1)  P(0)  A(1)  AA(2) ...
    imperfectable:  ... d(-2)   m(-1)  M(0)  A(1)  AA(2) ...

The two families are variants of one sum type, IntervalQuality. Each variant
carries its perfectability tag, so callers can match on the class:

    match quality:
        case PerfectableQuality(offset=0):
            ...  # perfect
        case ImperfectableQuality(offset=-1):
            ...  # minor

Both families share a single circle of fifths line. Perfectable qualities sit
on even indices, imperfectable ones on odd indices:

    ... d(-2)  m(-1)  P(0)  M(1)  A(2)  A(3) ...
        perf.  imp.   perf. imp.  perf. imp.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from chuk_mcp_intervals.constants import (
    ErrorMessages,
    Perfectability,
    QualityKind,
    TritoneQuality,
)
from chuk_mcp_intervals.core.errors import require_positive
from chuk_mcp_intervals.core.numbers import check_half_steps

# Half steps 0..11 -> offset of the simplest quality, tagged by family
# (None marks the tritone, which needs an explicit choice)
_SIMPLEST_BY_HALF_STEPS: list[tuple[Perfectability, int] | None] = [
    (Perfectability.PERFECTABLE, 0),  # P1
    (Perfectability.IMPERFECTABLE, -1),  # m2
    (Perfectability.IMPERFECTABLE, 0),  # M2
    (Perfectability.IMPERFECTABLE, -1),  # m3
    (Perfectability.IMPERFECTABLE, 0),  # M3
    (Perfectability.PERFECTABLE, 0),  # P4
    None,  # A4 / d5
    (Perfectability.PERFECTABLE, 0),  # P5
    (Perfectability.IMPERFECTABLE, -1),  # m6
    (Perfectability.IMPERFECTABLE, 0),  # M6
    (Perfectability.IMPERFECTABLE, -1),  # m7
    (Perfectability.IMPERFECTABLE, 0),  # M7
]


@dataclass(frozen=True)
class IntervalQuality(ABC):
    """
    Abstract base of the two quality variants.

    offset is relative to perfect (perfectable) or major (imperfectable).
    Positive offsets are augmented; negative offsets are minor or diminished.
    Variants of different families never compare equal, even with equal offsets.

    Immutable and hashable.
    """

    offset: int = 0

    perfectability: ClassVar[Perfectability]

    # Named qualities (defined after the variants)
    PERFECT: ClassVar[PerfectableQuality]
    MAJOR: ClassVar[ImperfectableQuality]
    MINOR: ClassVar[ImperfectableQuality]

    def is_perfectable(self) -> bool:
        return self.perfectability is Perfectability.PERFECTABLE

    def is_imperfectable(self) -> bool:
        return self.perfectability is Perfectability.IMPERFECTABLE

    def shift(self, degree: int) -> IntervalQuality:
        """
        Shift the quality by a number of half steps.

        Positive degrees move toward augmented, negative toward diminished.
        The family is preserved.
        """
        return type(self)(self.offset + degree)

    @abstractmethod
    def inversion(self) -> IntervalQuality:
        """The quality of the inverted interval."""

    @property
    @abstractmethod
    def circle_of_fifths_index(self) -> int:
        """Position on the circle of fifths line shared by both families."""

    @property
    def augmented_degree(self) -> int | None:
        """Degree of augmentation, or None if the quality is not augmented."""
        return self.offset if self.offset > 0 else None

    @property
    @abstractmethod
    def diminished_degree(self) -> int | None:
        """Degree of diminution, or None if the quality is not diminished."""

    def is_augmented(self) -> bool:
        return self.augmented_degree is not None

    def is_diminished(self) -> bool:
        return self.diminished_degree is not None

    def is_perfect(self) -> bool:
        return False

    def is_major(self) -> bool:
        return False

    def is_minor(self) -> bool:
        return False

    @property
    def kind(self) -> QualityKind:
        """The named family of the quality, ignoring degree."""
        if self.is_augmented():
            return QualityKind.AUGMENTED
        if self.is_diminished():
            return QualityKind.DIMINISHED
        if self.is_perfect():
            return QualityKind.PERFECT
        return QualityKind.MAJOR if self.is_major() else QualityKind.MINOR

    @property
    def degree(self) -> int:
        """Degree of augmentation or diminution (0 for perfect, major and minor)."""
        return self.augmented_degree or self.diminished_degree or 0

    @property
    def symbol(self) -> str:
        """Shorthand symbol: P, M, m, A, AA, d, dd, ..."""
        match self.kind:
            case QualityKind.AUGMENTED:
                return "A" * self.degree
            case QualityKind.DIMINISHED:
                return "d" * self.degree
            case QualityKind.PERFECT:
                return "P"
            case QualityKind.MAJOR:
                return "M"
            case _:
                return "m"

    @staticmethod
    def for_perfectability(perfectability: Perfectability, offset: int) -> IntervalQuality:
        """Build the variant of the given family with the given offset."""
        if perfectability is Perfectability.PERFECTABLE:
            return PerfectableQuality(offset)
        return ImperfectableQuality(offset)

    @staticmethod
    def from_circle_of_fifths_index(index: int) -> IntervalQuality:
        """
        Get the quality at a position on the shared circle of fifths line.

        Even indices are perfectable, odd indices imperfectable.
        """
        if index == -1:
            return IntervalQuality.MINOR
        if index == 0:
            return IntervalQuality.PERFECT
        if index == 1:
            return IntervalQuality.MAJOR

        if index < 0:
            if index % 2 == 0:
                return PerfectableQuality.diminished(-index // 2)
            return ImperfectableQuality.diminished((-index - 1) // 2)

        if index % 2 == 0:
            return PerfectableQuality.augmented(index // 2)
        return ImperfectableQuality.augmented((index - 1) // 2)

    @staticmethod
    def of_simplest_interval_with_half_steps(
        half_steps: int, tritone: TritoneQuality | None = None
    ) -> IntervalQuality | None:
        """
        Get the quality of the simplest interval spanning the given half steps.

        The simplest interval is perfect, major or minor wherever one exists.
        Six half steps needs a tritone choice (augmented fourth or diminished
        fifth); with none given the result is None.

        Raises:
            DomainError: INVALID_ARGUMENT if half_steps is outside 0..11
        """
        check_half_steps(half_steps)
        entry = _SIMPLEST_BY_HALF_STEPS[half_steps]
        if entry is None:
            if tritone is None:
                return None
            if tritone is TritoneQuality.AUGMENTED:
                return PerfectableQuality.augmented()
            return PerfectableQuality.diminished()

        perfectability, offset = entry
        return IntervalQuality.for_perfectability(perfectability, offset)

    def __str__(self) -> str:
        if self.degree > 1:
            return f"{self.degree}x {self.kind.value}"
        return self.kind.value


@dataclass(frozen=True)
class PerfectableQuality(IntervalQuality):
    """A quality of a unison, fourth or fifth (offset 0 = perfect)."""

    perfectability: ClassVar[Perfectability] = Perfectability.PERFECTABLE

    @classmethod
    def augmented(cls, degree: int = 1) -> PerfectableQuality:
        """Augmented by degree half steps above perfect."""
        return cls(require_positive(degree, ErrorMessages.INVALID_DEGREE.format(degree=degree)))

    @classmethod
    def diminished(cls, degree: int = 1) -> PerfectableQuality:
        """Diminished by degree half steps below perfect."""
        return cls(-require_positive(degree, ErrorMessages.INVALID_DEGREE.format(degree=degree)))

    def inversion(self) -> PerfectableQuality:
        return PerfectableQuality(-self.offset)

    @property
    def circle_of_fifths_index(self) -> int:
        # Spread out so imperfectable qualities fit between
        return self.offset * 2

    @property
    def diminished_degree(self) -> int | None:
        return -self.offset if self.offset < 0 else None

    def is_perfect(self) -> bool:
        return self.offset == 0


@dataclass(frozen=True)
class ImperfectableQuality(IntervalQuality):
    """A quality of a second, third, sixth or seventh (offset 0 = major, -1 = minor)."""

    perfectability: ClassVar[Perfectability] = Perfectability.IMPERFECTABLE

    @classmethod
    def augmented(cls, degree: int = 1) -> ImperfectableQuality:
        """Augmented by degree half steps above major."""
        return cls(require_positive(degree, ErrorMessages.INVALID_DEGREE.format(degree=degree)))

    @classmethod
    def diminished(cls, degree: int = 1) -> ImperfectableQuality:
        """Diminished by degree half steps below minor."""
        return cls(
            -require_positive(degree, ErrorMessages.INVALID_DEGREE.format(degree=degree)) - 1
        )

    def inversion(self) -> ImperfectableQuality:
        # Major <-> minor, A(n) <-> d(n)
        return ImperfectableQuality(-self.offset - 1)

    @property
    def circle_of_fifths_index(self) -> int:
        if self.offset > 0:
            return self.offset * 2 + 1
        if self.offset < -1:
            return -(-self.offset - 1) * 2 - 1
        return 1 if self.offset == 0 else -1

    @property
    def diminished_degree(self) -> int | None:
        return -self.offset - 1 if self.offset < -1 else None

    def is_major(self) -> bool:
        return self.offset == 0

    def is_minor(self) -> bool:
        return self.offset == -1


IntervalQuality.PERFECT = PerfectableQuality(0)
IntervalQuality.MAJOR = ImperfectableQuality(0)
IntervalQuality.MINOR = ImperfectableQuality(-1)
