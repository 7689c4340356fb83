"""
Note spelling - a letter with an accidental, independent of octave.

Spellings are where interval qualities become visible: C# and Db sound the
same, but C# up to E is a minor third and Db up to E an augmented second.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, overload

from chuk_mcp_intervals.constants import ErrorMessages
from chuk_mcp_intervals.core.errors import DomainError, DomainErrorKind
from chuk_mcp_intervals.core.simple_interval import SimpleInterval
from chuk_mcp_intervals.notes.accidental import Accidental
from chuk_mcp_intervals.notes.letter import NoteLetter
from chuk_mcp_intervals.notes.pitch import PitchClass

if TYPE_CHECKING:
    from chuk_mcp_intervals.notes.note import Note

_SPELLING_PATTERN = re.compile(r"^(?P<letter>[A-Ga-g])(?P<accidental>[#xb]*)$")


@dataclass(frozen=True)
class NoteSpelling:
    """
    A spelled pitch class, like F# or Bbb.

    Immutable and hashable. Two spellings are equal only if both letter and
    accidental match; use is_enharmonic_to() to compare by sound.
    """

    letter: NoteLetter
    accidental: Accidental = Accidental.NATURAL

    @property
    def half_steps_above_c(self) -> int:
        """Half steps above the C of the letter's octave (-1 for Cb, 12 for B#)."""
        return self.letter.half_steps_above_c + self.accidental.shift

    @property
    def pitch_class(self) -> PitchClass:
        return PitchClass.of_half_steps(self.half_steps_above_c)

    def is_enharmonic_to(self, other: NoteSpelling) -> bool:
        """Whether the two spellings name the same pitch class."""
        return self.pitch_class is other.pitch_class

    @classmethod
    def simplest_with_pitch_class(
        cls, pitch_class: PitchClass, prefer_flats: bool = False
    ) -> NoteSpelling:
        """Spell a pitch class with at most one sharp or flat."""
        return cls.parse(pitch_class.spell(prefer_flats))

    def simplify_accidental(self, prefer_flats: bool | None = None) -> NoteSpelling:
        """
        Respell with at most one sharp or flat.

        Black keys keep the direction of the current accidental unless
        prefer_flats says otherwise (B## -> C#, Fbb -> Eb).
        """
        if prefer_flats is None:
            prefer_flats = self.accidental.is_flat()
        return self.simplest_with_pitch_class(self.pitch_class, prefer_flats)

    def with_octave(self, octave: int) -> Note:
        from chuk_mcp_intervals.notes.note import Note

        return Note(self, octave)

    def __add__(self, other: SimpleInterval) -> NoteSpelling:
        """Spell the note a simple interval above this one."""
        if not isinstance(other, SimpleInterval):
            return NotImplemented
        letter, natural = self.letter.plus(other.number)
        # Same number, so both qualities share a family and offsets compare directly
        shift = other.quality.offset - natural.quality.offset
        return NoteSpelling(letter, self.accidental.shifted_by(shift))

    @overload
    def __sub__(self, other: SimpleInterval) -> NoteSpelling: ...

    @overload
    def __sub__(self, other: NoteSpelling) -> SimpleInterval: ...

    def __sub__(self, other: SimpleInterval | NoteSpelling) -> NoteSpelling | SimpleInterval:
        """
        Subtract a simple interval (giving a spelling) or another spelling
        (giving the simple interval from other up to this one).
        """
        if isinstance(other, SimpleInterval):
            return self + other.inversion()
        if isinstance(other, NoteSpelling):
            interval = self.letter.minus(other.letter)
            return interval.with_quality_shifted_by(self.accidental.shift - other.accidental.shift)
        return NotImplemented

    @classmethod
    def parse(cls, text: str) -> NoteSpelling:
        """
        Parse notation like 'C', 'F#', 'Bbb' or 'Gx'.

        Raises:
            DomainError: INVALID_NOTATION for unreadable text
        """
        match = _SPELLING_PATTERN.match(text.strip())
        if match is None:
            raise DomainError(
                DomainErrorKind.INVALID_NOTATION,
                ErrorMessages.INVALID_NOTE_NOTATION.format(text=text),
            )
        return cls(
            NoteLetter.parse(match.group("letter")), Accidental.parse(match.group("accidental"))
        )

    def __str__(self) -> str:
        return f"{self.letter.name}{self.accidental.notation}"
