"""
Note - a spelled note in a specific octave.

Octaves follow scientific pitch notation and are attached to the letter, not
the sounding pitch: B#3 sounds like C4 and Cb4 like B3. The octave number
changes between B and C.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from chuk_mcp_intervals.constants import OCTAVE_HALF_STEPS, ErrorMessages
from chuk_mcp_intervals.core.errors import DomainError, DomainErrorKind
from chuk_mcp_intervals.core.interval import Interval
from chuk_mcp_intervals.core.signed_interval import SignedInterval
from chuk_mcp_intervals.core.simple_interval import SimpleInterval
from chuk_mcp_intervals.notes.accidental import Accidental
from chuk_mcp_intervals.notes.letter import NoteLetter
from chuk_mcp_intervals.notes.pitch import PitchClass
from chuk_mcp_intervals.notes.spelling import NoteSpelling

_NOTE_PATTERN = re.compile(r"^(?P<spelling>[A-Ga-g][#xb]*)(?P<octave>-?\d+)$")


@dataclass(frozen=True)
class Note:
    """
    A note such as C4 (middle C), F#3 or Bb-1.

    Immutable and hashable. Equality compares spelling and octave; use
    is_enharmonic_to() to compare by sound.
    """

    spelling: NoteSpelling
    octave: int

    @property
    def letter(self) -> NoteLetter:
        return self.spelling.letter

    @property
    def accidental(self) -> Accidental:
        return self.spelling.accidental

    @property
    def pitch_class(self) -> PitchClass:
        return self.spelling.pitch_class

    @property
    def midi_number(self) -> int:
        """MIDI note number (C4 = 60). May fall outside 0..127."""
        # B# and Cb reach past their own octave
        carry = self.spelling.half_steps_above_c // OCTAVE_HALF_STEPS
        return self.pitch_class.to_midi(self.octave + carry)

    def is_enharmonic_to(self, other: Note) -> bool:
        """Whether the two notes sound the same pitch."""
        return self.midi_number == other.midi_number

    @classmethod
    def from_midi(cls, midi_number: int, prefer_flats: bool = False) -> Note:
        """Spell a MIDI note number with at most one sharp or flat."""
        pitch_class, octave = PitchClass.from_midi(midi_number)
        return cls(NoteSpelling.simplest_with_pitch_class(pitch_class, prefer_flats), octave)

    # --- Transposition ---

    def _plus_interval(self, interval: Interval) -> Note:
        spelling = self.spelling + interval.base
        octave = self.octave + interval.additional_octaves
        # The letter index plus (number - 1) passing 6 crosses into the next octave
        if self.letter.value + interval.base.number.value > 7:
            octave += 1
        return Note(spelling, octave)

    def _minus_interval(self, interval: Interval) -> Note:
        spelling = self.spelling + interval.base.inversion()
        octave = self.octave - interval.additional_octaves
        # The letter index minus (number - 1) dropping below 0 crosses into the octave below
        if self.letter.value - interval.base.number.value < -1:
            octave -= 1
        return Note(spelling, octave)

    def __add__(self, other: Interval | SimpleInterval | SignedInterval) -> Note:
        """Transpose up by an interval, or in the direction of a signed interval."""
        if isinstance(other, SimpleInterval):
            other = Interval(other)
        if isinstance(other, Interval):
            return self._plus_interval(other)
        if isinstance(other, SignedInterval):
            if other.is_negative():
                return self._minus_interval(other.interval)
            return self._plus_interval(other.interval)
        return NotImplemented

    def __sub__(
        self, other: Interval | SimpleInterval | SignedInterval | Note
    ) -> Note | SignedInterval:
        """
        Transpose down by an interval, or measure the signed interval from
        another note to this one.
        """
        if isinstance(other, Note):
            return self.interval_from(other)
        if isinstance(other, SimpleInterval):
            other = Interval(other)
        if isinstance(other, Interval):
            return self._minus_interval(other)
        if isinstance(other, SignedInterval):
            return self + (-other)
        return NotImplemented

    def interval_from(self, other: Note) -> SignedInterval:
        """
        The signed interval that transposes other to this note.

        C4.interval_from(E4) is a descending major third.
        """
        base = self.spelling - other.spelling
        octaves = self.octave - other.octave
        negative = False
        letter_is_lower = self.letter.value < other.letter.value

        if octaves > 0 and letter_is_lower:
            # The letters wrap around, so one fewer whole octave is spanned
            octaves -= 1
        elif octaves == 0 and letter_is_lower:
            base = base.inversion()
            negative = True
        elif octaves < 0:
            base = base.inversion()
            if self.letter.value > other.letter.value:
                octaves += 1
            octaves = -octaves
            negative = True

        return SignedInterval(Interval(base, octaves), -1 if negative else 1)

    def interval_to(self, other: Note) -> SignedInterval:
        """The signed interval that transposes this note to other."""
        return other.interval_from(self)

    # --- Notation ---

    @classmethod
    def parse(cls, text: str) -> Note:
        """
        Parse notation like 'C4', 'F#3', 'Bbb5' or 'A-1'.

        Raises:
            DomainError: INVALID_NOTATION for unreadable text
        """
        match = _NOTE_PATTERN.match(text.strip())
        if match is None:
            raise DomainError(
                DomainErrorKind.INVALID_NOTATION,
                ErrorMessages.INVALID_NOTE_NOTATION.format(text=text),
            )
        return cls(NoteSpelling.parse(match.group("spelling")), int(match.group("octave")))

    def __str__(self) -> str:
        return f"{self.spelling}{self.octave}"
