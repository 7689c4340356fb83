"""
Pitch classes - the 12 chromatic pitches, independent of spelling and octave.

C#, Db and B## all share one pitch class. Spelled notes (NoteSpelling) keep
the letter and accidental; a PitchClass is what they sound like, and is the
bridge between spellings and MIDI note numbers.
"""

from __future__ import annotations

from enum import IntEnum

from chuk_mcp_intervals.constants import OCTAVE_HALF_STEPS

# Simplest spellings, one accidental at most
_SHARP_NAMES: list[str] = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]
_FLAT_NAMES: list[str] = ["C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B"]


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11), counted in half steps above C.

    Enum names use 's' for sharp (Cs, Ds, ...).
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    @classmethod
    def of_half_steps(cls, half_steps_above_c: int) -> PitchClass:
        """Pitch class of any count of half steps above C, folding octaves."""
        return cls(half_steps_above_c % OCTAVE_HALF_STEPS)

    def to_midi(self, octave: int) -> int:
        """MIDI note number of this pitch class in an octave. C4 = 60."""
        return self.value + (octave + 1) * OCTAVE_HALF_STEPS

    @classmethod
    def from_midi(cls, midi_number: int) -> tuple[PitchClass, int]:
        """Split a MIDI note number into its pitch class and octave."""
        octave, half_steps = divmod(midi_number, OCTAVE_HALF_STEPS)
        return cls(half_steps), octave - 1

    def spell(self, prefer_flats: bool = False) -> str:
        """Simplest spelling, sharp or flat for black keys."""
        names = _FLAT_NAMES if prefer_flats else _SHARP_NAMES
        return names[self.value]
