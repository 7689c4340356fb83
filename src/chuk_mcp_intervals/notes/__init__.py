"""
Spelled notes - where intervals meet pitches.

- NoteLetter: The seven natural letters (C-based)
- Accidental: Sharps and flats of any degree
- PitchClass: The 12 chromatic pitch classes (0-11)
- NoteSpelling: Letter + accidental, transposable by simple intervals
- Note: Spelling + octave, transposable by any interval
"""

from chuk_mcp_intervals.notes.accidental import Accidental
from chuk_mcp_intervals.notes.letter import NoteLetter
from chuk_mcp_intervals.notes.note import Note
from chuk_mcp_intervals.notes.pitch import PitchClass
from chuk_mcp_intervals.notes.spelling import NoteSpelling

__all__ = [
    "Accidental",
    "NoteLetter",
    "PitchClass",
    "NoteSpelling",
    "Note",
]
