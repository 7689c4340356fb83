"""
Constants and enums for the interval system.

No magic strings - use enums and Literal types for constrained values.
"""

from enum import Enum
from typing import Literal


class Perfectability(str, Enum):
    """
    The two interval-number families.

    Unisons, fourths and fifths are perfectable (reference quality: perfect).
    Seconds, thirds, sixths and sevenths are imperfectable (reference: major).
    """

    PERFECTABLE = "perfectable"
    IMPERFECTABLE = "imperfectable"


class TritoneQuality(str, Enum):
    """Which spelling to pick for an interval of six half steps."""

    AUGMENTED = "augmented"  # Augmented fourth
    DIMINISHED = "diminished"  # Diminished fifth


class QualityKind(str, Enum):
    """The named quality families."""

    DIMINISHED = "diminished"
    MINOR = "minor"
    PERFECT = "perfect"
    MAJOR = "major"
    AUGMENTED = "augmented"


# Number of distinct simple interval numbers (unison..seventh)
SIMPLE_NUMBER_COUNT = 7

# Half steps in an octave
OCTAVE_HALF_STEPS = 12

# Transports supported by the server entry point
Transport = Literal["stdio", "http"]

# Environment variable naming the project catalog directory
CATALOG_DIR_ENV = "CHUK_INTERVALS_DIR"


class ErrorMessages:
    """Standardized error messages."""

    INVALID_NUMBER = "Interval number must be in the range {low}..{high}, got {value}."
    INVALID_INTERVAL_NUMBER = "Interval number must be positive, got {value}."
    INVALID_DEGREE = "Degree must be positive, got {degree}."
    INVALID_OCTAVES = "Additional octaves must be non-negative, got {octaves}."
    INVALID_HALF_STEPS = "Half steps must be in the range 0..11, got {half_steps}."
    INVALID_CIRCLE_INDEX = "Circle of fifths index {index} does not name a perfect or major number."
    INVALID_SIGN = "Sign must be +1 or -1, got {sign}."
    PERFECTABILITY_MISMATCH = "Quality '{quality}' cannot combine with {perfectability} '{number}'."
    UNDERFLOW = "The difference underflows past a unison."
    TRITONE_REQUIRED = "Six half steps needs a tritone quality, got {tritone}."
    INVALID_INTERVAL_NOTATION = "Invalid interval notation: '{text}'. Expected e.g. 'M3' or '-P5'."
    INVALID_NOTE_NOTATION = "Invalid note notation: '{text}'. Expected e.g. 'C4', 'F#3' or 'Bb-1'."
    INVALID_ACCIDENTAL = "Invalid accidental: '{text}'."
    INVALID_LETTER = "Invalid note letter: '{text}'."
    NAMED_INTERVAL_NOT_FOUND = "Named interval '{name}' not found."
