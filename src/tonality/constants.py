"""
Constants and enums for the theory engine.

No magic strings - use enums and Literal types for constrained values.
"""

from enum import Enum
from typing import Literal


class Accidental(str, Enum):
    """Accidental carried by a spelled note name."""

    SHARP = "#"
    FLAT = "b"
    NATURAL = ""


class ChordQuality(str, Enum):
    """
    Supported chord qualities.

    Declaration order matters: chord recognition tries qualities in this
    order and the first exact match wins.
    """

    MAJOR = "M"
    MINOR = "m"
    DOMINANT_7 = "7"
    MAJOR_7 = "M7"
    MINOR_7 = "m7"
    DIMINISHED = "dim"
    DIMINISHED_7 = "dim7"
    SUS4 = "sus4"
    SUS2 = "sus2"
    AUGMENTED = "aug"
    POWER = "5"
    MAJOR_6 = "M6"
    MINOR_6 = "m6"
    ADD2 = "add2"
    DOMINANT_9 = "9"
    MAJOR_9 = "M9"
    MINOR_9 = "m9"


class ModeName(str, Enum):
    """Diatonic mode names, plus the major/minor aliases."""

    IONIAN = "ionian"
    DORIAN = "dorian"
    PHRYGIAN = "phrygian"
    LYDIAN = "lydian"
    MIXOLYDIAN = "mixolydian"
    AEOLIAN = "aeolian"
    LOCRIAN = "locrian"
    MAJOR = "major"
    MINOR = "minor"


class ScaleType(str, Enum):
    """Scale families."""

    DIATONIC = "diatonic"
    PENTATONIC = "pentatonic"
    BLUES = "blues"


# Quality of a degree as shown on the circle of fifths
ModeQuality = Literal["M", "m", "d"]

DegreeName = Literal[
    "Tonic",
    "Supertonic",
    "Mediant",
    "Subdominant",
    "Dominant",
    "Submediant",
    "Leading Tone",
    "Subtonic",
]

# Fret value for a string that is not played
MUTED = -1

# Environment variable naming the project instruments directory
INSTRUMENTS_DIR_ENV = "TONALITY_INSTRUMENTS_DIR"


class ErrorMessages:
    """Standardized error messages."""

    INVALID_NOTE_NAME = "'{name}' is not a valid note name"
    UNKNOWN_QUALITY = "Unknown chord quality '{quality}'"
    INVALID_BASS = "Bass note '{bass}' is not a member of this chord"
    INVALID_SCALE_MODE = "Invalid mode '{mode}' for {scale_type} scale"
    INVALID_SCALE_TYPE = "Unknown scale type '{scale_type}'"
    MAJOR_MINOR_ONLY = "Only major and minor scales are supported, got '{name}'"
    DIATONIC_ONLY = "Only diatonic scales are supported, got '{name}'"
    UNPARSEABLE_NOTE = "Could not parse note: '{text}'"
    UNPARSEABLE_CHORD = "Could not parse chord: '{text}'"
    UNPARSEABLE_SCALE = "Could not parse key: '{text}'"
    INSTRUMENT_NOT_FOUND = "Instrument '{name}' not found."
    NO_CHORD_FOUND = "No chord matches the given notes."
