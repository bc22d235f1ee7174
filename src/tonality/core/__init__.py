"""
Core theory primitives - notes, chords and scales.

Everything else composes on these:
- Note: A spelled pitch (name + octave) with an enharmonic alias
- NotePool: Optional interning cache for notes
- Chord: Root + quality + bass, with inversions and alias spelling
- identify_chord: Reverse lookup from an unordered set of notes
- Scale: Tonic + mode + family (diatonic, pentatonic, blues)
- KeySignature: How a scale spells its notes
"""

from tonality.core.accidentals import format_accidentals, unformat_accidentals
from tonality.core.chord import (
    CHORD_INTERVALS,
    Chord,
    chord_intervals,
    get_chord,
    make_chord,
    parse_chord,
)
from tonality.core.errors import (
    InvalidBassNote,
    InvalidNoteName,
    InvalidScaleMode,
    TheoryError,
    UnknownChordQuality,
)
from tonality.core.lookup import identify_chord, identify_chord_from_names
from tonality.core.note import (
    NOTE_NAMES,
    STANDARD_NOTE_NAMES,
    Note,
    NotePool,
    get_notes,
    normalize_note_name,
    note_from_name,
    note_from_pitch_class,
    note_names,
    note_numbers,
    parse_note,
    sort_notes,
)
from tonality.core.scale import (
    SCALE_INTERVALS,
    KeySignature,
    Scale,
    get_scale,
    make_scale,
    parse_scale,
)

__all__ = [
    # Note
    "Note",
    "NotePool",
    "NOTE_NAMES",
    "STANDARD_NOTE_NAMES",
    "note_from_name",
    "note_from_pitch_class",
    "parse_note",
    "get_notes",
    "sort_notes",
    "note_names",
    "note_numbers",
    "normalize_note_name",
    # Chord
    "Chord",
    "CHORD_INTERVALS",
    "chord_intervals",
    "make_chord",
    "get_chord",
    "parse_chord",
    "identify_chord",
    "identify_chord_from_names",
    # Scale
    "Scale",
    "KeySignature",
    "SCALE_INTERVALS",
    "make_scale",
    "get_scale",
    "parse_scale",
    # Formatting
    "format_accidentals",
    "unformat_accidentals",
    # Errors
    "TheoryError",
    "InvalidNoteName",
    "UnknownChordQuality",
    "InvalidBassNote",
    "InvalidScaleMode",
]
