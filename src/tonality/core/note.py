"""
Note primitives - Note and NotePool.

A Note is a spelled pitch: a name such as 'C#' or 'Db' plus an octave.
Several spellings share a pitch class (enharmonic aliases). They stay
distinct values so a chord or scale can display the spelling it needs,
while equals() and equals_ignore_octave() treat them as the same sound.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import NamedTuple

from tonality.constants import Accidental, ErrorMessages
from tonality.core.accidentals import format_accidentals, unformat_accidentals
from tonality.core.errors import InvalidNoteName


class _NoteInfo(NamedTuple):
    pitch_class: int
    alias: str | None


# Every spelling the engine knows, with its pitch class and enharmonic alias.
# D, G and A have no single-accidental alias.
_NOTES_BY_NAME: dict[str, _NoteInfo] = {
    "B#": _NoteInfo(0, "C"),
    "C": _NoteInfo(0, "B#"),
    "C#": _NoteInfo(1, "Db"),
    "Db": _NoteInfo(1, "C#"),
    "D": _NoteInfo(2, None),
    "D#": _NoteInfo(3, "Eb"),
    "Eb": _NoteInfo(3, "D#"),
    "E": _NoteInfo(4, "Fb"),
    "Fb": _NoteInfo(4, "E"),
    "E#": _NoteInfo(5, "F"),
    "F": _NoteInfo(5, "E#"),
    "F#": _NoteInfo(6, "Gb"),
    "Gb": _NoteInfo(6, "F#"),
    "G": _NoteInfo(7, None),
    "G#": _NoteInfo(8, "Ab"),
    "Ab": _NoteInfo(8, "G#"),
    "A": _NoteInfo(9, None),
    "A#": _NoteInfo(10, "Bb"),
    "Bb": _NoteInfo(10, "A#"),
    "B": _NoteInfo(11, "Cb"),
    "Cb": _NoteInfo(11, "B"),
}

NOTE_NAMES: tuple[str, ...] = tuple(_NOTES_BY_NAME)

# Spelling used when a note is built from a pitch class (integer notation)
STANDARD_NOTE_NAMES: tuple[str, ...] = (
    "C",
    "C#",
    "D",
    "Eb",
    "E",
    "F",
    "F#",
    "G",
    "Ab",
    "A",
    "Bb",
    "B",
)

_NOTE_RE = re.compile(r"([A-G][#b]?)(-?\d+)?")


@dataclass(frozen=True)
class Note:
    """
    A spelled note in a given octave.

    Value semantics: == and hash() compare (name, octave), so C#4 != Db4.
    Use equals() to compare pitch (C#4 equals Db4) and
    equals_ignore_octave() to compare pitch class (C#5 vs Db4).

    Immutable and hashable.
    """

    name: str
    octave: int = 4

    def __post_init__(self) -> None:
        if self.name not in _NOTES_BY_NAME:
            raise InvalidNoteName(ErrorMessages.INVALID_NOTE_NAME.format(name=self.name))

    @property
    def pitch_class(self) -> int:
        """Integer notation, C=0 through B=11."""
        return _NOTES_BY_NAME[self.name].pitch_class

    @property
    def alias_name(self) -> str | None:
        """Name of the enharmonic alias, if there is one."""
        return _NOTES_BY_NAME[self.name].alias

    @property
    def alias(self) -> Note | None:
        """The same pitch spelled differently (C# -> Db), or None."""
        alias_name = self.alias_name
        return Note(alias_name, self.octave) if alias_name else None

    @property
    def accidental(self) -> Accidental:
        return Accidental(self.name[1:])

    @property
    def has_accidental(self) -> bool:
        return self.accidental is not Accidental.NATURAL

    @property
    def is_sharp(self) -> bool:
        return self.accidental is Accidental.SHARP

    @property
    def is_flat(self) -> bool:
        return self.accidental is Accidental.FLAT

    @property
    def midi_number(self) -> int:
        """MIDI note number. C4 = 60, A0 = 21."""
        return self.octave * 12 + self.pitch_class + 12

    @property
    def key_number(self) -> int:
        """Piano key number. A0 = 1, C4 = 40."""
        return self.midi_number - 20

    @property
    def formatted_name(self) -> str:
        """Name with accidental glyphs, e.g. 'B♭'."""
        return format_accidentals(self.name)

    def transpose(self, steps: int) -> Note:
        """
        Transpose by a number of semitones (positive or negative).

        The result uses the standard spelling for its pitch class; callers
        that need a contextual spelling apply respell() afterwards.
        """
        return note_from_pitch_class(self.pitch_class + steps, self.octave)

    def respell(
        self, accidental: Accidental | str, reference: Accidental | str | None = None
    ) -> Note:
        """
        Spell this note to agree with an accidental, where an alias allows it.

        The alias is used only when this spelling disagrees with the
        reference accidental and the alias carries the wanted accidental.
        E.g. F# respelled for flats is Gb, F respelled for sharps is E#,
        D never changes.

        Args:
            accidental: Accidental the alias must carry
            reference: Accidental this spelling must differ from; defaults
                to accidental. Scales pass the tonic's accidental here so
                naturals in a natural-tonic key stay natural.
        """
        accidental = Accidental(accidental)
        reference = accidental if reference is None else Accidental(reference)
        alias = self.alias
        if alias is not None and self.accidental != reference and alias.accidental == accidental:
            return alias
        return self

    def equals(self, other: Note) -> bool:
        """Same pitch and octave, regardless of spelling (A#4 equals Bb4)."""
        return self.pitch_class == other.pitch_class and self.octave == other.octave

    def equals_ignore_octave(self, other: Note) -> bool:
        """Same pitch class, regardless of spelling and octave (A#5 vs Bb4)."""
        return self.pitch_class == other.pitch_class

    def is_same_as(self, other: Note) -> bool:
        """Same sound without regard to octave (A# is the same as Bb)."""
        return self.equals_ignore_octave(other)

    def __str__(self) -> str:
        return f"{self.name}{self.octave}"


class NotePool:
    """
    Interning cache for notes keyed by (name, octave).

    Handing the same pool to the constructor functions returns the identical
    instance for equal notes. It only saves allocations; notes compare by
    value whether or not they came from a pool.
    """

    def __init__(self) -> None:
        self._notes: dict[tuple[str, int], Note] = {}

    def get(self, name: str, octave: int = 4) -> Note:
        """Get the pooled note, creating it on first use."""
        key = (name, octave)
        note = self._notes.get(key)
        if note is None:
            note = self._notes[key] = Note(name, octave)
        return note

    def clear(self) -> None:
        """Drop all pooled notes."""
        self._notes.clear()

    def __len__(self) -> int:
        return len(self._notes)

    def __contains__(self, key: object) -> bool:
        return key in self._notes


def note_from_name(name: str, octave: int = 4, pool: NotePool | None = None) -> Note:
    """
    Get a note by name.

    Raises:
        InvalidNoteName: if the name is not a known spelling
    """
    if pool is not None:
        return pool.get(name, octave)
    return Note(name, octave)


def note_from_pitch_class(number: int, octave: int = 4, pool: NotePool | None = None) -> Note:
    """
    Get a note from integer notation (C=0).

    Numbers outside 0-11 roll over into neighbouring octaves:
    12 -> C5, -1 -> B3, -13 -> B2.
    """
    name = STANDARD_NOTE_NAMES[number % 12]
    return note_from_name(name, octave + number // 12, pool)


def parse_note(text: str, pool: NotePool | None = None) -> Note | None:
    """
    Parse a note string such as 'C', 'C#6' or 'B♭3'.

    The octave defaults to 4. Returns None if the text is not a note.
    """
    match = _NOTE_RE.fullmatch(unformat_accidentals(text.strip()))
    if match is None:
        return None
    octave = int(match.group(2)) if match.group(2) else 4
    return note_from_name(match.group(1), octave, pool)


def get_notes(*names: str) -> list[Note]:
    """
    Get notes from note strings (see parse_note).

    Raises:
        InvalidNoteName: if any string is not a note
    """
    notes = []
    for name in names:
        note = parse_note(name)
        if note is None:
            raise InvalidNoteName(ErrorMessages.INVALID_NOTE_NAME.format(name=name))
        notes.append(note)
    return notes


def sort_notes(notes: Iterable[Note], root: Note | None = None) -> list[Note]:
    """
    Sort notes into scale order starting from a root.

    Notes below the root's pitch class wrap around to follow the highest
    note. The root defaults to the first note. The sort is stable and the
    input list is left untouched.
    """
    notes = list(notes)
    if not notes:
        return []
    start = (root or notes[0]).pitch_class
    return sorted(notes, key=lambda n: (n.pitch_class - start) % 12)


def note_names(notes: Iterable[Note]) -> list[str]:
    """Names of a list of notes."""
    return [n.name for n in notes]


def note_numbers(notes: Iterable[Note]) -> list[int]:
    """Pitch classes of a list of notes."""
    return [n.pitch_class for n in notes]


def normalize_note_name(name: str) -> str:
    """
    Standard spelling of a note name (Db -> C#, A# -> Bb).

    Raises:
        InvalidNoteName: if the name is not a known spelling
    """
    return STANDARD_NOTE_NAMES[Note(name).pitch_class]
