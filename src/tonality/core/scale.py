"""
Scale primitives - KeySignature and Scale.

A scale is a tonic plus a mode within a scale family (diatonic, pentatonic
or blues). The key signature decides how the scale's notes are spelled:
Ebm is Eb F Gb Ab Bb Cb Db, never Eb F F# G# A# B C#.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import cached_property

from tonality.constants import Accidental, ChordQuality, ErrorMessages, ModeName, ScaleType
from tonality.core.accidentals import format_accidentals, unformat_accidentals
from tonality.core.chord import Chord, make_chord
from tonality.core.errors import InvalidScaleMode
from tonality.core.note import Note, NotePool, note_from_name

_DIATONIC_INTERVALS: dict[ModeName, tuple[int, ...]] = {
    ModeName.LYDIAN: (0, 2, 4, 6, 7, 9, 11),
    ModeName.IONIAN: (0, 2, 4, 5, 7, 9, 11),
    ModeName.MIXOLYDIAN: (0, 2, 4, 5, 7, 9, 10),
    ModeName.DORIAN: (0, 2, 3, 5, 7, 9, 10),
    ModeName.AEOLIAN: (0, 2, 3, 5, 7, 8, 10),
    ModeName.PHRYGIAN: (0, 1, 3, 5, 7, 8, 10),
    ModeName.LOCRIAN: (0, 1, 3, 5, 6, 8, 10),
}

SCALE_INTERVALS: dict[ScaleType, dict[ModeName, tuple[int, ...]]] = {
    ScaleType.DIATONIC: _DIATONIC_INTERVALS,
    ScaleType.PENTATONIC: {
        ModeName.MAJOR: (0, 2, 4, 7, 9),
        ModeName.MINOR: (0, 3, 5, 7, 10),
    },
    ScaleType.BLUES: {
        ModeName.MAJOR: (0, 2, 3, 4, 7, 9),
        ModeName.MINOR: (0, 3, 5, 6, 7, 10),
    },
}

# Modes ordered from brightest to darkest; a step down adds one flat
_MODES_BY_BRIGHTNESS: tuple[ModeName, ...] = tuple(_DIATONIC_INTERVALS)

# Natural letters in circle-of-fifths order
_LETTERS_BY_FIFTHS = "FCGDAEB"

# Triad quality of each ionian degree; modes start at their offset
_DEGREE_QUALITIES: tuple[ChordQuality, ...] = (
    ChordQuality.MAJOR,
    ChordQuality.MINOR,
    ChordQuality.MINOR,
    ChordQuality.MAJOR,
    ChordQuality.MAJOR,
    ChordQuality.MINOR,
    ChordQuality.DIMINISHED,
)

_MODE_OFFSETS: dict[ModeName, int] = {
    ModeName.IONIAN: 0,
    ModeName.DORIAN: 1,
    ModeName.PHRYGIAN: 2,
    ModeName.LYDIAN: 3,
    ModeName.MIXOLYDIAN: 4,
    ModeName.AEOLIAN: 5,
    ModeName.LOCRIAN: 6,
}

_MODE_ALIASES: dict[ModeName, ModeName] = {
    ModeName.IONIAN: ModeName.MAJOR,
    ModeName.MAJOR: ModeName.IONIAN,
    ModeName.AEOLIAN: ModeName.MINOR,
    ModeName.MINOR: ModeName.AEOLIAN,
}

_SCALE_RE = re.compile(r"([A-G][#b]?)([mM]?)")


@dataclass(frozen=True)
class KeySignature:
    """Accidental used by a key and how many of them it has."""

    accidental: Accidental
    count: int

    def __str__(self) -> str:
        return f"{self.count}{self.accidental.value}" if self.count else "0"


def _blues_table(*entries: str) -> tuple[KeySignature, ...]:
    return tuple(KeySignature(Accidental(e[0]), int(e[1:])) for e in entries)


# Blues key signatures indexed by tonic pitch class
_BLUES_SIGNATURES: dict[ModeName, tuple[KeySignature, ...]] = {
    ModeName.MAJOR: _blues_table(
        "b1", "#4", "#1", "b3", "#3", "b1", "#5", "b1", "b3", "#2", "b2", "#4"
    ),
    ModeName.MINOR: _blues_table(
        "b3", "#3", "b1", "b5", "b1", "b3", "#2", "b2", "b4", "b1", "b5", "#1"
    ),
}


@dataclass(frozen=True, eq=False)
class Scale:
    """
    A scale: tonic, mode and scale family.

    Diatonic scales accept the seven modes plus 'major' and 'minor'.
    Pentatonic and blues scales accept 'major' and 'minor' only.
    Scales compare equal by name; use is_same_as() to compare by sound.
    """

    tonic: Note
    mode: ModeName | str = ModeName.MAJOR
    scale_type: ScaleType | str = ScaleType.DIATONIC

    def __post_init__(self) -> None:
        try:
            scale_type = ScaleType(self.scale_type)
        except ValueError:
            raise InvalidScaleMode(
                ErrorMessages.INVALID_SCALE_TYPE.format(scale_type=self.scale_type)
            ) from None
        try:
            mode = ModeName(self.mode)
        except ValueError:
            mode = None
        if mode is None or (
            scale_type is not ScaleType.DIATONIC and mode not in SCALE_INTERVALS[scale_type]
        ):
            raise InvalidScaleMode(
                ErrorMessages.INVALID_SCALE_MODE.format(mode=self.mode, scale_type=scale_type.value)
            )
        object.__setattr__(self, "scale_type", scale_type)
        object.__setattr__(self, "mode", mode)

    @property
    def normalized_mode(self) -> ModeName:
        """Diatonic major/minor become ionian/aeolian; other modes are unchanged."""
        if self.scale_type is ScaleType.DIATONIC:
            if self.mode is ModeName.MAJOR:
                return ModeName.IONIAN
            if self.mode is ModeName.MINOR:
                return ModeName.AEOLIAN
        return self.mode

    @property
    def mode_alias(self) -> ModeName | None:
        """Other name of a diatonic mode (ionian <-> major, aeolian <-> minor)."""
        if self.scale_type is not ScaleType.DIATONIC:
            return None
        return _MODE_ALIASES.get(self.mode)

    @property
    def is_diatonic(self) -> bool:
        return self.scale_type is ScaleType.DIATONIC

    @property
    def intervals(self) -> tuple[int, ...]:
        return SCALE_INTERVALS[self.scale_type][self.normalized_mode]

    @property
    def name(self) -> str:
        """Scale name, e.g. 'C#M', 'Gm', 'F(lyd)', 'CM Pentatonic', 'Cm Blues'."""
        if self.mode is ModeName.MAJOR:
            suffix = "M"
        elif self.mode is ModeName.MINOR:
            suffix = "m"
        else:
            suffix = f"({self.mode.value[:3]})"
        if self.scale_type is not ScaleType.DIATONIC:
            suffix += f" {self.scale_type.value.capitalize()}"
        return f"{self.tonic.name}{suffix}"

    @property
    def formatted_name(self) -> str:
        return format_accidentals(self.name)

    @property
    def has_accidental(self) -> bool:
        return self.tonic.has_accidental

    @property
    def is_sharp(self) -> bool:
        return self.tonic.is_sharp

    @property
    def is_flat(self) -> bool:
        return self.tonic.is_flat

    @cached_property
    def signature(self) -> KeySignature:
        """Key signature: which accidental the key uses and how many."""
        if self.scale_type is ScaleType.BLUES:
            return self._blues_signature()
        if self.scale_type is ScaleType.PENTATONIC:
            # Spelled like the parent major/minor key
            parent = ModeName.IONIAN if self.mode is ModeName.MAJOR else ModeName.AEOLIAN
            return _diatonic_signature(self.tonic, parent)
        return _diatonic_signature(self.tonic, self.normalized_mode)

    def _blues_signature(self) -> KeySignature:
        signature = _BLUES_SIGNATURES[self.mode][self.tonic.pitch_class]
        if self.tonic.has_accidental and self.tonic.accidental != signature.accidental:
            return KeySignature(self.tonic.accidental, signature.count)
        return signature

    @cached_property
    def notes(self) -> tuple[Note, ...]:
        """Notes of the scale from the tonic upward, spelled for the key."""
        return tuple(self.get_note_in_scale(self.tonic.transpose(i)) for i in self.intervals)

    @cached_property
    def chords(self) -> tuple[Chord, ...]:
        """Triad on each degree. Empty for pentatonic and blues scales."""
        if self.scale_type is not ScaleType.DIATONIC:
            return ()
        offset = _MODE_OFFSETS[self.normalized_mode]
        return tuple(
            make_chord(note, _DEGREE_QUALITIES[(i + offset) % 7])
            for i, note in enumerate(self.notes)
        )

    def get_note_in_scale(self, note: Note) -> Note:
        """
        Spell a note the way this key spells it.

        In C#M, Ab becomes G# and F becomes E#. In GM, C stays C.
        """
        return note.respell(self.signature.accidental, self.tonic.accidental)

    def get_note_name_in_scale(self, name: str) -> str:
        """
        Spell a note name the way this key spells it.

        Raises:
            InvalidNoteName: if the name is not a known spelling
        """
        return self.get_note_in_scale(note_from_name(name)).name

    def get_chord_in_scale(self, chord: Chord) -> Chord:
        """
        Spell a chord the way this key spells it (Ab -> G# in C#M).

        Only the spelling changes; chords outside the key are not rejected.
        """
        root = self.get_note_in_scale(chord.root)
        if chord.accidental != root.accidental:
            return chord.alias_chord
        return chord

    def equals(self, other: Scale) -> bool:
        """Same name."""
        return self.name == other.name

    def is_same_as(self, other: Scale) -> bool:
        """Same sound: C#M is the same as DbM, CM the same as C(ion)."""
        return (
            self.tonic.equals_ignore_octave(other.tonic)
            and self.scale_type is other.scale_type
            and self.normalized_mode is other.normalized_mode
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Scale):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        return self.name


def _diatonic_signature(tonic: Note, mode: ModeName) -> KeySignature:
    """
    Key signature of a diatonic mode.

    Each fifth up the letter circle adds a sharp and each step darker in
    mode adds a flat. A sharp or flat tonic counts the other way around
    the circle, from seven.
    """
    letter_index = _LETTERS_BY_FIFTHS.index(tonic.name[0]) - 1
    count = letter_index - _MODES_BY_BRIGHTNESS.index(mode) + 1
    if tonic.has_accidental:
        return KeySignature(tonic.accidental, 7 - abs(count))
    if count > 0:
        return KeySignature(Accidental.SHARP, count)
    if count < 0:
        return KeySignature(Accidental.FLAT, -count)
    return KeySignature(Accidental.NATURAL, 0)


def make_scale(
    tonic: Note,
    mode: ModeName | str = ModeName.MAJOR,
    scale_type: ScaleType | str = ScaleType.DIATONIC,
) -> Scale:
    """
    Build a scale.

    Raises:
        InvalidScaleMode: if the mode or scale type is not supported
    """
    return Scale(tonic, mode, scale_type)


def get_scale(
    tonic_name: str,
    mode: ModeName | str = ModeName.MAJOR,
    scale_type: ScaleType | str = ScaleType.DIATONIC,
) -> Scale:
    """
    Build a scale from a tonic name.

    Raises:
        InvalidNoteName: if the name is not a known spelling
        InvalidScaleMode: if the mode or scale type is not supported
    """
    return Scale(note_from_name(tonic_name), mode, scale_type)


def parse_scale(text: str, pool: NotePool | None = None) -> Scale | None:
    """
    Parse a key name: 'C', 'CM' and 'F#' are major, 'Cm' and 'B♭m' minor.

    Returns None if the text is not a key name.
    """
    match = _SCALE_RE.fullmatch(unformat_accidentals(text.strip()))
    if match is None:
        return None
    mode = ModeName.MINOR if match.group(2) == "m" else ModeName.MAJOR
    return Scale(note_from_name(match.group(1), pool=pool), mode)
