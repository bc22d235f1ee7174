"""
Chord primitives - interval tables and Chord.

A chord is a root note, a quality (an interval pattern measured from the
root) and a bass note. When the bass is not the root the chord is an
inversion and its tones are rotated so the bass sounds first.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import cached_property

from tonality.constants import Accidental, ChordQuality, ErrorMessages
from tonality.core.accidentals import format_accidentals, unformat_accidentals
from tonality.core.errors import InvalidBassNote, TheoryError, UnknownChordQuality
from tonality.core.note import Note, NotePool, note_from_name

# Semitones from the root. Order follows ChordQuality declaration order.
CHORD_INTERVALS: dict[ChordQuality, tuple[int, ...]] = {
    ChordQuality.MAJOR: (0, 4, 7),
    ChordQuality.MINOR: (0, 3, 7),
    ChordQuality.DOMINANT_7: (0, 4, 7, 10),
    ChordQuality.MAJOR_7: (0, 4, 7, 11),
    ChordQuality.MINOR_7: (0, 3, 7, 10),
    ChordQuality.DIMINISHED: (0, 3, 6),
    ChordQuality.DIMINISHED_7: (0, 3, 6, 9),
    ChordQuality.SUS4: (0, 5, 7),
    ChordQuality.SUS2: (0, 2, 7),
    ChordQuality.AUGMENTED: (0, 4, 8),
    ChordQuality.POWER: (0, 7),
    ChordQuality.MAJOR_6: (0, 4, 7, 9),
    ChordQuality.MINOR_6: (0, 3, 7, 9),
    ChordQuality.ADD2: (0, 2, 4, 7),
    ChordQuality.DOMINANT_9: (0, 4, 7, 10, 14),
    ChordQuality.MAJOR_9: (0, 4, 7, 11, 14),
    ChordQuality.MINOR_9: (0, 3, 7, 10, 14),
}

_CHORD_RE = re.compile(r"([A-G][#b]?)([a-zA-Z]*\d?)?(?:/([A-G][#b]?))?")


def coerce_quality(quality: ChordQuality | str) -> ChordQuality | str:
    """
    Turn a quality token into a ChordQuality when it is a known one.

    The empty token means major. Unknown tokens are returned unchanged.
    """
    if isinstance(quality, ChordQuality):
        return quality
    if quality == "":
        return ChordQuality.MAJOR
    try:
        return ChordQuality(quality)
    except ValueError:
        return quality


def chord_intervals(quality: ChordQuality | str) -> tuple[int, ...]:
    """
    Get the interval pattern of a chord quality.

    Raises:
        UnknownChordQuality: if the quality has no interval table
    """
    quality = coerce_quality(quality)
    if not isinstance(quality, ChordQuality):
        raise UnknownChordQuality(ErrorMessages.UNKNOWN_QUALITY.format(quality=quality))
    return CHORD_INTERVALS[quality]


@dataclass(frozen=True, eq=False)
class Chord:
    """
    A chord built from a root, a quality and a bass note.

    The bass defaults to the root. Chords compare equal by name, so C#M and
    DbM are different chords; use is_same_as() to compare by sound.

    An unknown quality token is kept as a plain string and only fails when
    the tones or intervals are needed. Use make_chord() to validate up front.
    """

    root: Note
    quality: ChordQuality | str = ChordQuality.MAJOR
    bass: Note | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "quality", coerce_quality(self.quality))
        if self.bass is None:
            object.__setattr__(self, "bass", self.root)
        if self.is_inverted:
            # Resolves the tones, which validates the bass
            _ = self.notes

    @property
    def quality_token(self) -> str:
        """The quality as it is written in a chord name ('M', 'm7', ...)."""
        if isinstance(self.quality, ChordQuality):
            return self.quality.value
        return self.quality

    @property
    def intervals(self) -> tuple[int, ...]:
        return chord_intervals(self.quality)

    @property
    def is_inverted(self) -> bool:
        """True when the bass is not the root."""
        return not self.bass.equals_ignore_octave(self.root)

    @cached_property
    def notes(self) -> tuple[Note, ...]:
        """
        Chord tones, bass first.

        Tones above the root are spelled with the root's accidental where
        an enharmonic alias allows it (CbM is Cb Eb Gb, not Cb Eb F#).

        Raises:
            UnknownChordQuality: if the quality is unknown
            InvalidBassNote: if the bass is not one of the tones
        """
        accidental = self.root.accidental
        tones = [self.root]
        tones.extend(self.root.transpose(i).respell(accidental) for i in self.intervals[1:])
        if not self.is_inverted:
            return tuple(tones)

        for index, tone in enumerate(tones):
            if tone.equals_ignore_octave(self.bass):
                return tuple(tones[index:] + tones[:index])
        raise InvalidBassNote(ErrorMessages.INVALID_BASS.format(bass=self.bass.name))

    @property
    def name(self) -> str:
        """Chord name, e.g. 'C', 'F#m7', 'Ddim/Ab'."""
        suffix = "" if self.quality is ChordQuality.MAJOR else self.quality_token
        slash = f"/{self.bass.name}" if self.is_inverted else ""
        return f"{self.root.name}{suffix}{slash}"

    @property
    def formatted_name(self) -> str:
        return format_accidentals(self.name)

    @property
    def inversion_count(self) -> int:
        """Number of distinct inversions (one per tone)."""
        return len(self.notes)

    @property
    def accidental(self) -> Accidental:
        return self.root.accidental

    @property
    def has_accidental(self) -> bool:
        return self.root.has_accidental

    @property
    def is_sharp(self) -> bool:
        return self.root.is_sharp

    @property
    def is_flat(self) -> bool:
        return self.root.is_flat

    @property
    def alias_chord(self) -> Chord:
        """
        The same chord spelled from the root's enharmonic alias.

        C#/G# becomes Db/Ab, C/G becomes B#/G (G has no alias). A root
        without an alias returns this chord.
        """
        alias = self.root.alias
        if alias is None:
            return self
        bass = (self.bass.alias or self.bass) if self.is_inverted else alias
        return Chord(alias, self.quality, bass)

    def get_inversion(self, inversion: int) -> Chord:
        """
        Get an inversion of this chord.

        Args:
            inversion: Index into the current tones; wraps around

        Returns:
            The chord with notes[inversion] as its bass
        """
        notes = self.notes
        return Chord(self.root, self.quality, notes[inversion % len(notes)])

    def transpose(self, steps: int) -> Chord:
        """Transpose root and bass by a number of semitones."""
        return Chord(self.root.transpose(steps), self.quality, self.bass.transpose(steps))

    def equals(self, other: Chord) -> bool:
        """Same name."""
        return self.name == other.name

    def equals_ignore_bass(self, other: Chord) -> bool:
        """Same root pitch class and quality, in any inversion."""
        return self.root.equals_ignore_octave(other.root) and self.quality == other.quality

    def is_same_as(self, other: Chord) -> bool:
        """Same sound: root pitch class, quality and bass pitch class (C#M is DbM)."""
        return self.equals_ignore_bass(other) and self.bass.equals_ignore_octave(other.bass)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Chord):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        return self.name


def make_chord(
    root: Note, quality: ChordQuality | str = ChordQuality.MAJOR, bass: Note | None = None
) -> Chord:
    """
    Build a chord, validating the quality and bass.

    Raises:
        UnknownChordQuality: if the quality is unknown
        InvalidBassNote: if the bass is not a chord tone
    """
    chord_intervals(quality)
    return Chord(root, quality, bass)


def get_chord(
    root_name: str, quality: ChordQuality | str = ChordQuality.MAJOR, bass_name: str | None = None
) -> Chord:
    """
    Build a chord from note names.

    Raises:
        InvalidNoteName: if a name is not a known spelling
        UnknownChordQuality: if the quality is unknown
        InvalidBassNote: if the bass is not a chord tone
    """
    bass = note_from_name(bass_name) if bass_name else None
    return make_chord(note_from_name(root_name), quality, bass)


def parse_chord(text: str, pool: NotePool | None = None) -> Chord | None:
    """
    Parse a chord name such as 'C', 'F#m7', 'B♭dim/F' or 'Csus4/G'.

    Returns None if the text is not a chord name, or if a slash bass cannot
    be placed in the chord. Without a slash the quality token is not checked
    here; an unknown token raises when the chord's tones are used.
    """
    match = _CHORD_RE.fullmatch(unformat_accidentals(text.strip()))
    if match is None:
        return None
    root_name, token, bass_name = match.groups()
    root = note_from_name(root_name, pool=pool)
    bass = note_from_name(bass_name, pool=pool) if bass_name else None
    try:
        return Chord(root, token or ChordQuality.MAJOR, bass)
    except TheoryError:
        # A slash chord resolves its tones to check the bass
        return None
