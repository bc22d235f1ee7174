"""
Circle of fifths view of a diatonic scale.

The seven degrees of a diatonic scale sit next to each other on the
circle of fifths. For C major they run F C G D A E B, the three major
chords first, then the three minor ones, then the diminished one.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property

from tonality.constants import DegreeName, ErrorMessages, ModeName, ModeQuality, ScaleType
from tonality.core.errors import InvalidScaleMode
from tonality.core.note import Note, note_from_name
from tonality.core.scale import Scale

CIRCLE_OF_FIFTHS: tuple[Note, ...] = tuple(
    note_from_name(n) for n in ("C", "G", "D", "A", "E", "B", "F#", "C#", "Ab", "Eb", "Bb", "F")
)

# Modes in circle order: each step moves the window one fifth clockwise
MODES_BY_POSITION: tuple[ModeName, ...] = (
    ModeName.LYDIAN,
    ModeName.IONIAN,
    ModeName.MIXOLYDIAN,
    ModeName.DORIAN,
    ModeName.AEOLIAN,
    ModeName.PHRYGIAN,
    ModeName.LOCRIAN,
)

_DEGREE_NUMBERS = (1, 5, 2, 6, 3, 7, 4)
_QUALITIES: tuple[ModeQuality, ...] = ("M", "M", "M", "m", "m", "m", "d")
_DEGREE_NAMES: tuple[DegreeName, ...] = (
    "Tonic",
    "Supertonic",
    "Mediant",
    "Subdominant",
    "Dominant",
    "Submediant",
    "Leading Tone",
)
_ROMAN_NUMERALS = ("I", "II", "III", "IV", "V", "VI", "VII")


@dataclass(frozen=True)
class FifthInfo:
    """One scale degree as placed on the circle of fifths."""

    note: Note
    position: int  # F=-1, C=0, G=1, ...
    quality: ModeQuality
    degree_number: int

    @property
    def degree_name(self) -> DegreeName:
        # A seventh a whole step below the tonic is the subtonic
        if self.degree_number == 7 and self.quality == "M":
            return "Subtonic"
        return _DEGREE_NAMES[self.degree_number - 1]

    @property
    def degree_roman(self) -> str:
        """Roman numeral: 'IV' for major, 'ii' for minor, 'vii°' for diminished."""
        roman = _ROMAN_NUMERALS[self.degree_number - 1]
        if self.quality == "d":
            return roman.lower() + "°"
        if self.quality == "m":
            return roman.lower()
        return roman


class CircleOfFifths:
    """
    Circle of fifths for a diatonic scale.

    Both views are computed on first access and cached.
    """

    def __init__(self, scale: Scale):
        if scale.scale_type is not ScaleType.DIATONIC:
            raise InvalidScaleMode(ErrorMessages.DIATONIC_ONLY.format(name=scale.name))
        self.scale = scale

    @cached_property
    def fifths(self) -> tuple[FifthInfo, ...]:
        """Degrees in circle order, e.g. CM = F C G D A E B."""
        # Index of the tonic on the circle; a fifth is 7 semitones
        tonic_index = (self.scale.tonic.pitch_class * 7) % 12
        start = -MODES_BY_POSITION.index(self.scale.normalized_mode)

        fifths = []
        for i in range(7):
            position = tonic_index + start + i
            fifths.append(
                FifthInfo(
                    note=self.scale.get_note_in_scale(CIRCLE_OF_FIFTHS[position % 12]),
                    position=position,
                    quality=_QUALITIES[i],
                    degree_number=_DEGREE_NUMBERS[(start + i) % 7],
                )
            )
        return tuple(fifths)

    @cached_property
    def ordered_fifths(self) -> tuple[FifthInfo, ...]:
        """Degrees in scale order from the tonic, e.g. CM = C D E F G A B."""
        return tuple(sorted(self.fifths, key=lambda f: f.degree_number))


def get_circle_of_fifths(scale: Scale) -> CircleOfFifths:
    """
    Get the circle of fifths for a scale.

    Raises:
        InvalidScaleMode: if the scale is not diatonic
    """
    return CircleOfFifths(scale)
