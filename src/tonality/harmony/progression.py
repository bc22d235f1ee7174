"""
Chord progression suggestions for major and minor keys.

Each row lists the degrees (0 = tonic) that commonly follow a degree.
Every row includes the tonic.
"""

from __future__ import annotations

from tonality.constants import ErrorMessages, ModeName, ScaleType
from tonality.core.chord import Chord
from tonality.core.errors import InvalidScaleMode
from tonality.core.scale import Scale

_MAJOR_PROGRESSIONS: tuple[tuple[int, ...], ...] = (
    (0, 1, 2, 3, 4, 5, 6),  # I -> any
    (0, 1, 4, 6),  # ii -> V, vii°
    (0, 2, 3, 5),  # iii -> IV, vi
    (0, 1, 3, 4, 6),  # IV -> ii, V, vii°
    (0, 4, 5),  # V -> vi
    (0, 1, 2, 3, 4, 5),  # vi -> ii, iii, IV, V
    (0, 6),  # vii° -> I
)

_MINOR_PROGRESSIONS: tuple[tuple[int, ...], ...] = (
    (0, 1, 2, 3, 4, 5, 6),  # i -> any
    (0, 1, 4, 6),  # ii° -> V, vii°
    (0, 2, 3, 5, 6),  # III -> iv, VI, vii°
    (0, 3, 4, 6),  # iv -> V, vii°
    (0, 4, 5),  # V -> VI
    (0, 2, 3, 4, 5, 6),  # VI -> III, iv, V, vii°
    (0, 6),  # vii° -> i
)


class ChordProgressionCalculator:
    """Suggests which chords of a key can follow a given chord."""

    def __init__(self, scale: Scale):
        mode = scale.normalized_mode
        if scale.scale_type is not ScaleType.DIATONIC or mode not in (
            ModeName.IONIAN,
            ModeName.AEOLIAN,
        ):
            raise InvalidScaleMode(ErrorMessages.MAJOR_MINOR_ONLY.format(name=scale.name))
        self.scale = scale
        self._progressions = (
            _MINOR_PROGRESSIONS if mode is ModeName.AEOLIAN else _MAJOR_PROGRESSIONS
        )

    @property
    def root_chord(self) -> Chord:
        return self.chord_at(0)

    def chord_at(self, number: int) -> Chord:
        """Chord on a degree of the key (0 = tonic)."""
        return self.scale.chords[number]

    def chord_number(self, chord: Chord) -> int | None:
        """Degree of a chord in the key (0 = tonic), or None if it is not in the key."""
        for number, candidate in enumerate(self.scale.chords):
            if candidate.name == chord.name:
                return number
        return None

    def next_chords(self, chord: Chord) -> list[Chord]:
        """
        Chords that can follow a chord.

        A chord outside the key is treated as the tonic.
        """
        number = self.chord_number(chord)
        row = self._progressions[number if number is not None else 0]
        return [self.scale.chords[i] for i in row]


def get_chord_progression_calculator(scale: Scale) -> ChordProgressionCalculator:
    """
    Get a progression calculator for a key.

    Raises:
        InvalidScaleMode: if the scale is not a major or minor key
    """
    return ChordProgressionCalculator(scale)
