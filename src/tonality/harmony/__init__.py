"""
Harmony views built on the core scale model.

- CircleOfFifths: Where each degree of a diatonic key sits on the circle
- ChordProgressionCalculator: Which chords of a key can follow a chord
"""

from tonality.harmony.circle import (
    CIRCLE_OF_FIFTHS,
    CircleOfFifths,
    FifthInfo,
    get_circle_of_fifths,
)
from tonality.harmony.progression import (
    ChordProgressionCalculator,
    get_chord_progression_calculator,
)

__all__ = [
    "CIRCLE_OF_FIFTHS",
    "CircleOfFifths",
    "FifthInfo",
    "get_circle_of_fifths",
    "ChordProgressionCalculator",
    "get_chord_progression_calculator",
]
