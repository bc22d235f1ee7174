"""
Fretted instruments - YAML instrument definitions and tab lookup.

Instruments ship in the built-in library (guitar, ukulele) and can be
added or overridden per project.
"""

from tonality.fretboard.loader import InstrumentLoader
from tonality.fretboard.lookup import FretboardLookup, Tab

__all__ = [
    "FretboardLookup",
    "InstrumentLoader",
    "Tab",
]
