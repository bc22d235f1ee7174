"""Conversion between ASCII accidentals (#, b) and display glyphs (♯, ♭)."""

from __future__ import annotations

_TO_GLYPHS = str.maketrans({"b": "♭", "#": "♯"})
_TO_ASCII = str.maketrans({"♭": "b", "♯": "#"})


def format_accidentals(text: str) -> str:
    """Replace ASCII accidentals with glyphs, e.g. 'Bb' -> 'B♭'."""
    return text.translate(_TO_GLYPHS)


def unformat_accidentals(text: str) -> str:
    """Replace accidental glyphs with ASCII, e.g. 'F♯m' -> 'F#m'."""
    return text.translate(_TO_ASCII)
