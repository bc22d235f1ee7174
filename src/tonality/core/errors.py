"""
Theory errors.

Raised synchronously by the typed constructors when a value breaks an
invariant. Free-text parsers never raise these for malformed input; they
return None instead.
"""

from __future__ import annotations


class TheoryError(ValueError):
    """Base class for invalid theory values."""


class InvalidNoteName(TheoryError):
    """The note name is not one of the known spellings."""


class UnknownChordQuality(TheoryError):
    """The chord quality token has no interval table."""


class InvalidBassNote(TheoryError):
    """The bass note is not a tone of the chord."""


class InvalidScaleMode(TheoryError):
    """The mode is not supported by the scale type."""
