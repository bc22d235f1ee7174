"""
Pydantic models for the theory server.

This module provides:
- InstrumentDefinition: Fretted instrument loaded from YAML
- InstrumentMetadata: Listing entry for an instrument
- NoteInfo, ChordInfo, ScaleInfo, FifthView: JSON views of core values
"""

from tonality.models.instrument import InstrumentDefinition, InstrumentMetadata
from tonality.models.theory import ChordInfo, FifthView, NoteInfo, ScaleInfo

__all__ = [
    "ChordInfo",
    "FifthView",
    "InstrumentDefinition",
    "InstrumentMetadata",
    "NoteInfo",
    "ScaleInfo",
]
