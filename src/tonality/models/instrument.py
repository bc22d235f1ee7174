"""
Instrument models - fretted instrument definitions.

An instrument is a tuning plus a chord book. Open chords are filed under
their chord name; barre chords are movable shapes filed under the root
they sound at fret 0 and the chord quality.

Tabs list one fret per string in tab order (lowest-pitched string first).
-1 marks a string that is not played.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator

from tonality.constants import MUTED
from tonality.core.chord import chord_intervals, parse_chord
from tonality.core.note import Note, parse_note


class InstrumentDefinition(BaseModel):
    """A fretted instrument loaded from YAML."""

    name: str = Field(..., description="Instrument identifier")
    description: str = Field(default="", description="Human readable description")
    tuning: list[str] = Field(
        ...,
        min_length=1,
        description="Open-string notes with octave, in tab order (lowest first)",
    )
    frets: int = Field(default=12, ge=1, description="Frets a barre shape is moved through")
    open_chords: dict[str, list[list[int]]] = Field(
        default_factory=dict,
        description="Chord name -> tabs",
    )
    barre_chords: dict[str, dict[str, list[int]]] = Field(
        default_factory=dict,
        description="Root note name -> quality -> movable tab at fret 0",
    )

    model_config = {"frozen": True}

    @field_validator("tuning")
    @classmethod
    def validate_tuning(cls, v: list[str]) -> list[str]:
        """Ensure every open string is a note."""
        for name in v:
            if parse_note(name) is None:
                raise ValueError(f"Invalid tuning note: {name}")
        return v

    @field_validator("open_chords")
    @classmethod
    def validate_open_chords(cls, v: dict[str, list[list[int]]]) -> dict[str, list[list[int]]]:
        """Ensure every open chord name parses with a known quality."""
        for name in v:
            chord = parse_chord(name)
            if chord is None:
                raise ValueError(f"Invalid chord name: {name}")
            chord_intervals(chord.quality)
        return v

    @field_validator("barre_chords")
    @classmethod
    def validate_barre_chords(
        cls, v: dict[str, dict[str, list[int]]]
    ) -> dict[str, dict[str, list[int]]]:
        """Ensure every barre root is a note and every quality is known."""
        for root, shapes in v.items():
            if parse_note(root) is None:
                raise ValueError(f"Invalid barre chord root: {root}")
            for quality in shapes:
                chord_intervals(quality)
        return v

    @model_validator(mode="after")
    def validate_tabs(self) -> InstrumentDefinition:
        """Ensure every tab has one valid fret per string."""
        tabs = [tab for tabs in self.open_chords.values() for tab in tabs]
        tabs += [tab for shapes in self.barre_chords.values() for tab in shapes.values()]
        for tab in tabs:
            if len(tab) != len(self.tuning):
                raise ValueError(f"Tab {tab} does not have {len(self.tuning)} strings")
            if any(fret < MUTED for fret in tab):
                raise ValueError(f"Tab {tab} has an invalid fret")
        return self

    @property
    def string_count(self) -> int:
        return len(self.tuning)

    def tuning_notes(self) -> list[Note]:
        """Open-string notes in tab order."""
        return [parse_note(name) for name in self.tuning]  # type: ignore[misc]


class InstrumentMetadata(BaseModel):
    """Lightweight metadata for listing instruments."""

    name: str
    description: str
    tuning: list[str]
    string_count: int

    model_config = {"frozen": True}

    @classmethod
    def from_definition(cls, definition: InstrumentDefinition) -> InstrumentMetadata:
        """Create metadata from an instrument definition."""
        return cls(
            name=definition.name,
            description=definition.description,
            tuning=list(definition.tuning),
            string_count=definition.string_count,
        )
