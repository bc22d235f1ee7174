"""
Theory view models - serializable snapshots of notes, chords and scales.

The core types are plain dataclasses with computed properties. These
models flatten them into JSON-friendly payloads for the MCP tools.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from tonality.core.chord import Chord
from tonality.core.note import Note
from tonality.core.scale import Scale
from tonality.harmony.circle import FifthInfo


class NoteInfo(BaseModel):
    """A note and its derived identities."""

    name: str
    formatted_name: str
    octave: int
    pitch_class: int = Field(..., ge=0, le=11)
    accidental: str
    alias: str | None = Field(default=None, description="Enharmonic spelling, if any")
    midi_number: int
    key_number: int = Field(..., description="Piano key number (A0 = 1)")

    model_config = {"frozen": True}

    @classmethod
    def from_note(cls, note: Note) -> NoteInfo:
        return cls(
            name=note.name,
            formatted_name=note.formatted_name,
            octave=note.octave,
            pitch_class=note.pitch_class,
            accidental=note.accidental.value,
            alias=note.alias_name,
            midi_number=note.midi_number,
            key_number=note.key_number,
        )


class ChordInfo(BaseModel):
    """A chord, its tones and its enharmonic spelling."""

    name: str
    formatted_name: str
    root: str
    quality: str
    bass: str
    notes: list[str] = Field(..., description="Chord tones, bass first")
    intervals: list[int] = Field(..., description="Semitones above the root")
    is_inverted: bool
    alias: str = Field(..., description="Chord spelled from the root's alias")

    model_config = {"frozen": True}

    @classmethod
    def from_chord(cls, chord: Chord) -> ChordInfo:
        """Create a view from a chord. Resolves the chord's tones."""
        return cls(
            name=chord.name,
            formatted_name=chord.formatted_name,
            root=chord.root.name,
            quality=chord.quality_token,
            bass=chord.bass.name,
            notes=[n.name for n in chord.notes],
            intervals=list(chord.intervals),
            is_inverted=chord.is_inverted,
            alias=chord.alias_chord.name,
        )


class ScaleInfo(BaseModel):
    """A scale with its signature, notes and diatonic chords."""

    name: str
    formatted_name: str
    tonic: str
    mode: str
    mode_alias: str | None = None
    scale_type: str
    signature_accidental: str
    signature_count: int
    notes: list[str]
    chords: list[str] = Field(default_factory=list, description="Empty unless diatonic")

    model_config = {"frozen": True}

    @classmethod
    def from_scale(cls, scale: Scale) -> ScaleInfo:
        return cls(
            name=scale.name,
            formatted_name=scale.formatted_name,
            tonic=scale.tonic.name,
            mode=scale.mode.value,
            mode_alias=scale.mode_alias.value if scale.mode_alias else None,
            scale_type=scale.scale_type.value,
            signature_accidental=scale.signature.accidental.value,
            signature_count=scale.signature.count,
            notes=[n.name for n in scale.notes],
            chords=[c.name for c in scale.chords],
        )


class FifthView(BaseModel):
    """One degree of a key on the circle of fifths."""

    note: str
    position: int
    quality: str
    degree_number: int = Field(..., ge=1, le=7)
    degree_name: str
    degree_roman: str

    model_config = {"frozen": True}

    @classmethod
    def from_fifth(cls, fifth: FifthInfo) -> FifthView:
        return cls(
            note=fifth.note.name,
            position=fifth.position,
            quality=fifth.quality,
            degree_number=fifth.degree_number,
            degree_name=fifth.degree_name,
            degree_roman=fifth.degree_roman,
        )
