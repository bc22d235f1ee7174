"""
Tests for note identity.

Tests cover:
- Spellings, pitch classes and enharmonic aliases
- Transposition and octave roll-over
- Respelling against an accidental
- Parsing, sorting and the note pool
"""

import pytest

from tonality.constants import Accidental
from tonality.core import (
    STANDARD_NOTE_NAMES,
    InvalidNoteName,
    Note,
    NotePool,
    format_accidentals,
    get_notes,
    normalize_note_name,
    note_from_name,
    note_from_pitch_class,
    note_names,
    note_numbers,
    parse_note,
    sort_notes,
    unformat_accidentals,
)


class TestNoteIdentity:
    """Tests for spellings and aliases."""

    @pytest.mark.parametrize(
        "name,pitch_class,alias",
        [
            ("B#", 0, "C"),
            ("C", 0, "B#"),
            ("C#", 1, "Db"),
            ("Db", 1, "C#"),
            ("D", 2, None),
            ("Eb", 3, "D#"),
            ("E", 4, "Fb"),
            ("Fb", 4, "E"),
            ("E#", 5, "F"),
            ("F#", 6, "Gb"),
            ("G", 7, None),
            ("Ab", 8, "G#"),
            ("A", 9, None),
            ("Bb", 10, "A#"),
            ("Cb", 11, "B"),
        ],
    )
    def test_pitch_class_and_alias(self, name: str, pitch_class: int, alias: str | None) -> None:
        """Every spelling has one pitch class and at most one alias."""
        note = note_from_name(name)
        assert note.pitch_class == pitch_class
        assert note.alias_name == alias

    def test_alias_keeps_octave(self) -> None:
        """Alias is the same pitch in the same octave."""
        alias = Note("C#", 5).alias
        assert alias == Note("Db", 5)

    def test_no_alias(self) -> None:
        """D, G and A have no alias."""
        for name in ("D", "G", "A"):
            assert note_from_name(name).alias is None

    def test_invalid_name_raises(self) -> None:
        """Unknown spellings are rejected."""
        with pytest.raises(InvalidNoteName, match="H"):
            note_from_name("H")
        with pytest.raises(InvalidNoteName):
            Note("Cx")

    def test_value_equality(self) -> None:
        """== compares spelling and octave."""
        assert Note("C#", 4) == Note("C#", 4)
        assert Note("C#", 4) != Note("Db", 4)
        assert Note("C#", 4) != Note("C#", 5)

    def test_equals_compares_pitch(self) -> None:
        """equals() ignores spelling but not octave."""
        assert Note("A#", 4).equals(Note("Bb", 4))
        assert not Note("A#", 5).equals(Note("Bb", 4))

    def test_equals_ignore_octave(self) -> None:
        """equals_ignore_octave() compares pitch class only."""
        assert Note("A#", 5).equals_ignore_octave(Note("Bb", 4))
        assert Note("B#", 2).is_same_as(Note("C", 6))
        assert not Note("A", 4).equals_ignore_octave(Note("Ab", 4))

    def test_accidentals(self) -> None:
        """Accidental flags follow the name."""
        assert Note("F#").accidental is Accidental.SHARP
        assert Note("F#").is_sharp
        assert Note("Bb").is_flat
        assert Note("D").accidental is Accidental.NATURAL
        assert not Note("D").has_accidental

    def test_midi_and_key_numbers(self) -> None:
        """MIDI C4 = 60, piano A0 = key 1."""
        assert Note("C", 4).midi_number == 60
        assert Note("A", 0).midi_number == 21
        assert Note("A", 0).key_number == 1
        assert Note("C", 4).key_number == 40

    def test_str(self) -> None:
        """String form is name plus octave."""
        assert str(Note("Eb", 3)) == "Eb3"

    def test_formatted_name(self) -> None:
        """Formatted names use accidental glyphs."""
        assert Note("Bb").formatted_name == "B♭"
        assert Note("F#").formatted_name == "F♯"


class TestNoteTranspose:
    """Tests for transposition."""

    def test_transpose_up(self) -> None:
        """Transposition uses the standard spelling."""
        assert Note("C", 4).transpose(1) == Note("C#", 4)
        assert Note("C", 4).transpose(3) == Note("Eb", 4)
        assert Note("Db", 4).transpose(5) == Note("F#", 4)

    def test_transpose_rolls_octave(self) -> None:
        """Crossing B/C changes octave."""
        assert Note("B", 4).transpose(1) == Note("C", 5)
        assert Note("C", 4).transpose(-1) == Note("B", 3)
        assert Note("A", 4).transpose(15) == Note("C", 6)

    def test_from_pitch_class(self) -> None:
        """Integer notation rolls into neighbouring octaves."""
        assert note_from_pitch_class(0) == Note("C", 4)
        assert note_from_pitch_class(12) == Note("C", 5)
        assert note_from_pitch_class(-1) == Note("B", 3)
        assert note_from_pitch_class(-13) == Note("B", 2)
        assert note_from_pitch_class(25) == Note("C#", 6)

    def test_standard_names(self) -> None:
        """Standard spelling table."""
        assert [note_from_pitch_class(i).name for i in range(12)] == list(STANDARD_NOTE_NAMES)


class TestRespell:
    """Tests for respelling against an accidental."""

    def test_uses_alias_matching_accidental(self) -> None:
        """Alias is used when it carries the wanted accidental."""
        assert Note("F#").respell("b") == Note("Gb")
        assert Note("F").respell("#") == Note("E#")
        assert Note("B").respell(Accidental.FLAT) == Note("Cb")
        assert Note("Eb").respell("#") == Note("D#")

    def test_keeps_matching_spelling(self) -> None:
        """A note already spelled with the accidental is kept."""
        assert Note("Gb").respell("b") == Note("Gb")
        assert Note("Eb").respell("b") == Note("Eb")
        assert Note("D").respell("b") == Note("D")

    def test_reference_accidental(self) -> None:
        """A natural note is kept when the reference is natural."""
        assert Note("C").respell("#", reference="") == Note("C")
        assert Note("C").respell("#", reference="b") == Note("B#")


class TestParseNote:
    """Tests for parsing note strings."""

    def test_parse_name_only(self) -> None:
        """Octave defaults to 4."""
        assert parse_note("C#") == Note("C#", 4)

    def test_parse_with_octave(self) -> None:
        """Octave digits are read."""
        assert parse_note("Bb3") == Note("Bb", 3)
        assert parse_note("C10") == Note("C", 10)
        assert parse_note("A-1") == Note("A", -1)

    def test_parse_glyphs(self) -> None:
        """Glyph accidentals are accepted."""
        assert parse_note("E♭5") == Note("Eb", 5)
        assert parse_note(" F♯ ") == Note("F#", 4)

    def test_parse_invalid(self) -> None:
        """Unparseable text returns None."""
        assert parse_note("H") is None
        assert parse_note("") is None
        assert parse_note("C##") is None

    def test_get_notes(self) -> None:
        """get_notes parses every string and rejects bad ones."""
        assert note_names(get_notes("C", "E", "G")) == ["C", "E", "G"]
        with pytest.raises(InvalidNoteName):
            get_notes("C", "X")


class TestNoteHelpers:
    """Tests for list helpers."""

    def test_sort_from_root(self) -> None:
        """Notes below the root wrap to the top."""
        notes = get_notes("C", "E", "G", "A")
        assert note_names(sort_notes(notes, Note("G"))) == ["G", "A", "C", "E"]

    def test_sort_defaults_to_first(self) -> None:
        """Root defaults to the first note; the input is not changed."""
        notes = get_notes("E", "C", "G")
        assert note_names(sort_notes(notes)) == ["E", "G", "C"]
        assert note_names(notes) == ["E", "C", "G"]

    def test_sort_empty(self) -> None:
        """Empty input sorts to an empty list."""
        assert sort_notes([]) == []

    def test_note_numbers(self) -> None:
        """Pitch classes of a list."""
        assert note_numbers(get_notes("D", "F#", "A")) == [2, 6, 9]

    def test_normalize_note_name(self) -> None:
        """Standard spelling of a name."""
        assert normalize_note_name("Db") == "C#"
        assert normalize_note_name("A#") == "Bb"
        assert normalize_note_name("E#") == "F"

    def test_accidental_formatting(self) -> None:
        """Glyph conversion works both ways."""
        assert format_accidentals("Bbm/F#") == "B♭m/F♯"
        assert unformat_accidentals("B♭m/F♯") == "Bbm/F#"


class TestNotePool:
    """Tests for the interning pool."""

    def test_same_instance(self) -> None:
        """Pooled lookups return the identical note."""
        pool = NotePool()
        first = note_from_name("C#", 4, pool)
        second = parse_note("C#4", pool)
        assert first is second
        assert len(pool) == 1
        assert ("C#", 4) in pool

    def test_pool_from_pitch_class(self) -> None:
        """Pitch-class construction uses the pool too."""
        pool = NotePool()
        assert note_from_pitch_class(1, 4, pool) is note_from_name("C#", 4, pool)

    def test_clear(self) -> None:
        """Clearing drops pooled notes without changing equality."""
        pool = NotePool()
        note = pool.get("D", 2)
        pool.clear()
        assert len(pool) == 0
        assert pool.get("D", 2) == note
