"""
Tests for scales and key signatures.

Tests cover:
- Key signatures for every mode and tonic spelling
- Note spelling from the signature
- Diatonic chords per mode
- Pentatonic and blues scales
- Parsing, naming and validation
"""

import pytest

from tonality.constants import Accidental, ModeName, ScaleType
from tonality.core import (
    InvalidNoteName,
    InvalidScaleMode,
    KeySignature,
    Note,
    Scale,
    get_chord,
    get_scale,
    make_scale,
    note_names,
    parse_scale,
)


class TestKeySignature:
    """Tests for key signatures."""

    @pytest.mark.parametrize(
        "tonic,signature",
        [
            ("C", "0"),
            ("G", "1#"),
            ("D", "2#"),
            ("A", "3#"),
            ("E", "4#"),
            ("B", "5#"),
            ("F#", "6#"),
            ("C#", "7#"),
            ("F", "1b"),
            ("Bb", "2b"),
            ("Eb", "3b"),
            ("Ab", "4b"),
            ("Db", "5b"),
            ("Gb", "6b"),
            ("Cb", "7b"),
        ],
    )
    def test_major_keys(self, tonic: str, signature: str) -> None:
        """Major key signatures around the circle."""
        assert str(get_scale(tonic).signature) == signature

    @pytest.mark.parametrize(
        "tonic,mode,accidental,count",
        [
            ("G", "minor", "b", 2),
            ("Eb", "minor", "b", 6),
            ("A", "aeolian", "", 0),
            ("E", "minor", "#", 1),
            ("F#", "dorian", "#", 4),
            ("C#", "locrian", "#", 2),
            ("Cb", "lydian", "b", 6),
            ("F", "lydian", "", 0),
            ("D", "dorian", "", 0),
            ("E", "phrygian", "", 0),
            ("G", "mixolydian", "", 0),
            ("B", "locrian", "", 0),
        ],
    )
    def test_modes(self, tonic: str, mode: str, accidental: str, count: int) -> None:
        """Each darker mode adds a flat."""
        assert get_scale(tonic, mode).signature == KeySignature(Accidental(accidental), count)

    def test_str(self) -> None:
        """Signature strings show count and accidental."""
        assert str(KeySignature(Accidental.FLAT, 3)) == "3b"
        assert str(KeySignature(Accidental.NATURAL, 0)) == "0"


class TestScaleNotes:
    """Tests for scale spelling."""

    @pytest.mark.parametrize(
        "tonic,mode,expected",
        [
            ("C", "major", "C D E F G A B"),
            ("G", "minor", "G A Bb C D Eb F"),
            ("Eb", "minor", "Eb F Gb Ab Bb Cb Db"),
            ("F#", "dorian", "F# G# A B C# D# E"),
            ("C#", "locrian", "C# D E F# G A B"),
            ("Cb", "lydian", "Cb Db Eb F Gb Ab Bb"),
            ("C#", "major", "C# D# E# F# G# A# B#"),
            ("Gb", "major", "Gb Ab Bb Cb Db Eb F"),
            ("G", "major", "G A B C D E F#"),
            ("F", "major", "F G A Bb C D E"),
        ],
    )
    def test_notes(self, tonic: str, mode: str, expected: str) -> None:
        """Each letter appears once, spelled by the signature."""
        assert note_names(get_scale(tonic, mode).notes) == expected.split()

    def test_octaves_climb(self) -> None:
        """Notes past B move to the next octave."""
        notes = get_scale("A", "minor").notes
        assert notes[0] == Note("A", 4)
        assert notes[2] == Note("C", 5)


class TestScaleChords:
    """Tests for diatonic triads."""

    def test_major_chords(self) -> None:
        """I ii iii IV V vi vii°."""
        chords = [c.name for c in get_scale("G").chords]
        assert chords == ["G", "Am", "Bm", "C", "D", "Em", "F#dim"]

    def test_minor_chords(self) -> None:
        """i ii° III iv v VI VII with flat spelling."""
        chords = [c.name for c in get_scale("Eb", "minor").chords]
        assert chords == ["Ebm", "Fdim", "Gb", "Abm", "Bbm", "Cb", "Db"]

    def test_dorian_chords(self) -> None:
        """Modes start the triad pattern at their own degree."""
        chords = [c.name for c in get_scale("D", "dorian").chords]
        assert chords == ["Dm", "Em", "F", "G", "Am", "Bdim", "C"]

    def test_non_diatonic_has_no_chords(self) -> None:
        """Pentatonic and blues scales have no triad table."""
        assert get_scale("C", "major", "pentatonic").chords == ()
        assert get_scale("C", "minor", "blues").chords == ()


class TestPentatonicAndBlues:
    """Tests for pentatonic and blues scales."""

    def test_major_pentatonic(self) -> None:
        """Five notes of the major key."""
        scale = get_scale("C", "major", "pentatonic")
        assert note_names(scale.notes) == ["C", "D", "E", "G", "A"]

    def test_minor_pentatonic(self) -> None:
        """Five notes of the minor key."""
        scale = get_scale("A", "minor", ScaleType.PENTATONIC)
        assert note_names(scale.notes) == ["A", "C", "D", "E", "G"]

    def test_pentatonic_signature_from_parent_key(self) -> None:
        """Pentatonic scales spell like their parent key."""
        assert get_scale("E", "minor", "pentatonic").signature == get_scale("E", "minor").signature
        scale = get_scale("Eb", "minor", "pentatonic")
        assert note_names(scale.notes) == ["Eb", "Gb", "Ab", "Bb", "Db"]

    def test_minor_blues(self) -> None:
        """Minor blues adds the flat fifth."""
        scale = get_scale("C", "minor", "blues")
        assert note_names(scale.notes) == ["C", "Eb", "F", "Gb", "G", "Bb"]

    def test_major_blues(self) -> None:
        """Major blues adds the flat third."""
        scale = get_scale("C", "major", "blues")
        assert note_names(scale.notes) == ["C", "D", "Eb", "E", "G", "A"]

    def test_blues_signature_follows_tonic(self) -> None:
        """A sharp tonic keeps sharps in the blues table."""
        assert get_scale("C#", "minor", "blues").signature.accidental is Accidental.SHARP
        assert get_scale("Db", "minor", "blues").signature.accidental is Accidental.FLAT

    def test_rejects_modes(self) -> None:
        """Only major and minor exist outside the diatonic family."""
        with pytest.raises(InvalidScaleMode, match="dorian"):
            get_scale("C", "dorian", "pentatonic")
        with pytest.raises(InvalidScaleMode):
            get_scale("C", "ionian", "blues")


class TestScaleNames:
    """Tests for names and aliases."""

    @pytest.mark.parametrize(
        "tonic,mode,scale_type,name",
        [
            ("C", "major", "diatonic", "CM"),
            ("G", "minor", "diatonic", "Gm"),
            ("F", "lydian", "diatonic", "F(lyd)"),
            ("C", "ionian", "diatonic", "C(ion)"),
            ("C", "major", "pentatonic", "CM Pentatonic"),
            ("C", "minor", "blues", "Cm Blues"),
        ],
    )
    def test_names(self, tonic: str, mode: str, scale_type: str, name: str) -> None:
        """Scale names."""
        assert get_scale(tonic, mode, scale_type).name == name

    def test_formatted_name(self) -> None:
        """Formatted names use glyphs."""
        assert get_scale("Bb", "minor").formatted_name == "B♭m"

    def test_mode_alias(self) -> None:
        """Major and ionian are aliases; other modes have none."""
        assert get_scale("C").mode_alias is ModeName.IONIAN
        assert get_scale("C", "aeolian").mode_alias is ModeName.MINOR
        assert get_scale("C", "dorian").mode_alias is None
        assert get_scale("C", "major", "pentatonic").mode_alias is None

    def test_normalized_mode(self) -> None:
        """Diatonic major and minor resolve to their mode names."""
        assert get_scale("C").normalized_mode is ModeName.IONIAN
        assert get_scale("A", "minor").normalized_mode is ModeName.AEOLIAN
        assert get_scale("A", "minor", "blues").normalized_mode is ModeName.MINOR


class TestScaleSpelling:
    """Tests for spelling notes and chords in a key."""

    def test_note_in_scale(self) -> None:
        """Notes are respelled to the key's accidental."""
        scale = get_scale("C#")
        assert scale.get_note_name_in_scale("Ab") == "G#"
        assert scale.get_note_name_in_scale("F") == "E#"
        assert get_scale("G").get_note_name_in_scale("C") == "C"
        assert get_scale("Eb", "minor").get_note_in_scale(Note("B", 3)) == Note("Cb", 3)

    def test_note_in_scale_invalid_name(self) -> None:
        """Unknown names raise."""
        with pytest.raises(InvalidNoteName):
            get_scale("C").get_note_name_in_scale("H")

    def test_chord_in_scale(self) -> None:
        """Chords are respelled from the root's alias."""
        assert get_scale("C#").get_chord_in_scale(get_chord("Ab")).name == "G#"
        assert get_scale("G").get_chord_in_scale(get_chord("C")).name == "C"
        assert get_scale("Eb").get_chord_in_scale(get_chord("C#", "m")).name == "Dbm"


class TestParseScale:
    """Tests for parsing key names."""

    def test_major(self) -> None:
        """Bare roots and M are major."""
        assert parse_scale("C") == get_scale("C")
        assert parse_scale("F#M") == get_scale("F#")

    def test_minor(self) -> None:
        """A trailing m is minor."""
        scale = parse_scale("B♭m")
        assert scale is not None
        assert scale.name == "Bbm"

    def test_invalid(self) -> None:
        """Text that is not a key returns None."""
        assert parse_scale("X") is None
        assert parse_scale("Cmaj") is None
        assert parse_scale("") is None


class TestScaleValidation:
    """Tests for constructor validation and equality."""

    def test_unknown_mode(self) -> None:
        """Unknown modes raise."""
        with pytest.raises(InvalidScaleMode):
            make_scale(Note("C"), "bebop")

    def test_unknown_scale_type(self) -> None:
        """Unknown scale families raise."""
        with pytest.raises(InvalidScaleMode, match="chromatic"):
            Scale(Note("C"), ModeName.MAJOR, "chromatic")

    def test_equality_by_name(self) -> None:
        """Equal by name, same by sound."""
        assert get_scale("C#") != get_scale("Db")
        assert get_scale("C#").is_same_as(get_scale("Db"))
        assert get_scale("C") != get_scale("C", "ionian")
        assert get_scale("C").is_same_as(get_scale("C", "ionian"))
        assert not get_scale("C").is_same_as(get_scale("C", "major", "pentatonic"))

    def test_hashable(self) -> None:
        """Scales can be dictionary keys."""
        assert len({get_scale("C"), parse_scale("C"), get_scale("A", "minor")}) == 2
