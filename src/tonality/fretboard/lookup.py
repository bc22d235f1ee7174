"""
Fretboard lookup - notes under the fingers and chord tabs.

Strings are numbered from the highest-pitched string (0) down, the way
guitarists count them. Tabs list frets in tab order, lowest-pitched
string first, so string 0 is the last tab entry.
"""

from __future__ import annotations

from collections.abc import Sequence
from functools import cached_property

from tonality.constants import MUTED, ChordQuality
from tonality.core.chord import Chord, make_chord, parse_chord
from tonality.core.lookup import identify_chord
from tonality.core.note import Note, note_from_name, note_from_pitch_class
from tonality.models.instrument import InstrumentDefinition

Tab = tuple[int, ...]


def _chord_key(root: Note, quality: ChordQuality | str) -> str:
    """Chord book key: name of the chord on the standard spelling of the root."""
    return make_chord(note_from_pitch_class(root.pitch_class), quality).name


def _move_shape(shape: Sequence[int], frets: int) -> Tab:
    """Slide a movable shape up the neck; muted strings stay muted."""
    return tuple(fret + frets if fret >= 0 else MUTED for fret in shape)


def _lowest_fret(tab: Tab) -> int:
    """Lowest fretted position; any open string makes it 0."""
    if 0 in tab:
        return 0
    fretted = [fret for fret in tab if fret > 0]
    return min(fretted) if fretted else 0


class FretboardLookup:
    """
    Notes and chord shapes for one fretted instrument.

    The chord book holds every open chord plus every barre shape moved up
    the neck, filed by chord name and sorted from the nut upward.
    """

    def __init__(self, definition: InstrumentDefinition):
        self.definition = definition
        self.tuning: tuple[Note, ...] = tuple(definition.tuning_notes())

    @property
    def string_count(self) -> int:
        return len(self.tuning)

    @cached_property
    def chord_book(self) -> dict[str, tuple[Tab, ...]]:
        """All chord tabs by chord name (standard root spelling)."""
        book: dict[str, list[Tab]] = {}

        for name, tabs in self.definition.open_chords.items():
            chord = parse_chord(name)
            if chord is None:
                continue
            book.setdefault(_chord_key(chord.root, chord.quality), []).extend(
                tuple(tab) for tab in tabs
            )

        for root_name, shapes in self.definition.barre_chords.items():
            for quality, shape in shapes.items():
                barre = make_chord(note_from_name(root_name), quality)
                for fret in range(self.definition.frets):
                    book.setdefault(barre.transpose(fret).name, []).append(
                        _move_shape(shape, fret)
                    )

        # sorted() is stable, so equal positions keep their insertion order
        return {name: tuple(sorted(tabs, key=_lowest_fret)) for name, tabs in book.items()}

    def get_note(self, string: int, fret: int) -> Note:
        """
        Get the note on a string at a fret.

        Args:
            string: String number, 0 is the highest-pitched string
            fret: Fret number, 0 is the open string
        """
        return self.tuning[-1 - string].transpose(fret)

    def get_notes(self, tab: Sequence[int]) -> list[Note | None]:
        """
        Get the notes of a tab.

        Returns:
            One entry per tab position in tab order, None for muted strings
        """
        last = len(tab) - 1
        return [
            self.get_note(last - index, fret) if fret >= 0 else None
            for index, fret in enumerate(tab)
        ]

    def get_chord_tabs(
        self, root: Note | str, quality: ChordQuality | str = ChordQuality.MAJOR
    ) -> list[Tab]:
        """
        Get every tab for a chord, lowest position first.

        Roots match by pitch class, so D# finds the Eb shapes. An empty
        quality means major. Known chords without a shape have no tabs.

        Raises:
            InvalidNoteName: if a root string is not a note
            UnknownChordQuality: if the quality is unknown
        """
        if isinstance(root, str):
            root = note_from_name(root)
        return list(self.chord_book.get(_chord_key(root, quality), ()))

    def get_chord_tab(
        self, root: Note | str, quality: ChordQuality | str = ChordQuality.MAJOR, variation: int = 0
    ) -> list[int] | None:
        """Get one tab for a chord, or None when the variation does not exist."""
        tabs = self.get_chord_tabs(root, quality)
        if 0 <= variation < len(tabs):
            return list(tabs[variation])
        return None

    def get_chord_variation_count(
        self, root: Note | str, quality: ChordQuality | str = ChordQuality.MAJOR
    ) -> int:
        return len(self.get_chord_tabs(root, quality))

    def get_chord_from_tab(self, tab: Sequence[int]) -> Chord | None:
        """
        Name the chord a tab plays.

        The lowest sounding string is the bass.
        """
        return identify_chord(self.get_notes(tab))
