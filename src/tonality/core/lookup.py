"""
Chord recognition - name an unordered set of notes.

Each rotation of the notes (sorted upward from the bass) is compared with
every chord quality. The first rotation, then the first quality in
declaration order, that matches exactly names the chord.
"""

from __future__ import annotations

from collections.abc import Iterable

from tonality.constants import ChordQuality
from tonality.core.chord import CHORD_INTERVALS, Chord
from tonality.core.note import Note, get_notes, sort_notes

# Interval tables folded into one octave, so 9ths match as pitch classes
_FOLDED_INTERVALS: dict[ChordQuality, tuple[int, ...]] = {
    quality: tuple(sorted({i % 12 for i in intervals}))
    for quality, intervals in CHORD_INTERVALS.items()
}


def _distinct(notes: Iterable[Note | None]) -> list[Note]:
    """Drop muted entries and repeated pitch classes, keeping first occurrences."""
    distinct: list[Note] = []
    for note in notes:
        if note is None:
            continue
        if not any(note.equals_ignore_octave(n) for n in distinct):
            distinct.append(note)
    return distinct


def identify_chord(notes: Iterable[Note | None], bass: Note | None = None) -> Chord | None:
    """
    Find the chord formed by a set of notes.

    Args:
        notes: Notes in any order; None entries (muted strings) are ignored
        bass: Lowest note; defaults to the first note. A bass that is not
            among the notes is added to them.

    Returns:
        The matching chord (inverted when the bass is not its root), or None
        when fewer than two pitch classes sound or nothing matches.

    Example:
        >>> identify_chord(get_notes("G", "C", "E")).name
        'C/G'
    """
    distinct = _distinct(notes)
    if bass is None:
        if not distinct:
            return None
        bass = distinct[0]
    elif not any(bass.equals_ignore_octave(n) for n in distinct):
        distinct.append(bass)

    if len(distinct) < 2:
        return None

    ordered = sort_notes(distinct, bass)
    for offset in range(len(ordered)):
        rotated = ordered[offset:] + ordered[:offset]
        start = rotated[0].pitch_class
        intervals = tuple((n.pitch_class - start) % 12 for n in rotated)
        for quality, folded in _FOLDED_INTERVALS.items():
            if intervals == folded:
                return Chord(rotated[0], quality, bass)
    return None


def identify_chord_from_names(*names: str) -> Chord | None:
    """
    Find the chord formed by note strings; the first one is the bass.

    Raises:
        InvalidNoteName: if a string is not a note
    """
    return identify_chord(get_notes(*names))
