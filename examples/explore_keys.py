#!/usr/bin/env python3
"""
Example: Keys, Modes and Enharmonic Spelling.

This demonstrates how a key signature decides the spelling of every note
and chord in a key - Ebm is Eb F Gb Ab Bb Cb Db, never with sharps - and
how the circle of fifths and progression tables build on the same model.

Usage:
    python examples/explore_keys.py
"""

from tonality.core import get_chord, get_scale, identify_chord_from_names
from tonality.harmony import get_chord_progression_calculator, get_circle_of_fifths


def main() -> None:
    """Demonstrate keys and spelling."""
    print("Tonality Keys Demo")
    print("=" * 40)
    print()

    # Key signatures and spelling
    print("Key signatures:")
    for tonic, mode in [("C", "major"), ("G", "minor"), ("Eb", "minor"), ("C#", "major")]:
        scale = get_scale(tonic, mode)
        notes = " ".join(n.formatted_name for n in scale.notes)
        print(f"  {scale.formatted_name:>4} [{scale.signature}]: {notes}")
    print()

    # Modes share a signature count with their parent key
    print("Modes of the white keys:")
    for tonic, mode in [("D", "dorian"), ("E", "phrygian"), ("F", "lydian"), ("B", "locrian")]:
        scale = get_scale(tonic, mode)
        chords = " ".join(c.name for c in scale.chords)
        print(f"  {scale.name:>7}: {chords}")
    print()

    # Pentatonic and blues
    print("Pentatonic and blues:")
    for mode, scale_type in [("major", "pentatonic"), ("minor", "pentatonic"), ("minor", "blues")]:
        scale = get_scale("A", mode, scale_type)
        print(f"  {scale.name}: {' '.join(n.name for n in scale.notes)}")
    print()

    # Circle of fifths
    circle = get_circle_of_fifths(get_scale("G", "minor"))
    print("Gm on the circle of fifths:")
    for fifth in circle.fifths:
        print(f"  {fifth.position:>3} {fifth.note.name:<3} {fifth.degree_roman:<5} {fifth.degree_name}")
    print()

    # Progressions
    calculator = get_chord_progression_calculator(get_scale("G"))
    print("In G major, after...")
    for chord in calculator.scale.chords:
        following = ", ".join(c.name for c in calculator.next_chords(chord))
        print(f"  {chord.name:<5} -> {following}")
    print()

    # Same sound, different spelling
    print("Enharmonic chords:")
    for name in ["C#", "F#", "B"]:
        chord = get_chord(name, "m7")
        print(f"  {chord.name} = {chord.alias_chord.name}")
    print()

    # Naming chords from notes
    print("Chord recognition:")
    for notes in [("G", "C", "E"), ("A", "D", "F#", "B"), ("A", "Eb", "F#", "C")]:
        chord = identify_chord_from_names(*notes)
        print(f"  {' '.join(notes):<10} -> {chord.name if chord else '?'}")
    print()

    print("Done!")


if __name__ == "__main__":
    main()
