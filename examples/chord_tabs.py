#!/usr/bin/env python3
"""
Example: Chord Tabs for Fretted Instruments.

This demonstrates the instrument library: looking up every position of a
chord on guitar and ukulele, and naming the chord a tab plays. Instruments
are YAML files - drop your own into an instruments/ directory to add or
override one.

Usage:
    python examples/chord_tabs.py
"""

import tempfile
from pathlib import Path

from tonality.fretboard import FretboardLookup, InstrumentLoader


def format_tab(tab: tuple[int, ...]) -> str:
    return " ".join("x" if fret < 0 else str(fret) for fret in tab)


def main() -> None:
    """Demonstrate chord tabs."""
    print("Tonality Chord Tabs Demo")
    print("=" * 40)
    print()

    with tempfile.TemporaryDirectory() as tmp:
        project_path = Path(tmp)

        # A project instrument alongside the built-in library
        (project_path / "baritone.yaml").write_text(
            "description: Baritone ukulele in DGBE\n"
            "tuning: [D3, G3, B3, E4]\n"
            "barre_chords:\n"
            "  G:\n"
            '    "M": [0, 0, 0, 3]\n'
        )
        loader = InstrumentLoader(project_path=project_path)

        print("Available instruments:")
        for meta in loader.list_instruments():
            print(f"  {meta.name}: {meta.description} ({' '.join(meta.tuning)})")
        print()

        for name in ["guitar", "ukulele"]:
            definition = loader.get_instrument(name)
            if not definition:
                print(f"Failed to load {name}")
                return
            lookup = FretboardLookup(definition)

            print(f"{name.capitalize()}:")
            for root, quality in [("C", "M"), ("A", "m"), ("Eb", "M7")]:
                tabs = lookup.get_chord_tabs(root, quality)
                print(f"  {root}{'' if quality == 'M' else quality}: {len(tabs)} positions")
                for tab in tabs[:3]:
                    print(f"    {format_tab(tab)}")
            print()

        # Reverse lookup
        ukulele = FretboardLookup(loader.get_instrument("ukulele"))  # type: ignore[arg-type]
        print("What am I playing on ukulele?")
        for tab in [[0, 0, 0, 3], [2, 2, 1, 0], [4, 4, 4, 5], [0, 0, 0, 0]]:
            chord = ukulele.get_chord_from_tab(tab)
            notes = " ".join(str(n) for n in ukulele.get_notes(tab) if n)
            print(f"  {format_tab(tuple(tab)):<9} {notes:<16} -> {chord.name if chord else '?'}")
        print()

    print("Done!")


if __name__ == "__main__":
    main()
