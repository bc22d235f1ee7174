"""
MCP tool implementations.

Tools are organized by domain:
- notes - Note identity and transposition
- chords - Chord spelling, recognition, inversion and transposition
- scales - Keys, modes, circle of fifths and progressions
- fretboard - Instruments and chord tabs
"""

from tonality.tools.chords import register_chord_tools
from tonality.tools.fretboard import register_fretboard_tools
from tonality.tools.notes import register_note_tools
from tonality.tools.scales import register_scale_tools

__all__ = [
    "register_chord_tools",
    "register_fretboard_tools",
    "register_note_tools",
    "register_scale_tools",
]
