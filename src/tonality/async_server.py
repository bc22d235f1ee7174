#!/usr/bin/env python3
"""
Async Theory MCP Server using chuk-mcp-server

This server provides MCP tools for Western tonal music theory: spelling
notes, chords and scales with correct enharmonics, naming chords from
notes, and looking up chord shapes on fretted instruments.

The server provides tools for:
- Describing and transposing notes
- Spelling, identifying, inverting and transposing chords
- Describing scales, the circle of fifths and chord progressions
- Guitar and ukulele chord tabs (instruments are YAML, you can add your own)
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from tonality.constants import INSTRUMENTS_DIR_ENV
from tonality.fretboard import InstrumentLoader
from tonality.tools import (
    register_chord_tools,
    register_fretboard_tools,
    register_note_tools,
    register_scale_tools,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("tonality")

# Paths - project instruments override the built-in library
BASE_PATH = Path.cwd()
INSTRUMENTS_DIR = Path(os.environ.get(INSTRUMENTS_DIR_ENV, BASE_PATH / "instruments"))
INSTRUMENTS_LIBRARY_PATH = Path(__file__).parent / "fretboard" / "library"

instrument_loader = InstrumentLoader(
    library_path=INSTRUMENTS_LIBRARY_PATH,
    project_path=INSTRUMENTS_DIR,
)

# Register all tools
note_tools = register_note_tools(mcp)
chord_tools = register_chord_tools(mcp)
scale_tools = register_scale_tools(mcp)
fretboard_tools = register_fretboard_tools(mcp, instrument_loader)

# Export tool functions for direct access
theory_describe_note = note_tools["theory_describe_note"]
theory_transpose_note = note_tools["theory_transpose_note"]

theory_describe_chord = chord_tools["theory_describe_chord"]
theory_identify_chord = chord_tools["theory_identify_chord"]
theory_chord_inversion = chord_tools["theory_chord_inversion"]
theory_transpose_chord = chord_tools["theory_transpose_chord"]

theory_describe_scale = scale_tools["theory_describe_scale"]
theory_circle_of_fifths = scale_tools["theory_circle_of_fifths"]
theory_next_chords = scale_tools["theory_next_chords"]

theory_list_instruments = fretboard_tools["theory_list_instruments"]
theory_chord_tabs = fretboard_tools["theory_chord_tabs"]
theory_chord_from_tab = fretboard_tools["theory_chord_from_tab"]

logger.info("Tonality MCP Server initialized")
logger.info(f"  Instrument library: {INSTRUMENTS_LIBRARY_PATH}")
logger.info(f"  Instruments dir: {INSTRUMENTS_DIR}")
