"""
Fretboard tools - MCP tools for instrument discovery and chord tabs.

Tabs are lists of frets in tab order (lowest string first), -1 for a
string that is not played.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from tonality.constants import ErrorMessages
from tonality.core import TheoryError, parse_chord
from tonality.fretboard import FretboardLookup, InstrumentLoader
from tonality.models.theory import ChordInfo

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_fretboard_tools(
    mcp: ChukMCPServer,
    instrument_loader: InstrumentLoader,
) -> dict[str, Any]:
    """
    Register fretboard tools with the MCP server.

    Args:
        mcp: The MCP server instance
        instrument_loader: The instrument loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}
    lookups: dict[str, FretboardLookup] = {}

    def get_lookup(name: str) -> FretboardLookup | None:
        if name not in lookups:
            definition = instrument_loader.get_instrument(name)
            if definition is None:
                return None
            lookups[name] = FretboardLookup(definition)
        return lookups[name]

    def not_found(name: str) -> str:
        return json.dumps(
            {"status": "error", "message": ErrorMessages.INSTRUMENT_NOT_FOUND.format(name=name)}
        )

    @mcp.tool  # type: ignore[arg-type]
    async def theory_list_instruments() -> str:
        """
        List available fretted instruments.

        Returns:
            JSON string with instrument names, tunings and string counts

        Example:
            theory_list_instruments()
        """
        try:
            instruments = instrument_loader.list_instruments()

            return json.dumps(
                {
                    "status": "success",
                    "instruments": [i.model_dump() for i in instruments],
                    "count": len(instruments),
                }
            )
        except Exception as e:
            logger.exception("Failed to list instruments")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_list_instruments"] = theory_list_instruments

    @mcp.tool  # type: ignore[arg-type]
    async def theory_chord_tabs(instrument: str, chord: str) -> str:
        """
        Get every known tab for a chord, lowest neck position first.

        The bass of a slash chord is ignored; shapes are matched by root
        and quality.

        Args:
            instrument: Instrument name ('guitar', 'ukulele')
            chord: Chord name ('C', 'F#m7', 'Ebsus4')

        Returns:
            JSON string with the tabs

        Example:
            theory_chord_tabs(instrument="guitar", chord="C")
        """
        try:
            lookup = get_lookup(instrument)
            if lookup is None:
                return not_found(instrument)

            parsed = parse_chord(chord)
            if parsed is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.UNPARSEABLE_CHORD.format(text=chord)}
                )

            tabs = lookup.get_chord_tabs(parsed.root, parsed.quality)
            return json.dumps(
                {
                    "status": "success",
                    "instrument": instrument,
                    "chord": parsed.name,
                    "tabs": [list(tab) for tab in tabs],
                    "count": len(tabs),
                }
            )
        except TheoryError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to get chord tabs")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_chord_tabs"] = theory_chord_tabs

    @mcp.tool  # type: ignore[arg-type]
    async def theory_chord_from_tab(instrument: str, tab: list[int]) -> str:
        """
        Name the chord a tab plays.

        Args:
            instrument: Instrument name
            tab: One fret per string in tab order, -1 for muted

        Returns:
            JSON string with the notes under the fingers and the chord

        Example:
            theory_chord_from_tab(instrument="ukulele", tab=[0, 0, 0, 3])
        """
        try:
            lookup = get_lookup(instrument)
            if lookup is None:
                return not_found(instrument)

            if len(tab) != lookup.string_count:
                return json.dumps(
                    {
                        "status": "error",
                        "message": f"Tab must have {lookup.string_count} frets for {instrument}",
                    }
                )

            notes = lookup.get_notes(tab)
            found = lookup.get_chord_from_tab(tab)
            if found is None:
                return json.dumps({"status": "error", "message": ErrorMessages.NO_CHORD_FOUND})

            return json.dumps(
                {
                    "status": "success",
                    "instrument": instrument,
                    "notes": [str(n) if n else None for n in notes],
                    "chord": ChordInfo.from_chord(found).model_dump(),
                }
            )
        except TheoryError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to identify tab")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_chord_from_tab"] = theory_chord_from_tab

    return tools
