"""
Chord tools - MCP tools for chord spelling, recognition and inversion.

Chord names follow '<root><quality>/<bass>', e.g. 'C', 'F#m7', 'Ddim/Ab'.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from tonality.constants import ErrorMessages
from tonality.core import (
    TheoryError,
    get_notes,
    identify_chord,
    parse_chord,
    parse_note,
    parse_scale,
)
from tonality.models.theory import ChordInfo

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _unparseable_chord(text: str) -> str:
    return json.dumps(
        {"status": "error", "message": ErrorMessages.UNPARSEABLE_CHORD.format(text=text)}
    )


def register_chord_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register chord tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def theory_describe_chord(chord: str) -> str:
        """
        Spell a chord: its tones (bass first), intervals and enharmonic alias.

        Args:
            chord: Chord name ('C', 'EbM7', 'F#sus4/C#', 'B♭m')

        Returns:
            JSON string with chord details

        Example:
            theory_describe_chord(chord="Ddim/Ab")
        """
        try:
            parsed = parse_chord(chord)
            if parsed is None:
                return _unparseable_chord(chord)

            return json.dumps(
                {
                    "status": "success",
                    "chord": ChordInfo.from_chord(parsed).model_dump(),
                }
            )
        except TheoryError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to describe chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_describe_chord"] = theory_describe_chord

    @mcp.tool  # type: ignore[arg-type]
    async def theory_identify_chord(notes: list[str], bass: str | None = None) -> str:
        """
        Name the chord formed by a set of notes.

        Order does not matter except that the first note is the bass unless
        a bass is given.

        Args:
            notes: Note names ('E', 'G', 'B', 'D')
            bass: Optional bass note

        Returns:
            JSON string with the chord, or an error if nothing matches

        Example:
            theory_identify_chord(notes=["A", "D", "F#", "B"])
        """
        try:
            parsed = get_notes(*notes)
            bass_note = None
            if bass:
                bass_note = parse_note(bass)
                if bass_note is None:
                    return json.dumps(
                        {
                            "status": "error",
                            "message": ErrorMessages.UNPARSEABLE_NOTE.format(text=bass),
                        }
                    )

            found = identify_chord(parsed, bass_note)
            if found is None:
                return json.dumps({"status": "error", "message": ErrorMessages.NO_CHORD_FOUND})

            return json.dumps(
                {
                    "status": "success",
                    "chord": ChordInfo.from_chord(found).model_dump(),
                }
            )
        except TheoryError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to identify chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_identify_chord"] = theory_identify_chord

    @mcp.tool  # type: ignore[arg-type]
    async def theory_chord_inversion(chord: str, inversion: int) -> str:
        """
        Get an inversion of a chord.

        Args:
            chord: Chord name
            inversion: Which tone goes to the bass (0 = as written, 1 = next, ...)

        Returns:
            JSON string with the inverted chord

        Example:
            theory_chord_inversion(chord="C", inversion=2)
        """
        try:
            parsed = parse_chord(chord)
            if parsed is None:
                return _unparseable_chord(chord)

            inverted = parsed.get_inversion(inversion)
            return json.dumps(
                {
                    "status": "success",
                    "original": parsed.name,
                    "inversion": inversion,
                    "chord": ChordInfo.from_chord(inverted).model_dump(),
                }
            )
        except TheoryError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to invert chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_chord_inversion"] = theory_chord_inversion

    @mcp.tool  # type: ignore[arg-type]
    async def theory_transpose_chord(chord: str, steps: int, key: str | None = None) -> str:
        """
        Transpose a chord by a number of semitones.

        With a key, the result is spelled the way that key spells it
        (Ab becomes G# in C#M).

        Args:
            chord: Chord name
            steps: Semitones, negative to go down
            key: Optional key for spelling

        Returns:
            JSON string with the transposed chord

        Example:
            theory_transpose_chord(chord="Am7", steps=5, key="F")
        """
        try:
            parsed = parse_chord(chord)
            if parsed is None:
                return _unparseable_chord(chord)

            transposed = parsed.transpose(steps)
            if key:
                scale = parse_scale(key)
                if scale is None:
                    return json.dumps(
                        {
                            "status": "error",
                            "message": ErrorMessages.UNPARSEABLE_SCALE.format(text=key),
                        }
                    )
                transposed = scale.get_chord_in_scale(transposed)

            return json.dumps(
                {
                    "status": "success",
                    "original": parsed.name,
                    "steps": steps,
                    "chord": ChordInfo.from_chord(transposed).model_dump(),
                }
            )
        except TheoryError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to transpose chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_transpose_chord"] = theory_transpose_chord

    return tools
