"""
Scale tools - MCP tools for keys, modes, the circle of fifths and
chord progressions.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from tonality.constants import ErrorMessages
from tonality.core import TheoryError, make_scale, parse_chord, parse_note, parse_scale
from tonality.harmony import get_chord_progression_calculator, get_circle_of_fifths
from tonality.models.theory import FifthView, ScaleInfo

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _unparseable_key(text: str) -> str:
    return json.dumps(
        {"status": "error", "message": ErrorMessages.UNPARSEABLE_SCALE.format(text=text)}
    )


def register_scale_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register scale tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def theory_describe_scale(
        tonic: str,
        mode: str = "major",
        scale_type: str = "diatonic",
    ) -> str:
        """
        Describe a scale: key signature, spelled notes and diatonic chords.

        Args:
            tonic: Tonic note name ('C', 'F#', 'B♭')
            mode: 'major', 'minor' or a diatonic mode ('dorian', 'lydian', ...).
                Pentatonic and blues scales take 'major' or 'minor'.
            scale_type: 'diatonic', 'pentatonic' or 'blues'

        Returns:
            JSON string with scale details

        Example:
            theory_describe_scale(tonic="Eb", mode="minor")
        """
        try:
            note = parse_note(tonic)
            if note is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.UNPARSEABLE_NOTE.format(text=tonic)}
                )

            scale = make_scale(note, mode, scale_type)
            return json.dumps(
                {
                    "status": "success",
                    "scale": ScaleInfo.from_scale(scale).model_dump(),
                }
            )
        except TheoryError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to describe scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_describe_scale"] = theory_describe_scale

    @mcp.tool  # type: ignore[arg-type]
    async def theory_circle_of_fifths(key: str, mode: str | None = None) -> str:
        """
        Place the degrees of a key on the circle of fifths.

        Args:
            key: Key name ('C', 'Gm', 'C#')
            mode: Optional diatonic mode overriding the key's major/minor

        Returns:
            JSON string with the degrees in circle order and in scale order

        Example:
            theory_circle_of_fifths(key="Gm")
        """
        try:
            scale = parse_scale(key)
            if scale is None:
                return _unparseable_key(key)
            if mode:
                scale = make_scale(scale.tonic, mode)

            circle = get_circle_of_fifths(scale)
            return json.dumps(
                {
                    "status": "success",
                    "key": scale.name,
                    "fifths": [FifthView.from_fifth(f).model_dump() for f in circle.fifths],
                    "ordered": [f.note.name for f in circle.ordered_fifths],
                }
            )
        except TheoryError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to build circle of fifths")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_circle_of_fifths"] = theory_circle_of_fifths

    @mcp.tool  # type: ignore[arg-type]
    async def theory_next_chords(key: str, chord: str | None = None) -> str:
        """
        Suggest chords that can follow a chord in a major or minor key.

        A chord outside the key (or no chord) is treated as the tonic.

        Args:
            key: Key name ('G', 'Am')
            chord: Current chord name

        Returns:
            JSON string with the chord's degree and the suggested chords

        Example:
            theory_next_chords(key="G", chord="Am")
        """
        try:
            scale = parse_scale(key)
            if scale is None:
                return _unparseable_key(key)

            calculator = get_chord_progression_calculator(scale)
            current = calculator.root_chord
            if chord:
                parsed = parse_chord(chord)
                if parsed is None:
                    return json.dumps(
                        {
                            "status": "error",
                            "message": ErrorMessages.UNPARSEABLE_CHORD.format(text=chord),
                        }
                    )
                current = scale.get_chord_in_scale(parsed)

            return json.dumps(
                {
                    "status": "success",
                    "key": scale.name,
                    "chord": current.name,
                    "degree": calculator.chord_number(current),
                    "next_chords": [c.name for c in calculator.next_chords(current)],
                }
            )
        except TheoryError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to suggest chords")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_next_chords"] = theory_next_chords

    return tools
