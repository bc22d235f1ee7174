"""
Note tools - MCP tools for note identity and transposition.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from tonality.constants import ErrorMessages
from tonality.core import TheoryError, parse_note, parse_scale
from tonality.models.theory import NoteInfo

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_note_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register note tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def theory_describe_note(note: str) -> str:
        """
        Describe a note: pitch class, enharmonic alias, MIDI and piano key number.

        Args:
            note: Note name with optional octave ('C#', 'Bb3', 'E♭5')

        Returns:
            JSON string with note details

        Example:
            theory_describe_note(note="C#4")
        """
        try:
            parsed = parse_note(note)
            if parsed is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.UNPARSEABLE_NOTE.format(text=note)}
                )

            return json.dumps(
                {
                    "status": "success",
                    "note": NoteInfo.from_note(parsed).model_dump(),
                }
            )
        except TheoryError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to describe note")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_describe_note"] = theory_describe_note

    @mcp.tool  # type: ignore[arg-type]
    async def theory_transpose_note(note: str, steps: int, key: str | None = None) -> str:
        """
        Transpose a note by a number of semitones.

        Without a key the result uses the standard spelling (C, C#, D, Eb,
        ...). With a key it is spelled the way that key spells it.

        Args:
            note: Note name with optional octave
            steps: Semitones, negative to go down
            key: Optional key for spelling ('C#', 'Ebm')

        Returns:
            JSON string with the original and transposed notes

        Example:
            theory_transpose_note(note="E4", steps=3, key="C#")
        """
        try:
            parsed = parse_note(note)
            if parsed is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.UNPARSEABLE_NOTE.format(text=note)}
                )

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
                transposed = scale.get_note_in_scale(transposed)

            return json.dumps(
                {
                    "status": "success",
                    "original": str(parsed),
                    "steps": steps,
                    "note": NoteInfo.from_note(transposed).model_dump(),
                }
            )
        except TheoryError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to transpose note")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_transpose_note"] = theory_transpose_note

    return tools
