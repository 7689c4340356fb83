"""
Note tools - MCP tools for transposing spelled notes.

Notes keep their spelling through transposition: C4 up a minor third is
Eb4, never D#4.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_intervals.core import parse_signed_interval
from chuk_mcp_intervals.notes import Note
from chuk_mcp_intervals.tools.intervals import interval_summary

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _note_summary(note: Note) -> dict[str, Any]:
    return {
        "note": str(note),
        "letter": note.letter.name,
        "accidental": note.accidental.notation,
        "octave": note.octave,
        "midi_number": note.midi_number,
        "pitch_class": note.pitch_class.spell(prefer_flats=note.accidental.is_flat()),
    }


def register_note_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register note transposition tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def music_transpose_note(note: str, interval: str) -> str:
        """
        Transpose a note by an interval.

        Args:
            note: Note in scientific pitch notation ('C4', 'F#3', 'Bb5')
            interval: Interval shorthand; a leading '-' transposes down

        Returns:
            JSON string with the transposed note

        Example:
            music_transpose_note(note="C4", interval="m3")
        """
        try:
            start = Note.parse(note)
            result = start + parse_signed_interval(interval)

            return json.dumps(
                {
                    "status": "success",
                    "from": _note_summary(start),
                    "interval": interval,
                    "result": _note_summary(result),
                }
            )
        except Exception as e:
            logger.exception("Failed to transpose note")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_transpose_note"] = music_transpose_note

    @mcp.tool  # type: ignore[arg-type]
    async def music_interval_between_notes(from_note: str, to_note: str) -> str:
        """
        Get the signed interval from one note to another.

        The interval respects spelling: C4 to D#4 is an augmented second,
        C4 to Eb4 a minor third.

        Args:
            from_note: Starting note ('C4')
            to_note: Target note ('G4')

        Returns:
            JSON string with the interval and whether the notes are enharmonic

        Example:
            music_interval_between_notes(from_note="C4", to_note="G4")
        """
        try:
            start = Note.parse(from_note)
            end = Note.parse(to_note)
            interval = start.interval_to(end)

            return json.dumps(
                {
                    "status": "success",
                    "from": _note_summary(start),
                    "to": _note_summary(end),
                    "interval": interval_summary(interval),
                    "enharmonic": start.is_enharmonic_to(end),
                }
            )
        except Exception as e:
            logger.exception("Failed to measure interval between notes")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_interval_between_notes"] = music_interval_between_notes

    return tools
