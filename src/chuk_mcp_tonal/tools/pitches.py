"""
Pitch tools - MCP tools for spelled pitch arithmetic.

Tools for describing pitches, transposing them by intervals and measuring
the interval between two pitches.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_tonal.core import (
    TonalError,
    add_interval_to_pitch,
    parse_interval,
    parse_pitch,
    pitch_to_note_number,
    subtract_pitches,
)
from chuk_mcp_tonal.models import IntervalModel, PitchModel

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_pitch_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register pitch tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def tonal_describe_pitch(pitch: str) -> str:
        """
        Describe a spelled pitch.

        Args:
            pitch: Pitch name (e.g., 'C4', 'G#3', 'Ebb1', 'Fx2')

        Returns:
            JSON string with letter, accidental, octave and note number

        Example:
            tonal_describe_pitch(pitch="G#4")
        """
        try:
            tp = parse_pitch(pitch)
            return json.dumps(
                {"status": "success", "pitch": PitchModel.from_pitch(tp).model_dump(mode="json")}
            )
        except TonalError as e:
            logger.debug("Rejected pitch %r: %s", pitch, e)
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to describe pitch")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tonal_describe_pitch"] = tonal_describe_pitch

    @mcp.tool  # type: ignore[arg-type]
    async def tonal_transpose(pitch: str, interval: str) -> str:
        """
        Transpose a pitch by an interval, preserving spelling.

        C# up an augmented prime is C##, not D. Results needing more than a
        double accidental, or falling below octave 0, are errors.

        Args:
            pitch: Pitch name (e.g., 'G0', 'Ebb4')
            interval: Interval shorthand (e.g., 'P4', 'A1', '-P5', 'M10')

        Returns:
            JSON string with the transposed pitch

        Example:
            tonal_transpose(pitch="G0", interval="P4")
        """
        try:
            tp = parse_pitch(pitch)
            ti = parse_interval(interval)
            result = add_interval_to_pitch(tp, ti)
            return json.dumps(
                {
                    "status": "success",
                    "pitch": tp.name,
                    "interval": ti.symbol,
                    "result": PitchModel.from_pitch(result).model_dump(mode="json"),
                }
            )
        except TonalError as e:
            logger.debug("Rejected transposition %r by %r: %s", pitch, interval, e)
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to transpose pitch")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tonal_transpose"] = tonal_transpose

    @mcp.tool  # type: ignore[arg-type]
    async def tonal_pitch_interval(from_pitch: str, to_pitch: str) -> str:
        """
        Get the interval leading from one pitch to another.

        Args:
            from_pitch: Starting pitch (e.g., 'G0')
            to_pitch: Target pitch (e.g., 'C1')

        Returns:
            JSON string with the directed interval

        Example:
            tonal_pitch_interval(from_pitch="G0", to_pitch="C1")
        """
        try:
            first = parse_pitch(from_pitch)
            second = parse_pitch(to_pitch)
            result = subtract_pitches(first, second)
            return json.dumps(
                {
                    "status": "success",
                    "from": first.name,
                    "to": second.name,
                    "interval": IntervalModel.from_interval(result).model_dump(mode="json"),
                }
            )
        except TonalError as e:
            logger.debug("Rejected pitch difference %r -> %r: %s", from_pitch, to_pitch, e)
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to measure interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tonal_pitch_interval"] = tonal_pitch_interval

    @mcp.tool  # type: ignore[arg-type]
    async def tonal_note_number(pitches: list[str]) -> str:
        """
        Convert pitches to note numbers.

        Note numbers count semitones from C0 = 0, so enharmonic spellings
        (D#4, Eb4) share a number.

        Args:
            pitches: Pitch names (e.g., ['C4', 'D#4', 'Eb4'])

        Returns:
            JSON string mapping each pitch to its note number

        Example:
            tonal_note_number(pitches=["C4", "A4"])
        """
        try:
            numbers = {name: pitch_to_note_number(parse_pitch(name)) for name in pitches}
            return json.dumps({"status": "success", "note_numbers": numbers})
        except TonalError as e:
            logger.debug("Rejected note number request %r: %s", pitches, e)
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to convert pitches")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tonal_note_number"] = tonal_note_number

    return tools
