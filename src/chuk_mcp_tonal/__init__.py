"""
chuk-mcp-tonal - spelled pitch and interval arithmetic.

Pitches and intervals keep their spelling through addition, subtraction and
inversion: G0 + P4 = C1, C1 - G0 = P4, Ebb4 + A1 = Eb4.
"""

from chuk_mcp_tonal.core import (
    TonalError,
    TonalInterval,
    TonalIntervalClass,
    TonalPitch,
    TonalPitchClass,
    add_interval_to_pitch,
    add_intervals,
    invert_interval,
    pitch_to_note_number,
    subtract_intervals,
    subtract_pitches,
)

__version__ = "0.1.0"

__all__ = [
    "TonalError",
    "TonalInterval",
    "TonalIntervalClass",
    "TonalPitch",
    "TonalPitchClass",
    "add_interval_to_pitch",
    "add_intervals",
    "invert_interval",
    "pitch_to_note_number",
    "subtract_intervals",
    "subtract_pitches",
]
