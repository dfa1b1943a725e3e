"""
Core tonal primitives - the arithmetic layer.

These are the values and operations everything else composes on:
- TonalClass / TonalElement: internal (letter, alteration[, octave]) values
  with exact addition and inversion
- TonalPitchClass / TonalPitch: spelled pitches (G#, Ebb4)
- TonalIntervalClass / TonalInterval: qualified, directed intervals (A4, -P5)
- Arithmetic: pitch + interval, interval + interval, pitch - pitch,
  interval - interval, pitch -> note number
- Spelling: formatting, printing and parsing
"""

from chuk_mcp_tonal.core.arithmetic import (
    add_interval_to_pitch,
    add_intervals,
    invert_interval,
    pitch_to_note_number,
    subtract_intervals,
    subtract_pitches,
)
from chuk_mcp_tonal.core.element import TonalClass, TonalElement, tc_get_mpc_value
from chuk_mcp_tonal.core.errors import (
    InvalidCombinationError,
    MissingOperandError,
    OutOfRangeError,
    TonalError,
    TonalParseError,
    UnrepresentableError,
)
from chuk_mcp_tonal.core.interval import (
    TonalInterval,
    TonalIntervalClass,
    class_to_interval_class,
    element_to_interval,
    interval_class_to_class,
    interval_to_element,
)
from chuk_mcp_tonal.core.pitch import (
    TonalPitch,
    TonalPitchClass,
    class_to_pitch_class,
    element_to_pitch,
    pitch_class_to_class,
    pitch_to_element,
)
from chuk_mcp_tonal.core.spelling import (
    format_element,
    format_interval,
    format_interval_class,
    format_pitch,
    format_pitch_class,
    interval_symbol,
    parse_interval,
    parse_pitch,
    parse_pitch_class,
    print_element,
    print_interval,
    print_interval_class,
    print_pitch,
    print_pitch_class,
)
from chuk_mcp_tonal.core.tables import dt_get_mpc_value

__all__ = [
    # Engine
    "TonalClass",
    "TonalElement",
    "dt_get_mpc_value",
    "tc_get_mpc_value",
    # Pitch
    "TonalPitchClass",
    "TonalPitch",
    "pitch_class_to_class",
    "class_to_pitch_class",
    "pitch_to_element",
    "element_to_pitch",
    # Interval
    "TonalIntervalClass",
    "TonalInterval",
    "interval_class_to_class",
    "class_to_interval_class",
    "interval_to_element",
    "element_to_interval",
    # Arithmetic
    "add_interval_to_pitch",
    "add_intervals",
    "subtract_pitches",
    "subtract_intervals",
    "invert_interval",
    "pitch_to_note_number",
    # Spelling
    "format_pitch_class",
    "format_pitch",
    "format_interval_class",
    "format_interval",
    "format_element",
    "interval_symbol",
    "print_pitch_class",
    "print_pitch",
    "print_interval_class",
    "print_interval",
    "print_element",
    "parse_pitch_class",
    "parse_pitch",
    "parse_interval",
    # Errors
    "TonalError",
    "OutOfRangeError",
    "InvalidCombinationError",
    "UnrepresentableError",
    "MissingOperandError",
    "TonalParseError",
]
