"""
Public arithmetic API.

Each operation converts its operands to tonal elements, does the work in the
element engine and converts the result back. Operands are re-validated on
entry, so values forged around the constructors are rejected before they
reach the tables.

Subtraction reads "second minus first": subtract_pitches(a, b) is the
interval leading from a to b, so a + subtract_pitches(a, b) == b.
"""

from __future__ import annotations

from chuk_mcp_tonal.core.interval import (
    TonalInterval,
    check_interval,
    element_to_interval,
    interval_to_element,
)
from chuk_mcp_tonal.core.pitch import (
    TonalPitch,
    check_pitch,
    element_to_pitch,
    pitch_to_element,
)


def add_interval_to_pitch(pitch: TonalPitch, interval: TonalInterval) -> TonalPitch:
    """
    Transpose a pitch by an interval, keeping spelling.

    Examples:
        G0 + P4 up = C1
        Ebb4 + A1 up = Eb4

    Raises:
        UnrepresentableError: If the result needs more than a double
            accidental or falls below octave 0
    """
    check_pitch(pitch)
    check_interval(interval)
    return element_to_pitch(pitch_to_element(pitch) + interval_to_element(interval))


def add_intervals(first: TonalInterval, second: TonalInterval) -> TonalInterval:
    """
    Stack two intervals.

    Example:
        M3 up + m3 up = P5 up
    """
    check_interval(first, "first")
    check_interval(second, "second")
    return element_to_interval(interval_to_element(first) + interval_to_element(second))


def subtract_pitches(first: TonalPitch, second: TonalPitch) -> TonalInterval:
    """
    Interval leading from the first pitch to the second (second - first).

    The difference is taken as second + invert(first), so it fails whenever
    the first pitch has no inverse even if the interval itself exists:
    D##4 to E4 (a diminished second) raises because inverting D## would
    need a triple flat.

    Example:
        subtract_pitches(G0, C1) = P4 up
    """
    check_pitch(first, "first")
    check_pitch(second, "second")
    return element_to_interval(pitch_to_element(second) - pitch_to_element(first))


def subtract_intervals(first: TonalInterval, second: TonalInterval) -> TonalInterval:
    """
    Difference of two intervals (second - first).

    Example:
        subtract_intervals(m3 up, m7 up) = P5 up
    """
    check_interval(first, "first")
    check_interval(second, "second")
    return element_to_interval(interval_to_element(second) - interval_to_element(first))


def invert_interval(interval: TonalInterval) -> TonalInterval:
    """Same magnitude, opposite direction (the unison stays ascending)."""
    check_interval(interval)
    return element_to_interval(interval_to_element(interval).invert())


def pitch_to_note_number(pitch: TonalPitch) -> int:
    """
    Convert a pitch to its MIDI-like note number.

    This is the chromatic value of the pitch, counted from C0 = 0
    (so C4 = 48, A4 = 57). Spelling is lost: D#4 and Eb4 give the same number.
    """
    check_pitch(pitch)
    return pitch_to_element(pitch).chromatic_value
