"""
Classification tables and validators.

The single source of truth for which field values, and which combinations of
them, are legal. Validators are plain range checks returning bool; they never
raise, so callers decide which error to report.
"""

from __future__ import annotations

from typing import Any

from chuk_mcp_tonal.constants import (
    DIATONIC_POINTS,
    MAX_ALTERATION,
    MIN_ALTERATION,
    DiatonicInterval,
    DiatonicPitch,
    IntervalAlteration,
    IntervalDirection,
    PitchAlteration,
)

# Semitone offset of each diatonic point within an octave (the C major scale)
DT_TO_MPC_TABLE: tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)

# (diatonic interval, interval quality) -> class alteration, None = no such interval
_x = None
TIC_TO_TC_TABLE: tuple[tuple[int | None, ...], ...] = (
    # DIM  MINOR  MAJOR  PERF  AUG
    (-1, _x, _x, 0, 1),  # PRIME
    (-2, -1, 0, _x, 1),  # SECOND
    (-2, -1, 0, _x, 1),  # THIRD
    (-1, _x, _x, 0, 1),  # FOURTH
    (-1, _x, _x, 0, 1),  # FIFTH
    (-2, -1, 0, _x, 1),  # SIXTH
    (-2, -1, 0, _x, 1),  # SEVENTH
)
del _x

PERFECT_INTERVALS = frozenset(
    {DiatonicInterval.PRIME, DiatonicInterval.FOURTH, DiatonicInterval.FIFTH}
)
MAJOR_INTERVALS = frozenset(
    {
        DiatonicInterval.SECOND,
        DiatonicInterval.THIRD,
        DiatonicInterval.SIXTH,
        DiatonicInterval.SEVENTH,
    }
)

# Reverse lookups: class alteration -> quality, per interval family
_PERFECT_QUALITIES: dict[int, IntervalAlteration] = {
    -1: IntervalAlteration.DIMINISHED,
    0: IntervalAlteration.PERFECT,
    1: IntervalAlteration.AUGMENTED,
}
_MAJOR_QUALITIES: dict[int, IntervalAlteration] = {
    -2: IntervalAlteration.DIMINISHED,
    -1: IntervalAlteration.MINOR,
    0: IntervalAlteration.MAJOR,
    1: IntervalAlteration.AUGMENTED,
}


def is_integer(value: Any) -> bool:
    """True for ints (and int enums), False for bools and everything else."""
    return isinstance(value, int) and not isinstance(value, bool)


def _in_range(value: Any, low: int, high: int) -> bool:
    return is_integer(value) and low <= value <= high


def validate_diatonic_point(value: Any) -> bool:
    return _in_range(value, 0, DIATONIC_POINTS - 1)


def validate_alteration(value: Any) -> bool:
    return _in_range(value, MIN_ALTERATION, MAX_ALTERATION)


def validate_diatonic_pitch(value: Any) -> bool:
    return _in_range(value, DiatonicPitch.C, DiatonicPitch.B)


def validate_pitch_alteration(value: Any) -> bool:
    return _in_range(value, PitchAlteration.DOUBLE_FLAT, PitchAlteration.DOUBLE_SHARP)


def validate_diatonic_interval(value: Any) -> bool:
    return _in_range(value, DiatonicInterval.PRIME, DiatonicInterval.SEVENTH)


def validate_interval_alteration(value: Any) -> bool:
    return _in_range(value, IntervalAlteration.DIMINISHED, IntervalAlteration.AUGMENTED)


def validate_pitch_octave(value: Any) -> bool:
    """Pitches live at octave 0 and above."""
    return is_integer(value) and value >= 0


def validate_interval_octave(value: Any) -> bool:
    """Interval magnitudes are never negative; direction carries the sign."""
    return is_integer(value) and value >= 0


def validate_interval_direction(value: Any) -> bool:
    try:
        IntervalDirection(value)
    except ValueError:
        return False
    return True


def interval_class_alteration(diatonic_interval: int, interval_alteration: int) -> int | None:
    """
    Look up the class alteration for an interval number and quality.

    Args:
        diatonic_interval: Interval number (Prime..Seventh)
        interval_alteration: Interval quality (Diminished..Augmented)

    Returns:
        The signed alteration in the tonal class domain, or None when either
        field is out of range or the combination has no musical meaning
        (e.g. a minor prime)
    """
    if not validate_diatonic_interval(diatonic_interval):
        return None
    if not validate_interval_alteration(interval_alteration):
        return None
    return TIC_TO_TC_TABLE[diatonic_interval][interval_alteration]


def validate_interval_combination(diatonic_interval: int, interval_alteration: int) -> bool:
    return interval_class_alteration(diatonic_interval, interval_alteration) is not None


def interval_alteration_for(diatonic_interval: int, alteration: int) -> IntervalAlteration | None:
    """
    Reverse of interval_class_alteration.

    Primes, fourths and fifths are centred on Perfect; the other intervals
    are centred on Major. Returns None when the family has no quality for
    the given class alteration (e.g. a prime lowered by two semitones).
    """
    if diatonic_interval in PERFECT_INTERVALS:
        return _PERFECT_QUALITIES.get(alteration)
    if diatonic_interval in MAJOR_INTERVALS:
        return _MAJOR_QUALITIES.get(alteration)
    return None


def dt_get_mpc_value(diatonic_point: int) -> int | None:
    """
    Map a diatonic point to its pitch class number.

    {0..6} -> {0, 2, 4, 5, 7, 9, 11}. Returns None outside 0..6.
    """
    if not validate_diatonic_point(diatonic_point):
        return None
    return DT_TO_MPC_TABLE[diatonic_point]
