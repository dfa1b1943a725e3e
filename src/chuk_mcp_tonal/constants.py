"""
Constants and enums for the tonal system.

No magic numbers - use enums for letter names, accidentals, interval
numbers, qualities and directions.
"""

from enum import Enum, IntEnum


class DiatonicPitch(IntEnum):
    """The seven natural letter names, in scale order."""

    C = 0
    D = 1
    E = 2
    F = 3
    G = 4
    A = 5
    B = 6


class PitchAlteration(IntEnum):
    """
    Accidentals, valued in semitones.

    The value is added directly to the letter's semitone offset.
    """

    DOUBLE_FLAT = -2
    FLAT = -1
    NATURAL = 0
    SHARP = 1
    DOUBLE_SHARP = 2


class DiatonicInterval(IntEnum):
    """Interval numbers within one octave (Prime = unison)."""

    PRIME = 0
    SECOND = 1
    THIRD = 2
    FOURTH = 3
    FIFTH = 4
    SIXTH = 5
    SEVENTH = 6


class IntervalAlteration(IntEnum):
    """Interval qualities. Values index the quality table columns."""

    DIMINISHED = 0
    MINOR = 1
    MAJOR = 2
    PERFECT = 3
    AUGMENTED = 4


class IntervalDirection(str, Enum):
    """Direction of a tonal interval."""

    UP = "up"
    DOWN = "down"


# Axis sizes
DIATONIC_POINTS = 7
CHROMATIC_POINTS = 12

# Alteration limits (double-flat .. double-sharp)
MIN_ALTERATION = -2
MAX_ALTERATION = 2

# Class part of a chromatic value: one octave widened by the alteration limits
MIN_CLASS_CHROMATIC = MIN_ALTERATION
MAX_CLASS_CHROMATIC = CHROMATIC_POINTS - 1 + MAX_ALTERATION

# Display strings
DIATONIC_PITCH_NAMES: dict[DiatonicPitch, str] = {
    DiatonicPitch.C: "C",
    DiatonicPitch.D: "D",
    DiatonicPitch.E: "E",
    DiatonicPitch.F: "F",
    DiatonicPitch.G: "G",
    DiatonicPitch.A: "A",
    DiatonicPitch.B: "B",
}

PITCH_ALTERATION_NAMES: dict[PitchAlteration, str] = {
    PitchAlteration.DOUBLE_FLAT: "bb",
    PitchAlteration.FLAT: "b",
    PitchAlteration.NATURAL: "",
    PitchAlteration.SHARP: "#",
    PitchAlteration.DOUBLE_SHARP: "##",
}

DIATONIC_INTERVAL_NAMES: dict[DiatonicInterval, str] = {
    DiatonicInterval.PRIME: "Prime",
    DiatonicInterval.SECOND: "Second",
    DiatonicInterval.THIRD: "Third",
    DiatonicInterval.FOURTH: "Fourth",
    DiatonicInterval.FIFTH: "Fifth",
    DiatonicInterval.SIXTH: "Sixth",
    DiatonicInterval.SEVENTH: "Seventh",
}

INTERVAL_ALTERATION_NAMES: dict[IntervalAlteration, str] = {
    IntervalAlteration.DIMINISHED: "Diminished",
    IntervalAlteration.MINOR: "Minor",
    IntervalAlteration.MAJOR: "Major",
    IntervalAlteration.PERFECT: "Perfect",
    IntervalAlteration.AUGMENTED: "Augmented",
}

# Short quality symbols used in interval shorthand (P4, m3, A1, ...)
INTERVAL_ALTERATION_SYMBOLS: dict[IntervalAlteration, str] = {
    IntervalAlteration.DIMINISHED: "d",
    IntervalAlteration.MINOR: "m",
    IntervalAlteration.MAJOR: "M",
    IntervalAlteration.PERFECT: "P",
    IntervalAlteration.AUGMENTED: "A",
}

INTERVAL_DIRECTION_NAMES: dict[IntervalDirection, str] = {
    IntervalDirection.UP: "Up",
    IntervalDirection.DOWN: "Down",
}


class ErrorMessages:
    """Standardized error messages."""

    DIATONIC_POINT_RANGE = "Diatonic point must be 0-6, got {value}"
    ALTERATION_RANGE = "Alteration must be -2..2, got {value}"
    DIATONIC_PITCH_RANGE = "Diatonic pitch must be C-B (0-6), got {value}"
    PITCH_ALTERATION_RANGE = "Pitch alteration must be -2..2, got {value}"
    PITCH_OCTAVE_RANGE = "Pitch octave must be >= 0, got {value}"
    DIATONIC_INTERVAL_RANGE = "Diatonic interval must be Prime-Seventh (0-6), got {value}"
    INTERVAL_ALTERATION_RANGE = "Interval alteration must be Diminished-Augmented (0-4), got {value}"
    INTERVAL_OCTAVE_RANGE = "Interval octave must be >= 0, got {value}"
    INTERVAL_DIRECTION = "Interval direction must be up or down, got {value!r}"
    OCTAVE_TYPE = "Octave must be an integer, got {value!r}"
    INVALID_QUALITY = "{quality} is not a valid quality for a {interval}"
    DIMINISHED_PRIME = "A prime within one octave cannot be diminished"
    UNREPRESENTABLE_ALTERATION = "Result needs alteration {value}, outside -2..2"
    UNREPRESENTABLE_CHROMATIC = "Chromatic residue {value} is outside -2..13"
    UNREPRESENTABLE_QUALITY = "No {interval} quality has class alteration {value}"
    PITCH_BELOW_ZERO = "Result lies in octave {value}, below octave 0"
    MISSING_OPERAND = "Missing operand: {name}"
    WRONG_TYPE = "Expected {expected} for {name}, got {actual}"
    UNPARSEABLE_PITCH = "Unknown pitch: '{text}'. Expected format like 'C4', 'G#3' or 'Ebb1'."
    UNPARSEABLE_PITCH_CLASS = "Unknown pitch class: '{text}'. Expected format like 'C', 'F#' or 'Bbb'."
    UNPARSEABLE_INTERVAL = "Unknown interval: '{text}'. Expected format like 'P4', 'm3', '-P5' or 'M10'."
    INVALID_ELEMENT = "Invalid tonal element: {element!r}"
