"""
Pitch primitives - TonalPitchClass and TonalPitch.

Unlike a chromatic pitch class, a tonal pitch keeps its spelling: D# and Eb
are different values that merely share a note number. Both types convert to
and from the internal tonal class / element, which is where all arithmetic
happens.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from chuk_mcp_tonal.constants import (
    DIATONIC_PITCH_NAMES,
    PITCH_ALTERATION_NAMES,
    DiatonicPitch,
    ErrorMessages,
    PitchAlteration,
)
from chuk_mcp_tonal.core.element import TonalClass, TonalElement
from chuk_mcp_tonal.core.errors import (
    MissingOperandError,
    OutOfRangeError,
    TonalParseError,
    UnrepresentableError,
)
from chuk_mcp_tonal.core.tables import (
    validate_diatonic_pitch,
    validate_pitch_alteration,
    validate_pitch_octave,
)

if TYPE_CHECKING:
    from chuk_mcp_tonal.core.interval import TonalInterval

_PITCH_CLASS_RE = re.compile(r"^([A-G])(##|#|x|bb|b)?$")
_PITCH_RE = re.compile(r"^([A-G])(##|#|x|bb|b)?(-?\d+)$")

_ACCIDENTALS: dict[str, PitchAlteration] = {
    "bb": PitchAlteration.DOUBLE_FLAT,
    "b": PitchAlteration.FLAT,
    "": PitchAlteration.NATURAL,
    "#": PitchAlteration.SHARP,
    "##": PitchAlteration.DOUBLE_SHARP,
    "x": PitchAlteration.DOUBLE_SHARP,
}


def _check_pitch_class_fields(diatonic_pitch: Any, pitch_alteration: Any) -> None:
    if not validate_diatonic_pitch(diatonic_pitch):
        raise OutOfRangeError(ErrorMessages.DIATONIC_PITCH_RANGE.format(value=diatonic_pitch))
    if not validate_pitch_alteration(pitch_alteration):
        raise OutOfRangeError(ErrorMessages.PITCH_ALTERATION_RANGE.format(value=pitch_alteration))


@dataclass(frozen=True)
class TonalPitchClass:
    """
    A spelled, octave-free pitch: letter name plus accidental.

    Examples:
        TonalPitchClass(DiatonicPitch.G, PitchAlteration.SHARP) = G#
        TonalPitchClass(DiatonicPitch.A, PitchAlteration.FLAT) = Ab

    Immutable and hashable.
    """

    diatonic_pitch: DiatonicPitch
    pitch_alteration: PitchAlteration = PitchAlteration.NATURAL

    def __post_init__(self) -> None:
        _check_pitch_class_fields(self.diatonic_pitch, self.pitch_alteration)
        object.__setattr__(self, "diatonic_pitch", DiatonicPitch(self.diatonic_pitch))
        object.__setattr__(self, "pitch_alteration", PitchAlteration(self.pitch_alteration))

    def is_valid(self) -> bool:
        return validate_diatonic_pitch(self.diatonic_pitch) and validate_pitch_alteration(
            self.pitch_alteration
        )

    @property
    def name(self) -> str:
        """Spelled name, e.g. 'G#' or 'Ebb'."""
        return DIATONIC_PITCH_NAMES[self.diatonic_pitch] + PITCH_ALTERATION_NAMES[
            self.pitch_alteration
        ]

    def at_octave(self, octave: int) -> TonalPitch:
        """Place this pitch class in an octave."""
        return TonalPitch(self.diatonic_pitch, self.pitch_alteration, octave)

    @classmethod
    def parse(cls, name: str) -> TonalPitchClass:
        """Parse a pitch class from a string like 'C', 'F#', 'Bbb' or 'Gx'."""
        match = _PITCH_CLASS_RE.match(name.strip())
        if match is None:
            raise TonalParseError(ErrorMessages.UNPARSEABLE_PITCH_CLASS.format(text=name))
        letter, accidental = match.groups()
        return cls(DiatonicPitch[letter], _ACCIDENTALS[accidental or ""])

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class TonalPitch:
    """
    A spelled pitch in a specific octave.

    Octaves start at 0; C4 is middle C. Pitches below octave 0 do not exist.

    Examples:
        TonalPitch(DiatonicPitch.E, PitchAlteration.DOUBLE_FLAT, 4) = Ebb4
        TonalPitch.parse("G#4")

    Immutable and hashable.
    """

    diatonic_pitch: DiatonicPitch
    pitch_alteration: PitchAlteration
    octave: int

    def __post_init__(self) -> None:
        _check_pitch_class_fields(self.diatonic_pitch, self.pitch_alteration)
        if not validate_pitch_octave(self.octave):
            raise OutOfRangeError(ErrorMessages.PITCH_OCTAVE_RANGE.format(value=self.octave))
        object.__setattr__(self, "diatonic_pitch", DiatonicPitch(self.diatonic_pitch))
        object.__setattr__(self, "pitch_alteration", PitchAlteration(self.pitch_alteration))

    def is_valid(self) -> bool:
        return (
            validate_diatonic_pitch(self.diatonic_pitch)
            and validate_pitch_alteration(self.pitch_alteration)
            and validate_pitch_octave(self.octave)
        )

    @property
    def pitch_class(self) -> TonalPitchClass:
        """The octave-free part of this pitch."""
        return TonalPitchClass(self.diatonic_pitch, self.pitch_alteration)

    @property
    def name(self) -> str:
        """Spelled name with octave, e.g. 'G#4'."""
        return f"{self.pitch_class.name}{self.octave}"

    @property
    def note_number(self) -> int:
        """Chromatic value of this pitch (C0 = 0, C4 = 48)."""
        from chuk_mcp_tonal.core.arithmetic import pitch_to_note_number

        return pitch_to_note_number(self)

    @classmethod
    def parse(cls, name: str) -> TonalPitch:
        """
        Parse a pitch from a string like 'C4', 'G#3', 'Ebb1' or 'Fx2'.

        Raises:
            TonalParseError: If the text is not a pitch name
            OutOfRangeError: If the octave is negative
        """
        match = _PITCH_RE.match(name.strip())
        if match is None:
            raise TonalParseError(ErrorMessages.UNPARSEABLE_PITCH.format(text=name))
        letter, accidental, octave = match.groups()
        return cls(DiatonicPitch[letter], _ACCIDENTALS[accidental or ""], int(octave))

    def __add__(self, other: TonalInterval) -> TonalPitch:
        """Transpose by an interval."""
        from chuk_mcp_tonal.core.arithmetic import add_interval_to_pitch
        from chuk_mcp_tonal.core.interval import TonalInterval

        if not isinstance(other, TonalInterval):
            return NotImplemented
        return add_interval_to_pitch(self, other)

    def __sub__(self, other: Any) -> Any:
        """
        pitch - interval transposes downwards; pitch - pitch gives the
        interval leading from the other pitch to this one.
        """
        from chuk_mcp_tonal.core.arithmetic import (
            add_interval_to_pitch,
            invert_interval,
            subtract_pitches,
        )
        from chuk_mcp_tonal.core.interval import TonalInterval

        if isinstance(other, TonalPitch):
            return subtract_pitches(other, self)
        if isinstance(other, TonalInterval):
            return add_interval_to_pitch(self, invert_interval(other))
        return NotImplemented

    def __str__(self) -> str:
        return self.name


def check_pitch_class(tpc: Any, name: str = "pitch_class") -> TonalPitchClass:
    """Re-validate a pitch class at a public entry point."""
    if tpc is None:
        raise MissingOperandError(ErrorMessages.MISSING_OPERAND.format(name=name))
    if not isinstance(tpc, TonalPitchClass):
        raise TypeError(
            ErrorMessages.WRONG_TYPE.format(
                expected="TonalPitchClass", name=name, actual=type(tpc).__name__
            )
        )
    _check_pitch_class_fields(tpc.diatonic_pitch, tpc.pitch_alteration)
    return tpc


def check_pitch(tp: Any, name: str = "pitch") -> TonalPitch:
    """Re-validate a pitch at a public entry point."""
    if tp is None:
        raise MissingOperandError(ErrorMessages.MISSING_OPERAND.format(name=name))
    if not isinstance(tp, TonalPitch):
        raise TypeError(
            ErrorMessages.WRONG_TYPE.format(
                expected="TonalPitch", name=name, actual=type(tp).__name__
            )
        )
    _check_pitch_class_fields(tp.diatonic_pitch, tp.pitch_alteration)
    if not validate_pitch_octave(tp.octave):
        raise OutOfRangeError(ErrorMessages.PITCH_OCTAVE_RANGE.format(value=tp.octave))
    return tp


# Adapters


def pitch_class_to_class(tpc: TonalPitchClass) -> TonalClass:
    check_pitch_class(tpc)
    tc = TonalClass(
        int(tpc.diatonic_pitch - DiatonicPitch.C),
        int(tpc.pitch_alteration - PitchAlteration.NATURAL),
    )
    assert tc.is_valid()
    return tc


def class_to_pitch_class(tc: TonalClass) -> TonalPitchClass:
    if tc is None:
        raise MissingOperandError(ErrorMessages.MISSING_OPERAND.format(name="tonal_class"))
    return TonalPitchClass(
        DiatonicPitch(tc.diatonic_point + DiatonicPitch.C),
        PitchAlteration(tc.alteration + PitchAlteration.NATURAL),
    )


def pitch_to_element(tp: TonalPitch) -> TonalElement:
    check_pitch(tp)
    tc = pitch_class_to_class(tp.pitch_class)
    return TonalElement(tc.diatonic_point, tc.alteration, tp.octave)


def element_to_pitch(te: TonalElement) -> TonalPitch:
    """
    Read an element as a pitch.

    Raises:
        UnrepresentableError: If the element lies below octave 0
    """
    if te is None:
        raise MissingOperandError(ErrorMessages.MISSING_OPERAND.format(name="element"))
    if te.octave < 0:
        raise UnrepresentableError(ErrorMessages.PITCH_BELOW_ZERO.format(value=te.octave))
    tpc = class_to_pitch_class(te.tonal_class)
    tp = tpc.at_octave(te.octave)
    assert tp.is_valid()
    return tp
