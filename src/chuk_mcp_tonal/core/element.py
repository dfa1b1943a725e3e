"""
Tonal element engine - TonalClass and TonalElement.

The internal representation shared by pitches and intervals. A tonal class
is a letter position plus an alteration; a tonal element adds an octave of
either sign. Arithmetic works on two integer coordinates per element:

    diatonic_value  = 7 * octave + diatonic_point
    chromatic_value = 12 * octave + mpc(diatonic_point) + alteration

Addition sums both coordinates independently and reconstructs an element
from the pair, which is what keeps spelling intact (C# + A1 = C##, never D).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from chuk_mcp_tonal.constants import (
    CHROMATIC_POINTS,
    DIATONIC_POINTS,
    MAX_CLASS_CHROMATIC,
    MIN_CLASS_CHROMATIC,
    ErrorMessages,
)
from chuk_mcp_tonal.core.errors import OutOfRangeError, UnrepresentableError
from chuk_mcp_tonal.core.tables import (
    dt_get_mpc_value,
    is_integer,
    validate_alteration,
    validate_diatonic_point,
)


def _check_class_fields(diatonic_point: int, alteration: int) -> None:
    if not validate_diatonic_point(diatonic_point):
        raise OutOfRangeError(ErrorMessages.DIATONIC_POINT_RANGE.format(value=diatonic_point))
    if not validate_alteration(alteration):
        raise OutOfRangeError(ErrorMessages.ALTERATION_RANGE.format(value=alteration))


@dataclass(frozen=True)
class TonalClass:
    """
    Octave-free tonal value: the abstraction behind pitch classes and
    interval classes.

    Immutable and hashable.
    """

    diatonic_point: int  # 0-6
    alteration: int  # -2..2

    def __post_init__(self) -> None:
        _check_class_fields(self.diatonic_point, self.alteration)

    def is_valid(self) -> bool:
        return validate_diatonic_point(self.diatonic_point) and validate_alteration(
            self.alteration
        )

    @property
    def mpc_value(self) -> int:
        """Semitone position within an octave, widened to -2..13 by the alteration."""
        return tc_get_mpc_value(self)


def tc_get_mpc_value(tc: TonalClass) -> int:
    """Map a tonal class to -2..13: the letter's pitch class plus its alteration."""
    _check_class_fields(tc.diatonic_point, tc.alteration)
    natural = dt_get_mpc_value(tc.diatonic_point)
    assert natural is not None
    mpc = natural + tc.alteration
    assert MIN_CLASS_CHROMATIC <= mpc <= MAX_CLASS_CHROMATIC
    return mpc


@dataclass(frozen=True)
class TonalElement:
    """
    Tonal class plus an octave of either sign.

    Elements form an additive group: ZERO is the identity and invert()
    gives the inverse. Pitches are elements at octave >= 0; intervals are
    elements whose sign encodes their direction.

    Immutable and hashable.
    """

    diatonic_point: int  # 0-6
    alteration: int  # -2..2
    octave: int = 0  # any integer

    ZERO: ClassVar[TonalElement]

    def __post_init__(self) -> None:
        _check_class_fields(self.diatonic_point, self.alteration)
        if not is_integer(self.octave):
            raise OutOfRangeError(ErrorMessages.OCTAVE_TYPE.format(value=self.octave))

    def is_valid(self) -> bool:
        return (
            validate_diatonic_point(self.diatonic_point)
            and validate_alteration(self.alteration)
            and is_integer(self.octave)
        )

    @property
    def tonal_class(self) -> TonalClass:
        """The octave-free part of this element."""
        return TonalClass(self.diatonic_point, self.alteration)

    @property
    def diatonic_value(self) -> int:
        """Position on the letter-name axis (base 7)."""
        return DIATONIC_POINTS * self.octave + self.diatonic_point

    @property
    def chromatic_value(self) -> int:
        """Position on the semitone axis (base 12). C0 = 0."""
        return CHROMATIC_POINTS * self.octave + self.tonal_class.mpc_value

    @classmethod
    def from_values(cls, diatonic_value: int, chromatic_value: int) -> TonalElement:
        """
        Reconstruct an element from its diatonic and chromatic values.

        The diatonic value alone fixes the letter and octave; the alteration
        is whatever the chromatic value needs on top of the natural letter.

        Raises:
            UnrepresentableError: If the alteration would fall outside -2..2
        """
        octave, diatonic_point = divmod(diatonic_value, DIATONIC_POINTS)
        chromatic_residue = chromatic_value - octave * CHROMATIC_POINTS

        if not MIN_CLASS_CHROMATIC <= chromatic_residue <= MAX_CLASS_CHROMATIC:
            raise UnrepresentableError(
                ErrorMessages.UNREPRESENTABLE_CHROMATIC.format(value=chromatic_residue)
            )

        probe = cls(diatonic_point, 0, 0)
        alteration = chromatic_residue - probe.chromatic_value
        if not validate_alteration(alteration):
            raise UnrepresentableError(
                ErrorMessages.UNREPRESENTABLE_ALTERATION.format(value=alteration)
            )

        element = cls(diatonic_point, alteration, octave)
        assert element.diatonic_value == diatonic_value
        assert element.chromatic_value == chromatic_value
        return element

    def invert(self) -> TonalElement:
        """Additive inverse: self + self.invert() == ZERO."""
        return TonalElement.from_values(-self.diatonic_value, -self.chromatic_value)

    def is_descending(self) -> bool:
        """
        True when the element sorts below ZERO.

        Elements compare by diatonic value first, then chromatic value, so
        besides every negative octave this also covers a lowered prime such
        as C - C#, which stays in octave 0.
        """
        return (self.diatonic_value, self.chromatic_value) < (0, 0)

    def __add__(self, other: TonalElement) -> TonalElement:
        if not isinstance(other, TonalElement):
            return NotImplemented
        return TonalElement.from_values(
            self.diatonic_value + other.diatonic_value,
            self.chromatic_value + other.chromatic_value,
        )

    def __neg__(self) -> TonalElement:
        return self.invert()

    def __sub__(self, other: TonalElement) -> TonalElement:
        """self - other == self + other.invert()"""
        if not isinstance(other, TonalElement):
            return NotImplemented
        return self + other.invert()

    def __repr__(self) -> str:
        return f"TonalElement({self.diatonic_point}, {self.alteration}, {self.octave})"


TonalElement.ZERO = TonalElement(0, 0, 0)
