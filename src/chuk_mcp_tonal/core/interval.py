"""
Interval primitives - TonalIntervalClass and TonalInterval.

A tonal interval is an interval number (Prime..Seventh) with a quality,
a whole number of octaves and a direction. The quality depends on the
interval number: primes, fourths and fifths are perfect-centred, the rest
are major-centred, so a "minor fifth" or "perfect third" cannot be built.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, ClassVar

from chuk_mcp_tonal.constants import (
    DIATONIC_INTERVAL_NAMES,
    DIATONIC_POINTS,
    INTERVAL_ALTERATION_NAMES,
    INTERVAL_ALTERATION_SYMBOLS,
    INTERVAL_DIRECTION_NAMES,
    DiatonicInterval,
    ErrorMessages,
    IntervalAlteration,
    IntervalDirection,
)
from chuk_mcp_tonal.core.element import TonalClass, TonalElement
from chuk_mcp_tonal.core.errors import (
    InvalidCombinationError,
    MissingOperandError,
    OutOfRangeError,
    TonalParseError,
    UnrepresentableError,
)
from chuk_mcp_tonal.core.tables import (
    interval_alteration_for,
    interval_class_alteration,
    validate_diatonic_interval,
    validate_interval_alteration,
    validate_interval_combination,
    validate_interval_direction,
    validate_interval_octave,
)

_INTERVAL_RE = re.compile(r"^([+-])?([dmMPA])(\d+)$")
_QUALITY_BY_SYMBOL: dict[str, IntervalAlteration] = {
    symbol: quality for quality, symbol in INTERVAL_ALTERATION_SYMBOLS.items()
}


def _check_interval_class_fields(diatonic_interval: Any, interval_alteration: Any) -> None:
    if not validate_diatonic_interval(diatonic_interval):
        raise OutOfRangeError(
            ErrorMessages.DIATONIC_INTERVAL_RANGE.format(value=diatonic_interval)
        )
    if not validate_interval_alteration(interval_alteration):
        raise OutOfRangeError(
            ErrorMessages.INTERVAL_ALTERATION_RANGE.format(value=interval_alteration)
        )
    if not validate_interval_combination(diatonic_interval, interval_alteration):
        raise InvalidCombinationError(
            ErrorMessages.INVALID_QUALITY.format(
                quality=INTERVAL_ALTERATION_NAMES[IntervalAlteration(interval_alteration)],
                interval=DIATONIC_INTERVAL_NAMES[DiatonicInterval(diatonic_interval)],
            )
        )


def _check_interval_fields(
    diatonic_interval: Any, interval_alteration: Any, octave: Any, direction: Any
) -> None:
    _check_interval_class_fields(diatonic_interval, interval_alteration)
    if not validate_interval_octave(octave):
        raise OutOfRangeError(ErrorMessages.INTERVAL_OCTAVE_RANGE.format(value=octave))
    if not validate_interval_direction(direction):
        raise OutOfRangeError(ErrorMessages.INTERVAL_DIRECTION.format(value=direction))
    # A prime may be perfect or augmented, never diminished
    if (
        octave == 0
        and diatonic_interval == DiatonicInterval.PRIME
        and interval_alteration == IntervalAlteration.DIMINISHED
    ):
        raise InvalidCombinationError(ErrorMessages.DIMINISHED_PRIME)


@dataclass(frozen=True)
class TonalIntervalClass:
    """
    An interval number with a quality, without octave or direction.

    Examples:
        TonalIntervalClass(DiatonicInterval.FOURTH, IntervalAlteration.AUGMENTED)
        TonalIntervalClass(DiatonicInterval.THIRD, IntervalAlteration.MINOR)

    Immutable and hashable.
    """

    diatonic_interval: DiatonicInterval
    interval_alteration: IntervalAlteration

    def __post_init__(self) -> None:
        _check_interval_class_fields(self.diatonic_interval, self.interval_alteration)
        object.__setattr__(self, "diatonic_interval", DiatonicInterval(self.diatonic_interval))
        object.__setattr__(
            self, "interval_alteration", IntervalAlteration(self.interval_alteration)
        )

    def is_valid(self) -> bool:
        return validate_interval_combination(self.diatonic_interval, self.interval_alteration)

    @property
    def name(self) -> str:
        """Quality and number, e.g. 'Augmented Fourth'."""
        return (
            f"{INTERVAL_ALTERATION_NAMES[self.interval_alteration]} "
            f"{DIATONIC_INTERVAL_NAMES[self.diatonic_interval]}"
        )

    @property
    def symbol(self) -> str:
        """Shorthand, e.g. 'A4'."""
        return f"{INTERVAL_ALTERATION_SYMBOLS[self.interval_alteration]}{self.diatonic_interval + 1}"

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class TonalInterval:
    """
    A directed interval spanning some octaves plus an interval class.

    The magnitude (octave, number, quality) is never negative; direction
    carries the sign. A diminished prime only exists across at least one
    octave (a diminished octave, for instance).

    Examples:
        TonalInterval(DiatonicInterval.FIFTH, IntervalAlteration.PERFECT) = P5 up
        TonalInterval(DiatonicInterval.PRIME, IntervalAlteration.PERFECT, 1) = octave up
        TonalInterval.parse("-m3") = minor third down

    Immutable and hashable.
    """

    diatonic_interval: DiatonicInterval
    interval_alteration: IntervalAlteration
    octave: int = 0
    direction: IntervalDirection = IntervalDirection.UP

    # Common intervals, all ascending (defined after class)
    UNISON: ClassVar[TonalInterval]
    MINOR_SECOND: ClassVar[TonalInterval]
    MAJOR_SECOND: ClassVar[TonalInterval]
    MINOR_THIRD: ClassVar[TonalInterval]
    MAJOR_THIRD: ClassVar[TonalInterval]
    PERFECT_FOURTH: ClassVar[TonalInterval]
    AUGMENTED_FOURTH: ClassVar[TonalInterval]
    DIMINISHED_FIFTH: ClassVar[TonalInterval]
    PERFECT_FIFTH: ClassVar[TonalInterval]
    MINOR_SIXTH: ClassVar[TonalInterval]
    MAJOR_SIXTH: ClassVar[TonalInterval]
    MINOR_SEVENTH: ClassVar[TonalInterval]
    MAJOR_SEVENTH: ClassVar[TonalInterval]
    OCTAVE: ClassVar[TonalInterval]

    def __post_init__(self) -> None:
        _check_interval_fields(
            self.diatonic_interval, self.interval_alteration, self.octave, self.direction
        )
        object.__setattr__(self, "diatonic_interval", DiatonicInterval(self.diatonic_interval))
        object.__setattr__(
            self, "interval_alteration", IntervalAlteration(self.interval_alteration)
        )
        object.__setattr__(self, "direction", IntervalDirection(self.direction))

    def is_valid(self) -> bool:
        try:
            _check_interval_fields(
                self.diatonic_interval, self.interval_alteration, self.octave, self.direction
            )
        except (OutOfRangeError, InvalidCombinationError):
            return False
        return True

    @property
    def interval_class(self) -> TonalIntervalClass:
        """The octave-free, undirected part of this interval."""
        return TonalIntervalClass(self.diatonic_interval, self.interval_alteration)

    @property
    def is_descending(self) -> bool:
        return self.direction == IntervalDirection.DOWN

    @property
    def number(self) -> int:
        """Compound interval number: 1 = prime, 8 = octave, 10 = tenth."""
        return self.octave * DIATONIC_POINTS + self.diatonic_interval + 1

    @property
    def symbol(self) -> str:
        """Shorthand such as 'P4', 'M10' or '-P5' (descending)."""
        sign = "-" if self.is_descending else ""
        return f"{sign}{INTERVAL_ALTERATION_SYMBOLS[self.interval_alteration]}{self.number}"

    @property
    def name(self) -> str:
        """Long description, e.g. 'Up 1 Octave(s) + Perfect Fourth'."""
        direction = INTERVAL_DIRECTION_NAMES[self.direction]
        return f"{direction} {self.octave} Octave(s) + {self.interval_class.name}"

    @classmethod
    def parse(cls, symbol: str) -> TonalInterval:
        """
        Parse interval shorthand.

        Quality letter (d, m, M, P, A) followed by a compound interval
        number; a leading '-' makes the interval descend.

        Examples:
            'P4' -> perfect fourth up
            '-P5' -> perfect fifth down
            'M10' -> major third up one octave
            'P8' -> perfect prime up one octave

        Raises:
            TonalParseError: If the text is not interval shorthand
            InvalidCombinationError: If the quality does not fit the number
        """
        match = _INTERVAL_RE.match(symbol.strip())
        if match is None:
            raise TonalParseError(ErrorMessages.UNPARSEABLE_INTERVAL.format(text=symbol))
        sign, quality, number = match.groups()
        steps = int(number) - 1
        if steps < 0:
            raise TonalParseError(ErrorMessages.UNPARSEABLE_INTERVAL.format(text=symbol))
        octave, diatonic_interval = divmod(steps, DIATONIC_POINTS)
        direction = IntervalDirection.DOWN if sign == "-" else IntervalDirection.UP
        return cls(
            DiatonicInterval(diatonic_interval),
            _QUALITY_BY_SYMBOL[quality],
            octave,
            direction,
        )

    def __add__(self, other: TonalInterval) -> TonalInterval:
        from chuk_mcp_tonal.core.arithmetic import add_intervals

        if not isinstance(other, TonalInterval):
            return NotImplemented
        return add_intervals(self, other)

    def __sub__(self, other: TonalInterval) -> TonalInterval:
        from chuk_mcp_tonal.core.arithmetic import subtract_intervals

        if not isinstance(other, TonalInterval):
            return NotImplemented
        return subtract_intervals(other, self)

    def __neg__(self) -> TonalInterval:
        from chuk_mcp_tonal.core.arithmetic import invert_interval

        return invert_interval(self)

    def __str__(self) -> str:
        return self.symbol


TonalInterval.UNISON = TonalInterval(DiatonicInterval.PRIME, IntervalAlteration.PERFECT)
TonalInterval.MINOR_SECOND = TonalInterval(DiatonicInterval.SECOND, IntervalAlteration.MINOR)
TonalInterval.MAJOR_SECOND = TonalInterval(DiatonicInterval.SECOND, IntervalAlteration.MAJOR)
TonalInterval.MINOR_THIRD = TonalInterval(DiatonicInterval.THIRD, IntervalAlteration.MINOR)
TonalInterval.MAJOR_THIRD = TonalInterval(DiatonicInterval.THIRD, IntervalAlteration.MAJOR)
TonalInterval.PERFECT_FOURTH = TonalInterval(DiatonicInterval.FOURTH, IntervalAlteration.PERFECT)
TonalInterval.AUGMENTED_FOURTH = TonalInterval(
    DiatonicInterval.FOURTH, IntervalAlteration.AUGMENTED
)
TonalInterval.DIMINISHED_FIFTH = TonalInterval(
    DiatonicInterval.FIFTH, IntervalAlteration.DIMINISHED
)
TonalInterval.PERFECT_FIFTH = TonalInterval(DiatonicInterval.FIFTH, IntervalAlteration.PERFECT)
TonalInterval.MINOR_SIXTH = TonalInterval(DiatonicInterval.SIXTH, IntervalAlteration.MINOR)
TonalInterval.MAJOR_SIXTH = TonalInterval(DiatonicInterval.SIXTH, IntervalAlteration.MAJOR)
TonalInterval.MINOR_SEVENTH = TonalInterval(DiatonicInterval.SEVENTH, IntervalAlteration.MINOR)
TonalInterval.MAJOR_SEVENTH = TonalInterval(DiatonicInterval.SEVENTH, IntervalAlteration.MAJOR)
TonalInterval.OCTAVE = TonalInterval(DiatonicInterval.PRIME, IntervalAlteration.PERFECT, 1)


def check_interval_class(tic: Any, name: str = "interval_class") -> TonalIntervalClass:
    """Re-validate an interval class at a public entry point."""
    if tic is None:
        raise MissingOperandError(ErrorMessages.MISSING_OPERAND.format(name=name))
    if not isinstance(tic, TonalIntervalClass):
        raise TypeError(
            ErrorMessages.WRONG_TYPE.format(
                expected="TonalIntervalClass", name=name, actual=type(tic).__name__
            )
        )
    _check_interval_class_fields(tic.diatonic_interval, tic.interval_alteration)
    return tic


def check_interval(ti: Any, name: str = "interval") -> TonalInterval:
    """Re-validate an interval at a public entry point."""
    if ti is None:
        raise MissingOperandError(ErrorMessages.MISSING_OPERAND.format(name=name))
    if not isinstance(ti, TonalInterval):
        raise TypeError(
            ErrorMessages.WRONG_TYPE.format(
                expected="TonalInterval", name=name, actual=type(ti).__name__
            )
        )
    _check_interval_fields(ti.diatonic_interval, ti.interval_alteration, ti.octave, ti.direction)
    return ti


# Adapters


def interval_class_to_class(tic: TonalIntervalClass) -> TonalClass:
    check_interval_class(tic)
    alteration = interval_class_alteration(tic.diatonic_interval, tic.interval_alteration)
    assert alteration is not None
    return TonalClass(int(tic.diatonic_interval - DiatonicInterval.PRIME), alteration)


def class_to_interval_class(tc: TonalClass) -> TonalIntervalClass:
    """
    Read a tonal class as an interval class.

    Raises:
        UnrepresentableError: If the interval number has no quality for the
            class alteration (a prime lowered by two, a second raised by two)
    """
    if tc is None:
        raise MissingOperandError(ErrorMessages.MISSING_OPERAND.format(name="tonal_class"))
    diatonic_interval = DiatonicInterval(tc.diatonic_point + DiatonicInterval.PRIME)
    quality = interval_alteration_for(diatonic_interval, tc.alteration)
    if quality is None:
        raise UnrepresentableError(
            ErrorMessages.UNREPRESENTABLE_QUALITY.format(
                interval=DIATONIC_INTERVAL_NAMES[diatonic_interval], value=tc.alteration
            )
        )
    tic = TonalIntervalClass(diatonic_interval, quality)
    assert tic.is_valid()
    return tic


def interval_to_element(ti: TonalInterval) -> TonalElement:
    check_interval(ti)
    tc = interval_class_to_class(ti.interval_class)
    te = TonalElement(tc.diatonic_point, tc.alteration, ti.octave)
    if ti.is_descending:
        te = te.invert()
    return te


def element_to_interval(te: TonalElement) -> TonalInterval:
    """
    Read an element as a directed interval.

    Elements below ZERO are inverted and reported as descending.

    Raises:
        UnrepresentableError: If the magnitude has no interval quality
    """
    if te is None:
        raise MissingOperandError(ErrorMessages.MISSING_OPERAND.format(name="element"))
    if te.is_descending():
        magnitude = te.invert()
        direction = IntervalDirection.DOWN
    else:
        magnitude = te
        direction = IntervalDirection.UP

    tic = class_to_interval_class(magnitude.tonal_class)
    assert magnitude.octave >= 0
    return TonalInterval(tic.diatonic_interval, tic.interval_alteration, magnitude.octave, direction)
