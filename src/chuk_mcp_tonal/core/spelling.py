"""
Spelling - formatting, printing and parsing of tonal values.

Formatting never mutates its input and refuses values that fail validation.
"""

from __future__ import annotations

import sys
from typing import TextIO

from chuk_mcp_tonal.constants import ErrorMessages
from chuk_mcp_tonal.core.element import TonalElement
from chuk_mcp_tonal.core.errors import OutOfRangeError
from chuk_mcp_tonal.core.interval import (
    TonalInterval,
    TonalIntervalClass,
    check_interval,
    check_interval_class,
)
from chuk_mcp_tonal.core.pitch import (
    TonalPitch,
    TonalPitchClass,
    check_pitch,
    check_pitch_class,
)


def format_pitch_class(tpc: TonalPitchClass) -> str:
    """'G#', 'Ebb', 'C'"""
    return check_pitch_class(tpc).name


def format_pitch(tp: TonalPitch) -> str:
    """'G#4', 'Ebb1', 'C0'"""
    return check_pitch(tp).name


def format_interval_class(tic: TonalIntervalClass) -> str:
    """'Augmented Fourth'"""
    return check_interval_class(tic).name


def format_interval(ti: TonalInterval) -> str:
    """'Up 1 Octave(s) + Perfect Fourth'"""
    return check_interval(ti).name


def interval_symbol(ti: TonalInterval) -> str:
    """'P4', 'M10', '-P5'"""
    return check_interval(ti).symbol


def format_element(te: TonalElement) -> str:
    """Debug form of an internal element: 'dt=4, alt=1, oct=3'."""
    if not te.is_valid():
        raise OutOfRangeError(ErrorMessages.INVALID_ELEMENT.format(element=te))
    return f"dt={te.diatonic_point}, alt={te.alteration}, oct={te.octave}"


def print_pitch_class(tpc: TonalPitchClass, stream: TextIO | None = None) -> None:
    (stream or sys.stdout).write(format_pitch_class(tpc))


def print_pitch(tp: TonalPitch, stream: TextIO | None = None) -> None:
    (stream or sys.stdout).write(format_pitch(tp))


def print_interval_class(tic: TonalIntervalClass, stream: TextIO | None = None) -> None:
    (stream or sys.stdout).write(format_interval_class(tic))


def print_interval(ti: TonalInterval, stream: TextIO | None = None) -> None:
    (stream or sys.stdout).write(format_interval(ti))


def print_element(te: TonalElement, stream: TextIO | None = None) -> None:
    (stream or sys.stdout).write(format_element(te))


def parse_pitch_class(text: str) -> TonalPitchClass:
    return TonalPitchClass.parse(text)


def parse_pitch(text: str) -> TonalPitch:
    return TonalPitch.parse(text)


def parse_interval(text: str) -> TonalInterval:
    return TonalInterval.parse(text)
