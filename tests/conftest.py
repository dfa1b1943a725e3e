"""
Pytest configuration and shared fixtures.
"""

import pytest

from chuk_mcp_tonal.constants import (
    DiatonicInterval,
    DiatonicPitch,
    IntervalAlteration,
    IntervalDirection,
    PitchAlteration,
)
from chuk_mcp_tonal.core import TonalElement, TonalInterval, TonalPitch
from chuk_mcp_tonal.core.tables import validate_interval_combination


@pytest.fixture
def all_elements() -> list[TonalElement]:
    """Every element across a few octaves either side of zero."""
    return [
        TonalElement(dp, alt, octave)
        for dp in range(7)
        for alt in range(-2, 3)
        for octave in range(-3, 4)
    ]


@pytest.fixture
def all_pitches() -> list[TonalPitch]:
    """Every spelled pitch in octaves 0-3."""
    return [
        TonalPitch(letter, alteration, octave)
        for letter in DiatonicPitch
        for alteration in PitchAlteration
        for octave in range(4)
    ]


@pytest.fixture
def all_intervals() -> list[TonalInterval]:
    """Every constructible interval spanning up to two octaves, both directions."""
    intervals = []
    for number in DiatonicInterval:
        for quality in IntervalAlteration:
            if not validate_interval_combination(number, quality):
                continue
            for octave in range(3):
                if (
                    octave == 0
                    and number == DiatonicInterval.PRIME
                    and quality == IntervalAlteration.DIMINISHED
                ):
                    continue
                for direction in IntervalDirection:
                    intervals.append(TonalInterval(number, quality, octave, direction))
    return intervals
