"""
Tonal models - JSON-facing descriptions of pitches and intervals.

These are read-only views built from the core values; tools return them
instead of hand-assembled dicts.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from chuk_mcp_tonal.constants import (
    DIATONIC_INTERVAL_NAMES,
    DIATONIC_PITCH_NAMES,
    INTERVAL_ALTERATION_NAMES,
    PITCH_ALTERATION_NAMES,
    IntervalDirection,
)
from chuk_mcp_tonal.core import (
    TonalInterval,
    TonalPitch,
    format_interval,
    format_pitch,
    interval_symbol,
    pitch_to_note_number,
)


class PitchModel(BaseModel):
    """A spelled pitch."""

    name: str = Field(..., description="Spelled name, e.g. 'G#4'")
    letter: str = Field(..., description="Diatonic pitch letter (C-B)")
    accidental: str = Field("", description="Accidental suffix ('bb', 'b', '', '#', '##')")
    alteration: int = Field(..., ge=-2, le=2, description="Alteration in semitones")
    octave: int = Field(..., ge=0, description="Octave number (C4 = middle C)")
    note_number: int = Field(..., description="Chromatic value, C0 = 0")

    model_config = {"frozen": True}

    @classmethod
    def from_pitch(cls, pitch: TonalPitch) -> PitchModel:
        return cls(
            name=format_pitch(pitch),
            letter=DIATONIC_PITCH_NAMES[pitch.diatonic_pitch],
            accidental=PITCH_ALTERATION_NAMES[pitch.pitch_alteration],
            alteration=int(pitch.pitch_alteration),
            octave=pitch.octave,
            note_number=pitch_to_note_number(pitch),
        )


class IntervalModel(BaseModel):
    """A qualified, directed interval."""

    symbol: str = Field(..., description="Shorthand, e.g. 'P4' or '-m3'")
    name: str = Field(..., description="Long form, e.g. 'Up 0 Octave(s) + Perfect Fourth'")
    quality: str = Field(..., description="Diminished, Minor, Major, Perfect or Augmented")
    number: str = Field(..., description="Interval number within the octave (Prime-Seventh)")
    octave: int = Field(..., ge=0, description="Whole octaves spanned")
    direction: IntervalDirection = Field(..., description="Up or down")

    model_config = {"frozen": True}

    @classmethod
    def from_interval(cls, interval: TonalInterval) -> IntervalModel:
        return cls(
            symbol=interval_symbol(interval),
            name=format_interval(interval),
            quality=INTERVAL_ALTERATION_NAMES[interval.interval_alteration],
            number=DIATONIC_INTERVAL_NAMES[interval.diatonic_interval],
            octave=interval.octave,
            direction=interval.direction,
        )
