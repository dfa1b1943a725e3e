#!/usr/bin/env python3
"""
Example: Walking the Tonal System.

This demonstrates spelled pitch arithmetic. Stacking fifths keeps the
spelling (F# -> C# -> G#, never Gb), and walking down by fifths from B##
runs through every spelling until the accidentals saturate at Fbb.

Usage:
    python examples/tonal_walk.py
"""

from chuk_mcp_tonal.core import (
    TonalInterval,
    TonalPitch,
    UnrepresentableError,
    subtract_pitches,
)


def main() -> None:
    """Demonstrate tonal walks."""
    print("CHUK Tonal Walk Demo")
    print("=" * 40)
    print()

    fifth = TonalInterval.PERFECT_FIFTH

    # Circle of fifths upwards, keeping spelling
    print("Fifths up from Bb1:")
    pitch = TonalPitch.parse("Bb1")
    names = [pitch.name]
    for _ in range(12):
        pitch = pitch + fifth
        names.append(pitch.name)
    print("  " + " ".join(names))
    print(f"  Bb1 -> {pitch.name} spans {subtract_pitches(TonalPitch.parse('Bb1'), pitch)}")
    print()

    # Walk down by fifths until the spelling runs out
    print("Fifths down from B##20:")
    pitch = TonalPitch.parse("B##20")
    steps = 0
    while True:
        try:
            pitch = pitch - fifth
        except UnrepresentableError as e:
            print(f"  stopped after {steps} steps at {pitch.name}: {e}")
            break
        steps += 1
    print()

    # Intervals between pitches
    print("Intervals:")
    for first, second in [("G0", "C1"), ("C5", "G3"), ("C4", "C#4"), ("C#4", "C4")]:
        interval = subtract_pitches(TonalPitch.parse(first), TonalPitch.parse(second))
        print(f"  {first} -> {second}: {interval.symbol} ({interval.name})")


if __name__ == "__main__":
    main()
