"""
Tests for the public arithmetic API.

Tests cover the worked examples (transposition, interval stacking, pitch
differences), accidental saturation, long octave-crossing walks and the
boundary checks every public operation performs.
"""

import pytest

from chuk_mcp_tonal.constants import DiatonicInterval, IntervalAlteration, IntervalDirection
from chuk_mcp_tonal.core import (
    InvalidCombinationError,
    MissingOperandError,
    OutOfRangeError,
    TonalInterval,
    TonalPitch,
    UnrepresentableError,
    add_interval_to_pitch,
    add_intervals,
    invert_interval,
    pitch_to_note_number,
    subtract_intervals,
    subtract_pitches,
)

P = TonalPitch.parse
I = TonalInterval.parse  # noqa: E741


class TestWorkedExamples:
    """The textbook examples of tonal arithmetic."""

    def test_pitch_plus_interval(self) -> None:
        """G0 + P4 up = C1."""
        assert add_interval_to_pitch(P("G0"), I("P4")) == P("C1")

    def test_interval_plus_interval(self) -> None:
        """M3 up + m3 up = P5 up."""
        assert add_intervals(I("M3"), I("m3")) == TonalInterval.PERFECT_FIFTH

    def test_interval_plus_inverted_interval(self) -> None:
        """m7 up + inv(m3 up) = P5 up."""
        assert add_intervals(I("m7"), invert_interval(I("m3"))) == TonalInterval.PERFECT_FIFTH

    def test_pitch_difference(self) -> None:
        """The interval from G0 to C1 is P4 up."""
        assert subtract_pitches(P("G0"), P("C1")) == TonalInterval.PERFECT_FOURTH

    def test_interval_difference(self) -> None:
        """m7 - m3 = P5 (second minus first)."""
        assert subtract_intervals(I("m3"), I("m7")) == TonalInterval.PERFECT_FIFTH


class TestSpelling:
    """Arithmetic keeps spelling."""

    def test_augmented_fourth_vs_diminished_fifth(self) -> None:
        """C to F# and C to Gb are different intervals."""
        assert subtract_pitches(P("C4"), P("F#4")) == TonalInterval.AUGMENTED_FOURTH
        assert subtract_pitches(P("C4"), P("Gb4")) == TonalInterval.DIMINISHED_FIFTH

    def test_augmented_prime(self) -> None:
        """C# up an augmented prime is C##, not D."""
        assert add_interval_to_pitch(P("C#4"), I("A1")) == P("C##4")

    def test_lowered_prime_difference(self) -> None:
        """From C#4 to C4 is an augmented prime down."""
        result = subtract_pitches(P("C#4"), P("C4"))
        assert result == TonalInterval(
            DiatonicInterval.PRIME, IntervalAlteration.AUGMENTED, 0, IntervalDirection.DOWN
        )

    def test_compound_descending_difference(self) -> None:
        """From C5 down to G3 is a perfect eleventh down."""
        assert subtract_pitches(P("C5"), P("G3")).symbol == "-P11"

    def test_same_pitch(self) -> None:
        """A pitch minus itself is a unison."""
        assert subtract_pitches(P("Eb2"), P("Eb2")) == TonalInterval.UNISON

    def test_fifths_make_a_ninth(self) -> None:
        """P5 + P5 = M9."""
        assert add_intervals(I("P5"), I("P5")).symbol == "M9"

    def test_unrepresentable_interval_sum(self) -> None:
        """A1 + A1 would be a doubly augmented prime."""
        with pytest.raises(UnrepresentableError):
            add_intervals(I("A1"), I("A1"))


class TestSaturation:
    """Accidentals saturate at double sharp and double flat."""

    def test_augmented_prime_up(self) -> None:
        """Ebb4 reaches E##4 in four shifts; a fifth shift fails."""
        pitch = P("Ebb4")
        seen = []
        for _ in range(4):
            pitch = add_interval_to_pitch(pitch, I("A1"))
            seen.append(pitch.name)
        assert seen == ["Eb4", "E4", "E#4", "E##4"]
        with pytest.raises(UnrepresentableError):
            add_interval_to_pitch(pitch, I("A1"))

    def test_augmented_prime_down(self) -> None:
        """E##4 returns to Ebb4 in four shifts down; a fifth shift fails."""
        pitch = P("E##4")
        for _ in range(4):
            pitch = add_interval_to_pitch(pitch, I("-A1"))
        assert pitch == P("Ebb4")
        with pytest.raises(UnrepresentableError):
            add_interval_to_pitch(pitch, I("-A1"))

    def test_difference_needs_inverse(self) -> None:
        """D##4 to E4 fails: inverting D## would need a triple flat."""
        with pytest.raises(UnrepresentableError, match="alteration -3"):
            subtract_pitches(P("D##4"), P("E4"))
        # The interval exists and the other direction works
        assert subtract_pitches(P("E4"), P("D##4")) == I("-d2")
        assert add_interval_to_pitch(P("D##4"), I("d2")) == P("E4")


class TestLongWalk:
    """Octave-crossing walks stay exact."""

    def test_fifths_down(self) -> None:
        """B##20 walks down 34 perfect fifths to Fbb1; the 35th fails."""
        pitch = P("B##20")
        fifth_down = I("-P5")
        for _ in range(34):
            pitch = add_interval_to_pitch(pitch, fifth_down)
        assert pitch == P("Fbb1")
        with pytest.raises(UnrepresentableError):
            add_interval_to_pitch(pitch, fifth_down)

    def test_fifths_up_and_back(self) -> None:
        """Twelve fifths up and twelve down return to the start."""
        start = P("Bb1")
        pitch = start
        for _ in range(12):
            pitch = add_interval_to_pitch(pitch, I("P5"))
        assert pitch == P("A#8")
        for _ in range(12):
            pitch = add_interval_to_pitch(pitch, I("-P5"))
        assert pitch == start

    def test_below_octave_zero(self) -> None:
        """Results below octave 0 are not pitches."""
        with pytest.raises(UnrepresentableError):
            add_interval_to_pitch(P("C0"), I("-m2"))


class TestProperties:
    """Algebraic properties over whole value ranges."""

    def test_difference_then_add(self, all_pitches: list[TonalPitch]) -> None:
        """first + (second - first) == second whenever the difference exists."""
        origin = P("E2")
        for pitch in all_pitches:
            try:
                interval = subtract_pitches(origin, pitch)
            except UnrepresentableError:
                continue
            assert add_interval_to_pitch(origin, interval) == pitch

    def test_interval_inverse(self, all_intervals: list[TonalInterval]) -> None:
        """An interval plus its inversion is a unison."""
        for ti in all_intervals:
            assert add_intervals(ti, invert_interval(ti)) == TonalInterval.UNISON

    def test_unison_identity(self, all_intervals: list[TonalInterval]) -> None:
        """Adding a unison changes nothing (a unison down reads as up)."""
        descending_unison = I("-P1")
        for ti in all_intervals:
            expected = TonalInterval.UNISON if ti == descending_unison else ti
            assert add_intervals(ti, TonalInterval.UNISON) == expected

    def test_invert_unison(self) -> None:
        """The unison has no direction to flip."""
        assert invert_interval(TonalInterval.UNISON) == TonalInterval.UNISON


class TestNoteNumber:
    """Tests for pitch to note number conversion."""

    def test_values(self) -> None:
        """Note numbers are chromatic values from C0 = 0."""
        assert pitch_to_note_number(P("C0")) == 0
        assert pitch_to_note_number(P("C4")) == 48
        assert pitch_to_note_number(P("B##20")) == 253
        assert pitch_to_note_number(P("Cbb1")) == 10

    def test_forged(self) -> None:
        """Forged pitches are rejected."""
        tp = P("C4")
        object.__setattr__(tp, "octave", -3)
        with pytest.raises(OutOfRangeError):
            pitch_to_note_number(tp)


class TestOperators:
    """Operator forms of the arithmetic."""

    def test_pitch_plus_interval(self) -> None:
        """pitch + interval transposes."""
        assert P("G0") + I("P4") == P("C1")

    def test_pitch_minus_interval(self) -> None:
        """pitch - interval transposes down."""
        assert P("C1") - I("P4") == P("G0")

    def test_pitch_minus_pitch(self) -> None:
        """pitch - pitch is the interval from the right operand to the left."""
        assert P("C1") - P("G0") == TonalInterval.PERFECT_FOURTH
        assert (P("G0") - P("C1")).symbol == "-P4"

    def test_interval_arithmetic(self) -> None:
        """Intervals add, subtract and negate."""
        assert I("M3") + I("m3") == I("P5")
        assert I("m7") - I("m3") == I("P5")
        assert -I("P5") == I("-P5")

    def test_mixed_types(self) -> None:
        """Unsupported operand types raise TypeError."""
        with pytest.raises(TypeError):
            P("C4") + P("D4")  # type: ignore[operator]
        with pytest.raises(TypeError):
            I("P5") + 7  # type: ignore[operator]


class TestBoundaryChecks:
    """Public operations check their operands before computing."""

    def test_missing_operands(self) -> None:
        """None is a missing operand."""
        with pytest.raises(MissingOperandError):
            add_interval_to_pitch(None, I("P4"))  # type: ignore[arg-type]
        with pytest.raises(MissingOperandError):
            add_intervals(I("P4"), None)  # type: ignore[arg-type]
        with pytest.raises(MissingOperandError):
            subtract_pitches(P("C4"), None)  # type: ignore[arg-type]

    def test_wrong_types(self) -> None:
        """Pitches and intervals are not interchangeable."""
        with pytest.raises(TypeError):
            add_intervals(P("C4"), I("P4"))  # type: ignore[arg-type]

    def test_forged_interval(self) -> None:
        """A forged quality is rejected before the table lookup."""
        ti = I("P4")
        object.__setattr__(ti, "interval_alteration", IntervalAlteration.MINOR)
        with pytest.raises(InvalidCombinationError, match="Minor"):
            add_interval_to_pitch(P("C4"), ti)
