"""
Tests for spelled pitches and their element conversions.
"""

import pytest

from chuk_mcp_tonal.constants import DiatonicPitch, PitchAlteration
from chuk_mcp_tonal.core import (
    MissingOperandError,
    OutOfRangeError,
    TonalClass,
    TonalElement,
    TonalParseError,
    TonalPitch,
    TonalPitchClass,
    UnrepresentableError,
    class_to_pitch_class,
    element_to_pitch,
    pitch_class_to_class,
    pitch_to_element,
)
from chuk_mcp_tonal.core.pitch import check_pitch


class TestTonalPitchClass:
    """Tests for TonalPitchClass."""

    def test_create(self) -> None:
        """Create a pitch class from enums."""
        tpc = TonalPitchClass(DiatonicPitch.G, PitchAlteration.DOUBLE_SHARP)
        assert tpc.diatonic_pitch == DiatonicPitch.G
        assert tpc.pitch_alteration == PitchAlteration.DOUBLE_SHARP

    def test_default_natural(self) -> None:
        """Alteration defaults to natural."""
        assert TonalPitchClass(DiatonicPitch.F).pitch_alteration == PitchAlteration.NATURAL

    def test_coerces_ints(self) -> None:
        """Plain ints become enum members."""
        tpc = TonalPitchClass(4, 1)
        assert tpc.diatonic_pitch is DiatonicPitch.G
        assert tpc.pitch_alteration is PitchAlteration.SHARP

    def test_invalid_alteration(self) -> None:
        """Triple sharps do not exist."""
        with pytest.raises(OutOfRangeError):
            TonalPitchClass(DiatonicPitch.C, 3)

    def test_invalid_letter(self) -> None:
        """There are only seven letters."""
        with pytest.raises(OutOfRangeError):
            TonalPitchClass(7, PitchAlteration.NATURAL)

    def test_name(self) -> None:
        """Names combine letter and accidental."""
        assert TonalPitchClass(DiatonicPitch.E, PitchAlteration.DOUBLE_FLAT).name == "Ebb"
        assert str(TonalPitchClass(DiatonicPitch.C)) == "C"

    def test_parse(self) -> None:
        """Parse pitch class names."""
        assert TonalPitchClass.parse("Bb") == TonalPitchClass(
            DiatonicPitch.B, PitchAlteration.FLAT
        )
        assert TonalPitchClass.parse("Fx") == TonalPitchClass(
            DiatonicPitch.F, PitchAlteration.DOUBLE_SHARP
        )
        with pytest.raises(TonalParseError):
            TonalPitchClass.parse("H")

    def test_to_class(self) -> None:
        """Pitch classes shift straight onto tonal classes."""
        tpc = TonalPitchClass(DiatonicPitch.G, PitchAlteration.DOUBLE_SHARP)
        assert pitch_class_to_class(tpc) == TonalClass(4, 2)

    def test_from_class(self) -> None:
        """Tonal classes shift back onto pitch classes."""
        assert class_to_pitch_class(TonalClass(4, 2)) == TonalPitchClass(
            DiatonicPitch.G, PitchAlteration.DOUBLE_SHARP
        )

    def test_round_trip(self) -> None:
        """Every pitch class survives a round trip."""
        for letter in DiatonicPitch:
            for alteration in PitchAlteration:
                tpc = TonalPitchClass(letter, alteration)
                assert class_to_pitch_class(pitch_class_to_class(tpc)) == tpc


class TestTonalPitch:
    """Tests for TonalPitch."""

    def test_create(self) -> None:
        """Create a pitch."""
        tp = TonalPitch(DiatonicPitch.G, PitchAlteration.SHARP, 4)
        assert tp.octave == 4
        assert tp.pitch_class == TonalPitchClass(DiatonicPitch.G, PitchAlteration.SHARP)

    def test_negative_octave(self) -> None:
        """Pitches below octave 0 are invalid."""
        with pytest.raises(OutOfRangeError):
            TonalPitch(DiatonicPitch.C, PitchAlteration.NATURAL, -1)

    def test_spelling_matters(self) -> None:
        """D#4 and Eb4 are different pitches with one note number."""
        d_sharp = TonalPitch(DiatonicPitch.D, PitchAlteration.SHARP, 4)
        e_flat = TonalPitch(DiatonicPitch.E, PitchAlteration.FLAT, 4)
        assert d_sharp != e_flat
        assert d_sharp.note_number == e_flat.note_number == 51

    def test_note_number(self) -> None:
        """Note numbers count semitones from C0."""
        assert TonalPitch.parse("C0").note_number == 0
        assert TonalPitch.parse("C4").note_number == 48
        assert TonalPitch.parse("A4").note_number == 57
        assert TonalPitch.parse("B#3").note_number == 48
        assert TonalPitch.parse("Cb4").note_number == 47

    def test_hashable(self) -> None:
        """Pitches can live in sets."""
        pitches = {TonalPitch.parse("C4"), TonalPitch.parse("C4"), TonalPitch.parse("B#3")}
        assert len(pitches) == 2

    def test_parse(self) -> None:
        """Parse pitch names."""
        assert TonalPitch.parse("G#4") == TonalPitch(DiatonicPitch.G, PitchAlteration.SHARP, 4)
        assert TonalPitch.parse(" Ebb1 ") == TonalPitch(
            DiatonicPitch.E, PitchAlteration.DOUBLE_FLAT, 1
        )
        assert TonalPitch.parse("B##20").octave == 20

    def test_parse_errors(self) -> None:
        """Malformed names and negative octaves are rejected."""
        with pytest.raises(TonalParseError):
            TonalPitch.parse("H4")
        with pytest.raises(TonalParseError):
            TonalPitch.parse("C")
        with pytest.raises(TonalParseError):
            TonalPitch.parse("C#b4")
        with pytest.raises(OutOfRangeError):
            TonalPitch.parse("C-1")

    def test_name(self) -> None:
        """Names include the octave."""
        assert TonalPitch(DiatonicPitch.G, PitchAlteration.SHARP, 4).name == "G#4"
        assert str(TonalPitch.parse("Fbb1")) == "Fbb1"


class TestPitchElements:
    """Tests for pitch <-> element conversion."""

    def test_to_element(self) -> None:
        """Pitches become elements with the same octave."""
        tp = TonalPitch(DiatonicPitch.G, PitchAlteration.SHARP, 4)
        assert pitch_to_element(tp) == TonalElement(4, 1, 4)

    def test_from_element(self) -> None:
        """Elements at octave >= 0 become pitches."""
        assert element_to_pitch(TonalElement(4, 1, 3)) == TonalPitch(
            DiatonicPitch.G, PitchAlteration.SHARP, 3
        )

    def test_from_negative_element(self) -> None:
        """Elements below octave 0 are not pitches."""
        with pytest.raises(UnrepresentableError):
            element_to_pitch(TonalElement(6, 0, -1))

    def test_round_trip(self, all_pitches: list[TonalPitch]) -> None:
        """Every pitch survives a round trip through the engine."""
        for tp in all_pitches:
            assert element_to_pitch(pitch_to_element(tp)) == tp


class TestForgedPitches:
    """Values forged around the constructor are caught at the boundary."""

    def test_forged_octave(self) -> None:
        """A pitch forced below octave 0 is rejected."""
        tp = TonalPitch.parse("C4")
        object.__setattr__(tp, "octave", -1)
        with pytest.raises(OutOfRangeError):
            check_pitch(tp)
        with pytest.raises(OutOfRangeError):
            pitch_to_element(tp)

    def test_forged_alteration(self) -> None:
        """A pitch forced to a triple sharp is rejected."""
        tp = TonalPitch.parse("C4")
        object.__setattr__(tp, "pitch_alteration", 3)
        with pytest.raises(OutOfRangeError):
            pitch_to_element(tp)

    def test_missing(self) -> None:
        """None is a missing operand."""
        with pytest.raises(MissingOperandError):
            check_pitch(None)

    def test_wrong_type(self) -> None:
        """Other types are rejected."""
        with pytest.raises(TypeError):
            check_pitch("C4")
