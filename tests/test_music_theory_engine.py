"""
Tests for core/music_theory/engine.py — get_scale_data, transpose_scale, degree_chords.

Validates:
    - Full analysis for Ionian, Aeolian, blues, pentatonic and chromatic scales
    - Fallback to Ionian tables for unknown scale names and roots
    - Transposition re-derives the analysis
    - Chord tables at both detail levels
    - ScaleData is an immutable, comparable, serializable value
"""

import dataclasses
import json

import pytest

from core.music_theory import (
    ScaleData,
    ScaleDegree,
    degree_chords,
    get_available_notes,
    get_available_scales,
    get_scale_data,
    transpose_scale,
)
from core.music_theory.chords import CHORD_QUALITIES
from core.music_theory.scales import ROMAN_NUMERALS, SCALE_PATTERNS

# ---------------------------------------------------------------------------
# get_scale_data — Ionian
# ---------------------------------------------------------------------------


class TestIonian:
    @pytest.fixture()
    def data(self) -> ScaleData:
        return get_scale_data("C", "ionian (major)")

    def test_notes(self, data):
        assert data.notes == ("C", "D", "E", "F", "G", "A", "B")

    def test_name_and_key(self, data):
        assert data.name == "C ionian (major)"
        assert data.key_signature == "C"

    def test_first_degree(self, data):
        first = data.degrees[0]
        assert first == ScaleDegree(
            label="1",
            chord="Cmaj7",
            notes=("C", "E", "G", "B"),
            interval="Root",
            quality="maj7",
            roman="I",
            note="C",
            extensions=("D", "A"),
        )

    def test_degree_labels_are_one_based(self, data):
        assert [d.label for d in data.degrees] == ["1", "2", "3", "4", "5", "6", "7"]

    def test_roman_numerals(self, data):
        assert tuple(d.roman for d in data.degrees) == ROMAN_NUMERALS["ionian (major)"]

    def test_dominant_degree(self, data):
        fifth = data.degrees[4]
        assert fifth.chord == "G7"
        assert fifth.notes == ("G", "B", "D", "F")
        assert fifth.interval == "Perfect 5th"

    def test_leading_tone_extensions(self, data):
        # 11 and b13 above B
        assert data.degrees[6].extensions == ("E", "G")

    def test_extensions_kept_out_of_chord_tones(self, data):
        for degree in data.degrees:
            assert len(degree.notes) == 4

    def test_intervals_run_to_octave(self, data):
        assert len(data.intervals) == 8
        assert data.intervals[-1] == "Octave"

    def test_descriptive_tables(self, data):
        assert "Bright" in data.characteristics
        assert ("ii", "V", "I") in data.chord_progressions
        assert "dorian" in data.related_scales
        assert data.blue_notes == ()

    def test_qualities_table(self, data):
        assert data.qualities == CHORD_QUALITIES["ionian (major)"]
        assert data.qualities.augmented[0] == "maj9"


# ---------------------------------------------------------------------------
# get_scale_data — other scales
# ---------------------------------------------------------------------------


class TestOtherScales:
    def test_c_aeolian(self):
        data = get_scale_data("C", "aeolian (natural minor)")
        assert data.key_signature == "Am"
        assert data.degrees[0].quality == "m7"
        assert data.notes == ("C", "D", "D#", "F", "G", "G#", "A#")

    def test_a_aeolian(self):
        data = get_scale_data("A", "aeolian (natural minor)")
        assert data.key_signature == "Am"
        assert data.degrees[6].chord == "G7"

    def test_flat_side_minor_key_signatures(self):
        assert get_scale_data("D", "aeolian (natural minor)").key_signature == "Dm"
        assert get_scale_data("G", "harmonic minor").key_signature == "Gm"
        assert get_scale_data("F", "melodic minor").key_signature == "Fm"

    def test_c_blues(self):
        data = get_scale_data("C", "blues")
        assert len(data.notes) == 6
        assert data.blue_notes == ("D#", "F#", "A#")
        assert all(d.roman == "I7" for d in data.degrees)
        assert data.key_signature == "C"

    def test_dorian_has_blue_notes(self):
        assert get_scale_data("D", "dorian").blue_notes == ("F", "G#", "C")

    def test_pentatonic_minor(self):
        data = get_scale_data("A", "pentatonic minor")
        assert data.notes == ("A", "C", "D", "E", "G")
        assert data.key_signature == "Am"
        assert len(data.degrees) == 5
        assert data.degrees[4].interval == "Minor 7th"

    def test_chromatic(self):
        data = get_scale_data("C", "chromatic")
        assert len(data.notes) == 12
        assert all(d.quality == "dim7" for d in data.degrees)
        assert data.degrees[0].extensions == ("C#", "F", "G#")
        assert data.chord_progressions == ()

    def test_whole_tone_has_no_progressions_or_related(self):
        data = get_scale_data("C", "whole tone")
        assert data.chord_progressions == ()
        assert data.related_scales == ()
        assert "Debussy" in data.characteristics

    def test_harmonic_minor_augmented_third(self):
        data = get_scale_data("A", "harmonic minor")
        third = data.degrees[2]
        assert third.roman == "III+"
        assert third.chord == "Cmaj7#5"
        assert third.notes == ("C", "E", "G#", "B")

    @pytest.mark.parametrize("scale_name", list(SCALE_PATTERNS))
    def test_every_scale_every_root(self, scale_name):
        for root in get_available_notes():
            data = get_scale_data(root, scale_name)
            assert len(data.degrees) == len(SCALE_PATTERNS[scale_name])
            assert data.notes[0] == root
            assert all(d.notes for d in data.degrees)


# ---------------------------------------------------------------------------
# Fallbacks
# ---------------------------------------------------------------------------


class TestFallbacks:
    def test_unknown_scale_and_root(self):
        data = get_scale_data("X", "totally-unknown-scale")
        assert data.name == "X totally-unknown-scale"
        assert data.notes == ("X",) * 7
        assert data.key_signature == "C"
        assert data.degrees[0].roman == "I"
        assert data.degrees[0].quality == "maj7"
        assert data.qualities == CHORD_QUALITIES["ionian (major)"]

    def test_unknown_scale_uses_ionian_tables_with_real_root(self):
        data = get_scale_data("D", "bebop")
        assert data.notes == get_scale_data("D", "ionian (major)").notes
        assert [d.chord for d in data.degrees][:2] == ["Dmaj7", "Em7"]

    def test_unknown_scale_has_no_descriptive_data(self):
        data = get_scale_data("C", "bebop")
        assert data.characteristics == ()
        assert data.chord_progressions == ()
        assert data.related_scales == ()
        assert data.blue_notes == ()

    def test_unknown_minor_name_still_gets_minor_key(self):
        assert get_scale_data("E", "hungarian minor").key_signature == "Em"

    def test_unknown_root_with_known_scale(self):
        data = get_scale_data("Bb", "blues")
        assert data.notes == ("Bb",) * 6
        assert data.blue_notes == ("Bb", "Bb", "Bb")
        # the raw string is still a valid flat-side major signature
        assert data.key_signature == "Bb"


# ---------------------------------------------------------------------------
# transpose_scale
# ---------------------------------------------------------------------------


class TestTransposeScale:
    def test_c_dorian_up_two_is_d_dorian(self):
        assert transpose_scale(get_scale_data("C", "dorian"), 2) == get_scale_data("D", "dorian")

    def test_down_one(self):
        result = transpose_scale(get_scale_data("C", "aeolian (natural minor)"), -1)
        assert result == get_scale_data("B", "aeolian (natural minor)")
        assert result.key_signature == "Bm"

    def test_octave_is_identity(self):
        data = get_scale_data("F#", "lydian")
        assert transpose_scale(data, 12) == data

    def test_keeps_multi_word_scale_name(self):
        result = transpose_scale(get_scale_data("A", "melodic minor"), 3)
        assert result.name == "C melodic minor"

    def test_unknown_root_stays_put(self):
        result = transpose_scale(get_scale_data("X", "dorian"), 5)
        assert result.name == "X dorian"


# ---------------------------------------------------------------------------
# degree_chords
# ---------------------------------------------------------------------------


class TestDegreeChords:
    def test_seventh_level_matches_degrees(self):
        data = get_scale_data("C", "ionian (major)")
        chords = degree_chords(data)
        assert [label for label, _ in chords] == [d.chord for d in data.degrees]
        assert [tones for _, tones in chords] == [d.notes for d in data.degrees]

    def test_augmented_level(self):
        chords = degree_chords(get_scale_data("C", "ionian (major)"), "augmented")
        assert chords[0] == ("Cmaj9", ("C", "E", "G", "B", "D"))
        assert chords[4] == ("G9", ("G", "B", "D", "F", "A"))

    def test_augmented_quality_without_template_is_dominant(self):
        chords = degree_chords(get_scale_data("C", "ionian (major)"), "augmented")
        assert chords[3] == ("Fmaj11", ("F", "A", "C", "D#"))

    def test_unknown_level_raises(self):
        with pytest.raises(ValueError, match="Unknown quality level"):
            degree_chords(get_scale_data("C", "dorian"), "ninth")


# ---------------------------------------------------------------------------
# ScaleData value semantics
# ---------------------------------------------------------------------------


class TestScaleDataValue:
    def test_frozen(self):
        data = get_scale_data("C", "dorian")
        with pytest.raises(dataclasses.FrozenInstanceError):
            data.name = "D dorian"  # type: ignore[misc]

    def test_hashable_and_equal(self):
        a = get_scale_data("G", "mixolydian")
        b = get_scale_data("G", "mixolydian")
        assert a == b
        assert hash(a) == hash(b)

    def test_root_and_scale_name(self):
        data = get_scale_data("C#", "aeolian (natural minor)")
        assert data.root == "C#"
        assert data.scale_name == "aeolian (natural minor)"

    def test_to_dict_is_json_serializable(self):
        payload = get_scale_data("C", "blues").to_dict()
        text = json.dumps(payload)
        assert json.loads(text)["notes"] == ["C", "D#", "F", "F#", "G", "A#"]
        assert isinstance(payload["degrees"][0]["notes"], list)
        assert isinstance(payload["qualities"]["extensions"][0], list)
        assert payload["chord_progressions"][2] == ["I7", "IV7", "V7", "I7"]

    def test_available_scales_all_resolve_descriptions(self):
        for scale in get_available_scales():
            assert get_scale_data("C", scale).characteristics
