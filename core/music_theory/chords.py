"""
core/music_theory/chords.py — Chord templates and per-scale chord qualities.

Exports:
    CHORD_INTERVALS         semitone template for each chord quality
    DOMINANT_SEVENTH        fallback template for unknown qualities
    EXTENSION_INTERVALS     extension name → semitones above the chord root
    CHORD_QUALITIES         ChordQualities table per scale name

    get_chord_intervals(quality) → tuple[int, ...]
    get_chord_qualities(scale_name) → ChordQualities
    get_chord(root, scale, degree_index, quality) → tuple[str, ...]
    extension_notes(note, names) → tuple[str, ...]
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from core.music_theory.pitch import note_at_interval
from core.music_theory.scales import DEFAULT_SCALE
from core.music_theory.types import ChordQualities

# ---------------------------------------------------------------------------
# Chord interval templates (semitones from the chord root)
# ---------------------------------------------------------------------------

DOMINANT_SEVENTH: tuple[int, ...] = (0, 4, 7, 10)

CHORD_INTERVALS: dict[str, tuple[int, ...]] = {
    # Sevenths
    "maj7": (0, 4, 7, 11),
    "m7": (0, 3, 7, 10),
    "7": DOMINANT_SEVENTH,
    "m7b5": (0, 3, 6, 10),
    "m(maj7)": (0, 3, 7, 11),
    "maj7#5": (0, 4, 8, 11),
    "dim7": (0, 3, 6, 9),
    "7#5": (0, 4, 8, 10),
    "m7#5": (0, 3, 8, 10),
    # Extended
    "maj9": (0, 4, 7, 11, 14),
    "m9": (0, 3, 7, 10, 14),
    "9": (0, 4, 7, 10, 14),
    "m11": (0, 3, 7, 10, 14, 17),
    "11": (0, 4, 7, 10, 14, 17),
    "m13": (0, 3, 7, 10, 14, 17, 21),
    "13": (0, 4, 7, 10, 14, 17, 21),
}

EXTENSION_INTERVALS: dict[str, int] = {
    "9": 14,
    "b9": 13,
    "#9": 15,
    "11": 17,
    "#11": 18,
    "b11": 16,
    "13": 21,
    "b13": 20,
    "#13": 22,
}

# ---------------------------------------------------------------------------
# Chord qualities per scale degree
# ---------------------------------------------------------------------------

CHORD_QUALITIES: dict[str, ChordQualities] = {
    "ionian (major)": ChordQualities(
        seventh=("maj7", "m7", "m7", "maj7", "7", "m7", "m7b5"),
        augmented=("maj9", "m9", "m9", "maj11", "9", "m9", "m7b5"),
        extensions=(
            ("9", "13"),
            ("9", "11", "13"),
            ("9", "11"),
            ("9", "13"),
            ("9", "13"),
            ("9", "11"),
            ("11", "b13"),  # the b13 over vii° is very tense
        ),
    ),
    "dorian": ChordQualities(
        seventh=("m7", "m7", "maj7", "7", "m7", "m7b5", "maj7"),
        augmented=("m9", "m9", "maj9", "11", "m9", "m7b5", "maj9"),
        extensions=(
            ("9", "11", "13"),
            ("9", "11", "13"),
            ("9",),
            ("9", "13"),
            ("11",),
            ("11",),
            ("13",),
        ),
    ),
    "phrygian": ChordQualities(
        seventh=("m7", "maj7", "7", "m7", "m7b5", "maj7", "m7"),
        augmented=("m9", "maj9", "9", "11", "m7b5", "maj9", "m9"),
        extensions=(
            ("9", "11"),
            ("9",),
            ("9", "13"),
            ("11",),
            ("11",),
            ("9",),
            ("9", "11"),
        ),
    ),
    "lydian": ChordQualities(
        seventh=("maj7", "7", "m7", "m7b5", "maj7", "m7", "m7"),
        augmented=("maj9", "9", "m9", "m7b5", "maj11", "m9", "m9"),
        extensions=(
            ("9", "#11", "13"),
            ("9", "13"),
            ("9", "11"),
            ("11",),
            ("9", "#11"),
            ("9", "11"),
            ("9", "11"),
        ),
    ),
    "mixolydian": ChordQualities(
        seventh=("7", "m7", "m7b5", "maj7", "m7", "m7", "maj7"),
        augmented=("9", "m9", "m7b5", "maj9", "m9", "m9", "maj11"),
        extensions=(
            ("9", "13"),
            ("9", "11"),
            ("11",),
            ("9", "13"),
            ("11",),
            ("9",),
            ("13",),
        ),
    ),
    "aeolian (natural minor)": ChordQualities(
        seventh=("m7", "m7b5", "maj7", "m7", "m7", "maj7", "7"),
        augmented=("m9", "m7b5", "maj9", "11", "m9", "maj9", "9"),
        extensions=(
            ("9", "11"),
            ("11",),
            ("9",),
            ("9", "11"),
            ("9",),
            ("9", "13"),
            ("9", "13"),
        ),
    ),
    "locrian": ChordQualities(
        seventh=("m7b5", "maj7", "m7", "m7", "maj7", "7", "m7"),
        augmented=("m7b5", "maj9", "m9", "11", "maj9", "9", "m9"),
        extensions=(
            ("11", "b13"),
            ("9",),
            ("9", "11"),
            ("11",),
            ("9", "13"),
            ("9", "13"),
            ("9", "11"),
        ),
    ),
    "harmonic minor": ChordQualities(
        seventh=("m(maj7)", "m7b5", "maj7#5", "m7", "7", "maj7", "dim7"),
        augmented=("m(maj9)", "m7b5", "maj7#5", "m9", "9", "maj11", "dim7"),
        extensions=(
            ("9", "11"),
            ("11",),
            ("9", "#11", "13"),
            ("9", "11"),
            ("9", "13"),
            ("9", "#11"),
            ("13",),
        ),
    ),
    "melodic minor": ChordQualities(
        seventh=("m(maj7)", "m7", "maj7#5", "7", "7", "m7b5", "m7b5"),
        augmented=("m(maj9)", "m9", "maj7#5", "9", "11", "m7b5", "m7b5"),
        extensions=(
            ("9", "11", "13"),
            ("9", "11", "13"),
            ("9", "#11"),
            ("9", "13"),
            ("9", "13"),
            ("11",),
            ("11",),
        ),
    ),
    "pentatonic major": ChordQualities(
        seventh=("maj7", "m7", "m7", "maj7", "7"),
        augmented=("maj9", "m9", "m9", "maj11", "9"),
        extensions=(
            ("9", "13"),
            ("9", "11"),
            ("9", "11"),
            ("9", "13"),
            ("9", "13"),
        ),
    ),
    "pentatonic minor": ChordQualities(
        seventh=("m7", "m7", "maj7", "7", "m7"),
        augmented=("m9", "m9", "maj9", "9", "m9"),
        extensions=(
            ("9", "11"),
            ("9", "11"),
            ("9",),
            ("9", "13"),
            ("9", "11"),
        ),
    ),
    "blues": ChordQualities(
        seventh=("7",) * 6,
        augmented=("13",) * 6,
        extensions=(("9", "13"),) * 6,
    ),
    "whole tone": ChordQualities(
        seventh=("7",) * 6,
        augmented=("13",) * 6,
        extensions=(("9", "#11", "13"),) * 6,
    ),
    "chromatic": ChordQualities(
        seventh=("dim7",) * 12,
        augmented=("dim7",) * 12,
        extensions=(("b9", "11", "b13"),) * 12,
    ),
}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def get_chord_intervals(quality: str) -> tuple[int, ...]:
    """Return the interval template for a quality; unknown → dominant seventh."""
    return CHORD_INTERVALS.get(quality, DOMINANT_SEVENTH)


def get_chord_qualities(scale_name: str) -> ChordQualities:
    """Return the chord-quality table for a scale, or Ionian's if unknown."""
    return CHORD_QUALITIES.get(scale_name, CHORD_QUALITIES[DEFAULT_SCALE])


def get_chord(
    root: str,
    scale: Sequence[str],
    degree_index: int,
    quality: str,
) -> tuple[str, ...]:
    """Spell the chord of a given quality built on a scale degree.

    Args:
        root:         Tonic of the scale. The chord root is read from
                      ``scale[degree_index]``; ``root`` is informational.
        scale:        Ordered scale notes, as returned by build_scale()
        degree_index: 0-based degree in ``scale``
        quality:      Quality key from CHORD_INTERVALS, e.g. "m7", "maj9".
                      Unknown qualities are spelled as a dominant seventh.

    Returns:
        Tuple of chord tones, never empty

    Raises:
        IndexError: If degree_index is outside the scale

    Examples:
        >>> get_chord("C", ("C", "D", "E", "F", "G", "A", "B"), 1, "m7")
        ('D', 'F', 'A', 'C')
    """
    if not (0 <= degree_index < len(scale)):
        raise IndexError(
            f"degree_index must be in [0, {len(scale) - 1}], got {degree_index}"
        )
    chord_root = scale[degree_index]
    return tuple(note_at_interval(chord_root, i) for i in get_chord_intervals(quality))


def extension_notes(note: str, names: Iterable[str]) -> tuple[str, ...]:
    """Resolve extension names ("9", "#11", "b13", ...) to notes above ``note``.

    Unknown extension names are skipped.

    Examples:
        >>> extension_notes("C", ("9", "#11", "13"))
        ('D', 'F#', 'A')
    """
    return tuple(
        note_at_interval(note, EXTENSION_INTERVALS[name])
        for name in names
        if name in EXTENSION_INTERVALS
    )
