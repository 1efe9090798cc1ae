"""
core/music_theory/scales.py — Scale patterns and the scale builder.

Patterns are expressed as successive semitone steps (not offsets from the
root), so symmetric scales such as whole tone or chromatic are simply a
repeated step.

Exports:
    DEFAULT_SCALE       "ionian (major)" — fallback for unknown scale names
    SCALE_PATTERNS      semitone steps for each supported scale
    ROMAN_NUMERALS      roman numeral labels per degree, per scale
    INTERVAL_NAMES      interval name by semitone distance (0–12)

    build_scale(root, pattern) → tuple[str, ...]
    interval_names(pattern) → tuple[str, ...]
    get_scale_pattern(scale_name) → tuple[int, ...]
    get_roman_numerals(scale_name) → tuple[str, ...]
    get_available_scales() → list[str]
    get_available_notes() → list[str]
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from core.music_theory.pitch import NOTE_NAMES, note_at_interval

logger = logging.getLogger(__name__)

DEFAULT_SCALE: str = "ionian (major)"

# ---------------------------------------------------------------------------
# Scale patterns (semitone steps)
# ---------------------------------------------------------------------------

SCALE_PATTERNS: dict[str, tuple[int, ...]] = {
    "ionian (major)": (2, 2, 1, 2, 2, 2, 1),
    "dorian": (2, 1, 2, 2, 2, 1, 2),
    "phrygian": (1, 2, 2, 2, 1, 2, 2),
    "lydian": (2, 2, 2, 1, 2, 2, 1),
    "mixolydian": (2, 2, 1, 2, 2, 1, 2),
    "aeolian (natural minor)": (2, 1, 2, 2, 1, 2, 2),
    "locrian": (1, 2, 2, 1, 2, 2, 2),
    "harmonic minor": (2, 1, 2, 2, 1, 3, 1),
    "melodic minor": (2, 1, 2, 2, 2, 2, 1),
    "pentatonic major": (2, 2, 3, 2, 3),
    "pentatonic minor": (3, 2, 2, 3, 2),
    "blues": (3, 2, 1, 1, 3, 2),
    "whole tone": (2, 2, 2, 2, 2, 2),
    "chromatic": (1,) * 12,
}

# ---------------------------------------------------------------------------
# Roman numeral analysis per degree
# ---------------------------------------------------------------------------

ROMAN_NUMERALS: dict[str, tuple[str, ...]] = {
    "ionian (major)": ("I", "ii", "iii", "IV", "V", "vi", "vii°"),
    "dorian": ("i", "ii", "III", "IV", "v", "vi°", "VII"),
    "phrygian": ("i", "II", "III", "iv", "v°", "VI", "vii"),
    "lydian": ("I", "II", "iii", "iv°", "V", "vi", "vii"),
    "mixolydian": ("I", "ii", "iii°", "IV", "v", "vi", "VII"),
    "aeolian (natural minor)": ("i", "ii°", "III", "iv", "v", "VI", "VII"),
    "locrian": ("i°", "II", "iii", "iv", "V", "VI", "vii"),
    "harmonic minor": ("i", "ii°", "III+", "iv", "V", "VI", "vii°"),
    "melodic minor": ("i", "ii", "III+", "IV", "V", "vi°", "vii°"),
    "pentatonic major": ("I", "ii", "iii", "IV", "V"),
    "pentatonic minor": ("i", "iii", "IV", "v", "vii"),
    "blues": ("I7",) * 6,
    "whole tone": ("I7",) * 6,
    "chromatic": ("i°",) * 12,
}

# ---------------------------------------------------------------------------
# Interval names by semitone distance from the root
# ---------------------------------------------------------------------------

INTERVAL_NAMES: tuple[str, ...] = (
    "Root",
    "Minor 2nd",
    "Major 2nd",
    "Minor 3rd",
    "Major 3rd",
    "Perfect 4th",
    "Tritone",
    "Perfect 5th",
    "Minor 6th",
    "Major 6th",
    "Minor 7th",
    "Major 7th",
    "Octave",
)


# ---------------------------------------------------------------------------
# Table lookups with Ionian fallback
# ---------------------------------------------------------------------------


def get_scale_pattern(scale_name: str) -> tuple[int, ...]:
    """Return the step pattern for a scale, or the Ionian pattern if unknown."""
    pattern = SCALE_PATTERNS.get(scale_name)
    if pattern is None:
        logger.debug("Unknown scale %r, using %r pattern", scale_name, DEFAULT_SCALE)
        return SCALE_PATTERNS[DEFAULT_SCALE]
    return pattern


def get_roman_numerals(scale_name: str) -> tuple[str, ...]:
    """Return roman numerals for a scale, or the Ionian numerals if unknown."""
    return ROMAN_NUMERALS.get(scale_name, ROMAN_NUMERALS[DEFAULT_SCALE])


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------


def build_scale(root: str, pattern: Sequence[int]) -> tuple[str, ...]:
    """Build the notes of a scale by walking its step pattern from ``root``.

    The walk closes the octave for every supported pattern; the trailing
    copy of the root is dropped so the tonic appears once.

    Args:
        root:    Sharp-spelled root note, e.g. "C", "F#"
        pattern: Semitone steps, e.g. (2, 2, 1, 2, 2, 2, 1)

    Returns:
        Tuple of note names starting at ``root``. An unrecognized root is
        repeated unchanged (every step is a no-op).

    Examples:
        >>> build_scale("C", (2, 2, 1, 2, 2, 2, 1))
        ('C', 'D', 'E', 'F', 'G', 'A', 'B')
        >>> build_scale("A", (3, 2, 2, 3, 2))
        ('A', 'C', 'D', 'E', 'G')
    """
    notes = [root]
    current = root
    for step in pattern:
        current = note_at_interval(current, step)
        notes.append(current)

    if notes[-1] == root:
        notes.pop()

    return tuple(notes)


def interval_names(pattern: Sequence[int]) -> tuple[str, ...]:
    """Name the cumulative interval reached after each step of a pattern.

    The result starts with "Root" and has ``len(pattern) + 1`` entries.
    Distances past the octave are labelled "<n> semitones".

    Examples:
        >>> interval_names((3, 2, 2, 3, 2))
        ('Root', 'Minor 3rd', 'Perfect 4th', 'Perfect 5th', 'Minor 7th', 'Octave')
    """
    names = ["Root"]
    distance = 0
    for step in pattern:
        distance += step
        if 0 <= distance < len(INTERVAL_NAMES):
            names.append(INTERVAL_NAMES[distance])
        else:
            names.append(f"{distance} semitones")
    return tuple(names)


def get_available_scales() -> list[str]:
    """Return every supported scale name in table order."""
    return list(SCALE_PATTERNS)


def get_available_notes() -> list[str]:
    """Return the 12 sharp-spelled root notes."""
    return list(NOTE_NAMES)
