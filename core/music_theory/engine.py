"""
core/music_theory/engine.py — Scale analysis entry points.

get_scale_data() is the main algorithm:
    1. Resolve the step pattern and harmonic tables (Ionian if unknown)
    2. Build the scale notes from the root
    3. For each degree: seventh chord, extension tones, interval name,
       roman numeral and 1-based label
    4. Attach blue notes, progressions, characteristics, related scales
    5. Derive the notation key signature

Design decisions:
    - Total over its input: unknown roots pass through as-is and unknown
      scale names use the Ionian tables, so a UI can never crash on a
      stale selector value.
    - Pure: every call builds a fresh ScaleData from read-only tables.
"""

from __future__ import annotations

from core.music_theory.chords import (
    extension_notes,
    get_chord,
    get_chord_qualities,
)
from core.music_theory.keys import get_key_signature
from core.music_theory.modes import get_mode_profile
from core.music_theory.pitch import note_at_interval
from core.music_theory.scales import (
    build_scale,
    get_roman_numerals,
    get_scale_pattern,
    interval_names,
)
from core.music_theory.types import ScaleData, ScaleDegree

QUALITY_LEVELS: tuple[str, ...] = ("seventh", "augmented")


def get_scale_data(root: str, scale_name: str) -> ScaleData:
    """Return the full analysis of ``scale_name`` built on ``root``.

    Args:
        root:       Sharp-spelled root note, e.g. "C", "F#"
        scale_name: Scale name from get_available_scales(), e.g. "dorian"

    Returns:
        ScaleData. ``name`` echoes the caller's strings even when a fallback
        was used.

    Examples:
        >>> data = get_scale_data("C", "ionian (major)")
        >>> data.notes
        ('C', 'D', 'E', 'F', 'G', 'A', 'B')
        >>> data.degrees[1].chord
        'Dm7'
    """
    pattern = get_scale_pattern(scale_name)
    notes = build_scale(root, pattern)

    qualities = get_chord_qualities(scale_name)
    romans = get_roman_numerals(scale_name)
    intervals = interval_names(pattern)

    degrees: list[ScaleDegree] = []
    for index, note in enumerate(notes):
        quality = qualities.seventh[index] if index < len(qualities.seventh) else "maj7"
        ext_names = qualities.extensions[index] if index < len(qualities.extensions) else ()
        degrees.append(
            ScaleDegree(
                label=str(index + 1),
                chord=f"{note}{quality}",
                notes=get_chord(root, notes, index, quality),
                interval=intervals[index] if index < len(intervals) else "Unknown",
                quality=quality,
                roman=romans[index] if index < len(romans) else "I",
                note=note,
                extensions=extension_notes(note, ext_names),
            )
        )

    profile = get_mode_profile(scale_name)

    return ScaleData(
        name=f"{root} {scale_name}",
        notes=notes,
        key_signature=get_key_signature(root, scale_name),
        degrees=tuple(degrees),
        intervals=intervals,
        blue_notes=tuple(note_at_interval(root, i) for i in profile.blue_note_intervals),
        chord_progressions=profile.progressions,
        characteristics=profile.characteristics,
        related_scales=profile.related_scales,
        qualities=qualities,
    )


def transpose_scale(scale_data: ScaleData, semitones: int) -> ScaleData:
    """Recompute ``scale_data`` on a root ``semitones`` away from its first note.

    This re-derives the analysis rather than shifting the existing data, so
    it follows the same fallbacks as get_scale_data().

    Examples:
        >>> transpose_scale(get_scale_data("C", "dorian"), 2).name
        'D dorian'
    """
    new_root = note_at_interval(scale_data.notes[0], semitones)
    return get_scale_data(new_root, scale_data.scale_name)


def degree_chords(
    scale_data: ScaleData,
    level: str = "seventh",
) -> tuple[tuple[str, tuple[str, ...]], ...]:
    """Spell every degree's chord at a given level of detail.

    Args:
        scale_data: Result of get_scale_data()
        level:      "seventh" for basic seventh chords, "augmented" for the
                    extended (9th/11th/13th) qualities

    Returns:
        One (chord label, chord tones) pair per degree, e.g. ("Dm9", (...))

    Raises:
        ValueError: If level is not one of QUALITY_LEVELS
    """
    qualities = scale_data.qualities.level(level)
    chords: list[tuple[str, tuple[str, ...]]] = []
    for index, note in enumerate(scale_data.notes):
        quality = qualities[index] if index < len(qualities) else "maj7"
        tones = get_chord(scale_data.root, scale_data.notes, index, quality)
        chords.append((f"{note}{quality}", tones))
    return tuple(chords)
